import datetime as dt
from typing import Optional
from pydantic import BaseModel, field_validator


class EventCreate(BaseModel):
    event_name: str
    event_type: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    venue_type: Optional[str] = None
    audience_size: Optional[int] = None
    duration: Optional[int] = None


class EventUpdate(BaseModel):
    event_name: Optional[str] = None
    event_type: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    venue_type: Optional[str] = None
    audience_size: Optional[int] = None
    duration: Optional[int] = None

    @field_validator("event_name")
    @classmethod
    def event_name_not_null(cls, value: Optional[str]) -> str:
        # 可以不传，但不能显式置空（表字段 NOT NULL）
        if value is None:
            raise ValueError("event_name 不能为 null")
        return value
