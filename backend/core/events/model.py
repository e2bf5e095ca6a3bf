import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict


class Event(BaseModel):
    """活动记录（与 events 表结构一致）"""

    model_config = ConfigDict(extra="allow")

    id: str
    event_name: str
    event_type: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    venue_type: Optional[str] = None

    # 默认值由数据库填充（0 / 4），本地存储不做补全
    audience_size: Optional[int] = None
    duration: Optional[int] = None

    # ISO 8601 时间字符串
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
