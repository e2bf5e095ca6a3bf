from schemas.base import success_response, error_response
from schemas.events import EventCreate, EventUpdate


__all__ = [
    "success_response",
    "error_response",
    "EventCreate",
    "EventUpdate",
]
