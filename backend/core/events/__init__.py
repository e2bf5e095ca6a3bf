"""活动领域模块。"""

from typing import Optional

from core.common.app_settings import AppSettings, settings as app_settings
from core.integrations.supabase.client import SupabaseClient
from core.integrations.supabase.settings import SupabaseSettings
from core.events.errors import (
    EventStoreError,
    RemoteBackendError,
    LocalStorageError,
    EventNotFoundError,
)
from core.events.model import Event
from core.events.store import EventStore
from core.events.local import LocalStorage, LocalEventStore
from core.events.remote import SupabaseEventStore
from core.events.service import EventService


def build_event_service(
    settings: Optional[AppSettings] = None,
    supabase_settings: Optional[SupabaseSettings] = None,
) -> EventService:
    """按配置组装活动服务（Supabase 优先，本地存储兜底）"""
    settings = settings or app_settings
    remote = SupabaseEventStore(
        SupabaseClient(supabase_settings), table=settings.events_table
    )
    local = LocalEventStore(
        LocalStorage(settings.local_storage_path),
        storage_key=settings.events_storage_key,
    )
    return EventService(remote, local, use_remote=settings.events_use_supabase)


__all__ = [
    "build_event_service",
    "Event",
    "EventService",
    "EventStore",
    "LocalStorage",
    "LocalEventStore",
    "SupabaseEventStore",
    "EventStoreError",
    "RemoteBackendError",
    "LocalStorageError",
    "EventNotFoundError",
]
