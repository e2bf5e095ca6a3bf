from typing import Any, Dict, List, Optional

from core.events.errors import RemoteBackendError
from core.events.store import EventStore


class SupabaseEventStore(EventStore):
    """基于 Supabase events 表的活动存储"""

    name = "supabase"
    EVENT_TABLE = "events"

    def __init__(self, client: Any, table: Optional[str] = None):
        self.client = client
        self.table = table or self.EVENT_TABLE

    async def list_events(self) -> List[Dict[str, Any]]:
        try:
            rows = await self.client.select(self.table, order="created_at", desc=True)
        except Exception as e:
            raise RemoteBackendError("list", e) from e
        return rows or []

    async def get_event(self, event_id: str) -> Optional[Dict[str, Any]]:
        try:
            rows = await self.client.select(
                self.table,
                filters={"id": event_id},
                limit=1,
            )
        except Exception as e:
            raise RemoteBackendError("get", e) from e
        return rows[0] if rows else None

    async def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            row = await self.client.insert(self.table, event_data)
        except Exception as e:
            raise RemoteBackendError("create", e) from e
        if not row:
            raise RemoteBackendError("create", "未返回插入的记录")
        return row

    async def update_event(self, event_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        try:
            rows = await self.client.update(
                self.table, updates, filters={"id": event_id}
            )
        except Exception as e:
            raise RemoteBackendError("update", e) from e
        # 期望恰好更新一行
        if len(rows) != 1:
            raise RemoteBackendError("update", f"期望更新 1 行, 实际 {len(rows)} 行 id={event_id}")
        return rows[0]

    async def delete_event(self, event_id: str) -> bool:
        try:
            await self.client.delete(self.table, filters={"id": event_id})
        except Exception as e:
            raise RemoteBackendError("delete", e) from e
        return True
