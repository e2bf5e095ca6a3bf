from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from core.common.log import logger
from core.events.store import EventStore, utc_now_iso

T = TypeVar("T")

# 调用方不允许写入的字段
IMMUTABLE_FIELDS = ("id", "created_at")


class EventService:
    """活动服务：优先访问远端存储，失败时回退本地存储

    - 远端异常一律降级为本地调用，只记录 warning
    - 读操作本地也失败时返回空结果；写操作本地失败时向上抛出
    - 每个存储只尝试一次，不做重试
    """

    def __init__(self, remote: EventStore, local: EventStore, use_remote: bool = True):
        self.remote = remote
        self.local = local
        self.use_remote = use_remote

    async def _run(
        self,
        operation: str,
        remote_call: Callable[[], Awaitable[T]],
        local_call: Callable[[], Awaitable[T]],
        on_failure: Optional[Callable[[], T]] = None,
    ) -> T:
        if self.use_remote:
            try:
                return await remote_call()
            except Exception as e:
                logger.warning(f"[events.{operation}] {self.remote.name} 调用失败，回退{self.local.name}存储: {e}")

        try:
            return await local_call()
        except Exception as e:
            logger.error(f"[events.{operation}] {self.local.name}存储调用失败: {e}")
            if on_failure is None:
                raise
            return on_failure()

    async def get_all_events(self) -> List[Dict[str, Any]]:
        """获取全部活动（远端按 created_at 倒序）"""
        return await self._run(
            "list",
            self.remote.list_events,
            self.local.list_events,
            on_failure=list,
        )

    async def get_event_by_id(self, event_id: str) -> Optional[Dict[str, Any]]:
        """根据 ID 获取活动，不存在或全部失败时返回 None"""
        return await self._run(
            "get",
            lambda: self.remote.get_event(event_id),
            lambda: self.local.get_event(event_id),
            on_failure=lambda: None,
        )

    async def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        """创建活动，ID 由存储生成"""
        event_data = {k: v for k, v in event_data.items() if k not in IMMUTABLE_FIELDS}
        now = utc_now_iso()
        new_event = {**event_data, "created_at": now, "updated_at": now}
        return await self._run(
            "create",
            lambda: self.remote.create_event(new_event),
            lambda: self.local.create_event(event_data),
        )

    async def update_event(self, event_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """合并更新活动字段，并刷新 updated_at"""
        updates = {k: v for k, v in updates.items() if k not in IMMUTABLE_FIELDS}
        # 远端有触发器覆盖 updated_at，这里写入是为了与本地存储行为一致
        update_data = {**updates, "updated_at": utc_now_iso()}
        return await self._run(
            "update",
            lambda: self.remote.update_event(event_id, update_data),
            lambda: self.local.update_event(event_id, updates),
        )

    async def delete_event(self, event_id: str) -> bool:
        """删除活动（硬删除）"""
        return await self._run(
            "delete",
            lambda: self.remote.delete_event(event_id),
            lambda: self.local.delete_event(event_id),
        )
