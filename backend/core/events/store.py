from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class EventStore(ABC):
    """活动存储统一接口，远端与本地实现可互换"""

    name: str = "store"

    @abstractmethod
    async def list_events(self) -> List[Dict[str, Any]]:
        """获取全部活动"""

    @abstractmethod
    async def get_event(self, event_id: str) -> Optional[Dict[str, Any]]:
        """根据 ID 获取活动，不存在时返回 None"""

    @abstractmethod
    async def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        """创建活动，event_data 已由调用方写入 created_at / updated_at"""

    @abstractmethod
    async def update_event(self, event_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """合并更新活动字段，返回更新后的记录"""

    @abstractmethod
    async def delete_event(self, event_id: str) -> bool:
        """删除活动"""
