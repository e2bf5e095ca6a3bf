from __future__ import annotations

import json
import os
import time
from typing import Any, Dict, List, Optional

from core.common.log import logger
from core.events.errors import EventNotFoundError, LocalStorageError
from core.events.store import EventStore, utc_now_iso


class LocalStorage:
    """本地键值存储（字符串键 -> 字符串值），整体以 JSON 对象落盘"""

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise LocalStorageError(f"读取本地存储失败 path={self.path}: {e}") from e
        # 空文件视为无数据
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except ValueError as e:
            raise LocalStorageError(f"本地存储内容损坏 path={self.path}: {e}") from e
        if not isinstance(data, dict):
            raise LocalStorageError(f"本地存储格式错误 path={self.path}")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(self.path)
        # 先写临时文件再替换，避免中途失败留下半截文件
        tmp_path = f"{self.path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise LocalStorageError(f"写入本地存储失败 path={self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def clear(self) -> None:
        self._write_all({})


class LocalEventStore(EventStore):
    """本地活动存储，所有活动序列化为一个 JSON 数组保存在固定键下"""

    name = "local"
    STORAGE_KEY = "smart_event_planner_events"

    def __init__(self, storage: LocalStorage, storage_key: Optional[str] = None):
        self.storage = storage
        self.storage_key = storage_key or self.STORAGE_KEY

    def _load(self) -> List[Dict[str, Any]]:
        raw = self.storage.get_item(self.storage_key)
        if not raw:
            return []
        try:
            events = json.loads(raw)
        except ValueError as e:
            raise LocalStorageError(f"解析本地活动数据失败: {e}") from e
        if not isinstance(events, list):
            raise LocalStorageError("本地活动数据不是数组")
        return events

    def _save(self, events: List[Dict[str, Any]]) -> None:
        try:
            raw = json.dumps(events, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise LocalStorageError(f"序列化本地活动数据失败: {e}") from e
        self.storage.set_item(self.storage_key, raw)

    async def list_events(self) -> List[Dict[str, Any]]:
        # 按存储顺序返回（新建活动插入在最前）
        return self._load()

    async def get_event(self, event_id: str) -> Optional[Dict[str, Any]]:
        for event in self._load():
            if event.get("id") == event_id:
                return event
        return None

    async def create_event(self, event_data: Dict[str, Any]) -> Dict[str, Any]:
        events = self._load()
        now = utc_now_iso()
        # 毫秒时间戳作为 ID，同一毫秒内重复时顺延
        existing_ids = {event.get("id") for event in events}
        stamp = int(time.time() * 1000)
        while str(stamp) in existing_ids:
            stamp += 1
        new_event = {
            **event_data,
            "id": str(stamp),
            "created_at": now,
            "updated_at": now,
        }
        events.insert(0, new_event)
        self._save(events)
        logger.debug(f"[events.local] created id={new_event['id']}")
        return new_event

    async def update_event(self, event_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        events = self._load()
        for index, event in enumerate(events):
            if event.get("id") == event_id:
                events[index] = {**event, **updates, "updated_at": utc_now_iso()}
                self._save(events)
                return events[index]
        raise EventNotFoundError(event_id)

    async def delete_event(self, event_id: str) -> bool:
        events = self._load()
        self._save([event for event in events if event.get("id") != event_id])
        return True
