"""Shared fixtures for event store tests."""
import uuid
from datetime import datetime, timezone

import pytest
from loguru import logger

from core.events import (
    EventService,
    LocalEventStore,
    LocalStorage,
    SupabaseEventStore,
)


class FakeSupabaseClient:
    """内存版 SupabaseClient，行为近似 events 表（默认值 + updated_at 触发器）"""

    def __init__(self):
        self.rows = []
        self.calls = []
        self.fail = False

    def _check(self, op):
        self.calls.append(op)
        if self.fail:
            raise ConnectionError(f"supabase unreachable during {op}")

    @staticmethod
    def _match(row, filters):
        return all(row.get(k) == v for k, v in (filters or {}).items())

    async def select(self, table, filters=None, order=None, desc=False, limit=None):
        self._check("select")
        rows = [dict(r) for r in self.rows if self._match(r, filters)]
        if order:
            rows.sort(key=lambda r: r[order], reverse=desc)
        if limit:
            rows = rows[:limit]
        return rows

    async def insert(self, table, data):
        self._check("insert")
        now = datetime.now(timezone.utc).isoformat()
        row = {
            "id": str(uuid.uuid4()),
            "audience_size": 0,
            "duration": 4,
            "created_at": now,
            "updated_at": now,
            **data,
        }
        self.rows.append(row)
        return dict(row)

    async def update(self, table, data, filters):
        self._check("update")
        updated = []
        for row in self.rows:
            if self._match(row, filters):
                row.update(data)
                row["updated_at"] = datetime.now(timezone.utc).isoformat()
                updated.append(dict(row))
        return updated

    async def delete(self, table, filters):
        self._check("delete")
        removed = [r for r in self.rows if self._match(r, filters)]
        self.rows = [r for r in self.rows if not self._match(r, filters)]
        return removed


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()


@pytest.fixture
def local_storage(tmp_path):
    return LocalStorage(str(tmp_path / "cache" / "local_storage.json"))


@pytest.fixture
def local_store(local_storage):
    return LocalEventStore(local_storage)


@pytest.fixture
def remote_store(fake_client):
    return SupabaseEventStore(fake_client)


@pytest.fixture
def service(remote_store, local_store):
    return EventService(remote_store, local_store)


@pytest.fixture
def offline_service(fake_client, service):
    """远端始终失败的服务"""
    fake_client.fail = True
    return service


@pytest.fixture
def log_records():
    """收集 loguru 日志记录"""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
