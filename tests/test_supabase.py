"""Tests for the Supabase client wrapper and the remote event store."""
import asyncio
from unittest.mock import MagicMock

import pytest

from core.events import RemoteBackendError, SupabaseEventStore
from core.integrations.supabase import SupabaseClient, SupabaseSettings


CHAIN_METHODS = ("select", "insert", "update", "delete", "eq", "order", "limit")


@pytest.fixture
def query():
    """所有链式方法都返回自身的 query mock"""
    q = MagicMock()
    for name in CHAIN_METHODS:
        getattr(q, name).return_value = q
    q.execute.return_value = MagicMock(data=[{"id": "1", "event_name": "Gala"}])
    return q


@pytest.fixture
def client(query):
    c = SupabaseClient(SupabaseSettings(url="https://example.supabase.co", anon_key="anon", service_key=""))
    c.client = MagicMock()
    c.client.table.return_value = query
    c._initialized = True
    return c


def test_settings_prefer_anon_key():
    s = SupabaseSettings(url="https://x.supabase.co", anon_key="anon", service_key="service")
    assert s.api_key == "anon"
    assert SupabaseSettings(url="https://x.supabase.co", anon_key="", service_key="service").api_key == "service"
    assert not SupabaseSettings(url="", anon_key="anon", service_key="").available()


def test_init_without_credentials_raises():
    c = SupabaseClient(SupabaseSettings(url="", anon_key="", service_key=""))
    with pytest.raises(ValueError):
        c.get_client()


def test_select_applies_filters_order_and_limit(client, query):
    rows = asyncio.run(
        client.select(
            "events",
            filters={"city": "Oslo"},
            order="created_at",
            desc=True,
            limit=5,
        )
    )

    assert rows == [{"id": "1", "event_name": "Gala"}]
    client.client.table.assert_called_with("events")
    query.select.assert_called_with("*")
    query.eq.assert_called_with("city", "Oslo")
    query.order.assert_called_with("created_at", desc=True)
    query.limit.assert_called_with(5)


def test_insert_returns_first_row(client, query):
    row = asyncio.run(client.insert("events", {"event_name": "Gala"}))
    assert row == {"id": "1", "event_name": "Gala"}
    query.insert.assert_called_with({"event_name": "Gala"})


def test_insert_without_data_returns_empty(client, query):
    query.execute.return_value = MagicMock(data=[])
    assert asyncio.run(client.insert("events", {"event_name": "Gala"})) == {}


def test_execute_error_propagates(client, query):
    query.execute.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        asyncio.run(client.delete("events", filters={"id": "1"}))


# SupabaseEventStore

def test_store_wraps_client_errors(query, client):
    query.execute.side_effect = RuntimeError("network down")
    store = SupabaseEventStore(client)

    with pytest.raises(RemoteBackendError) as exc_info:
        asyncio.run(store.list_events())
    assert exc_info.value.operation == "list"


def test_store_list_requests_newest_first(query, client):
    store = SupabaseEventStore(client, table="events")
    asyncio.run(store.list_events())
    query.order.assert_called_with("created_at", desc=True)


def test_store_create_without_returned_row_is_error(query, client):
    query.execute.return_value = MagicMock(data=None)
    store = SupabaseEventStore(client)

    with pytest.raises(RemoteBackendError):
        asyncio.run(store.create_event({"event_name": "Gala"}))


def test_store_update_requires_single_row(query, client):
    query.execute.return_value = MagicMock(data=[])
    store = SupabaseEventStore(client)

    with pytest.raises(RemoteBackendError) as exc_info:
        asyncio.run(store.update_event("1", {"city": "Oslo"}))
    assert exc_info.value.operation == "update"


def test_store_delete_filters_by_id(query, client):
    store = SupabaseEventStore(client)
    assert asyncio.run(store.delete_event("1")) is True
    query.eq.assert_called_with("id", "1")
