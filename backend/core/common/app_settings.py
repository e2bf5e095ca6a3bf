from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except Exception:
        return default


@dataclass(frozen=True)
class AppSettings:
    app_name: str
    auto_reload: bool
    threads: int
    port: int
    debug: bool
    log_level: str
    log_file: str
    cache_dir: str
    events_use_supabase: bool
    events_table: str
    events_storage_key: str
    local_storage_path: str


def load_app_settings() -> AppSettings:
    cache_dir = os.getenv("CACHE_DIR", "data/cache")
    return AppSettings(
        app_name=os.getenv("APP_NAME", "smart-event-planner"),
        auto_reload=_as_bool(os.getenv("AUTO_RELOAD"), False),
        threads=max(1, _as_int(os.getenv("THREADS"), 1)),
        port=_as_int(os.getenv("PORT"), 38001),
        debug=_as_bool(os.getenv("DEBUG"), False),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE", "./data/logs/smart-event-planner.log"),
        cache_dir=cache_dir,
        # 默认优先走 Supabase，失败时回退本地存储
        events_use_supabase=_as_bool(os.getenv("EVENTS_USE_SUPABASE"), True),
        events_table=os.getenv("EVENTS_TABLE", "events"),
        events_storage_key=os.getenv(
            "EVENTS_STORAGE_KEY", "smart_event_planner_events"
        ),
        local_storage_path=os.getenv(
            "LOCAL_STORAGE_PATH", os.path.join(cache_dir, "local_storage.json")
        ),
    )


settings = load_app_settings()
