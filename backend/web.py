from typing import Optional

from fastapi import FastAPI

from apis.events import router as events_router
from core.common.app_settings import settings
from core.common.base import VERSION, API_BASE
from core.events import EventService, build_event_service


def create_app(service: Optional[EventService] = None) -> FastAPI:
    """创建 FastAPI 应用，活动服务通过 app.state 注入"""
    app = FastAPI(title=settings.app_name, version=VERSION, debug=settings.debug)
    app.state.event_service = service or build_event_service()
    app.include_router(events_router, prefix=API_BASE)
    return app


app = create_app()
