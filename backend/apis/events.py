from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Request,
    Body,
    status as fast_status,
)
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from core.common.log import logger
from core.events import EventService, EventNotFoundError, Event
from schemas import success_response, error_response
from schemas.events import EventCreate, EventUpdate


router = APIRouter(prefix="/events", tags=["活动"])


def get_event_service(request: Request) -> EventService:
    """从应用状态中取出活动服务（由 create_app 注入）"""
    return request.app.state.event_service


def _serialize(row):
    """按 Event 结构输出；历史脏数据不符合结构时原样返回，不影响整个列表"""
    try:
        return Event.model_validate(row).model_dump(mode="json")
    except ValidationError as e:
        logger.warning(f"[events.api] invalid stored row id={row.get('id')}: {e}")
        return jsonable_encoder(row)


@router.get("", summary="查询活动列表")
async def list_events(service: EventService = Depends(get_event_service)):
    rows = await service.get_all_events()
    return success_response([_serialize(row) for row in rows])


@router.get("/{event_id}", summary="获取活动详情")
async def get_event(event_id: str, service: EventService = Depends(get_event_service)):
    row = await service.get_event_by_id(event_id)
    if not row:
        raise HTTPException(
            status_code=fast_status.HTTP_404_NOT_FOUND,
            detail=error_response(code=40401, message="活动不存在"),
        )
    return success_response(_serialize(row))


@router.post("", summary="创建活动")
async def create_event(
    payload: EventCreate = Body(...),
    service: EventService = Depends(get_event_service),
):
    try:
        row = await service.create_event(
            payload.model_dump(mode="json", exclude_unset=True)
        )
    except Exception as e:
        logger.exception(f"[events.api] create failed: {e}")
        raise HTTPException(
            status_code=fast_status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_response(code=50001, message=f"创建失败: {str(e)}"),
        )
    return success_response(_serialize(row))


@router.put("/{event_id}", summary="更新活动")
async def update_event(
    event_id: str,
    payload: EventUpdate = Body(...),
    service: EventService = Depends(get_event_service),
):
    try:
        row = await service.update_event(
            event_id, payload.model_dump(mode="json", exclude_unset=True)
        )
    except EventNotFoundError:
        raise HTTPException(
            status_code=fast_status.HTTP_404_NOT_FOUND,
            detail=error_response(code=40401, message="活动不存在"),
        )
    except Exception as e:
        logger.exception(f"[events.api] update failed id={event_id}: {e}")
        raise HTTPException(
            status_code=fast_status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_response(code=50002, message=f"更新失败: {str(e)}"),
        )
    return success_response(_serialize(row))


@router.delete("/{event_id}", summary="删除活动")
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)):
    try:
        await service.delete_event(event_id)
    except Exception as e:
        logger.exception(f"[events.api] delete failed id={event_id}: {e}")
        raise HTTPException(
            status_code=fast_status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_response(code=50003, message=f"删除失败: {str(e)}"),
        )
    return success_response({"id": event_id, "deleted": True}, message="删除成功")
