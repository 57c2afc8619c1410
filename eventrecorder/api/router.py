from typing import List
from fastapi import APIRouter, Depends, Request
from ..event_models import Event, EventIn
from ..services.recorder import EventRecorder
import structlog

router = APIRouter()
log = structlog.get_logger()


def get_recorder(request: Request) -> EventRecorder:
    return request.app.state.recorder


@router.get("/", response_model=List[Event])
async def record_get(recorder: EventRecorder = Depends(get_recorder)):
    log.info("event.requested", name="GET")
    return await recorder.record("GET")


@router.post("/", response_model=List[Event])
async def record_post(event: EventIn, recorder: EventRecorder = Depends(get_recorder)):
    # id and timestamp are assigned by the recorder
    return await recorder.record(event.name)
