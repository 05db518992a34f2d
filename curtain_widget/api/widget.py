from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from curtain_widget.api.schemas import (
    DropChangeSchema,
    QuantityChangeSchema,
    QuantityStepSchema,
    SelectionSchema,
    SubmitResponseSchema,
    WidgetResponseSchema,
    WidthChangeSchema,
)
from curtain_widget.application.use_cases.widget import CurtainWidget
from curtain_widget.infrastructure.store.memory_store import MemoryWidgetStore
from curtain_widget.wiring.dependencies import get_widget_store


router = APIRouter(prefix="/widget")
logger = logging.getLogger(__name__)


def _response(session_id: str, widget: CurtainWidget) -> WidgetResponseSchema:
    return WidgetResponseSchema(
        session_id=session_id,
        selection=SelectionSchema.from_state(widget.state),
        display=widget.display.snapshot(),
    )


@router.get("/{session_id}", response_model=WidgetResponseSchema)
async def get_widget(session_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    return _response(session_id, store.get_or_create(session_id))


@router.post("/{session_id}/width", response_model=WidgetResponseSchema)
async def change_width(
    session_id: str,
    req: WidthChangeSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
):
    widget = store.get_or_create(session_id)
    widget.on_width_change(req.width)
    return _response(session_id, widget)


@router.post("/{session_id}/drop", response_model=WidgetResponseSchema)
async def change_drop(
    session_id: str,
    req: DropChangeSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
):
    widget = store.get_or_create(session_id)
    widget.on_drop_change(req.drop)
    return _response(session_id, widget)


@router.post("/{session_id}/quantity", response_model=WidgetResponseSchema)
async def change_quantity(
    session_id: str,
    req: QuantityChangeSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
):
    widget = store.get_or_create(session_id)
    widget.on_quantity_change(req.quantity)
    return _response(session_id, widget)


@router.post("/{session_id}/quantity/step", response_model=WidgetResponseSchema)
async def step_quantity(
    session_id: str,
    req: QuantityStepSchema,
    store: MemoryWidgetStore = Depends(get_widget_store),
):
    widget = store.get_or_create(session_id)
    widget.on_quantity_step(req.delta)
    return _response(session_id, widget)


@router.post("/{session_id}/submit", response_model=SubmitResponseSchema)
async def submit(session_id: str, store: MemoryWidgetStore = Depends(get_widget_store)):
    widget = store.get_or_create(session_id)
    result = await widget.on_submit()
    logger.info(
        "Submission finished",
        extra={"session_id": session_id, "status": "ok" if result.ok else result.error},
    )
    base = _response(session_id, widget)
    return SubmitResponseSchema(
        **base.model_dump(),
        ok=result.ok,
        error=result.error,
        message=result.message,
    )
