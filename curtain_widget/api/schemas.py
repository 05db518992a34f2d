from typing import Any

from pydantic import BaseModel, Field

from curtain_widget.domain.entities.selection_state import SelectionState, SelectionStatus


class WidthChangeSchema(BaseModel):
    width: str | None = None


class DropChangeSchema(BaseModel):
    drop: str | None = None


class QuantityChangeSchema(BaseModel):
    quantity: str | int | None = None


class QuantityStepSchema(BaseModel):
    delta: int = Field(default=1, ge=-1, le=1)


class SelectionSchema(BaseModel):
    width: str | None
    drop: str | None
    panel_count: int | None
    variant_id: int | str | None
    unit_price: int | None
    quantity: int
    status: SelectionStatus

    @classmethod
    def from_state(cls, state: SelectionState) -> "SelectionSchema":
        return cls(
            width=state.width,
            drop=state.drop,
            panel_count=state.panel_count,
            variant_id=state.variant.id if state.variant else None,
            unit_price=state.unit_price,
            quantity=state.quantity,
            status=state.status,
        )


class WidgetResponseSchema(BaseModel):
    session_id: str
    selection: SelectionSchema
    display: dict[str, Any] = Field(default_factory=dict)


class SubmitResponseSchema(WidgetResponseSchema):
    ok: bool
    error: str | None = None
    message: str | None = None
