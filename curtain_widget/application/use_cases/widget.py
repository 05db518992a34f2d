from __future__ import annotations

import logging
from typing import Any, Coroutine

from curtain_widget.application.ports.display import DisplayPort
from curtain_widget.application.use_cases.selection import SelectionResult, SelectionUseCase
from curtain_widget.application.use_cases.submit_cart import SubmitCartUseCase
from curtain_widget.domain.entities.selection_state import SelectionState
from curtain_widget.domain.entities.submission import SubmissionResult


class CurtainWidget:
    """
    Owns the one live SelectionState of a widget and routes input events to it.

    Change handlers are synchronous and run to completion. Submit hands the
    cart pipeline the state as it was at the moment of the click.
    """

    def __init__(
        self,
        selection: SelectionUseCase,
        submit_cart: SubmitCartUseCase,
        display: DisplayPort,
        session_id: str = "default",
    ) -> None:
        self._selection = selection
        self._submit_cart = submit_cart
        self._display = display
        self._session_id = session_id
        self._state = SelectionState()
        self._logger = logging.getLogger(__name__)
        self._apply(SelectionResult(updated_state=self._state, updates=selection.render(self._state)))

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def display(self) -> DisplayPort:
        return self._display

    def on_width_change(self, width: str | None) -> SelectionState:
        return self._apply(self._selection.set_width(self._state, width))

    def on_drop_change(self, drop: str | None) -> SelectionState:
        return self._apply(self._selection.set_drop(self._state, drop))

    def on_quantity_change(self, raw: str | int | None) -> SelectionState:
        return self._apply(self._selection.set_quantity(self._state, raw))

    def on_quantity_step(self, delta: int) -> SelectionState:
        return self._apply(self._selection.change_quantity(self._state, delta))

    def on_submit(self) -> Coroutine[Any, Any, SubmissionResult]:
        # Snapshot is taken now, not when the returned coroutine first runs.
        snapshot = self._state
        self._logger.info(
            "Submit requested",
            extra={"session_id": self._session_id, "status": snapshot.status.value},
        )
        return self._submit_cart.execute(snapshot)

    def _apply(self, result: SelectionResult) -> SelectionState:
        self._state = result.updated_state
        for update in result.updates:
            self._display.apply(update)
        self._logger.debug(
            "Selection updated",
            extra={
                "session_id": self._session_id,
                "status": self._state.status.value,
                "quantity": self._state.quantity,
            },
        )
        return self._state
