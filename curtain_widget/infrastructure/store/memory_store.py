from __future__ import annotations

from typing import Callable

from curtain_widget.application.use_cases.widget import CurtainWidget


class MemoryWidgetStore:
    """Live widgets by session id. Nothing survives a restart."""

    def __init__(self, factory: Callable[[str], CurtainWidget], limit: int = 1000) -> None:
        self._factory = factory
        self._widgets: dict[str, CurtainWidget] = {}
        self._limit = limit

    def get_or_create(self, session_id: str) -> CurtainWidget:
        widget = self._widgets.get(session_id)
        if widget is None:
            if len(self._widgets) >= self._limit:
                # Drop the oldest session.
                oldest = next(iter(self._widgets))
                del self._widgets[oldest]
            widget = self._factory(session_id)
            self._widgets[session_id] = widget
        return widget

    def get(self, session_id: str) -> CurtainWidget | None:
        return self._widgets.get(session_id)

    def discard(self, session_id: str) -> bool:
        return self._widgets.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._widgets)
