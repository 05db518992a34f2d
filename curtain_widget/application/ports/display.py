from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from curtain_widget.domain.entities.display_update import DisplayUpdate


class DisplayPort(ABC):
    @abstractmethod
    def apply(self, update: DisplayUpdate) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_cart_count(self) -> int:
        """Currently displayed cart count (0 when there is no badge yet)."""
        raise NotImplementedError

    @abstractmethod
    def set_cart_count(self, count: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def has_drawer(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def replace_drawer(self, markup: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def open_drawer(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        """Current value of every surface."""
        raise NotImplementedError
