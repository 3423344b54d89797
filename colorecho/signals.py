"""A small synchronous signal/slot mechanism."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Register ``slot`` to be called whenever the signal is emitted."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {slot!r}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove one connection of ``slot``; raise ValueError if it is not connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"{slot!r} is not connected to signal {self.name!r}") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, slots={len(self._slots)})"