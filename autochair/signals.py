"""A small synchronous signal/slot mechanism used to wire models and view models."""

from __future__ import annotations

from typing import Any, Callable

Slot = Callable[..., Any]


class Signal:
    """Holds connected callables and calls them, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> None:
        """Connect a callable; connecting the same callable twice calls it twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove one connection of ``slot``; raise ValueError if it is not connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)