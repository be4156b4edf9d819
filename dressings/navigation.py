"""Search/detail navigation with a back-stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Container


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of what the UI should show."""

    current: str | None = None
    history: tuple[str, ...] = ()

    @property
    def is_browsing(self) -> bool:
        return self.current is None

    @property
    def can_go_back(self) -> bool:
        # Back from a dressing with no history returns to search.
        return self.current is not None


class Navigator:
    """Tracks the displayed dressing and previously viewed ones.

    Browsing is ``current is None``. Selecting while viewing pushes the
    current dressing; back pops it, or returns to browsing when the
    history is empty.
    """

    def __init__(self, known: Container[str] | None = None) -> None:
        self._known = known
        self._current: str | None = None
        self._history: list[str] = []

    @property
    def state(self) -> NavigationState:
        return NavigationState(current=self._current, history=tuple(self._history))

    @property
    def current(self) -> str | None:
        return self._current

    def select(self, name: str) -> bool:
        """Show ``name``; unknown names reset to browsing and return False."""
        if self._known is not None and name not in self._known:
            self.reset()
            return False
        if self._current is not None:
            self._history.append(self._current)
        self._current = name
        return True

    def back(self) -> None:
        if self._current is None:
            return
        if self._history:
            self._current = self._history.pop()
        else:
            self._current = None

    def reset(self) -> None:
        self._current = None
        self._history.clear()
