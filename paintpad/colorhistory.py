"""A short most-recent-first list of colours picked by the user."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Tuple

Color = Tuple[int, int, int]

DEFAULT_CAPACITY = 5


class ColorHistory:
    """Remembers the last few distinct colours, newest first.

    Picking the colour that is already newest changes nothing. Once the
    history is full, the oldest colour drops off the end.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._colors: Deque[Color] = deque(maxlen=capacity)

    def add(self, color) -> bool:
        """Put ``color`` at the front; return False if it was already there."""
        color = tuple(color)[:3]
        if self._colors and self._colors[0] == color:
            return False
        self._colors.appendleft(color)
        return True

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"ColorHistory({list(self._colors)!r}, capacity={self.capacity})"