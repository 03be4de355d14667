from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple


class PointerButton(Enum):
    PRIMARY = auto()
    MIDDLE = auto()
    SECONDARY = auto()


BUTTON_ORDER: Tuple[PointerButton, ...] = (
    PointerButton.PRIMARY,
    PointerButton.MIDDLE,
    PointerButton.SECONDARY,
)


@dataclass(frozen=True)
class PointerEvent:
    """Pointer sample in client coordinates (y grows downward)."""

    x: float
    y: float
    pressed: FrozenSet[PointerButton] = field(default_factory=frozenset)

    def is_pressed(self, button: PointerButton) -> bool:
        return button in self.pressed


class PointerButtonTracker:
    """Tracks which buttons are held and the last pointer position seen.

    The previous position is shared by all buttons. When a button goes from
    released to pressed the previous position is reset to the current one,
    so the first sample after a press yields a zero delta instead of a jump.
    """

    def __init__(self):
        self._down: Dict[PointerButton, bool] = {b: False for b in BUTTON_ORDER}
        self.previous_position: Tuple[float, float] = (0.0, 0.0)

    def is_down(self, button: PointerButton) -> bool:
        return self._down[button]

    def sync(self, event: PointerEvent) -> Tuple[float, float]:
        pos = (float(event.x), float(event.y))
        for button in BUTTON_ORDER:
            if event.is_pressed(button):
                if not self._down[button]:
                    self.previous_position = pos
                    self._down[button] = True
            else:
                self._down[button] = False
        return pos

    def delta(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        px, py = self.previous_position
        return pos[0] - px, pos[1] - py

    def commit(self, pos: Tuple[float, float]):
        self.previous_position = pos
