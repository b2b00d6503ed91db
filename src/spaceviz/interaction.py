"""Translate decoded pointer and key state into projection changes.

The host shell decodes its own events (button, modifiers, coordinates in
pixels with the origin at the top-left) and calls these methods; nothing
here knows about a particular windowing toolkit.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from spaceviz.projection import ProjectionState


class Button(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class DragMode(Enum):
    ROTATE = "rotate"
    PAN = "pan"


class InteractionController:
    """Drag-to-rotate, secondary-drag-to-pan and scroll-to-zoom."""

    def __init__(self, state: ProjectionState, default_scale: Optional[float] = None):
        self.state = state
        self.default_scale = state.scale if default_scale is None else default_scale
        self.mode = DragMode.ROTATE
        self.dragging = False
        self.rotate_key_held = False
        self._last: Tuple[float, float] = (0.0, 0.0)
        self._pointer: Optional[Tuple[float, float]] = None

    @property
    def pointer(self) -> Optional[Tuple[float, float]]:
        """Last known hover position, ``None`` until the pointer enters the window."""
        return self._pointer

    def set_rotate_key(self, held: bool) -> None:
        self.rotate_key_held = bool(held)

    def press(self, x: float, y: float, button: Button = Button.PRIMARY,
              alt: bool = False) -> None:
        self.dragging = True
        self._last = (x, y)
        if self.rotate_key_held:
            self.mode = DragMode.ROTATE
        elif button == Button.SECONDARY or alt:
            self.mode = DragMode.PAN
        else:
            self.mode = DragMode.ROTATE

    def release(self) -> None:
        self.dragging = False

    def move(self, x: float, y: float) -> bool:
        """Record the pointer; while dragging apply the delta.

        Returns ``True`` when the projection state changed.
        """
        self._pointer = (x, y)
        if not self.dragging:
            return False

        dx = x - self._last[0]
        dy = y - self._last[1]
        self._last = (x, y)

        if self.rotate_key_held or self.mode == DragMode.ROTATE:
            self.state.rotate_by(dx, dy)
        else:
            self.state.pan_by(dx, dy)
        return True

    def leave(self) -> None:
        """The pointer left the window: forget the hover position."""
        self._pointer = None

    def scroll(self, dx: float, dy: float) -> None:
        if self.rotate_key_held:
            self.state.rotate_by_scroll(dx, dy)
        elif dy < 0:
            self.state.zoom_out()
        else:
            self.state.zoom_in()

    def reset_view(self) -> None:
        self.state.reset(self.default_scale)
