"""
Rotation, perspective and screen mapping for the point viewer.

The projection is a fixed pipeline: rotate about X, then Y, then Z
(the order matters), apply a simple perspective divide about a virtual
camera ``PERSPECTIVE_DISTANCE`` units in front of the origin, then scale
and centre in the viewport.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from spaceviz.geom import Point

PERSPECTIVE_DISTANCE = 600.0

MIN_SCALE = 5.0
MAX_SCALE = 500.0
DEFAULT_SCALE = 50.0
ZOOM_FACTOR = 1.1

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

# radians per pixel of drag, and per unit of scroll
DRAG_SENSITIVITY = 0.01
SCROLL_ROTATION_SPEED = 0.1


def clamp_scale(scale: float) -> float:
    return max(MIN_SCALE, min(MAX_SCALE, scale))


@dataclass
class ProjectionState:
    """Mutable view transform, written by interaction handlers and read once per frame."""

    x_rotation: float = 0.0
    y_rotation: float = 0.0
    z_rotation: float = 0.0
    scale: float = DEFAULT_SCALE
    x_offset: float = 0.0
    y_offset: float = 0.0
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self):
        self.scale = clamp_scale(self.scale)

    def rotate_by(self, dx: float, dy: float) -> None:
        """Apply a drag of ``(dx, dy)`` pixels: horizontal spins about Y, vertical about X."""
        self.y_rotation += dx * DRAG_SENSITIVITY
        self.x_rotation += dy * DRAG_SENSITIVITY

    def rotate_by_scroll(self, dx: float, dy: float) -> None:
        self.x_rotation += dy * SCROLL_ROTATION_SPEED
        self.y_rotation += dx * SCROLL_ROTATION_SPEED

    def pan_by(self, dx: float, dy: float) -> None:
        self.x_offset += dx
        self.y_offset += dy

    def zoom_by(self, factor: float) -> None:
        """Multiply the scale by ``factor``, clamped to ``[MIN_SCALE, MAX_SCALE]``."""
        if not factor > 0:
            raise ValueError(f"zoom factor must be positive, got {factor!r}")
        self.scale = clamp_scale(self.scale * factor)

    def zoom_in(self) -> None:
        self.zoom_by(ZOOM_FACTOR)

    def zoom_out(self) -> None:
        self.scale = clamp_scale(self.scale / ZOOM_FACTOR)

    def reset(self, scale: float = DEFAULT_SCALE) -> None:
        """Restore rotation, scale and offsets; the viewport size is kept."""
        self.x_rotation = 0.0
        self.y_rotation = 0.0
        self.z_rotation = 0.0
        self.scale = clamp_scale(scale)
        self.x_offset = 0.0
        self.y_offset = 0.0

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))

    def snapshot(self) -> "ProjectionState":
        """Independent copy for reading one consistent frame."""
        return dataclasses.replace(self)


def rotate(point: Point, x_rotation: float, y_rotation: float,
           z_rotation: float) -> Tuple[float, float, float]:
    """Rotate ``point`` about X, then Y, then Z and return the new coordinates."""

    x, y, z = point.x, point.y, point.z

    # X rotation
    cos_a, sin_a = math.cos(x_rotation), math.sin(x_rotation)
    y, z = y * cos_a - z * sin_a, y * sin_a + z * cos_a

    # Y rotation
    cos_b, sin_b = math.cos(y_rotation), math.sin(y_rotation)
    x, z = x * cos_b + z * sin_b, -x * sin_b + z * cos_b

    # Z rotation
    cos_c, sin_c = math.cos(z_rotation), math.sin(z_rotation)
    x, y = x * cos_c - y * sin_c, x * sin_c + y * cos_c

    return x, y, z


def project_to_screen(point: Point, state: ProjectionState) -> Optional[Tuple[float, float]]:
    """Project ``point`` to floating-point screen coordinates.

    Returns ``None`` when the rotated point lies at or behind the virtual
    camera plane, where the perspective divide is undefined, or when the
    point has non-finite coordinates.
    """

    x, y, z = rotate(point, state.x_rotation, state.y_rotation, state.z_rotation)

    depth = PERSPECTIVE_DISTANCE + z
    if not depth > 0:
        return None
    perspective = PERSPECTIVE_DISTANCE / depth

    screen_x = state.width / 2 + x * state.scale * perspective + state.x_offset
    screen_y = state.height / 2 + y * state.scale * perspective + state.y_offset
    if not (math.isfinite(screen_x) and math.isfinite(screen_y)):
        return None
    return screen_x, screen_y
