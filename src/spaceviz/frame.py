"""
Frame composition: turn a point cloud and a view into a pixel buffer.

Painting order is fixed: background, the three reference grids, the
coordinate axes with their labels, then every point in cloud order.
There is no depth sorting; later points paint over earlier ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from spaceviz import raster
from spaceviz.config import FrameStyle
from spaceviz.geom import Point, PointCloud
from spaceviz.projection import ProjectionState, project_to_screen
from spaceviz.raster import PixelBuffer

logger = logging.getLogger(__name__)

Viewport = Tuple[int, int]
Pointer = Tuple[float, float]


@dataclass
class ViewerState:
    """Everything needed to paint one frame."""

    cloud: PointCloud = field(default_factory=PointCloud)
    projection: ProjectionState = field(default_factory=ProjectionState)
    pointer: Optional[Pointer] = None
    style: FrameStyle = field(default_factory=FrameStyle)


def format_coordinate(point: Point) -> str:
    return "(%.1f, %.1f, %.1f)" % (point.x, point.y, point.z)


def _screen(point, state):
    projected = project_to_screen(point, state)
    if projected is None:
        return None
    return int(projected[0]), int(projected[1])


def _grid(buffer, state, style, plane, color):
    """Draw one reference grid.

    ``plane`` maps grid coordinates ``(u, v)`` to a 3D point.  Each cell
    contributes the segment towards ``u + 1`` and the one towards ``v + 1``,
    but only when both ends land on screen.
    """
    n = style.grid_size
    step = style.grid_step
    w, h = buffer.width, buffer.height

    for i in range(-n, n + 1):
        for j in range(-n, n + 1):
            p1 = _screen(plane(i * step, j * step), state)
            if p1 is None or not raster.is_visible(p1[0], p1[1], w, h):
                continue
            for p in (plane((i + 1) * step, j * step), plane(i * step, (j + 1) * step)):
                p2 = _screen(p, state)
                if p2 is not None and raster.is_visible(p2[0], p2[1], w, h):
                    raster.line(buffer, p1[0], p1[1], p2[0], p2[1], color)


def _axes(buffer, state, style):
    origin = _screen(Point(0, 0, 0), state)
    if origin is None:
        return
    length = style.axis_length
    axes = (
        (Point(length, 0, 0), style.x_axis, "X", style.x_label),
        (Point(0, length, 0), style.y_axis, "Y", style.y_label),
        (Point(0, 0, length), style.z_axis, "Z", style.z_label),
    )
    tips = []
    for tip, color, label, label_color in axes:
        end = _screen(tip, state)
        if end is None:
            continue
        raster.thick_line(buffer, origin[0], origin[1], end[0], end[1],
                          color, style.axis_thickness)
        tips.append((end, label, label_color))

    for end, label, label_color in tips:
        raster.text(buffer, label, end[0] + 5, end[1] - 5, label_color)


def _points(buffer, cloud, state, style, pointer):
    size = style.point_size
    box = size * 5
    hover = pointer is not None
    if hover:
        mouse_x, mouse_y = int(pointer[0]), int(pointer[1])

    for point in cloud:
        projected = _screen(point, state)
        if projected is None:
            continue
        sx, sy = projected
        raster.filled_circle(buffer, sx, sy, size + 2, style.point_border)
        raster.filled_circle(buffer, sx, sy, size, style.point_fill)
        if hover and raster.is_near(mouse_x, mouse_y, sx, sy, box):
            raster.text(buffer, format_coordinate(point), sx + size + 5, sy - 5,
                        style.hover_label)


def compose_frame(cloud: PointCloud, state: ProjectionState, viewport: Viewport,
                  pointer: Optional[Pointer] = None,
                  style: Optional[FrameStyle] = None) -> PixelBuffer:
    """Paint ``cloud`` as seen through ``state`` into a new buffer.

    ``viewport`` is ``(width, height)`` in pixels and takes precedence over
    the size recorded in ``state``; the composer works on a snapshot and
    never modifies the caller's state.  ``pointer`` is the hover position
    with the origin at the top-left, or ``None`` when the pointer is outside
    the window and no label is shown.
    """

    if style is None:
        style = FrameStyle()
    width, height = max(0, int(viewport[0])), max(0, int(viewport[1]))

    view = state.snapshot()
    view.resize(width, height)

    buffer = PixelBuffer(width, height, style.background)
    if width == 0 or height == 0:
        return buffer

    _grid(buffer, view, style, lambda u, v: Point(u, 0, v), style.floor_grid)
    _grid(buffer, view, style, lambda u, v: Point(u, v, 0), style.xy_grid)
    _grid(buffer, view, style, lambda u, v: Point(0, u, v), style.yz_grid)
    _axes(buffer, view, style)
    _points(buffer, cloud, view, style, pointer)

    logger.debug("composed %dx%d frame with %d points", width, height, len(cloud))
    return buffer


def render(viewer_state: ViewerState, viewport: Viewport) -> PixelBuffer:
    return compose_frame(viewer_state.cloud, viewer_state.projection, viewport,
                         viewer_state.pointer, viewer_state.style)
