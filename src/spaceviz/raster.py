"""
Software rasterization onto an RGBA pixel buffer.

All primitives take integer pixel coordinates with the origin at the
top-left corner.  Nothing here raises for geometry that falls outside
the buffer: out-of-bounds pixels are silently dropped.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from spaceviz.font import GLYPH_HEIGHT, GLYPH_SPACING, GLYPH_WIDTH, glyph_for, text_width

Color = Tuple[int, int, int, int]

TEXT_BACKGROUND: Color = (240, 240, 240, 220)
TEXT_PADDING = 2


def rgba(color: Sequence[int]) -> Color:
    """Normalise an RGB or RGBA sequence to a 4-tuple of ints."""
    if len(color) == 3:
        return int(color[0]), int(color[1]), int(color[2]), 255
    if len(color) == 4:
        return int(color[0]), int(color[1]), int(color[2]), int(color[3])
    raise ValueError(f"bad color: {color!r}")


class PixelBuffer:
    """
    A ``height x width`` RGBA image backed by a ``uint8`` numpy array.

    Row 0 is the top of the image.  Colours with alpha below 255 are
    composited over the existing pixel; opaque colours replace it.
    """

    def __init__(self, width: int, height: int, background: Sequence[int] = (0, 0, 0, 255)):
        if width < 0 or height < 0:
            raise ValueError(f"bad buffer size {width}x{height}")
        self.pixels = np.zeros((int(height), int(width), 4), dtype=np.uint8)
        self.fill(background)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def fill(self, color: Sequence[int]) -> None:
        self.pixels[:, :] = rgba(color)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Color:
        return tuple(int(c) for c in self.pixels[y, x])

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        if not self.in_bounds(x, y):
            return
        color = rgba(color)
        alpha = color[3]
        if alpha >= 255:
            self.pixels[y, x] = color
            return
        dst = [int(c) for c in self.pixels[y, x]]
        self.pixels[y, x] = (
            (color[0] * alpha + dst[0] * (255 - alpha) + 127) // 255,
            (color[1] * alpha + dst[1] * (255 - alpha) + 127) // 255,
            (color[2] * alpha + dst[2] * (255 - alpha) + 127) // 255,
            alpha + (dst[3] * (255 - alpha) + 127) // 255,
        )

    def set_pixels(self, xs: Sequence[int], ys: Sequence[int], color: Sequence[int]) -> None:
        """Paint a batch of distinct pixels in one pass; out-of-bounds entries are dropped."""
        xs = np.asarray(xs, dtype=np.intp)
        ys = np.asarray(ys, dtype=np.intp)
        keep = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        xs, ys = xs[keep], ys[keep]
        if xs.size == 0:
            return
        color = rgba(color)
        if color[3] >= 255:
            self.pixels[ys, xs] = color
        else:
            region = self.pixels[ys, xs]
            self._blend(region, None, color)
            self.pixels[ys, xs] = region

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Sequence[int]) -> None:
        """Paint the half-open rectangle ``[x0, x1) x [y0, y1)``, clipped."""
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, self.width), min(y1, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self._paint(self.pixels[y0:y1, x0:x1], None, rgba(color))

    def fill_mask(self, x0: int, y0: int, mask: np.ndarray, color: Sequence[int]) -> None:
        """Paint ``color`` where ``mask`` is true; the mask's top-left sits at ``(x0, y0)``.

        The mask must already lie inside the buffer.
        """
        h, w = mask.shape
        self._paint(self.pixels[y0:y0 + h, x0:x0 + w], mask, rgba(color))

    def _paint(self, region: np.ndarray, mask, color: Color) -> None:
        if color[3] >= 255:
            if mask is None:
                region[:, :] = color
            else:
                region[mask] = color
        else:
            self._blend(region, mask, color)

    @staticmethod
    def _blend(region: np.ndarray, mask, color: Color) -> None:
        alpha = color[3]
        src = np.array(color[:3], dtype=np.uint32)
        dst = region.astype(np.uint32)
        out = dst.copy()
        out[..., :3] = (src * alpha + dst[..., :3] * (255 - alpha) + 127) // 255
        out[..., 3] = alpha + (dst[..., 3] * (255 - alpha) + 127) // 255
        if mask is None:
            region[...] = out.astype(np.uint8)
        else:
            region[mask] = out[mask].astype(np.uint8)

    def to_bytes(self, flip: bool = False) -> bytes:
        """Raw RGBA bytes, top row first (or bottom row first with ``flip``)."""
        data = self.pixels[::-1] if flip else self.pixels
        return np.ascontiguousarray(data).tobytes()

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"


def is_visible(x: int, y: int, width: int, height: int) -> bool:
    """True when ``(x, y)`` is a pixel of a ``width x height`` viewport."""
    return 0 <= x < width and 0 <= y < height


def is_near(pixel_x: float, pixel_y: float, point_x: float, point_y: float,
            box_size: float) -> bool:
    """Axis-aligned box hit test: is the pointer within ``box_size`` of the point on both axes?"""
    return (point_x - box_size <= pixel_x <= point_x + box_size and
            point_y - box_size <= pixel_y <= point_y + box_size)


def line(buffer: PixelBuffer, x1: int, y1: int, x2: int, y2: int,
         color: Sequence[int]) -> None:
    """Draw a 1 px line with the integer Bresenham algorithm."""

    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    color = rgba(color)
    w, h = buffer.width, buffer.height

    # both endpoints past the same edge: nothing can land in the buffer
    if ((x1 < 0 and x2 < 0) or (y1 < 0 and y2 < 0) or
            (x1 >= w and x2 >= w) or (y1 >= h and y2 >= h)):
        return

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    xs, ys = [], []
    while True:
        if 0 <= x1 < w and 0 <= y1 < h:
            xs.append(x1)
            ys.append(y1)
        if x1 == x2 and y1 == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x1 += sx
        if e2 < dx:
            err += dx
            y1 += sy

    buffer.set_pixels(xs, ys, color)


def thick_line(buffer: PixelBuffer, x1: int, y1: int, x2: int, y2: int,
               color: Sequence[int], thickness: int) -> None:
    """Approximate a wide stroke by stamping offset copies of a 1 px line.

    Every integer offset inside a disc of radius ``thickness // 2`` gets its
    own parallel line.
    """

    line(buffer, x1, y1, x2, y2, color)

    half = int(thickness) // 2
    for dy in range(-half, half + 1):
        for dx in range(-half, half + 1):
            if dx * dx + dy * dy <= half * half:
                line(buffer, x1 + dx, y1 + dy, x2 + dx, y2 + dy, color)


def filled_circle(buffer: PixelBuffer, cx: int, cy: int, radius: int,
                  color: Sequence[int]) -> None:
    """Fill every pixel with ``dx*dx + dy*dy <= radius*radius`` around ``(cx, cy)``."""

    cx, cy, radius = int(cx), int(cy), int(radius)
    if radius < 0:
        return

    x0, x1 = max(cx - radius, 0), min(cx + radius, buffer.width - 1)
    y0, y1 = max(cy - radius, 0), min(cy + radius, buffer.height - 1)
    if x0 > x1 or y0 > y1:
        return

    ys, xs = np.ogrid[y0:y1 + 1, x0:x1 + 1]
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
    buffer.fill_mask(x0, y0, mask, color)


def text(buffer: PixelBuffer, string: str, x: int, y: int, color: Sequence[int]) -> None:
    """Draw ``string`` in the 5x6 bitmap font with its top-left at ``(x, y)``.

    A translucent backing rectangle is laid down first so labels stay
    readable over grid lines and points.
    """

    x, y = int(x), int(y)
    color = rgba(color)

    bg_width = text_width(string) + TEXT_PADDING * 2
    buffer.fill_rect(x - TEXT_PADDING, y - TEXT_PADDING,
                     x + bg_width, y + GLYPH_HEIGHT + TEXT_PADDING,
                     TEXT_BACKGROUND)

    advance = GLYPH_WIDTH + GLYPH_SPACING
    xs, ys = [], []
    for i, char in enumerate(string):
        rows = glyph_for(char)
        for dy, row in enumerate(rows[:GLYPH_HEIGHT]):
            for dx, cell in enumerate(row[:GLYPH_WIDTH]):
                if cell == '#':
                    xs.append(x + i * advance + dx)
                    ys.append(y + dy)
    buffer.set_pixels(xs, ys, color)
