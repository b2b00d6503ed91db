"""Interactive pyglet window for point clouds.

The window owns no drawing logic: every frame is painted in software by
:func:`spaceviz.frame.render` and blitted as a single image.
"""

from __future__ import annotations

import logging
from typing import Optional

import pyglet
from pyglet.window import key, mouse

from spaceviz.config import ViewerConfig
from spaceviz.frame import ViewerState, render
from spaceviz.geom import PointCloud
from spaceviz.interaction import Button, InteractionController
from spaceviz.projection import ProjectionState

logger = logging.getLogger(__name__)

CAPTION = "3D Point Visualization"
HELP_TEXT = ("drag: rotate | right/alt-drag: pan | scroll: zoom | "
             "hold R: rotate with drag/scroll | space: reset | H: help | esc: quit")


class PointCloudWindow(pyglet.window.Window):
    """Point cloud window with drag rotation, panning, zoom and hover labels."""

    def __init__(self, cloud: PointCloud, config: Optional[ViewerConfig] = None, **kwargs):
        config = config or ViewerConfig()
        super().__init__(width=config.width, height=config.height, caption=CAPTION,
                         resizable=True, **kwargs)
        projection = ProjectionState(scale=config.scale, width=self.width, height=self.height)
        self.view = ViewerState(cloud=cloud, projection=projection, style=config.style)
        self.controller = InteractionController(projection, default_scale=config.scale)
        self.show_help = False
        self._image = None
        self._dirty = True

    def _top_left(self, x, y):
        # pyglet measures y upward from the bottom edge
        return x, self.height - y

    def _sync_pointer(self):
        self.view.pointer = self.controller.pointer
        self._dirty = True

    def on_draw(self):
        if self._dirty or self._image is None:
            frame = render(self.view, (self.width, self.height))
            self._image = pyglet.image.ImageData(frame.width, frame.height, 'RGBA',
                                                 frame.to_bytes(), pitch=-frame.width * 4)
            self._dirty = False
        self.clear()
        self._image.blit(0, 0)

    def on_resize(self, width, height):
        super().on_resize(width, height)
        self.view.projection.resize(width, height)
        self._dirty = True

    def on_mouse_press(self, x, y, button, modifiers):
        x, y = self._top_left(x, y)
        pressed = Button.SECONDARY if button == mouse.RIGHT else Button.PRIMARY
        self.controller.press(x, y, pressed, alt=bool(modifiers & key.MOD_ALT))

    def on_mouse_release(self, x, y, button, modifiers):
        self.controller.release()

    def on_mouse_motion(self, x, y, dx, dy):
        self.controller.move(*self._top_left(x, y))
        self._sync_pointer()

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.controller.move(*self._top_left(x, y))
        self._sync_pointer()

    def on_mouse_leave(self, x, y):
        self.controller.leave()
        self._sync_pointer()

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):
        self.controller.scroll(scroll_x, scroll_y)
        self._dirty = True

    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.R:
            self.controller.set_rotate_key(True)
        elif symbol == key.SPACE:
            self.controller.reset_view()
            self._dirty = True
        elif symbol in (key.H, key.F1):
            self.show_help = not self.show_help
            self.set_caption(f"{CAPTION} - {HELP_TEXT}" if self.show_help else CAPTION)

    def on_key_release(self, symbol, modifiers):
        if symbol == key.R:
            self.controller.set_rotate_key(False)


def view_points(cloud: PointCloud, config: Optional[ViewerConfig] = None) -> "PointCloudWindow":
    """Open a window on ``cloud`` and run the event loop until it closes."""
    logger.info("opening viewer with %d points", len(cloud))
    window = PointCloudWindow(cloud, config)
    pyglet.app.run()
    return window


__all__ = ["PointCloudWindow", "view_points"]
