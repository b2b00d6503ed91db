"""Interactive viewer tests; run with ``pytest -m visual`` on a machine with a display."""

import pytest

from spaceviz.config import ViewerConfig
from spaceviz.sampler import sample, sample_cloud


class TestViewerVisual:
    """Visual tests for the pyglet window (deselected by default)."""

    @pytest.mark.visual
    def test_visual_sample_cloud(self):
        """Cube corners and helix; drag, scroll, hover and press Esc to close."""
        from spaceviz.viewer import view_points

        view_points(sample_cloud())

    @pytest.mark.visual
    def test_visual_height_field(self):
        """sin(x) * cos(y) at a coarse step with smaller points."""
        from spaceviz.viewer import view_points

        config = ViewerConfig(scale=40)
        config.style.point_size = 3
        view_points(sample("sin(x) * cos(y)", -3, 3, -3, 3, 0.5), config)

    @pytest.mark.visual
    def test_visual_window_state(self):
        """Window wires key presses into the shared projection state."""
        from pyglet.window import key
        from spaceviz.viewer import PointCloudWindow

        window = PointCloudWindow(sample_cloud(), visible=False)
        try:
            window.controller.state.rotate_by(50, 50)
            window.on_key_press(key.SPACE, 0)
            assert window.view.projection.x_rotation == 0
            window.on_key_press(key.H, 0)
            assert window.show_help
        finally:
            window.close()
