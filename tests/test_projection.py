"""Tests for rotation, perspective projection and view-state mutation."""

import math

import pytest

from spaceviz.geom import Point
from spaceviz.projection import (
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    PERSPECTIVE_DISTANCE,
    ProjectionState,
    project_to_screen,
    rotate,
)


def test_origin_projects_to_viewport_centre():
    state = ProjectionState(width=800, height=600)
    assert project_to_screen(Point(0, 0, 0), state) == (400.0, 300.0)


def test_offsets_shift_the_centre():
    state = ProjectionState(width=800, height=600, x_offset=10, y_offset=-20)
    assert project_to_screen(Point(0, 0, 0), state) == (410.0, 280.0)


def test_unit_x_at_default_scale():
    state = ProjectionState(width=800, height=600, scale=50)
    sx, sy = project_to_screen(Point(1, 0, 0), state)
    assert sx == pytest.approx(450.0)
    assert sy == pytest.approx(300.0)


def test_perspective_shrinks_distant_points():
    state = ProjectionState()
    near = project_to_screen(Point(1, 0, -100), state)
    far = project_to_screen(Point(1, 0, 100), state)
    centre = state.width / 2
    assert near[0] - centre > far[0] - centre > 0
    assert far[0] - centre == pytest.approx(50 * PERSPECTIVE_DISTANCE / 700)


def test_point_behind_camera_has_no_projection():
    state = ProjectionState()
    assert project_to_screen(Point(0, 0, -PERSPECTIVE_DISTANCE), state) is None
    assert project_to_screen(Point(0, 0, -1000), state) is None


def test_non_finite_point_has_no_projection():
    state = ProjectionState()
    assert project_to_screen(Point(math.nan, 0, 0), state) is None
    assert project_to_screen(Point(0, math.inf, 0), state) is None


def test_rotation_order_is_x_then_y_then_z():
    x, y, z = rotate(Point(0, 1, 0), math.pi / 2, math.pi / 2, 0)
    # X turns +y into +z, then Y turns +z into +x
    assert (x, y, z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


def test_rotation_preserves_length():
    p = Point(1, 2, 3)
    rotated = rotate(p, 0.3, -1.1, 2.0)
    assert math.hypot(*rotated) == pytest.approx(math.hypot(1, 2, 3))


def test_zero_rotation_is_identity():
    assert rotate(Point(1, 2, 3), 0, 0, 0) == (1, 2, 3)


class TestProjectionState:

    def test_defaults(self):
        state = ProjectionState()
        assert state.scale == DEFAULT_SCALE
        assert (state.width, state.height) == (800, 600)

    def test_scale_clamped_on_construction(self):
        assert ProjectionState(scale=1).scale == MIN_SCALE
        assert ProjectionState(scale=10_000).scale == MAX_SCALE

    def test_zoom_in_and_out(self):
        state = ProjectionState()
        state.zoom_in()
        assert state.scale == pytest.approx(55.0)
        state.zoom_out()
        assert state.scale == pytest.approx(50.0)

    def test_zoom_stays_within_limits(self):
        state = ProjectionState()
        for _ in range(200):
            state.zoom_in()
        assert state.scale == MAX_SCALE
        for _ in range(200):
            state.zoom_out()
        assert state.scale == MIN_SCALE

    def test_zoom_factor_must_be_positive(self):
        with pytest.raises(ValueError):
            ProjectionState().zoom_by(0)

    def test_rotate_by_drag(self):
        state = ProjectionState()
        state.rotate_by(100, -50)
        assert state.y_rotation == pytest.approx(1.0)
        assert state.x_rotation == pytest.approx(-0.5)

    def test_rotate_by_scroll(self):
        state = ProjectionState()
        state.rotate_by_scroll(2, 1)
        assert state.x_rotation == pytest.approx(0.1)
        assert state.y_rotation == pytest.approx(0.2)

    def test_pan(self):
        state = ProjectionState()
        state.pan_by(5, -7)
        state.pan_by(1, 1)
        assert (state.x_offset, state.y_offset) == (6, -6)

    def test_reset_keeps_viewport(self):
        state = ProjectionState(width=1024, height=768)
        state.rotate_by(10, 10)
        state.pan_by(3, 3)
        state.zoom_in()
        state.reset()
        assert state == ProjectionState(width=1024, height=768)

    def test_resize_clamps_negative(self):
        state = ProjectionState()
        state.resize(-5, 300)
        assert (state.width, state.height) == (0, 300)

    def test_snapshot_is_independent(self):
        state = ProjectionState()
        snap = state.snapshot()
        state.pan_by(10, 10)
        assert snap.x_offset == 0
        assert snap is not state
