"""Tests for translating pointer and key input into view changes."""

import pytest

from spaceviz.interaction import Button, DragMode, InteractionController
from spaceviz.projection import ProjectionState


@pytest.fixture
def controller():
    return InteractionController(ProjectionState())


def test_pointer_unknown_until_first_move(controller):
    assert controller.pointer is None


def test_leave_forgets_pointer(controller):
    controller.move(10, 20)
    controller.leave()
    assert controller.pointer is None


def test_hover_updates_pointer_without_changing_view(controller):
    before = controller.state.snapshot()
    assert controller.move(120, 80) is False
    assert controller.pointer == (120, 80)
    assert controller.state == before


def test_primary_drag_rotates(controller):
    controller.press(100, 100)
    assert controller.mode == DragMode.ROTATE
    assert controller.move(150, 80) is True
    assert controller.state.y_rotation == pytest.approx(0.5)
    assert controller.state.x_rotation == pytest.approx(-0.2)


def test_drag_deltas_are_incremental(controller):
    controller.press(0, 0)
    controller.move(10, 0)
    controller.move(30, 0)
    assert controller.state.y_rotation == pytest.approx(0.3)


def test_secondary_drag_pans(controller):
    controller.press(100, 100, Button.SECONDARY)
    assert controller.mode == DragMode.PAN
    controller.move(110, 95)
    assert (controller.state.x_offset, controller.state.y_offset) == (10, -5)
    assert controller.state.x_rotation == 0


def test_alt_drag_pans(controller):
    controller.press(0, 0, alt=True)
    controller.move(4, 4)
    assert controller.state.x_offset == 4


def test_rotate_key_overrides_pan(controller):
    controller.set_rotate_key(True)
    controller.press(0, 0, Button.SECONDARY)
    controller.move(100, 0)
    assert controller.state.x_offset == 0
    assert controller.state.y_rotation == pytest.approx(1.0)


def test_release_stops_dragging(controller):
    controller.press(0, 0)
    controller.release()
    assert controller.move(50, 50) is False
    assert controller.state.y_rotation == 0


def test_scroll_zooms(controller):
    controller.scroll(0, 1)
    assert controller.state.scale == pytest.approx(55.0)
    controller.scroll(0, -1)
    assert controller.state.scale == pytest.approx(50.0)


def test_scroll_with_rotate_key_rotates(controller):
    controller.set_rotate_key(True)
    controller.scroll(1, 2)
    assert controller.state.scale == 50.0
    assert controller.state.x_rotation == pytest.approx(0.2)
    assert controller.state.y_rotation == pytest.approx(0.1)


def test_reset_view_restores_configured_scale():
    state = ProjectionState(scale=80)
    controller = InteractionController(state)
    controller.scroll(0, 1)
    controller.press(0, 0)
    controller.move(10, 10)
    controller.reset_view()
    assert state.scale == 80
    assert state.x_rotation == state.y_rotation == 0
