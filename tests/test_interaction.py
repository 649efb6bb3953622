"""
Tests for the idle/dragging interaction state machine.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import DataPoint, Viewport, ViewportEngine
from viewmodel.interaction import DRAGGING, IDLE, InteractionController

WIDTH, HEIGHT = 400.0, 300.0


def _controller():
    ctl = InteractionController()
    ctl.set_points([DataPoint(0.0, 0.0, 0), DataPoint(10.0, 10.0, 1)])
    return ctl


def test_set_points_auto_fits():
    ctl = _controller()
    assert ctl.viewport.as_tuple() == pytest.approx((-0.5, 10.5, -0.5, 10.5))
    assert ctl.state == IDLE


def test_press_move_release_cycle():
    ctl = _controller()
    ctl.pointer_down(100, 100)
    assert ctl.state == DRAGGING
    assert ctl.anchor.viewport == ctl.viewport

    out = ctl.pointer_move(140, 100, WIDTH, HEIGHT)
    # 40 px of 400 is a tenth of the 11-unit range
    assert out.as_tuple() == pytest.approx((-1.6, 9.4, -0.5, 10.5))

    ctl.pointer_up()
    assert ctl.state == IDLE
    assert ctl.anchor is None
    # moves without a press do nothing
    assert ctl.pointer_move(300, 300, WIDTH, HEIGHT) == out


def test_moves_are_measured_from_the_anchor():
    ctl = _controller()
    snapshot = ctl.viewport
    ctl.pointer_down(100, 100)
    ctl.pointer_move(110, 105, WIDTH, HEIGHT)
    ctl.pointer_move(130, 90, WIDTH, HEIGHT)
    third = ctl.pointer_move(160, 120, WIDTH, HEIGHT)

    expected = ViewportEngine().pan_by_pixels(60, 20, WIDTH, HEIGHT, snapshot)
    assert third == expected
    assert ctl.anchor.pointer_x == 100 and ctl.anchor.pointer_y == 100


def test_pointer_leave_ends_drag():
    ctl = _controller()
    ctl.pointer_down(10, 10)
    ctl.pointer_leave()
    assert ctl.state == IDLE


def test_wheel_zooms_without_changing_state():
    ctl = InteractionController(ViewportEngine())
    ctl.set_points([DataPoint(0.0, 0.0, 0), DataPoint(10.0, 10.0, 1)])
    ctl.engine.set_viewport(Viewport(0, 10, 0, 10))

    out = ctl.wheel(200, 150, WIDTH, HEIGHT, delta=-120)
    assert out.as_tuple() == pytest.approx((0, 9.25, 0, 9.25))
    assert ctl.state == IDLE

    ctl.pointer_down(0, 0)
    out = ctl.wheel(200, 150, WIDTH, HEIGHT, delta=120)
    assert out.as_tuple() == pytest.approx((0, 9.25 * 1.075, 0, 9.25 * 1.075))
    assert ctl.state == DRAGGING


def test_custom_zoom_factors():
    ctl = InteractionController(zoom_in_factor=0.5, zoom_out_factor=2.0)
    ctl.set_points([DataPoint(1.0, 1.0, 0)])
    ctl.engine.set_viewport(Viewport(0, 8, 0, 8))
    assert ctl.wheel(WIDTH, HEIGHT, WIDTH, HEIGHT, delta=-1).as_tuple() == pytest.approx((0, 4, 0, 4))


def test_double_click_refits():
    ctl = _controller()
    ctl.pointer_down(0, 0)
    ctl.pointer_move(200, 0, WIDTH, HEIGHT)
    out = ctl.double_click()
    assert out.as_tuple() == pytest.approx((-0.5, 10.5, -0.5, 10.5))
    assert ctl.state == DRAGGING


def test_new_points_cancel_drag():
    ctl = _controller()
    ctl.pointer_down(0, 0)
    ctl.set_points([DataPoint(5.0, 5.0, 0)])
    assert ctl.state == IDLE
    assert ctl.viewport.as_tuple() == pytest.approx((4, 6, 4, 6))


def test_events_ignored_without_points():
    ctl = InteractionController()
    before = ctl.viewport
    ctl.pointer_down(10, 10)
    assert ctl.state == IDLE
    assert ctl.wheel(10, 10, WIDTH, HEIGHT, delta=-1) == before
    assert ctl.double_click() == before


def test_empty_projection_keeps_previous_viewport():
    ctl = _controller()
    before = ctl.viewport
    assert ctl.set_points([]) == before
    assert not ctl.active
