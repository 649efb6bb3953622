"""
Tests for the viewport engine: auto-fit padding, zoom-at-fraction, pixel
panning and the well-formedness guarantee shared by all three.
"""

import itertools
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import DataPoint, EmptyPointSetError, Viewport, ViewportEngine, axis_ticks
from models.viewport import DEFAULT_VIEWPORT


def _pts(*pairs):
    return [DataPoint(float(x), float(y), i) for i, (x, y) in enumerate(pairs)]


def _assert_viewport(vp, xmin, xmax, ymin, ymax):
    assert vp.as_tuple() == pytest.approx((xmin, xmax, ymin, ymax))


def test_initial_viewport():
    assert ViewportEngine().viewport == DEFAULT_VIEWPORT


def test_auto_fit_single_point_pads_by_one():
    engine = ViewportEngine()
    _assert_viewport(engine.auto_fit(_pts((5, 5))), 4, 6, 4, 6)


def test_auto_fit_default_padding():
    engine = ViewportEngine()
    _assert_viewport(engine.auto_fit(_pts((0, 0), (10, 10))), -0.5, 10.5, -0.5, 10.5)
    assert engine.viewport.as_tuple() == pytest.approx((-0.5, 10.5, -0.5, 10.5))


def test_auto_fit_one_degenerate_axis():
    engine = ViewportEngine()
    _assert_viewport(engine.auto_fit(_pts((1, 3), (1, 7))), 0, 2, 2.8, 7.2)


def test_auto_fit_custom_padding():
    engine = ViewportEngine()
    _assert_viewport(engine.auto_fit(_pts((0, 0), (10, 20)), pad_fraction=0.1), -1, 11, -2, 22)


def test_auto_fit_empty_raises_and_keeps_viewport():
    engine = ViewportEngine(Viewport(0, 1, 0, 1))
    with pytest.raises(EmptyPointSetError):
        engine.auto_fit([])
    assert engine.viewport == Viewport(0, 1, 0, 1)


def test_zoom_in_at_center():
    engine = ViewportEngine(Viewport(0, 10, 0, 10))
    _assert_viewport(engine.zoom_at(0.5, 0.5, 0.85), 0, 9.25, 0, 9.25)


def test_zoom_scales_bound_values():
    engine = ViewportEngine(Viewport(100, 200, -10, 10))
    # fx = 1 scales x bounds fully, fy = 0 leaves y alone
    _assert_viewport(engine.zoom_at(1.0, 0.0, 1.15), 115, 230, -10, 10)


def test_zoom_at_top_left_keeps_viewport():
    engine = ViewportEngine(Viewport(2, 4, 6, 8))
    _assert_viewport(engine.zoom_at(0.0, 0.0, 0.85), 2, 4, 6, 8)


def test_zoom_that_would_invert_keeps_previous():
    engine = ViewportEngine(Viewport(1, 2, 1, 2))
    assert engine.zoom_at(1.0, 1.0, -1.0) == Viewport(1, 2, 1, 2)
    assert engine.zoom_at(1.0, 1.0, 0.0) == Viewport(1, 2, 1, 2)
    assert engine.zoom_at(0.5, 0.5, float("nan")) == Viewport(1, 2, 1, 2)


def test_zoom_never_returns_bad_viewport():
    viewports = [
        Viewport(-10, 10, -10, 10),
        Viewport(1000, 1010, 2.6, 2.7),
        Viewport(-5, -1, 3, 4),
        Viewport(-1e-9, 1e-9, 0, 1e-12),
    ]
    fractions = [0.0, 0.25, 0.5, 1.0]
    factors = [0.5, 0.85, 1.0, 1.15, 3.0]
    for vp, fx, fy, factor in itertools.product(viewports, fractions, fractions, factors):
        engine = ViewportEngine(vp)
        for _ in range(3):
            out = engine.zoom_at(fx, fy, factor)
            assert out.xmax > out.xmin and out.ymax > out.ymin


def test_zoom_in_then_out_is_not_identity_but_valid():
    engine = ViewportEngine(Viewport(10, 20, 10, 20))
    engine.zoom_at(0.3, 0.7, 0.85)
    out = engine.zoom_at(0.3, 0.7, 1.15)
    assert out.is_valid()


def test_pan_by_pixels():
    engine = ViewportEngine()
    base = Viewport(0, 10, 0, 20)
    _assert_viewport(engine.pan_by_pixels(50, -30, 100, 60, base), -5, 5, -10, 10)


def test_pan_preserves_ranges():
    base = Viewport(-3.2, 7.9, 1000.0, 1250.5)
    engine = ViewportEngine(base)
    for dx, dy in [(0, 0), (1, 1), (-250, 30), (999, -999), (0.5, -0.25)]:
        out = engine.pan_by_pixels(dx, dy, 640, 320, base)
        assert out.x_range == pytest.approx(base.x_range)
        assert out.y_range == pytest.approx(base.y_range)


def test_pan_uses_base_not_live_viewport():
    base = Viewport(0, 10, 0, 10)
    engine = ViewportEngine(base)
    engine.pan_by_pixels(10, 0, 100, 100, base)
    out = engine.pan_by_pixels(20, 0, 100, 100, base)
    _assert_viewport(out, -2, 8, 0, 10)


def test_pan_with_zero_size_keeps_viewport():
    engine = ViewportEngine(Viewport(0, 1, 0, 1))
    assert engine.pan_by_pixels(10, 10, 0, 100, engine.viewport) == Viewport(0, 1, 0, 1)
    assert engine.pan_by_pixels(10, 10, 100, -1, engine.viewport) == Viewport(0, 1, 0, 1)


def test_set_viewport_corrects_bad_ranges():
    engine = ViewportEngine()
    assert engine.set_viewport(Viewport(5, 1, 2, 3)) == Viewport(1, 5, 2, 3)
    assert engine.set_viewport(Viewport(1, 1, 4, 4)) == Viewport(0, 2, 3, 5)
    # non-finite input is ignored
    assert engine.set_viewport(Viewport(0, float("inf"), 0, 1)) == Viewport(0, 2, 3, 5)


def test_axis_ticks():
    ticks = axis_ticks(0.0, 10.0)
    assert [v for v, _ in ticks] == pytest.approx([0, 2, 4, 6, 8, 10])
    assert [label for _, label in ticks] == ["0.00", "2.00", "4.00", "6.00", "8.00", "10.00"]


def test_engine_ticks_follow_viewport():
    engine = ViewportEngine(Viewport(-0.5, 10.5, 40.2, 123.8))
    x_ticks, y_ticks = engine.ticks()
    assert x_ticks[0][1] == "-0.50" and x_ticks[-1][1] == "10.50"
    assert y_ticks[0][1] == "40.20" and y_ticks[-1][1] == "123.80"
    assert len(x_ticks) == len(y_ticks) == 6
