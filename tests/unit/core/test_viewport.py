"""Tests for the pan/zoom viewport controller."""

from __future__ import annotations

import random

import pytest

from world_graph.config.settings import ViewportLimits
from world_graph.core.viewport import ViewportController, ViewportState


class TestZoom:
    def test_wheel_zooms_by_sensitivity(self):
        viewport = ViewportController()

        assert viewport.on_wheel(-200) is True
        assert viewport.scale == pytest.approx(1.2)

        viewport.on_wheel(500)
        assert viewport.scale == pytest.approx(0.7)

    def test_wheel_clamps(self):
        viewport = ViewportController()

        viewport.on_wheel(100_000)
        assert viewport.scale == 0.2

        viewport.on_wheel(-100_000)
        assert viewport.scale == 4.0

    def test_buttons_step_by_fixed_amount(self):
        viewport = ViewportController()

        viewport.zoom_in()
        assert viewport.scale == pytest.approx(1.2)
        viewport.zoom_out()
        viewport.zoom_out()
        assert viewport.scale == pytest.approx(0.8)

    def test_buttons_clamp(self):
        viewport = ViewportController()

        for _ in range(30):
            viewport.zoom_in()
        assert viewport.scale == 4.0

        for _ in range(30):
            viewport.zoom_out()
        assert viewport.scale == 0.2

    def test_random_sequences_stay_in_bounds(self):
        rng = random.Random(1234)
        viewport = ViewportController()

        for _ in range(500):
            op = rng.choice(["wheel", "in", "out"])
            if op == "wheel":
                viewport.on_wheel(rng.uniform(-3000, 3000))
            elif op == "in":
                viewport.zoom_in()
            else:
                viewport.zoom_out()
            assert 0.2 <= viewport.scale <= 4.0

    def test_custom_limits(self):
        viewport = ViewportController(
            ViewportLimits(min_scale=0.5, max_scale=2.0, zoom_step=1.0)
        )

        viewport.zoom_in()
        viewport.zoom_in()
        assert viewport.scale == 2.0
        viewport.on_wheel(10_000)
        assert viewport.scale == 0.5

    def test_zoom_keeps_offset(self):
        viewport = ViewportController()
        viewport.on_pointer_down((0, 0))
        viewport.on_pointer_move((30, 40))

        viewport.on_wheel(-300)

        assert (viewport.offset_x, viewport.offset_y) == (30, 40)


class TestPan:
    def test_move_without_drag_is_noop(self):
        viewport = ViewportController()
        viewport.on_pointer_move((50, 50))

        assert viewport.state == ViewportState()

    def test_drag_pans_by_delta(self):
        viewport = ViewportController()
        viewport.on_pointer_down((10, 10))
        viewport.on_pointer_move((25, 5))

        assert (viewport.offset_x, viewport.offset_y) == (15, -5)
        assert viewport.last_pointer_pos == (25, 5)

    def test_drag_additivity(self):
        split = ViewportController()
        split.on_pointer_down((0, 0))
        split.on_pointer_move((10, 5))
        split.on_pointer_move((13, -2))
        split.on_pointer_up()

        single = ViewportController()
        single.on_pointer_down((0, 0))
        single.on_pointer_move((13, -2))
        single.on_pointer_up()

        assert split.state == single.state

    def test_separate_drags_accumulate(self):
        viewport = ViewportController()
        for start, end in (((0, 0), (10, 0)), ((100, 100), (100, 20))):
            viewport.on_pointer_down(start)
            viewport.on_pointer_move(end)
            viewport.on_pointer_up()

        assert (viewport.offset_x, viewport.offset_y) == (10, -80)

    @pytest.mark.parametrize("release", ["on_pointer_up", "on_pointer_leave_canvas"])
    def test_release_stops_drag(self, release):
        viewport = ViewportController()
        viewport.on_pointer_down((0, 0))
        getattr(viewport, release)()
        viewport.on_pointer_move((99, 99))

        assert not viewport.is_dragging
        assert (viewport.offset_x, viewport.offset_y) == (0, 0)

    def test_repeated_up_is_idempotent(self):
        viewport = ViewportController()
        viewport.on_pointer_up()
        viewport.on_pointer_up()
        assert not viewport.is_dragging


class TestReset:
    def test_reset_view(self):
        viewport = ViewportController()
        viewport.on_pointer_down((0, 0))
        viewport.on_pointer_move((40, 40))
        viewport.zoom_in()

        viewport.reset_view()

        assert viewport.state == ViewportState(0.0, 0.0, 1.0)

    def test_reset_respects_limits_excluding_unit_scale(self):
        viewport = ViewportController(ViewportLimits(min_scale=1.5, max_scale=4.0))
        assert viewport.scale == 1.5

        viewport.zoom_in()
        viewport.reset_view()

        assert viewport.scale == 1.5
        assert (viewport.offset_x, viewport.offset_y) == (0.0, 0.0)


class TestViewportState:
    def test_transform_string(self):
        state = ViewportState(offset_x=12.5, offset_y=-3, scale=1.5)
        assert state.transform == "translate(12.5, -3) scale(1.5)"

    def test_to_screen(self):
        state = ViewportState(offset_x=10, offset_y=20, scale=2)
        assert state.to_screen((5, 5)) == (20, 30)
