"""Tests for Controls action dispatch."""
from __future__ import annotations

import pytest
from bounce.config import Configuration
from bounce.controls import BACKGROUND_PALETTE, OBJECT_PALETTE, Controls
from bounce.session import Session


def make_controls(**overrides) -> tuple[Session, Controls]:
    session = Session(Configuration(**overrides))
    return session, Controls(session)


def test_unknown_action():
    _, controls = make_controls()
    assert controls.dispatch("warp") is False


def test_all_actions_listed():
    _, controls = make_controls()
    assert set(controls.actions) == {
        "toggle", "reset", "faster", "slower", "bigger", "smaller",
        "longer", "shorter", "jitter", "sound", "object_color", "background_color",
    }


def test_toggle_twice():
    session, controls = make_controls()
    assert controls.dispatch("toggle")
    assert session.playing
    controls.dispatch("toggle")
    assert not session.playing


def test_reset_stops_playback():
    session, controls = make_controls(duration=10)
    controls.dispatch("toggle")
    session.timer.tick(3.0)
    controls.dispatch("reset")
    assert not session.playing
    assert session.timer.remaining == 10.0


class TestSliders:
    def test_speed_steps_and_clamps(self):
        session, controls = make_controls(speed=1980)
        controls.dispatch("faster")
        assert session.config.speed == 2000.0
        session.set_speed(30)
        controls.dispatch("slower")
        assert session.config.speed == 10.0

    def test_size_steps_and_clamps(self):
        session, controls = make_controls(radius=20)
        controls.dispatch("bigger")
        assert session.config.radius == 25.0
        session.set_radius(6)
        controls.dispatch("smaller")
        assert session.config.radius == 5.0

    def test_duration_steps_while_idle(self):
        session, controls = make_controls(duration=30)
        controls.dispatch("longer")
        assert session.timer.remaining == 35.0
        session.set_duration(3)
        controls.dispatch("shorter")
        assert session.config.duration == 1.0

    def test_duration_locked_while_running(self):
        session, controls = make_controls(duration=30)
        controls.dispatch("toggle")
        controls.dispatch("longer")
        assert session.config.duration == 30.0


def test_flag_toggles():
    session, controls = make_controls()
    controls.dispatch("jitter")
    controls.dispatch("sound")
    assert session.config.jitter_enabled
    assert not session.config.sound_enabled


class TestColors:
    def test_object_color_cycles(self):
        session, controls = make_controls()
        seen = []
        for _ in range(len(OBJECT_PALETTE)):
            controls.dispatch("object_color")
            seen.append(session.config.object_color)
        assert seen[-1] == OBJECT_PALETTE[0]
        assert set(seen) == set(OBJECT_PALETTE)

    def test_background_from_outside_palette(self):
        session, controls = make_controls(background_color=(1, 2, 3))
        controls.dispatch("background_color")
        assert session.config.background_color == BACKGROUND_PALETTE[0]

    @pytest.mark.parametrize("action", ["object_color", "background_color"])
    def test_colors_are_valid_rgb(self, action):
        session, controls = make_controls()
        controls.dispatch(action)
        for color in (session.config.object_color, session.config.background_color):
            assert len(color) == 3
            assert all(0 <= c <= 255 for c in color)
