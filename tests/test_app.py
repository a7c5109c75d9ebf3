"""Smoke tests for the pygame renderer and the frame driver (dummy video driver)."""

import pytest

pygame = pytest.importorskip("pygame")

import pickleball_pong as app  # noqa: E402
from pong_core.config import GameConfig  # noqa: E402
from pong_core.constants import MAX_TIME_SCALE, NOMINAL_FRAME_SECONDS  # noqa: E402
from pong_core.themes_loader import load_theme  # noqa: E402


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    yield pygame.display.set_mode((800, 600))
    app._font_cache.clear()
    pygame.quit()


class FakePressed:
    def __init__(self, *names):
        self.codes = {pygame.key.key_code(n) for n in names}

    def __getitem__(self, code):
        return code in self.codes


@pytest.mark.parametrize("theme_name", ["court", "grid"])
def test_renderer_draws_without_touching_state(display, engine, theme_name):
    state = engine.new_game()
    state = engine.step(state, {"space": True})
    state.paddle_b.y = 250
    state.ball.x, state.ball.y, state.ball.speed_x = 785, 300, 7
    state = engine.step(state, {})
    assert state.particles

    before = state.copy()
    renderer = app.PygameRenderer(load_theme(theme_name), (800, 600))
    renderer.draw(display, state)
    assert state == before


def test_held_ball_prompt_frame(display, state):
    app.PygameRenderer(load_theme("court"), (800, 600)).draw(display, state)


def test_key_snapshot(display):
    snap = app.key_snapshot(FakePressed("w", "space"), ["w", "s", "space", "not-a-key"])
    assert snap == {"w": True, "s": False, "space": True}


def test_time_scale_modes():
    fixed = app.GameDriver(GameConfig(seed=1))
    assert fixed.time_scale(0.5) == 1.0

    variable = app.GameDriver(GameConfig(seed=1, fixed_step=False))
    assert variable.time_scale(NOMINAL_FRAME_SECONDS) == pytest.approx(1.0)
    assert variable.time_scale(NOMINAL_FRAME_SECONDS / 2) == pytest.approx(0.5)
    assert variable.time_scale(1.0) == MAX_TIME_SCALE


def test_driver_frame_advances_one_tick(display, monkeypatch):
    driver = app.GameDriver(GameConfig(seed=3))
    driver.surface = display
    driver.renderer = app.PygameRenderer(driver.theme, display.get_size())
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: FakePressed("space"))
    driver.frame(NOMINAL_FRAME_SECONDS)
    assert driver.state.tick == 1
    assert driver.state.ball.active


def test_window_close_stops_driver(display):
    driver = app.GameDriver(GameConfig(seed=3))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    driver.handle_events()
    assert driver.state.running is False


def test_parse_args_overrides_env():
    base = GameConfig(theme="court", fps=60)
    cfg = app.parse_args(["--theme", "grid", "--fps", "30", "--seed", "9", "--variable-step",
                          "--log-level", "debug"], base)
    assert cfg == GameConfig(theme="grid", fps=30, seed=9, fixed_step=False, log_level="DEBUG")


def test_parse_args_defaults_from_env():
    base = GameConfig(theme="grid", fps=45, seed=2, fixed_step=False)
    assert app.parse_args([], base) == base


def test_parse_args_rejects_unknown_theme():
    with pytest.raises(SystemExit):
        app.parse_args(["--theme", "plaid"], GameConfig())
