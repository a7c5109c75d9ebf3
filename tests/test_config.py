"""Tests for environment configuration."""

import logging

from pong_core.config import GameConfig, load_config
from pong_core.utils import try_bool, try_int


def test_defaults():
    assert load_config({}) == GameConfig()
    cfg = GameConfig()
    assert cfg.theme == "court"
    assert cfg.fps == 60
    assert cfg.seed is None
    assert cfg.fixed_step is True


def test_values_from_env():
    cfg = load_config({
        "PONG_THEME": "grid",
        "PONG_FPS": "120",
        "PONG_SEED": "42",
        "PONG_FIXED_STEP": "false",
        "PONG_LOG_LEVEL": "debug",
    })
    assert cfg == GameConfig(theme="grid", fps=120, seed=42, fixed_step=False, log_level="DEBUG")


def test_invalid_values_fall_back(caplog):
    cfg = load_config({"PONG_FPS": "fast", "PONG_SEED": "x", "PONG_FIXED_STEP": "maybe"})
    assert cfg.fps == 60
    assert cfg.seed is None
    assert cfg.fixed_step is True
    assert "PONG_FPS" in caplog.text


def test_fps_must_be_positive():
    assert load_config({"PONG_FPS": "0"}).fps == 60


def test_try_helpers():
    assert try_int("12") == 12
    assert try_int("1.5") is None
    assert try_int(None) is None
    assert try_bool("Yes") is True
    assert try_bool("off") is False
    assert try_bool("nah") is None


def test_setup_logging_is_idempotent():
    from pong_core.logging_config import setup_logging

    logger = setup_logging("DEBUG", name="pong_test")
    setup_logging("WARNING", name="pong_test")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
