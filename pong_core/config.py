"""Configuration for Pickleball Pong, read from environment variables."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_FPS
from .utils import try_bool, try_int

logger = logging.getLogger(__name__)

# Defaults
THEME = "court"
FPS = DEFAULT_FPS
FIXED_STEP = True
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class GameConfig:
    theme: str = THEME
    fps: int = FPS
    seed: Optional[int] = None
    fixed_step: bool = FIXED_STEP
    log_level: str = LOG_LEVEL


def _int_setting(env: Mapping[str, str], key: str, default: Optional[int],
                 minimum: Optional[int] = None) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    val = try_int(raw)
    if val is None or (minimum is not None and val < minimum):
        logger.warning("Ignoring invalid %s=%r, using %r", key, raw, default)
        return default
    return val


def _bool_setting(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    val = try_bool(raw)
    if val is None:
        logger.warning("Ignoring invalid %s=%r, using %r", key, raw, default)
        return default
    return val


def load_config(env: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from environment variables.

    Recognized: PONG_THEME, PONG_FPS, PONG_SEED, PONG_FIXED_STEP, PONG_LOG_LEVEL.
    Malformed values fall back to the defaults.
    """
    if env is None:
        env = os.environ
    return GameConfig(
        theme=env.get("PONG_THEME") or THEME,
        fps=_int_setting(env, "PONG_FPS", FPS, minimum=1),
        seed=_int_setting(env, "PONG_SEED", None),
        fixed_step=_bool_setting(env, "PONG_FIXED_STEP", FIXED_STEP),
        log_level=(env.get("PONG_LOG_LEVEL") or LOG_LEVEL).upper(),
    )


__all__ = [
    "THEME",
    "FPS",
    "FIXED_STEP",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "GameConfig",
    "load_config",
]
