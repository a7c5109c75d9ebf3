#!/usr/bin/env python3
"""
Input mapping for Pickleball Pong.

Translates a snapshot of key states into per-tick intents, then applies them:
- paddle A and paddle B move up/down by `speed` pixels per tick (scaled by time-scale)
- serve puts a held ball in play; it is ignored while the ball is already active
- quit clears the running flag; the driver stops between frames

Key identifiers follow pygame.key.name() ("w", "up", "space", ...). Keys that are not
bound to anything are ignored.
"""
import logging
from dataclasses import dataclass
from typing import Mapping, Tuple

from .data_models import GameState, Paddle
from .vector_utils import clamp

logger = logging.getLogger(__name__)

KeySnapshot = Mapping[str, bool]


@dataclass(frozen=True)
class KeyBindings:
    """Key names per action; any key in a tuple triggers the action."""
    paddle_a_up: Tuple[str, ...] = ("w",)
    paddle_a_down: Tuple[str, ...] = ("s",)
    paddle_b_up: Tuple[str, ...] = ("up",)
    paddle_b_down: Tuple[str, ...] = ("down",)
    serve: Tuple[str, ...] = ("space",)
    quit: Tuple[str, ...] = ("escape",)

    def all_keys(self) -> Tuple[str, ...]:
        return (self.paddle_a_up + self.paddle_a_down + self.paddle_b_up
                + self.paddle_b_down + self.serve + self.quit)


DEFAULT_BINDINGS = KeyBindings()


@dataclass(frozen=True)
class InputIntent:
    """Direction per paddle is -1 (up), 0 or +1 (down)."""
    paddle_a_dir: int = 0
    paddle_b_dir: int = 0
    serve: bool = False
    quit: bool = False


def _pressed(keys: KeySnapshot, names: Tuple[str, ...]) -> bool:
    return any(keys.get(name, False) for name in names)


def _direction(keys: KeySnapshot, up: Tuple[str, ...], down: Tuple[str, ...]) -> int:
    return int(_pressed(keys, down)) - int(_pressed(keys, up))


def map_keys(keys: KeySnapshot, bindings: KeyBindings = DEFAULT_BINDINGS) -> InputIntent:
    """Read one key snapshot into an intent."""
    return InputIntent(
        paddle_a_dir=_direction(keys, bindings.paddle_a_up, bindings.paddle_a_down),
        paddle_b_dir=_direction(keys, bindings.paddle_b_up, bindings.paddle_b_down),
        serve=_pressed(keys, bindings.serve),
        quit=_pressed(keys, bindings.quit),
    )


def move_paddle(paddle: Paddle, direction: int, court_height: float, time_scale: float = 1.0) -> None:
    """Step the paddle and clamp it to [0, court_height - paddle.height]."""
    paddle.y += direction * paddle.speed * time_scale
    paddle.y = clamp(paddle.y, 0.0, court_height - paddle.height)


def apply_intent(state: GameState, intent: InputIntent, time_scale: float = 1.0) -> None:
    """Apply an intent to the state in place."""
    move_paddle(state.paddle_a, intent.paddle_a_dir, state.court_height, time_scale)
    move_paddle(state.paddle_b, intent.paddle_b_dir, state.court_height, time_scale)

    if intent.serve and not state.ball.active:
        state.ball.active = True
        logger.debug("Serve at tick %d (speed %.1f, %.1f)", state.tick, state.ball.speed_x, state.ball.speed_y)

    if intent.quit and state.running:
        state.running = False
        logger.info("Quit requested at tick %d", state.tick)
