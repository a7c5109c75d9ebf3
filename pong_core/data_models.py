#!/usr/bin/env python3
"""
Data models for Pickleball Pong.

This module defines the records shared between the simulation engine and the renderer.

Units and usage
- positions are top-left corners in pixels, velocities are pixels per tick.
- colors are tags (see constants.TAG_*) resolved to RGB by the active theme.
- trail stores the most recent ball centers; the deque's maxlen evicts the oldest first.
- GameState is owned by the driver and handed to SimulationEngine.step, which returns the
  next state; the renderer only reads it.
"""
import copy
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple

from .constants import (
    BALL_SIZE,
    COURT_HEIGHT,
    COURT_WIDTH,
    PADDLE_HEIGHT,
    PADDLE_MARGIN,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    TAG_BALL,
    TAG_PADDLE_A,
    TAG_PADDLE_B,
    TRAIL_LENGTH,
)


@dataclass
class Paddle:
    """
    One player's paddle.

    Fields:
    - x: Fixed horizontal position of the left face
    - y: Vertical position of the top edge, kept in [0, court_height - height]
    - width, height: Fixed size in pixels
    - color: Color tag, also inherited by the hit bursts this paddle triggers
    - score: Points won, only ever incremented by the simulation
    - speed: Vertical step per tick
    """
    x: float
    y: float
    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    color: str = TAG_PADDLE_A
    score: int = 0
    speed: float = PADDLE_SPEED

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Ball:
    """
    The ball. `active` is False while it is held at center waiting for a serve.
    """
    x: float
    y: float
    speed_x: float
    speed_y: float
    size: float = BALL_SIZE
    color: str = TAG_BALL
    active: bool = False
    trail: Deque[Tuple[float, float]] = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.size / 2, self.y + self.size / 2)

    def add_trail_point(self) -> None:
        """Append the current center to the trail."""
        self.trail.append(self.center)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    size: float
    color: str


@dataclass
class GameState:
    """
    Full session state for one frame.

    `running` is the cooperative stop flag checked by the driver between frames;
    `tick` counts simulation steps taken so far.
    """
    paddle_a: Paddle
    paddle_b: Paddle
    ball: Ball
    particles: List[Particle] = field(default_factory=list)
    court_width: float = COURT_WIDTH
    court_height: float = COURT_HEIGHT
    running: bool = True
    tick: int = 0

    @property
    def paddles(self) -> Tuple[Paddle, Paddle]:
        return (self.paddle_a, self.paddle_b)

    def copy(self) -> "GameState":
        """Independent copy; mutating it never touches this state."""
        return copy.deepcopy(self)


def centered_paddle_y(court_height: float = COURT_HEIGHT, height: float = PADDLE_HEIGHT) -> float:
    return court_height / 2 - height / 2


def make_paddles(court_width: float = COURT_WIDTH,
                 court_height: float = COURT_HEIGHT) -> Tuple[Paddle, Paddle]:
    """Left (A) and right (B) paddles at their fixed columns, vertically centered."""
    y = centered_paddle_y(court_height)
    left = Paddle(x=PADDLE_MARGIN, y=y, color=TAG_PADDLE_A)
    right = Paddle(x=court_width - PADDLE_MARGIN - PADDLE_WIDTH, y=y, color=TAG_PADDLE_B)
    return left, right
