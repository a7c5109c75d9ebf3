#!/usr/bin/env python3
"""
Collision handling for Pickleball Pong.

Two kinds of contact are resolved each tick while the ball is in play:
- Walls: the ball reflects off the top and bottom edges (vertical speed flips sign)
- Paddles: the ball leaves at a fixed horizontal speed with a vertical component that
  depends on where it met the paddle (up to +/- 45 degrees at the tips)

Paddle checks are one-sided: paddle A only catches a ball moving left and paddle B only a
ball moving right, so a ball still overlapping a paddle on the tick after a bounce is not
resolved twice.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import BALL_SPEED, MAX_BOUNCE_ANGLE
from .data_models import Ball, Paddle
from .vector_utils import clamp, spans_overlap


class CollisionSettings:
    """Container for collision-related settings."""
    def __init__(self, ball_speed: float = BALL_SPEED, max_bounce_angle: float = MAX_BOUNCE_ANGLE):
        self.ball_speed = float(ball_speed)
        self.max_bounce_angle = float(max_bounce_angle)


@dataclass
class PaddleHit:
    """Outcome of a paddle contact, used to spawn the hit burst."""
    paddle: Paddle
    point: Tuple[float, float]
    direction: int  # horizontal side away from the paddle
    angle: float


@dataclass
class WallBounce:
    edge_y: float  # the ball edge that crossed the wall
    away: int  # +1 off the top wall, -1 off the bottom wall


def bounce_off_walls(ball: Ball, court_height: float) -> Optional[WallBounce]:
    """
    Reflect the ball off the top or bottom wall.

    The flip only happens while the ball is still heading into the crossed wall, so a ball
    that overshot the edge is not flipped back again on the next tick.
    """
    if ball.y <= 0 and ball.speed_y < 0:
        ball.speed_y = -ball.speed_y
        return WallBounce(edge_y=ball.y, away=1)
    if ball.y + ball.size >= court_height and ball.speed_y > 0:
        ball.speed_y = -ball.speed_y
        return WallBounce(edge_y=ball.y + ball.size, away=-1)
    return None


def normalized_offset(ball: Ball, paddle: Paddle) -> float:
    """Ball center relative to paddle center in [-1, 1]; positive means above center."""
    half = paddle.height / 2
    if half <= 0:
        return 0.0
    _, by = ball.center
    return clamp((paddle.center_y - by) / half, -1.0, 1.0)


def _deflect(ball: Ball, paddle: Paddle, direction: int, settings: CollisionSettings) -> float:
    angle = normalized_offset(ball, paddle) * settings.max_bounce_angle
    ball.speed_x = direction * settings.ball_speed
    ball.speed_y = -settings.ball_speed * math.sin(angle)
    return angle


def _left_contact(ball: Ball, paddle: Paddle) -> bool:
    return (ball.x <= paddle.right
            and spans_overlap(ball.y, ball.size, paddle.y, paddle.height)
            and ball.speed_x < 0)


def _right_contact(ball: Ball, paddle: Paddle) -> bool:
    return (ball.x + ball.size >= paddle.x
            and spans_overlap(ball.y, ball.size, paddle.y, paddle.height)
            and ball.speed_x > 0)


def handle_paddle_collisions(ball: Ball, left: Paddle, right: Paddle,
                             settings: Optional[CollisionSettings] = None) -> List[PaddleHit]:
    """
    Detect and resolve ball/paddle contact for both paddles.

    Returns the hits that happened this tick (at most one per paddle).
    """
    if settings is None:
        settings = CollisionSettings()

    hits: List[PaddleHit] = []
    _, cy = ball.center

    if _left_contact(ball, left):
        angle = _deflect(ball, left, 1, settings)
        hits.append(PaddleHit(paddle=left, point=(ball.x, cy), direction=1, angle=angle))

    if _right_contact(ball, right):
        angle = _deflect(ball, right, -1, settings)
        hits.append(PaddleHit(paddle=right, point=(ball.x + ball.size, cy), direction=-1, angle=angle))

    return hits
