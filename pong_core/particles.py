#!/usr/bin/env python3
"""
Particle bursts for Pickleball Pong.

Each function turns one simulation event into a batch of particles:
- hit: ball meets a paddle; sparks fly away from the paddle in the paddle's color
- bounce: ball meets the top or bottom wall; small puffs in the ball's color
- score: ball leaves the court; a curtain of particles along the goal line

All draws are uniform over the stated half-open ranges. Aging (move, decrement life,
remove the dead) is done by the simulation tick, see simulation.age_particles.
"""
import random
from typing import List, Tuple

from .constants import (
    BOUNCE_LIFE,
    BOUNCE_PARTICLES,
    HIT_LIFE,
    HIT_PARTICLES,
    SCORE_LIFE,
    SCORE_PARTICLES,
)
from .data_models import Ball, Particle


def _life(rng: random.Random, life_range: Tuple[int, int]) -> int:
    return rng.randrange(life_range[0], life_range[1])


def hit_burst(point: Tuple[float, float], color: str, direction: int,
              rng: random.Random) -> List[Particle]:
    """
    Sparks at a paddle contact point.

    Args:
        point: Contact point (x, y).
        color: Color tag of the paddle that was hit.
        direction: +1 or -1, the horizontal side away from the paddle.
        rng: Random source.
    """
    x, y = point
    return [
        Particle(
            x=x,
            y=y,
            vx=rng.random() * 3 * direction,
            vy=rng.random() * 6 - 3,
            life=_life(rng, HIT_LIFE),
            size=rng.random() * 4 + 2,
            color=color,
        )
        for _ in range(HIT_PARTICLES)
    ]


def bounce_burst(ball: Ball, edge_y: float, away: int, rng: random.Random) -> List[Particle]:
    """
    Puffs where the ball touched a wall.

    `edge_y` is the crossed edge of the ball; `away` is +1 for the top wall
    (puffs drift down) and -1 for the bottom wall.
    """
    cx = ball.x + ball.size / 2
    return [
        Particle(
            x=cx,
            y=edge_y,
            vx=rng.random() * 4 - 2,
            vy=rng.random() * 2 * away,
            life=_life(rng, BOUNCE_LIFE),
            size=rng.random() * 3 + 2,
            color=ball.color,
        )
        for _ in range(BOUNCE_PARTICLES)
    ]


def score_burst(edge_x: float, color: str, court_height: float,
                rng: random.Random) -> List[Particle]:
    # the left goal line sprays right, the right one sprays left
    inward = 1 if edge_x <= 0 else -1
    return [
        Particle(
            x=edge_x,
            y=rng.random() * court_height,
            vx=rng.random() * 5 * inward,
            vy=rng.random() * 6 - 3,
            life=_life(rng, SCORE_LIFE),
            size=rng.random() * 5 + 3,
            color=color,
        )
        for _ in range(SCORE_PARTICLES)
    ]
