#!/usr/bin/env python3
"""
Simulation engine for Pickleball Pong

Responsibilities
- Apply the per-tick input intent (paddle steps, serve, quit).
- Advance the ball, reflect it off walls and paddles, and detect points.
- Spawn particle bursts for hits, wall bounces and points, and age existing particles.

Tick order
1) input  2) ball: trail sample, move, walls, paddles, scoring  3) particles
The order matters: a ball that is deflected by a paddle on the same tick it would have
crossed the goal line stays in play.

Units and conventions
- Pixels and ticks. A time-scale of 1.0 is one nominal 1/60 s frame; displacements are
  multiplied by it, while trail sampling and particle life run once per tick.

Ownership
- step() never mutates the state it is given: it works on a copy and returns it. The
  driver keeps the returned state for the next frame and hands it to the renderer.
"""
import logging
import random
from typing import List, Optional

from .collisions import CollisionSettings, bounce_off_walls, handle_paddle_collisions
from .constants import (
    BALL_SERVE_VERTICAL_FACTOR,
    BALL_SIZE,
    BALL_SPEED,
    COURT_HEIGHT,
    COURT_WIDTH,
)
from .data_models import Ball, GameState, Particle, make_paddles
from .input_mapper import DEFAULT_BINDINGS, KeyBindings, KeySnapshot, apply_intent, map_keys
from .particles import bounce_burst, hit_burst, score_burst

logger = logging.getLogger(__name__)


def make_ball(rng: random.Random, direction: Optional[int] = None,
              court_width: float = COURT_WIDTH, court_height: float = COURT_HEIGHT,
              speed: float = BALL_SPEED) -> Ball:
    """
    A held ball at center court.

    Args:
        rng: Random source for the serve direction(s).
        direction: +1 to serve right, -1 to serve left, None to pick at random.
    """
    if direction is None:
        direction = 1 if rng.random() > 0.5 else -1
    vertical = BALL_SERVE_VERTICAL_FACTOR if rng.random() > 0.5 else -BALL_SERVE_VERTICAL_FACTOR
    return Ball(
        x=court_width / 2 - BALL_SIZE / 2,
        y=court_height / 2 - BALL_SIZE / 2,
        speed_x=speed * direction,
        speed_y=speed * vertical,
        active=False,
    )


def age_particles(particles: List[Particle], time_scale: float = 1.0) -> List[Particle]:
    """Move every particle, take one life from it and return the survivors."""
    alive: List[Particle] = []
    for p in particles:
        p.x += p.vx * time_scale
        p.y += p.vy * time_scale
        p.life -= 1
        if p.life > 0:
            alive.append(p)
    return alive


class SimulationEngine:
    """
    Fixed-cadence Pong simulation.

    The engine holds only configuration and the random source; all game data lives in the
    GameState passed through step().
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None,
                 bindings: KeyBindings = DEFAULT_BINDINGS,
                 collision_settings: Optional[CollisionSettings] = None):
        """
        Args:
            rng: Random source; built from `seed` when omitted.
            seed: Seed for a fresh random source (None = nondeterministic).
            bindings: Key names per action.
            collision_settings: Ball speed and maximum bounce angle.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.bindings = bindings
        self.collision_settings = collision_settings or CollisionSettings()

    def new_game(self, court_width: float = COURT_WIDTH, court_height: float = COURT_HEIGHT) -> GameState:
        left, right = make_paddles(court_width, court_height)
        ball = make_ball(self.rng, None, court_width, court_height, self.collision_settings.ball_speed)
        return GameState(paddle_a=left, paddle_b=right, ball=ball,
                         court_width=court_width, court_height=court_height)

    def reset_ball(self, state: GameState, direction: Optional[int] = None) -> None:
        """Replace the ball with a held one at center court."""
        state.ball = make_ball(self.rng, direction, state.court_width, state.court_height,
                               self.collision_settings.ball_speed)

    def step(self, state: GameState, keys: KeySnapshot, time_scale: float = 1.0) -> GameState:
        """
        Advance the game by one tick.

        Args:
            state: Current state (left untouched).
            keys: Snapshot of key name -> pressed taken at tick start.
            time_scale: Frame length relative to 1/60 s (>= 0).

        Returns:
            The next state.
        """
        nxt = state.copy()
        apply_intent(nxt, map_keys(keys, self.bindings), time_scale)

        if nxt.ball.active:
            self._advance_ball(nxt, time_scale)

        nxt.particles = age_particles(nxt.particles, time_scale)
        nxt.tick += 1
        return nxt

    def _advance_ball(self, state: GameState, time_scale: float) -> None:
        ball = state.ball
        ball.add_trail_point()
        ball.x += ball.speed_x * time_scale
        ball.y += ball.speed_y * time_scale

        bounce = bounce_off_walls(ball, state.court_height)
        if bounce is not None:
            state.particles.extend(bounce_burst(ball, bounce.edge_y, bounce.away, self.rng))
            logger.debug("Wall bounce at (%.1f, %.1f)", ball.x, ball.y)

        for hit in handle_paddle_collisions(ball, state.paddle_a, state.paddle_b, self.collision_settings):
            state.particles.extend(hit_burst(hit.point, hit.paddle.color, hit.direction, self.rng))
            logger.debug("Paddle %s hit, angle %.2f rad", hit.paddle.color, hit.angle)

        self._check_score(state)

    def _check_score(self, state: GameState) -> None:
        ball = state.ball
        if ball.x + ball.size < 0:
            state.paddle_b.score += 1
            state.particles.extend(score_burst(0, state.paddle_b.color, state.court_height, self.rng))
            self.reset_ball(state, -1)
            logger.info("Point right player: %d - %d", state.paddle_a.score, state.paddle_b.score)
        elif ball.x > state.court_width:
            state.paddle_a.score += 1
            state.particles.extend(score_burst(state.court_width, state.paddle_a.color,
                                               state.court_height, self.rng))
            self.reset_ball(state, 1)
            logger.info("Point left player: %d - %d", state.paddle_a.score, state.paddle_b.score)
