"""Tests for particle bursts and aging."""

import pytest

from pong_core.constants import (
    BOUNCE_PARTICLES,
    COURT_HEIGHT,
    COURT_WIDTH,
    HIT_PARTICLES,
    SCORE_PARTICLES,
    TAG_BALL,
    TAG_PADDLE_A,
    TAG_PADDLE_B,
)
from pong_core.data_models import Ball, Particle
from pong_core.particles import bounce_burst, hit_burst, score_burst
from pong_core.simulation import age_particles


def test_hit_burst_right_of_left_paddle(rng):
    burst = hit_burst((65.0, 300.0), TAG_PADDLE_A, 1, rng)
    assert len(burst) == HIT_PARTICLES
    for p in burst:
        assert (p.x, p.y) == (65.0, 300.0)
        assert 0 <= p.vx < 3
        assert -3 <= p.vy < 3
        assert 10 <= p.life < 30
        assert isinstance(p.life, int)
        assert 2 <= p.size < 6
        assert p.color == TAG_PADDLE_A


def test_hit_burst_left_of_right_paddle(rng):
    burst = hit_burst((735.0, 300.0), TAG_PADDLE_B, -1, rng)
    assert all(-3 < p.vx <= 0 for p in burst)
    assert all(p.color == TAG_PADDLE_B for p in burst)


def test_bounce_burst_off_top_wall(rng):
    ball = Ball(x=100, y=-2, speed_x=7, speed_y=5)
    burst = bounce_burst(ball, ball.y, 1, rng)
    assert len(burst) == BOUNCE_PARTICLES
    for p in burst:
        assert p.x == ball.x + ball.size / 2
        assert p.y == -2
        assert -2 <= p.vx < 2
        assert 0 <= p.vy < 2
        assert 5 <= p.life < 20
        assert p.color == TAG_BALL


def test_bounce_burst_off_bottom_wall(rng):
    ball = Ball(x=100, y=590, speed_x=7, speed_y=-5)
    burst = bounce_burst(ball, ball.y + ball.size, -1, rng)
    assert all(p.y == 606 for p in burst)
    assert all(-2 < p.vy <= 0 for p in burst)


@pytest.mark.parametrize("edge_x, sign", [(0, 1), (COURT_WIDTH, -1)])
def test_score_burst_sprays_into_court(rng, edge_x, sign):
    burst = score_burst(edge_x, TAG_PADDLE_B, COURT_HEIGHT, rng)
    assert len(burst) == SCORE_PARTICLES
    for p in burst:
        assert p.x == edge_x
        assert 0 <= p.y < COURT_HEIGHT
        assert 0 <= p.vx * sign < 5
        assert 20 <= p.life < 50
        assert 3 <= p.size < 8


def test_score_burst_spans_court_height(rng):
    ys = [p.y for p in score_burst(0, TAG_PADDLE_A, COURT_HEIGHT, rng)]
    assert max(ys) - min(ys) > COURT_HEIGHT / 4


def _particle(life, vx=1.0, vy=-2.0):
    return Particle(x=10.0, y=10.0, vx=vx, vy=vy, life=life, size=3.0, color=TAG_BALL)


class TestAgeParticles:
    def test_moves_and_decrements(self):
        (p,) = age_particles([_particle(5)])
        assert (p.x, p.y) == (11.0, 8.0)
        assert p.life == 4

    def test_time_scale_scales_motion_not_life(self):
        (p,) = age_particles([_particle(5)], time_scale=2.0)
        assert (p.x, p.y) == (12.0, 6.0)
        assert p.life == 4

    def test_removes_exactly_the_expired(self):
        particles = [_particle(1), _particle(2), _particle(1), _particle(10), _particle(0)]
        alive = age_particles(particles)
        assert len(alive) == 2
        assert sorted(p.life for p in alive) == [1, 9]

    def test_empty(self):
        assert age_particles([]) == []

    def test_burst_drains_to_empty(self, rng):
        particles = hit_burst((0.0, 0.0), TAG_PADDLE_A, 1, rng)
        for _ in range(30):
            before = len(particles)
            expiring = sum(1 for p in particles if p.life <= 1)
            particles = age_particles(particles)
            assert len(particles) == before - expiring
        assert particles == []
