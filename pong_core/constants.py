#!/usr/bin/env python3
"""
Shared constants for Pickleball Pong (pixels and ticks unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
simulation, the renderer and the tests.
"""
import math

# Court geometry
COURT_WIDTH = 800
COURT_HEIGHT = 600

# Paddles
PADDLE_WIDTH = 15
PADDLE_HEIGHT = 100
PADDLE_MARGIN = 50  # distance from the side wall to the paddle's outer face
PADDLE_SPEED = 8  # pixels per tick

# Ball
BALL_SIZE = 16
BALL_SPEED = 7  # pixels per tick, horizontal magnitude is always this value
BALL_SERVE_VERTICAL_FACTOR = 0.7
MAX_BOUNCE_ANGLE = math.pi / 4  # 45 degrees at the paddle tip
TRAIL_LENGTH = 8

# Particle bursts: (count, life range [lo, hi))
HIT_PARTICLES = 10
HIT_LIFE = (10, 30)
BOUNCE_PARTICLES = 5
BOUNCE_LIFE = (5, 20)
SCORE_PARTICLES = 20
SCORE_LIFE = (20, 50)

# Color tags resolved by the active theme
TAG_PADDLE_A = "paddle_a"
TAG_PADDLE_B = "paddle_b"
TAG_BALL = "ball"

# Timing
NOMINAL_FRAME_SECONDS = 1 / 60.0  # time-scale 1.0 corresponds to one of these
MAX_TIME_SCALE = 3.0  # cap after a stall so the ball cannot tunnel through a paddle
DEFAULT_FPS = 60
