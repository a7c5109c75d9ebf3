#!/usr/bin/env python3
"""
Pickleball Pong application entry point: pygame renderer and frame driver.

What this module does
- Opens a pygame window and runs one frame loop on the main thread.
- Each frame: read window events and a key snapshot, advance the simulation one tick
  (pong_core.simulation.SimulationEngine), then draw the returned state.
- Draws with the selected theme: a pickleball court (lines, kitchen, net) or a neon grid.
  Themes only change colors and decoration, never the mechanics.

Frame model
- Single-threaded and sequential: input, simulation and drawing never interleave.
- Quitting (Escape or closing the window) clears GameState.running; the driver checks it
  between frames and exits after the current frame completes.

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python pickleball_pong.py --theme grid`

Controls
- Player 1: W/S   Player 2: Up/Down   Serve: Space   Quit: Esc
"""

import argparse
import logging
import sys
import time
from typing import Dict, Iterable, Optional, Sequence, Tuple

import pygame

from pong_core.config import GameConfig, load_config
from pong_core.constants import BALL_SIZE, MAX_TIME_SCALE, NOMINAL_FRAME_SECONDS
from pong_core.data_models import Ball, GameState, Paddle
from pong_core.input_mapper import DEFAULT_BINDINGS, KeyBindings
from pong_core.logging_config import setup_logging
from pong_core.simulation import SimulationEngine
from pong_core.themes_loader import Theme, list_themes, load_theme
from pong_core.vector_utils import clamp

logger = logging.getLogger(__name__)

# ============================================================
# Rendering constants
# ============================================================

COURT_INSET = 50  # court rectangle is inset this far from the window edge
KITCHEN_WIDTH = 120  # non-volley zone on each side of the net
NET_SEGMENT = 15
NET_GAP = 8
GRID_SPACING = 40
HANDLE_SIZE = (20, 30)
HANDLE_COLOR = (139, 69, 19)
HANDLE_GRIP_COLOR = (80, 40, 10)
PARTICLE_FULL_ALPHA_LIFE = 30.0

# ============================================================
# Color and text helpers
# ============================================================


def shade_color(color, amt: int) -> Tuple[int, int, int]:
    """Lighten (amt > 0) or darken (amt < 0) an RGB color."""
    return tuple(int(clamp(c + amt, 0, 255)) for c in color[:3])


def with_alpha(color, alpha: float) -> Tuple[int, int, int, int]:
    return (color[0], color[1], color[2], int(clamp(alpha, 0.0, 1.0) * 255))


_font_cache: Dict[Tuple[int, bool], "pygame.font.Font"] = {}


def get_font(size: int, bold: bool = False):
    if not pygame.font.get_init():
        pygame.font.init()
    key = (size, bold)
    font = _font_cache.get(key)
    if font is None:
        try:
            font = pygame.font.SysFont("couriernew,consolas,monospace", size, bold=bold)
        except (pygame.error, OSError):
            font = pygame.font.Font(None, size)
        _font_cache[key] = font
    return font


def draw_text(surface, text, pos, color, size=16, bold=False, anchor="center"):
    img = get_font(size, bold).render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect


# ============================================================
# Pygame Renderer
# ============================================================


class PygameRenderer:
    """
    Draws a GameState with a theme: decoration, paddles, particles, ball trail, ball and HUD.
    The state is only read.
    """

    def __init__(self, theme: Theme, size: Tuple[int, int]):
        self.theme = theme
        self.size = size
        # translucent layer for glows, trail, particles and panels
        self.overlay = pygame.Surface(size, pygame.SRCALPHA)

    def draw(self, surf, state: GameState) -> None:
        self.overlay.fill((0, 0, 0, 0))
        surf.fill(self.theme.background)

        if self.theme.decor == "grid":
            self.draw_grid(surf)
        else:
            self.draw_court(surf)

        for paddle in state.paddles:
            self.draw_paddle(surf, paddle, is_left=paddle is state.paddle_a)
        self.draw_particles(state)
        self.draw_ball(surf, state.ball)
        surf.blit(self.overlay, (0, 0))

        self.draw_scores(surf, state)
        if not state.ball.active:
            self.draw_serve_prompt(surf)
        self.draw_controls(surf)
        self.draw_title(surf)

    # -----------------------
    # Decoration
    # -----------------------

    def draw_court(self, surf):
        w, h = self.size
        t = self.theme
        court = pygame.Rect(COURT_INSET, COURT_INSET, w - 2 * COURT_INSET, h - 2 * COURT_INSET)
        pygame.draw.rect(surf, t.court, court)

        mid = w // 2
        kl = mid - KITCHEN_WIDTH
        kr = mid + KITCHEN_WIDTH
        kitchen = pygame.Surface((KITCHEN_WIDTH * 2, court.height), pygame.SRCALPHA)
        kitchen.fill(t.kitchen)
        surf.blit(kitchen, (kl, court.top))

        pygame.draw.rect(surf, t.line, court, 3)
        for x in (mid, kl, kr):
            pygame.draw.line(surf, t.line, (x, court.top), (x, court.bottom), 3)
        pygame.draw.line(surf, t.line, (court.left, h // 2), (kl, h // 2), 3)
        pygame.draw.line(surf, t.line, (kr, h // 2), (court.right, h // 2), 3)

        # net
        y = court.top + 5
        while y < court.bottom - 5:
            pygame.draw.line(surf, t.line, (mid, y), (mid, y + NET_SEGMENT), 4)
            y += NET_SEGMENT + NET_GAP

    def draw_grid(self, surf):
        w, h = self.size
        t = self.theme
        surf.fill(t.court, pygame.Rect(COURT_INSET, COURT_INSET, w - 2 * COURT_INSET, h - 2 * COURT_INSET))
        fine = shade_color(t.court, 25)
        for x in range(0, w + 1, GRID_SPACING):
            pygame.draw.line(surf, fine, (x, 0), (x, h), 1)
        for y in range(0, h + 1, GRID_SPACING):
            pygame.draw.line(surf, fine, (0, y), (w, y), 1)

        pygame.draw.rect(self.overlay, t.kitchen,
                         pygame.Rect(w // 2 - KITCHEN_WIDTH, 0, KITCHEN_WIDTH * 2, h))
        pygame.draw.line(surf, t.line, (w // 2, 0), (w // 2, h), 2)
        pygame.draw.line(surf, t.line, (0, 1), (w, 1), 2)
        pygame.draw.line(surf, t.line, (0, h - 2), (w, h - 2), 2)

    # -----------------------
    # Entities
    # -----------------------

    def draw_paddle(self, surf, paddle: Paddle, is_left: bool):
        color = self.theme.color_for(paddle.color)
        rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))

        pygame.draw.rect(self.overlay, with_alpha(color, 0.35), rect.inflate(10, 10), border_radius=4)
        pygame.draw.rect(surf, color, rect)

        # grip texture: every other twelfth of the face
        seg = paddle.height / 12
        grip = shade_color(color, -30)
        for i in range(0, 12, 2):
            pygame.draw.rect(surf, grip, pygame.Rect(int(paddle.x + 2), int(paddle.y + i * seg),
                                                     int(paddle.width - 4), max(1, int(seg))))

        hw, hh = HANDLE_SIZE
        hx = rect.right if is_left else rect.left - hw
        hy = int(paddle.center_y - hh / 2)
        pygame.draw.rect(surf, HANDLE_COLOR, pygame.Rect(hx, hy, hw, hh))
        pygame.draw.rect(surf, HANDLE_GRIP_COLOR, pygame.Rect(hx + 3, hy + 5, hw - 6, hh - 10))

    def draw_ball(self, surf, ball: Ball):
        n = len(ball.trail)
        for i, (tx, ty) in enumerate(ball.trail):
            frac = (i + 1) / n
            radius = max(1, int(BALL_SIZE * frac * 0.8 / 2))
            pygame.draw.circle(self.overlay, with_alpha(self.theme.trail, frac * 0.5), (int(tx), int(ty)), radius)

        color = self.theme.color_for(ball.color)
        cx, cy = ball.center
        center = (int(cx), int(cy))
        radius = int(ball.size / 2)
        pygame.draw.circle(self.overlay, with_alpha(color, 0.3), center, radius + 5)
        pygame.draw.circle(surf, color, center, radius)
        pygame.draw.circle(surf, shade_color(color, -30), center, max(1, int(radius * 0.7)))

    def draw_particles(self, state: GameState):
        for p in state.particles:
            alpha = p.life / PARTICLE_FULL_ALPHA_LIFE
            color = self.theme.color_for(p.color)
            pygame.draw.circle(self.overlay, with_alpha(color, alpha), (int(p.x), int(p.y)),
                               max(1, int(p.size / 2)))

    # -----------------------
    # HUD
    # -----------------------

    def _panel(self, surf, rect, border, width=2):
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(self.theme.panel)
        surf.blit(panel, rect.topleft)
        pygame.draw.rect(surf, border, rect, width)

    def draw_scores(self, surf, state: GameState):
        w, _ = self.size
        box = 60
        for paddle, cx in ((state.paddle_a, w // 4), (state.paddle_b, 3 * w // 4)):
            color = self.theme.color_for(paddle.color)
            rect = pygame.Rect(cx - box // 2, 20, box, box)
            self._panel(surf, rect, color, 3)
            draw_text(surf, str(paddle.score), rect.center, color, size=36, bold=True)

    def draw_serve_prompt(self, surf):
        w, h = self.size
        rect = pygame.Rect(w // 2 - 150, h // 2 + 50, 300, 40)
        self._panel(surf, rect, self.theme.line)
        pygame.draw.rect(surf, shade_color(self.theme.line, -120), rect.inflate(-8, -8), 1)
        draw_text(surf, "PRESS SPACE TO SERVE", rect.center, self.theme.text, size=20)

    def draw_controls(self, surf):
        w, h = self.size
        rect = pygame.Rect(10, h - 40, w - 20, 30)
        self._panel(surf, rect, self.theme.line)
        y = rect.centery
        draw_text(surf, "PLAYER 1: W/S", (30, y), self.theme.text, anchor="midleft")
        draw_text(surf, "PLAYER 2: UP/DOWN", (w // 2, y), self.theme.text)
        draw_text(surf, "QUIT: ESC", (w - 30, y), self.theme.text, anchor="midright")

    def draw_title(self, surf):
        w, _ = self.size
        font = get_font(36, True)
        tw, _ = font.size(self.theme.title)
        rect = pygame.Rect(0, 10, tw + 40, 60)
        rect.centerx = w // 2
        self._panel(surf, rect, self.theme.line, 3)
        stripe = shade_color(self.theme.line, -150)
        for y in range(rect.top + 4, rect.bottom - 4, 8):
            pygame.draw.line(surf, stripe, (rect.left + 3, y), (rect.right - 3, y), 1)
        draw_text(surf, self.theme.title, rect.center, self.theme.text, size=36, bold=True)


# ============================================================
# Input snapshot
# ============================================================


def key_snapshot(pressed, names: Iterable[str]) -> Dict[str, bool]:
    """
    Read the pressed state of the named keys into a plain dict.

    `pressed` is the sequence from pygame.key.get_pressed(); names that pygame does not
    know are left out.
    """
    snap: Dict[str, bool] = {}
    for name in names:
        try:
            code = pygame.key.key_code(name)
        except ValueError:
            continue
        snap[name] = bool(pressed[code])
    return snap


# ============================================================
# Frame driver
# ============================================================


class GameDriver:
    """
    Owns the GameState and the frame cadence. Runs input -> simulation -> render once per
    frame until the state stops running.
    """

    def __init__(self, config: GameConfig, bindings: KeyBindings = DEFAULT_BINDINGS):
        self.config = config
        self.bindings = bindings
        self.engine = SimulationEngine(seed=config.seed, bindings=bindings)
        self.state = self.engine.new_game()
        self.theme = load_theme(config.theme)
        self.surface = None
        self.clock = None
        self.renderer: Optional[PygameRenderer] = None

    def time_scale(self, real_dt: float) -> float:
        if self.config.fixed_step:
            return 1.0
        return clamp(real_dt / NOMINAL_FRAME_SECONDS, 0.0, MAX_TIME_SCALE)

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state.running = False

    def frame(self, real_dt: float) -> None:
        self.handle_events()
        keys = key_snapshot(pygame.key.get_pressed(), self.bindings.all_keys())
        self.state = self.engine.step(self.state, keys, self.time_scale(real_dt))
        self.renderer.draw(self.surface, self.state)
        pygame.display.flip()

    def run(self) -> None:
        pygame.init()
        size = (int(self.state.court_width), int(self.state.court_height))
        pygame.display.set_caption(self.theme.title.title())
        self.surface = pygame.display.set_mode(size)
        self.renderer = PygameRenderer(self.theme, size)
        self.clock = pygame.time.Clock()
        logger.info("Starting %s theme at %d fps (fixed step: %s)",
                    self.theme.name, self.config.fps, self.config.fixed_step)

        last_time = time.perf_counter()
        try:
            while self.state.running:
                now = time.perf_counter()
                real_dt = now - last_time
                last_time = now

                self.frame(real_dt)

                self.clock.tick(self.config.fps)
        finally:
            logger.info("Stopped after %d ticks, final score %d - %d", self.state.tick,
                        self.state.paddle_a.score, self.state.paddle_b.score)
            pygame.quit()


# ============================================================
# Application entry
# ============================================================


def parse_args(argv: Optional[Sequence[str]] = None, base: Optional[GameConfig] = None) -> GameConfig:
    """Command-line overrides on top of the environment configuration."""
    base = base or load_config()
    parser = argparse.ArgumentParser(description="Two-player Pickleball Pong (pygame)")
    parser.add_argument("--theme", choices=list_themes(), default=base.theme,
                        help="court skin (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=base.fps, help="frame rate cap")
    parser.add_argument("--seed", type=int, default=base.seed, help="seed for serve directions and particles")
    parser.add_argument("--variable-step", action="store_true", default=not base.fixed_step,
                        help="scale movement by the measured frame time")
    parser.add_argument("--log-level", default=base.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], type=str.upper)
    args = parser.parse_args(argv)
    if args.fps < 1:
        parser.error("--fps must be at least 1")
    return GameConfig(theme=args.theme, fps=args.fps, seed=args.seed,
                      fixed_step=not args.variable_step, log_level=args.log_level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    setup_logging(config.log_level)
    GameDriver(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
