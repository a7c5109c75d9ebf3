#!/usr/bin/env python3
"""
Theme (skin) loading utilities.

A theme is a palette plus a decoration style; every theme drives the same simulation.
Built-in themes are always available, and JSON files in pong_core/themes/ override or
extend them.

Schema
======
Theme JSON (themes/*.json):
{
  "name": "court",                    # key used by --theme / PONG_THEME
  "title": "PICKLEBALL PONG",
  "decor": "court",                   # "court" (lines, kitchen, net) | "grid"
  "background": [55, 115, 179],
  "court": [0, 141, 223],
  "line": [255, 255, 255],
  "kitchen": [255, 255, 255, 38],     # RGBA
  "text": [255, 255, 255],
  "panel": [0, 0, 60, 178],           # RGBA
  "trail": [0, 255, 100],
  "palette": {"paddle_a": [245, 5, 56], "paddle_b": [255, 0, 150], "ball": [189, 231, 101]}
}

Missing keys take the built-in court values.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import TAG_BALL, TAG_PADDLE_A, TAG_PADDLE_B

logger = logging.getLogger(__name__)

THEMES_DIR = os.path.join(os.path.dirname(__file__), "themes")
DEFAULT_THEME = "court"
DECOR_STYLES = ("court", "grid")

Color = Tuple[int, ...]


@dataclass
class Theme:
  name: str
  title: str
  decor: str
  background: Color
  court: Color
  line: Color
  kitchen: Color
  text: Color
  panel: Color
  trail: Color
  palette: Dict[str, Color] = field(default_factory=dict)

  def color_for(self, tag: str) -> Color:
    """RGB for a color tag; unknown tags render in the line color."""
    return self.palette.get(tag, self.line)


BUILTIN_THEMES: Dict[str, Theme] = {
  "court": Theme(
    name="court",
    title="PICKLEBALL PONG",
    decor="court",
    background=(55, 115, 179),
    court=(0, 141, 223),
    line=(255, 255, 255),
    kitchen=(255, 255, 255, 38),
    text=(255, 255, 255),
    panel=(0, 0, 60, 178),
    trail=(0, 255, 100),
    palette={TAG_PADDLE_A: (245, 5, 56), TAG_PADDLE_B: (255, 0, 150), TAG_BALL: (189, 231, 101)},
  ),
  "grid": Theme(
    name="grid",
    title="NEON PONG",
    decor="grid",
    background=(8, 8, 24),
    court=(14, 14, 38),
    line=(0, 200, 255),
    kitchen=(0, 200, 255, 24),
    text=(230, 230, 255),
    panel=(10, 0, 40, 190),
    trail=(0, 255, 100),
    palette={TAG_PADDLE_A: (0, 200, 255), TAG_PADDLE_B: (255, 0, 150), TAG_BALL: (0, 255, 100)},
  ),
}


def _read_json(path: str) -> Optional[dict]:
  try:
    with open(path, "r", encoding="utf-8") as f:
      data = json.load(f)
  except (OSError, ValueError) as exc:
    logger.warning("Skipping theme file %s: %s", path, exc)
    return None
  if not isinstance(data, dict):
    logger.warning("Skipping theme file %s: top level is not an object", path)
    return None
  return data


def _coerce_color(c, fallback: Color) -> Color:
  try:
    parts = [max(0, min(255, int(v))) for v in c]
  except (TypeError, ValueError):
    return fallback
  if len(parts) not in (3, 4):
    return fallback
  return tuple(parts)


def theme_from_dict(data: dict, base: Optional[Theme] = None) -> Theme:
  """Build a theme from parsed JSON, filling gaps from `base` (court by default)."""
  base = base or BUILTIN_THEMES[DEFAULT_THEME]
  decor = data.get("decor", base.decor)
  if decor not in DECOR_STYLES:
    logger.warning("Unknown decor %r in theme %r, using %r", decor, data.get("name"), base.decor)
    decor = base.decor
  palette = dict(base.palette)
  raw_palette = data.get("palette")
  if isinstance(raw_palette, dict):
    for tag, c in raw_palette.items():
      palette[tag] = _coerce_color(c, palette.get(tag, base.line))
  return Theme(
    name=str(data.get("name", base.name)),
    title=str(data.get("title", base.title)),
    decor=decor,
    background=_coerce_color(data.get("background", base.background), base.background),
    court=_coerce_color(data.get("court", base.court), base.court),
    line=_coerce_color(data.get("line", base.line), base.line),
    kitchen=_coerce_color(data.get("kitchen", base.kitchen), base.kitchen),
    text=_coerce_color(data.get("text", base.text), base.text),
    panel=_coerce_color(data.get("panel", base.panel), base.panel),
    trail=_coerce_color(data.get("trail", base.trail), base.trail),
    palette=palette,
  )


def _theme_files(themes_dir: str) -> List[str]:
  if not os.path.isdir(themes_dir):
    return []
  return sorted(fn for fn in os.listdir(themes_dir) if fn.lower().endswith(".json"))


def list_themes(themes_dir: str = THEMES_DIR) -> List[str]:
  """Names of all available themes (built-ins plus JSON files)."""
  names = set(BUILTIN_THEMES)
  for fn in _theme_files(themes_dir):
    data = _read_json(os.path.join(themes_dir, fn))
    if data is not None:
      names.add(str(data.get("name") or os.path.splitext(fn)[0]))
  return sorted(names)


def load_theme(name: str, themes_dir: str = THEMES_DIR) -> Theme:
  """
  Load a theme by name.

  JSON files win over built-ins of the same name. Unknown names fall back to the
  default court theme.
  """
  for fn in _theme_files(themes_dir):
    data = _read_json(os.path.join(themes_dir, fn))
    if data is None:
      continue
    file_name = str(data.get("name") or os.path.splitext(fn)[0])
    if file_name == name:
      data.setdefault("name", file_name)
      return theme_from_dict(data, BUILTIN_THEMES.get(name))
  if name in BUILTIN_THEMES:
    return BUILTIN_THEMES[name]
  logger.warning("Unknown theme %r, using %r", name, DEFAULT_THEME)
  return BUILTIN_THEMES[DEFAULT_THEME]
