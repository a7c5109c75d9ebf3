"""Tests for theme loading."""

import json

from pong_core.constants import TAG_BALL, TAG_PADDLE_A
from pong_core.themes_loader import (
    BUILTIN_THEMES,
    THEMES_DIR,
    list_themes,
    load_theme,
    theme_from_dict,
)


def test_shipped_themes_are_listed():
    names = list_themes()
    assert "court" in names
    assert "grid" in names


def test_shipped_files_match_builtins():
    for name in ("court", "grid"):
        assert load_theme(name, THEMES_DIR) == BUILTIN_THEMES[name]


def test_skins_differ_only_in_presentation():
    court, grid = load_theme("court"), load_theme("grid")
    assert court.decor == "court"
    assert grid.decor == "grid"
    assert court.palette.keys() == grid.palette.keys()


def test_unknown_theme_falls_back_to_court(tmp_path, caplog):
    theme = load_theme("sunset", str(tmp_path))
    assert theme.name == "court"
    assert "Unknown theme" in caplog.text


def test_json_theme_extends_builtin(tmp_path):
    (tmp_path / "sunset.json").write_text(json.dumps({
        "name": "sunset",
        "decor": "grid",
        "background": [300, -4, 20],
        "palette": {"ball": [255, 200, 0]},
    }))
    assert "sunset" in list_themes(str(tmp_path))
    theme = load_theme("sunset", str(tmp_path))
    assert theme.decor == "grid"
    assert theme.background == (255, 0, 20)
    assert theme.color_for(TAG_BALL) == (255, 200, 0)
    assert theme.color_for(TAG_PADDLE_A) == BUILTIN_THEMES["court"].color_for(TAG_PADDLE_A)


def test_malformed_file_is_skipped(tmp_path, caplog):
    (tmp_path / "broken.json").write_text("{not json")
    assert list_themes(str(tmp_path)) == ["court", "grid"]
    assert load_theme("broken", str(tmp_path)).name == "court"
    assert "Skipping theme file" in caplog.text


def test_bad_values_keep_defaults():
    base = BUILTIN_THEMES["court"]
    theme = theme_from_dict({"name": "odd", "decor": "spiral", "line": "white", "court": [1, 2]})
    assert theme.decor == base.decor
    assert theme.line == base.line
    assert theme.court == base.court


def test_unknown_tag_uses_line_color():
    theme = BUILTIN_THEMES["grid"]
    assert theme.color_for("mystery") == theme.line
