"""Tests for ViewConfig parsing and validation."""

import logging

import pytest

from mappoints.api import Point, ViewConfig
from mappoints.api.config import parse_bool, parse_color, parse_points


class TestDefaults:
    def test_defaults(self):
        cfg = ViewConfig()
        assert cfg.max_points == 5
        assert cfg.select_points_by_touching
        assert cfg.line_animation_duration_ms == 500
        assert cfg.circle_alpha_initial == 100
        assert cfg.circle_alpha_expanded == 0
        assert cfg.line_easing == "linear"

    def test_circle_style_mirrors_config(self):
        cfg = ViewConfig(circle_diameter_min=4, circle_diameter_max=40,
                         circle_alpha_expanded=7, circle_animation_duration_ms=250)
        style = cfg.circle_style()
        assert (style.diameter_min, style.diameter_max) == (4, 40)
        assert style.alpha_expanded == 7
        assert style.duration_ms == 250


class TestFromOptions:
    """Manifest options -> ViewConfig."""

    def test_snake_case_keys(self):
        cfg = ViewConfig.from_options({"max_points": 3, "line_thickness": 2})
        assert cfg.max_points == 3
        assert cfg.line_thickness == 2.0

    def test_camel_case_keys(self):
        cfg = ViewConfig.from_options({
            "maxPoints": 4,
            "selectPointsByTouching": False,
            "circleAlphaExpanded": 12,
            "lineAnimationDurationMs": 900,
        })
        assert cfg.max_points == 4
        assert cfg.select_points_by_touching is False
        assert cfg.circle_alpha_expanded == 12
        assert cfg.line_animation_duration_ms == 900

    def test_colors_parsed(self):
        cfg = ViewConfig.from_options({
            "line_color": "#888888",
            "static_circle_color": "white",
            "animated_circle_color": [10, 20, 30],
        })
        assert cfg.line_color == (136, 136, 136)
        assert cfg.static_circle_color == (255, 255, 255)
        assert cfg.animated_circle_color == (10, 20, 30)

    def test_points_parsed(self):
        cfg = ViewConfig.from_options({"points": [[0, 0], [10, 0], [10, 10]]})
        assert cfg.points == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_none_options(self):
        assert ViewConfig.from_options(None) == ViewConfig()

    def test_unknown_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mappoints"):
            cfg = ViewConfig.from_options({"blink_rate": 3})
        assert cfg == ViewConfig()
        assert "blink_rate" in caplog.text


class TestValidation:
    """Bad values raise ValueError naming the option."""

    @pytest.mark.parametrize("kwargs, name", [
        ({"max_points": 0}, "max_points"),
        ({"line_thickness": 0}, "line_thickness"),
        ({"line_animation_duration_ms": -1}, "line_animation_duration_ms"),
        ({"circle_diameter_max": -5}, "circle_diameter_max"),
        ({"circle_alpha_initial": 256}, "circle_alpha_initial"),
        ({"circle_alpha_expanded": -1}, "circle_alpha_expanded"),
        ({"circle_easing": "bouncy"}, "circle_easing"),
        ({"scale_type": "tile"}, "scale_type"),
    ])
    def test_rejected(self, kwargs, name):
        with pytest.raises(ValueError, match=name):
            ViewConfig(**kwargs)

    def test_bad_color(self):
        with pytest.raises(ValueError):
            ViewConfig.from_options({"line_color": "not-a-colour"})


class TestParsers:
    def test_parse_color_list_out_of_range(self):
        with pytest.raises(ValueError):
            parse_color([0, 0, 300])

    def test_parse_color_wrong_length(self):
        with pytest.raises(ValueError):
            parse_color([1, 2])

    def test_parse_points_cli_form(self):
        assert parse_points("1,2 3.5,4") == [Point(1, 2), Point(3.5, 4)]

    def test_parse_points_semicolons(self):
        assert parse_points("1,2;3,4") == [Point(1, 2), Point(3, 4)]

    def test_parse_points_bad_pair(self):
        with pytest.raises(ValueError):
            parse_points([[1, 2, 3]])

    @pytest.mark.parametrize("raw, expected", [
        ("false", False), ("False", False), ("no", False), ("0", False), (0, False),
        ("true", True), (" ON ", True), (1, True), (True, True),
    ])
    def test_parse_bool(self, raw, expected):
        assert parse_bool(raw) is expected

    def test_parse_bool_rejects_other_strings(self):
        with pytest.raises(ValueError, match="restore_points"):
            parse_bool("maybe", "restore_points")


class TestBoolOptions:
    """Quoted booleans from YAML or the CLI must not read as truthy strings."""

    def test_quoted_false(self):
        cfg = ViewConfig.from_options({"select_points_by_touching": "false",
                                       "restorePoints": "no"})
        assert cfg.select_points_by_touching is False
        assert cfg.restore_points is False

    def test_quoted_true(self):
        cfg = ViewConfig.from_options({"restore_points": "true"})
        assert cfg.restore_points is True

    def test_bad_bool_rejected(self):
        with pytest.raises(ValueError, match="select_points_by_touching"):
            ViewConfig.from_options({"select_points_by_touching": "sometimes"})
