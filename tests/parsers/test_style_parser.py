"""
Tests for style directive parameter parsing.
"""

import pytest

from layout2pdf.models.style import BLACK, Alignment, Color, StyleState
from layout2pdf.parser.style_parser import (
    alignment_from_name,
    color_from_name,
    is_bottom_anchor,
    parse_font_size,
    parse_style_params,
    split_params,
)


class TestFontSize:
    """Test cases for parse_font_size."""

    @pytest.mark.parametrize("value, expected", [
        ("20", 20),
        (" 14 ", 14),
        ("+7", 7),
        ("20px", 20),
        ("abc", 12),
        ("0", 12),
        ("-5", 12),
        ("", 12),
        (None, 12),
        ("2147483647", 2147483647),
        ("2147483648", 12),
        ("0002147483647", 2147483647),
        ("1" + "0" * 400, 12),
        ("9" * 6000, 12),
        ("\u0662\u0660", 12),
        ("1\u0662", 1),
        ("\t\v18\f", 18),
    ])
    def test_parse(self, value, expected):
        assert parse_font_size(value) == expected


class TestColorNames:
    """Test cases for color_from_name."""

    @pytest.mark.parametrize("name, expected", [
        ("black", Color(0.0, 0.0, 0.0)),
        ("white", Color(1.0, 1.0, 1.0)),
        ("RED", Color(1.0, 0.0, 0.0)),
        ("Green", Color(0.0, 1.0, 0.0)),
        ("blue", Color(0.0, 0.0, 1.0)),
        ("gray", Color(0.5, 0.5, 0.5)),
        ("Grey", Color(0.5, 0.5, 0.5)),
    ])
    def test_known_colors(self, name, expected):
        assert color_from_name(name) == expected

    @pytest.mark.parametrize("name", ["purple", "", None, "#ff0000"])
    def test_unknown_defaults_to_black(self, name):
        assert color_from_name(name) == BLACK


class TestAlignmentAndAnchor:
    """Test cases for alignment and anchor keywords."""

    @pytest.mark.parametrize("name, expected", [
        ("center", Alignment.CENTER),
        ("CENTER", Alignment.CENTER),
        ("right", Alignment.RIGHT),
        ("left", Alignment.LEFT),
        ("justify", Alignment.LEFT),
        (None, Alignment.LEFT),
    ])
    def test_alignment(self, name, expected):
        assert alignment_from_name(name) is expected

    @pytest.mark.parametrize("keyword, expected", [
        ("bottom", True),
        ("BOTTOM", True),
        (" Bottom ", True),
        ("top", False),
        ("", False),
        (None, False),
    ])
    def test_anchor(self, keyword, expected):
        assert is_bottom_anchor(keyword) is expected


class TestParseStyleParams:
    """Test cases for parse_style_params."""

    def test_split_keeps_empty_positions(self):
        assert split_params("20,,red") == ["20", "", "red"]
        assert split_params("") == []

    def test_empty_params_give_defaults(self):
        assert parse_style_params("") == StyleState()

    def test_all_four_params(self):
        style = parse_style_params("20, red, center, bottom")
        assert style == StyleState(20, Color(1.0, 0.0, 0.0), Alignment.CENTER, True)

    def test_missing_trailing_params_use_defaults(self):
        style = parse_style_params("16")
        assert style.font_size == 16
        assert style.color == BLACK
        assert style.alignment is Alignment.LEFT
        assert style.bottom_anchored is False

    def test_unparseable_size_keeps_other_params(self):
        style = parse_style_params("big, blue, right")
        assert style == StyleState(12, Color(0.0, 0.0, 1.0), Alignment.RIGHT, False)

    def test_empty_middle_position_defaults(self):
        style = parse_style_params("18,,center")
        assert style.color == BLACK
        assert style.alignment is Alignment.CENTER
