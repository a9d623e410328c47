"""Tests for hexconfig.core.config.render module."""

import pytest

from hexconfig.core.config.render import pretty_value


class TestScalars:
    """Test rendering of single values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("https://hex.pm/api", '"https://hex.pm/api"'),
            ("30", '"30"'),
            ("", '""'),
            ('say "hi"', '"say \\"hi\\""'),
            ("héx", '"héx"'),
            (True, "true"),
            (False, "false"),
            (None, "nil"),
            (8, "8"),
            (1.5, "1.5"),
        ],
    )
    def test_scalar(self, value, expected):
        assert pretty_value(value) == expected

    def test_string_and_integer_render_differently(self):
        assert pretty_value("8") != pretty_value(8)

    def test_unknown_type_uses_repr(self):
        assert pretty_value(frozenset()) == "frozenset()"


class TestComposites:
    """Test rendering of lists and mappings."""

    def test_short_list_stays_on_one_line(self):
        assert pretty_value(["a", 1, True]) == '["a", 1, true]'

    def test_short_mapping_stays_on_one_line(self):
        assert pretty_value({"hexpm": {"url": "x"}}) == '{"hexpm": {"url": "x"}}'

    def test_empty_containers(self):
        assert pretty_value([]) == "[]"
        assert pretty_value({}) == "{}"

    def test_long_list_breaks_per_element(self):
        value = ["x" * 30, "y" * 30, "z" * 30]
        assert pretty_value(value) == "\n".join([
            "[",
            f'  "{"x" * 30}",',
            f'  "{"y" * 30}",',
            f'  "{"z" * 30}"',
            "]",
        ])

    def test_nested_breaks_indent_recursively(self):
        value = {"repos": ["a" * 40, "b" * 40]}
        assert pretty_value(value, width=60) == "\n".join([
            "{",
            '  "repos": [',
            f'    "{"a" * 40}",',
            f'    "{"b" * 40}"',
            "  ]",
            "}",
        ])

    def test_rendering_is_deterministic(self):
        value = {"b": [1, 2], "a": {"c": None}}
        assert pretty_value(value) == pretty_value(value)
        assert pretty_value(value) == '{"b": [1, 2], "a": {"c": nil}}'
