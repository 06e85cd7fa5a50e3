"""Unit tests for the import/export conversion policy."""

import unittest

from csvso.canonical.column import Column
from csvso.inference.conversion import build_bindings, parse_or_default, render_value


class TestParseOrDefault(unittest.TestCase):
    """Unit tests for parse_or_default."""

    def test_should_default_malformed_tokens(self) -> None:
        """Test that malformed tokens become 0 / 0.0 / False and never raise."""
        self.assertEqual(parse_or_default("abc", "int"), 0)
        self.assertEqual(parse_or_default("abc", "float"), 0.0)
        self.assertIs(parse_or_default("abc", "bool"), False)
        self.assertEqual(parse_or_default("", "int"), 0)
        self.assertEqual(parse_or_default("1.5", "int"), 0)
        self.assertEqual(parse_or_default("1_000", "int"), 0)

    def test_should_pass_strings_through(self) -> None:
        self.assertEqual(parse_or_default("abc", "string"), "abc")
        self.assertEqual(parse_or_default("", "string"), "")

    def test_should_parse_integers(self) -> None:
        self.assertEqual(parse_or_default("42", "int"), 42)
        self.assertEqual(parse_or_default(" -7 ", "int"), -7)
        self.assertEqual(parse_or_default("+3", "int"), 3)

    def test_should_default_out_of_range_integers(self) -> None:
        """Test that values outside the 32-bit range become 0."""
        self.assertEqual(parse_or_default("2147483647", "int"), 2147483647)
        self.assertEqual(parse_or_default("2147483648", "int"), 0)
        self.assertEqual(parse_or_default("-2147483649", "int"), 0)

    def test_should_parse_floats(self) -> None:
        self.assertEqual(parse_or_default("1.5", "float"), 1.5)
        self.assertEqual(parse_or_default(".5", "float"), 0.5)
        self.assertEqual(parse_or_default("1e3", "float"), 1000.0)
        self.assertEqual(parse_or_default("-Infinity", "float"), float("-inf"))

    def test_should_parse_booleans_case_insensitively(self) -> None:
        self.assertIs(parse_or_default("True", "bool"), True)
        self.assertIs(parse_or_default(" false ", "bool"), False)
        self.assertIs(parse_or_default("TRUE", "bool"), True)
        self.assertIs(parse_or_default("1", "bool"), False)

    def test_should_treat_unknown_types_as_strings(self) -> None:
        self.assertEqual(parse_or_default("12", "Vector3"), "12")

    def test_should_accept_type_names_in_any_case(self) -> None:
        self.assertEqual(parse_or_default("12", "Int"), 12)


class TestRenderValue(unittest.TestCase):
    """Unit tests for render_value."""

    def test_should_render_primitives(self) -> None:
        self.assertEqual(render_value(25, "int"), "25")
        self.assertEqual(render_value(True, "bool"), "True")
        self.assertEqual(render_value(False, "bool"), "False")
        self.assertEqual(render_value("a,b", "string"), "a,b")

    def test_should_render_floats_without_trailing_zero(self) -> None:
        self.assertEqual(render_value(2.0, "float"), "2")
        self.assertEqual(render_value(1.5, "float"), "1.5")
        self.assertEqual(render_value(0.1, "float"), "0.1")
        self.assertEqual(render_value(float("nan"), "float"), "NaN")

    def test_should_render_defaults_for_none(self) -> None:
        self.assertEqual(render_value(None, "int"), "0")
        self.assertEqual(render_value(None, "string"), "")


class TestBindings(unittest.TestCase):
    """Unit tests for per-column field bindings."""

    def test_should_bind_each_column_to_its_type(self) -> None:
        # arrange
        columns = [
            Column(comment="", name="id", type_name="int"),
            Column(comment="", name="ok", type_name="bool"),
        ]

        # act
        bindings = build_bindings(columns)

        # assert
        self.assertEqual(bindings["id"].parse("9"), 9)
        self.assertIs(bindings["ok"].parse("true"), True)
        self.assertEqual(bindings["id"].default, 0)
        self.assertEqual(bindings["ok"].render(True), "True")
