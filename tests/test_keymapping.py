"""Tests for key-mapping parsing and the built-in bindings.

Covers the validation order, the accepted exit-code range, and override rules.
"""

from __future__ import annotations

import unittest

from goat import keymapping
from goat.keymapping import (
    CodeNotNumericError,
    CodeOutOfRangeError,
    KeyMapping,
    MappingError,
    MappingFormatError,
    MappingKeyError,
    parse_mappings,
)


class ParseMappingsTests(unittest.TestCase):
    def test_valid_mapping_is_bound_to_its_key(self) -> None:
        table = parse_mappings(["65:a:fkbr"])

        self.assertIn("a", table)
        self.assertEqual(table["a"], KeyMapping(exit_code=65, label="fkbr"))

    def test_range_bounds_are_inclusive(self) -> None:
        for code in (64, 90, 113):
            with self.subTest(code=code):
                table = parse_mappings([f"{code}:x:label"])
                self.assertEqual(table["x"].exit_code, code)

    def test_out_of_range_codes_are_rejected(self) -> None:
        for code in (0, 1, 63, 114, 255):
            with self.subTest(code=code):
                with self.assertRaises(CodeOutOfRangeError) as ctx:
                    parse_mappings([f"{code}:x:label"])
                self.assertEqual(ctx.exception.code, code)

    def test_wrong_field_count_is_a_format_error(self) -> None:
        for entry in ("65a:fkbr", "65", "", "65:a:b:c"):
            with self.subTest(entry=entry):
                with self.assertRaises(MappingFormatError) as ctx:
                    parse_mappings([entry])
                self.assertIn(f"'{entry}'", str(ctx.exception))

    def test_empty_key_is_a_key_error(self) -> None:
        with self.assertRaises(MappingKeyError):
            parse_mappings(["65::label"])

    def test_multi_character_key_uses_first_character(self) -> None:
        table = parse_mappings(["70:xyz:label"])

        self.assertIn("x", table)
        self.assertNotIn("y", table)

    def test_non_numeric_code_is_rejected(self) -> None:
        for entry in ("b:a:fkbr", "6 5:a:x", "65.0:a:x", ":a:x"):
            with self.subTest(entry=entry):
                with self.assertRaises(CodeNotNumericError):
                    parse_mappings([entry])

    def test_validation_order_reports_key_before_code(self) -> None:
        with self.assertRaises(MappingKeyError):
            parse_mappings(["abc::label"])
        with self.assertRaises(CodeNotNumericError):
            parse_mappings(["abc:k:label"])

    def test_errors_share_a_value_error_base(self) -> None:
        with self.assertRaises(ValueError):
            parse_mappings(["60:x:bad"])
        with self.assertRaises(MappingError) as ctx:
            parse_mappings(["65:a:ok", "60:x:bad"])
        self.assertEqual(ctx.exception.entry, "60:x:bad")
        self.assertEqual(str(ctx.exception).splitlines(), [str(ctx.exception)])

    def test_builtins_are_always_present(self) -> None:
        table = parse_mappings([])

        self.assertEqual(table["q"], KeyMapping(exit_code=1, label="abort"))
        self.assertEqual(table["c"], KeyMapping(exit_code=0, label="continue"))
        self.assertEqual(len(table), 2)

    def test_builtins_override_user_entries_on_same_key(self) -> None:
        table = parse_mappings(["70:q:quit-later", "71:c:custom"])

        self.assertEqual(table["q"], KeyMapping(exit_code=keymapping.ABORT_EXIT_CODE, label="abort"))
        self.assertEqual(table["c"], KeyMapping(exit_code=keymapping.CONTINUE_EXIT_CODE, label="continue"))

    def test_later_duplicate_user_entries_win(self) -> None:
        table = parse_mappings(["65:a:first", "66:a:second"])

        self.assertEqual(table["a"], KeyMapping(exit_code=66, label="second"))

    def test_label_may_be_empty_or_contain_spaces(self) -> None:
        table = parse_mappings(["65:a:", "66:b:run the deploy"])

        self.assertEqual(table["a"].label, "")
        self.assertEqual(table["b"].label, "run the deploy")


class MappingTableTests(unittest.TestCase):
    def test_legend_is_sorted_by_key(self) -> None:
        table = parse_mappings(["65:z:zulu", "66:a:alpha"])

        self.assertEqual(
            table.legend(),
            (("a", "alpha"), ("c", "continue"), ("q", "abort"), ("z", "zulu")),
        )

    def test_lookup_returns_none_for_unbound_keys(self) -> None:
        table = parse_mappings(["65:a:alpha"])

        self.assertEqual(table.lookup("a"), KeyMapping(exit_code=65, label="alpha"))
        self.assertIsNone(table.lookup("b"))
        self.assertIsNone(table.lookup("UP"))

    def test_table_is_read_only(self) -> None:
        table = parse_mappings([])

        with self.assertRaises(TypeError):
            table["x"] = KeyMapping(exit_code=65, label="x")  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
