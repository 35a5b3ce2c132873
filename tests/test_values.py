"""Test decoded token values: strings, names, comments, numbers."""

import pytest

from psscan.errors import FormatError
from psscan.tokens import TokenType

from .conftest import assert_values


class TestStringValues:
    def test_nested_parens(self, lex):
        assert_values(lex("(a (b) c)"), ["a (b) c"])

    def test_escaped_paren(self, lex):
        assert_values(lex("(a \\(b c)"), ["a (b c"])

    def test_newline_and_escaped_close(self, lex):
        assert_values(lex("  (a\n b c\\) def)"), ["a\n b c) def"])

    def test_line_continuations(self, lex):
        assert_values(lex("(ab\\\ncd\\\ref\\\r\ngh)"), ["abcdefgh"])

    def test_octal_escapes(self, lex):
        assert_values(lex("(\\000\\001\\002)"), ["\x00\x01\x02"])

    def test_octal_letter(self, lex):
        assert_values(lex("(\\101BC)"), ["ABC"])

    def test_short_escapes(self, lex):
        assert_values(lex("(\\n\\r\\t\\b\\f\\\\)"), ["\n\r\t\b\f\\"])

    def test_unknown_escape_discharged(self, lex):
        assert_values(lex("(\\q)"), ["q"])


class TestHexValues:
    def test_empty_and_odd(self, lex):
        assert_values(lex("<> <  > <50> <5>"), ["", "", "P", "P"])

    def test_spaced_pairs(self, lex):
        assert_values(lex("<66 6f 6f>"), ["foo"])

    def test_odd_trailing_digit(self, lex):
        assert_values(lex("<32 31 3>"), ["210"])

    def test_bytes_value(self, lex):
        assert lex("<DEADbeef>")[0].bytes_value() == b"\xde\xad\xbe\xef"


class TestA85Values:
    def test_a85(self, lex):
        assert_values(lex("<~~> <~  ~> <~ AoDS ~>"), ["", "", "foo"])

    def test_a85_full_group(self, lex):
        assert lex("<~9jqo^~>")[0].bytes_value() == b"Man "

    def test_a85_overflow(self, lex):
        with pytest.raises(FormatError, match="exceeds"):
            lex("<~uuuuu~>")[0].bytes_value()


class TestNameValues:
    def test_names(self, lex):
        assert_values(lex("alpha/bravo charlie //xray"), ["alpha", "bravo", "charlie", "xray"])

    def test_punctuation(self, lex):
        assert_values(
            lex("[full /plate (and) {packing}]<<steel>>"),
            ["[", "full", "plate", "and", "{", "packing", "}", "]", "<<", "steel", ">>"],
        )

    def test_immediate_name(self, lex):
        tokens = lex("//bravo")
        assert tokens[0].type == TokenType.IMMEDIATE_NAME
        assert tokens[0].string_value() == "bravo"


class TestCommentValues:
    def test_comments(self, lex):
        assert_values(lex("% foo\n% bar\f\n% baz\n "), ["foo", "bar", "baz"])

    def test_all_leading_percents(self, lex):
        assert_values(lex("%%BoundingBox: 0 0 612 792\n"), ["BoundingBox: 0 0 612 792"])


class TestNumericText:
    def test_numbers_as_written(self, lex):
        assert_values(lex("1.3 .0 2#1101 6.67e-11"), ["1.3", ".0", "2#1101", "6.67e-11"])


class TestIntValues:
    def test_decimals(self, lex):
        assert [t.int_value() for t in lex("-2 -1 0 1 2 +17")] == [-2, -1, 0, 1, 2, 17]

    def test_radix(self, lex):
        assert [t.int_value() for t in lex("16#FFFE 8#1777 2#1000 36#zz")] == [65534, 1023, 8, 1295]

    def test_real_truncates(self, lex):
        assert [t.int_value() for t in lex("3.9 -3.9 1e3")] == [3, -3, 1000]

    def test_bad_radix_digits(self, lex):
        with pytest.raises(FormatError):
            lex("2#ZZZZ")[0].int_value()

    def test_bad_radix_base(self, lex):
        with pytest.raises(FormatError, match="radix"):
            lex("99#1")[0].int_value()

    def test_radix_rejects_prefix(self, lex):
        with pytest.raises(FormatError):
            lex("16#0x10")[0].int_value()

    def test_name_is_not_integer(self, lex):
        with pytest.raises(FormatError, match="invalid format"):
            lex("moveto")[0].int_value()

    def test_string_is_not_integer(self, lex):
        with pytest.raises(FormatError):
            lex("(12)")[0].int_value()


class TestFloatValues:
    def test_floats(self, lex):
        values = [t.float_value() for t in lex("-2.0 -1 0.0 0.1e1 0.002e3")]
        assert values == [-2.0, -1.0, 0.0, 1.0, 2.0]

    def test_radix_widens(self, lex):
        assert lex("16#10")[0].float_value() == 16.0

    def test_bad_radix_float(self, lex):
        with pytest.raises(FormatError):
            lex("2#2")[0].float_value()

    def test_name_is_not_float(self, lex):
        with pytest.raises(FormatError):
            lex("/x")[0].float_value()
