"""
Tests for log_lib.formatter — the format interpreter.

Covers every conversion, the escape rule, both storage classes,
best-effort handling of bad input, and strict-mode validation.
"""

import pytest

from embedlog.lib.log_lib import (
    BufferSink, FormatArgumentError, RamSource, render,
)
from embedlog.lib.log_lib.formatter import (
    check_args, coerce_args, count_specifiers, format_float, iter_specifiers,
)


def rendered(fmt, *args, **kwargs):
    sink = BufferSink()
    render(fmt, args, sink, **kwargs)
    return sink.getvalue()


# =============================================================================
# Conversions
# =============================================================================

class TestConversions:
    """One specifier at a time."""

    @pytest.mark.parametrize("fmt, arg, expected", [
        ("%d", -5, b"-5"),
        ("%d", 0, b"0"),
        ("%l", 2147483647, b"2147483647"),
        ("%l", -799870, b"-799870"),
        ("%x", 255, b"ff"),
        ("%X", 255, b"0xff"),
        ("%b", 5, b"101"),
        ("%B", 5, b"0b101"),
        ("%t", True, b"t"),
        ("%t", False, b"f"),
        ("%T", True, b"true"),
        ("%T", False, b"false"),
        ("%c", "A", b"A"),
        ("%c", 66, b"B"),
        ("%s", "hello", b"hello"),
        ("%s", b"raw", b"raw"),
    ])
    def test_single_specifier(self, fmt, arg, expected):
        assert rendered(fmt, arg) == expected

    def test_hex_is_lowercase(self):
        """Hex digits are lowercase, with or without prefix."""
        assert rendered("%x %X", 0xABCDEF, 0xABCDEF) == b"abcdef 0xabcdef"

    def test_zero_in_bases(self):
        assert rendered("%x %b %X %B", 0, 0, 0, 0) == b"0 0 0x0 0b0"

    def test_negative_hex_uses_32_bit_pattern(self):
        """Negative values are converted as unsigned 32-bit by default."""
        assert rendered("%x", -1) == b"ffffffff"
        assert rendered("%X", -2) == b"0xfffffffe"

    def test_negative_binary_word_bits(self):
        """word_bits sets the two's-complement width."""
        assert rendered("%b", -1, word_bits=8) == b"11111111"
        assert rendered("%B", -128, word_bits=8) == b"0b10000000"

    def test_string_stops_at_nul(self):
        """%s copies bytes up to a terminator, like a C string."""
        assert rendered("[%s]", "abc\0def") == b"[abc]"

    def test_string_from_byte_source(self, progmem):
        """%s accepts a byte source of either storage class."""
        name = progmem.store("sensor-7")
        assert rendered("%s/%s", name, RamSource("ok")) == b"sensor-7/ok"

    def test_unicode_string_is_utf8(self):
        assert rendered("%s", "µs") == "µs".encode("utf-8")


class TestFloat:
    """%D / %F follow the two-digit Arduino rendering."""

    @pytest.mark.parametrize("value, expected", [
        (3.14159, "3.14"),
        (-2.5, "-2.50"),
        (0.0, "0.00"),
        (-0.0, "0.00"),
        (1.5, "1.50"),
        (100.125, "100.13"),
        (42, "42.00"),
        (0.999, "1.00"),
        (2.125, "2.13"),
        (-0.375, "-0.38"),
    ])
    def test_format_float(self, value, expected):
        assert format_float(value) == expected

    def test_special_values(self):
        assert format_float(float("nan")) == "nan"
        assert format_float(float("inf")) == "inf"
        assert format_float(float("-inf")) == "inf"
        assert format_float(5e9) == "ovf"
        assert format_float(-5e9) == "ovf"

    def test_exact_ties_round_up(self):
        """Values exactly halfway between two outputs round away from zero."""
        assert format_float(100.125) == "100.13"
        assert format_float(-100.125) == "-100.13"
        assert format_float(1.0625, digits=3) == "1.063"
        assert format_float(2.5, digits=0) == "3"

    def test_D_and_F_render_the_same(self):
        assert rendered("%D|%F", 1.5, 1.5) == b"1.50|1.50"


# =============================================================================
# Scanner behaviour
# =============================================================================

class TestScanner:
    """LITERAL/SPECIFIER state machine."""

    def test_literal_passthrough(self):
        assert rendered("no specifiers here\n") == b"no specifiers here\n"

    def test_percent_escape(self):
        """'%%' prints one '%' and consumes no argument."""
        assert rendered("100%%") == b"100%"
        assert rendered("%d%%", 7) == b"7%"

    def test_unknown_specifier_written_verbatim(self):
        """Any unrecognised byte after '%' is written as-is."""
        assert rendered("%q%i%S") == b"qiS"

    def test_dangling_introducer_writes_nothing(self):
        assert rendered("end%") == b"end"

    def test_arguments_consumed_in_order(self):
        out = rendered("%s=%d (%x) %T", "val", 10, 10, True)
        assert out == b"val=10 (a) true"

    def test_returns_byte_count(self):
        sink = BufferSink()
        count = render("%d-%s", (123, "ab"), sink)
        assert count == len(b"123-ab") == len(sink.getvalue())

    def test_empty_format(self):
        assert rendered("") == b""

    def test_scenario_warning_line(self):
        out = rendered("Log as Warning with integer values : %d, %d\n",
                       34, 799870)
        assert out == b"Log as Warning with integer values : 34, 799870\n"


class TestStorageClasses:
    """RAM and program-memory sources render identically."""

    @pytest.mark.parametrize("fmt, args", [
        ("plain text", ()),
        ("%d %x %X %b %B", (-5, 255, 255, 5, 5)),
        ("%t %T %c %s %%", (True, False, "z", "str")),
        ("%D and %F", (3.14159, -2.5)),
    ])
    def test_same_output(self, progmem, fmt, args):
        assert rendered(progmem.store(fmt), *args) == rendered(fmt, *args)

    def test_bytes_and_str_sources_agree(self):
        assert rendered(b"%d!", 3) == rendered("%d!", 3) == b"3!"


# =============================================================================
# Best-effort (default) mode
# =============================================================================

class TestLenientMode:
    """Mismatches produce best-effort output, never an exception."""

    def test_missing_argument_renders_nothing(self):
        assert rendered("a=%d b=%d", 1) == b"a=1 b="

    def test_surplus_arguments_ignored(self):
        assert rendered("%d", 1, 2, 3) == b"1"

    def test_wrong_type_written_as_str(self):
        assert rendered("%d", "oops") == b"oops"
        assert rendered("%x", 1.5) == b"1.5"

    def test_truthiness_for_booleans(self):
        assert rendered("%t%t", 0, "x") == b"ft"

    def test_string_spec_with_number(self):
        assert rendered("%s", 42) == b"42"


# =============================================================================
# Strict mode
# =============================================================================

class TestStrictMode:
    """strict=True validates before writing anything."""

    def test_valid_arguments_pass(self):
        assert rendered("%d %s %T", 1, "a", True, strict=True) == b"1 a true"

    def test_too_few_arguments(self):
        sink = BufferSink()
        with pytest.raises(FormatArgumentError):
            render("x=%d y=%d", (1,), sink, strict=True)
        assert sink.getvalue() == b""

    def test_too_many_arguments(self):
        with pytest.raises(FormatArgumentError):
            check_args("%d", (1, 2))

    def test_wrong_type_reports_index(self):
        with pytest.raises(FormatArgumentError) as exc_info:
            check_args("%d %d", (1, "two"))
        assert exc_info.value.index == 1
        assert exc_info.value.specifier == "d"

    def test_bool_is_not_an_integer(self):
        with pytest.raises(FormatArgumentError):
            check_args("%d", (True,))

    def test_int_is_not_a_bool(self):
        with pytest.raises(FormatArgumentError):
            check_args("%T", (1,))

    def test_dangling_introducer_rejected(self):
        with pytest.raises(FormatArgumentError):
            check_args("50%", ())

    def test_float_accepts_int(self):
        check_args("%F", (3,))

    def test_escape_needs_no_argument(self):
        check_args("100%%", ())


# =============================================================================
# Specifier helpers
# =============================================================================

class TestSpecifierHelpers:
    """count_specifiers / iter_specifiers / coerce_args."""

    def test_count_skips_escapes_and_unknowns(self):
        assert count_specifiers("%d %% %q %s %T") == 3

    def test_iter_order(self):
        assert list(iter_specifiers("%X-%b-%c")) == ["X", "b", "c"]

    def test_coerce_by_specifier(self):
        values = coerce_args("%d %x %T %F %s %c",
                             ["-5", "0xff", "yes", "2.5", "word", "q"])
        assert values == [-5, 255, True, 2.5, "word", "q"]

    def test_coerce_surplus_passthrough(self):
        assert coerce_args("%d", ["1", "extra"]) == [1, "extra"]

    def test_coerce_bad_number(self):
        with pytest.raises(FormatArgumentError) as exc_info:
            coerce_args("%s %d", ["ok", "seven"])
        assert exc_info.value.index == 1

    def test_coerce_bad_bool(self):
        with pytest.raises(FormatArgumentError):
            coerce_args("%t", ["maybe"])

    def test_coerce_bad_char(self):
        with pytest.raises(FormatArgumentError):
            coerce_args("%c", ["ab"])
