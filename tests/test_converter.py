"""Tests for numeral_systems.converter."""

import pytest

from numeral_systems import (
    INT32_MAX,
    INT32_MIN,
    InvalidArgumentError,
    NumeralSystemsError,
    Radix,
    format_positive_decimal,
    format_positive_hex,
    format_positive_octal,
    format_positive_radix,
    format_radix,
)

SAMPLE_NUMBERS = [1, 7, 8, 9, 10, 15, 16, 42, 255, 256, 4095, 65535, 123456789, INT32_MAX]


def _digits_value(digits: str, radix: int) -> int:
    """Evaluate sum(digit_i * radix**i) over a digit string."""
    value = 0
    for power, char in enumerate(reversed(digits)):
        value += "0123456789ABCDEF".index(char) * radix**power
    return value


class TestFormatPositiveOctal:
    def test_zero_is_empty(self):
        assert format_positive_octal(0) == ""

    @pytest.mark.parametrize(
        "number, expected",
        [(1, "1"), (7, "7"), (8, "10"), (64, "100"), (511, "777"), (INT32_MAX, "17777777777")],
    )
    def test_known_values(self, number, expected):
        assert format_positive_octal(number) == expected

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_positive_octal(-1)


class TestFormatPositiveDecimal:
    def test_zero_is_empty(self):
        assert format_positive_decimal(0) == ""

    @pytest.mark.parametrize(
        "number, expected",
        [(5, "5"), (42, "42"), (100, "100"), (INT32_MAX, "2147483647")],
    )
    def test_known_values(self, number, expected):
        assert format_positive_decimal(number) == expected

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_positive_decimal(-1)


class TestFormatPositiveHex:
    def test_zero_is_empty(self):
        assert format_positive_hex(0) == ""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (9, "9"),
            (10, "A"),
            (15, "F"),
            (16, "10"),
            (255, "FF"),
            (0xABCDEF, "ABCDEF"),
            (INT32_MAX, "7FFFFFFF"),
        ],
    )
    def test_known_values(self, number, expected):
        assert format_positive_hex(number) == expected

    def test_uses_uppercase_letters(self):
        assert format_positive_hex(0xBEEF) == "BEEF"

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_positive_hex(-1)


class TestDigitExtraction:
    @pytest.mark.parametrize("radix", list(Radix))
    @pytest.mark.parametrize("number", SAMPLE_NUMBERS)
    def test_digits_evaluate_back_to_number(self, number, radix):
        digits = format_positive_radix(number, radix)
        assert _digits_value(digits, radix) == number

    @pytest.mark.parametrize("number", SAMPLE_NUMBERS)
    def test_no_leading_zeros(self, number):
        for radix in Radix:
            assert not format_positive_radix(number, radix).startswith("0")

    @pytest.mark.parametrize("number", SAMPLE_NUMBERS)
    def test_agrees_with_builtin_formatting(self, number):
        assert format_positive_octal(number) == f"{number:o}"
        assert format_positive_decimal(number) == f"{number:d}"
        assert format_positive_hex(number) == f"{number:X}"


class TestFormatPositiveRadix:
    @pytest.mark.parametrize("number", [0] + SAMPLE_NUMBERS)
    def test_dispatches_to_fixed_formatters(self, number):
        assert format_positive_radix(number, 8) == format_positive_octal(number)
        assert format_positive_radix(number, 10) == format_positive_decimal(number)
        assert format_positive_radix(number, 16) == format_positive_hex(number)

    def test_accepts_radix_enum(self):
        assert format_positive_radix(255, Radix.HEXADECIMAL) == "FF"

    @pytest.mark.parametrize("radix", [0, 2, 7, 9, 11, 15, 17, -8])
    def test_unsupported_radix_rejected(self, radix):
        with pytest.raises(InvalidArgumentError) as exc_info:
            format_positive_radix(5, radix)
        assert exc_info.value.argument == "radix"
        assert exc_info.value.value == radix

    @pytest.mark.parametrize("radix", [8.0, "16", None, True])
    def test_non_integer_radix_rejected(self, radix):
        with pytest.raises(InvalidArgumentError):
            format_positive_radix(5, radix)

    def test_negative_number_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            format_positive_radix(-5, 16)
        assert exc_info.value.argument == "number"


class TestFormatRadix:
    def test_int_min_hex(self):
        assert format_radix(INT32_MIN, 16) == "80000000"

    def test_int_min_octal(self):
        assert format_radix(INT32_MIN, 8) == "20000000000"

    @pytest.mark.parametrize(
        "number, radix, expected",
        [
            (-1, 16, "FFFFFFFF"),
            (-1, 8, "37777777777"),
            (-16, 16, "FFFFFFF0"),
            (-256, 8, "37777777400"),
            (INT32_MIN + 5, 16, "80000005"),
            (INT32_MIN + 5, 8, "20000000005"),
        ],
    )
    def test_negative_uses_twos_complement(self, number, radix, expected):
        assert format_radix(number, radix) == expected

    @pytest.mark.parametrize(
        "number", [-1, -2, -255, -65536, -123456789, INT32_MIN, INT32_MIN + 1]
    )
    def test_negative_matches_unsigned_32_bit_pattern(self, number):
        unsigned = number & 0xFFFFFFFF
        assert format_radix(number, 8) == f"{unsigned:o}"
        assert format_radix(number, 16) == f"{unsigned:X}"

    @pytest.mark.parametrize("radix", list(Radix))
    @pytest.mark.parametrize("number", [0] + SAMPLE_NUMBERS)
    def test_non_negative_matches_positive_formatter(self, number, radix):
        assert format_radix(number, radix) == format_positive_radix(number, radix)

    def test_negative_decimal_has_no_sign(self):
        """Decimal output of a negative number is the masked magnitude, unsigned."""
        assert format_radix(-1, 10) == "2147483647"
        assert format_radix(-1, 10) != "-1"

    def test_int_min_decimal_is_empty(self):
        assert format_radix(INT32_MIN, 10) == ""

    @pytest.mark.parametrize("radix", [2, 7, 12, 32])
    def test_unsupported_radix_rejected(self, radix):
        with pytest.raises(InvalidArgumentError):
            format_radix(-1, radix)


class TestNumberValidation:
    @pytest.mark.parametrize("number", [INT32_MAX + 1, 2**40])
    def test_above_32_bit_range_rejected(self, number):
        with pytest.raises(InvalidArgumentError):
            format_positive_hex(number)
        with pytest.raises(InvalidArgumentError):
            format_radix(number, 16)

    def test_below_32_bit_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            format_radix(INT32_MIN - 1, 8)

    @pytest.mark.parametrize("number", [1.0, "12", None, True])
    def test_non_integer_rejected(self, number):
        with pytest.raises(InvalidArgumentError):
            format_positive_decimal(number)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            format_positive_octal(-1)

    def test_error_is_package_error(self):
        with pytest.raises(NumeralSystemsError):
            format_radix(1, 3)
