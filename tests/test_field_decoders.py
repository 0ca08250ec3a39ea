"""
Tests for the individual field decoders.

Each decoder is called with the full text and a cursor on the AI, and must
return the element plus the cursor after the consumed data.
"""

from datetime import date
from decimal import Decimal

import pytest

from gs1_decoder.core.ai_table import load_ai_table
from gs1_decoder.core.config import ParserConfig
from gs1_decoder.core.errors import (
    EmptyVariableLengthDataError,
    FixedLengthDataTooShortError,
    InternalError,
    InvalidAIError,
    InvalidDateError,
    NumericDataExpectedError,
)
from gs1_decoder.core.field_decoders import (
    DECODERS,
    ParsedElement,
    decode_date,
    decode_field,
    decode_fixed_length,
    decode_fixed_length_measure,
    decode_variable_length,
    decode_variable_length_iso_chars,
    decode_variable_length_iso_numbers,
    decode_variable_length_measure,
)


GS = "\x1d"
CONFIG = ParserConfig()
TRIE = load_ai_table()


def definition(stem):
    return TRIE.get(stem)


class TestFixedLength:
    """Fixed-length fields."""

    def test_gtin(self):
        element, pos = decode_fixed_length(definition("01"), "0104012345678901", 0, CONFIG)
        assert element == ParsedElement("01", "GTIN", "04012345678901", "04012345678901")
        assert pos == 16

    def test_does_not_consume_terminator(self):
        text = "0104012345678901" + GS + "10ABC"
        _, pos = decode_fixed_length(definition("01"), text, 0, CONFIG)
        assert text[pos] == GS

    def test_too_short(self):
        with pytest.raises(FixedLengthDataTooShortError) as exc_info:
            decode_fixed_length(definition("01"), "01012345678901", 0, CONFIG)
        assert exc_info.value.ai == "01"

    def test_numeric_expected(self):
        with pytest.raises(NumericDataExpectedError):
            decode_fixed_length(definition("00"), "0000123456789012345X", 0, CONFIG)

    def test_non_numeric_fixed_field_accepts_letters(self):
        element, _ = decode_fixed_length(definition("20"), "20A1", 0, CONFIG)
        assert element.value == "A1"


class TestVariableLength:
    """Variable-length fields."""

    def test_runs_to_terminator_and_consumes_it(self):
        text = "10ABC123" + GS + "17150129"
        element, pos = decode_variable_length(definition("10"), text, 0, CONFIG)
        assert element.value == "ABC123"
        assert pos == 9
        assert text[pos:] == "17150129"

    def test_runs_to_end_without_terminator(self):
        element, pos = decode_variable_length(definition("10"), "10LOT77", 0, CONFIG)
        assert element.value == "LOT77"
        assert pos == 7

    def test_lot_cap_from_config(self):
        """Without a terminator, the lot stops after lot_max_length chars."""
        config = ParserConfig(lot_max_length=4)
        text = "10GB2C2171490437969853"
        element, pos = decode_variable_length(definition("10"), text, 0, config)
        assert element.value == "GB2C"
        assert text[pos:] == "2171490437969853"

    def test_lot_default_cap_is_twenty(self):
        text = "10" + "A" * 25
        element, pos = decode_variable_length(definition("10"), text, 0, CONFIG)
        assert element.value == "A" * 20
        assert pos == 22

    def test_cap_ignored_when_terminator_present(self):
        config = ParserConfig(lot_max_length=4)
        text = "10ABCDEFG" + GS + "17150129"
        element, _ = decode_variable_length(definition("10"), text, 0, config)
        assert element.value == "ABCDEFG"

    def test_custom_terminator(self):
        config = ParserConfig(terminator="|")
        element, pos = decode_variable_length(definition("21"), "21SER1|10X", 0, config)
        assert element.value == "SER1"
        assert pos == 7

    def test_empty_at_end(self):
        with pytest.raises(EmptyVariableLengthDataError):
            decode_variable_length(definition("10"), "10", 0, CONFIG)

    def test_empty_before_terminator(self):
        with pytest.raises(EmptyVariableLengthDataError):
            decode_variable_length(definition("21"), "21" + GS + "10ABC", 0, CONFIG)

    def test_numeric_variable_field(self):
        with pytest.raises(NumericDataExpectedError):
            decode_variable_length(definition("8018"), "8018ABC", 0, CONFIG)


class TestDate:
    """YYMMDD fields."""

    def test_date(self):
        element, pos = decode_date(definition("17"), "17150129", 0, CONFIG)
        assert element.value == date(2015, 1, 29)
        assert element.raw == "150129"
        assert pos == 8

    def test_day_zero(self):
        element, _ = decode_date(definition("17"), "17221200", 0, CONFIG)
        assert element.value == date(2022, 12, 31)

    def test_short_date(self):
        with pytest.raises(FixedLengthDataTooShortError):
            decode_date(definition("11"), "1123031", 0, CONFIG)

    @pytest.mark.parametrize("value", ["991332", "22AB10", "000000", "230229"])
    def test_invalid_date(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            decode_date(definition("17"), "17" + value, 0, CONFIG)
        assert exc_info.value.ai == "17"


class TestFixedLengthMeasure:
    """Fixed-length measures with implied decimals."""

    def test_net_weight(self):
        element, pos = decode_fixed_length_measure(definition("310"), "3103000525", 0, CONFIG)
        assert element.ai == "3103"
        assert element.value == Decimal("0.525")
        assert element.unit == "KGM"
        assert element.raw == "000525"
        assert pos == 10

    def test_zero_decimals(self):
        element, _ = decode_fixed_length_measure(definition("310"), "3100001234", 0, CONFIG)
        assert element.value == Decimal("1234")

    def test_non_digit_decimal_indicator(self):
        with pytest.raises(InvalidAIError) as exc_info:
            decode_fixed_length_measure(definition("310"), "310X000525", 0, CONFIG)
        assert exc_info.value.prefix == "310"
        assert exc_info.value.current == "X"

    def test_missing_decimal_indicator(self):
        with pytest.raises(InvalidAIError):
            decode_fixed_length_measure(definition("310"), "310", 0, CONFIG)

    def test_too_short(self):
        with pytest.raises(FixedLengthDataTooShortError):
            decode_fixed_length_measure(definition("310"), "310300052", 0, CONFIG)

    def test_non_numeric(self):
        with pytest.raises(NumericDataExpectedError):
            decode_fixed_length_measure(definition("310"), "31030005X5", 0, CONFIG)

    def test_percent_off_has_four_digits(self):
        element, pos = decode_fixed_length_measure(definition("394"), "39421250", 0, CONFIG)
        assert element.ai == "3942"
        assert element.value == Decimal("12.50")
        assert pos == 8


class TestTemperature:
    """Temperatures: fixed two decimals and an optional trailing sign."""

    def test_positive(self):
        element, pos = decode_fixed_length_measure(definition("4331"), "4331000235", 0, CONFIG)
        assert element.ai == "4331"
        assert element.value == Decimal("2.35")
        assert element.unit == "°C"
        assert pos == 10

    @pytest.mark.parametrize("sign", ["-", "–", "—"])
    def test_negative(self, sign):
        text = "4330007520" + sign
        element, pos = decode_fixed_length_measure(definition("4330"), text, 0, CONFIG)
        assert element.value == Decimal("-75.20")
        assert element.unit == "°F"
        assert element.raw == "007520" + sign
        assert pos == len(text)

    def test_sign_not_taken_from_other_ai(self):
        element, pos = decode_fixed_length_measure(
            definition("4331"), "4331002035" + GS + "4333000000", 0, CONFIG
        )
        assert element.value == Decimal("20.35")
        assert pos == 10

    def test_too_short(self):
        with pytest.raises(FixedLengthDataTooShortError):
            decode_fixed_length_measure(definition("4331"), "433112345", 0, CONFIG)

    def test_non_numeric(self):
        with pytest.raises(NumericDataExpectedError):
            decode_fixed_length_measure(definition("4331"), "4331ABC123", 0, CONFIG)


class TestVariableLengthMeasure:
    """Amounts and prices without an ISO code."""

    def test_price(self):
        element, pos = decode_variable_length_measure(
            definition("392"), "39224711" + GS + "4212764", 0, CONFIG
        )
        assert element.ai == "3922"
        assert element.value == Decimal("47.11")
        assert element.unit == ""
        assert pos == 9

    def test_empty(self):
        with pytest.raises(EmptyVariableLengthDataError):
            decode_variable_length_measure(definition("390"), "3902" + GS, 0, CONFIG)

    def test_non_numeric_wrapped_as_internal_error(self):
        with pytest.raises(InternalError) as exc_info:
            decode_variable_length_measure(definition("390"), "3902AB", 0, CONFIG)
        assert isinstance(exc_info.value.cause, ValueError)


class TestISOFields:
    """Fields prefixed with an ISO currency or country code."""

    def test_amount_with_currency(self):
        element, pos = decode_variable_length_iso_numbers(
            definition("393"), "39329784711" + GS, 0, CONFIG
        )
        assert element.ai == "3932"
        assert element.value == Decimal("47.11")
        assert element.unit == "978"
        assert element.raw == "9784711"
        assert pos == 12

    def test_currency_without_amount(self):
        with pytest.raises(InternalError):
            decode_variable_length_iso_numbers(definition("391"), "3912978", 0, CONFIG)

    def test_postal_code_with_country(self):
        element, pos = decode_variable_length_iso_chars(definition("421"), "42127649716", 0, CONFIG)
        assert element.value == "49716"
        assert element.unit == "276"
        assert element.raw == "27649716"
        assert pos == 11

    def test_empty(self):
        with pytest.raises(EmptyVariableLengthDataError):
            decode_variable_length_iso_chars(definition("421"), "421", 0, CONFIG)


class TestDispatch:
    """Every decoder kind is bound to a decoder."""

    def test_all_kinds_have_decoders(self):
        kinds = {d.kind for d in TRIE.all_entries().values()}
        assert kinds <= set(DECODERS)
        assert len(DECODERS) == 7

    def test_decode_field_uses_definition_kind(self):
        element, _ = decode_field(definition("17"), "xx17150129", 2, CONFIG)
        assert element.value == date(2015, 1, 29)
