"""
Tests for JSON formatter output.

Ensures clean JSON output with:
- Human-readable field names
- Proper date formatting (dd/mm/yyyy by default)
- Exact decimal strings with their unit or ISO code
"""

import json

import pytest

from gs1_decoder import (
    InvalidDateError,
    ParserConfig,
    decode_gs1,
    decode_gs1_to_dict,
    decode_gs1_to_json,
    format_decode_result_json,
)


GS = "\x1d"


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_basic_json_output(self):
        """Test basic JSON output format."""
        barcode = "01062867400002491728043010GB2C" + GS + "2171490437969853"

        json_output = decode_gs1_to_json(barcode)

        # Should be valid JSON
        data = json.loads(json_output)

        # Check field names are human-readable
        assert data["GTIN Code"] == "06286740000249"
        assert data["Expiry Date"] == "30/04/2028"
        assert data["Batch/Lot Number"] == "GB2C"
        assert data["Serial Number"] == "71490437969853"

        # Should NOT contain AI codes like "01", "17", etc.
        assert "01" not in data
        assert "17" not in data

    def test_date_formatting_ddmmyyyy(self):
        """Test date is formatted as dd/mm/yyyy."""
        data = decode_gs1_to_dict("010628509600084217290131")
        assert data["Expiry Date"] == "31/01/2029"

    def test_day_zero_formatted_as_last_day(self):
        data = decode_gs1_to_dict("010628509600084217290200")
        assert data["Expiry Date"] == "28/02/2029"

    def test_custom_date_format(self):
        data = decode_gs1_to_dict("010628509600084217290131", date_format="%Y-%m-%d")
        assert data["Expiry Date"] == "2029-01-31"

    def test_measure_with_unit(self):
        data = decode_gs1_to_dict("3103000525")
        assert data["Net Weight (kg)"] == {"value": "0.525", "unit": "KGM"}

    def test_amount_with_currency(self):
        data = decode_gs1_to_dict("39329784711")
        assert data["Price with ISO Currency"] == {"value": "47.11", "unit": "978"}

    def test_trailing_zeros_kept(self):
        data = decode_gs1_to_dict("4331002000")
        assert data["Maximum Temperature (C)"] == {"value": "20.00", "unit": "°C"}

    def test_unnamed_ai_fallback(self):
        data = decode_gs1_to_dict("0106285096000842" + "8020REF1")
        assert data["AI(8020)"] == "REF1"

    def test_symbology_included(self):
        data = decode_gs1_to_dict("]d20106285096000842")
        assert data["_symbology"] == "GS1 DataMatrix"

    def test_no_symbology_key_without_identifier(self):
        data = decode_gs1_to_dict("0106285096000842")
        assert "_symbology" not in data

    def test_non_ascii_kept(self):
        """Units like °C are written as-is, not escaped."""
        json_output = format_decode_result_json(decode_gs1("4331000235"))
        assert "°C" in json_output

    def test_config_passed_through(self):
        data = decode_gs1_to_dict(
            "10ABC|21XYZ",
            config=ParserConfig(terminator="|"),
        )
        assert data["Batch/Lot Number"] == "ABC"
        assert data["Serial Number"] == "XYZ"

    def test_errors_propagate(self):
        with pytest.raises(InvalidDateError):
            decode_gs1_to_json("0106285096000842" + "17291332")
