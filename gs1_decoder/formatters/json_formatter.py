"""
JSON Formatter for GS1 Decode Results

Provides clean JSON output with:
- Human-readable field names ("AI(nn)" for AIs without one)
- Date formatting (dd/mm/yyyy by default)
- Decimals rendered as exact strings
- Unit or ISO code alongside measured values
"""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional

from ..core.config import ParserConfig
from ..core.decoder import DecodeResult, decode_gs1
from ..core.field_decoders import GS1Value
from ..field_names import field_name


DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def format_value(value: GS1Value, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render a decoded value as text.

    - date: formatted with date_format
    - Decimal: plain notation, trailing zeros kept ("0.525", "20.00")
    - str: unchanged
    """
    if isinstance(value, date):
        return value.strftime(date_format)
    if isinstance(value, Decimal):
        return format(value, 'f')
    return value


def format_decode_result(
    result: DecodeResult,
    date_format: str = DEFAULT_DATE_FORMAT
) -> Dict[str, Any]:
    """
    Build the output dictionary for a decode result.

    Elements carrying a unit are rendered as {"value": ..., "unit": ...};
    the symbology name, if any, is added under "_symbology".
    """
    output: Dict[str, Any] = {}

    for elem in result.elements:
        formatted = format_value(elem.value, date_format)
        if elem.unit:
            output[field_name(elem.ai)] = {"value": formatted, "unit": elem.unit}
        else:
            output[field_name(elem.ai)] = formatted

    if result.code_name:
        output["_symbology"] = result.code_name

    return output


def format_decode_result_json(
    result: DecodeResult,
    date_format: str = DEFAULT_DATE_FORMAT
) -> str:
    """
    Format a decode result as JSON.

    Args:
        result: Result of decode_gs1()
        date_format: strftime format for dates (default: dd/mm/yyyy)

    Returns:
        JSON string with one entry per decoded element
    """
    return json.dumps(
        format_decode_result(result, date_format),
        ensure_ascii=False,
        indent=2,
    )


def decode_gs1_to_json(
    barcode_data: str,
    date_format: str = DEFAULT_DATE_FORMAT,
    config: Optional[ParserConfig] = None
) -> str:
    """
    Decode a GS1 barcode and return JSON output.

    Example:
        >>> print(decode_gs1_to_json("(01)04012345678901(17)150129(10)ABC123"))
        {
          "GTIN Code": "04012345678901",
          "Expiry Date": "29/01/2015",
          "Batch/Lot Number": "ABC123"
        }
    """
    result = decode_gs1(barcode_data, config=config)
    return format_decode_result_json(result, date_format)


def decode_gs1_to_dict(
    barcode_data: str,
    date_format: str = DEFAULT_DATE_FORMAT,
    config: Optional[ParserConfig] = None
) -> Dict[str, Any]:
    """Decode a GS1 barcode and return the formatted dictionary."""
    result = decode_gs1(barcode_data, config=config)
    return format_decode_result(result, date_format)
