"""
Output formatters for GS1 decode results.
"""

from .json_formatter import (
    decode_gs1_to_json,
    decode_gs1_to_dict,
    format_decode_result,
    format_decode_result_json,
    format_value,
)

__all__ = [
    "decode_gs1_to_json",
    "decode_gs1_to_dict",
    "format_decode_result",
    "format_decode_result_json",
    "format_value",
]
