"""
GS1 Element String Decoder

Decodes GS1 element strings from barcodes (GS1-128, GS1 DataMatrix,
GS1 QR Code, GS1 DataBar) into typed elements: strings, exact decimals
and calendar dates.

Based on GS1 General Specifications.
"""

from .core.config import ParserConfig, GROUP_SEPARATOR
from .core.decoder import GS1Decoder, DecodeResult, decode_gs1, strip_symbology
from .core.field_decoders import ParsedElement
from .core.ai_table import load_ai_table, AIDefinition, DecoderKind
from .core.errors import (
    ErrorCode,
    BarcodeError,
    EmptyBarcodeError,
    InvalidAIError,
    InvalidDateError,
    FixedLengthDataTooShortError,
    EmptyVariableLengthDataError,
    NumericDataExpectedError,
    InternalError,
)
from .field_names import GS1Field, AI_FIELD_NAMES
from .formatters.json_formatter import (
    decode_gs1_to_json,
    decode_gs1_to_dict,
    format_decode_result_json,
)

__version__ = "1.0.0"
__all__ = [
    "ParserConfig",
    "GROUP_SEPARATOR",
    "GS1Decoder",
    "DecodeResult",
    "decode_gs1",
    "strip_symbology",
    "ParsedElement",
    "load_ai_table",
    "AIDefinition",
    "DecoderKind",
    "ErrorCode",
    "BarcodeError",
    "EmptyBarcodeError",
    "InvalidAIError",
    "InvalidDateError",
    "FixedLengthDataTooShortError",
    "EmptyVariableLengthDataError",
    "NumericDataExpectedError",
    "InternalError",
    "GS1Field",
    "AI_FIELD_NAMES",
    "decode_gs1_to_json",
    "decode_gs1_to_dict",
    "format_decode_result_json",
]
