"""
Core decoding components: AI table, field decoders and the decode loop.
"""

from .ai_table import (
    AIDefinition,
    AITrie,
    DecoderKind,
    build_ai_trie,
    load_ai_table,
)
from .config import ParserConfig, GROUP_SEPARATOR
from .decoder import (
    DecodeResult,
    GS1Decoder,
    SYMBOLOGY_IDENTIFIERS,
    decode_gs1,
    strip_symbology,
)
from .errors import (
    BarcodeError,
    EmptyBarcodeError,
    EmptyVariableLengthDataError,
    ErrorCode,
    FixedLengthDataTooShortError,
    InternalError,
    InvalidAIError,
    InvalidDateError,
    NumericDataExpectedError,
)
from .field_decoders import ParsedElement, decode_field

__all__ = [
    "AIDefinition",
    "AITrie",
    "DecoderKind",
    "build_ai_trie",
    "load_ai_table",
    "ParserConfig",
    "GROUP_SEPARATOR",
    "DecodeResult",
    "GS1Decoder",
    "SYMBOLOGY_IDENTIFIERS",
    "decode_gs1",
    "strip_symbology",
    "BarcodeError",
    "EmptyBarcodeError",
    "EmptyVariableLengthDataError",
    "ErrorCode",
    "FixedLengthDataTooShortError",
    "InternalError",
    "InvalidAIError",
    "InvalidDateError",
    "NumericDataExpectedError",
    "ParsedElement",
    "decode_field",
]
