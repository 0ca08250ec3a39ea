"""
GS1 Field Decoders

One decoder per GS1 field layout. Every decoder receives the full input
string and a cursor positioned on the first digit of the AI, and returns the
decoded element together with the cursor position after the consumed data.

Decoders:
- fixed length (optionally digits only)
- variable length, up to the terminator or an optional cap
- YYMMDD date
- fixed and variable length measures with implied decimals
- variable length amounts prefixed by an ISO 4217 currency code
- variable length strings prefixed by an ISO 3166 country code
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Optional, Tuple, Union

from .ai_table import AIDefinition, DecoderKind
from .config import ParserConfig
from .errors import (
    EmptyVariableLengthDataError,
    FixedLengthDataTooShortError,
    InternalError,
    InvalidAIError,
    InvalidDateError,
    NumericDataExpectedError,
)
from ..validators.validators import (
    insert_decimal_point,
    is_numeric,
    resolve_yymmdd,
    NUMERIC,
)


GS1Value = Union[str, Decimal, date]

# Sign characters accepted after a temperature
MINUS_SIGNS = frozenset('-–—')


@dataclass(frozen=True)
class ParsedElement:
    """
    A decoded GS1 element.

    Attributes:
        ai: Application Identifier, including the decimals digit for measures
        title: Short GS1 data title
        value: str, Decimal or date depending on the AI
        raw: The data exactly as it appeared after the AI
        unit: Unit of measurement or ISO code ("" if none)
    """
    ai: str
    title: str
    value: GS1Value
    raw: str
    unit: str = ""


DecodeOutcome = Tuple[ParsedElement, int]


def _variable_extent(
    text: str,
    start: int,
    terminator: str,
    cap: Optional[int] = None
) -> Tuple[int, int]:
    """
    Find the end of a variable-length field starting at ``start``.

    Returns:
        (data_end, next_pos); next_pos skips the terminator if one was found
    """
    term_pos = text.find(terminator, start)
    if term_pos != -1:
        return term_pos, term_pos + 1

    end = len(text)
    if cap:
        end = min(end, start + cap)
    return end, end


def _read_decimals(
    definition: AIDefinition,
    text: str,
    pos: int
) -> Tuple[str, int, int]:
    """
    Resolve the number of decimals of a measure AI.

    Returns:
        (ai, decimals, data_start)
    """
    stem_end = pos + len(definition.stem)
    if definition.decimals is not None:
        return definition.stem, definition.decimals, stem_end

    digit = text[stem_end:stem_end + 1]
    if not digit or digit not in NUMERIC:
        raise InvalidAIError(definition.stem, digit)
    return definition.stem + digit, int(digit), stem_end + 1


def _to_decimal(ai: str, digits: str, decimals: int) -> Decimal:
    try:
        return insert_decimal_point(digits, decimals)
    except ValueError as exc:
        raise InternalError(f'Invalid number "{digits}" for AI "{ai}"', exc, ai=ai) from exc


def decode_fixed_length(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """
    Fixed length data, not followed by a terminator.

    A terminator directly after the data is left in place; the decode loop
    skips it.
    """
    ai = definition.stem
    length = definition.fixed_length
    start = pos + len(ai)
    data = text[start:start + length]

    if len(data) < length:
        raise FixedLengthDataTooShortError(
            f'Data length {len(data)} is less than expected length {length} for AI "{ai}".',
            ai=ai,
        )

    if definition.numeric and not is_numeric(data):
        raise NumericDataExpectedError(
            f'Numeric data expected for AI "{ai}", but got "{data}".', ai=ai
        )

    return ParsedElement(ai, definition.title, data, data), start + length


def decode_variable_length(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """
    Variable length data running to the next terminator.

    Without a terminator the field is the last one and runs to the end of
    the input, bounded by the AI's cap (for batch/lot and serial numbers the
    configured lot_max_length, if set).
    """
    ai = definition.stem
    cap = definition.variable_cap
    if definition.uses_lot_length and config.lot_max_length is not None:
        cap = config.lot_max_length

    start = pos + len(ai)
    end, next_pos = _variable_extent(text, start, config.terminator, cap)
    data = text[start:end]

    if not data:
        raise EmptyVariableLengthDataError(
            f'Variable length data for AI "{ai}" is empty.', ai=ai
        )

    if definition.numeric and not is_numeric(data):
        raise NumericDataExpectedError(
            f'Numeric data expected for AI "{ai}", but got "{data}".', ai=ai
        )

    return ParsedElement(ai, definition.title, data, data), next_pos


def decode_date(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """
    YYMMDD date.

    Years 51-99 belong to the 20th century, 00-50 to the 21st. Day 00 means
    the last day of the month.
    """
    ai = definition.stem
    start = pos + len(ai)
    data = text[start:start + 6]

    # Truncation is a length fault, not InvalidDateError
    if len(data) < 6:
        raise FixedLengthDataTooShortError(
            f'Date "{data}" for AI "{ai}" is shorter than 6 digits.', ai=ai
        )

    try:
        value = resolve_yymmdd(data)
    except ValueError as exc:
        raise InvalidDateError(f'Invalid date "{data}" for AI "{ai}".', ai=ai) from exc

    return ParsedElement(ai, definition.title, value, data), start + 6


def decode_fixed_length_measure(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """
    Fixed length number with implied decimals and an implicit unit.

    The digit after the stem gives the number of decimals. Signed AIs
    (temperatures) may carry one trailing minus sign.
    """
    ai, decimals, start = _read_decimals(definition, text, pos)
    length = definition.fixed_length or 6
    digits = text[start:start + length]

    if len(digits) < length:
        raise FixedLengthDataTooShortError(
            f'Data length {len(digits)} is less than expected length {length} for AI "{ai}".',
            ai=ai,
        )

    if not is_numeric(digits):
        raise NumericDataExpectedError(
            f'Numeric data expected for AI "{ai}", but got "{digits}".', ai=ai
        )

    value = _to_decimal(ai, digits, decimals)
    end = start + length
    if definition.signed and text[end:end + 1] in MINUS_SIGNS:
        value = -value
        end += 1

    element = ParsedElement(ai, definition.title, value, text[start:end], definition.unit)
    return element, end


def decode_variable_length_measure(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """Variable length number with implied decimals (amounts, prices)."""
    ai, decimals, start = _read_decimals(definition, text, pos)
    end, next_pos = _variable_extent(text, start, config.terminator)
    digits = text[start:end]

    if not digits:
        raise EmptyVariableLengthDataError(
            f'Variable length data for AI "{ai}" is empty.', ai=ai
        )

    value = _to_decimal(ai, digits, decimals)
    return ParsedElement(ai, definition.title, value, digits, definition.unit), next_pos


def decode_variable_length_iso_numbers(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """
    ISO 4217 currency code followed by a number with implied decimals.

    The three-digit code becomes the element's unit.
    """
    ai, decimals, start = _read_decimals(definition, text, pos)
    end, next_pos = _variable_extent(text, start, config.terminator)
    payload = text[start:end]

    if not payload:
        raise EmptyVariableLengthDataError(
            f'Variable length data for AI "{ai}" is empty.', ai=ai
        )

    # cut off ISO code
    value = _to_decimal(ai, payload[3:], decimals)
    return ParsedElement(ai, definition.title, value, payload, payload[:3]), next_pos


def decode_variable_length_iso_chars(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """ISO 3166 country code followed by free text (postal codes, approvals)."""
    ai = definition.stem
    start = pos + len(ai)
    end, next_pos = _variable_extent(text, start, config.terminator)
    payload = text[start:end]

    if not payload:
        raise EmptyVariableLengthDataError(
            f'Variable length data for AI "{ai}" is empty.', ai=ai
        )

    return ParsedElement(ai, definition.title, payload[3:], payload, payload[:3]), next_pos


FieldDecoder = Callable[[AIDefinition, str, int, ParserConfig], DecodeOutcome]

DECODERS: Dict[DecoderKind, FieldDecoder] = {
    DecoderKind.FIXED_LENGTH: decode_fixed_length,
    DecoderKind.VARIABLE_LENGTH: decode_variable_length,
    DecoderKind.DATE: decode_date,
    DecoderKind.FIXED_LENGTH_MEASURE: decode_fixed_length_measure,
    DecoderKind.VARIABLE_LENGTH_MEASURE: decode_variable_length_measure,
    DecoderKind.VARIABLE_LENGTH_ISO_NUMBERS: decode_variable_length_iso_numbers,
    DecoderKind.VARIABLE_LENGTH_ISO_CHARS: decode_variable_length_iso_chars,
}


def decode_field(
    definition: AIDefinition,
    text: str,
    pos: int,
    config: ParserConfig
) -> DecodeOutcome:
    """Run the decoder bound to ``definition`` at position ``pos``."""
    return DECODERS[definition.kind](definition, text, pos, config)
