"""
GS1 Element String Decoder

Decodes GS1 element strings from GS1-128, GS1 DataMatrix, GS1 QR Code and
GS1 DataBar/Composite barcodes into an ordered list of typed elements.

Processing:
1. Normalize human-readable input: "(" becomes the terminator, ")" is dropped
2. Drop one leading terminator (FNC1 in first position)
3. Strip the symbology identifier (]C1, ]e0, ]e1, ]e2, ]d2, ]Q3)
4. Repeatedly match an AI with the trie and run its field decoder

Key GS1 Rules:
- Variable-length AIs SHALL be delimited by FNC1/GS unless they are the last element
- FNC1 is transmitted as <GS> (ASCII 29, 0x1D) by scanners
- Fixed-length AIs do not require separators

The first fault aborts the decode; no partial result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .ai_table import AITrie, load_ai_table
from .config import ParserConfig
from .errors import BarcodeError, EmptyBarcodeError, InternalError
from .field_decoders import ParsedElement, decode_field
from ..field_names import GS1Field, field_for_ai


logger = logging.getLogger(__name__)


# Symbology identifier -> code name
SYMBOLOGY_IDENTIFIERS: Dict[str, str] = {
    ']C1': 'GS1-128',
    ']e0': 'GS1 DataBar',
    ']e1': 'GS1 Composite',
    ']e2': 'GS1 Composite',
    ']d2': 'GS1 DataMatrix',
    ']Q3': 'GS1 QR Code',
}


def strip_symbology(barcode: str) -> Tuple[str, str]:
    """
    Split a leading symbology identifier off the barcode.

    Returns:
        (code_name, remainder); code_name is "" if no identifier is recognized
    """
    code_name = SYMBOLOGY_IDENTIFIERS.get(barcode[:3])
    if code_name is None:
        return "", barcode
    return code_name, barcode[3:]


def normalize_parentheses(barcode: str, terminator: str) -> str:
    """Convert "(01)..." human-readable AIs to terminator-delimited form."""
    return barcode.replace('(', terminator).replace(')', '')


@dataclass(frozen=True)
class DecodeResult:
    """
    Result of decoding one barcode.

    Attributes:
        code_name: Symbology name from the identifier, "" if absent
        denormalized: Human-readable form, "(AI)data" per element
        elements: Decoded elements in input order
    """
    code_name: str
    denormalized: str
    elements: Tuple[ParsedElement, ...] = ()

    @property
    def data(self) -> Dict[GS1Field, ParsedElement]:
        """Elements keyed by named field; AIs without a name are left out."""
        keyed: Dict[GS1Field, ParsedElement] = {}
        for element in self.elements:
            gs1_field = field_for_ai(element.ai)
            if gs1_field is not None:
                keyed[gs1_field] = element
        return keyed

    def get(self, ai: str) -> Optional[ParsedElement]:
        """First element with the given AI, or None."""
        for element in self.elements:
            if element.ai == ai:
                return element
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code_name': self.code_name,
            'denormalized': self.denormalized,
            'elements': [
                {
                    'ai': e.ai,
                    'title': e.title,
                    'value': e.value,
                    'raw': e.raw,
                    'unit': e.unit,
                }
                for e in self.elements
            ],
        }


class GS1Decoder:
    """
    Decoder bound to one configuration.

    Instances hold only the frozen config and the shared AI trie, so they
    can be reused across threads.
    """

    def __init__(self, config: Optional[ParserConfig] = None, trie: Optional[AITrie] = None):
        self.config = config or ParserConfig()
        self.trie = trie or load_ai_table()

    def decode(self, barcode: str) -> DecodeResult:
        """
        Decode a GS1 element string.

        Raises:
            BarcodeError: the first fault found, left to right
        """
        if not isinstance(barcode, str) or not barcode:
            raise EmptyBarcodeError()

        terminator = self.config.terminator
        text = normalize_parentheses(barcode, terminator)
        if text.startswith(terminator):
            text = text[1:]
        if not text:
            raise EmptyBarcodeError()

        code_name, text = strip_symbology(text)
        if code_name:
            logger.debug("Symbology identifier detected: %s", code_name)

        elements: List[ParsedElement] = []
        parts: List[str] = []
        pos = 0
        length = len(text)

        while True:
            while text.startswith(terminator, pos):
                pos += 1
            if pos >= length:
                break

            definition = self.trie.match(text, pos)
            try:
                element, pos = decode_field(definition, text, pos, self.config)
            except BarcodeError:
                raise
            except (ValueError, ArithmeticError) as exc:
                raise InternalError(
                    f'Unexpected failure decoding AI "{definition.stem}"',
                    exc,
                    ai=definition.stem,
                ) from exc

            logger.debug("Decoded AI %s: %r", element.ai, element.value)
            elements.append(element)
            parts.append(f"({element.ai}){element.raw}")

        return DecodeResult(code_name, "".join(parts), tuple(elements))


def decode_gs1(barcode: str, *, config: Optional[ParserConfig] = None) -> DecodeResult:
    """
    Decode a GS1 element string with the given (or default) configuration.

    Example:
        >>> result = decode_gs1("]C10104012345678901" "17150129")
        >>> result.get("17").value
        datetime.date(2015, 1, 29)
    """
    return GS1Decoder(config).decode(barcode)
