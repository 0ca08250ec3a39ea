"""
Error taxonomy for the GS1 decoder.

Every fault raised while decoding is a BarcodeError subclass carrying an
ErrorCode, so callers can branch either on the exception class or on
``error.code``. The first fault aborts the whole decode.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes."""
    EMPTY_BARCODE = "EMPTY_BARCODE"
    INVALID_AI = "INVALID_AI"
    INVALID_DATE = "INVALID_DATE"
    FIXED_LENGTH_DATA_TOO_SHORT = "FIXED_LENGTH_DATA_TOO_SHORT"
    EMPTY_VARIABLE_LENGTH_DATA = "EMPTY_VARIABLE_LENGTH_DATA"
    NUMERIC_DATA_EXPECTED = "NUMERIC_DATA_EXPECTED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class BarcodeError(Exception):
    """
    Base class of all decoding errors.

    Attributes:
        code: ErrorCode classifying the fault
        message: Human-readable description
        ai: The AI being decoded when the fault occurred (if known)
    """
    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, ai: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.ai = ai

    def to_dict(self) -> dict:
        return {
            'code': self.code.value,
            'message': self.message,
            'ai': self.ai,
        }


class EmptyBarcodeError(BarcodeError):
    code = ErrorCode.EMPTY_BARCODE

    def __init__(self, message: str = "The barcode is empty or not a string."):
        super().__init__(message)


class InvalidAIError(BarcodeError):
    """
    No AI matches the digits at the current position.

    ``prefix`` holds the digits already matched, ``current`` the character
    that did not continue any known AI.
    """
    code = ErrorCode.INVALID_AI

    def __init__(self, prefix: str, current: str):
        if prefix:
            message = f'Invalid AI identifier "{current}" after "{prefix}"'
        else:
            message = f'Invalid first AI identifier "{current}"'
        super().__init__(message, ai=prefix or None)
        self.prefix = prefix
        self.current = current


class InvalidDateError(BarcodeError):
    code = ErrorCode.INVALID_DATE


class FixedLengthDataTooShortError(BarcodeError):
    code = ErrorCode.FIXED_LENGTH_DATA_TOO_SHORT


class EmptyVariableLengthDataError(BarcodeError):
    code = ErrorCode.EMPTY_VARIABLE_LENGTH_DATA


class NumericDataExpectedError(BarcodeError):
    code = ErrorCode.NUMERIC_DATA_EXPECTED


class InternalError(BarcodeError):
    """Lower-level conversion failure; ``cause`` is the original exception."""
    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, cause: BaseException, ai: Optional[str] = None):
        super().__init__(f"{message}: {cause}", ai=ai)
        self.cause = cause
