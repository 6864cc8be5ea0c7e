"""Error taxonomy for bill input and tax arithmetic."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    MAX_DECIMAL = "max_decimal"
    DUPLICATE_DECIMAL = "duplicate_decimal"
    PARSE = "parse"
    DIVISION_UNDEFINED = "division_undefined"


class TipsterError(Exception):
    """Base class for recoverable bill errors."""

    kind: ErrorKind


class MaxDecimalError(TipsterError, ValueError):
    """A digit was rejected because the amount already has the maximum decimal places."""

    kind = ErrorKind.MAX_DECIMAL


class DuplicateDecimalError(TipsterError, ValueError):
    """A second decimal point was rejected."""

    kind = ErrorKind.DUPLICATE_DECIMAL


class ParseError(TipsterError, ValueError):
    """The amount text could not be converted to a number."""

    kind = ErrorKind.PARSE


class DivisionUndefined(TipsterError, ZeroDivisionError):
    """Per-person share requested with a non-positive group size."""

    kind = ErrorKind.DIVISION_UNDEFINED
