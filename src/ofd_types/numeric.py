"""Numeric formatting and parsing collaborator.

Scalar arrays never format or parse numbers on their own. They delegate
to a NumberFormat, passed in explicitly, which provides:
- format_minimal: shortest decimal text, no trailing zeros or point
- parse_float: strict float parsing of a single token
- parse_int: strict integer parsing in a given base

DefaultNumberFormat is the implementation used unless another one is
injected (e.g. a recording mock in tests).
"""

import math
import string
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from .config import NumberFormatConfig
from .errors import TokenParseError

_DIGITS = string.digits + string.ascii_lowercase


class NumberFormat(Protocol):
    """Protocol for the numeric collaborator used by ScalarArray."""

    def format_minimal(self, value: float) -> str:
        """Format a float as minimal decimal text.

        Args:
            value: Float to format

        Returns:
            Shortest decimal text, e.g. 1.0 -> "1", 0.5 -> "0.5"
        """
        ...

    def parse_float(self, token: str) -> float:
        """Parse a token as a float.

        Raises:
            TokenParseError: If the token is not a number
        """
        ...

    def parse_int(self, token: str, base: int = 10) -> int:
        """Parse a token as an integer in the given base.

        Raises:
            TokenParseError: If the token is not an integer in that base
        """
        ...


@dataclass(frozen=True)
class DefaultNumberFormat:
    """Minimal-decimal formatter and strict parser backed by numpy.

    Formatting uses numpy.format_float_positional, which yields the
    shortest positional text that round-trips to the same float. Parsing
    rejects surrounding whitespace and "_" digit separators, which the
    Python builtins would otherwise accept.

    Attributes:
        config: Formatting settings
    """
    config: NumberFormatConfig = field(default_factory=NumberFormatConfig)

    def format_minimal(self, value: float) -> str:
        """Format value as minimal decimal text."""
        value = float(value)
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"

        text = np.format_float_positional(
            value,
            precision=self.config.precision,
            unique=True,
            fractional=True,
            trim='-',
        )
        # Rounding can leave "-0" for tiny negatives as well as for -0.0
        if self.config.normalize_negative_zero and text == "-0":
            text = "0"
        return text

    def parse_float(self, token: str) -> float:
        """Parse token as a float, strictly."""
        if not isinstance(token, str) or token != token.strip() or "_" in token:
            raise TokenParseError(str(token), "float")
        try:
            return float(token)
        except ValueError as e:
            raise TokenParseError(token, "float") from e

    def parse_int(self, token: str, base: int = 10) -> int:
        """Parse token as an integer in base, strictly.

        Only an optional sign followed by digits valid for base is
        accepted: no whitespace, no "_" separators, no "0x"-style prefix.
        """
        if not 2 <= base <= 36:
            raise ValueError(f"base must be in [2, 36], got {base}")
        kind = "int" if base == 10 else f"base-{base} int"
        if not isinstance(token, str):
            raise TokenParseError(str(token), kind)

        digits = token[1:] if token[:1] in ("+", "-") else token
        allowed = _DIGITS[:base]
        if not digits or any(ch not in allowed for ch in digits.lower()):
            raise TokenParseError(token, kind)
        try:
            return int(token, base)
        except ValueError as e:
            # Digit strings beyond the interpreter's conversion limit
            raise TokenParseError(token, kind) from e


DEFAULT_NUMBER_FORMAT = DefaultNumberFormat()
