"""Configuration for the numeric formatting collaborator.

NumberFormatConfig holds the settings that control how float tokens are
written. Values are immutable once created; a config can be built
directly or read from the environment:

- OFD_TYPES_FLOAT_PRECISION: maximum number of fractional digits
  (unset or empty means shortest round-tripping text)
- OFD_TYPES_NEGATIVE_ZERO: "keep" to write -0.0 as "-0",
  anything else (or unset) normalizes it to "0"
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import ENV_FLOAT_PRECISION, ENV_NEGATIVE_ZERO


@dataclass(frozen=True)
class NumberFormatConfig:
    """Settings for minimal-decimal float formatting.

    Attributes:
        precision: Maximum fractional digits, or None for the shortest
            text that parses back to the same float
        normalize_negative_zero: Write negative zero as "0"
    """
    precision: Optional[int] = None
    normalize_negative_zero: bool = True

    def __post_init__(self):
        """Validate configuration values."""
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise TypeError(
                    f"precision must be an int or None, got {type(self.precision).__name__}"
                )
            if self.precision < 0:
                raise ValueError(f"precision must be >= 0, got {self.precision}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'NumberFormatConfig':
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Returns:
            New NumberFormatConfig

        Raises:
            ValueError: If OFD_TYPES_FLOAT_PRECISION is not an integer
        """
        env = os.environ if environ is None else environ

        precision = None
        raw_precision = env.get(ENV_FLOAT_PRECISION, "").strip()
        if raw_precision:
            try:
                precision = int(raw_precision)
            except ValueError as e:
                raise ValueError(
                    f"{ENV_FLOAT_PRECISION} must be an integer, got {raw_precision!r}"
                ) from e

        keep_negative_zero = env.get(ENV_NEGATIVE_ZERO, "").strip().lower() == "keep"
        return cls(precision=precision, normalize_negative_zero=not keep_negative_zero)
