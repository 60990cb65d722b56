"""Tagged scalar values accepted by ScalarArray construction.

A Scalar is exactly one of:
- Float: floating value, written with the minimal-decimal formatter
- Int: integer value, written with its default text
- Text: textual value, kept verbatim unless blank
- Absent: missing value, always dropped

Raw Python values are lifted with as_scalar() before construction, so the
array only ever dispatches on these four tags.
"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Union

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Float:
    """Floating scalar."""
    value: float


@dataclass(frozen=True)
class Int:
    """Integer scalar."""
    value: int


@dataclass(frozen=True)
class Text:
    """Textual scalar."""
    value: str

    @property
    def is_blank(self) -> bool:
        """True for empty or whitespace-only text."""
        return not self.value.strip()


@dataclass(frozen=True)
class Absent:
    """Missing scalar (null)."""


Scalar = Union[Float, Int, Text, Absent]

ABSENT = Absent()


def as_scalar(value: Any) -> Scalar:
    """Lift a raw Python value into a tagged Scalar.

    Args:
        value: None, a float, an int, a str, or an existing Scalar.
            numpy numeric scalars are accepted through the numbers ABCs.

    Returns:
        The tagged scalar

    Raises:
        InvalidArgumentError: If value is not a scalar (bools, containers,
            nested arrays and anything else are rejected)
    """
    if isinstance(value, (Float, Int, Text, Absent)):
        return value
    if value is None:
        return ABSENT
    # bool is an Integral subclass but has no place in a numeric array
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Boolean values are not array scalars, got {value!r}")
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, Integral):
        return Int(int(value))
    if isinstance(value, Real):
        return Float(float(value))
    raise InvalidArgumentError(
        f"Array elements must be scalars (float, int or str), got {type(value).__name__}"
    )
