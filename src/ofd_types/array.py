"""ScalarArray: space-delimited scalar array of the OFD document format.

An array is an ordered sequence of textual tokens, written as the tokens
joined by single spaces (e.g. "1 2.0 5.0"). Tokens may be any scalar
except another array or a location reference; arrays never nest.

The type has three facets:
- Parser/Formatter: text <-> tokens, construction from mixed scalars
- Typed access: strict (get_float, get_int) and lenient
  (expect_floats, expect_ints, expect_strings) indexed reads
- Matrix view: six tokens read as an affine transform, see matrix.py

Numbers are always formatted and parsed through an explicit NumberFormat
collaborator, which defaults to DEFAULT_NUMBER_FORMAT.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from . import matrix
from .constants import HEX_PREFIX, IDENTITY_TOKENS, NULL_LITERAL, TOKEN_SEPARATOR
from .errors import InvalidArgumentError, OutOfBoundsError, TokenParseError
from .numeric import DEFAULT_NUMBER_FORMAT, NumberFormat
from .scalars import Absent, Float, Int, Text, as_scalar

logger = logging.getLogger(__name__)


class ScalarArray:
    """Ordered, mutable sequence of scalar tokens.

    Construction from scalars drops None/Absent and blank text, writes
    floats with the minimal-decimal formatter and integers with their
    default text, and keeps other text verbatim.

    Equality is exact over the ordered tokens: "1" and "1.0" differ.
    Instances are mutable (append, set_tokens) and therefore unhashable.

    Example:
        >>> arr = ScalarArray(1.0, 2.5, None, "  ", "#1A")
        >>> str(arr)
        '1 2.5 #1A'
        >>> arr.expect_ints(4)
        [1, 0, 26, 0]
    """

    __hash__ = None

    def __init__(self, *values: Any, number_format: Optional[NumberFormat] = None):
        self._format: NumberFormat = (
            number_format if number_format is not None else DEFAULT_NUMBER_FORMAT
        )
        self._tokens: List[str] = []
        for value in values:
            token = self._scalar_token(as_scalar(value))
            if token is not None:
                self._tokens.append(token)

    def _scalar_token(self, scalar) -> Optional[str]:
        """Token text for a tagged scalar, or None when it is dropped."""
        if isinstance(scalar, Absent):
            return None
        if isinstance(scalar, Text):
            return None if scalar.is_blank else scalar.value
        if isinstance(scalar, Float):
            return self._format.format_minimal(scalar.value)
        if isinstance(scalar, Int):
            return str(scalar.value)
        raise InvalidArgumentError(f"Unsupported scalar {scalar!r}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: Optional[str],
              number_format: Optional[NumberFormat] = None) -> Optional['ScalarArray']:
        """Parse whitespace-delimited text into an array.

        Args:
            text: Attribute or element text

        Returns:
            New array, or None for None, "", "null" and whitespace-only text
        """
        if text is None or text == NULL_LITERAL or not text.strip():
            logger.debug(f"No array in text {text!r}")
            return None
        return cls(number_format=number_format).set_tokens(text.split())

    @classmethod
    def from_scalars(cls, values: Optional[Iterable[Any]],
                     number_format: Optional[NumberFormat] = None) -> 'ScalarArray':
        """Build an array from a sequence of heterogeneous scalars.

        Args:
            values: Floats, ints, strings, None or tagged Scalars

        Returns:
            New array holding one token per kept element

        Raises:
            InvalidArgumentError: If values is None or holds a non-scalar
        """
        if values is None:
            raise InvalidArgumentError("Array values cannot be None")
        return cls(*values, number_format=number_format)

    @classmethod
    def from_affine(cls, a: float, b: float, c: float, d: float, e: float, f: float,
                    number_format: Optional[NumberFormat] = None) -> 'ScalarArray':
        """Build a transform array from its six coefficients.

        Coefficients are written with Python's full-precision float text
        (1 -> "1.0"), not with the minimal-decimal formatter.

        Args:
            a: X scale
            b: Y shear
            c: X shear
            d: Y scale
            e: X translation
            f: Y translation
        """
        tokens = [repr(float(v)) for v in (a, b, c, d, e, f)]
        return cls(number_format=number_format).set_tokens(tokens)

    @classmethod
    def identity_affine(cls, number_format: Optional[NumberFormat] = None) -> 'ScalarArray':
        """Identity transform array "1 0 0 1 0 0" (new instance per call)."""
        return cls(number_format=number_format).set_tokens(IDENTITY_TOKENS)

    # ------------------------------------------------------------------
    # Tokens and text
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Snapshot of the current tokens."""
        return tuple(self._tokens)

    @property
    def number_format(self) -> NumberFormat:
        """Numeric collaborator used by this array."""
        return self._format

    def append(self, token: str) -> 'ScalarArray':
        """Append a raw token (not validated) and return self."""
        self._tokens.append(token)
        return self

    def set_tokens(self, tokens: Iterable[str]) -> 'ScalarArray':
        """Replace all tokens with a copy of tokens and return self."""
        self._tokens = list(tokens)
        return self

    def to_text(self) -> str:
        """Tokens joined by single spaces."""
        return TOKEN_SEPARATOR.join(self._tokens)

    def size(self) -> int:
        """Number of tokens."""
        return len(self._tokens)

    # ------------------------------------------------------------------
    # Strict access
    # ------------------------------------------------------------------

    def get_token(self, index: int) -> str:
        """Raw token at index.

        Raises:
            OutOfBoundsError: If index is negative or >= len(self)
        """
        if not 0 <= index < len(self._tokens):
            raise OutOfBoundsError(index, len(self._tokens))
        return self._tokens[index]

    def get_float(self, index: int) -> float:
        """Token at index parsed as a float.

        Raises:
            OutOfBoundsError: If index is outside the array
            TokenParseError: If the token is not a number
        """
        token = self.get_token(index)
        try:
            return self._format.parse_float(token)
        except TokenParseError as e:
            raise TokenParseError(token, "float", index) from e

    def get_int(self, index: int) -> int:
        """Token at index parsed as an integer.

        Tokens starting with "#" are read as hexadecimal ("#1A" -> 26),
        all others as decimal.

        Raises:
            OutOfBoundsError: If index is outside the array
            TokenParseError: If the token is not an integer
        """
        token = self.get_token(index)
        try:
            if token.startswith(HEX_PREFIX):
                return self._format.parse_int(token[len(HEX_PREFIX):], 16)
            return self._format.parse_int(token, 10)
        except TokenParseError as e:
            raise TokenParseError(token, "int", index) from e

    def to_floats(self) -> List[float]:
        """Every token parsed as a float; raises on the first bad token."""
        return [self.get_float(i) for i in range(len(self._tokens))]

    def to_ints(self) -> List[int]:
        """Every token parsed as an integer; raises on the first bad token."""
        return [self.get_int(i) for i in range(len(self._tokens))]

    # ------------------------------------------------------------------
    # Lenient access
    # ------------------------------------------------------------------

    def expect_floats(self, count: int) -> List[float]:
        """Exactly count floats, 0.0 for unparseable or missing tokens.

        Args:
            count: Number of values the caller expects

        Returns:
            List of length count
        """
        _check_count(count)
        values = [0.0] * count
        for i in range(min(count, len(self._tokens))):
            try:
                values[i] = self.get_float(i)
            except TokenParseError as e:
                logger.debug(f"Defaulting to 0.0: {e}")
        return values

    def expect_ints(self, count: int) -> List[int]:
        """Exactly count integers, 0 for unparseable or missing tokens.

        Honors the "#" hexadecimal prefix like get_int().
        """
        _check_count(count)
        values = [0] * count
        for i in range(min(count, len(self._tokens))):
            try:
                values[i] = self.get_int(i)
            except TokenParseError as e:
                logger.debug(f"Defaulting to 0: {e}")
        return values

    def expect_strings(self, count: int) -> List[str]:
        """Exactly count raw tokens, "" past the end of the array."""
        _check_count(count)
        return [self._tokens[i] if i < len(self._tokens) else "" for i in range(count)]

    # ------------------------------------------------------------------
    # Matrix view
    # ------------------------------------------------------------------

    def to_matrix(self) -> np.ndarray:
        """3x3 homogeneous matrix [[a,b,0],[c,d,0],[e,f,1]].

        Raises:
            InvalidMatrixSizeError: If the array does not hold 6 tokens
            TokenParseError: If a token is not a number
        """
        return matrix.to_matrix(self)

    def multiply(self, other: 'ScalarArray') -> 'ScalarArray':
        """Compose two transforms: self_matrix x other_matrix.

        Operand order matters; a.multiply(b) applies a first, then b.

        Raises:
            InvalidMatrixSizeError: If either array does not hold 6 tokens
        """
        return matrix.multiply(self, other)

    def format_matrix(self) -> str:
        """Matrix view as tab-separated rows, for debugging."""
        return matrix.format_matrix(self)

    # ------------------------------------------------------------------
    # Identity, equality, cloning
    # ------------------------------------------------------------------

    def clone(self) -> 'ScalarArray':
        """Independent copy of this array."""
        return type(self)(number_format=self._format).set_tokens(self._tokens)

    def __copy__(self) -> 'ScalarArray':
        return self.clone()

    def __deepcopy__(self, memo) -> 'ScalarArray':
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarArray):
            return NotImplemented
        return self._tokens == other._tokens

    def __matmul__(self, other: 'ScalarArray') -> 'ScalarArray':
        if not isinstance(other, ScalarArray):
            return NotImplemented
        return self.multiply(other)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __getitem__(self, index: int) -> str:
        return self.get_token(index)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        """Compact representation for debugging."""
        return f"ScalarArray({self.to_text()!r})"


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgumentError(f"Expected count must be >= 0, got {count}")
