"""Error kinds raised by scalar arrays and their matrix view.

Every error derives from ScalarArrayError and from the builtin exception
that best matches it, so callers can catch either:
- InvalidArgumentError: constructor input that cannot be tolerated
- OutOfBoundsError: strict indexed access past the end of the array
- TokenParseError: token is not parseable as the requested scalar kind
- InvalidMatrixSizeError: matrix operation on an array whose length != 6
"""

from typing import Optional


class ScalarArrayError(Exception):
    """Base class for all scalar array errors."""


class InvalidArgumentError(ScalarArrayError, ValueError):
    """Malformed or absent constructor input."""


class OutOfBoundsError(ScalarArrayError, IndexError):
    """Strict accessor called with an index outside the array."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of bounds for array of length {size}")


class TokenParseError(ScalarArrayError, ValueError):
    """Token could not be parsed as a number.

    Attributes:
        token: The offending token text
        kind: Requested scalar kind ("float" or "int")
        index: Position of the token in its array, when known
    """

    def __init__(self, token: str, kind: str, index: Optional[int] = None):
        self.token = token
        self.kind = kind
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Cannot parse token {token!r}{where} as {kind}")


class InvalidMatrixSizeError(ScalarArrayError, ValueError):
    """Matrix view requested on an array that does not hold exactly 6 tokens."""

    def __init__(self, size: int, expected: int = 6):
        self.size = size
        self.expected = expected
        super().__init__(
            f"Affine matrix array must have {expected} elements (a b c d e f), got {size}"
        )
