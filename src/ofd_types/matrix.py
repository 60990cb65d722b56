"""Affine matrix view of six-token scalar arrays.

A transform array "a b c d e f" stands for the homogeneous 2D matrix

    | a  b  0 |
    | c  d  0 |
    | e  f  1 |

which maps a row vector (x, y, 1) to (a*x + c*y + e, b*x + d*y + f, 1).
Only the six variable entries are ever stored; the third column is
implicit.

Composition is ordinary matrix multiplication, left operand first:
multiply(A, B) = A x B, i.e. apply A then B to row vectors.
"""

from typing import TYPE_CHECKING

import numpy as np

from .constants import MATRIX_SIZE
from .errors import InvalidMatrixSizeError

if TYPE_CHECKING:
    from .array import ScalarArray

# Matrix cells that map back to tokens a, b, c, d, e, f
_TOKEN_CELLS = ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1))


def _require_affine(array: 'ScalarArray') -> None:
    if len(array) != MATRIX_SIZE:
        raise InvalidMatrixSizeError(len(array), MATRIX_SIZE)


def to_matrix(array: 'ScalarArray') -> np.ndarray:
    """Read a six-token array as a 3x3 homogeneous matrix.

    Args:
        array: Transform array (a b c d e f)

    Returns:
        (3, 3) float64 array [[a, b, 0], [c, d, 0], [e, f, 1]]

    Raises:
        InvalidMatrixSizeError: If the array does not hold 6 tokens
        TokenParseError: If a token is not a number
    """
    _require_affine(array)

    mtx = np.zeros((3, 3), dtype=np.float64)
    for i, (row, col) in enumerate(_TOKEN_CELLS):
        mtx[row, col] = array.get_float(i)
    mtx[2, 2] = 1.0
    return mtx


def multiply(left: 'ScalarArray', right: 'ScalarArray') -> 'ScalarArray':
    """Compose two transform arrays as left x right.

    The six result entries are written with the left operand's
    minimal-decimal formatter into a new array of the left operand's type.

    Args:
        left: First transform (applied first to row vectors)
        right: Second transform

    Returns:
        New six-token array

    Raises:
        InvalidMatrixSizeError: If either array does not hold 6 tokens
        TokenParseError: If a token of either array is not a number
    """
    _require_affine(left)
    _require_affine(right)

    product = to_matrix(left) @ to_matrix(right)

    fmt = left.number_format
    tokens = [fmt.format_minimal(float(product[row, col])) for row, col in _TOKEN_CELLS]
    return type(left)(number_format=fmt).set_tokens(tokens)


def format_matrix(array: 'ScalarArray') -> str:
    """Render the 3x3 matrix of a transform array as text.

    Each row is written on its own line, cells separated by tabs and
    formatted with the array's minimal-decimal formatter.

    Raises:
        InvalidMatrixSizeError: If the array does not hold 6 tokens
    """
    fmt = array.number_format
    rows = to_matrix(array)
    return "\n".join("\t".join(fmt.format_minimal(float(v)) for v in row) for row in rows)
