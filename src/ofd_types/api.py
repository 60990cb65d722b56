"""Public API for ofd-types.

This module provides the complete public API: the scalar array value type,
its tagged scalar inputs, the numeric collaborator and the error kinds.
"""

# Array
from .array import ScalarArray

# Scalars
from .scalars import (
    Scalar,
    Float,
    Int,
    Text,
    Absent,
    ABSENT,
    as_scalar,
)

# Matrix view
from .matrix import (
    to_matrix,
    multiply,
    format_matrix,
)

# Numeric collaborator
from .numeric import (
    NumberFormat,
    DefaultNumberFormat,
    DEFAULT_NUMBER_FORMAT,
)

# Configuration
from .config import NumberFormatConfig

# Errors
from .errors import (
    ScalarArrayError,
    InvalidArgumentError,
    OutOfBoundsError,
    TokenParseError,
    InvalidMatrixSizeError,
)

# Constants
from .constants import MATRIX_SIZE, IDENTITY_TOKENS, HEX_PREFIX

# Version
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("ofd-types")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Array
    "ScalarArray",

    # Scalars
    "Scalar",
    "Float",
    "Int",
    "Text",
    "Absent",
    "ABSENT",
    "as_scalar",

    # Matrix view
    "to_matrix",
    "multiply",
    "format_matrix",

    # Numeric collaborator
    "NumberFormat",
    "DefaultNumberFormat",
    "DEFAULT_NUMBER_FORMAT",

    # Configuration
    "NumberFormatConfig",

    # Errors
    "ScalarArrayError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "TokenParseError",
    "InvalidMatrixSizeError",

    # Constants
    "MATRIX_SIZE",
    "IDENTITY_TOKENS",
    "HEX_PREFIX",

    # Version
    "__version__",
]
