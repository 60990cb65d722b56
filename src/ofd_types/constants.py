"""Global constants for ofd-types.

This module centralizes the fixed literals of the array text encoding
to ensure consistency and prevent duplication.
"""

from typing import Tuple

# Number of tokens in an affine transform array (a b c d e f)
MATRIX_SIZE: int = 6

# Tokens of the identity transform
IDENTITY_TOKENS: Tuple[str, ...] = ("1", "0", "0", "1", "0", "0")

# Prefix marking a hexadecimal integer token, e.g. "#1A"
HEX_PREFIX: str = "#"

# Literal attribute text treated as a missing array
NULL_LITERAL: str = "null"

# Separator written between tokens
TOKEN_SEPARATOR: str = " "

# Environment variables read by NumberFormatConfig.from_env()
ENV_FLOAT_PRECISION: str = "OFD_TYPES_FLOAT_PRECISION"
ENV_NEGATIVE_ZERO: str = "OFD_TYPES_NEGATIVE_ZERO"
