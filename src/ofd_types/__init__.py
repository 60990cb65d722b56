"""ofd-types: basic value types of the OFD fixed-layout document format.

This package provides the space-delimited scalar array (ST_Array) used
throughout OFD documents, including its affine transform (CTM) view.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
