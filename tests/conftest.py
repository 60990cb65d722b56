"""Shared fixtures for scalar array tests."""

from typing import List, Tuple

import pytest

from ofd_types.array import ScalarArray
from ofd_types.numeric import DEFAULT_NUMBER_FORMAT


class RecordingNumberFormat:
    """NumberFormat that tags formatted floats and records every call.

    Parsing delegates to the default implementation so arrays built with
    this format stay readable.
    """

    def __init__(self):
        self.calls: List[Tuple[str, object]] = []

    def format_minimal(self, value: float) -> str:
        self.calls.append(("format_minimal", value))
        return f"f{value!r}"

    def parse_float(self, token: str) -> float:
        self.calls.append(("parse_float", token))
        return DEFAULT_NUMBER_FORMAT.parse_float(token)

    def parse_int(self, token: str, base: int = 10) -> int:
        self.calls.append(("parse_int", token))
        return DEFAULT_NUMBER_FORMAT.parse_int(token, base)

    def formatted(self) -> List[object]:
        return [value for name, value in self.calls if name == "format_minimal"]


@pytest.fixture
def recording_format():
    """Fresh recording formatter."""
    return RecordingNumberFormat()


@pytest.fixture
def translation():
    """Pure translation by (10, 20)."""
    return ScalarArray.from_affine(1, 0, 0, 1, 10, 20)


@pytest.fixture
def scaling():
    """Uniform scale by 2."""
    return ScalarArray.from_affine(2, 0, 0, 2, 0, 0)


@pytest.fixture
def mixed():
    """Array mixing decimal, hexadecimal and non-numeric tokens."""
    return ScalarArray.parse("10 #1A 2.5 abc")
