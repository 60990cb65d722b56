"""Tests for typed access to array tokens.

Tests strict and lenient accessors including:
- get_float/get_int bounds and parse errors
- "#"-prefixed hexadecimal integer tokens
- expect_floats/expect_ints/expect_strings default filling
- Whole-array conversion with to_floats/to_ints
"""

import logging

import pytest
from hypothesis import given, strategies as st

from ofd_types import (
    InvalidArgumentError,
    OutOfBoundsError,
    ScalarArray,
    TokenParseError,
)


class TestStrictAccess:
    """Tests for get_token, get_float and get_int."""

    def test_len_and_size(self, mixed):
        """Test token count."""
        assert len(mixed) == 4
        assert mixed.size() == 4

    def test_get_token(self, mixed):
        """Test raw token access by index and subscript."""
        assert mixed.get_token(1) == "#1A"
        assert mixed[3] == "abc"

    def test_get_float(self, mixed):
        """Test float parsing of numeric tokens."""
        assert mixed.get_float(0) == 10.0
        assert mixed.get_float(2) == 2.5

    def test_get_float_scientific_notation(self):
        """Test that exponent notation is accepted for floats."""
        assert ScalarArray.parse("1e3 -2.5E-1").to_floats() == [1000.0, -0.25]

    def test_get_float_non_numeric_raises(self, mixed):
        """Test that a non-numeric token raises a parse error."""
        with pytest.raises(TokenParseError, match="'abc' at index 3 as float") as exc_info:
            mixed.get_float(3)

        assert exc_info.value.token == "abc"
        assert exc_info.value.kind == "float"
        assert exc_info.value.index == 3

    def test_get_float_hex_token_raises(self, mixed):
        """Test that hexadecimal tokens are only meaningful for integers."""
        with pytest.raises(TokenParseError):
            mixed.get_float(1)

    @pytest.mark.parametrize("index", [4, 100, -1])
    def test_get_float_out_of_bounds(self, mixed, index):
        """Test that indices outside the array raise OutOfBoundsError."""
        with pytest.raises(OutOfBoundsError, match=f"Index {index} out of bounds"):
            mixed.get_float(index)

    def test_out_of_bounds_is_index_error(self):
        """Test that OutOfBoundsError can be caught as IndexError."""
        with pytest.raises(IndexError):
            ScalarArray()[0]

    def test_get_int_hex_and_decimal_agree(self):
        """Test that "#1A" and "26" both read as 26."""
        assert ScalarArray.parse("#1A").get_int(0) == 26
        assert ScalarArray.parse("26").get_int(0) == 26

    def test_get_int_hex_is_case_insensitive(self):
        """Test lower and upper case hexadecimal digits."""
        assert ScalarArray.parse("#ff #FF #0").to_ints() == [255, 255, 0]

    def test_get_int_signed(self):
        """Test signed decimal integers."""
        assert ScalarArray.parse("-5 +7").to_ints() == [-5, 7]

    @pytest.mark.parametrize("token", ["2.5", "abc", "#", "#xyz", "1e3", "0x1A"])
    def test_get_int_invalid_raises(self, token):
        """Test that non-integer tokens raise a parse error."""
        with pytest.raises(TokenParseError, match="as int"):
            ScalarArray.parse(token).get_int(0)

    def test_get_int_out_of_bounds(self):
        """Test strict bounds for integer access."""
        with pytest.raises(OutOfBoundsError):
            ScalarArray.parse("1 2").get_int(2)

    def test_to_floats_raises_on_first_bad_token(self, mixed):
        """Test that whole-array conversion is strict."""
        with pytest.raises(TokenParseError):
            mixed.to_floats()

    def test_parse_error_is_value_error(self, mixed):
        """Test that TokenParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            mixed.get_int(3)

    def test_strict_access_uses_number_format(self, recording_format):
        """Test that parsing goes through the injected collaborator."""
        arr = ScalarArray.parse("1.5 #1A", number_format=recording_format)
        arr.get_float(0)
        arr.get_int(1)

        assert ("parse_float", "1.5") in recording_format.calls
        assert ("parse_int", "1A") in recording_format.calls


class TestLenientAccess:
    """Tests for expect_floats, expect_ints and expect_strings."""

    def test_expect_ints_hex_and_padding(self):
        """Test hex parsing and default fill for a missing element."""
        arr = ScalarArray.parse("10 #1A")
        assert arr.expect_ints(3) == [10, 26, 0]

    def test_expect_floats_parse_failure_defaults(self):
        """Test that unparseable tokens become 0.0 instead of raising."""
        assert ScalarArray.parse("abc").expect_floats(1) == [0.0]

    def test_expect_floats_mixed(self, mixed):
        """Test a mix of good, bad and missing float tokens."""
        assert mixed.expect_floats(6) == [10.0, 0.0, 2.5, 0.0, 0.0, 0.0]

    def test_expect_ints_mixed(self, mixed):
        """Test a mix of good, bad and missing integer tokens."""
        assert mixed.expect_ints(5) == [10, 26, 0, 0, 0]

    def test_expect_truncates_long_arrays(self, mixed):
        """Test that only the requested number of values is returned."""
        assert mixed.expect_floats(1) == [10.0]
        assert mixed.expect_ints(2) == [10, 26]
        assert mixed.expect_strings(2) == ["10", "#1A"]

    def test_expect_zero_count(self, mixed):
        """Test that a zero count yields empty lists."""
        assert mixed.expect_floats(0) == []
        assert mixed.expect_ints(0) == []
        assert mixed.expect_strings(0) == []

    def test_expect_strings_verbatim_and_padding(self, mixed):
        """Test raw tokens in range and empty strings past the end."""
        assert mixed.expect_strings(6) == ["10", "#1A", "2.5", "abc", "", ""]

    def test_expect_on_empty_array(self):
        """Test lenient accessors on an array with no tokens."""
        arr = ScalarArray()

        assert arr.expect_floats(2) == [0.0, 0.0]
        assert arr.expect_ints(2) == [0, 0]
        assert arr.expect_strings(2) == ["", ""]

    def test_expect_result_types(self):
        """Test that defaults have the requested scalar type."""
        floats = ScalarArray.parse("1").expect_floats(2)
        ints = ScalarArray.parse("1").expect_ints(2)

        assert all(isinstance(v, float) for v in floats)
        assert all(type(v) is int for v in ints)

    def test_negative_count_raises(self, mixed):
        """Test that a negative expected count is rejected."""
        with pytest.raises(InvalidArgumentError, match="must be >= 0"):
            mixed.expect_floats(-1)

    def test_defaulting_is_logged(self, mixed, caplog):
        """Test that substituted defaults are reported at debug level."""
        with caplog.at_level(logging.DEBUG, logger="ofd_types.array"):
            mixed.expect_floats(4)

        assert "Defaulting to 0.0" in caplog.text
        assert "'abc'" in caplog.text


TOKEN = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6).map(str),
    st.integers(min_value=0, max_value=0xFFFF).map(lambda v: f"#{v:X}"),
    st.floats(allow_nan=False, allow_infinity=False).map(repr),
    st.text(alphabet="abcxyz#.-", min_size=1, max_size=5),
)


class TestPropertyTests:
    """Property-based tests using hypothesis."""

    @given(tokens=st.lists(TOKEN, max_size=10), count=st.integers(min_value=0, max_value=20))
    def test_lenient_accessors_are_total(self, tokens, count):
        """Property: lenient accessors never raise and return exactly count values."""
        arr = ScalarArray().set_tokens(tokens)

        assert len(arr.expect_floats(count)) == count
        assert len(arr.expect_ints(count)) == count
        assert len(arr.expect_strings(count)) == count

    @given(tokens=st.lists(TOKEN, max_size=10), count=st.integers(min_value=0, max_value=20))
    def test_expect_ints_agrees_with_get_int(self, tokens, count):
        """Property: expect_ints equals get_int wherever get_int succeeds."""
        arr = ScalarArray().set_tokens(tokens)
        values = arr.expect_ints(count)

        for i, value in enumerate(values):
            try:
                expected = arr.get_int(i)
            except (TokenParseError, OutOfBoundsError):
                expected = 0
            assert value == expected
