#!/usr/bin/env python3
"""Example usage of the ofd-types programmatic API."""

from __future__ import annotations

from ofd_types import (
    DefaultNumberFormat,
    NumberFormatConfig,
    ScalarArray,
    TokenParseError,
)


def describe(arr: ScalarArray | None, title: str) -> None:
    """Print an array and its token count."""
    if arr is None:
        print(f"  {title}: <absent>")
        return
    print(f"  {title}: {arr.to_text()!r} ({len(arr)} tokens)")


def main() -> None:
    print("OFD scalar array demo")

    # 1) Parse attribute text, including absent values
    print("\nParsing")
    describe(ScalarArray.parse("0 0  210   297"), "Boundary")
    describe(ScalarArray.parse("null"), "Null attribute")

    # 2) Build from mixed scalars; None and blank strings vanish
    print("\nConstruction")
    describe(ScalarArray(12.0, None, "  ", 0.5, "#FF"), "Mixed")

    # 3) Tolerant reads of short or malformed documents
    print("\nLenient access")
    color = ScalarArray.parse("#FF 128")
    print(f"  RGB from {color.to_text()!r}: {color.expect_ints(3)}")
    try:
        color.get_int(2)
    except IndexError as e:
        print(f"  Strict read fails: {e}")
    try:
        ScalarArray.parse("1 x").get_float(1)
    except TokenParseError as e:
        print(f"  Strict read fails: {e}")

    # 4) Compose transforms: translate first, then scale
    print("\nTransforms")
    translate = ScalarArray.from_affine(1, 0, 0, 1, 10, 20)
    scale = ScalarArray.from_affine(2, 0, 0, 2, 0, 0)
    describe(translate, "Translate")
    describe(translate @ scale, "Translate then scale")
    describe(scale @ translate, "Scale then translate")
    print((translate @ scale).format_matrix())

    # 5) Cap float precision through an explicit formatter
    print("\nFormatting")
    fmt = DefaultNumberFormat(NumberFormatConfig(precision=3))
    describe(ScalarArray(1 / 3, 2 / 3, number_format=fmt), "Thirds")


if __name__ == "__main__":
    main()
