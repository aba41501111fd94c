"""Encodings of a few well-known Foundation and Core Graphics types."""

from __future__ import annotations

from objcenc.encode import primitive_encoding
from objcenc.encoding import Array, Encoding, Pointer, Primitive, Struct

__all__ = [
    "cg_float_encoding",
    "cg_point_encoding",
    "cg_size_encoding",
    "cg_rect_encoding",
    "ns_string_ref_encoding",
    "ns_uinteger_encoding",
    "ns_uinteger_ref_encoding",
    "ns_decimal_ref_encoding",
]


def cg_float_encoding(pointer_width: int = 64) -> Encoding:
    """``CGFloat`` is ``float`` on 32-bit targets and ``double`` on 64-bit ones."""
    if pointer_width == 32:
        return Primitive.FLOAT
    if pointer_width == 64:
        return Primitive.DOUBLE
    raise ValueError(f"CGFloat is not defined for pointer width {pointer_width}")


def cg_point_encoding(pointer_width: int = 64) -> Encoding:
    """Encoding of ``CGPoint``."""
    f = cg_float_encoding(pointer_width)
    return Struct("CGPoint", (f, f))


def cg_size_encoding(pointer_width: int = 64) -> Encoding:
    """Encoding of ``CGSize``."""
    f = cg_float_encoding(pointer_width)
    return Struct("CGSize", (f, f))


def cg_rect_encoding(pointer_width: int = 64) -> Encoding:
    """Encoding of ``CGRect``."""
    return Struct(
        "CGRect", (cg_point_encoding(pointer_width), cg_size_encoding(pointer_width))
    )


def ns_string_ref_encoding() -> Encoding:
    """Encoding of a pointer to ``NSString``, an object."""
    return Primitive.OBJECT


def ns_uinteger_encoding(pointer_width: int = 64) -> Encoding:
    """Encoding of ``NSUInteger``, which matches ``usize``."""
    return primitive_encoding("usize", pointer_width)


def ns_uinteger_ref_encoding(pointer_width: int = 64) -> Encoding:
    """Encoding of a pointer to ``NSUInteger``."""
    return Pointer(ns_uinteger_encoding(pointer_width))


def ns_decimal_ref_encoding() -> Encoding:
    """Encoding of a pointer to the otherwise opaque ``NSDecimal``."""
    return Pointer(
        Struct(
            "?",
            (
                Primitive.CHAR,
                Primitive.UCHAR,
                Primitive.UCHAR,
                Primitive.UCHAR,
                Array(38, Primitive.UCHAR),
            ),
        )
    )