"""Type encodings of primitive and derived C types.

These functions give the Objective-C type encoding of common primitive
types and of the types built from them: pointers, arrays, function
pointers and argument lists.
"""

from __future__ import annotations

from objcenc.encoding import Array, Encoding, Pointer, Primitive

__all__ = [
    "POINTER_WIDTHS",
    "MAX_ARGUMENTS",
    "primitive_encoding",
    "reference_encoding",
    "pointer_encoding",
    "array_encoding",
    "function_pointer_encoding",
    "argument_encodings",
]

POINTER_WIDTHS = (16, 32, 64)

# Argument lists are supported up to this many entries.
MAX_ARGUMENTS = 12

_FIXED: dict[str, Encoding] = {
    "i8": Primitive.CHAR,
    "i16": Primitive.SHORT,
    "i32": Primitive.INT,
    "i64": Primitive.LONG_LONG,
    "u8": Primitive.UCHAR,
    "u16": Primitive.USHORT,
    "u32": Primitive.UINT,
    "u64": Primitive.ULONG_LONG,
    "f32": Primitive.FLOAT,
    "f64": Primitive.DOUBLE,
    "bool": Primitive.BOOL,
    # Only meaningful as the return type of a function.
    "()": Primitive.VOID,
    "*const c_void": Pointer(Primitive.VOID),
    "*mut c_void": Pointer(Primitive.VOID),
}

_SIZED = {
    "isize": {16: "i16", 32: "i32", 64: "i64"},
    "usize": {16: "u16", 32: "u32", 64: "u64"},
}

_INTEGER_NAMES = ("i8", "i16", "i32", "i64", "isize", "u8", "u16", "u32", "u64", "usize")


def _nonzero_aliases() -> dict[str, str]:
    aliases = {}
    for name in _INTEGER_NAMES:
        nonzero = "NonZero" + name[0].upper() + name[1:]
        aliases[nonzero] = name
        aliases[f"Option<{nonzero}>"] = name
    return aliases


_ALIASES = _nonzero_aliases()


def primitive_encoding(name: str, pointer_width: int = 64) -> Encoding:
    """Return the encoding of the primitive type called ``name``.

    ``isize`` and ``usize`` (and their non-zero forms) depend on
    ``pointer_width``, which must be 16, 32 or 64.
    """
    if pointer_width not in POINTER_WIDTHS:
        raise ValueError(f"unsupported pointer width: {pointer_width}")
    name = _ALIASES.get(name, name)
    if name in _SIZED:
        name = _SIZED[name][pointer_width]
    try:
        return _FIXED[name]
    except KeyError:
        raise KeyError(f"no encoding known for type {name!r}") from None


def _check(encoding: object) -> Encoding:
    if not isinstance(encoding, Encoding):
        raise TypeError("expected an Encoding")
    return encoding


def reference_encoding(encoding: Encoding) -> Encoding:
    """Return the encoding of a pointer to a value with the given encoding.

    Pointers to ``char`` and ``unsigned char`` are C strings.
    """
    encoding = _check(encoding)
    if encoding in (Primitive.CHAR, Primitive.UCHAR):
        return Primitive.STRING
    return Pointer(encoding)


def pointer_encoding(ref_encoding: Encoding) -> Encoding:
    """Return the reference encoding of a pointer to a type whose own
    reference encoding is ``ref_encoding``."""
    return Pointer(_check(ref_encoding))


def array_encoding(length: int, item: Encoding) -> Encoding:
    """Return the encoding of a fixed-size array."""
    return Array(length, _check(item))


def function_pointer_encoding() -> Encoding:
    """Return the encoding of any C function pointer."""
    return Pointer(Primitive.UNKNOWN)


def argument_encodings(*args: Encoding) -> tuple[Encoding, ...]:
    """Return the encodings of an ordered group of function arguments."""
    if len(args) > MAX_ARGUMENTS:
        raise ValueError(f"at most {MAX_ARGUMENTS} arguments are supported, got {len(args)}")
    return tuple(_check(arg) for arg in args)