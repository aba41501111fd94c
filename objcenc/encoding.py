"""Objective-C type encodings: representation, rendering and matching against strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "QUALIFIERS",
    "Encoding",
    "Primitive",
    "BitField",
    "Pointer",
    "Array",
    "Struct",
    "Union",
    "strip_qualifiers",
    "strip_encoding_prefix",
]

# const, in, inout, out, bycopy, byref, oneway
QUALIFIERS = "rnNoORV"

_LEADING_INT = re.compile(r"[0-9]+")


class Encoding:
    """Base of every Objective-C type encoding."""

    def _strip_prefix(self, s: str) -> str | None:
        raise NotImplementedError  # pragma: no cover - overridden by every subclass

    def equivalent_to(self, other: Encoding) -> bool:
        """Whether this encoding is equivalent to another encoding."""
        return self == other

    def equivalent_to_str(self, s: str) -> bool:
        """Whether this encoding is equivalent to the whole string ``s``."""
        rest = self.equivalent_to_start_of_str(s)
        return rest == ""

    def equivalent_to_start_of_str(self, s: str) -> str | None:
        """Match this encoding at the start of ``s``.

        Leading qualifiers are ignored. Returns the remainder of the string
        on a match and ``None`` otherwise.
        """
        return strip_encoding_prefix(strip_qualifiers(s), self)


class Primitive(Encoding, Enum):
    """Encodings that consist of a fixed code."""

    CHAR = "c"
    SHORT = "s"
    INT = "i"
    LONG = "l"
    LONG_LONG = "q"
    UCHAR = "C"
    USHORT = "S"
    UINT = "I"
    ULONG = "L"
    ULONG_LONG = "Q"
    FLOAT = "f"
    DOUBLE = "d"
    LONG_DOUBLE = "D"
    FLOAT_COMPLEX = "jf"
    DOUBLE_COMPLEX = "jd"
    LONG_DOUBLE_COMPLEX = "jD"
    BOOL = "B"
    VOID = "v"
    STRING = "*"
    OBJECT = "@"
    BLOCK = "@?"
    CLASS = "#"
    SEL = ":"
    UNKNOWN = "?"

    def __str__(self) -> str:
        return self.value

    def _strip_prefix(self, s: str) -> str | None:
        return s[len(self.value):] if s.startswith(self.value) else None


def _strip_literal(s: str, prefix: str) -> str | None:
    return s[len(prefix):] if s.startswith(prefix) else None


def _strip_int(s: str, expected: int) -> str | None:
    match = _LEADING_INT.match(s)
    if match is None or int(match.group()) != expected:
        return None
    return s[match.end():]


@dataclass(frozen=True)
class BitField(Encoding):
    """A bitfield of the given number of bits (``b<num>``)."""

    bits: int

    def __post_init__(self) -> None:
        if not 0 <= self.bits <= 255:
            raise ValueError(f"bitfield width must be in 0..=255, got {self.bits}")

    def __str__(self) -> str:
        return f"b{self.bits}"

    def _strip_prefix(self, s: str) -> str | None:
        rest = _strip_literal(s, "b")
        return None if rest is None else _strip_int(rest, self.bits)


@dataclass(frozen=True)
class Pointer(Encoding):
    """A pointer to the given type (``^<type>``)."""

    target: Encoding

    def __post_init__(self) -> None:
        if not isinstance(self.target, Encoding):
            raise TypeError("pointer target must be an Encoding")

    def __str__(self) -> str:
        return f"^{self.target}"

    def _strip_prefix(self, s: str) -> str | None:
        rest = _strip_literal(s, "^")
        return None if rest is None else strip_encoding_prefix(rest, self.target)


@dataclass(frozen=True)
class Array(Encoding):
    """An array of the given length and item type (``[<len><type>]``)."""

    length: int
    item: Encoding

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"array length must not be negative, got {self.length}")
        if not isinstance(self.item, Encoding):
            raise TypeError("array item must be an Encoding")

    def __str__(self) -> str:
        return f"[{self.length}{self.item}]"

    def _strip_prefix(self, s: str) -> str | None:
        rest = _strip_literal(s, "[")
        if rest is not None:
            rest = _strip_int(rest, self.length)
        if rest is not None:
            rest = strip_encoding_prefix(rest, self.item)
        return None if rest is None else _strip_literal(rest, "]")


def _freeze_members(obj: object, attr: str) -> None:
    members = tuple(getattr(obj, attr))
    if not all(isinstance(m, Encoding) for m in members):
        raise TypeError(f"{attr} must all be Encoding instances")
    object.__setattr__(obj, attr, members)


def _strip_aggregate(
    s: str, opening: str, closing: str, name: str, members: tuple[Encoding, ...]
) -> str | None:
    rest: str | None = s
    for literal in (opening, name, "="):
        rest = _strip_literal(rest, literal)
        if rest is None:
            return None
    for member in members:
        rest = strip_encoding_prefix(rest, member)
        if rest is None:
            return None
    return _strip_literal(rest, closing)


@dataclass(frozen=True)
class Struct(Encoding):
    """A struct with a name and ordered fields (``{name=fields...}``)."""

    name: str
    fields: tuple[Encoding, ...] = ()

    def __post_init__(self) -> None:
        _freeze_members(self, "fields")

    def __str__(self) -> str:
        return "{" + self.name + "=" + "".join(map(str, self.fields)) + "}"

    def _strip_prefix(self, s: str) -> str | None:
        return _strip_aggregate(s, "{", "}", self.name, self.fields)


@dataclass(frozen=True)
class Union(Encoding):
    """A union with a name and ordered members (``(name=members...)``)."""

    name: str
    members: tuple[Encoding, ...] = ()

    def __post_init__(self) -> None:
        _freeze_members(self, "members")

    def __str__(self) -> str:
        return "(" + self.name + "=" + "".join(map(str, self.members)) + ")"

    def _strip_prefix(self, s: str) -> str | None:
        return _strip_aggregate(s, "(", ")", self.name, self.members)


def strip_qualifiers(s: str) -> str:
    """Remove leading type qualifiers such as ``r`` (const) or ``V`` (oneway)."""
    return s.lstrip(QUALIFIERS)


def strip_encoding_prefix(s: str, encoding: Encoding) -> str | None:
    """Remove ``encoding`` from the start of ``s``.

    Returns the remaining string, or ``None`` if ``s`` does not start with
    the encoding. Qualifiers are not skipped.
    """
    if not isinstance(encoding, Encoding):
        raise TypeError("encoding must be an Encoding")
    return encoding._strip_prefix(s)