"""Platform-dependent Objective-C types and common runtime constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from objcenc.encode import POINTER_WIDTHS
from objcenc.encoding import Encoding, Primitive
from objcenc.runtime import ObjCRuntime, RuntimeConfigError, runtime_cfg

__all__ = [
    "YES",
    "NO",
    "Target",
    "BoolType",
    "AssociationPolicy",
    "SyncStatus",
    "objc_bool_type",
    "ns_integer_range",
    "ns_uinteger_max",
]

YES = 1
NO = 0

_RUNTIME_NAMES = frozenset({"apple", "gnustep", "objfw"})


def _check_width(pointer_width: int) -> int:
    if pointer_width not in POINTER_WIDTHS:
        raise ValueError(f"unsupported pointer width: {pointer_width}")
    return pointer_width


@dataclass(frozen=True)
class Target:
    """The parts of a compilation target that affect type layout."""

    os: str
    arch: str
    pointer_width: int = 64
    env: str = ""
    abi: str = ""

    def __post_init__(self) -> None:
        _check_width(self.pointer_width)

    @property
    def is_windows(self) -> bool:
        return self.os == "windows"


class BoolType(Enum):
    """The C type behind Objective-C's ``BOOL``."""

    BOOL = "_Bool"
    SIGNED_CHAR = "signed char"
    UNSIGNED_CHAR = "unsigned char"
    INT = "int"

    @property
    def encoding(self) -> Encoding:
        return _BOOL_ENCODINGS[self]


_BOOL_ENCODINGS = {
    BoolType.BOOL: Primitive.BOOL,
    BoolType.SIGNED_CHAR: Primitive.CHAR,
    BoolType.UNSIGNED_CHAR: Primitive.UCHAR,
    BoolType.INT: Primitive.INT,
}


class AssociationPolicy(IntEnum):
    """Policies for associated objects."""

    ASSIGN = 0
    RETAIN_NONATOMIC = 1
    COPY_NONATOMIC = 3
    RETAIN = 769
    COPY = 771


class SyncStatus(IntEnum):
    """Results of entering or leaving an ``@synchronized`` section (Apple)."""

    SUCCESS = 0
    NOT_OWNING_THREAD_ERROR = -1
    # Only relevant before macOS 10.13.
    TIMED_OUT = -2
    NOT_INITIALIZED = -3


def _runtime_name(runtime: ObjCRuntime | str) -> str:
    if isinstance(runtime, str):
        if runtime not in _RUNTIME_NAMES:
            raise ValueError(f"unknown runtime: {runtime!r}")
        return runtime
    return runtime_cfg(runtime)


def _apple_bool_is_bool(target: Target) -> bool:
    return (
        target.arch == "aarch64"
        or (target.os == "ios" and target.pointer_width == 64 and target.abi != "macabi")
        or (target.os == "tvos" and target.pointer_width == 64)
        or target.os == "watchos"
    )


def objc_bool_type(
    runtime: ObjCRuntime | str, target: Target, strict_apple_compat: bool = False
) -> BoolType:
    """The C type of ``BOOL`` for a runtime and target.

    ``runtime`` is a runtime value or its configuration name.
    ``strict_apple_compat`` makes GNUStep use Apple's ``signed char``.
    """
    name = _runtime_name(runtime)
    if name == "apple":
        return BoolType.BOOL if _apple_bool_is_bool(target) else BoolType.SIGNED_CHAR
    if name == "gnustep":
        if strict_apple_compat:
            return BoolType.SIGNED_CHAR
        if target.is_windows and not (target.pointer_width == 64 and target.env == "gnu"):
            return BoolType.INT
        return BoolType.UNSIGNED_CHAR
    raise RuntimeConfigError("the BOOL type of the ObjFW runtime is not known")


def ns_integer_range(pointer_width: int = 64) -> tuple[int, int]:
    """Minimum and maximum of ``NSInteger``, which matches ``isize``."""
    bits = _check_width(pointer_width)
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def ns_uinteger_max(pointer_width: int = 64) -> int:
    """Maximum of ``NSUInteger``, which matches ``usize``."""
    return (1 << _check_width(pointer_width)) - 1