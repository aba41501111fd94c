"""Flags and layout rules of the blocks ABI.

The flags live in the ``flags`` field of a block's layout. They decide
which descriptor layout the block carries and which calling convention
its invoke function uses.
"""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag
from functools import reduce
from operator import or_

from objcenc.runtime import BlockRuntime, RuntimeConfigError

__all__ = [
    "BlockFlag",
    "FieldFlag",
    "DescriptorKind",
    "BlockABI",
    "refcount_mask",
    "descriptor_kind",
    "block_abi",
    "global_block_flags",
    "all_copy_dispose_flags",
]

_FLAG_BITS = 0xFFFF_FFFF


class BlockFlag(IntFlag):
    """Values of a block's ``flags`` field.

    ``DEALLOCATING``, ``INLINE_LAYOUT_STRING``, ``SMALL_DESCRIPTOR``,
    ``IS_NOESCAPE``, ``NEEDS_FREE``, ``IS_GC`` and ``HAS_EXTENDED_LAYOUT``
    are only defined by Apple's runtime.
    """

    DEALLOCATING = 0x0001
    INLINE_LAYOUT_STRING = 1 << 21
    SMALL_DESCRIPTOR = 1 << 22
    IS_NOESCAPE = 1 << 23
    NEEDS_FREE = 1 << 24
    HAS_COPY_DISPOSE = 1 << 25
    HAS_CTOR = 1 << 26
    IS_GC = 1 << 27
    IS_GLOBAL = 1 << 28
    USE_STRET = 1 << 29
    HAS_SIGNATURE = 1 << 30
    HAS_EXTENDED_LAYOUT = 1 << 31


class FieldFlag(IntEnum):
    """Kinds of captured field passed to the object assign and dispose hooks."""

    IS_OBJECT = 3
    IS_BLOCK = 7
    IS_BYREF = 8
    IS_WEAK = 16
    BYREF_CALLER = 128


class DescriptorKind(Enum):
    """Layout of the descriptor a block points to."""

    HEADER = "header"
    COPY_DISPOSE = "copy_dispose"
    BASIC = "basic"
    WITH_SIGNATURE = "with_signature"


class BlockABI(Enum):
    """Calling convention and ABI revision of a block."""

    LEGACY = "10.6"
    REGULAR = "2010.3.16"
    STRET = "2010.3.16-stret"

    @property
    def has_signature(self) -> bool:
        return self is not BlockABI.LEGACY


_REFCOUNT_MASKS = {
    BlockRuntime.APPLE: 0xFFFE,
    BlockRuntime.COMPILER_RT: 0xFFFF,
    BlockRuntime.OBJFW: 0xFFFF,
    BlockRuntime.GNUSTEP: 0x00FF_FFFF,
}


def refcount_mask(runtime: BlockRuntime | str) -> int:
    """Mask of the reference count in a byref structure's flags."""
    try:
        runtime = BlockRuntime(runtime)
    except ValueError:
        raise RuntimeConfigError(f"unknown blocks runtime: {runtime!r}") from None
    return _REFCOUNT_MASKS[runtime]


def _as_flags(flags: int) -> BlockFlag:
    # Flags are a signed 32-bit field; the top bit may arrive as a negative number.
    return BlockFlag(int(flags) & _FLAG_BITS)


def descriptor_kind(flags: int) -> DescriptorKind:
    """Which descriptor layout a block with these flags carries."""
    flags = _as_flags(flags)
    copy_dispose = bool(flags & BlockFlag.HAS_COPY_DISPOSE)
    signature = bool(flags & BlockFlag.HAS_SIGNATURE)
    if copy_dispose and signature:
        return DescriptorKind.WITH_SIGNATURE
    if copy_dispose:
        return DescriptorKind.COPY_DISPOSE
    if signature:
        return DescriptorKind.BASIC
    return DescriptorKind.HEADER


def block_abi(flags: int) -> BlockABI:
    """The ABI a block with these flags follows.

    Without a signature the stret flag carries no meaning and the block
    follows the 10.6 ABI.
    """
    flags = _as_flags(flags)
    if not flags & BlockFlag.HAS_SIGNATURE:
        return BlockABI.LEGACY
    if flags & BlockFlag.USE_STRET:
        return BlockABI.STRET
    return BlockABI.REGULAR


def global_block_flags() -> BlockFlag:
    """Flags of a block stored in global memory that captures nothing."""
    return BlockFlag.IS_GLOBAL | BlockFlag.USE_STRET


def all_copy_dispose_flags() -> int:
    """Every field flag combined, as Apple's runtime defines it."""
    return reduce(or_, (int(flag) for flag in FieldFlag), 0)