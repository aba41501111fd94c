import sys

import pytest

from objcenc.encoding import Primitive
from objcenc.platform_types import (
    AssociationPolicy,
    BoolType,
    SyncStatus,
    Target,
    ns_integer_range,
    ns_uinteger_max,
    objc_bool_type,
)
from objcenc.runtime import ApplePlatform, AppleRuntime, GNUStepRuntime, RuntimeConfigError


@pytest.mark.parametrize(
    "target, expected",
    [
        (Target("macos", "aarch64", 64), BoolType.BOOL),
        (Target("macos", "x86_64", 64), BoolType.SIGNED_CHAR),
        (Target("macos", "x86", 32), BoolType.SIGNED_CHAR),
        (Target("ios", "x86_64", 64), BoolType.BOOL),
        (Target("ios", "x86_64", 64, abi="macabi"), BoolType.SIGNED_CHAR),
        (Target("ios", "armv7", 32), BoolType.SIGNED_CHAR),
        (Target("tvos", "x86_64", 64), BoolType.BOOL),
        (Target("watchos", "armv7k", 32), BoolType.BOOL),
    ],
)
def test_apple_bool(target, expected):
    assert objc_bool_type("apple", target) is expected


def test_apple_bool_accepts_runtime_value():
    runtime = AppleRuntime(ApplePlatform.MACOS, "10.7")
    assert objc_bool_type(runtime, Target("macos", "aarch64")) is BoolType.BOOL


@pytest.mark.parametrize(
    "target, expected",
    [
        (Target("linux", "x86_64", 64), BoolType.UNSIGNED_CHAR),
        (Target("windows", "x86_64", 64, env="msvc"), BoolType.INT),
        (Target("windows", "x86", 32, env="gnu"), BoolType.INT),
        (Target("windows", "x86_64", 64, env="gnu"), BoolType.UNSIGNED_CHAR),
    ],
)
def test_gnustep_bool(target, expected):
    assert objc_bool_type(GNUStepRuntime(1, 7), target) is expected


def test_gnustep_strict_apple_compat():
    target = Target("windows", "x86_64", 64, env="msvc")
    assert objc_bool_type("gnustep", target, strict_apple_compat=True) is BoolType.SIGNED_CHAR


def test_objfw_bool_unknown():
    with pytest.raises(RuntimeConfigError):
        objc_bool_type("objfw", Target("linux", "x86_64"))


def test_unknown_runtime_name():
    with pytest.raises(ValueError):
        objc_bool_type("nope", Target("linux", "x86_64"))


@pytest.mark.parametrize(
    "runtime, target, expected",
    [
        ("apple", Target("macos", "aarch64", 64), Primitive.BOOL),
        ("apple", Target("macos", "x86_64", 64), Primitive.CHAR),
        ("gnustep", Target("linux", "x86_64", 64), Primitive.UCHAR),
        ("gnustep", Target("windows", "x86_64", 64, env="msvc"), Primitive.INT),
    ],
)
def test_bool_encodings(runtime, target, expected):
    assert objc_bool_type(runtime, target).encoding is expected


def test_target_rejects_bad_width():
    with pytest.raises(ValueError):
        Target("linux", "x86_64", 48)


@pytest.mark.parametrize("width", [16, 32, 64])
def test_ns_integer_range_invariants(width):
    low, high = ns_integer_range(width)
    assert low == -high - 1
    assert ns_uinteger_max(width) == 2 * high + 1
    assert (ns_uinteger_max(width) + 1).bit_length() == width + 1


def test_ns_integer_matches_native_64_bit():
    assert ns_integer_range(64) == (-sys.maxsize - 1, sys.maxsize)


def test_ns_integer_rejects_bad_width():
    with pytest.raises(ValueError):
        ns_integer_range(8)
    with pytest.raises(ValueError):
        ns_uinteger_max(128)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, AssociationPolicy.ASSIGN),
        (1, AssociationPolicy.RETAIN_NONATOMIC),
        (3, AssociationPolicy.COPY_NONATOMIC),
        (769, AssociationPolicy.RETAIN),
        (771, AssociationPolicy.COPY),
    ],
)
def test_association_policy_values(value, expected):
    assert AssociationPolicy(value) is expected
    assert int(expected) == value


def test_sync_status_values():
    assert SyncStatus(0) is SyncStatus.SUCCESS
    assert SyncStatus(-1) is SyncStatus.NOT_OWNING_THREAD_ERROR
    assert SyncStatus(-2) is SyncStatus.TIMED_OUT
    assert SyncStatus(-3) is SyncStatus.NOT_INITIALIZED