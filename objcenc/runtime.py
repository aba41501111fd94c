"""Selection of the Objective-C and blocks runtimes and their compiler flags.

Given the target operating system, the enabled features and the
environment, these functions decide which runtime is in use. They also
derive the configuration name, the clang ``-fobjc-runtime`` value and the
C compiler arguments that belong to that runtime.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

__all__ = [
    "APPLE_OSES",
    "RuntimeConfigError",
    "ApplePlatform",
    "AppleRuntime",
    "GNUStepRuntime",
    "WinObjCRuntime",
    "ObjFWRuntime",
    "ObjCRuntime",
    "BlockRuntime",
    "select_objc_runtime",
    "runtime_cfg",
    "clang_runtime",
    "objc_cc_args",
    "select_block_runtime",
    "block_link_lib",
    "block_cc_args",
]

APPLE_OSES = frozenset({"macos", "ios", "tvos", "watchos"})


class RuntimeConfigError(ValueError):
    """The requested runtime configuration is invalid or unsupported."""


class ApplePlatform(Enum):
    """Apple operating systems with their own Objective-C runtime flavour."""

    MACOS = "macos"
    IOS = "ios"
    TVOS = "tvos"
    WATCHOS = "watchos"


# Environment variable holding the deployment target, and its default.
_DEPLOYMENT_TARGETS: dict[ApplePlatform, tuple[str, str | None]] = {
    ApplePlatform.MACOS: ("MACOSX_DEPLOYMENT_TARGET", "10.7"),
    ApplePlatform.IOS: ("IPHONEOS_DEPLOYMENT_TARGET", "7.0"),
    ApplePlatform.TVOS: ("TVOS_DEPLOYMENT_TARGET", None),
    ApplePlatform.WATCHOS: ("WATCHOS_DEPLOYMENT_TARGET", None),
}


@dataclass(frozen=True)
class AppleRuntime:
    """Apple's objc4 runtime on a given platform and deployment target."""

    platform: ApplePlatform
    version: str | None = None


@dataclass(frozen=True)
class GNUStepRuntime:
    """GNUStep's libobjc2 of a given version."""

    major: int = 1
    minor: int = 7


@dataclass(frozen=True)
class WinObjCRuntime:
    """Microsoft's WinObjC, a fork of libobjc2 1.8."""


@dataclass(frozen=True)
class ObjFWRuntime:
    """The ObjFW runtime."""

    version: str | None = None


ObjCRuntime = Union[AppleRuntime, GNUStepRuntime, WinObjCRuntime, ObjFWRuntime]

# Checked in this order; the first enabled feature wins.
_GNUSTEP_VERSIONS = (
    ("gnustep-2-1", (2, 1)),
    ("gnustep-2-0", (2, 0)),
    ("gnustep-1-9", (1, 9)),
    ("gnustep-1-8", (1, 8)),
)


def _apple_runtime(target_os: str, env: Mapping[str, str]) -> AppleRuntime:
    try:
        platform = ApplePlatform(target_os)
    except ValueError:
        # A sensible default for other platforms that asked for `apple`.
        return AppleRuntime(ApplePlatform.MACOS, None)
    variable, default = _DEPLOYMENT_TARGETS[platform]
    return AppleRuntime(platform, env.get(variable, default))


def _gnustep_runtime(features: frozenset[str]) -> GNUStepRuntime | WinObjCRuntime:
    if "winobjc" in features:
        return WinObjCRuntime()
    for feature, (major, minor) in _GNUSTEP_VERSIONS:
        if feature in features:
            return GNUStepRuntime(major, minor)
    return GNUStepRuntime(1, 7)


def select_objc_runtime(
    target_os: str,
    features: Iterable[str] = (),
    env: Mapping[str, str] | None = None,
) -> ObjCRuntime:
    """Choose the Objective-C runtime for a target.

    ``features`` holds enabled feature names such as ``"apple"``,
    ``"gnustep-1-7"`` or ``"objfw"``; ``env`` defaults to the process
    environment. On Apple operating systems the Apple runtime is used when
    no runtime feature is given.
    """
    features = frozenset(features)
    env = os.environ if env is None else env

    apple = "apple" in features
    gnustep = "gnustep-1-7" in features
    objfw = "objfw" in features

    if not (apple or gnustep or objfw) and target_os in APPLE_OSES:
        apple = True

    selected = (apple, gnustep, objfw)
    if selected == (True, False, False):
        return _apple_runtime(target_os, env)
    if selected == (False, True, False):
        return _gnustep_runtime(features)
    if selected == (False, False, True):
        raise RuntimeConfigError("the ObjFW runtime is not supported")
    if selected == (False, False, False):
        if "DOCS_RS" in env:
            return WinObjCRuntime() if target_os == "windows" else GNUStepRuntime(1, 7)
        raise RuntimeConfigError(
            "Must specify the desired runtime (using features) on non-apple platforms."
        )
    raise RuntimeConfigError("Invalid feature combination; only one runtime may be selected!")


def runtime_cfg(runtime: ObjCRuntime) -> str:
    """Configuration name of a runtime; WinObjC counts as GNUStep."""
    if isinstance(runtime, AppleRuntime):
        return "apple"
    if isinstance(runtime, (GNUStepRuntime, WinObjCRuntime)):
        return "gnustep"
    if isinstance(runtime, ObjFWRuntime):
        return "objfw"
    raise TypeError(f"not a runtime: {runtime!r}")


_APPLE_CLANG_NAMES = {
    ApplePlatform.MACOS: "macosx",
    ApplePlatform.IOS: "ios",
    ApplePlatform.WATCHOS: "watchos",
    # tvOS has no -fobjc-runtime name of its own.
    ApplePlatform.TVOS: "ios",
}


def clang_runtime(runtime: ObjCRuntime, target_arch: str = "") -> str:
    """The value for clang's ``-fobjc-runtime`` option."""
    if isinstance(runtime, AppleRuntime):
        if runtime.platform is ApplePlatform.MACOS and target_arch == "x86":
            name = "macosx-fragile"
        else:
            name = _APPLE_CLANG_NAMES[runtime.platform]
        return name if runtime.version is None else f"{name}-{runtime.version}"
    if isinstance(runtime, GNUStepRuntime):
        return f"gnustep-{runtime.major}.{runtime.minor}"
    if isinstance(runtime, WinObjCRuntime):
        return "gnustep-1.8"
    if isinstance(runtime, ObjFWRuntime):
        raise RuntimeConfigError("no clang runtime is defined for ObjFW")
    raise TypeError(f"not a runtime: {runtime!r}")


def objc_cc_args(runtime: ObjCRuntime, target_arch: str = "") -> str:
    """C compiler arguments for compiling Objective-C against ``runtime``."""
    return (
        "-fobjc-arc -fobjc-arc-exceptions -fobjc-exceptions "
        f"-fobjc-runtime={clang_runtime(runtime, target_arch)}"
    )


class BlockRuntime(Enum):
    """Runtimes that provide the blocks extension."""

    APPLE = "apple"
    COMPILER_RT = "compiler-rt"
    GNUSTEP = "gnustep-1-7"
    OBJFW = "objfw"


def select_block_runtime(target_os: str, features: Iterable[str] = ()) -> BlockRuntime:
    """Choose the blocks runtime.

    Without any runtime feature, Apple operating systems use Apple's
    runtime and every other system uses compiler-rt.
    """
    features = frozenset(features)
    chosen = [runtime for runtime in BlockRuntime if runtime.value in features]
    if not chosen:
        return BlockRuntime.APPLE if target_os in APPLE_OSES else BlockRuntime.COMPILER_RT
    if len(chosen) > 1:
        raise RuntimeConfigError(
            "Invalid feature combination; only one runtime may be selected!"
        )
    (runtime,) = chosen
    if runtime is BlockRuntime.OBJFW:
        raise RuntimeConfigError("the ObjFW blocks runtime is not supported")
    return runtime


def block_link_lib(runtime: BlockRuntime) -> str | None:
    """Library to link for blocks support, or ``None`` when nothing is needed."""
    if runtime is BlockRuntime.APPLE:
        return "System"
    if runtime is BlockRuntime.COMPILER_RT:
        return "BlocksRuntime"
    if runtime is BlockRuntime.GNUSTEP:
        # The Objective-C runtime library already provides blocks.
        return None
    raise RuntimeConfigError("the ObjFW blocks runtime is not supported")


def block_cc_args(
    runtime: BlockRuntime,
    features: Iterable[str] = (),
    manifest_dir: str | os.PathLike[str] = ".",
) -> str:
    """C compiler arguments for compiling code that uses blocks.

    GNUStep before 2.0 needs compatibility headers from ``manifest_dir``.
    """
    args = "-fblocks"
    if runtime is BlockRuntime.GNUSTEP and "gnustep-2-0" not in frozenset(features):
        args += " -I" + str(Path(manifest_dir) / "gnustep-compat-headers")
    elif runtime is BlockRuntime.OBJFW:
        raise RuntimeConfigError("the ObjFW blocks runtime is not supported")
    return args