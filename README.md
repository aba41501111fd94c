# objcenc

Objective-C type encodings and related runtime facts, in plain Python with no
third-party dependencies.

## What it covers

- **`objcenc.encoding`**: the `Encoding` model. Its concrete kinds are
  `Primitive` (an enum of the fixed codes such as `Primitive.INT` → `i` or
  `Primitive.BLOCK` → `@?`), `BitField`, `Pointer`, `Array`, `Struct` and
  `Union`. `str()` of an encoding gives the string `@encode` produces.
  `equivalent_to`, `equivalent_to_str` and `equivalent_to_start_of_str` compare
  an encoding with another one or with a string; leading qualifiers
  (`QUALIFIERS`, e.g. `r` for const or `V` for oneway) are ignored. The helpers
  `strip_qualifiers` and `strip_encoding_prefix` are available on their own.
- **`objcenc.encode`**: encodings of C types. `primitive_encoding` covers
  fixed-width integers, floats, `bool`, void pointers, and `isize`/`usize` for
  pointer widths 16, 32 or 64. Also `reference_encoding` (pointers to
  `char`/`unsigned char` become `*`), `pointer_encoding`, `array_encoding`,
  `function_pointer_encoding` (`^?`) and `argument_encodings` (at most
  `MAX_ARGUMENTS` entries).
- **`objcenc.known_types`**: `CGFloat`, `CGPoint`, `CGSize`, `CGRect`,
  `NSString *`, `NSUInteger`, `NSUInteger *` and `NSDecimal *`.
- **`objcenc.runtime`**: chooses the Objective-C runtime (`AppleRuntime`,
  `GNUStepRuntime`, `WinObjCRuntime`) with `select_objc_runtime`, based on the
  target OS, the enabled features and the environment. It chooses the blocks
  runtime with `select_block_runtime`. From that choice it gives the
  configuration name (`runtime_cfg`), the clang `-fobjc-runtime` value
  (`clang_runtime`), compiler arguments (`objc_cc_args`, `block_cc_args`) and
  the library to link for blocks (`block_link_lib`). An invalid or unsupported
  choice raises `RuntimeConfigError`.
- **`objcenc.platform_types`**: the C type behind `BOOL` for a runtime and
  `Target` (`objc_bool_type`, returning a `BoolType` with its `encoding`). It
  also gives `ns_integer_range` and `ns_uinteger_max`, `YES`/`NO`, and the
  `AssociationPolicy` and `SyncStatus` codes.
- **`objcenc.blocks`**: `BlockFlag` and `FieldFlag` values. `descriptor_kind`
  and `block_abi` tell which descriptor layout and ABI a set of flags selects.
  `refcount_mask` gives each runtime's reference-count mask, and
  `global_block_flags` and `all_copy_dispose_flags` give the fixed flag sets.

## Installation

```
pip install objcenc
```

## Usage

```python
from objcenc.encoding import Array, Pointer, Primitive, Struct

point = Struct("CGPoint", (Primitive.DOUBLE, Primitive.DOUBLE))
print(point)                                   # {CGPoint=dd}
assert point.equivalent_to_str("{CGPoint=dd}")

assert str(Array(12, Primitive.INT)) == "[12i]"

p = Pointer(Primitive.INT)
assert p.equivalent_to_str("r^i")              # leading qualifiers are ignored
assert p.equivalent_to_start_of_str("^iabc") == "abc"
assert p.equivalent_to_start_of_str("^c") is None
```

Well-known types:

```python
from objcenc.known_types import cg_rect_encoding, ns_uinteger_encoding

print(cg_rect_encoding(64))       # {CGRect={CGPoint=dd}{CGSize=dd}}
print(ns_uinteger_encoding(32))   # I
```

Choosing runtimes:

```python
from objcenc.runtime import (
    block_link_lib, objc_cc_args, select_block_runtime, select_objc_runtime,
)

runtime = select_objc_runtime("macos", set(), {"MACOSX_DEPLOYMENT_TARGET": "10.12"})
print(objc_cc_args(runtime, "aarch64"))
# -fobjc-arc -fobjc-arc-exceptions -fobjc-exceptions -fobjc-runtime=macosx-10.12

print(block_link_lib(select_block_runtime("linux")))   # BlocksRuntime
```

Platform types and block flags:

```python
from objcenc.blocks import BlockABI, block_abi, global_block_flags
from objcenc.platform_types import BoolType, Target, objc_bool_type, ns_integer_range

assert objc_bool_type("apple", Target("macos", "aarch64")) is BoolType.BOOL
assert ns_integer_range(32) == (-2147483648, 2147483647)
assert block_abi(global_block_flags()) is BlockABI.LEGACY
```

## What it does not do

The package describes encodings, flags and build settings; it does not load or
talk to an Objective-C runtime. It cannot send messages, create or call
blocks, or inspect classes. It does not parse an arbitrary encoding string
into an `Encoding`; it only checks a string against a known encoding. The ObjFW
runtime is recognised but not supported: selecting it raises
`RuntimeConfigError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```