import pytest

from objcenc.encode import (
    argument_encodings,
    array_encoding,
    function_pointer_encoding,
    pointer_encoding,
    primitive_encoding,
    reference_encoding,
)
from objcenc.encoding import Array, Pointer, Primitive


def test_c_string():
    assert primitive_encoding("i8") == Primitive.CHAR
    assert primitive_encoding("u8") == Primitive.UCHAR

    assert reference_encoding(primitive_encoding("i8")) == Primitive.STRING
    assert reference_encoding(primitive_encoding("u8")) == Primitive.STRING

    assert pointer_encoding(reference_encoding(Primitive.CHAR)) == Pointer(Primitive.STRING)
    assert pointer_encoding(reference_encoding(Primitive.UCHAR)) == Pointer(Primitive.STRING)


def test_i32():
    assert primitive_encoding("i32") == Primitive.INT
    assert reference_encoding(primitive_encoding("i32")) == Pointer(Primitive.INT)
    assert pointer_encoding(reference_encoding(Primitive.INT)) == Pointer(
        Pointer(Primitive.INT)
    )


def test_void():
    assert primitive_encoding("()") == Primitive.VOID
    void_ptr = primitive_encoding("*const c_void")
    assert void_ptr == Pointer(Primitive.VOID)
    assert primitive_encoding("*mut c_void") == Pointer(Primitive.VOID)
    assert reference_encoding(void_ptr) == Pointer(Pointer(Primitive.VOID))


def test_extern_fn_pointer():
    assert function_pointer_encoding() == Pointer(Primitive.UNKNOWN)
    assert reference_encoding(function_pointer_encoding()) == Pointer(
        Pointer(Primitive.UNKNOWN)
    )


@pytest.mark.parametrize(
    "name, expected",
    [
        ("i16", Primitive.SHORT),
        ("i64", Primitive.LONG_LONG),
        ("u16", Primitive.USHORT),
        ("u32", Primitive.UINT),
        ("u64", Primitive.ULONG_LONG),
        ("f32", Primitive.FLOAT),
        ("f64", Primitive.DOUBLE),
        ("bool", Primitive.BOOL),
    ],
)
def test_fixed_primitives(name, expected):
    assert primitive_encoding(name) == expected


@pytest.mark.parametrize(
    "width, signed, unsigned",
    [
        (16, Primitive.SHORT, Primitive.USHORT),
        (32, Primitive.INT, Primitive.UINT),
        (64, Primitive.LONG_LONG, Primitive.ULONG_LONG),
    ],
)
def test_size_types_follow_pointer_width(width, signed, unsigned):
    assert primitive_encoding("isize", width) == signed
    assert primitive_encoding("usize", width) == unsigned


def test_nonzero_matches_underlying():
    assert primitive_encoding("NonZeroU32") == Primitive.UINT
    assert primitive_encoding("Option<NonZeroI8>") == Primitive.CHAR
    assert primitive_encoding("NonZeroUsize", 32) == primitive_encoding("usize", 32)


def test_invalid_pointer_width():
    with pytest.raises(ValueError):
        primitive_encoding("usize", 8)


def test_unknown_type_name():
    with pytest.raises(KeyError):
        primitive_encoding("c_void")


def test_array_encoding():
    enc = array_encoding(12, Primitive.INT)
    assert enc == Array(12, Primitive.INT)
    assert str(enc) == "[12i]"
    assert reference_encoding(enc) == Pointer(enc)


def test_array_rejects_non_encoding_item():
    with pytest.raises(TypeError):
        array_encoding(3, "i")


def test_reference_rejects_non_encoding():
    with pytest.raises(TypeError):
        reference_encoding("i")


def test_argument_encodings():
    assert argument_encodings() == ()
    assert argument_encodings(Primitive.INT, Primitive.DOUBLE) == (
        Primitive.INT,
        Primitive.DOUBLE,
    )


def test_argument_encodings_limit():
    assert len(argument_encodings(*[Primitive.INT] * 12)) == 12
    with pytest.raises(ValueError):
        argument_encodings(*[Primitive.INT] * 13)