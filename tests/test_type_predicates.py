import pytest

from primval.semantics.type_predicates import (
    POINTER_SIZED_INTEGER_TYPES, SIGNED_INTEGER_TYPES, UNSIGNED_INTEGER_TYPES,
    bit_width, integer_type_bounds, is_pointer_sized, is_signed, is_unsigned, scalar_in_bounds,
)
from primval.semantics.typesys import IntegerType
from primval.semantics.values import ScalarValue


def test_signedness_partitions_the_integer_types():
    assert SIGNED_INTEGER_TYPES | UNSIGNED_INTEGER_TYPES == set(IntegerType)
    assert not SIGNED_INTEGER_TYPES & UNSIGNED_INTEGER_TYPES
    assert is_signed(IntegerType.ISIZE) and is_unsigned(IntegerType.USIZE)
    assert POINTER_SIZED_INTEGER_TYPES == {IntegerType.ISIZE, IntegerType.USIZE}
    assert is_pointer_sized(IntegerType.USIZE) and not is_pointer_sized(IntegerType.U64)


@pytest.mark.parametrize("ty, expected", [
    (IntegerType.I8, (-128, 127)),
    (IntegerType.U8, (0, 255)),
    (IntegerType.I16, (-32768, 32767)),
    (IntegerType.U32, (0, 2**32 - 1)),
    (IntegerType.I64, (-(2**63), 2**63 - 1)),
    (IntegerType.I128, (-(2**127), 2**127 - 1)),
    (IntegerType.U128, (0, 2**128 - 1)),
])
def test_fixed_width_bounds(ty, expected, target64):
    assert integer_type_bounds(ty, target64) == expected


def test_pointer_sized_bounds_follow_target(target64, target32):
    assert bit_width(IntegerType.USIZE, target64) == 64
    assert bit_width(IntegerType.USIZE, target32) == 32
    assert integer_type_bounds(IntegerType.ISIZE, target32) == (-(2**31), 2**31 - 1)
    assert integer_type_bounds(IntegerType.USIZE, target64) == (0, 2**64 - 1)


def test_pointer_sized_bounds_default_to_host(host_is_64bit):
    assert bit_width(IntegerType.ISIZE) == 64


def test_scalar_in_bounds(target64):
    assert scalar_in_bounds(ScalarValue(255, IntegerType.U8), target64)
    assert not scalar_in_bounds(ScalarValue(256, IntegerType.U8), target64)
    assert not scalar_in_bounds(ScalarValue(-1, IntegerType.U8), target64)
    assert scalar_in_bounds(ScalarValue(-(2**127), IntegerType.I128), target64)
