"""Integer type predicates, widths and bounds.

Scalars are stored unbounded; these helpers give a consumer the range a
declared integer type implies on a given target so it can decide what to do
with values that fall outside it.
"""
from __future__ import annotations
from typing import Optional, Set, Tuple

from primval.backend.bit_widths import FIXED_BIT_WIDTHS
from primval.backend.platform_detect import TargetPlatform, get_current_platform
from primval.semantics.bigint import BigInt
from primval.semantics.typesys import IntegerType
from primval.semantics.values import ScalarValue


# === Type Sets ===

SIGNED_INTEGER_TYPES: Set[IntegerType] = {
    IntegerType.ISIZE, IntegerType.I8, IntegerType.I16,
    IntegerType.I32, IntegerType.I64, IntegerType.I128,
}

UNSIGNED_INTEGER_TYPES: Set[IntegerType] = {
    IntegerType.USIZE, IntegerType.U8, IntegerType.U16,
    IntegerType.U32, IntegerType.U64, IntegerType.U128,
}

POINTER_SIZED_INTEGER_TYPES: Set[IntegerType] = {
    IntegerType.ISIZE, IntegerType.USIZE,
}


# === Type Predicates ===

def is_signed(ty: IntegerType) -> bool:
    """Check if an integer type is signed.

    Examples:
        >>> is_signed(IntegerType.I32)
        True
        >>> is_signed(IntegerType.USIZE)
        False
    """
    return ty in SIGNED_INTEGER_TYPES


def is_unsigned(ty: IntegerType) -> bool:
    return ty in UNSIGNED_INTEGER_TYPES


def is_pointer_sized(ty: IntegerType) -> bool:
    """Check if the width of an integer type depends on the target."""
    return ty in POINTER_SIZED_INTEGER_TYPES


# === Widths and bounds ===

def bit_width(ty: IntegerType, target: Optional[TargetPlatform] = None) -> int:
    """Width of `ty` in bits; pointer-sized types use the target (host by default)."""
    if is_pointer_sized(ty):
        target = target or get_current_platform()
        return target.pointer_width
    return FIXED_BIT_WIDTHS[ty]


def integer_type_bounds(ty: IntegerType, target: Optional[TargetPlatform] = None) -> Tuple[BigInt, BigInt]:
    """Inclusive (min, max) of the values representable by `ty`.

    Examples:
        >>> integer_type_bounds(IntegerType.I8)
        (-128, 127)
        >>> integer_type_bounds(IntegerType.U16)
        (0, 65535)
    """
    width = bit_width(ty, target)
    if is_signed(ty):
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    return 0, (1 << width) - 1


def scalar_in_bounds(sv: ScalarValue, target: Optional[TargetPlatform] = None) -> bool:
    lo, hi = integer_type_bounds(sv.int_ty, target)
    return lo <= sv.value <= hi
