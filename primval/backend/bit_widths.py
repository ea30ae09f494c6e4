"""Integer type bit widths.

Fixed-width integer types map to a constant width; `isize` and `usize` take
the pointer width of the target (see platform_detect.TargetPlatform).
"""
from primval.semantics.typesys import IntegerType

INT8_BIT_WIDTH = 8
INT16_BIT_WIDTH = 16
INT32_BIT_WIDTH = 32
INT64_BIT_WIDTH = 64
INT128_BIT_WIDTH = 128

FIXED_BIT_WIDTHS = {
    IntegerType.I8: INT8_BIT_WIDTH,
    IntegerType.U8: INT8_BIT_WIDTH,
    IntegerType.I16: INT16_BIT_WIDTH,
    IntegerType.U16: INT16_BIT_WIDTH,
    IntegerType.I32: INT32_BIT_WIDTH,
    IntegerType.U32: INT32_BIT_WIDTH,
    IntegerType.I64: INT64_BIT_WIDTH,
    IntegerType.U64: INT64_BIT_WIDTH,
    IntegerType.I128: INT128_BIT_WIDTH,
    IntegerType.U128: INT128_BIT_WIDTH,
}
