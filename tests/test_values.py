import pytest

from primval.semantics.typesys import IntegerType, IntegerLiteralType, BoolLiteralType, CharLiteralType
from primval.semantics.values import (
    Literal, ScalarValue, ScalarLiteral, BoolLiteral, CharLiteral, LITERAL_VARIANTS, scalar,
)


def test_scalar_construction_does_not_check_range():
    sv = ScalarValue(-1, IntegerType.U8)
    assert sv.value == -1
    assert sv.int_ty is IntegerType.U8
    assert ScalarValue(300, IntegerType.U8).value == 300
    assert ScalarValue(2**200, IntegerType.I8).value == 2**200


def test_scalar_value_order_is_value_then_type():
    assert ScalarValue(1, IntegerType.U128) < ScalarValue(2, IntegerType.I8)
    assert ScalarValue(1, IntegerType.I8) < ScalarValue(1, IntegerType.U8)


def test_literal_order_is_scalar_bool_char():
    lits = [CharLiteral("a"), BoolLiteral(True), scalar(10**30, IntegerType.U128),
            BoolLiteral(False), scalar(-5, IntegerType.I8)]
    assert sorted(lits) == [scalar(-5, IntegerType.I8), scalar(10**30, IntegerType.U128),
                            BoolLiteral(False), BoolLiteral(True), CharLiteral("a")]


def test_literals_of_different_unions_do_not_compare():
    with pytest.raises(TypeError):
        BoolLiteral(True) < BoolLiteralType()


def test_literal_equality_is_structural_and_tagged():
    assert scalar(1, IntegerType.I32) == ScalarLiteral(ScalarValue(1, IntegerType.I32))
    assert scalar(1, IntegerType.I32) != scalar(1, IntegerType.I64)
    assert BoolLiteral(True) != CharLiteral("t")


@pytest.mark.parametrize("lit", [scalar(3, IntegerType.U16), BoolLiteral(False), CharLiteral("z")])
def test_every_literal_is_exactly_one_variant(lit):
    assert isinstance(lit, Literal)
    assert sum(isinstance(lit, variant) for variant in LITERAL_VARIANTS) == 1


def test_literal_type_of_literal():
    assert scalar(3, IntegerType.U16).literal_type == IntegerLiteralType(IntegerType.U16)
    assert BoolLiteral(True).literal_type == BoolLiteralType()
    assert CharLiteral("x").literal_type == CharLiteralType()


def test_str():
    assert str(ScalarValue(-1, IntegerType.U8)) == "-1 : u8"
    assert str(scalar(2**64, IntegerType.U128)) == "18446744073709551616 : u128"
    assert str(BoolLiteral(True)) == "true"
    assert str(BoolLiteral(False)) == "false"
    assert str(CharLiteral("a")) == "'a'"


def test_literals_are_hashable():
    assert len({scalar(1, IntegerType.I8), scalar(1, IntegerType.I8), BoolLiteral(True)}) == 2
