"""Scalar values and literals.

A literal is the atomic constant of the IR: a scalar integer, a boolean or a
character. Scalars pair an unbounded integer with the integer type they were
declared with; nothing here checks that the value fits that type (see
`primval.semantics.range_check` for the consumer-side check).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from primval.semantics.bigint import BigInt, show_big_int
from primval.semantics.typesys import (
    IntegerType, UnionVariant, payload,
    LiteralType, IntegerLiteralType, BoolLiteralType, CharLiteralType,
)


@dataclass(frozen=True, order=True)
class ScalarValue:
    """An integer constant and its declared type, ordered by value then type."""
    value: BigInt
    int_ty: IntegerType

    def __str__(self) -> str:
        return f"{show_big_int(self.value)} : {self.int_ty}"


class Literal(UnionVariant):
    """Scalar(ScalarValue) | Bool(bool) | Char(str)."""

    @property
    def literal_type(self) -> LiteralType:
        raise NotImplementedError


@dataclass(frozen=True)
class ScalarLiteral(Literal):
    tag: ClassVar[int] = 0
    visit_name: ClassVar[str] = "scalar_literal"

    value: ScalarValue = payload("scalar_value")

    def __str__(self) -> str:
        return str(self.value)

    @property
    def literal_type(self) -> LiteralType:
        return IntegerLiteralType(self.value.int_ty)


@dataclass(frozen=True)
class BoolLiteral(Literal):
    tag: ClassVar[int] = 1
    visit_name: ClassVar[str] = "bool_literal"

    value: bool = payload("bool")

    def __str__(self) -> str:
        return "true" if self.value else "false"

    @property
    def literal_type(self) -> LiteralType:
        return BoolLiteralType()


@dataclass(frozen=True)
class CharLiteral(Literal):
    tag: ClassVar[int] = 2
    visit_name: ClassVar[str] = "char_literal"

    value: str = payload("char")    # a single code point

    def __str__(self) -> str:
        return repr(self.value)

    @property
    def literal_type(self) -> LiteralType:
        return CharLiteralType()


LITERAL_VARIANTS: tuple[type, ...] = (ScalarLiteral, BoolLiteral, CharLiteral)

LITERAL_JSON_TAGS = {
    ScalarLiteral: "Scalar",
    BoolLiteral: "Bool",
    CharLiteral: "Char",
}


def scalar(value: BigInt, int_ty: IntegerType) -> ScalarLiteral:
    """Shorthand for `ScalarLiteral(ScalarValue(value, int_ty))`."""
    return ScalarLiteral(ScalarValue(value, int_ty))
