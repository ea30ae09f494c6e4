from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum
from functools import total_ordering
from typing import ClassVar, Dict, Mapping


@total_ordering
class IntegerType(Enum):
    """Machine integer width/signedness tag.

    Declaration order is the sort order; it is relied on for deterministic
    output wherever integer types are used as keys.
    """
    ISIZE = "isize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    USIZE = "usize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, IntegerType):
            return NotImplemented
        return _INTEGER_TYPE_ORDINAL[self] < _INTEGER_TYPE_ORDINAL[other]

    @property
    def json_name(self) -> str:
        """Variant name used on the wire ("Isize", "I8", ... "U128")."""
        return self.name.capitalize()


_INTEGER_TYPE_ORDINAL: Mapping[IntegerType, int] = {ty: i for i, ty in enumerate(IntegerType)}

JSON_TO_INTEGER_TYPE: Mapping[str, IntegerType] = {ty.json_name: ty for ty in IntegerType}


# === Closed unions ===

def payload(visit: str):
    """Declare a dataclass field as a variant payload.

    `visit` names the leaf handler (`visit_<visit>`) the traversal
    strategies apply to the field's value.
    """
    return field(metadata={"visit": visit})


class UnionVariant:
    """Base for the members of a closed union.

    A union is a direct subclass of UnionVariant; its members are frozen
    dataclasses deriving from it. Members compare by variant `tag` first and
    then by payload, and only against members of the same union.
    """
    tag: ClassVar[int]
    visit_name: ClassVar[str]

    @classmethod
    def union(cls) -> type:
        for klass in cls.__mro__:
            if UnionVariant in klass.__bases__:
                return klass
        raise TypeError(f"{cls.__name__} is not a union variant")

    def _sort_key(self) -> tuple:
        return (self.tag,) + tuple(getattr(self, f.name) for f in fields(self))

    def __lt__(self, other) -> bool:
        if not isinstance(other, self.union()):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other) -> bool:
        if not isinstance(other, self.union()):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other) -> bool:
        if not isinstance(other, self.union()):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other) -> bool:
        if not isinstance(other, self.union()):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


class LiteralType(UnionVariant):
    """Shape of a literal, without a value: Integer(int_ty) | Bool | Char."""


@dataclass(frozen=True)
class IntegerLiteralType(LiteralType):
    tag: ClassVar[int] = 0
    visit_name: ClassVar[str] = "integer_literal_type"

    int_ty: IntegerType = payload("integer_type")

    def __str__(self) -> str:
        return str(self.int_ty)


@dataclass(frozen=True)
class BoolLiteralType(LiteralType):
    tag: ClassVar[int] = 1
    visit_name: ClassVar[str] = "bool_literal_type"

    def __str__(self) -> str:
        return "bool"


@dataclass(frozen=True)
class CharLiteralType(LiteralType):
    tag: ClassVar[int] = 2
    visit_name: ClassVar[str] = "char_literal_type"

    def __str__(self) -> str:
        return "char"


LITERAL_TYPE_VARIANTS: tuple[type, ...] = (IntegerLiteralType, BoolLiteralType, CharLiteralType)

LITERAL_TYPE_JSON_TAGS: Dict[type, str] = {
    IntegerLiteralType: "Integer",
    BoolLiteralType: "Bool",
    CharLiteralType: "Char",
}
