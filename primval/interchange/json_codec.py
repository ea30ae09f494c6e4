"""JSON interchange for primitive values.

Enums are externally tagged, the way the enclosing IR serializer writes them:

    IntegerType   "I32"
    LiteralType   {"Integer": "I32"} | "Bool" | "Char"
    ScalarValue   {"value": "255", "int_ty": "U8"}
    Literal       {"Scalar": <ScalarValue>} | {"Bool": true} | {"Char": "a"}

Big integers are always written as strings of decimal digits so that no
consumer can lose precision on values beyond 64 bits; both native JSON
integers and such strings are accepted on input.

Every decoder takes the JSON path of its input and raises DecodeError located
at that path.
"""
from __future__ import annotations
import json
from typing import Any, Callable, Dict, Iterable, List, Optional

from primval.internals.errors import DecodeError, report_decode_error
from primval.internals.report import Reporter, json_path
from primval.semantics.bigint import (
    big_int_of_json, big_int_to_json, parse_big_int, unlimited_int_digits,
)
from primval.semantics.typesys import (
    IntegerType, JSON_TO_INTEGER_TYPE, LITERAL_TYPE_JSON_TAGS,
    LiteralType, IntegerLiteralType, BoolLiteralType, CharLiteralType,
)
from primval.semantics.values import (
    LITERAL_JSON_TAGS, Literal, ScalarValue, ScalarLiteral, BoolLiteral, CharLiteral,
)

SCALAR_VALUE_FIELDS = ("value", "int_ty")


def _describe(value: Any, limit: int = 40) -> str:
    """Short JSON rendering of an offending value for error messages."""
    with unlimited_int_digits():
        try:
            text = json.dumps(value)
        except (TypeError, ValueError):
            text = repr(value)
    return text if len(text) <= limit else text[:limit - 3] + "..."


def _single_entry(value: Any) -> Optional[tuple]:
    if isinstance(value, dict) and len(value) == 1:
        return next(iter(value.items()))
    return None


# === Integer types ===

def integer_type_to_json(ty: IntegerType) -> str:
    return ty.json_name


def integer_type_of_json(value: Any, path: str = "$") -> IntegerType:
    ty = JSON_TO_INTEGER_TYPE.get(value) if isinstance(value, str) else None
    if ty is None:
        raise DecodeError("CE4002", path, name=_describe(value))
    return ty


# === Literal types ===

def literal_type_to_json(ty: LiteralType) -> Any:
    tag = LITERAL_TYPE_JSON_TAGS[type(ty)]
    if isinstance(ty, IntegerLiteralType):
        return {tag: integer_type_to_json(ty.int_ty)}
    return tag


def literal_type_of_json(value: Any, path: str = "$") -> LiteralType:
    if value == "Bool":
        return BoolLiteralType()
    if value == "Char":
        return CharLiteralType()
    entry = _single_entry(value)
    if entry is not None and entry[0] == "Integer":
        return IntegerLiteralType(integer_type_of_json(entry[1], json_path(path, "Integer")))
    raise DecodeError("CE4003", path, value=_describe(value))


# === Scalar values ===

def scalar_value_to_json(sv: ScalarValue) -> Dict[str, Any]:
    return {
        "value": big_int_to_json(sv.value),
        "int_ty": integer_type_to_json(sv.int_ty),
    }


def scalar_value_of_json(value: Any, path: str = "$") -> ScalarValue:
    if not isinstance(value, dict) or set(value) != set(SCALAR_VALUE_FIELDS):
        raise DecodeError("CE4007", path, fields=", ".join(SCALAR_VALUE_FIELDS), value=_describe(value))
    return ScalarValue(
        big_int_of_json(value["value"], json_path(path, "value")),
        integer_type_of_json(value["int_ty"], json_path(path, "int_ty")),
    )


# === Literals ===

def literal_to_json(lit: Literal) -> Dict[str, Any]:
    tag = LITERAL_JSON_TAGS[type(lit)]
    if isinstance(lit, ScalarLiteral):
        return {tag: scalar_value_to_json(lit.value)}
    return {tag: lit.value}


def literal_of_json(value: Any, path: str = "$") -> Literal:
    entry = _single_entry(value)
    if entry is None:
        raise DecodeError("CE4004", path, value=_describe(value))

    tag, body = entry
    body_path = json_path(path, tag)
    if tag == "Scalar":
        return ScalarLiteral(scalar_value_of_json(body, body_path))
    if tag == "Bool":
        if not isinstance(body, bool):
            raise DecodeError("CE4005", body_path, value=_describe(body))
        return BoolLiteral(body)
    if tag == "Char":
        if not isinstance(body, str) or len(body) != 1:
            raise DecodeError("CE4006", body_path, value=_describe(body))
        return CharLiteral(body)
    raise DecodeError("CE4004", path, value=_describe(value))


def decode_literals(items: Iterable[Any], reporter: Reporter, path: str = "$") -> List[Optional[Literal]]:
    """Decode a list of literals, reporting each failure instead of raising.

    Positions that failed to decode hold None in the result.
    """
    out: List[Optional[Literal]] = []
    for i, item in enumerate(items):
        try:
            out.append(literal_of_json(item, json_path(path, i)))
        except DecodeError as e:
            report_decode_error(reporter, e)
            out.append(None)
    return out


# === Text helpers ===

def loads(text: str, decoder: Callable[[Any, str], Any] = literal_of_json) -> Any:
    """Parse JSON text and decode it with `decoder` (a literal by default)."""
    return decoder(json.loads(text, parse_int=parse_big_int), "$")


def dumps(value: Any, encoder: Callable[[Any], Any] = literal_to_json, **kwargs) -> str:
    """Encode `value` with `encoder` (a literal by default) and render it as JSON text."""
    return json.dumps(encoder(value), **kwargs)
