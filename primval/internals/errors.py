# primval/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from primval.internals.report import Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    DECODE    = "decode"
    RANGE     = "range"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class DecodeError(ValueError):
    """Raised when a JSON value does not have the shape of the requested entity.

    The error is never recovered locally: it propagates to the enclosing
    deserializer, which either aborts or turns it into a diagnostic with
    `report_decode_error`.
    """

    def __init__(self, code: str, path: str = "$", **kwargs):
        self.code = code
        self.path = path
        self.kwargs = kwargs
        self.message = _fmt(code, **kwargs)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


def emit(r: Reporter, em: ErrorMessage, path: Optional[str], **kwargs) -> None:
    text = _fmt(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, path)
    else:
        r.warn(em.code, text, path)

def report_decode_error(r: Reporter, err: DecodeError) -> None:
    emit(r, ERR[err.code], err.path, **err.kwargs)

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a TypeError for internal errors.

    Internal errors (CE0xxx codes) indicate a traversal was handed something
    that is not a variant of the union it walks, which is a bug in the caller
    rather than bad input data.

    Raises:
        TypeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise TypeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Internal errors - CE0xxx range
_add(ErrorMessage("CE0001", Severity.ERROR,
    "visitor {visitor} doesn't handle {node}",
    Category.INTERNAL, "A traversal was given a value that is not a variant of the union it walks."))

# JSON decoding - CE40xx range
_add(ErrorMessage("CE4001", Severity.ERROR,
    "not an integer or an integer literal",
    Category.DECODE, "Big integers are either native JSON integers or strings of decimal digits."))

_add(ErrorMessage("CE4002", Severity.ERROR,
    "unknown integer type {name}",
    Category.DECODE, "Integer types are one of Isize, I8 .. I128, Usize, U8 .. U128."))

_add(ErrorMessage("CE4003", Severity.ERROR,
    "unknown literal type {value}",
    Category.DECODE, "Literal types are {\"Integer\": <int ty>}, \"Bool\" or \"Char\"."))

_add(ErrorMessage("CE4004", Severity.ERROR,
    "unknown literal variant {value}",
    Category.DECODE, "Literals are single-key objects tagged Scalar, Bool or Char."))

_add(ErrorMessage("CE4005", Severity.ERROR,
    "expected a boolean, got {value}",
    Category.DECODE, "Bool literals carry a JSON true or false."))

_add(ErrorMessage("CE4006", Severity.ERROR,
    "expected a single character, got {value}",
    Category.DECODE, "Char literals carry a JSON string of exactly one code point."))

_add(ErrorMessage("CE4007", Severity.ERROR,
    "expected an object with fields {fields}, got {value}",
    Category.DECODE, "Record-shaped values must list exactly their declared fields."))

# Scalar range checking - CE41xx range
_add(ErrorMessage("CE4101", Severity.ERROR,
    "value {value} out of range for {int_ty} ({lo}..={hi})",
    Category.RANGE, "A scalar holds a value its declared integer type cannot represent."))

_add(ErrorMessage("CW4101", Severity.WARNING,
    "width of {int_ty} depends on the target pointer size, assuming {bits} bits",
    Category.RANGE, "No explicit target was given; isize/usize were checked against the host."))
