"""
Consumer-side range checking for scalar literals.

Scalars may be built holding values their declared type cannot represent
(a `u8` holding -1 or 300). This pass is the consumer that rejects them: it
walks literals with the Iterate strategy and reports every out-of-range scalar
to a Reporter instead of stopping at the first one.
"""
from __future__ import annotations
from typing import Iterable, Optional

from primval.backend.platform_detect import TargetPlatform, get_current_platform
from primval.internals import errors as er
from primval.internals.errors import ERR
from primval.internals.report import Reporter, json_path
from primval.semantics.bigint import BigInt, show_big_int
from primval.semantics.type_predicates import (
    bit_width, integer_type_bounds, is_pointer_sized, scalar_in_bounds,
)
from primval.semantics.values import Literal, ScalarValue
from primval.semantics.visitors import IterLiteral


# Longest rendering of an offending value kept in a diagnostic message.
MAX_VALUE_CHARS = 60


def _show_value(value: BigInt) -> str:
    text = show_big_int(value)
    if len(text) <= MAX_VALUE_CHARS:
        return text
    return f"{text[:MAX_VALUE_CHARS - 3]}... ({len(text.lstrip('-'))} digits)"


class ScalarRangeChecker(IterLiteral):
    """Iterate visitor reporting scalars outside their type's range.

    The env passed to `visit_literal` is the JSON path of the literal, used to
    locate the diagnostic.
    """

    def __init__(self, reporter: Reporter, target: Optional[TargetPlatform] = None) -> None:
        self.reporter = reporter
        self.explicit_target = target is not None
        self.target = target or get_current_platform()
        self._warned_pointer_sized = False

    def visit_scalar_value(self, env: Optional[str], sv: ScalarValue) -> None:
        if is_pointer_sized(sv.int_ty) and not self.explicit_target and not self._warned_pointer_sized:
            er.emit(self.reporter, ERR.CW4101, env,
                    int_ty=sv.int_ty, bits=bit_width(sv.int_ty, self.target))
            self._warned_pointer_sized = True

        if not scalar_in_bounds(sv, self.target):
            lo, hi = integer_type_bounds(sv.int_ty, self.target)
            er.emit(self.reporter, ERR.CE4101, env,
                    value=_show_value(sv.value), int_ty=sv.int_ty, lo=lo, hi=hi)


def check_literals(literals: Iterable[Literal], reporter: Reporter,
                   target: Optional[TargetPlatform] = None, path: str = "$") -> bool:
    """Range-check a sequence of literals; True if no error was reported."""
    checker = ScalarRangeChecker(reporter, target)
    errors_before = sum(1 for d in reporter.items if d.kind == "error")
    for i, lit in enumerate(literals):
        checker.visit_literal(json_path(path, i), lit)
    return sum(1 for d in reporter.items if d.kind == "error") == errors_before
