"""
Generic traversal strategies over the primitive-value unions.

Four strategies are defined once, over the shape of a union variant, and then
specialized per union by supplying only the leaf handlers:

    Iter       visit(env, x) -> None              side effects only
    Map        visit(env, x) -> x'                rebuilds the value
    Reduce     visit(env, x) -> acc               folds with zero() / plus()
    MapReduce  visit(env, x) -> (x', acc)         both in one pass

Dispatch is by name: a variant's `visit_name` selects the `visit_<name>`
method. The default handler for every variant walks the dataclass fields
declared with `payload(...)` and applies the leaf handler each field names
(`visit_integer_type`, `visit_scalar_value`, `visit_bool`, `visit_char`).

Usage:
    1. Subclass one of the eight union strategies below
       (IterLiteralType, MapLiteral, ReduceLiteral, ...)
    2. Override only the variant or leaf handlers you care about
    3. Call visit_literal_type(env, ty) / visit_literal(env, lit)

Example:
    class WidenI32(MapLiteral):
        def visit_scalar_value(self, env, sv: ScalarValue) -> ScalarValue:
            if sv.int_ty == IntegerType.I32:
                return ScalarValue(sv.value, IntegerType.I64)
            return sv

    WidenI32().visit_literal(None, scalar(7, IntegerType.I32))

A value that is not a variant of the walked union raises TypeError, and a
payload whose leaf handler does not exist raises AttributeError, so a new
variant with a new kind of payload cannot be skipped silently. Use
`unhandled_variants` in tests to check that a traversal overrides every variant
it should.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import Field, fields, replace
from typing import Any, Generic, Iterable, List, Tuple, TypeVar

from primval.internals import errors as er
from primval.semantics.typesys import IntegerType, LiteralType
from primval.semantics.values import Literal, ScalarValue

T = TypeVar('T')
A = TypeVar('A')


def payload_fields(node: Any) -> List[Tuple[Field, Any]]:
    """The (field, value) pairs of a variant that traversals descend into."""
    return [(f, getattr(node, f.name)) for f in fields(node) if "visit" in f.metadata]


class NodeVisitor(ABC, Generic[T]):
    """
    Abstract base class for the traversal strategies.

    Routes each variant to its `visit_<visit_name>` method, falling back to
    `generic_visit`, which every strategy implements over the variant's
    payload fields.
    """

    def visit(self, env: Any, node: Any) -> T:
        name = getattr(type(node), "visit_name", None)
        if name is None:
            er.raise_internal_error("CE0001", visitor=type(self).__name__, node=type(node).__name__)
        visitor = getattr(self, f"visit_{name}", self.generic_visit)
        return visitor(env, node)

    @abstractmethod
    def generic_visit(self, env: Any, node: Any) -> T:
        ...

    def visit_leaf(self, env: Any, f: Field, value: Any) -> Any:
        """Apply the leaf handler named by a payload field."""
        return getattr(self, f"visit_{f.metadata['visit']}")(env, value)


class Iter(NodeVisitor[None]):
    """Side-effecting walk. Leaves are no-ops."""

    def generic_visit(self, env: Any, node: Any) -> None:
        for f, value in payload_fields(node):
            self.visit_leaf(env, f, value)

    def visit_bool(self, env: Any, b: bool) -> None:
        pass

    def visit_char(self, env: Any, c: str) -> None:
        pass


class Map(NodeVisitor[Any]):
    """Rebuilding walk. Leaves are the identity."""

    def generic_visit(self, env: Any, node: Any) -> Any:
        changes = {f.name: self.visit_leaf(env, f, value) for f, value in payload_fields(node)}
        if not changes:
            return node
        return replace(node, **changes)

    def visit_bool(self, env: Any, b: bool) -> bool:
        return b

    def visit_char(self, env: Any, c: str) -> str:
        return c


class Reduce(NodeVisitor[A]):
    """Folding walk. Leaves return zero(); results are combined with plus()."""

    @abstractmethod
    def zero(self) -> A:
        ...

    @abstractmethod
    def plus(self, a: A, b: A) -> A:
        ...

    def generic_visit(self, env: Any, node: Any) -> A:
        acc = self.zero()
        for f, value in payload_fields(node):
            acc = self.plus(acc, self.visit_leaf(env, f, value))
        return acc

    def visit_bool(self, env: Any, b: bool) -> A:
        return self.zero()

    def visit_char(self, env: Any, c: str) -> A:
        return self.zero()


class MapReduce(NodeVisitor[Tuple[Any, A]]):
    """Rebuilding and folding in one walk. Leaves return (x, zero())."""

    @abstractmethod
    def zero(self) -> A:
        ...

    @abstractmethod
    def plus(self, a: A, b: A) -> A:
        ...

    def generic_visit(self, env: Any, node: Any) -> Tuple[Any, A]:
        acc = self.zero()
        changes = {}
        for f, value in payload_fields(node):
            new_value, leaf_acc = self.visit_leaf(env, f, value)
            changes[f.name] = new_value
            acc = self.plus(acc, leaf_acc)
        return (replace(node, **changes) if changes else node), acc

    def visit_bool(self, env: Any, b: bool) -> Tuple[bool, A]:
        return b, self.zero()

    def visit_char(self, env: Any, c: str) -> Tuple[str, A]:
        return c, self.zero()


# === Literal types ===

class LiteralTypeVisitor:
    """Entry point and per-variant handlers of the literal-type strategies."""
    _default_handlers = True

    def visit_literal_type(self, env: Any, ty: LiteralType):
        if not isinstance(ty, LiteralType):
            er.raise_internal_error("CE0001", visitor=type(self).__name__, node=type(ty).__name__)
        return self.visit(env, ty)

    def visit_integer_literal_type(self, env: Any, ty: LiteralType):
        return self.generic_visit(env, ty)

    def visit_bool_literal_type(self, env: Any, ty: LiteralType):
        return self.generic_visit(env, ty)

    def visit_char_literal_type(self, env: Any, ty: LiteralType):
        return self.generic_visit(env, ty)


class IterLiteralTypeBase(Iter):
    def visit_integer_type(self, env: Any, int_ty: IntegerType) -> None:
        pass


class MapLiteralTypeBase(Map):
    def visit_integer_type(self, env: Any, int_ty: IntegerType) -> IntegerType:
        return int_ty


class ReduceLiteralTypeBase(Reduce[A]):
    def visit_integer_type(self, env: Any, int_ty: IntegerType) -> A:
        return self.zero()


class MapReduceLiteralTypeBase(MapReduce[A]):
    def visit_integer_type(self, env: Any, int_ty: IntegerType) -> Tuple[IntegerType, A]:
        return int_ty, self.zero()


class IterLiteralType(LiteralTypeVisitor, IterLiteralTypeBase):
    pass


class MapLiteralType(LiteralTypeVisitor, MapLiteralTypeBase):
    pass


class ReduceLiteralType(LiteralTypeVisitor, ReduceLiteralTypeBase[A]):
    pass


class MapReduceLiteralType(LiteralTypeVisitor, MapReduceLiteralTypeBase[A]):
    pass


# === Literals ===

class LiteralVisitor:
    """Entry point and per-variant handlers of the literal strategies."""
    _default_handlers = True

    def visit_literal(self, env: Any, lit: Literal):
        if not isinstance(lit, Literal):
            er.raise_internal_error("CE0001", visitor=type(self).__name__, node=type(lit).__name__)
        return self.visit(env, lit)

    def visit_scalar_literal(self, env: Any, lit: Literal):
        return self.generic_visit(env, lit)

    def visit_bool_literal(self, env: Any, lit: Literal):
        return self.generic_visit(env, lit)

    def visit_char_literal(self, env: Any, lit: Literal):
        return self.generic_visit(env, lit)


class IterLiteralBase(Iter):
    def visit_scalar_value(self, env: Any, sv: ScalarValue) -> None:
        pass


class MapLiteralBase(Map):
    def visit_scalar_value(self, env: Any, sv: ScalarValue) -> ScalarValue:
        return sv


class ReduceLiteralBase(Reduce[A]):
    def visit_scalar_value(self, env: Any, sv: ScalarValue) -> A:
        return self.zero()


class MapReduceLiteralBase(MapReduce[A]):
    def visit_scalar_value(self, env: Any, sv: ScalarValue) -> Tuple[ScalarValue, A]:
        return sv, self.zero()


class IterLiteral(LiteralVisitor, IterLiteralBase):
    pass


class MapLiteral(LiteralVisitor, MapLiteralBase):
    pass


class ReduceLiteral(LiteralVisitor, ReduceLiteralBase[A]):
    pass


class MapReduceLiteral(LiteralVisitor, MapReduceLiteralBase[A]):
    pass


def unhandled_variants(visitor_cls: type, variants: Iterable[type]) -> List[type]:
    """Variants for which `visitor_cls` still relies on the default handler.

    A test can assert this is empty to make sure a traversal covers every
    variant, including ones added to a union after the traversal was written.
    """
    missing = []
    for variant in variants:
        name = f"visit_{variant.visit_name}"
        owner = next((k for k in visitor_cls.__mro__ if name in vars(k)), None)
        if owner is None or vars(owner).get("_default_handlers", False):
            missing.append(variant)
    return missing
