# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Guard expressions: boolean combinations of named guard predicates."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class SourceSpan(BaseModel):
    """A location in the state machine source, as reported by the parser.

    Attributes:
        line: 1-based line number.
        column: 1-based column number.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    column: int


class AsyncIdent(BaseModel):
    """A reference to an action or guard callable.

    Attributes:
        ident: Name of the callable.
        is_async: Whether the generated callable is invoked asynchronously.
        span: Location of the reference, if the parser tracked one.
    """

    model_config = ConfigDict(frozen=True)

    ident: str
    is_async: bool = False
    span: SourceSpan | None = None


class GuardRef(BaseModel):
    """Leaf of a guard expression: a single guard predicate."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["guard"] = "guard"
    guard: AsyncIdent


class GuardNot(BaseModel):
    """Logical negation of a guard expression."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not"] = "not"
    operand: GuardExpression


class GuardGroup(BaseModel):
    """A parenthesised guard expression."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    operand: GuardExpression


class GuardAnd(BaseModel):
    """Logical conjunction of two guard expressions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["and"] = "and"
    left: GuardExpression
    right: GuardExpression


class GuardOr(BaseModel):
    """Logical disjunction of two guard expressions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["or"] = "or"
    left: GuardExpression
    right: GuardExpression


# A guard expression node. The `kind` discriminator keeps deserialization of
# nested trees unambiguous.
GuardExpression = Annotated[
    GuardRef | GuardNot | GuardGroup | GuardAnd | GuardOr,
    _Field(discriminator="kind"),
]

R = TypeVar("R")


def visit_guards(expr: GuardExpression, visit: Callable[[AsyncIdent], R | None]) -> R | None:
    """Call *visit* on every guard predicate in *expr*, left to right.

    Every leaf is visited regardless of the logical structure around it.
    Traversal stops at the first leaf for which *visit* returns something
    other than ``None``, and that value is returned unchanged.

    Args:
        expr: The guard expression to traverse.
        visit: Callback invoked with the identifier of each leaf.

    Returns:
        The first non-``None`` value returned by *visit*, or ``None`` if the
        callback accepted every leaf.
    """
    if isinstance(expr, GuardRef):
        return visit(expr.guard)
    if isinstance(expr, (GuardNot, GuardGroup)):
        return visit_guards(expr.operand, visit)
    result = visit_guards(expr.left, visit)
    if result is not None:
        return result
    return visit_guards(expr.right, visit)


def iter_guard_idents(expr: GuardExpression) -> Iterator[AsyncIdent]:
    """Yield the identifier of every guard predicate in *expr*, left to right."""
    if isinstance(expr, GuardRef):
        yield expr.guard
    elif isinstance(expr, (GuardNot, GuardGroup)):
        yield from iter_guard_idents(expr.operand)
    else:
        yield from iter_guard_idents(expr.left)
        yield from iter_guard_idents(expr.right)


def render_guard(expr: GuardExpression) -> str:
    """Render *expr* in the guard-expression notation used in diagnostics."""
    if isinstance(expr, GuardRef):
        prefix = "async " if expr.guard.is_async else ""
        return f"{prefix}{expr.guard.ident}"
    if isinstance(expr, GuardNot):
        return f"!{render_guard(expr.operand)}"
    if isinstance(expr, GuardGroup):
        return f"({render_guard(expr.operand)})"
    if isinstance(expr, GuardAnd):
        return f"{render_guard(expr.left)} && {render_guard(expr.right)}"
    return f"{render_guard(expr.left)} || {render_guard(expr.right)}"


# Resolve forward references in the recursive expression models.
GuardNot.model_rebuild()
GuardGroup.model_rebuild()
GuardAnd.model_rebuild()
GuardOr.model_rebuild()
