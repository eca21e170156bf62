# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the guard signature consistency check."""

from smlcheck.model import (
    AsyncIdent,
    DataTypes,
    EventMapping,
    EventTransition,
    GuardAnd,
    GuardExpression,
    GuardGroup,
    GuardNot,
    GuardOr,
    GuardRef,
    ParsedStateMachine,
    SourceSpan,
)
from smlcheck.validation.guards import validate_guards
from smlcheck.validation.violations import ViolationKind

# ###############
# Test Helpers
# ###############


def _g(name: str, is_async: bool = False, span: SourceSpan | None = None) -> GuardRef:
    """Create a guard leaf."""
    return GuardRef(guard=AsyncIdent(ident=name, is_async=is_async, span=span))


def _t(out_state: str, guard: GuardExpression | None = None) -> EventTransition:
    """Create a transition with an optional guard expression."""
    return EventTransition(out_state=out_state, guard=guard)


def _sm(
    transitions: dict[tuple[str, str], list[EventTransition]],
    states: dict[str, str] | None = None,
    events: dict[str, str] | None = None,
) -> ParsedStateMachine:
    """Create a state machine from (state, event) -> transitions."""
    mapping: dict[str, dict[str, EventMapping]] = {}
    for (in_state, event), ts in transitions.items():
        mapping.setdefault(in_state, {})[event] = EventMapping(in_state=in_state, event=event, transitions=ts)
    return ParsedStateMachine(
        states_events_mapping=mapping,
        state_data=DataTypes(data_types=states or {}),
        event_data=DataTypes(data_types=events or {}),
    )


# ###############
# Consistent Usage
# ###############


def test_no_guards_is_valid() -> None:
    sm = _sm({("A", "Go"): [_t("B")]}, states={"A": "AData"})
    assert validate_guards(sm) is None


def test_reuse_with_identical_data_is_valid() -> None:
    sm = _sm(
        {("A", "Go"): [_t("B", _g("ok"))], ("C", "Go"): [_t("B", _g("ok"))]},
        states={"A": "Shared", "C": "Shared"},
        events={"Go": "GoEvent"},
    )
    assert validate_guards(sm) is None


def test_target_state_data_is_ignored() -> None:
    """Guards have no output, so differing target state data never matters."""
    sm = _sm(
        {("A", "Go"): [_t("B", _g("ok")), _t("C", _g("ok"))]},
        states={"B": "BData", "C": "CData"},
    )
    assert validate_guards(sm) is None


def test_same_guard_twice_in_one_expression_is_valid() -> None:
    sm = _sm({("A", "Go"): [_t("B", GuardOr(left=_g("ok"), right=GuardNot(operand=_g("ok"))))]})
    assert validate_guards(sm) is None


# ###############
# Inconsistent Usage
# ###############


def test_differing_state_data_fails() -> None:
    sm = _sm(
        {("A", "Go"): [_t("B", _g("ok"))], ("C", "Go"): [_t("B", _g("ok"))]},
        states={"A": "AData", "C": "CData"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert violation.kind == ViolationKind.INCONSISTENT_GUARD_SIGNATURE
    assert "`ok`" in violation.message
    assert "same data" in violation.message


def test_differing_event_data_fails() -> None:
    sm = _sm(
        {("A", "Go"): [_t("B", _g("ok"))], ("A", "Jump"): [_t("B", _g("ok"))]},
        events={"Jump": "JumpEvent"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert "`ok`" in violation.message


def test_differing_synchrony_fails() -> None:
    sm = _sm({("A", "Go"): [_t("B", _g("ok")), _t("C", _g("ok", is_async=True))]})
    violation = validate_guards(sm)
    assert violation is not None
    assert "`ok`" in violation.message


def test_guard_nested_in_and_is_checked() -> None:
    """A guard used only inside a conjunction is still compared."""
    sm = _sm(
        {
            ("A", "Go"): [_t("B", GuardAnd(left=_g("first"), right=_g("deep")))],
            ("C", "Go"): [_t("B", _g("deep"))],
        },
        states={"A": "AData", "C": "CData"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert "`deep`" in violation.message


def test_guard_deeply_nested_on_both_sides_is_checked() -> None:
    """Nesting depth never hides a guard, even when both uses are nested."""
    nested_a = GuardOr(
        left=_g("x"),
        right=GuardGroup(operand=GuardAnd(left=_g("y"), right=GuardNot(operand=GuardGroup(operand=_g("hidden"))))),
    )
    nested_c = GuardNot(operand=GuardAnd(left=GuardOr(left=_g("z"), right=_g("hidden")), right=_g("w")))
    sm = _sm(
        {("A", "Go"): [_t("B", nested_a)], ("C", "Go"): [_t("B", nested_c)]},
        states={"A": "AData", "C": "CData"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert "`hidden`" in violation.message


def test_first_conflicting_leaf_is_reported() -> None:
    """Traversal stops at the first conflicting leaf, left to right."""
    sm = _sm(
        {
            ("A", "Go"): [_t("B", GuardAnd(left=_g("p"), right=_g("q")))],
            ("C", "Go"): [_t("B", GuardAnd(left=_g("q"), right=_g("p")))],
        },
        states={"A": "AData", "C": "CData"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert "`q`" in violation.message


def test_violation_carries_guard_span() -> None:
    span = SourceSpan(line=12, column=17)
    sm = _sm(
        {("A", "Go"): [_t("B", _g("ok"))], ("C", "Go"): [_t("B", _g("ok", span=span))]},
        states={"C": "CData"},
    )
    violation = validate_guards(sm)
    assert violation is not None
    assert violation.span == span


def test_violation_falls_back_to_transition_span() -> None:
    span = SourceSpan(line=2, column=1)
    conflicting = EventTransition(out_state="B", guard=_g("ok"), span=span)
    sm = _sm({("A", "Go"): [_t("B", _g("ok"))], ("C", "Go"): [conflicting]}, states={"C": "CData"})
    violation = validate_guards(sm)
    assert violation is not None
    assert violation.span == span
