# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency of guard call signatures across all guard expressions."""

from __future__ import annotations

import logging
from dataclasses import replace

from smlcheck.model.entities import ParsedStateMachine
from smlcheck.model.guards import AsyncIdent, visit_guards
from smlcheck.validation.signature import FunctionSignature
from smlcheck.validation.violations import Violation, ViolationKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def validate_guards(sm: ParsedStateMachine, *, normalize_types: bool = True) -> Violation | None:
    """Check that every reuse of a guard has the same call signature.

    Every guard predicate inside every guard expression is checked, however
    deeply it is nested. A guard's signature is built from the data type of
    the source state and the data type of the event; guards never produce
    output data.

    Args:
        sm: The parsed state machine.
        normalize_types: Compare data types by their normalized spelling.

    Returns:
        A violation naming the first inconsistently reused guard, or ``None``
        if all guards are used consistently.
    """
    state_types = sm.state_data.data_types
    event_types = sm.event_data.data_types
    seen: dict[str, FunctionSignature] = {}

    for in_state, event, mapping in sm.event_mappings():
        in_state_data = state_types.get(in_state)
        event_data = event_types.get(event)

        def _check_guard(guard: AsyncIdent) -> Violation | None:
            signature = FunctionSignature.new_guard(
                in_state_data, event_data, guard.is_async, normalize=normalize_types
            )
            recorded = seen.setdefault(guard.ident, signature)
            if recorded == signature:
                return None
            logger.debug("guard %r: %s conflicts with %s", guard.ident, signature, recorded)
            return Violation(
                kind=ViolationKind.INCONSISTENT_GUARD_SIGNATURE,
                message=(
                    f"Guard `{guard.ident}` can only be reused when all input states "
                    "and events have the same data"
                ),
                span=guard.span,
            )

        for transition in mapping.transitions:
            if transition.guard is None:
                continue
            violation = visit_guards(transition.guard, _check_guard)
            if violation is not None:
                if violation.span is None and transition.span is not None:
                    violation = replace(violation, span=transition.span)
                return violation

    return None
