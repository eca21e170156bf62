# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency of action call signatures across all transitions."""

from __future__ import annotations

import logging

from smlcheck.model.entities import ParsedStateMachine
from smlcheck.validation.signature import FunctionSignature
from smlcheck.validation.violations import Violation, ViolationKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def validate_actions(sm: ParsedStateMachine, *, normalize_types: bool = True) -> Violation | None:
    """Check that every reuse of an action has the same call signature.

    An action's signature at a transition is built from the data type of the
    source state, the data type of the event, and the data type of the target
    state (its result), plus the action's synchrony flag. The first site of
    each action fixes its signature; any later site that differs is reported.

    Args:
        sm: The parsed state machine.
        normalize_types: Compare data types by their normalized spelling
            (see :func:`~smlcheck.validation.signature.normalize_type`).

    Returns:
        A violation naming the first inconsistently reused action, or
        ``None`` if all actions are used consistently.
    """
    state_types = sm.state_data.data_types
    event_types = sm.event_data.data_types
    seen: dict[str, FunctionSignature] = {}

    for in_state, event, mapping in sm.event_mappings():
        in_state_data = state_types.get(in_state)
        event_data = event_types.get(event)
        for transition in mapping.transitions:
            action = transition.action
            if action is None:
                continue
            signature = FunctionSignature.new(
                in_state_data,
                event_data,
                state_types.get(transition.out_state),
                action.is_async,
                normalize=normalize_types,
            )
            recorded = seen.setdefault(action.ident, signature)
            if recorded != signature:
                logger.debug("action %r: %s conflicts with %s", action.ident, signature, recorded)
                return Violation(
                    kind=ViolationKind.INCONSISTENT_ACTION_SIGNATURE,
                    message=(
                        f"Action `{action.ident}` can only be reused when all input states, "
                        "events, and output states have the same data"
                    ),
                    span=action.span or transition.span,
                )

    return None
