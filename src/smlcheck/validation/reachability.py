# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Detection of transitions that can never be taken because of guard ordering.

Transitions for one (state, event) pair are dispatched top to bottom and the
first one whose guard holds wins. An unguarded transition therefore acts as
the final ``else`` arm: anything declared after it is dead, and a second
unguarded transition makes the pair ambiguous.
"""

from __future__ import annotations

import logging

from smlcheck.model.entities import ParsedStateMachine
from smlcheck.model.guards import render_guard
from smlcheck.validation.violations import Violation, ViolationKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def validate_reachability(sm: ParsedStateMachine) -> Violation | None:
    """Check that no transition is shadowed by an earlier unguarded one.

    Only pairs with more than one transition are inspected. Within such a
    pair, a guarded transition may not follow an unguarded one, and at most
    one unguarded transition may exist.

    Returns:
        A violation naming the first offending state/event pair, or ``None``.
    """
    for in_state, event, mapping in sm.event_mappings():
        if len(mapping.transitions) <= 1:
            continue
        unguarded_count = 0
        for transition in mapping.transitions:
            if transition.guard is not None:
                if unguarded_count > 0:
                    logger.debug("%s + %s: guarded transition after unguarded", in_state, event)
                    return Violation(
                        kind=ViolationKind.UNREACHABLE_TRANSITION,
                        message=(
                            f"{in_state} + {event}: [{render_guard(transition.guard)}] : guarded "
                            "transition is unreachable because it follows an unguarded transition, "
                            "which handles all cases"
                        ),
                        span=transition.span,
                    )
            else:
                unguarded_count += 1
                if unguarded_count > 1:
                    return Violation(
                        kind=ViolationKind.DUPLICATE_TRANSITION,
                        message=(
                            f"{in_state} + {event}: State and event combination specified "
                            "multiple times, remove duplicates."
                        ),
                        span=transition.span,
                    )

    return None
