# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsed state machine model (states, events, transitions, guards)."""

from smlcheck.model.entities import (
    DataTypes,
    EventMapping,
    EventTransition,
    ParsedStateMachine,
)
from smlcheck.model.guards import (
    AsyncIdent,
    GuardAnd,
    GuardExpression,
    GuardGroup,
    GuardNot,
    GuardOr,
    GuardRef,
    SourceSpan,
    iter_guard_idents,
    render_guard,
    visit_guards,
)

__all__ = [
    # Guard expressions
    "SourceSpan",
    "AsyncIdent",
    "GuardRef",
    "GuardNot",
    "GuardGroup",
    "GuardAnd",
    "GuardOr",
    "GuardExpression",
    "visit_guards",
    "iter_guard_idents",
    "render_guard",
    # Entities
    "EventTransition",
    "EventMapping",
    "DataTypes",
    "ParsedStateMachine",
]
