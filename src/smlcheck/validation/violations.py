# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Violation records produced by the validation passes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from smlcheck.model.guards import SourceSpan

# ###############
# Public Interface
# ###############


class ViolationKind(Enum):
    """The invariant a violation breaks."""

    INCONSISTENT_ACTION_SIGNATURE = "inconsistent-action-signature"
    INCONSISTENT_GUARD_SIGNATURE = "inconsistent-guard-signature"
    UNREACHABLE_TRANSITION = "unreachable-transition"
    DUPLICATE_TRANSITION = "duplicate-transition"


@dataclass(frozen=True)
class Violation:
    """A failed consistency invariant in a state machine definition.

    Attributes:
        kind: Which invariant failed.
        message: Human-readable description naming the offending action,
            guard, or state/event pair.
        span: Location of the offending reference or transition, or ``None``
            when the parser did not track one.
    """

    kind: ViolationKind
    message: str
    span: SourceSpan | None = None

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        return f"Line {self.span.line}, column {self.span.column}: {self.message}"
