# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level validation of a parsed state machine.

The passes run in a fixed order: action signatures, guard signatures, then
reachability. The order decides which violation is reported when a model has
several defects, so it is part of the contract.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

from smlcheck.config.loader import ValidatorConfig
from smlcheck.model.entities import ParsedStateMachine
from smlcheck.validation.actions import validate_actions
from smlcheck.validation.guards import validate_guards
from smlcheck.validation.reachability import validate_reachability
from smlcheck.validation.violations import Violation

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class StateMachineValidationError(Exception):
    """Raised by :func:`check` when a state machine definition is inconsistent.

    Attributes:
        violations: The violations found, in pass order. Never empty.
    """

    def __init__(self, violations: list[Violation]) -> None:
        super().__init__("\n".join(str(v) for v in violations))
        self.violations = violations


@dataclass
class ValidationResult:
    """Result of validating a state machine.

    Attributes:
        violations: Violations found, in pass order. Holds at most one entry
            when validation runs fail-fast.
    """

    violations: list[Violation] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any violation was found."""
        return len(self.violations) > 0

    @property
    def first(self) -> Violation | None:
        """Return the first violation found, or None for a valid model."""
        return self.violations[0] if self.violations else None


def validate(sm: ParsedStateMachine, config: ValidatorConfig | None = None) -> ValidationResult:
    """Run all consistency checks on a parsed state machine.

    Checks performed, in order:

    1. **Action signatures**: every reuse of an action sees the same source
       state, event, and target state data types and the same synchrony.
    2. **Guard signatures**: every reuse of a guard, at any nesting depth in
       a guard expression, sees the same source state and event data types
       and the same synchrony.
    3. **Reachability**: for each (state, event) pair with several
       transitions, no guarded transition follows an unguarded one and at
       most one unguarded transition exists.

    Args:
        sm: The state machine to validate. It is never modified.
        config: Validation options. Defaults to fail-fast with normalized
            type comparison.

    Returns:
        A :class:`ValidationResult`. An empty result means the model is
        consistent and safe to hand to code generation.
    """
    config = config or ValidatorConfig()
    violations: list[Violation] = []

    for name, run_pass in _passes(config):
        logger.debug("running %s check", name)
        violation = run_pass(sm)
        if violation is None:
            continue
        logger.info("%s check failed: %s", name, violation)
        violations.append(violation)
        if config.fail_fast:
            break

    return ValidationResult(violations=violations)


def check(sm: ParsedStateMachine, config: ValidatorConfig | None = None) -> None:
    """Validate *sm* and raise if it is inconsistent.

    Raises:
        StateMachineValidationError: If any check fails.
    """
    result = validate(sm, config)
    if result.has_errors:
        raise StateMachineValidationError(result.violations)


# ################
# Implementation
# ################


def _passes(config: ValidatorConfig) -> list[tuple[str, Callable[[ParsedStateMachine], Violation | None]]]:
    """Return the validation passes in their fixed run order."""
    return [
        ("action signature", partial(validate_actions, normalize_types=config.normalize_types)),
        ("guard signature", partial(validate_guards, normalize_types=config.normalize_types)),
        ("reachability", validate_reachability),
    ]
