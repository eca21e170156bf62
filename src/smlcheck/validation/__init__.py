# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for parsed state machines (signatures, reachability)."""

from smlcheck.validation.actions import validate_actions
from smlcheck.validation.checks import (
    StateMachineValidationError,
    ValidationResult,
    check,
    validate,
)
from smlcheck.validation.guards import validate_guards
from smlcheck.validation.reachability import validate_reachability
from smlcheck.validation.signature import FunctionSignature, normalize_type
from smlcheck.validation.violations import Violation, ViolationKind

__all__ = [
    "FunctionSignature",
    "StateMachineValidationError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "check",
    "normalize_type",
    "validate",
    "validate_actions",
    "validate_guards",
    "validate_reachability",
]
