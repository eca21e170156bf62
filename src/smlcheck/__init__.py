# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""smlcheck: static consistency validation for declarative state machines."""

from smlcheck.validation import StateMachineValidationError, ValidationResult, Violation, check, validate

__all__ = [
    "StateMachineValidationError",
    "ValidationResult",
    "Violation",
    "check",
    "validate",
]
