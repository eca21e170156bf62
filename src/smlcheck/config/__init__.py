# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validator configuration for smlcheck."""

from smlcheck.config.loader import (
    CONFIG_FILE_NAME,
    ValidatorConfig,
    ValidatorConfigError,
    load_validator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ValidatorConfig",
    "ValidatorConfigError",
    "load_validator_config",
]
