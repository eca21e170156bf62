# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the validator configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".smlcheck.yaml"


class ValidatorConfigError(Exception):
    """Raised when a validator configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ValidatorConfig:
    """Options controlling a validation run.

    Attributes:
        fail_fast: Stop at the first violation. When disabled, every pass
            runs and each reports its first violation.
        normalize_types: Compare data types by normalized spelling rather
            than exact text.
    """

    fail_fast: bool = True
    normalize_types: bool = True


def load_validator_config(path: Path) -> ValidatorConfig:
    """Load and parse a validator configuration file.

    Args:
        path: Path to the ``.smlcheck.yaml`` file.

    Returns:
        A ValidatorConfig populated from the file. Omitted keys keep their
        defaults.

    Raises:
        ValidatorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ValidatorConfigError(f"Validator config file not found: {path}") from None
    except OSError as exc:
        raise ValidatorConfigError(f"Cannot read validator config file: {exc}") from exc

    return _parse_validator_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = {
    "fail-fast": "fail_fast",
    "normalize-types": "normalize_types",
}


def _parse_validator_config(text: str, source_label: str = "<string>") -> ValidatorConfig:
    """Parse validator config YAML text into a ValidatorConfig.

    Raises:
        ValidatorConfigError: If the YAML is invalid, a key is unknown, or a
            value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValidatorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    # An empty document means "all defaults".
    if data is None:
        return ValidatorConfig()

    if not isinstance(data, dict):
        raise ValidatorConfigError(f"{source_label}: validator config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ValidatorConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    options: dict[str, bool] = {}
    for key, attr in _KNOWN_KEYS.items():
        if key in data:
            options[attr] = _require_bool(data, key, source_label)

    return ValidatorConfig(**options)


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    """Extract a boolean field from a mapping, raising ValidatorConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, bool):
        raise ValidatorConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
