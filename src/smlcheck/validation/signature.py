# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Call signatures of actions and guards at a single call site."""

from __future__ import annotations

import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class FunctionSignature:
    """The shape of one invocation of an action or guard.

    Attributes:
        arguments: Input data types: the source state's, then the event's,
            each only if present.
        result: Output data type (the target state's), if any. Always
            ``None`` for guards.
        is_async: Whether the callable is invoked asynchronously.
    """

    arguments: tuple[str, ...]
    result: str | None
    is_async: bool

    @classmethod
    def new(
        cls,
        input_data: str | None,
        event_data: str | None,
        output_data: str | None,
        is_async: bool,
        *,
        normalize: bool = True,
    ) -> FunctionSignature:
        """Build the signature of an action call site.

        With *normalize* set, each type text is passed through
        :func:`normalize_type` first.
        """
        prepare = normalize_type if normalize else _identity
        arguments = tuple(prepare(t) for t in (input_data, event_data) if t is not None)
        result = prepare(output_data) if output_data is not None else None
        return cls(arguments=arguments, result=result, is_async=is_async)

    @classmethod
    def new_guard(
        cls,
        input_state: str | None,
        event: str | None,
        is_async: bool,
        *,
        normalize: bool = True,
    ) -> FunctionSignature:
        """Build the signature of a guard call site."""
        # Guards never have output data.
        return cls.new(input_state, event, None, is_async, normalize=normalize)


def normalize_type(type_text: str) -> str:
    """Return a canonical spelling of a data type expression.

    Whitespace is collapsed to single spaces and dropped entirely next to
    punctuation, so ``Vec< u8 >`` and ``Vec<u8>`` compare equal while
    ``dyn Trait`` keeps its separating space.
    """
    collapsed = " ".join(type_text.split())
    return _SPACE_AROUND_PUNCT.sub("", collapsed)


# ################
# Implementation
# ################

# A space with a non-word character on at least one side.
_SPACE_AROUND_PUNCT = re.compile(r"(?<=\W) | (?=\W)")


def _identity(type_text: str) -> str:
    return type_text
