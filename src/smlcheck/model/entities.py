# Copyright 2026 smlcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""States, events, and transitions of a parsed state machine."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from smlcheck.model.guards import AsyncIdent, GuardExpression, SourceSpan

# ###############
# Public Interface
# ###############


class EventTransition(BaseModel):
    """One guarded alternative for a (state, event) pair."""

    model_config = ConfigDict(frozen=True)

    out_state: str
    guard: GuardExpression | None = None
    action: AsyncIdent | None = None
    span: SourceSpan | None = None


class EventMapping(BaseModel):
    """All transitions declared for one (state, event) pair, in declaration order.

    The order of ``transitions`` is the runtime dispatch order: the first
    transition whose guard holds is taken.
    """

    model_config = ConfigDict(frozen=True)

    in_state: str
    event: str
    transitions: list[EventTransition] = _Field(default_factory=list)


class DataTypes(BaseModel):
    """Data types carried by states or events, keyed by state or event name.

    Names without an entry carry no data.
    """

    model_config = ConfigDict(frozen=True)

    data_types: dict[str, str] = _Field(default_factory=dict)


class ParsedStateMachine(BaseModel):
    """The complete parsed model of a state machine definition.

    Attributes:
        states_events_mapping: Source state name to event name to the bundle
            of transitions declared for that pair.
        state_data: Data types of states.
        event_data: Data types of events.
    """

    model_config = ConfigDict(frozen=True)

    states_events_mapping: dict[str, dict[str, EventMapping]] = _Field(default_factory=dict)
    state_data: DataTypes = _Field(default_factory=DataTypes)
    event_data: DataTypes = _Field(default_factory=DataTypes)

    def event_mappings(self) -> Iterator[tuple[str, str, EventMapping]]:
        """Yield ``(in_state, event, mapping)`` for every declared pair, in declaration order."""
        for in_state, by_event in self.states_events_mapping.items():
            for event, mapping in by_event.items():
                yield in_state, event, mapping
