"""Operation — the fixed identity of one mock client method."""

from typing import TypeAlias

from pydantic import BaseModel, Field


class CannedField(BaseModel, frozen=True):
    """Notification detail read from a canned-result field at dispatch time."""

    name: str = Field(min_length=1)


DetailSource: TypeAlias = str | CannedField


class Operation(BaseModel, frozen=True):
    """Immutable descriptor of one SDK operation.

    ``details`` maps each notification key to its source: a parameter name
    of the decorated method, or a ``CannedField`` on the client's results.
    """

    name: str = Field(min_length=1)
    event_id: int = Field(ge=0)
    trace_entry: int = Field(ge=0)
    trace_exit: int = Field(ge=0)
    details: dict[str, DetailSource] = {}
