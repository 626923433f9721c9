"""Groups that collect related metrics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TypeOfGroup(IntEnum):
    """The kind of source a group represents."""

    General = 0
    CanMessage = 1
    Device = 2


@dataclass(eq=False)
class MetricGroup:
    """A named, numbered group of metrics."""

    name: str = ""
    description: str = ""
    type: TypeOfGroup = TypeOfGroup.General
    identity: int = 0