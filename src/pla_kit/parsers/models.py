# src/pla_kit/parsers/models.py

import datetime
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .command import CommandKind


@dataclass(frozen=True)
class Start:
    """Scheduling origin of an entry."""

    command: ClassVar[CommandKind] = CommandKind.START

    parent_id: int
    date: datetime.date
    hour: int = 0


@dataclass(frozen=True)
class Duration:
    command: ClassVar[CommandKind] = CommandKind.DURATION

    parent_id: int
    length: int


@dataclass(frozen=True)
class Dependency:
    command: ClassVar[CommandKind] = CommandKind.DEPENDENCY

    parent_id: int
    dependency_id: int


@dataclass(frozen=True)
class Child:
    command: ClassVar[CommandKind] = CommandKind.CHILD

    parent_id: int
    child_id: int


@dataclass(frozen=True)
class Resource:
    command: ClassVar[CommandKind] = CommandKind.RESOURCE

    parent_id: int
    name: str


SubRecord = Union[Start, Duration, Dependency, Child, Resource]

SUB_RECORD_TYPES: tuple[type, ...] = (Start, Duration, Dependency, Child, Resource)


@dataclass(frozen=True)
class Entry:
    """A numbered PLA entry and the sub-records written beneath it.

    Equality only looks at the header fields (id, description).
    `children` is None when nothing was attached, never an empty tuple.
    """

    id: int
    description: str
    children: tuple[SubRecord, ...] | None = field(default=None, compare=False)

    def has_children(self) -> bool:
        return self.children is not None
