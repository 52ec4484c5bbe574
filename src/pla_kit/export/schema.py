# src/pla_kit/export/schema.py

"""Serialized form of parsed PLA entries.

This is what a renderer reads. Every sub-record carries a ``kind`` equal to
its PLA keyword, so the children list is a discriminated union.
"""

import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from pla_kit.parsers._numbers import U32_MAX

U32 = Annotated[int, Field(ge=0, le=U32_MAX)]


class ExportModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class StartModel(ExportModel):
    kind: Literal["start"] = "start"
    parent_id: U32
    date: datetime.date
    hour: int = Field(default=0, ge=0, le=23)


class DurationModel(ExportModel):
    kind: Literal["duration"] = "duration"
    parent_id: U32
    length: U32


class DependencyModel(ExportModel):
    kind: Literal["dep"] = "dep"
    parent_id: U32
    dependency_id: U32


class ChildModel(ExportModel):
    kind: Literal["child"] = "child"
    parent_id: U32
    child_id: U32


class ResourceModel(ExportModel):
    kind: Literal["res"] = "res"
    parent_id: U32
    name: str


SubRecordModel = Annotated[
    Union[StartModel, DurationModel, DependencyModel, ChildModel, ResourceModel],
    Field(discriminator="kind"),
]


class EntryModel(ExportModel):
    id: U32
    description: str
    children: list[SubRecordModel] | None = None


class PlaDocument(ExportModel):
    source: str | None = None
    entries: list[EntryModel] = Field(default_factory=list)
