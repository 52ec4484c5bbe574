# src/pla_kit/export/serialization.py

import json
import logging
from collections.abc import Iterable
from typing import Literal

import yaml

from pla_kit.parsers.models import (
    Child,
    Dependency,
    Duration,
    Entry,
    Resource,
    Start,
    SubRecord,
)

from .schema import (
    ChildModel,
    DependencyModel,
    DurationModel,
    EntryModel,
    PlaDocument,
    ResourceModel,
    StartModel,
    SubRecordModel,
)

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "yaml"]


def record_to_model(record: SubRecord) -> SubRecordModel:
    if isinstance(record, Start):
        return StartModel(parent_id=record.parent_id, date=record.date, hour=record.hour)
    if isinstance(record, Duration):
        return DurationModel(parent_id=record.parent_id, length=record.length)
    if isinstance(record, Dependency):
        return DependencyModel(
            parent_id=record.parent_id, dependency_id=record.dependency_id
        )
    if isinstance(record, Child):
        return ChildModel(parent_id=record.parent_id, child_id=record.child_id)
    if isinstance(record, Resource):
        return ResourceModel(parent_id=record.parent_id, name=record.name)
    raise TypeError(f"Unsupported sub-record: {type(record).__name__}")


def model_to_record(model: SubRecordModel) -> SubRecord:
    if isinstance(model, StartModel):
        return Start(parent_id=model.parent_id, date=model.date, hour=model.hour)
    if isinstance(model, DurationModel):
        return Duration(parent_id=model.parent_id, length=model.length)
    if isinstance(model, DependencyModel):
        return Dependency(parent_id=model.parent_id, dependency_id=model.dependency_id)
    if isinstance(model, ChildModel):
        return Child(parent_id=model.parent_id, child_id=model.child_id)
    if isinstance(model, ResourceModel):
        return Resource(parent_id=model.parent_id, name=model.name)
    raise TypeError(f"Unsupported sub-record model: {type(model).__name__}")


def to_document(entries: Iterable[Entry], source: str | None = None) -> PlaDocument:
    return PlaDocument(
        source=source,
        entries=[
            EntryModel(
                id=entry.id,
                description=entry.description,
                children=(
                    [record_to_model(c) for c in entry.children]
                    if entry.children is not None
                    else None
                ),
            )
            for entry in entries
        ],
    )


def to_entries(document: PlaDocument) -> list[Entry]:
    return [
        Entry(
            id=model.id,
            description=model.description,
            # An exported empty list still means "no children"
            children=(
                tuple(model_to_record(c) for c in model.children)
                if model.children
                else None
            ),
        )
        for model in document.entries
    ]


def dump_json(document: PlaDocument) -> str:
    return document.model_dump_json(indent=2)


def dump_yaml(document: PlaDocument) -> str:
    return yaml.safe_dump(
        document.model_dump(mode="json"), sort_keys=False, allow_unicode=True
    )


def dump_document(document: PlaDocument, fmt: ExportFormat = "json") -> str:
    if fmt == "json":
        return dump_json(document)
    if fmt == "yaml":
        return dump_yaml(document)
    raise ValueError(f"Unknown export format: {fmt}")


def load_document(text: str, fmt: ExportFormat = "json") -> PlaDocument:
    """Validate a previously exported document.

    Raises:
        pydantic.ValidationError: If the payload does not match the schema.
        ValueError: If fmt is unknown or the payload is not valid JSON/YAML.
    """
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON export: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML export: {exc}") from exc
    else:
        raise ValueError(f"Unknown export format: {fmt}")

    document = PlaDocument.model_validate(data)
    logger.debug("Loaded export with %d entries", len(document.entries))
    return document
