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
from .serialization import (
    ExportFormat,
    dump_document,
    dump_json,
    dump_yaml,
    load_document,
    to_document,
    to_entries,
)

__all__ = [
    # Schema
    "PlaDocument",
    "EntryModel",
    "SubRecordModel",
    "StartModel",
    "DurationModel",
    "DependencyModel",
    "ChildModel",
    "ResourceModel",
    # Serialization
    "ExportFormat",
    "to_document",
    "to_entries",
    "dump_document",
    "dump_json",
    "dump_yaml",
    "load_document",
]
