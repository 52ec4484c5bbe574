from .command import CommandKind
from .config import ParserConfig
from .index import EntryIndex
from .models import (
    SUB_RECORD_TYPES,
    Child,
    Dependency,
    Duration,
    Entry,
    Resource,
    Start,
    SubRecord,
)
from .pla_parser import PlaParser

__all__ = [
    "CommandKind",
    "EntryIndex",
    "ParserConfig",
    "PlaParser",
    # Records
    "Entry",
    "SubRecord",
    "SUB_RECORD_TYPES",
    "Start",
    "Duration",
    "Dependency",
    "Child",
    "Resource",
]
