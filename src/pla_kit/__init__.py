# Errors
from .errors import ErrorKind, PlaParseError

# Export
from .export import PlaDocument, dump_document, load_document, to_document

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    SUB_RECORD_TYPES,
    Child,
    CommandKind,
    Dependency,
    Duration,
    Entry,
    ParserConfig,
    PlaParser,
    Resource,
    Start,
    SubRecord,
)

__all__ = [
    # Errors
    "ErrorKind",
    "PlaParseError",
    # Export
    "PlaDocument",
    "dump_document",
    "load_document",
    "to_document",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CommandKind",
    "ParserConfig",
    "PlaParser",
    "Entry",
    "SubRecord",
    "SUB_RECORD_TYPES",
    "Start",
    "Duration",
    "Dependency",
    "Child",
    "Resource",
]
