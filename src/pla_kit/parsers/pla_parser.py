# src/pla_kit/parsers/pla_parser.py

import copy
import logging
from collections.abc import Iterator
from pathlib import Path
from time import monotonic

from pla_kit.errors import PlaParseError
from pla_kit.observability import names
from pla_kit.observability.base import MetricsHook, NoOpMetricsHook

from .assembler import assemble_entries
from .config import ParserConfig
from .index import EntryIndex
from .lines import LineKind, build_hierarchy, classify_source
from .models import Entry
from .sub_records import parse_sub_records

logger = logging.getLogger(__name__)


class PlaParser:
    """
    Parsed PLA source.
    - Entries keep the order of their header lines
    - Lookup by id goes through a read-only index
    - Never mutated after construction
    """

    def __init__(self, entries: list[Entry]) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._index = EntryIndex.build(self._entries)

    @classmethod
    def parse(
        cls,
        text: str,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "PlaParser":
        """Parse PLA text.

        Raises:
            PlaParseError: On the first malformed line; nothing is returned.
        """
        start = monotonic()
        try:
            raw_lines = classify_source(text)
            hierarchy = build_hierarchy(raw_lines)
            sub_records = parse_sub_records(hierarchy, config)
            entries = assemble_entries(hierarchy, sub_records)
        except PlaParseError as exc:
            metrics_hook.increment(
                names.PLA_PARSE_ERRORS_TOTAL, labels={"kind": exc.kind.value}
            )
            raise

        parser = cls(entries)

        elapsed_ms = 1000 * (monotonic() - start)
        ignored = sum(1 for line in raw_lines if line.kind is LineKind.UNKNOWN)
        metrics_hook.record_latency(names.PLA_PARSE_DURATION, elapsed_ms)
        metrics_hook.increment(names.PLA_PARSES_TOTAL)
        metrics_hook.increment(names.PLA_LINES_IGNORED, ignored)
        metrics_hook.record_gauge(names.PLA_ENTRIES_PARSED, len(entries))
        for record in sub_records:
            metrics_hook.increment(
                names.PLA_SUB_RECORDS_PARSED, labels={"command": str(record.command)}
            )

        logger.info(
            "Parsed %d entries and %d sub-records (%d lines ignored)",
            len(entries),
            len(sub_records),
            ignored,
        )
        return parser

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "PlaParser":
        logger.debug("Reading PLA source from %s", path)
        text = Path(path).read_text(encoding=config.encoding)
        return cls.parse(text, config=config, metrics_hook=metrics_hook)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    def get_entry_by_id(self, entry_id: int) -> Entry | None:
        """Return a deep copy of the entry with this id, or None."""
        position = self._index.get(entry_id)
        if position is None:
            logger.debug("Entry not found: id=%s", entry_id)
            return None
        return copy.deepcopy(self._entries[position])

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)
