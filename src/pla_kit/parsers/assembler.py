# src/pla_kit/parsers/assembler.py

import logging
from collections import defaultdict
from collections.abc import Iterable

from .command import CommandKind
from .lines import HierarchicalLine, parse_entry_header
from .models import Entry, SubRecord

logger = logging.getLogger(__name__)


def group_by_parent(sub_records: Iterable[SubRecord]) -> dict[int, list[SubRecord]]:
    """Bucket sub-records by owning entry id, keeping file order per bucket."""
    groups: defaultdict[int, list[SubRecord]] = defaultdict(list)
    for record in sub_records:
        groups[record.parent_id].append(record)
    return dict(groups)


def assemble_entries(
    hierarchy: Iterable[HierarchicalLine],
    sub_records: Iterable[SubRecord],
) -> list[Entry]:
    """Build one Entry per header line, in header order.

    Every sub-record whose parent_id equals the entry id is attached, so two
    headers sharing an id both receive all of that id's sub-records.
    """
    groups = group_by_parent(sub_records)
    entries: list[Entry] = []

    for line in hierarchy:
        if line.command is not CommandKind.ENTRY:
            continue
        entry_id, description = parse_entry_header(line.text, line.line_number)
        children = groups.get(entry_id)
        entries.append(
            Entry(
                id=entry_id,
                description=description,
                children=tuple(children) if children else None,
            )
        )
        logger.debug(
            "Assembled entry %d with %d sub-records",
            entry_id,
            len(children) if children else 0,
        )

    return entries
