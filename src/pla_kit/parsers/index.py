# src/pla_kit/parsers/index.py

import logging
from collections.abc import Mapping, Sequence

from .models import Entry

logger = logging.getLogger(__name__)


class EntryIndex:
    """Read-only map from entry id to its position in the entry list.

    Duplicate ids resolve to the last entry carrying that id.
    """

    def __init__(self, positions: Mapping[int, int]) -> None:
        self._positions: dict[int, int] = dict(positions)

    @classmethod
    def build(cls, entries: Sequence[Entry]) -> "EntryIndex":
        positions: dict[int, int] = {}
        for position, entry in enumerate(entries):
            if entry.id in positions:
                logger.warning(
                    "Duplicate entry id %d: position %d replaces %d in the index",
                    entry.id,
                    position,
                    positions[entry.id],
                )
            positions[entry.id] = position
        return cls(positions)

    def get(self, entry_id: int) -> int | None:
        return self._positions.get(entry_id)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)
