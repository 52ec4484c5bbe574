# src/pla_kit/parsers/lines.py

"""Line classification and parent association.

A PLA source is a flat sequence of lines. Entry headers look like
``[42] Some description`` and every command line below a header belongs
to it until the next header:

    [10000] Autumn's Early Arrival Blonde (Batch: 10000)
        start 2021-01-15 15
        duration 22

Sub-records never name their parent; ownership is purely positional.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pla_kit.errors import ErrorKind, PlaParseError

from ._numbers import parse_u32
from .command import CommandKind

logger = logging.getLogger(__name__)

ENTRY_HEADER = re.compile(r"^\[(\d*)\]\s*(.*)$")

# Only CR, LF and CRLF end a line
LINE_ENDING = re.compile(r"\r\n|\r|\n")


class LineKind(str, Enum):
    ENTRY = "entry"
    COMMAND = "command"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RawLine:
    """One non-blank, stripped source line and its classification."""

    kind: LineKind
    command: CommandKind
    text: str
    line_number: int


@dataclass(frozen=True)
class HierarchicalLine:
    """A classified line tagged with the id of its owning entry.

    parent_id is None for entry headers, and for command lines that appear
    before any header (those fail later as orphans).
    """

    command: CommandKind
    text: str
    parent_id: int | None
    line_number: int


def split_lines(text: str) -> list[str]:
    return LINE_ENDING.split(text)


def classify_line(line: str, line_number: int = 0) -> RawLine | None:
    """Classify a single line. Blank lines yield None."""
    text = line.strip()
    if not text:
        return None

    if ENTRY_HEADER.match(text):
        return RawLine(LineKind.ENTRY, CommandKind.ENTRY, text, line_number)

    command = CommandKind.from_token(text.split(maxsplit=1)[0])
    if command is CommandKind.UNKNOWN:
        return RawLine(LineKind.UNKNOWN, command, text, line_number)
    return RawLine(LineKind.COMMAND, command, text, line_number)


def classify_source(text: str) -> list[RawLine]:
    """Classify every line of a source, dropping blank ones.

    Unknown lines are kept here so callers can report them; the hierarchy
    builder skips them.
    """
    classified: list[RawLine] = []
    for line_number, line in enumerate(split_lines(text), start=1):
        raw = classify_line(line, line_number)
        if raw is None:
            continue
        if raw.kind is LineKind.UNKNOWN:
            logger.debug("Ignoring line %d: %r", line_number, raw.text)
        classified.append(raw)
    return classified


def parse_entry_header(text: str, line_number: int | None = None) -> tuple[int, str]:
    """Return (id, description) from an entry header line."""
    match = ENTRY_HEADER.match(text)
    entry_id = parse_u32(match.group(1)) if match else None
    if match is None or entry_id is None:
        raise PlaParseError(
            kind=ErrorKind.MALFORMED_ID,
            message="entry header must start with a numeric id in brackets",
            line_number=line_number,
            line=text,
        )
    return entry_id, match.group(2) or ""


class HierarchyBuilder:
    """Left-to-right fold tagging command lines with the current entry id."""

    def __init__(self) -> None:
        self.current_parent: int | None = None

    def feed(self, line: RawLine) -> HierarchicalLine | None:
        if line.kind is LineKind.UNKNOWN:
            return None

        if line.command is CommandKind.ENTRY:
            # A bare "entry" keyword has no bracketed id and fails here too
            entry_id, _ = parse_entry_header(line.text, line.line_number)
            self.current_parent = entry_id
            return HierarchicalLine(line.command, line.text, None, line.line_number)

        return HierarchicalLine(
            line.command, line.text, self.current_parent, line.line_number
        )


def build_hierarchy(lines: Iterable[RawLine]) -> list[HierarchicalLine]:
    builder = HierarchyBuilder()
    hierarchy: list[HierarchicalLine] = []
    for line in lines:
        tagged = builder.feed(line)
        if tagged is not None:
            hierarchy.append(tagged)
    return hierarchy
