# src/pla_kit/parsers/sub_records.py

import logging
import re
from collections.abc import Callable
from datetime import datetime

from pla_kit.errors import ErrorKind, PlaParseError

from ._numbers import parse_u32
from .command import CommandKind
from .config import MAX_HOUR, ParserConfig
from .lines import HierarchicalLine
from .models import Child, Dependency, Duration, Resource, Start, SubRecord

logger = logging.getLogger(__name__)

_RESOURCE = re.compile(r"^res\s+(.*)$")


def _tokens(command_text: str) -> list[str]:
    # Single-space split: consecutive spaces produce empty tokens
    return command_text.split(" ")


def _token(tokens: list[str], position: int) -> str | None:
    return tokens[position] if position < len(tokens) else None


def parse_start(
    parent_id: int,
    command_text: str,
    *,
    date_format: str = "%Y-%m-%d",
    default_hour: int = 0,
) -> Start:
    tokens = _tokens(command_text)

    raw_date = _token(tokens, 1)
    if raw_date is None:
        raise PlaParseError(
            kind=ErrorKind.INVALID_DATE, message="start requires a date"
        )
    try:
        start_date = datetime.strptime(raw_date, date_format).date()
    except ValueError:
        raise PlaParseError(
            kind=ErrorKind.INVALID_DATE,
            message=f"cannot parse date {raw_date!r} with format {date_format!r}",
        ) from None

    raw_hour = _token(tokens, 2)
    if raw_hour is None:
        hour = default_hour
    else:
        parsed_hour = parse_u32(raw_hour)
        if parsed_hour is None or parsed_hour > MAX_HOUR:
            raise PlaParseError(
                kind=ErrorKind.INVALID_HOUR,
                message=f"hour must be an integer between 0 and {MAX_HOUR}, got {raw_hour!r}",
            )
        hour = parsed_hour

    return Start(parent_id=parent_id, date=start_date, hour=hour)


def _single_number(command_text: str, kind: ErrorKind, what: str) -> int:
    raw = _token(_tokens(command_text), 1)
    value = parse_u32(raw)
    if value is None:
        raise PlaParseError(
            kind=kind, message=f"{what} must be a non-negative integer, got {raw!r}"
        )
    return value


def parse_duration(parent_id: int, command_text: str) -> Duration:
    length = _single_number(command_text, ErrorKind.INVALID_DURATION, "duration")
    return Duration(parent_id=parent_id, length=length)


def parse_dependency(parent_id: int, command_text: str) -> Dependency:
    dependency_id = _single_number(
        command_text, ErrorKind.INVALID_DEPENDENCY, "dependency id"
    )
    return Dependency(parent_id=parent_id, dependency_id=dependency_id)


def parse_child(parent_id: int, command_text: str) -> Child:
    child_id = _single_number(command_text, ErrorKind.INVALID_CHILD, "child id")
    return Child(parent_id=parent_id, child_id=child_id)


def parse_resource(parent_id: int, command_text: str) -> Resource:
    match = _RESOURCE.match(command_text)
    if match is None:
        raise PlaParseError(
            kind=ErrorKind.INVALID_RESOURCE, message="res requires a resource name"
        )
    return Resource(parent_id=parent_id, name=match.group(1))


SubRecordParser = Callable[[int, str], SubRecord]


def _parsers(config: ParserConfig) -> dict[CommandKind, SubRecordParser]:
    def start(parent_id: int, command_text: str) -> Start:
        return parse_start(
            parent_id,
            command_text,
            date_format=config.date_format,
            default_hour=config.default_hour,
        )

    return {
        CommandKind.START: start,
        CommandKind.DURATION: parse_duration,
        CommandKind.DEPENDENCY: parse_dependency,
        CommandKind.CHILD: parse_child,
        CommandKind.RESOURCE: parse_resource,
    }


def parse_sub_record(
    line: HierarchicalLine, config: ParserConfig = ParserConfig()
) -> SubRecord:
    """Turn one command line into its typed sub-record.

    Raises:
        PlaParseError: ORPHAN_COMMAND when no entry header preceded the line,
            or the variant-specific error for bad arguments. The error carries
            the line number and text.
        ValueError: If the line is not a sub-record command (entry headers
            and unknown lines never reach this point).
    """
    return _parse_with(line, _parsers(config))


def _parse_with(
    line: HierarchicalLine, parsers: dict[CommandKind, SubRecordParser]
) -> SubRecord:
    parser = parsers.get(line.command)
    if parser is None:
        raise ValueError(f"Not a sub-record command: {line.command}")

    if line.parent_id is None:
        logger.error("Command on line %d has no owning entry", line.line_number)
        raise PlaParseError(
            kind=ErrorKind.ORPHAN_COMMAND,
            message=f"{line.command} command appears before any entry header",
            line_number=line.line_number,
            line=line.text,
        )

    try:
        return parser(line.parent_id, line.text)
    except PlaParseError as exc:
        logger.error("Line %d: %s", line.line_number, exc.message)
        raise PlaParseError(
            kind=exc.kind,
            message=exc.message,
            line_number=line.line_number,
            line=line.text,
        ) from None


def parse_sub_records(
    hierarchy: list[HierarchicalLine], config: ParserConfig = ParserConfig()
) -> list[SubRecord]:
    """Parse every non-header line, stopping at the first failure."""
    parsers = _parsers(config)
    return [
        _parse_with(line, parsers)
        for line in hierarchy
        if line.command is not CommandKind.ENTRY
    ]
