# src/pla_kit/errors.py

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminant for every way a PLA source can fail to parse."""

    MALFORMED_ID = "malformed_id"
    ORPHAN_COMMAND = "orphan_command"
    INVALID_DATE = "invalid_date"
    INVALID_HOUR = "invalid_hour"
    INVALID_DURATION = "invalid_duration"
    INVALID_DEPENDENCY = "invalid_dependency"
    INVALID_CHILD = "invalid_child"
    INVALID_RESOURCE = "invalid_resource"


class PlaParseError(ValueError):
    """A PLA source could not be parsed.

    The first error aborts the whole parse; no partial result is produced.
    """

    def __init__(
        self,
        *,
        kind: ErrorKind,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        rendered = f"{self.kind.value}: {self.message}"
        if self.line_number is not None:
            rendered += f" (line {self.line_number}: {self.line!r})"
        return rendered
