# src/pla_kit/parsers/command.py

from enum import Enum


class CommandKind(str, Enum):
    """Closed set of PLA command keywords."""

    CHILD = "child"
    DEPENDENCY = "dep"
    DURATION = "duration"
    ENTRY = "entry"
    RESOURCE = "res"
    START = "start"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "CommandKind":
        """Map the first token of a line to its command; never raises."""
        kind = _KEYWORDS.get(token)
        return kind if kind is not None else cls.UNKNOWN


# "unknown" is a classification result, not a keyword
_KEYWORDS: dict[str, CommandKind] = {
    kind.value: kind for kind in CommandKind if kind is not CommandKind.UNKNOWN
}
