# src/pla_kit/parsers/config.py

from dataclasses import dataclass

MAX_HOUR = 23


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for PlaParser.

    Immutable. Explicit. No magic defaults from environment.

    Raises:
        ValueError: If default_hour is outside 0..MAX_HOUR.
    """

    date_format: str = "%Y-%m-%d"
    default_hour: int = 0  # Used when a start line omits the hour
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not 0 <= self.default_hour <= MAX_HOUR:
            raise ValueError(
                f"default_hour must be between 0 and {MAX_HOUR}, got {self.default_hour}"
            )
