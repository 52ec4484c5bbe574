import pytest

from pla_kit.parsers.command import CommandKind

KEYWORDS = [
    ("child", CommandKind.CHILD),
    ("dep", CommandKind.DEPENDENCY),
    ("duration", CommandKind.DURATION),
    ("entry", CommandKind.ENTRY),
    ("res", CommandKind.RESOURCE),
    ("start", CommandKind.START),
]


@pytest.mark.parametrize(("token", "kind"), KEYWORDS)
def test_from_token_maps_keywords(token: str, kind: CommandKind) -> None:
    assert CommandKind.from_token(token) is kind


@pytest.mark.parametrize(("token", "kind"), KEYWORDS)
def test_str_is_the_keyword(token: str, kind: CommandKind) -> None:
    assert str(kind) == token


def test_unknown_str() -> None:
    assert str(CommandKind.UNKNOWN) == "unknown"


@pytest.mark.parametrize("token", ["wakka", "Start", "START", "", "unknown", "color"])
def test_unrecognized_tokens_are_unknown(token: str) -> None:
    assert CommandKind.from_token(token) is CommandKind.UNKNOWN
