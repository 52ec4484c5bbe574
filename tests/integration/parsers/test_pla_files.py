from datetime import date
from pathlib import Path

import pytest

from pla_kit.parsers.models import Child, Dependency, Duration, Entry, Resource, Start
from pla_kit.parsers.pla_parser import PlaParser

# --- Simple file ---


def test_simple_file_entries_have_children(parsed_simple: PlaParser) -> None:
    assert parsed_simple.get_entry_by_id(10000).has_children()
    assert parsed_simple.get_entry_by_id(122).has_children()


def test_simple_file_keeps_header_order(parsed_simple: PlaParser) -> None:
    assert [e.id for e in parsed_simple.entries] == [10000, 122]


def test_simple_file_children_in_file_order(parsed_simple: PlaParser) -> None:
    entry = parsed_simple.get_entry_by_id(10000)

    assert entry.children == (
        Start(parent_id=10000, date=date(2021, 1, 15), hour=15),
        Duration(parent_id=10000, length=22),
        Child(parent_id=10000, child_id=122),
    )


def test_simple_file_parses_resources(parsed_simple: PlaParser) -> None:
    entry = parsed_simple.get_entry_by_id(122)

    assert entry.children[-1] == Resource(parent_id=122, name="Brew kettle")


# --- Complicated file ---


def test_complicated_file_header_fields(parsed_complicated: PlaParser) -> None:
    assert parsed_complicated.get_entry_by_id(10000) == Entry(
        id=10000,
        description="Autumn's Early Arrival Blonde (Batch: 10000)",
    )


def test_complicated_file_unknown_id_is_none(parsed_complicated: PlaParser) -> None:
    assert parsed_complicated.get_entry_by_id(2018271) is None


def test_complicated_file_ignores_comments_and_unknown_commands(
    parsed_complicated: PlaParser,
) -> None:
    entry = parsed_complicated.get_entry_by_id(10000)

    assert [type(c) for c in entry.children] == [Child, Child, Child]


def test_complicated_file_description_skips_padding(
    parsed_complicated: PlaParser,
) -> None:
    assert parsed_complicated.get_entry_by_id(10003).description == "Packaging"


def test_complicated_file_dependencies(parsed_complicated: PlaParser) -> None:
    entry = parsed_complicated.get_entry_by_id(10002)

    assert Dependency(parent_id=10002, dependency_id=10001) in entry.children


def test_complicated_file_start_without_hour(parsed_complicated: PlaParser) -> None:
    entry = parsed_complicated.get_entry_by_id(20000)

    assert entry.children[0] == Start(parent_id=20000, date=date(2021, 11, 1), hour=0)


def test_complicated_file_entry_without_children(
    parsed_complicated: PlaParser,
) -> None:
    entry = parsed_complicated.get_entry_by_id(30000)

    assert not entry.has_children()
    assert entry.children is None


def test_every_sub_record_points_at_its_entry(parsed_complicated: PlaParser) -> None:
    for entry in parsed_complicated.entries:
        for child in entry.children or ():
            assert child.parent_id == entry.id


# --- Line endings ---


def test_crlf_file(fixtures_dir: Path) -> None:
    parser = PlaParser.from_path(fixtures_dir / "pla_crlf.pla")

    entry = parser.get_entry_by_id(1)
    assert entry.description == "Windows line endings"
    assert entry.children == (
        Start(parent_id=1, date=date(2021, 3, 1), hour=9),
        Duration(parent_id=1, length=2),
    )


# --- Determinism ---


def test_parsing_is_deterministic(fixtures_dir: Path) -> None:
    path = fixtures_dir / "pla_complicated.pla"

    first = PlaParser.from_path(path)
    second = PlaParser.from_path(path)

    assert first.entries == second.entries
    for e1, e2 in zip(first.entries, second.entries, strict=True):
        assert e1.children == e2.children


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PlaParser.from_path(tmp_path / "missing.pla")
