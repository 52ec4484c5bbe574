from datetime import date

from pla_kit.parsers.assembler import assemble_entries, group_by_parent
from pla_kit.parsers.command import CommandKind
from pla_kit.parsers.lines import HierarchicalLine
from pla_kit.parsers.models import Child, Duration, Entry, Start


def _header(text: str, line_number: int = 1) -> HierarchicalLine:
    return HierarchicalLine(CommandKind.ENTRY, text, None, line_number)


def test_group_by_parent_keeps_file_order() -> None:
    records = [
        Duration(parent_id=1, length=5),
        Child(parent_id=2, child_id=9),
        Start(parent_id=1, date=date(2021, 1, 1), hour=3),
    ]

    groups = group_by_parent(records)

    assert groups == {
        1: [records[0], records[2]],
        2: [records[1]],
    }


def test_entries_follow_header_order() -> None:
    entries = assemble_entries([_header("[2] two"), _header("[1] one")], [])

    assert entries == [Entry(id=2, description="two"), Entry(id=1, description="one")]


def test_entry_without_sub_records_has_no_children() -> None:
    (entry,) = assemble_entries([_header("[1] lonely")], [])

    assert entry.children is None
    assert not entry.has_children()


def test_sub_records_attach_to_their_parent() -> None:
    duration = Duration(parent_id=1, length=5)
    child = Child(parent_id=2, child_id=9)

    first, second = assemble_entries(
        [_header("[1] one"), _header("[2] two")], [duration, child]
    )

    assert first.children == (duration,)
    assert second.children == (child,)


def test_duplicate_ids_share_all_sub_records() -> None:
    a = Duration(parent_id=7, length=1)
    b = Duration(parent_id=7, length=2)

    first, second = assemble_entries(
        [_header("[7] first"), _header("[7] second")], [a, b]
    )

    assert first.children == (a, b)
    assert second.children == (a, b)


def test_ignores_command_lines_in_hierarchy() -> None:
    hierarchy = [
        _header("[1] one"),
        HierarchicalLine(CommandKind.DURATION, "duration 5", 1, 2),
    ]

    assert len(assemble_entries(hierarchy, [])) == 1
