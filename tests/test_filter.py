from __future__ import annotations

import pytest

from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.entities.filter import Filter


def test_filter_matches() -> None:
    active = Entry("open")
    done = Entry("done", completed=True)

    assert Filter.ALL.matches(active) and Filter.ALL.matches(done)
    assert Filter.ACTIVE.matches(active) and not Filter.ACTIVE.matches(done)
    assert Filter.COMPLETED.matches(done) and not Filter.COMPLETED.matches(active)


def test_filter_display_order_labels_and_fragments() -> None:
    assert Filter.ordered() == [Filter.ALL, Filter.ACTIVE, Filter.COMPLETED]
    assert [item.label for item in Filter] == ["All", "Active", "Completed"]
    assert [item.fragment for item in Filter] == ["#/", "#/active", "#/completed"]


@pytest.mark.parametrize("item", list(Filter))
def test_from_fragment_inverts_fragment(item: Filter) -> None:
    assert Filter.from_fragment(item.fragment) is item


@pytest.mark.parametrize(
    ("fragment", "expected"),
    [
        ("", Filter.ALL),
        (None, Filter.ALL),
        ("#", Filter.ALL),
        ("/active", Filter.ACTIVE),
        ("completed", Filter.COMPLETED),
        ("#/active/", Filter.ACTIVE),
        ("#/nowhere", Filter.ALL),
    ],
)
def test_from_fragment_normalizes_input(fragment: str | None, expected: Filter) -> None:
    assert Filter.from_fragment(fragment) is expected
