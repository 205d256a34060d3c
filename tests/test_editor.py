import pytest

from natocli.views.editor import (
    SELECTOR,
    Key,
    is_selectable,
    move_cursor,
    next_selectable,
    prev_selectable,
)

LINES = [
    "\t\t\theader",
    "",
    "\t[x] One",
    "\t\tAuthor: A",
    "",
    "\t[x] Two",
    "\t\tAuthor: B",
]


@pytest.mark.parametrize(
    "line, expected",
    [
        (SELECTOR, True),
        ("   [x] title  ", True),
        ("[x", False),
        ("title [x]", False),
        ("", False),
    ],
)
def test_is_selectable(line, expected):
    assert is_selectable(line) is expected


def test_next_selectable_steps_through_entries():
    assert next_selectable(LINES, 0) == 2
    assert next_selectable(LINES, 2) == 5
    assert next_selectable(LINES, 5) is None


def test_prev_selectable_steps_back():
    assert prev_selectable(LINES, 6) == 5
    assert prev_selectable(LINES, 5) == 2
    assert prev_selectable(LINES, 2) is None
    assert prev_selectable(LINES, 0) is None


@pytest.mark.parametrize("key", [Key.ARROW_DOWN, "s"])
def test_list_view_moves_down_to_next_entry(key):
    assert move_cursor("SearchList", LINES, (0, 2), key) == (0, 5)


@pytest.mark.parametrize("key", [Key.ARROW_UP, "w"])
def test_list_view_moves_up_to_previous_entry(key):
    assert move_cursor("ChapterList", LINES, (0, 5), key) == (0, 2)


def test_list_view_stays_without_target():
    assert move_cursor("SearchList", LINES, (0, 5), Key.ARROW_DOWN) == (0, 5)
    assert move_cursor("SearchList", LINES, (0, 2), Key.ARROW_UP) == (0, 2)


def test_list_view_ignores_horizontal_keys():
    assert move_cursor("SearchList", LINES, (0, 2), Key.ARROW_RIGHT) == (0, 2)
    assert move_cursor("SearchList", LINES, (0, 2), "a") == (0, 2)


def test_details_view_moves_one_step():
    assert move_cursor("MangaDetails", LINES, (3, 2), Key.ARROW_DOWN) == (3, 3)
    assert move_cursor("MangaDetails", LINES, (3, 2), "w") == (3, 1)
    assert move_cursor("MangaDetails", LINES, (3, 2), "d") == (4, 2)
    assert move_cursor("MangaDetails", LINES, (3, 2), Key.ARROW_LEFT) == (2, 2)


def test_details_view_does_not_go_negative():
    assert move_cursor("MangaDetails", LINES, (0, 0), Key.ARROW_UP) == (0, 0)
    assert move_cursor("MangaDetails", LINES, (0, 0), Key.ARROW_LEFT) == (0, 0)


def test_unknown_key_leaves_cursor():
    assert move_cursor("SearchList", LINES, (1, 2), "q") == (1, 2)


def test_down_then_up_returns_to_start():
    moved = move_cursor("SearchList", LINES, (0, 2), Key.ARROW_DOWN)
    assert move_cursor("SearchList", LINES, moved, Key.ARROW_UP) == (0, 2)