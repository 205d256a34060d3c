import pytest

from natocli.chapters import (
    SelectedChapter,
    chapter_range,
    index_to_chapter,
    parse_chapter_spec,
)
from natocli.models import Chapter, Manga


@pytest.fixture
def manga():
    # Newest chapter first, as the catalogue lists them.
    return Manga(
        id="m1",
        name="Blue Sky",
        chapters=[
            Chapter(id="c4", name="Chapter 4"),
            Chapter(id="c3", name="Chapter 3"),
            Chapter(id="c2", name="Chapter 2"),
            Chapter(id="c1", name="Chapter 1"),
        ],
    )


def indices(selected):
    return [item.index for item in selected]


def test_index_one_is_oldest_chapter(manga):
    selected = index_to_chapter(1, manga)
    assert selected.chapter is manga.chapters[-1]
    assert selected.index == 1


def test_highest_index_is_newest_chapter(manga):
    selected = index_to_chapter(len(manga.chapters), manga)
    assert selected.chapter is manga.chapters[0]


def test_every_index_maps_to_its_chapter_name(manga):
    for item in parse_chapter_spec(manga, "1,2,3,4"):
        assert item.chapter.name == f"Chapter {item.index}"


@pytest.mark.parametrize("index", [0, 5, -1])
def test_index_out_of_range(manga, index):
    with pytest.raises(ValueError, match="out of range"):
        index_to_chapter(index, manga)


def test_single_chapter(manga):
    selected = parse_chapter_spec(manga, "3")
    assert selected == [SelectedChapter(manga.chapters[1], 3)]


def test_dash_range_excludes_upper_bound(manga):
    assert indices(parse_chapter_spec(manga, "1-3")) == [1, 2]


def test_reversed_range_is_swapped(manga):
    assert parse_chapter_spec(manga, "3-1") == parse_chapter_spec(manga, "1-3")


def test_equal_bounds_select_one_chapter(manga):
    assert parse_chapter_spec(manga, "2-2") == parse_chapter_spec(manga, "2")


def test_open_lower_bound_starts_at_first(manga):
    assert parse_chapter_spec(manga, "-3") == parse_chapter_spec(manga, "1-3")


def test_open_range_spans_to_last(manga):
    selected = parse_chapter_spec(manga, "-")
    assert selected == chapter_range(1, len(manga.chapters), manga)
    assert selected[0].index == 1
    assert len(selected) == len(manga.chapters) - 1


def test_comma_list_keeps_order(manga):
    assert indices(parse_chapter_spec(manga, "4,1,3")) == [4, 1, 3]


def test_range_matches_chapter_range(manga):
    assert parse_chapter_spec(manga, "2-4") == chapter_range(2, 4, manga)


def test_plus_sign_accepted(manga):
    assert parse_chapter_spec(manga, "+2") == parse_chapter_spec(manga, "2")


@pytest.mark.parametrize("spec", ["a", " 1", "1,x", "x-3", "1-y", "1_0", ""])
def test_invalid_numbers(manga, spec):
    with pytest.raises(ValueError):
        parse_chapter_spec(manga, spec)


def test_list_with_out_of_range_member(manga):
    with pytest.raises(ValueError, match="out of range"):
        parse_chapter_spec(manga, "1,9")


def test_range_beyond_last_chapter(manga):
    with pytest.raises(ValueError, match="out of range"):
        parse_chapter_spec(manga, "3-9")