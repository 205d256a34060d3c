"""Turning chapter selections typed by the user into chapters of a manga."""

from __future__ import annotations

import re
from dataclasses import dataclass

from natocli.models import Chapter, Manga

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class SelectedChapter:
    """A chapter together with its 1-based number, oldest chapter first."""

    chapter: Chapter
    index: int


def _parse_number(text: str) -> int:
    """Parse a plain decimal integer, rejecting spaces and separators."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid chapter number: {text!r}")
    return int(text)


def index_to_chapter(index: int, manga: Manga) -> SelectedChapter:
    """Return the chapter with the given number, counting from the oldest."""
    total = len(manga.chapters)
    if index > total or index < 1:
        raise ValueError(f"chapter '{index}' out of range (1 - {total})")
    return SelectedChapter(manga.chapters[total - index], index)


def chapter_range(low: int, high: int, manga: Manga) -> list[SelectedChapter]:
    """Return the chapters numbered from low up to, but not including, high."""
    return [index_to_chapter(index, manga) for index in range(low, high)]


def parse_chapter_spec(manga: Manga, spec: str) -> list[SelectedChapter]:
    """Resolve a selection such as "3", "1,4,7", "2-5", "-5" or "3-".

    A dash range runs from its lower bound up to, but not including, its
    upper bound; an empty bound stands for the first or the last chapter.
    """
    if "-" in spec:
        limits = spec.split("-")
        low = 1 if limits[0] == "" else _parse_number(limits[0])
        high = len(manga.chapters) if limits[1] == "" else _parse_number(limits[1])
        if low == high:
            return parse_chapter_spec(manga, str(low))
        if low > high:
            low, high = high, low
        return chapter_range(low, high, manga)

    if "," in spec:
        return [index_to_chapter(_parse_number(part), manga) for part in spec.split(",")]

    return [index_to_chapter(_parse_number(spec), manga)]