"""Manga catalogue records, an in-memory searcher and the screen state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from natocli.views.chapter_list import ChapterList
    from natocli.views.manga_details import MangaDetails
    from natocli.views.search_bar import SearchBar
    from natocli.views.search_list import SearchList


@dataclass
class Author:
    """A manga author."""

    id: str = ""
    name: str = ""


@dataclass
class Genre:
    """A genre a manga is filed under."""

    id: str = ""
    name: str = ""


@dataclass
class Page:
    """One page image of a chapter."""

    id: str = ""
    image_url: str = ""


@dataclass
class Chapter:
    """A chapter of a manga with its pages."""

    id: str = ""
    name: str = ""
    views: str = ""
    uploaded: str = ""
    pages: list[Page] = field(default_factory=list)


@dataclass
class Manga:
    """A manga with its details and chapters, newest chapter first."""

    id: str = ""
    name: str = ""
    alternatives: str = ""
    status: str = ""
    genres: list[Genre] = field(default_factory=list)
    author: Author = field(default_factory=Author)
    updated: str = ""
    views: str = ""
    rating: str = ""
    description: str = ""
    chapters: list[Chapter] = field(default_factory=list)


class PageNotFoundError(LookupError):
    """Raised when a requested manga, chapter, author or genre does not exist."""

    def __init__(self, message: str = "page not found") -> None:
        super().__init__(message)


class Searcher:
    """Looks up mangas in a catalogue kept in memory.

    The catalogue order is taken as the order of latest updates.
    """

    def __init__(self, mangas: Iterable[Manga] = ()) -> None:
        self._mangas: dict[str, Manga] = {manga.id: manga for manga in mangas}

    def add(self, manga: Manga) -> None:
        """Put a manga into the catalogue, replacing one with the same id."""
        self._mangas[manga.id] = manga

    def search_manga(self, query: str) -> list[Manga]:
        """Return mangas whose title or alternative names contain the query."""
        needle = query.strip().casefold()
        return [
            manga
            for manga in self._mangas.values()
            if needle in manga.name.casefold() or needle in manga.alternatives.casefold()
        ]

    def pick_manga(self, manga_id: str) -> Manga:
        """Return the manga with the given id."""
        try:
            return self._mangas[manga_id]
        except KeyError:
            raise PageNotFoundError(f"manga '{manga_id}' not found") from None

    def read_manga_chapter(self, manga_id: str, chapter_id: str) -> list[Page]:
        """Return the pages of a chapter of a manga."""
        manga = self.pick_manga(manga_id)
        for chapter in manga.chapters:
            if chapter.id == chapter_id:
                return list(chapter.pages)
        raise PageNotFoundError(f"chapter '{chapter_id}' of manga '{manga_id}' not found")

    def search_latest_updated_manga(self) -> list[Manga]:
        """Return the catalogue, latest updated first."""
        return list(self._mangas.values())

    def pick_author(self, author_id: str) -> list[Manga]:
        """Return every manga written by the given author."""
        found = [m for m in self._mangas.values() if m.author.id == author_id]
        if not found:
            raise PageNotFoundError(f"author '{author_id}' not found")
        return found

    def pick_genre(self, genre_id: str) -> list[Manga]:
        """Return every manga filed under the given genre."""
        found = [
            m for m in self._mangas.values() if any(g.id == genre_id for g in m.genres)
        ]
        if not found:
            raise PageNotFoundError(f"genre '{genre_id}' not found")
        return found


@dataclass
class Screen:
    """The main views together with the searcher that feeds them."""

    searcher: Searcher = field(default_factory=Searcher)
    search_bar: SearchBar | None = None
    search_list: SearchList | None = None
    manga_details: MangaDetails | None = None
    chapter_list: ChapterList | None = None

    def __post_init__(self) -> None:
        from natocli.views.chapter_list import ChapterList
        from natocli.views.manga_details import MangaDetails
        from natocli.views.search_bar import SearchBar
        from natocli.views.search_list import SearchList

        if self.search_bar is None:
            self.search_bar = SearchBar()
        if self.search_list is None:
            self.search_list = SearchList()
        if self.manga_details is None:
            self.manga_details = MangaDetails()
        if self.chapter_list is None:
            self.chapter_list = ChapterList()