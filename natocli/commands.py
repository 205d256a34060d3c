"""Search bar commands and the screen updates they drive."""

from __future__ import annotations

from enum import Enum

from natocli.models import PageNotFoundError, Screen
from natocli.views.editor import SELECTOR


class Command(str, Enum):
    """Commands understood by the search bar."""

    SEARCH = "search"
    SEARCH_AUTHOR = "search-author"
    SEARCH_GENRE = "search-genre"


# Longer commands first: "search" is a prefix of the others.
_COMMAND_ORDER = (Command.SEARCH_AUTHOR, Command.SEARCH_GENRE, Command.SEARCH)


def remove_prefix(text: str, prefix_len: int) -> str:
    """Drop a prefix of the given length and the separator that follows it."""
    return text[prefix_len + 1:]


def validate_command(text: str) -> tuple[Command, str] | None:
    """Split a typed line into its command and arguments.

    Returns None when the line holds no known command or a command without
    arguments.
    """
    for command in _COMMAND_ORDER:
        if text.startswith(command.value):
            if len(text) <= len(command.value) + 1:
                return None
            return command, remove_prefix(text, len(command.value))
    return None


def manga_name_and_id(screen: Screen, line: str) -> tuple[str, str]:
    """Return the manga name on a selectable line and its id, if known."""
    name = remove_prefix(line, len(SELECTOR))
    return name, screen.search_list.name_to_id.get(name, "")


def load_initial_screen(screen: Screen) -> str:
    """Fill the search list with the latest updated mangas and return its text."""
    search_list = screen.search_list
    search_list.mangas = screen.searcher.search_latest_updated_manga()
    return search_list.format_mangas()


def load_manga_screen(screen: Screen, line: str) -> tuple[str, str] | None:
    """Load the manga on a selected line into the details and chapter views.

    Returns the details text and the chapter list text, or None when the
    line is not a selectable manga line.
    """
    if not line.startswith(SELECTOR):
        return None

    name, manga_id = manga_name_and_id(screen, line)
    manga = screen.searcher.pick_manga(manga_id)

    details = screen.manga_details
    details.manga = manga
    details_text = details.format_manga()

    chapters = screen.chapter_list
    chapters.manga_name = name
    chapters.manga_id = manga_id
    chapters.chapters = manga.chapters
    chapters_text = chapters.format_chapters()

    return details_text, chapters_text


def run_command(screen: Screen, cmd: Command | str, args: str) -> str:
    """Run a validated command and return the new search list text.

    A lookup that finds nothing yields the not-found message instead.
    """
    command = Command(cmd)
    searcher = screen.searcher
    try:
        if command is Command.SEARCH:
            mangas = searcher.search_manga(args)
        elif command is Command.SEARCH_AUTHOR:
            mangas = searcher.pick_author(screen.search_list.name_to_id.get(args, ""))
        else:
            mangas = searcher.pick_genre(screen.manga_details.name_to_id.get(args, ""))
    except PageNotFoundError as error:
        return str(error)

    screen.search_list.mangas = mangas
    return screen.search_list.format_mangas()


def chapter_name_from_line(line: str) -> str | None:
    """Return the chapter name on a selectable chapter line, or None."""
    if not line.startswith(SELECTOR):
        return None
    return remove_prefix(line, len(SELECTOR)).split("\t")[0]