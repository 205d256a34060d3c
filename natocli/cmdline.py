"""Non-interactive commands: searching, listing and downloading chapters."""

from __future__ import annotations

import sys
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Iterable

import requests

from natocli.chapters import SelectedChapter, parse_chapter_spec
from natocli.download import DownloadError, download_pages
from natocli.models import Manga, Page, PageNotFoundError, Searcher

NO_MANGA_FOUND = "-- no manga found --"


def print_list(lines: Iterable[str]) -> None:
    """Print each line with surrounding whitespace removed."""
    for line in lines:
        print(line.strip())


def format_mangas(
    searcher: Searcher,
    mangas: Iterable[Manga] | None,
    header: str,
) -> list[str]:
    """Describe mangas one per line under a header and a blank line."""
    out = [header, ""]
    mangas = list(mangas) if mangas is not None else []
    if not mangas:
        out.append(NO_MANGA_FOUND)
        return out
    for found in mangas:
        try:
            manga = searcher.pick_manga(found.id)
        except LookupError:
            out.append(f"[{found.id}] {found.name} (Author: {found.author.name})")
        else:
            out.append(
                f"[{manga.id}] {manga.name} "
                f"(Author: {manga.author.name}, Chapters: {len(manga.chapters)})"
            )
    return out


def search_manga(searcher: Searcher, query: str) -> list[str]:
    """Search mangas by title and describe what was found."""
    return format_mangas(
        searcher, searcher.search_manga(query), f"Title search query: '{query}'"
    )


def list_chapters(searcher: Searcher, manga_id: str) -> list[str]:
    """Describe the chapters of a manga, each with its number and page count."""
    manga = searcher.pick_manga(manga_id)
    total = len(manga.chapters)
    out = [f"'{manga.name}' chapter list:", ""]
    out.extend(
        f"[{total - position}] {chapter.name} ({len(chapter.pages)} pages)"
        for position, chapter in enumerate(manga.chapters)
    )
    return out


def _fetch(
    item: SelectedChapter,
    pages: list[Page],
    directory: Path,
    session: requests.Session | None,
) -> Path:
    download_pages(pages, directory, session, report_errors=True)
    return directory


def _settle(item: SelectedChapter, error: BaseException | None, ignore_errors: bool) -> bool:
    """Report or raise a chapter download failure; tell whether it succeeded."""
    if error is None:
        return True
    if not ignore_errors or not isinstance(error, (DownloadError, OSError)):
        raise error
    print(f"Download error ({item.index}): {error}", file=sys.stderr)
    return False


def download_chapters(
    searcher: Searcher,
    manga_id: str,
    spec: str,
    destination: str | Path = ".",
    one_at_a_time: bool = True,
    ignore_errors: bool = False,
    session: requests.Session | None = None,
) -> list[Path]:
    """Download the selected chapters of a manga under destination/<manga name>.

    Each chapter goes to a directory named "<number> - <chapter name>".
    Returns the directories of the chapters that were downloaded.
    """
    manga = searcher.pick_manga(manga_id)
    selected = parse_chapter_spec(manga, spec)
    base = Path(destination) / manga.name
    done: list[Path] = []

    pool = None if one_at_a_time else ThreadPoolExecutor(max_workers=max(1, len(selected)))
    pending: list[tuple[SelectedChapter, Future[Path]]] = []
    try:
        for item in selected:
            try:
                pages = searcher.read_manga_chapter(manga.id, item.chapter.id)
            except PageNotFoundError as error:
                if not ignore_errors:
                    raise
                print(
                    f"Download error, chapter {item.index} not found: {error}",
                    file=sys.stderr,
                )
                continue

            directory = base / f"{item.index} - {item.chapter.name}"
            directory.mkdir(parents=True, exist_ok=True)
            print(f"downloading chapter: '{item.chapter.name}' to {directory}")

            if pool is None:
                try:
                    _fetch(item, pages, directory, session)
                except (DownloadError, OSError) as error:
                    _settle(item, error, ignore_errors)
                else:
                    done.append(directory)
            else:
                pending.append((item, pool.submit(_fetch, item, pages, directory, session)))

        for item, future in pending:
            if _settle(item, future.exception(), ignore_errors):
                done.append(future.result())
    finally:
        if pool is not None:
            pool.shutdown(wait=True)
    return done