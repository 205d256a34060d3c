"""Downloading chapter page images to disk."""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable

import requests

from natocli.models import Page, Screen

REFERER = "www.natomanga.com/"
MAX_DOWNLOAD_RETRIES = 7
MAX_URL_LENGTH = 200

_log = logging.getLogger(__name__)


class DownloadError(Exception):
    """Raised when a page image cannot be downloaded."""


def download_page(
    path: str | Path,
    url: str,
    session: requests.Session | None = None,
) -> Path:
    """Fetch one page image and save it to the given path."""
    if len(url) > MAX_URL_LENGTH:
        raise DownloadError(f"this url has length of {len(url)}, which is too long")

    target = Path(path)
    client = session if session is not None else requests.Session()
    try:
        for _ in range(MAX_DOWNLOAD_RETRIES):
            try:
                response = client.get(url, headers={"referer": REFERER})
            except requests.RequestException as error:
                raise DownloadError(str(error)) from error

            status = f"{response.status_code} {response.reason or ''}".strip()
            if 400 <= response.status_code < 500:
                raise DownloadError(status)
            if response.status_code == 200:
                target.write_bytes(response.content)
                return target
            _log.warning("Download error: %s, retrying", status)
    finally:
        if session is None:
            client.close()
    raise DownloadError("too much retries")


def download_pages(
    pages: Iterable[Page],
    output_dir: str | Path,
    session: requests.Session | None = None,
    report_errors: bool = True,
) -> list[Path]:
    """Download pages concurrently as <page id>.jpg into a directory.

    Every download runs to its end; the first failure is then raised.
    """
    directory = Path(output_dir)
    pages = list(pages)
    own_session = session is None
    client = requests.Session() if own_session else session
    saved: list[Path] = []
    first_error: BaseException | None = None
    try:
        with ThreadPoolExecutor(max_workers=max(1, min(16, len(pages)))) as pool:
            futures = {
                pool.submit(download_page, directory / f"{page.id}.jpg", page.image_url, client): page
                for page in pages
            }
            for future in as_completed(futures):
                error = future.exception()
                if error is None:
                    saved.append(future.result())
                    continue
                if report_errors:
                    print(f"Error loading page {futures[future].id}: {error}", file=sys.stderr)
                if first_error is None:
                    first_error = error
    finally:
        if own_session:
            client.close()

    if first_error is not None:
        raise first_error
    return saved


def chapter_dir_path(home_dir: str | Path, screen: Screen, chapter_name: str) -> Path:
    """Create and return the directory a chapter selected on screen is saved in."""
    chapters = screen.chapter_list
    path = Path(home_dir).joinpath(
        "Desktop",
        "natomanga-cli",
        chapters.manga_name,
        chapters.name_to_id.get(chapter_name, ""),
    )
    path.mkdir(parents=True, exist_ok=True)
    return path


def download_chapter(
    screen: Screen,
    pages: Iterable[Page],
    chapter_name: str,
    home_dir: str | Path | None = None,
    session: requests.Session | None = None,
) -> Path:
    """Download a chapter chosen on screen under the user's home directory."""
    base = Path.home() if home_dir is None else Path(home_dir)
    directory = chapter_dir_path(base, screen, chapter_name)
    download_pages(pages, directory, session, report_errors=False)
    return directory