# natocli

A library for working with a manga catalogue: search it, list a manga's
chapters, turn a chapter selection such as `"2-6"` into chapters, and download
chapter page images to disk. It also holds the text formatting, command
parsing and cursor movement behind a four-pane terminal screen (search bar,
search list, manga details, chapter list).

## Modules

- **`natocli.models`**: dataclasses `Manga`, `Chapter`, `Page`, `Author` and
  `Genre`; `PageNotFoundError` (a `LookupError`); `Searcher`, a catalogue kept
  in memory. Build it with `Searcher(mangas)` or `Searcher.add(manga)`, then use
  `search_manga(query)` (case-insensitive match on title or alternative names),
  `pick_manga(manga_id)`, `read_manga_chapter(manga_id, chapter_id)`,
  `search_latest_updated_manga()` (catalogue order), `pick_author(author_id)`
  and `pick_genre(genre_id)`. Unknown ids, and authors or genres with no manga,
  raise `PageNotFoundError`. `Screen` bundles a searcher with the four view
  objects.
- **`natocli.chapters`**: `SelectedChapter`, `index_to_chapter`,
  `chapter_range` and `parse_chapter_spec(manga, spec)`. Chapters are numbered
  from 1 (the oldest) to the chapter count; `Manga.chapters` is kept newest
  first. Out-of-range numbers and malformed numbers raise `ValueError`.
- **`natocli.cmdline`**: `search_manga(searcher, query)` and
  `list_chapters(searcher, manga_id)` return lines of text, `print_list(lines)`
  prints them stripped, `format_mangas` describes a list of mangas, and
  `download_chapters(...)` saves the selected chapters into
  `<destination>/<manga name>/<number> - <chapter name>/` and returns the
  directories it downloaded. With `one_at_a_time=False` chapters download in
  parallel; with `ignore_errors=True` missing chapters and failed downloads are
  reported on stderr and skipped instead of raised.
- **`natocli.download`**: `download_page(path, url, session)` fetches one
  image with the referer header `www.natomanga.com/`. URLs over 200 characters,
  4xx responses, connection errors and seven unsuccessful attempts (other
  non-200 statuses are retried) raise `DownloadError`.
  `download_pages(pages, output_dir, session, report_errors)` fetches pages
  concurrently as `<page id>.jpg`, lets every download finish, then raises the
  first failure. `chapter_dir_path` and `download_chapter` place a chapter
  chosen on screen under `<home>/Desktop/natomanga-cli/<manga name>/<chapter id>/`.
- **`natocli.commands`**: `Command` (`search`, `search-author`,
  `search-genre`); `validate_command(text)` returns `(Command, args)` or `None`
  when the line has no known command or no arguments; `run_command`,
  `load_initial_screen` and `load_manga_screen` update a `Screen` and return
  the text its panes would show; `chapter_name_from_line` and
  `manga_name_and_id` read selected lines.
- **`natocli.views`**: `SearchBar` (command history with `save_command`,
  `prev_command`, `next_command`), `SearchList`, `MangaDetails` and
  `ChapterList` (each with `coords(max_x, max_y)` and a `format_*` method that
  also fills its `name_to_id` lookup), and `natocli.views.editor` with `Key`,
  `is_selectable`, `next_selectable`, `prev_selectable` and `move_cursor`.

## Example

```python
from natocli.models import Author, Chapter, Manga, Page, Searcher
from natocli.chapters import parse_chapter_spec
from natocli.cmdline import download_chapters, list_chapters, print_list, search_manga

chapters = [  # newest first
    Chapter(id=f"ch{n}", name=f"Chapter {n}",
            pages=[Page(id="1", image_url=f"https://example.com/{n}/1.jpg")])
    for n in (3, 2, 1)
]
manga = Manga(id="m1", name="Example Manga",
              author=Author(id="a1", name="Someone"), chapters=chapters)
searcher = Searcher([manga])

print_list(search_manga(searcher, "example"))
print_list(list_chapters(searcher, "m1"))

print([c.index for c in parse_chapter_spec(manga, "1,3")])  # [1, 3]

download_chapters(searcher, "m1", "2", "downloads",
                  one_at_a_time=True, ignore_errors=True)
```

## Chapter selections

| Selection | Chapters                                                   |
|-----------|------------------------------------------------------------|
| `7`       | chapter 7                                                  |
| `1,4,9`   | chapters 1, 4 and 9                                        |
| `3-8`     | chapters 3 up to, but not including, 8 (`8-3` is the same) |
| `-5`      | chapter 1 up to, but not including, 5                      |
| `10-`     | chapter 10 up to, but not including, the last chapter      |
| `4-4`     | chapter 4                                                  |

A range's upper bound is left out, so `-` selects every chapter but the last.

## What it does not do

- It does not fetch the catalogue from the website. `Searcher` only searches
  the mangas you give it; only page images are downloaded over HTTP.
- It has no command to run and no interactive terminal screen. The view and
  command modules produce the text and cursor positions such a screen would
  use, but nothing draws them or reads the keyboard.

## Requirements

Python 3.10 or later and `requests`. Tests use `pytest` and `responses`
(`pip install natocli[test]`).