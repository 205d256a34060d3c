"""The details panel of the selected manga."""

from __future__ import annotations

from dataclasses import dataclass, field

from natocli.models import Manga
from natocli.views.search_bar import SEARCH_BAR_HEIGHT

MANGA_DETAILS_NAME = "MangaDetails"


@dataclass
class MangaDetails:
    """Details of one manga, with a genre-name-to-id lookup."""

    name: str = MANGA_DETAILS_NAME
    manga: Manga = field(default_factory=Manga)
    name_to_id: dict[str, str] = field(default_factory=dict)
    origin_x: int = 0
    origin_y: int = 0

    def coords(self, max_x: int, max_y: int) -> tuple[int, int, int, int]:
        """Return the view's corners for a screen of the given size."""
        return max_x // 2, 1, max_x - 1, (max_y - SEARCH_BAR_HEIGHT - 1) // 2 - 1

    def format_manga(self) -> str:
        """Render the manga's details and record its genre ids."""
        manga = self.manga
        genres = ""
        for genre in manga.genres:
            genres += genre.name + "\t"
            self.name_to_id[genre.name] = genre.id
            self.name_to_id[genre.name.lower()] = genre.id
            self.name_to_id[genre.name.upper()] = genre.id

        fields = [
            ("TITLE", manga.name),
            ("ALT_NAME", manga.alternatives),
            ("STATUS", manga.status),
            ("GENRES", genres),
            ("AUTHOR", manga.author.name),
            ("UPDATED", manga.updated),
            ("VIEWS", manga.views),
            ("RATING", manga.rating),
            ("DESCRIPTION", manga.description),
        ]
        return "\n\n" + "".join(
            f"\t\t\u001b[33m{label}:\u001b[0m {value}\n\n" for label, value in fields
        )