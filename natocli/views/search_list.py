"""The list of mangas found by the last search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from natocli.views.editor import SELECTOR
from natocli.views.search_bar import SEARCH_BAR_HEIGHT

if TYPE_CHECKING:
    from natocli.models import Manga

SEARCH_LIST_NAME = "SearchList"


@dataclass
class SearchList:
    """Mangas listed on the left of the screen, with a name-to-id lookup."""

    name: str = SEARCH_LIST_NAME
    mangas: list[Manga] = field(default_factory=list)
    name_to_id: dict[str, str] = field(default_factory=dict)
    origin_x: int = 0
    origin_y: int = 0

    def coords(self, max_x: int, max_y: int) -> tuple[int, int, int, int]:
        """Return the view's corners for a screen of the given size."""
        return 1, 1, max_x // 2 - 1, max_y - SEARCH_BAR_HEIGHT - 2

    def format_mangas(self) -> str:
        """Render the mangas as a list and record their name and author ids."""
        parts = [
            f"\t\t\t\u001b[36mpress ENTER on the manga title({SELECTOR}) "
            "to start reading\u001b[0m\n\n"
        ]
        for manga in self.mangas:
            parts.append(
                f"\t{SELECTOR} \u001b[36m{manga.name}\u001b[0m\n"
                f"\t\tAuthor: {manga.author.name}\n\n"
            )
            author = manga.author
            self.name_to_id[manga.name] = manga.id
            self.name_to_id[author.name] = author.id
            self.name_to_id[author.name.lower()] = author.id
            self.name_to_id[author.name.upper()] = author.id
        return "".join(parts)