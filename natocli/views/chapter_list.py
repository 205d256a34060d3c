"""The chapter list of the selected manga."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from natocli.views.editor import SELECTOR
from natocli.views.search_bar import SEARCH_BAR_HEIGHT

if TYPE_CHECKING:
    from natocli.models import Chapter

CHAPTER_LIST_NAME = "ChapterList"


@dataclass
class ChapterList:
    """Chapters of one manga, with a chapter-name-to-id lookup."""

    name: str = CHAPTER_LIST_NAME
    manga_name: str = ""
    manga_id: str = ""
    chapters: list[Chapter] = field(default_factory=list)
    name_to_id: dict[str, str] = field(default_factory=dict)
    origin_x: int = 0
    origin_y: int = 0

    def coords(self, max_x: int, max_y: int) -> tuple[int, int, int, int]:
        """Return the view's corners for a screen of the given size."""
        return (
            max_x // 2,
            (max_y - SEARCH_BAR_HEIGHT - 1) // 2,
            max_x - 1,
            max_y - SEARCH_BAR_HEIGHT - 2,
        )

    def format_chapters(self) -> str:
        """Render the chapters as a table and record their ids."""
        parts = [
            "\n\t\t\t\u001b[35mCHAPTER NAME\t\t\t\t\tVIEWS\t\t\tUPLOADED\u001b[0m\n\n"
        ]
        for chapter in self.chapters:
            parts.append(
                f"\t\t\t{SELECTOR} \u001b[35m{chapter.name}\u001b[0m"
                f"\t\t\t\t{chapter.views}\t\t\t{chapter.uploaded}\n\n"
            )
            self.name_to_id[chapter.name] = chapter.id
        return "".join(parts)