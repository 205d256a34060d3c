"""The command line at the bottom of the screen and its history."""

from __future__ import annotations

from dataclasses import dataclass, field

SEARCH_BAR_HEIGHT = 2
SEARCH_BAR_NAME = "SearchBar"


def _remove_newline(text: str) -> str:
    """Drop the final character, the newline a view buffer ends with."""
    return text[:-1]


@dataclass
class SearchBar:
    """The search bar: where commands are typed, with a command history."""

    name: str = SEARCH_BAR_NAME
    commands: list[str] = field(default_factory=list)
    origin_x: int = 0
    origin_y: int = 0

    def coords(self, max_x: int, max_y: int) -> tuple[int, int, int, int]:
        """Return the view's corners for a screen of the given size."""
        return 1, max_y - SEARCH_BAR_HEIGHT - 1, max_x - 1, max_y - 1

    def save_command(self, cmd: str) -> None:
        """Remember a command, moving a repeated one to the end of the history."""
        if not cmd:
            return
        command = _remove_newline(cmd)
        if command in self.commands:
            self.commands.remove(command)
        self.commands.append(command)

    def prev_command(self, cmd: str) -> str:
        """Return the command entered before the given one."""
        if not self.commands:
            return ""
        if not cmd:
            return self.commands[-1]
        command = _remove_newline(cmd)
        if command in self.commands:
            position = self.commands.index(command)
            return self.commands[position - 1] if position > 0 else ""
        return self.commands[-1]

    def next_command(self, cmd: str) -> str:
        """Return the command entered after the given one."""
        if not self.commands or not cmd:
            return ""
        command = _remove_newline(cmd)
        if command in self.commands:
            position = self.commands.index(command)
            if position + 1 < len(self.commands):
                return self.commands[position + 1]
        return ""