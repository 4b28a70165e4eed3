"""Back/forward history of the directories shown in the file list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class HistoryEntry:
    """A visited directory and the names that were selected in it."""

    path: str
    selection: list[str] = field(default_factory=list)

    def copy(self) -> HistoryEntry:
        return HistoryEntry(self.path, list(self.selection))


class DirHistory:
    """A bounded stack of visited directories with a current position.

    It keeps at most ``max_size + 1`` entries. Pushing a path while the
    position is not at the newest entry drops every newer entry first.
    """

    def __init__(self, max_size: int = 50) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self.recording = True
        self._entries: list[HistoryEntry] = []
        self._pos = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def current(self) -> HistoryEntry | None:
        """The entry at the current position, or None when empty."""
        if self._pos < len(self._entries):
            return self._entries[self._pos]
        return None

    @property
    def paths(self) -> list[str]:
        """All recorded paths, oldest first."""
        return [entry.path for entry in self._entries]

    def reset(self) -> None:
        """Forget every recorded directory."""
        self._entries.clear()
        self._pos = 0

    def toggle_recording(self) -> bool:
        """Switch recording of pushed paths on or off; return the new state."""
        self.recording = not self.recording
        return self.recording

    def push(self, path: str) -> None:
        """Record a newly shown directory as the current one."""
        if not self.recording:
            return
        if self._pos < len(self._entries):
            del self._entries[self._pos + 1:]
            if path.lower() != self._entries[self._pos].path.lower():
                self._entries.append(HistoryEntry(path))
        else:
            self._entries.append(HistoryEntry(path))
        while self.max_size + 1 < len(self._entries):
            del self._entries[0]
        self._pos = len(self._entries) - 1

    def back(self) -> HistoryEntry | None:
        """Step to the previous directory and return a copy of its entry."""
        if len(self._entries) > 1 and self._pos > 0:
            self._pos -= 1
            return self._entries[self._pos].copy()
        return None

    def forward(self) -> HistoryEntry | None:
        """Step to the next directory and return a copy of its entry."""
        if len(self._entries) > 1 and self._pos < len(self._entries) - 1:
            self._pos += 1
            return self._entries[self._pos].copy()
        return None

    def previous_dirs(self) -> list[str]:
        """Paths before the current position, nearest first."""
        if len(self._entries) <= 1:
            return []
        return [entry.path for entry in reversed(self._entries[: self._pos])]

    def next_dirs(self) -> list[str]:
        """Paths after the current position, nearest first."""
        if len(self._entries) <= 1:
            return []
        return [entry.path for entry in self._entries[self._pos + 1:]]

    def offset(self, delta: int) -> HistoryEntry:
        """Move the position by ``delta`` entries and return a copy of the entry."""
        target = self._pos + delta
        if not 0 <= target < len(self._entries):
            raise IndexError("history offset out of range")
        self._pos = target
        return self._entries[target].copy()

    def can_undo(self) -> bool:
        """Whether there is an older directory to go back to."""
        return self._pos != 0

    def can_redo(self) -> bool:
        """Whether there is a newer directory to go forward to."""
        return bool(self._entries) and self._pos != len(self._entries) - 1

    def set_selection(self, names: Iterable[str]) -> None:
        """Remember the selected names for the current directory."""
        if not self.recording:
            return
        entry = self.current
        if entry is not None:
            entry.selection = list(names)