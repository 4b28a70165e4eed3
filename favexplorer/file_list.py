"""The file list: the shown directory's entries, selection, search and history."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import chain

from favexplorer.dir_history import DirHistory
from favexplorer.file_entries import (
    Column,
    DateFormat,
    FileEntry,
    SizeFormat,
    scan_directory,
    sort_entries,
)


@dataclass
class ListOptions:
    """Display and ordering settings of the file list."""

    view_long: bool = False
    add_ext_to_name: bool = False
    view_braces: bool = False
    size_format: SizeFormat = SizeFormat.BYTES
    date_format: DateFormat = DateFormat.ENG
    sort_pos: Column = Column.NAME
    ascending: bool = True
    match: Callable[[str], bool] | None = None


def find_next_item(names: Sequence[str], prefix: str, start: int) -> int | None:
    """Find the first name starting with ``prefix`` (ignoring case), from ``start``.

    The search wraps around to the beginning when ``start`` is above 1 and
    stops just before ``start - 1``; that entry is never examined.
    """
    count = len(names)
    wrapped = range(0, min(start - 1, count)) if start > 1 else range(0)
    needle = prefix.lower()
    for index in chain(range(start, count), wrapped):
        if names[index][: len(prefix)].lower() == needle:
            return index
    return None


class FileList:
    """The entries of one directory together with the user's selection."""

    def __init__(
        self, options: ListOptions | None = None, history: DirHistory | None = None
    ) -> None:
        self.options = options if options is not None else ListOptions()
        self.history = history if history is not None else DirHistory()
        self.current_path: str | None = None
        self._entries: list[FileEntry] = []
        self._folder_count = 0
        self._selected: set[int] = set()
        self._mark: int | None = None
        self._search = ""
        self._searching = False

    # -- content ----------------------------------------------------------

    def view_path(self, path: str | os.PathLike[str]) -> None:
        """Show the contents of a directory and record it in the history."""
        path = os.fspath(path)
        opts = self.options
        entries = scan_directory(
            path,
            opts.match,
            opts.view_long,
            opts.add_ext_to_name,
            opts.size_format,
            opts.date_format,
        )
        self.current_path = path
        self.history.push(path)
        self._entries = sort_entries(entries, opts.sort_pos, opts.ascending)
        self._folder_count = sum(1 for entry in self._entries if entry.is_directory)
        self._selected = set()
        self._mark = None
        self._sync_history()

    def set_filter(self, match: Callable[[str], bool] | None) -> None:
        """Change which file names are shown and reload the current directory."""
        self.options.match = match
        if self.current_path is not None:
            self.view_path(self.current_path)

    def entries(self) -> list[FileEntry]:
        """The shown entries: parent first, then folders, then files."""
        return list(self._entries)

    def folder_count(self) -> int:
        """Number of directory entries, the parent entry included."""
        return self._folder_count

    @property
    def selection(self) -> list[int]:
        """Indices of the selected entries in ascending order."""
        return sorted(self._selected)

    @property
    def focus(self) -> int | None:
        """Index of the focused entry, if any."""
        return self._mark

    def sort_by(self, column: Column | int) -> None:
        """Sort by a column; choosing the current column reverses the order."""
        column = Column(column)
        opts = self.options
        if column != opts.sort_pos:
            opts.sort_pos = column
        else:
            opts.ascending = not opts.ascending
        selected_ids = {id(self._entries[i]) for i in self._selected}
        marked = self._entries[self._mark] if self._mark is not None else None
        self._entries = sort_entries(self._entries, opts.sort_pos, opts.ascending)
        self._selected = {
            i for i, entry in enumerate(self._entries) if id(entry) in selected_ids
        }
        if marked is not None:
            self._mark = next(i for i, e in enumerate(self._entries) if e is marked)

    # -- selection --------------------------------------------------------

    def _sync_history(self) -> None:
        self.history.set_selection(
            self._entries[i].name_ext for i in sorted(self._selected)
        )

    def _focus_item(self, index: int) -> None:
        self._selected = {index}
        self._mark = index
        self._sync_history()

    def select_folder(self, name: str) -> int | None:
        """Focus the folder with this name (ignoring case); return its index."""
        wanted = name.lower()
        for index in range(self._folder_count):
            if self._entries[index].name.lower() == wanted:
                self._focus_item(index)
                return index
        return None

    def select_file(self, name: str) -> int | None:
        """Focus the file with this full name; return its index."""
        for index in range(self._folder_count, len(self._entries)):
            if self._entries[index].name_ext == name:
                self._focus_item(index)
                return index
        return None

    def select_all(self) -> None:
        """Select every entry except the parent entry."""
        has_parent = bool(self._entries) and self._entries[0].is_parent
        first = 0 if has_parent and self._folder_count else None
        self._selected = {i for i in range(len(self._entries)) if i != first}
        self._mark = first
        self._sync_history()

    def _set_items(self, names: Iterable[str]) -> None:
        wanted = set(names)
        self._selected = {
            i for i, entry in enumerate(self._entries) if entry.name_ext in wanted
        }
        self._mark = min(self._selected) if self._selected else None
        self._sync_history()

    def selected_paths(self) -> list[str]:
        """Full paths of the selected entries, or the current directory if none."""
        base = self.current_path or ""
        paths = []
        for index in sorted(self._selected):
            entry = self._entries[index]
            if index == 0 and entry.name.lower() == "..":
                continue
            if index < self._folder_count:
                paths.append(os.path.join(base, entry.name) + os.sep)
            else:
                paths.append(os.path.join(base, entry.name_ext))
        return paths or [base]

    # -- type-ahead search ------------------------------------------------

    def type_ahead(self, char: str) -> int | None:
        """Extend the search text and focus the next matching entry."""
        start = self._mark if self._mark is not None else 0
        self._search += char.lower()
        if not self._searching:
            start += 1
        names = [entry.name for entry in self._entries]
        found = find_next_item(names, self._search, start)
        if found is None and self._searching:
            self._search = self._search[:-1]
            start += 1
            found = find_next_item(names, self._search, start)
        if found is not None:
            self._focus_item(found)
        self._searching = True
        return found

    def reset_search(self) -> None:
        """Forget the typed search text."""
        self._searching = False
        self._search = ""

    # -- history ----------------------------------------------------------

    def _revisit(self, entry) -> str | None:
        if entry is None:
            return None
        recording = self.history.recording
        self.history.recording = False
        try:
            self.view_path(entry.path)
        finally:
            self.history.recording = recording
        self._set_items(entry.selection)
        return entry.path

    def go_back(self) -> str | None:
        """Show the previous directory; return its path or None."""
        return self._revisit(self.history.back())

    def go_forward(self) -> str | None:
        """Show the next directory; return its path or None."""
        return self._revisit(self.history.forward())