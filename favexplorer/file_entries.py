"""Directory entries for the file list: scanning, formatting and ordering."""

from __future__ import annotations

import enum
import functools
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

_FILE_ATTRIBUTE_HIDDEN = 0x2


class SizeFormat(enum.IntEnum):
    """How file sizes are shown in the size column."""

    BYTES = 0
    KBYTE = 1
    DYNAMIC = 2
    DYNAMIC_EX = 3


class DateFormat(enum.IntEnum):
    """How modification dates are shown in the date column."""

    ENG = 0
    GER = 1


class Column(enum.IntEnum):
    """Columns of the file list."""

    NAME = 0
    EXTENSION = 1
    SIZE = 2
    DATE = 3


@dataclass
class FileEntry:
    """One row of the file list."""

    name: str
    ext: str = ""
    name_ext: str = ""
    is_parent: bool = False
    is_directory: bool = False
    is_hidden: bool = False
    size: int = 0
    date: int = 0
    size_text: str = ""
    date_text: str = ""


def _group_thousands(size: int, text: str) -> str:
    while size:
        text = f"{size % 1000:03d}." + text
        size //= 1000
    return text


def _unit_suffix(steps: int) -> str:
    if steps <= 1:
        return " b"
    if steps == 2:
        return " k"
    return " M"


def format_size(size: int, fmt: SizeFormat | int) -> str:
    """Render a byte count in one of the size formats of the list."""
    fmt = SizeFormat(fmt)
    if fmt is SizeFormat.BYTES:
        text = _group_thousands(size // 1000, f"{size % 1000:03d}")
    elif fmt is SizeFormat.KBYTE:
        size //= 1024
        text = _group_thousands(size // 1000, f"{size % 1000:03d}") + " kB"
    elif fmt is SizeFormat.DYNAMIC:
        text = "000"
        steps = 0
        while steps < 3 and size != 0:
            text = f"{size % 1024:03d}"
            size //= 1024
            steps += 1
        text = _group_thousands(size, text) + _unit_suffix(steps)
    else:
        text = "000"
        steps = 0
        comma = 0
        while steps < 3 and size != 0:
            if steps < 1:
                text = f"{size:03d}"
            else:
                text = f"{size % 1024:03d},{comma}"
            comma = (size % 1024) // 100
            size //= 1024
            steps += 1
        text = _group_thousands(size, text) + _unit_suffix(steps)

    # Blank out up to two leading zeros.
    chars = list(text)
    for index in range(min(2, len(chars))):
        if chars[index] != "0":
            break
        chars[index] = " "
    return "".join(chars)


def format_date(timestamp: float | datetime, fmt: DateFormat | int) -> str:
    """Render a modification time (POSIX seconds or datetime) in local time."""
    moment = timestamp if isinstance(timestamp, datetime) else datetime.fromtimestamp(timestamp)
    if DateFormat(fmt) is DateFormat.ENG:
        return (
            f"{moment.year % 100:02d}/{moment.month:02d}/{moment.day:02d} "
            f"{moment.hour:02d}:{moment.minute:02d}"
        )
    return (
        f"{moment.day:02d}.{moment.month:02d}.{moment.year:04d} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def split_name(filename: str) -> tuple[str, str]:
    """Split a file name at its last dot into name and extension.

    A dot in the first position does not start an extension.
    """
    dot = filename.rfind(".", 1)
    if dot == -1:
        return filename, ""
    return filename[:dot], filename[dot + 1:]


def _is_hidden(name: str, stat: os.stat_result) -> bool:
    attributes = getattr(stat, "st_file_attributes", None)
    if attributes is not None:
        return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
    return name.startswith(".")


def _is_root(path: str) -> bool:
    absolute = os.path.abspath(path)
    return os.path.dirname(absolute) == absolute


def scan_directory(
    path: str | os.PathLike[str],
    match: Callable[[str], bool] | None = None,
    view_long: bool = False,
    add_ext_to_name: bool = False,
    size_format: SizeFormat | int = SizeFormat.BYTES,
    date_format: DateFormat | int = DateFormat.ENG,
) -> list[FileEntry]:
    """List a directory: the parent entry, then folders, then matching files."""
    path = os.fspath(path)
    folders: list[FileEntry] = []
    files: list[FileEntry] = []

    if not _is_root(path):
        parent = FileEntry(name="..", name_ext="..", is_parent=True, is_directory=True)
        if view_long:
            parent.size_text = "<DIR>"
            try:
                mtime = os.stat(os.path.join(path, "..")).st_mtime
                parent.date_text = format_date(mtime, date_format)
            except OSError:
                pass
        folders.append(parent)

    with os.scandir(path) as iterator:
        for dir_entry in iterator:
            try:
                stat = dir_entry.stat()
                is_dir = dir_entry.is_dir()
            except OSError:
                continue
            name = dir_entry.name
            if is_dir:
                entry = FileEntry(
                    name=name,
                    name_ext=name,
                    is_directory=True,
                    is_hidden=_is_hidden(name, stat),
                )
                if view_long:
                    entry.size_text = "<DIR>"
                    entry.date_text = format_date(stat.st_mtime, date_format)
                folders.append(entry)
            elif match is None or match(name):
                stem, ext = split_name(name)
                entry = FileEntry(
                    name=name if add_ext_to_name else stem,
                    ext=ext,
                    name_ext=name,
                    is_hidden=_is_hidden(name, stat),
                )
                if view_long:
                    entry.size = stat.st_size
                    entry.size_text = format_size(stat.st_size, size_format)
                    entry.date = stat.st_mtime_ns
                    entry.date_text = format_date(stat.st_mtime, date_format)
                files.append(entry)

    return folders + files


def _cmp(left, right) -> int:
    return (left > right) - (left < right)


def _compare(left: FileEntry, right: FileEntry, sort_pos: int, ascending: bool) -> int:
    if left.is_parent != right.is_parent:
        return -1 if left.is_parent else 1
    if left.is_directory != right.is_directory:
        return -1 if left.is_directory else 1
    by_name = _cmp(left.name_ext, right.name_ext)
    if left.is_directory and right.is_directory:
        return by_name
    if sort_pos == Column.NAME:
        result = by_name
    elif sort_pos == Column.EXTENSION:
        result = _cmp(left.ext, right.ext)
    elif sort_pos == Column.SIZE:
        result = _cmp(left.size, right.size)
    elif sort_pos == Column.DATE:
        result = _cmp(left.date, right.date)
    else:
        result = 0
    if result == 0:
        result = by_name
    return result if ascending else -result


def sort_entries(
    entries: Iterable[FileEntry], sort_pos: Column | int = Column.NAME, ascending: bool = True
) -> list[FileEntry]:
    """Order entries: parent first, folders by name, then files by the column."""
    key = functools.cmp_to_key(
        lambda a, b: _compare(a, b, int(sort_pos), ascending)
    )
    return sorted(entries, key=key)


def cell_text(
    entry: FileEntry,
    column: Column | int,
    is_folder: bool,
    view_braces: bool = False,
    add_ext_to_name: bool = False,
) -> str:
    """Return the text shown for an entry in one column."""
    if column == Column.NAME:
        if is_folder and view_braces:
            return f"[{entry.name}]"
        return entry.name
    if column == Column.EXTENSION:
        if is_folder or not add_ext_to_name:
            return entry.ext
        return ""
    if column == Column.SIZE:
        return entry.size_text
    return entry.date_text