"""Reading and writing the favorites database file.

The file is UTF-16LE text with a byte-order mark. It holds the four sections
in their fixed order. Each section is followed by its ``#GROUP``/``#LINK``
records, and every group's records end with ``#END``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from favexplorer.favorites_model import (
    Category,
    FavElement,
    Flag,
    category_label,
    make_roots,
)

_BOM = b"\xff\xfe"
_ENCODING = "utf-16-le"


class FavoritesFormatError(ValueError):
    """Raised when a favorites file does not follow the expected layout."""


class _Tokens:
    """Cursor over the non-empty lines of the file body."""

    def __init__(self, text: str) -> None:
        # Consecutive newlines collapse, so empty lines never become tokens.
        self._items = [line for line in text.split("\n") if line]
        self._pos = 0

    @property
    def current(self) -> str | None:
        if self._pos < len(self._items):
            return self._items[self._pos]
        return None

    def advance(self) -> str | None:
        self._pos += 1
        return self.current


def _expect_field(tokens: _Tokens, prefix: str, record: str) -> str:
    line = tokens.current
    if line is None or not line.startswith(prefix):
        field = prefix.strip("\t=")
        raise FavoritesFormatError(f"{field} in {record} not correct")
    tokens.advance()
    return line[len(prefix):]


def _read_children(parent: FavElement, tokens: _Tokens) -> None:
    category = parent.category()
    default_flags = Flag.USERIMAGE if category is Category.WEB else Flag.NONE

    while True:
        line = tokens.current
        if line is None:
            break
        if line == "#LINK":
            tokens.advance()
            name = _expect_field(tokens, "\tName=", "LINK")
            link = _expect_field(tokens, "\tLink=", "LINK")
            parent.children.append(
                FavElement(
                    name=name,
                    link=link,
                    root=category,
                    flags=Flag.LINK | default_flags,
                )
            )
        elif line == "#GROUP":
            tokens.advance()
            name = _expect_field(tokens, "\tName=", "GROUP")
            flags = Flag.USERIMAGE | Flag.GROUP | default_flags
            expand_line = tokens.current
            if expand_line is not None and expand_line.startswith("\tExpand="):
                if expand_line[8:9] == "1":
                    flags |= Flag.EXPAND
                tokens.advance()
            group = FavElement(name=name, root=category, flags=flags)
            parent.children.append(group)
            _read_children(group, tokens)
        elif line == "#END":
            tokens.advance()
            break
        else:
            # Unknown tag: leave it for the caller.
            break


def parse_favorites(text: str) -> list[FavElement]:
    """Build the four top-level sections from the file's text.

    A leading byte-order mark character is ignored. The file may stop after
    any section; sections that are missing stay empty.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    roots = make_roots()
    tokens = _Tokens(text)

    for root, category in zip(roots, Category):
        line = tokens.current
        if line is None:
            break
        label = category_label(category)
        if line != label:
            raise FavoritesFormatError(
                f"expected section {label!r}, found {line!r}"
            )
        line = tokens.advance()
        if line is None:
            break
        if line.startswith("Expand="):
            if line[7:8] == "1":
                root.flags |= Flag.EXPAND
            tokens.advance()
        _read_children(root, tokens)

    return roots


def _write_children(element: FavElement) -> Iterator[str]:
    for child in element.children:
        if child.is_group():
            yield "#GROUP\n"
            yield f"\tName={child.name}\n"
            yield f"\tExpand={int(child.is_expanded())}\n\n"
            yield from _write_children(child)
            yield "#END\n\n"
        elif child.is_link():
            yield "#LINK\n"
            yield f"\tName={child.name}\n"
            yield f"\tLink={child.link}\n\n"


def format_favorites(roots: Iterable[FavElement]) -> str:
    """Render the top-level sections as the text of a favorites file."""
    parts: list[str] = []
    for root, category in zip(roots, Category):
        parts.append(
            f"{category_label(category)}\nExpand={int(root.is_expanded())}\n\n"
        )
        parts.extend(_write_children(root))
    return "".join(parts)


def load_favorites(path: str | os.PathLike[str]) -> list[FavElement]:
    """Read a favorites file; a missing file gives four empty sections."""
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except FileNotFoundError:
        return make_roots()
    if not data.startswith(_BOM):
        raise FavoritesFormatError(f"error in file {file_path.name!r}: no byte-order mark")
    return parse_favorites(data[len(_BOM):].decode(_ENCODING))


def save_favorites(path: str | os.PathLike[str], roots: Iterable[FavElement]) -> None:
    """Write the sections to a favorites file, replacing any existing one."""
    payload = _BOM + format_favorites(roots).encode(_ENCODING)
    Path(path).write_bytes(payload)