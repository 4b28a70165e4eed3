"""Data model for the favorites tree: categories, element flags and elements."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Category(enum.IntEnum):
    """The four top-level sections of the favorites tree."""

    FOLDERS = 0
    FILES = 1
    WEB = 2
    SESSIONS = 3


class Flag(enum.Flag):
    """State and kind bits carried by a favorites element."""

    NONE = 0
    MAIN = enum.auto()
    GROUP = enum.auto()
    LINK = enum.auto()
    EXPAND = enum.auto()
    USERIMAGE = enum.auto()
    SESSION_CHILD = enum.auto()


_LABELS = {
    Category.FOLDERS: "[Folders]",
    Category.FILES: "[Files]",
    Category.WEB: "[Web]",
    Category.SESSIONS: "[Sessions]",
}


def category_label(category: Category | int) -> str:
    """Return the display name of a top-level section, e.g. ``[Files]``."""
    return _LABELS[Category(category)]


@dataclass
class FavElement:
    """One node of the favorites tree: a section, a group or a link."""

    name: str
    link: str = ""
    root: Category = Category.FOLDERS
    flags: Flag = Flag.NONE
    children: list[FavElement] = field(default_factory=list)

    def category(self) -> Category:
        """The section this element belongs to."""
        return self.root

    def is_link(self) -> bool:
        return Flag.LINK in self.flags

    def is_group(self) -> bool:
        return Flag.GROUP in self.flags

    def is_main(self) -> bool:
        return Flag.MAIN in self.flags

    def is_expanded(self) -> bool:
        return Flag.EXPAND in self.flags

    def duplicate(self) -> FavElement:
        """Return a deep copy of this element and all of its descendants."""
        return FavElement(
            name=self.name,
            link=self.link,
            root=self.root,
            flags=self.flags,
            children=[child.duplicate() for child in self.children],
        )


def make_roots() -> list[FavElement]:
    """Create the four empty top-level sections in their fixed order."""
    return [
        FavElement(
            name=category_label(category),
            root=category,
            flags=Flag.USERIMAGE | Flag.MAIN,
        )
        for category in Category
    ]


def sort_elements(elements: list[FavElement]) -> list[FavElement]:
    """Sort in place: groups before links, then by name. Returns the list."""
    elements.sort(key=lambda element: (not element.is_group(), element.name))
    return elements