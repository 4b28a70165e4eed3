"""Editing operations on the favorites tree: links, groups, clipboard, menus."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable, Iterable, Iterator, Sequence

from favexplorer.favorites_model import (
    Category,
    FavElement,
    Flag,
    category_label,
    sort_elements,
)


class MenuItem(enum.IntEnum):
    """Commands offered by the context menu of a favorites element."""

    NEWLINK = 1
    NEWGROUP = 2
    ADDSESSION = 3
    SAVESESSION = 4
    COPY = 5
    CUT = 6
    PASTE = 7
    DELETE = 8
    PROPERTIES = 9
    OPEN = 10
    OPENOTHERVIEW = 11
    OPENNEWINSTANCE = 12
    GOTO_FILE_LOCATION = 13
    ADDTOSESSION = 14


class FavoritesError(Exception):
    """Raised when an edit of the favorites tree is not allowed."""


class Favorites:
    """The favorites tree together with its cut/copy clipboard."""

    def __init__(self, roots: Sequence[FavElement]) -> None:
        self.roots = list(roots)
        self._clipboard: FavElement | None = None
        self._is_cut = False

    # -- lookup -----------------------------------------------------------

    def root(self, category: Category | int) -> FavElement:
        """Return the top-level section of the given category."""
        return self.roots[Category(category)]

    def find(self, group_path: Sequence[str]) -> FavElement:
        """Follow a path of names from the top level down to an element."""
        if not group_path:
            raise FavoritesError("empty group path")
        candidates: list[FavElement] = self.roots
        found: FavElement | None = None
        for name in group_path:
            found = next((e for e in candidates if e.name == name), None)
            if found is None:
                raise FavoritesError(f"element {name!r} not found")
            candidates = found.children
        assert found is not None
        return found

    def _walk(self) -> Iterator[tuple[FavElement | None, FavElement]]:
        stack: list[tuple[FavElement | None, FavElement]] = [
            (None, root) for root in reversed(self.roots)
        ]
        while stack:
            parent, element = stack.pop()
            yield parent, element
            stack.extend((element, child) for child in reversed(element.children))

    def parent_of(self, element: FavElement) -> FavElement | None:
        """Return the parent of an element; None for a top-level section."""
        for parent, candidate in self._walk():
            if candidate is element:
                return parent
        raise FavoritesError("Element not found in List!")

    # -- validation -------------------------------------------------------

    def name_exists(
        self, parent: FavElement, name: str, exclude: FavElement | None = None
    ) -> bool:
        """Whether a child of ``parent`` other than ``exclude`` has ``name``."""
        return any(
            child.name == name for child in parent.children if child is not exclude
        )

    def check_link(self, link: str, category: Category | int) -> None:
        """Raise if the link target is not valid for the category."""
        try:
            category = Category(category)
        except ValueError:
            raise FavoritesError("Faves element doesn't exist!") from None
        if category is Category.FOLDERS:
            if not os.path.exists(link):
                raise FavoritesError("Folder doesn't exist!")
        elif category in (Category.FILES, Category.SESSIONS):
            if not os.path.exists(link):
                raise FavoritesError("File doesn't exist!")

    def _check_name(
        self, parent: FavElement, name: str, exclude: FavElement | None = None
    ) -> None:
        if self.name_exists(parent, name, exclude):
            raise FavoritesError("Name still exists in node!")

    # -- editing ----------------------------------------------------------

    def add_link(self, parent: FavElement, name: str, link: str) -> FavElement:
        """Add a new link under a section or group and return it."""
        if parent.is_link():
            raise FavoritesError("a link cannot hold other elements")
        category = parent.category()
        self._check_name(parent, name)
        self.check_link(link, category)
        element = FavElement(name=name, link=link, root=category, flags=Flag.LINK)
        parent.children.append(element)
        sort_elements(parent.children)
        return element

    def add_group(self, parent: FavElement, name: str) -> FavElement:
        """Add a new empty group under a section or group and return it."""
        if parent.is_link():
            raise FavoritesError("a link cannot hold other elements")
        self._check_name(parent, name)
        element = FavElement(
            name=name,
            root=parent.category(),
            flags=Flag.USERIMAGE | Flag.GROUP,
        )
        parent.children.append(element)
        sort_elements(parent.children)
        return element

    def rename(self, element: FavElement, name: str) -> None:
        """Give a group or link a new name, unique among its siblings."""
        if element.is_main():
            raise FavoritesError("a top-level section cannot be renamed")
        parent = self.parent_of(element)
        assert parent is not None
        self._check_name(parent, name, element)
        element.name = name
        sort_elements(parent.children)

    def edit_link(self, element: FavElement, name: str, link: str) -> None:
        """Change the name and target of a link."""
        if not element.is_link() or element.is_main():
            raise FavoritesError("only links have a target")
        parent = self.parent_of(element)
        assert parent is not None
        self._check_name(parent, name, element)
        self.check_link(link, element.category())
        element.name = name
        element.link = link
        sort_elements(parent.children)

    def delete(self, element: FavElement) -> None:
        """Remove a group or link and everything below it."""
        if element.is_main():
            raise FavoritesError("a top-level section cannot be deleted")
        parent = self.parent_of(element)
        assert parent is not None
        parent.children[:] = [c for c in parent.children if c is not element]
        element.children.clear()
        if self._clipboard is element:
            self._clipboard = None

    # -- clipboard --------------------------------------------------------

    def copy(self, element: FavElement) -> None:
        """Remember an element to be duplicated by the next paste."""
        self._is_cut = False
        self._clipboard = element

    def cut(self, element: FavElement) -> None:
        """Remember an element to be moved by the next paste."""
        self._is_cut = True
        self._clipboard = element

    def _contains(self, ancestor: FavElement, element: FavElement) -> bool:
        if ancestor is element:
            return True
        return any(self._contains(child, element) for child in ancestor.children)

    def paste(self, target: FavElement) -> FavElement:
        """Copy or move the clipboard element into ``target``; return the new one."""
        source = self._clipboard
        if source is None:
            raise FavoritesError("nothing to paste")
        if target.category() != source.category():
            raise FavoritesError(
                f"Could only be paste into {category_label(source.category())}"
            )
        if target.is_link():
            raise FavoritesError("a link cannot hold other elements")
        source_parent = self.parent_of(source)
        element = source.duplicate()
        if self._is_cut:
            if self._contains(source, target):
                raise FavoritesError("cannot move an element into itself")
            assert source_parent is not None
            source_parent.children[:] = [
                c for c in source_parent.children if c is not source
            ]
        elif source_parent is target:
            element.name = "Copy of " + source.name
        target.children.append(element)
        sort_elements(target.children)
        target.flags |= Flag.EXPAND
        self._clipboard = None
        return element

    # -- presentation -----------------------------------------------------

    def context_menu(self, element: FavElement) -> list[MenuItem | None]:
        """Return the context menu entries; None stands for a separator."""
        has_clip = self._clipboard is not None
        category = element.category()
        items: list[MenuItem | None] = []

        if element.flags & (Flag.MAIN | Flag.GROUP):
            if category is not Category.SESSIONS:
                items += [MenuItem.NEWLINK, MenuItem.NEWGROUP]
            else:
                items += [MenuItem.ADDSESSION, MenuItem.SAVESESSION, MenuItem.NEWGROUP]
            if element.is_group():
                items += [None, MenuItem.COPY, MenuItem.CUT]
                if has_clip:
                    items.append(MenuItem.PASTE)
                items += [MenuItem.DELETE, None, MenuItem.PROPERTIES]
            elif element.is_main() and has_clip:
                items += [None, MenuItem.PASTE]
            return items

        session_child = Flag.SESSION_CHILD in element.flags
        if element.is_link() or session_child:
            items.append(MenuItem.OPEN)
            if category is Category.FILES or session_child:
                items += [
                    MenuItem.OPENOTHERVIEW,
                    MenuItem.OPENNEWINSTANCE,
                    MenuItem.GOTO_FILE_LOCATION,
                ]
            elif category is Category.SESSIONS:
                items += [MenuItem.ADDTOSESSION, MenuItem.SAVESESSION]
            if not session_child:
                items += [
                    None,
                    MenuItem.COPY,
                    MenuItem.CUT,
                    MenuItem.DELETE,
                    None,
                    MenuItem.PROPERTIES,
                ]
            return items

        raise FavoritesError("Element not found in List!")

    def toggle_expand(self, element: FavElement) -> bool:
        """Flip the expand state of an element and return the new state."""
        element.flags ^= Flag.EXPAND
        return element.is_expanded()


def _base_name(path: str) -> str:
    cut = max(path.rfind("\\"), path.rfind("/"))
    return path[cut + 1:]


def session_children(session_files: Iterable[str]) -> list[FavElement]:
    """Build the read-only child elements that list a session's files.

    Files that do not exist are marked with a user image.
    """
    children = []
    for path in session_files:
        flags = Flag.SESSION_CHILD
        if not os.path.exists(path):
            flags |= Flag.USERIMAGE
        children.append(
            FavElement(name=_base_name(path), link=path, root=Category.SESSIONS, flags=flags)
        )
    return children


def session_tooltip(
    element: FavElement,
    session_files: Sequence[str],
    exists: Callable[[str], bool] = os.path.exists,
) -> str | None:
    """Return the tooltip text of an element, or None for the default one."""
    text = element.link
    if element.is_link() and element.category() is Category.SESSIONS:
        count = len(session_files)
        if count > 0:
            missing = sum(1 for path in session_files if not exists(path))
            text += f"\nThis session has {count} files"
            if missing > 0:
                text += f" ({missing} are non-existent)"
            text += "."
    return text or None