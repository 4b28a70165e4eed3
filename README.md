# favexplorer

This package is the data layer of a file explorer side panel. It has two parts.

- **Favorites tree.** The tree holds folders, files, web links and sessions. Entries can be arranged in nested groups. The tree is stored in a small UTF-16 text file.
- **Directory listing.** The listing has sortable columns, size and date formatting, type-ahead search and back/forward history.

It needs only the standard library.

## Installation

```
pip install favexplorer
```

## Favorites

The modules for the favorites tree are:

- `favexplorer.favorites_model`, which defines the data types: `Category`, `Flag` and `FavElement`. It also has the helpers `make_roots`, `sort_elements` and `category_label`.
- `favexplorer.favorites_store`, which reads and writes the data file. Its functions are `load_favorites`, `save_favorites`, `parse_favorites` and `format_favorites`.
- `favexplorer.favorites`, whose `Favorites` class edits the tree in memory.

```python
from favexplorer.favorites_model import Category
from favexplorer.favorites_store import load_favorites, save_favorites
from favexplorer.favorites import Favorites

roots = load_favorites("Favorites.dat")   # a missing file gives four empty sections
faves = Favorites(roots)

web = faves.root(Category.WEB)
group = faves.add_group(web, "Docs")
faves.add_link(group, "Python", "https://docs.python.org")

save_favorites("Favorites.dat", roots)
```

The editing methods raise `FavoritesError` in these cases:

- a name is already used among the siblings;
- a folder, file or session link points to a path that does not exist;
- an operation does not apply to the element. For example, deleting a top-level section raises it.

A malformed data file raises `FavoritesFormatError`.

### Other `Favorites` methods

- `find(group_path)` follows a list of names down from the top level.
- `parent_of(element)` returns the parent of an element.
- `rename` changes a name.
- `edit_link` changes a name and a target.
- `delete` removes an element and everything below it.
- `copy` or `cut`, followed by `paste(target)`, duplicates or moves an element. Pasting a copy into its own parent prefixes the name with "Copy of ".
- `context_menu(element)` returns the `MenuItem` entries that suit the element. `None` marks a separator.
- `toggle_expand(element)` flips the expand flag.

### Sessions

For session favorites there are two functions:

- `session_children(paths)` builds child elements for the files of a session. Missing files are marked with `Flag.USERIMAGE`.
- `session_tooltip(element, paths)` builds the hover text, including the number of missing files.

## Directory listing

```python
from favexplorer.file_list import FileList, ListOptions
from favexplorer.dir_history import DirHistory

listing = FileList(ListOptions(view_long=True), DirHistory(max_size=50))
listing.view_path("/home/me/projects")

for entry in listing.entries():
    print(entry.name, entry.ext, entry.size_text, entry.date_text)

listing.sort_by(2)          # sort by the size column; again to reverse
listing.type_ahead("s")     # focus the next entry whose name starts with "s"
print(listing.selected_paths())
listing.go_back()           # show the previous directory and restore its selection
```

### `ListOptions`

`ListOptions` controls:

- long view, with size and date columns;
- whether the extension is kept in the name;
- brackets around folder names;
- the size format (`SizeFormat`) and the date format (`DateFormat`);
- the sort column and sort direction;
- an optional `match` callable that filters file names.

### `DirHistory`

`DirHistory` keeps at most `max_size + 1` visited directories. It offers `back`, `forward`, `offset`, `previous_dirs`, `next_dirs`, `can_undo` and `can_redo`.

### Helper functions

The lower-level helpers are in `favexplorer.file_entries`:

- `format_size`
- `format_date`
- `split_name`
- `scan_directory`
- `sort_entries`
- `cell_text`

`favexplorer.file_list.find_next_item` does the wrap-around prefix search used by type-ahead.

## What this package does not do

It only models the data. It has no window, tree view or list view, and no command-line program. Nothing here opens files in an editor, loads or saves editor sessions, launches a browser, or copies, moves or deletes files on disk. Those actions are left to the application that uses these models.

## Tests

```
pip install "favexplorer[test]"
pytest
```