import os

import pytest

from favexplorer.dir_history import DirHistory
from favexplorer.file_entries import Column
from favexplorer.file_list import FileList, ListOptions, find_next_item


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "alpha").mkdir()
    (tmp_path / "beta").mkdir()
    (tmp_path / "b.txt").write_text("bb")
    (tmp_path / "a.py").write_text("a")
    (tmp_path / "c.md").write_text("ccc")
    return tmp_path


@pytest.fixture
def flist(tree):
    fl = FileList(ListOptions(), DirHistory())
    fl.view_path(tree)
    return fl


def names(fl):
    return [e.name for e in fl.entries()]


def test_view_path_orders_parent_folders_files(flist):
    assert names(flist) == ["..", "alpha", "beta", "a", "b", "c"]
    assert flist.folder_count() == 3
    assert flist.entries()[0].is_parent


def test_view_path_records_history(flist, tree):
    assert flist.history.paths == [str(tree)]
    assert flist.current_path == str(tree)


def test_view_missing_directory_raises(tmp_path):
    fl = FileList()
    with pytest.raises(OSError):
        fl.view_path(tmp_path / "nothing")


def test_sort_by_extension_then_toggle(flist):
    flist.sort_by(Column.EXTENSION)
    assert names(flist)[3:] == ["c", "a", "b"]
    flist.sort_by(Column.EXTENSION)
    assert flist.options.ascending is False
    assert names(flist)[3:] == ["b", "a", "c"]
    assert names(flist)[:3] == ["..", "alpha", "beta"]


def test_sort_keeps_selection(flist):
    flist.select_file("c.md")
    flist.sort_by(Column.EXTENSION)
    selected = [flist.entries()[i].name_ext for i in flist.selection]
    assert selected == ["c.md"]
    assert flist.entries()[flist.focus].name_ext == "c.md"


def test_set_filter(flist):
    flist.set_filter(lambda n: n.endswith(".py"))
    assert names(flist) == ["..", "alpha", "beta", "a"]
    assert len(flist.history) == 1


def test_select_file_and_paths(flist, tree):
    index = flist.select_file("b.txt")
    assert flist.entries()[index].name_ext == "b.txt"
    assert flist.selected_paths() == [os.path.join(str(tree), "b.txt")]
    assert flist.select_file("missing.txt") is None


def test_select_folder_ignores_case(flist, tree):
    index = flist.select_folder("ALPHA")
    assert index == 1
    assert flist.selected_paths() == [os.path.join(str(tree), "alpha") + os.sep]


def test_no_selection_gives_current_path(flist, tree):
    assert flist.selected_paths() == [str(tree)]


def test_select_all_skips_parent(flist):
    flist.select_all()
    assert 0 not in flist.selection
    assert len(flist.selected_paths()) == len(flist.entries()) - 1


def test_selection_is_stored_in_history(flist):
    flist.select_file("a.py")
    assert flist.history.current.selection == ["a.py"]


def test_type_ahead(flist):
    assert flist.type_ahead("B") == 2
    assert flist.type_ahead("e") == 2
    flist.reset_search()
    found = flist.type_ahead("b")
    assert flist.entries()[found].name == "b"


def test_type_ahead_no_match(flist):
    assert flist.type_ahead("z") is None
    assert flist.selection == []


def test_find_next_item():
    items = ["a", "Bee", "c"]
    assert find_next_item(items, "a", 0) == 0
    assert find_next_item(items, "a", 2) == 0
    assert find_next_item(items, "a", 1) is None
    assert find_next_item(items, "be", 0) == 1
    assert find_next_item(items, "c", 2) == 2
    assert find_next_item(items, "x", 0) is None


def test_back_and_forward(flist, tree):
    flist.select_file("a.py")
    flist.view_path(tree / "alpha")
    assert flist.history.paths == [str(tree), str(tree / "alpha")]
    assert flist.go_back() == str(tree)
    assert flist.current_path == str(tree)
    assert [flist.entries()[i].name_ext for i in flist.selection] == ["a.py"]
    assert flist.history.recording is True
    assert flist.go_back() is None
    assert flist.go_forward() == str(tree / "alpha")
    assert flist.go_forward() is None
    assert len(flist.history) == 2