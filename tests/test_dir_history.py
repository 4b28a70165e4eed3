import pytest

from favexplorer.dir_history import DirHistory, HistoryEntry


def _history(*paths, max_size=50):
    history = DirHistory(max_size)
    for path in paths:
        history.push(path)
    return history


def test_empty_history_cannot_move():
    history = DirHistory()
    assert history.back() is None
    assert history.forward() is None
    assert not history.can_undo()
    assert not history.can_redo()
    assert history.current is None


def test_push_and_back_forward():
    history = _history("C:\\a\\", "C:\\b\\", "C:\\c\\")
    assert history.can_undo()
    assert not history.can_redo()
    entry = history.back()
    assert entry == HistoryEntry("C:\\b\\", [])
    assert history.can_redo()
    assert history.back().path == "C:\\a\\"
    assert history.back() is None
    assert not history.can_undo()
    assert history.forward().path == "C:\\b\\"
    assert history.forward().path == "C:\\c\\"
    assert history.forward() is None


def test_single_entry_does_not_move():
    history = _history("C:\\a\\")
    assert history.back() is None
    assert history.previous_dirs() == []
    assert history.next_dirs() == []


def test_push_after_back_drops_newer_entries():
    history = _history("a", "b", "c")
    history.back()
    history.back()
    history.push("d")
    assert history.paths == ["a", "d"]
    assert not history.can_redo()


def test_push_same_path_case_insensitive_is_not_duplicated():
    history = _history("C:\\Dir\\", "c:\\dir\\")
    assert history.paths == ["C:\\Dir\\"]


def test_push_same_as_current_after_back_keeps_position():
    history = _history("a", "b", "c")
    history.back()
    history.push("B")
    assert history.paths == ["a", "b"]
    assert history.current.path == "b"


def test_max_size_trims_oldest():
    history = _history("a", "b", "c", "d", "e", max_size=2)
    assert history.paths == ["c", "d", "e"]
    assert len(history) == 3
    assert history.current.path == "e"


def test_previous_and_next_dirs_nearest_first():
    history = _history("a", "b", "c", "d")
    history.back()
    assert history.previous_dirs() == ["b", "a"]
    assert history.next_dirs() == ["d"]


def test_offset_moves_position():
    history = _history("a", "b", "c", "d")
    entry = history.offset(-3)
    assert entry.path == "a"
    assert history.next_dirs() == ["b", "c", "d"]
    assert history.offset(2).path == "c"


def test_offset_out_of_range_raises():
    history = _history("a", "b")
    with pytest.raises(IndexError):
        history.offset(1)
    with pytest.raises(IndexError):
        history.offset(-2)


def test_toggle_recording_stops_push():
    history = _history("a")
    assert history.toggle_recording() is False
    history.push("b")
    assert history.paths == ["a"]
    assert history.toggle_recording() is True
    history.push("b")
    assert history.paths == ["a", "b"]


def test_selection_is_remembered_and_copied():
    history = _history("a")
    history.set_selection(["x.txt", "y.txt"])
    history.push("b")
    entry = history.back()
    assert entry.selection == ["x.txt", "y.txt"]
    entry.selection.append("z")
    assert history.current.selection == ["x.txt", "y.txt"]


def test_selection_ignored_when_not_recording():
    history = _history("a")
    history.toggle_recording()
    history.set_selection(["x"])
    assert history.current.selection == []


def test_reset_clears():
    history = _history("a", "b")
    history.reset()
    assert history.paths == []
    assert not history.can_undo()
    history.push("c")
    assert history.paths == ["c"]


def test_negative_max_size_rejected():
    with pytest.raises(ValueError):
        DirHistory(-1)