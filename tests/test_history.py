import pytest

from tinyshell.history import MAX_HISTORY_SIZE, History
from tinyshell.parsing import ShellError


def test_default_capacity():
    assert History().capacity == MAX_HISTORY_SIZE == 20


def test_invalid_capacity():
    with pytest.raises(ValueError):
        History(0)


def test_add_and_get():
    history = History()
    history.add(["ls"])
    history.add(["cd", "/home"])
    assert len(history) == 2
    assert history.get(1) == ["ls"]
    assert history.get(2) == ["cd", "/home"]


def test_recent_counts_back_from_latest():
    history = History()
    for command in (["a"], ["b"], ["c"]):
        history.add(command)
    assert history.recent(1) == ["c"]
    assert history.recent(3) == ["a"]


@pytest.mark.parametrize("number", [0, 3, -1])
def test_get_out_of_range(number):
    history = History()
    history.add(["a"])
    history.add(["b"])
    with pytest.raises(IndexError):
        history.get(number)


@pytest.mark.parametrize("offset", [0, 2])
def test_recent_out_of_range(offset):
    history = History()
    history.add(["a"])
    with pytest.raises(IndexError):
        history.recent(offset)


def test_full_history_drops_oldest():
    history = History(3)
    for word in ["w1", "w2", "w3", "w4", "w5"]:
        history.add([word])
    assert len(history) == 3
    assert list(history) == [["w3"], ["w4"], ["w5"]]


def test_stored_entries_are_copies():
    history = History()
    tokens = ["echo", "x"]
    history.add(tokens)
    tokens.append("y")
    history.get(1).append("z")
    assert history.get(1) == ["echo", "x"]


def test_format_documented_example():
    history = History()
    history.add(["ls"])
    history.add(["cd", "/home"])
    history.add(["pwd"])
    assert history.format() == "1: ls \n2: cd /home \n3: pwd \n"


def test_format_empty():
    assert History().format() == ""


def test_save_load_round_trip(tmp_path):
    path = tmp_path / ".hist_list"
    history = History()
    history.add(["ls", "-l"])
    history.add(["cd", "/tmp"])
    history.save(path)
    assert path.read_text() == "2\nls -l\ncd /tmp\n"

    restored = History()
    restored.add(["stale"])
    assert restored.load(path) == 2
    assert list(restored) == list(history)


def test_load_respects_count(tmp_path):
    path = tmp_path / "h"
    path.write_text("1\nfirst\nsecond\n")
    history = History()
    assert history.load(path) == 1
    assert list(history) == [["first"]]


def test_load_stops_at_capacity(tmp_path):
    path = tmp_path / "h"
    path.write_text("4\na\nb\nc\nd\n")
    history = History(2)
    assert history.load(path) == 2
    assert list(history) == [["a"], ["b"]]


def test_load_bad_count(tmp_path):
    path = tmp_path / "h"
    path.write_text("many\nls\n")
    with pytest.raises(ShellError, match="history count"):
        History().load(path)


def test_load_missing_file_leaves_history(tmp_path):
    history = History()
    history.add(["keep"])
    with pytest.raises(OSError):
        history.load(tmp_path / "absent")
    assert list(history) == [["keep"]]