import pytest

from tinyshell.aliases import MAX_ALIAS, AliasTable
from tinyshell.parsing import ShellError


def test_default_capacity():
    assert AliasTable().capacity == MAX_ALIAS == 10


def test_add_new_and_lookup():
    table = AliasTable()
    assert table.add("ll", ["ls", "-l"]) is False
    assert "ll" in table
    assert table.lookup("ll") == ["ls", "-l"]
    assert len(table) == 1


def test_add_overwrites_in_place():
    table = AliasTable()
    table.add("a", ["one"])
    table.add("b", ["two"])
    assert table.add("a", ["three", "x"]) is True
    assert list(table) == [("a", ["three", "x"]), ("b", ["two"])]


def test_add_without_command():
    with pytest.raises(ShellError, match="alias name command"):
        AliasTable().add("x", [])


def test_full_table_rejects_new_but_allows_overwrite():
    table = AliasTable(2)
    table.add("a", ["1"])
    table.add("b", ["2"])
    with pytest.raises(ShellError, match="No more aliases can be set."):
        table.add("c", ["3"])
    assert table.add("b", ["4"]) is True
    assert table.lookup("b") == ["4"]


def test_remove_moves_last_into_gap():
    table = AliasTable()
    for name in ["a", "b", "c"]:
        table.add(name, [name.upper()])
    table.remove("a")
    assert [name for name, _ in table] == ["c", "b"]
    assert "a" not in table


def test_remove_last_entry():
    table = AliasTable()
    table.add("a", ["A"])
    table.add("b", ["B"])
    table.remove("b")
    assert list(table) == [("a", ["A"])]


def test_remove_from_empty():
    with pytest.raises(ShellError, match="Alias list is empty"):
        AliasTable().remove("x")


def test_remove_unknown():
    table = AliasTable()
    table.add("a", ["A"])
    with pytest.raises(ShellError, match="Alias does not exist"):
        table.remove("x")
    assert len(table) == 1


def test_lookup_unknown():
    with pytest.raises(KeyError):
        AliasTable().lookup("nope")


def test_format():
    table = AliasTable()
    table.add("ll", ["ls", "-l"])
    table.add("up", ["cd", ".."])
    assert table.format() == "1: ll ls -l \n2: up cd .. \n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / ".aliases"
    table = AliasTable()
    table.add("ll", ["ls", "-l"])
    table.add("home", ["cd"])
    table.save(path)
    assert path.read_text() == "2\nll ls -l\nhome cd\n"

    restored = AliasTable()
    restored.add("old", ["x"])
    assert restored.load(path) == 2
    assert list(restored) == list(table)


def test_load_respects_capacity(tmp_path):
    path = tmp_path / "a"
    path.write_text("3\na 1\nb 2\nc 3\n")
    table = AliasTable(2)
    assert table.load(path) == 2
    assert [name for name, _ in table] == ["a", "b"]


def test_load_bad_count(tmp_path):
    path = tmp_path / "a"
    path.write_text("\n")
    with pytest.raises(ShellError, match="alias count"):
        AliasTable().load(path)