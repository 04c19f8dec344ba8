import pytest

from jumptable.table import JumpTable


def first(x):
    return ("first", x)


def second(x):
    return ("second", x)


def third(x):
    return ("third", x)


def test_implicit_integer_keys():
    table = JumpTable([first, second, third])
    assert len(table) == 3
    assert table.keys() == [0, 1, 2]
    assert table[1] is second
    assert table.at(2) is third


def test_implicit_getitem_out_of_range_returns_none():
    table = JumpTable([first, second])
    assert table[2] is None
    assert table[-1] is None


def test_implicit_at_out_of_range_raises():
    table = JumpTable([first, second])
    with pytest.raises(IndexError):
        table.at(2)
    with pytest.raises(IndexError):
        table.at(-1)


def test_sparse_integer_keys_fill_holes():
    table = JumpTable([(3, first), (5, second), (8, third)])
    assert len(table) == 8 + 1
    assert table.keys() == list(range(len(table)))
    assert table[3] is first
    assert table[5] is second
    assert table[8] is third
    assert table[0] is None
    assert table[4] is None


def test_sparse_hole_at_raises():
    table = JumpTable([(3, first), (5, second)])
    with pytest.raises(IndexError):
        table.at(4)
    assert table.at(5) is second


def test_sparse_key_beyond_last_raises():
    with pytest.raises(IndexError):
        JumpTable([(9, first), (2, second)])


def test_integer_duplicate_key_last_wins():
    table = JumpTable([(1, first), (1, second)])
    assert table[1] is second


def test_string_keys():
    table = JumpTable([("forward", first), ("backward", second), ("sum", third)])
    assert len(table) == 3
    assert table.keys() == ["forward", "backward", "sum"]
    assert table["sum"] is third
    assert table["missing"] is None
    with pytest.raises(KeyError):
        table.at("missing")


def test_float_keys():
    table = JumpTable([(4.6, first), (5.66666, second), (7890.2, third)])
    assert table.keys() == [4.6, 5.66666, 7890.2]
    assert table.at(5.66666) is second
    assert table[1.0] is None


def test_mapping_input():
    table = JumpTable({"a": first, "b": second})
    assert table.at("a")(7) == first(7)
    assert table.keys() == ["a", "b"]


def test_mapping_with_integer_keys_is_dense():
    table = JumpTable({0: first, 2: second})
    assert table.keys() == list(range(len(table)))
    assert table[1] is None


def test_non_integer_duplicate_key_first_wins():
    table = JumpTable([("k", first), ("k", second)])
    assert table.at("k") is first
    assert len(table) == 1


def test_non_callable_value_raises():
    with pytest.raises(TypeError):
        JumpTable([("k", 42)])


def test_empty_table():
    table = JumpTable([])
    assert len(table) == 0
    assert table.keys() == []
    with pytest.raises(IndexError):
        table.at(0)