import pytest

from jumptable.demos import (
    add_one,
    doubler,
    jump_table_demo,
    jump_table_main,
    multijump_demo,
    multijump_main,
    negate,
    square,
)


@pytest.mark.parametrize("x", [-4, 0, 3, 100])
def test_function_invariants(x):
    assert add_one(x) - x == 1
    assert doubler(x) == x + x
    assert negate(negate(x)) == x
    assert square(x) == square(negate(x))


def test_jump_table_demo_header():
    lines = jump_table_demo(5)
    assert lines[0] == "Size: 3. Using 5 as a base..."
    assert len(lines) == 4


def test_jump_table_demo_results():
    lines = jump_table_demo(7)
    assert lines[1] == f"Func 0 result: {add_one(7)}"
    assert lines[2] == f"Func 1 result: {square(7)}"
    assert lines[3] == f"Func 2 result: {negate(7)}"


def test_multijump_demo_results():
    lines = multijump_demo(5)
    assert lines[0] == "Using 5 as a base..."
    assert lines[1:] == [
        f"Func [0,0] result: {add_one(5)}",
        f"Func [0,1] result: {square(5)}",
        f"Func [1,0] result: {negate(5)}",
        f"Func [1,1] result: {doubler(5)}",
    ]


def test_multijump_doubler_value():
    assert multijump_demo(5)[-1] == "Func [1,1] result: 10"


def test_jump_table_main_prints_demo(capsys):
    assert jump_table_main([]) == 0
    assert capsys.readouterr().out == "\n".join(jump_table_demo(5)) + "\n"


def test_multijump_main_prints_demo(capsys):
    assert multijump_main([]) == 0
    assert capsys.readouterr().out == "\n".join(multijump_demo(5)) + "\n"