"""Small demonstrations of single and two-dimensional jump tables."""

from collections.abc import Sequence

from jumptable.table import JumpTable


def add_one(x: int) -> int:
    return x + 1


def square(x: int) -> int:
    return x * x


def negate(x: int) -> int:
    return -x


def doubler(x: int) -> int:
    return x * 2


def jump_table_demo(base: int = 5) -> list[str]:
    """Apply each function of a flat table to ``base``; return report lines."""
    table = JumpTable([add_one, square, negate])
    lines = [f"Size: {len(table)}. Using {base} as a base..."]
    lines.extend(f"Func {key} result: {table.at(key)(base)}" for key in table.keys())
    return lines


def multijump_demo(base: int = 5) -> list[str]:
    """Apply each function of a 2x2 table to ``base``; return report lines."""
    grid = (
        (add_one, square),
        (negate, doubler),
    )
    lines = [f"Using {base} as a base..."]
    lines.extend(
        f"Func [{row},{col}] result: {func(base)}"
        for row, funcs in enumerate(grid)
        for col, func in enumerate(funcs)
    )
    return lines


def jump_table_main(argv: Sequence[str] | None = None) -> int:
    """Print the flat table demonstration."""
    del argv
    for line in jump_table_demo(5):
        print(line)
    return 0


def multijump_main(argv: Sequence[str] | None = None) -> int:
    """Print the two-dimensional table demonstration."""
    del argv
    for line in multijump_demo(5):
        print(line)
    return 0