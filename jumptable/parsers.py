"""Byte-stream parsers dispatched through jump tables of various key types."""

import sys
from collections.abc import Hashable, Iterable, Sequence

from jumptable.table import JumpTable

TEST_DATA = bytes((0xAA, 0xFE, 0x23, 0x4D, 0x44))


def format_hex(data: Iterable[int]) -> str:
    """Format bytes as comma-separated two-digit upper-case hex."""
    return ", ".join(f"{byte:02X}" for byte in data)


def print_forward(data: bytes) -> int:
    """Print the bytes in order as hex; return how many there were."""
    print(format_hex(data))
    return len(data)


def print_backward(data: bytes) -> int:
    """Print the bytes in reverse order as hex; return how many there were."""
    print(format_hex(reversed(bytes(data))))
    return len(data)


def sum_all(data: bytes) -> int:
    """Print and return the sum of the bytes."""
    total = sum(data)
    print(total)
    return total


def build_tables() -> list[tuple[str, JumpTable]]:
    """Return the demonstration tables, each paired with its title."""
    return [
        ("Implicit integral keys", JumpTable([print_forward, print_backward, sum_all])),
        (
            "Explicit integral keys",
            JumpTable([(3, print_forward), (5, print_backward), (8, sum_all)]),
        ),
        (
            "Float keys",
            JumpTable([(4.6, print_forward), (5.66666, print_backward), (7890.2, sum_all)]),
        ),
        (
            "String keys",
            JumpTable([("forward", print_forward), ("backward", print_backward), ("sum", sum_all)]),
        ),
    ]


def _format_key(key: Hashable) -> str:
    if isinstance(key, float):
        return format(key, "g")
    return str(key)


def run_table(table: JumpTable, name: str) -> None:
    """Print ``name`` and then run every entry of ``table`` on the test data."""
    print(name)
    for key in table.keys():
        print(f"{_format_key(key)}: ", end="")
        func = table[key]
        if func is None:
            print("No function")
        else:
            func(TEST_DATA)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every demonstration table in turn."""
    del argv
    for name, table in build_tables():
        run_table(table, name)
        print()
    sys.stdout.flush()
    return 0