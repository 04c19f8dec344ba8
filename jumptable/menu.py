"""A numbered menu of operations and a command that runs one of them."""

import os
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from string import hexdigits
from typing import TextIO

OPTIONS_LIMIT = 128

_ULONG_MAX = 2**64 - 1
_SPACE = " \t\n\v\f\r"
_SCAN_INT = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class MenuEntry:
    """A callable together with a description shown in the menu."""

    func: Callable
    desc: str


class JumpMenu:
    """An ordered list of menu entries, selected by position."""

    def __init__(self, entries: Iterable[MenuEntry | tuple[Callable, str]]):
        self._entries = [
            entry if isinstance(entry, MenuEntry) else MenuEntry(*entry)
            for entry in entries
        ]

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> MenuEntry:
        return self._entries[index]

    def format(self, limit: int | None = None) -> str:
        """Render the menu as ``"<index>: <desc>"`` lines.

        With ``limit``, the text is cut to fit a buffer of that many
        characters including its terminator, i.e. at most ``limit - 1``.
        """
        text = "".join(
            f"{index}: {entry.desc}\n" for index, entry in enumerate(self._entries)
        )
        if limit is None or len(text) < limit:
            return text
        return text[: max(limit - 1, 0)]


def increment(x: int) -> int:
    return x + 1


def decrement(x: int) -> int:
    return x - 1


def square(x: int) -> int:
    return x * x


def negate(x: int) -> int:
    return -x


DEFAULT_MENU = JumpMenu(
    [
        (increment, "Increment input by 1"),
        (decrement, "Decrement input by 1"),
        (square, "Squares the input"),
        (negate, "Negates the input"),
    ]
)


def parse_int(text: str) -> int:
    """Parse a command-line integer.

    Accepts decimal, ``0x`` hexadecimal and ``0`` octal prefixes and an
    optional sign, reading digits as far as they go. The result is wrapped
    to a signed 32-bit value. A result of zero from anything but ``"0"`` is
    rejected with :class:`ValueError`.
    """
    rest = text.lstrip(_SPACE)
    negative = False
    if rest[:1] in ("+", "-") and rest:
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest[:2].lower() == "0x" and rest[2:3] and rest[2] in hexdigits:
        base, body, allowed = 16, rest[2:], hexdigits
    elif rest.startswith("0"):
        base, body, allowed = 8, rest, "01234567"
    else:
        base, body, allowed = 10, rest, "0123456789"

    digits = ""
    for char in body:
        if char not in allowed:
            break
        digits += char

    magnitude = int(digits, base) if digits else 0
    if magnitude == 0 and text != "0":
        raise ValueError(f"not an integer: {text!r}")

    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    elif negative:
        value = (-magnitude) % (_ULONG_MAX + 1)
    else:
        value = magnitude

    low = value % 2**32
    return low - 2**32 if low >= 2**31 else low


def usage(progname: str, options: str) -> str:
    """Return the help text for the menu command."""
    return (
        f"Usage: {progname} [options] [operation] [input]\n"
        "Options:\n"
        "  -h, --help     Display this help message\n"
        "\nProvide up to two integer arguments. Non-integer arguments will be rejected.\n"
        "Missing args will be requested via prompt\n"
        f"Operations:\n{options}"
    )


class _Scanner:
    """Reads whitespace-separated integers from a text stream on demand."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._buffer = ""

    def read_int(self) -> int | None:
        while not self._buffer.strip(_SPACE):
            line = self._stream.readline()
            if not line:
                return None
            self._buffer += line
        self._buffer = self._buffer.lstrip(_SPACE)
        match = _SCAN_INT.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())


def main(argv: Sequence[str] | None = None) -> int:
    """Run an operation from the default menu; prompt for missing arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    progname = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "jump-menu"
    menu = DEFAULT_MENU
    options = menu.format(OPTIONS_LIMIT)

    if any(arg in ("-h", "--help") for arg in args):
        print(usage(progname, options), end="")
        return 0

    if len(args) > 2:
        print("Error: Too many arguments. Provide at most two integers.")
        return 1

    selection = -1
    value = -1

    if args:
        try:
            selection = parse_int(args[0])
        except ValueError:
            print(f"Bad option selection '{args[0]}'")
            return 1

    if len(args) > 1:
        try:
            value = parse_int(args[1])
        except ValueError:
            print(f"Bad input '{args[1]}'")
            return 1

    scanner = _Scanner(sys.stdin)

    if selection < 0:
        print(f"Please select an option\n{options}", end="")
        read = scanner.read_int()
        selection = -1 if read is None else read
    if not 0 <= selection < len(menu):
        print("Selection out of bounds")
        return 1

    entry = menu[selection]

    if value < 0:
        print(f"Please provide an input for '{entry.desc}'")
        read = scanner.read_int()
        if read is None:
            print("Input not recognized as an integral value")
            return 1
        value = read

    print(f"Result: {entry.func(value)}")
    return 0