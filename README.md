# jumptable

Dispatch tables of callables keyed by integers, floats or strings. The
package also has a numbered menu of functions with descriptions and a few
small commands that use them.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Library use

### `jumptable.table.JumpTable`

A `JumpTable` can be built in three ways:

- From a plain sequence of callables. These get the keys 0, 1, 2 and so on.
- From a sequence of `(key, callable)` pairs.
- From a mapping of keys to callables.

When every key is an integer, the table is dense. Its size is one more than
the key of the last pair, and the positions between the given keys hold no
function. Any other keys are stored in a dictionary. If a key appears more
than once, the first pair with that key is kept. A value that is not
callable raises `TypeError`.

```python
from jumptable.table import JumpTable

ops = JumpTable([abs, str, len])
ops[0](-3)            # 3

sparse = JumpTable([(3, abs), (5, str)])
len(sparse)           # 6
sparse.keys()         # [0, 1, 2, 3, 4, 5]
sparse[4]             # None: no function at this key
sparse.at(3)(-2)      # 2
sparse.at(4)          # raises IndexError

named = JumpTable([("forward", abs), ("sum", sum)])
named["sum"]([1, 2])  # 3
named.at("missing")   # raises KeyError
```

How lookups behave:

- `table[key]` returns the callable, or `None` when the key has no function.
- `table.at(key)` returns the callable, or raises an error when the key has
  no function. On integer tables the error is `IndexError`; on other tables
  it is `KeyError`.
- `len(table)` counts every position of an integer table, including the
  empty ones.
- `table.keys()` returns every key in order, including the empty positions
  of an integer table.

### `jumptable.menu.JumpMenu`

A `JumpMenu` holds `MenuEntry(func, desc)` items, which can also be given as
`(func, desc)` tuples. You select an entry by its position. `format()`
renders the entries as `"<index>: <desc>"` lines. If you pass a `limit`, the
text is cut to at most `limit - 1` characters.

```python
from jumptable.menu import JumpMenu, increment, square

menu = JumpMenu([(increment, "Increment input by 1"), (square, "Squares the input")])
print(menu.format(128), end="")
# 0: Increment input by 1
# 1: Squares the input
menu[1].func(4)       # 16
```

`jumptable.menu.parse_int(text)` parses a command-line integer:

- It accepts an optional sign and decimal digits.
- A `0x` prefix reads the digits as hexadecimal.
- A leading `0` reads the digits as octal.
- It reads digits as far as they go and ignores the rest of the text.
- The result wraps to a signed 32-bit value.
- It raises `ValueError` when the result is zero and the text was not exactly
  `"0"`.

### `jumptable.parsers`

This module has three functions for byte streams. Each one prints its result
and returns a value:

- `print_forward` prints the bytes as comma-separated upper-case hex and
  returns how many bytes there were.
- `print_backward` does the same with the bytes in reverse order.
- `sum_all` prints the sum of the bytes and returns it.

`format_hex` produces the hex text without printing it. `run_table(table,
name)` prints `name` and then calls every entry of a `JumpTable` on the
sample bytes `AA FE 23 4D 44`. For keys that have no function it prints
`No function`.

### `jumptable.demos`

`jump_table_demo(base)` applies `add_one`, `square` and `negate`, held in a
flat `JumpTable`, to `base`. `multijump_demo(base)` applies a two-by-two grid
of `add_one`, `square`, `negate` and `doubler` to `base`. Both return the
report lines as a list of strings.

## Commands

### `jump-menu`

Applies one of four integer operations to an input:

| Number | Operation |
|--------|-----------|
| 0 | increment |
| 1 | decrement |
| 2 | square |
| 3 | negate |

```
jump-menu 2 7        # Result: 49
jump-menu --help
```

How the command reads its arguments:

- Both arguments are parsed with `parse_int`.
- If the operation number or the input is missing, the command asks for it
  on standard input.
- A negative input given on the command line counts as missing, so the
  command asks for it.
- More than two arguments, an argument that cannot be parsed, a selection
  out of range, or unreadable input from standard input all print an error
  message. The command then exits with status 1.

### `jump-parsers`

Runs the byte-stream parsers from tables with four kinds of keys. Each
table's output is printed under its title:

- implicit integer keys
- explicit sparse integer keys (3, 5 and 8); the keys in between print
  `No function`
- float keys
- string keys

```
jump-parsers
```

### Demos

These two commands print the output of `jump_table_demo(5)` and
`multijump_demo(5)`:

```
jump-table-demo
multijump-demo
```

## Limits

- The operations offered by `jump-menu` are fixed.
- The command cannot be configured with other functions.
- `jump-parsers` works only on its built-in sample bytes. It does not read
  input from files or streams.