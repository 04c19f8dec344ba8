"""A lookup table that maps keys to callables."""

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any


class JumpTable:
    """Maps keys to callables.

    A table whose keys are all integers is stored as a dense list indexed
    from zero, with ``None`` filling any holes. Any other key type is held in
    a dictionary.

    ``entries`` is either a sequence of callables, which get the keys
    ``0, 1, 2, ...`` implicitly, or a mapping or sequence of ``(key, callable)``
    pairs. Integer pairs may be sparse: the table is sized by the key of the
    last pair, and every other key must fall below it.
    """

    def __init__(self, entries: Iterable[Any] | Mapping[Hashable, Callable] = ()):
        if isinstance(entries, Mapping):
            items = list(entries.items())
            implicit = False
        else:
            items = list(entries)
            implicit = all(callable(item) for item in items)

        self._slots: list[Callable | None] = []
        self._mapping: dict[Hashable, Callable] = {}

        if implicit:
            self._integral = True
            self._slots = list(items)
            return

        pairs = [_as_pair(item) for item in items]
        for _, func in pairs:
            if not callable(func):
                raise TypeError(f"table values must be callable, got {func!r}")

        self._integral = all(isinstance(key, int) for key, _ in pairs)
        if self._integral:
            size = pairs[-1][0] + 1
            if size < 0:
                raise IndexError("Invalid key")
            self._slots = [None] * size
            for key, func in pairs:
                if not 0 <= key < size:
                    raise IndexError("Invalid key")
                self._slots[key] = func
        else:
            for key, func in pairs:
                self._mapping.setdefault(key, func)

    def __getitem__(self, key: Hashable) -> Callable | None:
        """Return the callable for ``key``, or ``None`` if there is none."""
        if self._integral:
            if isinstance(key, int) and 0 <= key < len(self._slots):
                return self._slots[key]
            return None
        return self._mapping.get(key)

    def at(self, key: Hashable) -> Callable:
        """Return the callable for ``key``, raising if there is none.

        Integer tables raise :class:`IndexError` for keys out of range or
        pointing at a hole; other tables raise :class:`KeyError`.
        """
        if self._integral:
            if isinstance(key, int) and 0 <= key < len(self._slots):
                func = self._slots[key]
                if func is not None:
                    return func
            raise IndexError("Invalid key")
        try:
            return self._mapping[key]
        except KeyError:
            raise KeyError(key) from None

    def __len__(self) -> int:
        if self._integral:
            return len(self._slots)
        return len(self._mapping)

    def keys(self) -> list[Hashable]:
        """Return every key of the table, holes of an integer table included."""
        if self._integral:
            return list(range(len(self._slots)))
        return list(self._mapping)


def _as_pair(item: Any) -> tuple[Hashable, Any]:
    try:
        key, func = item
    except (TypeError, ValueError):
        raise TypeError(
            f"expected a callable or a (key, callable) pair, got {item!r}"
        ) from None
    return key, func