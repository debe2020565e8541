"""Map from node keys to dense values backed by an external list, and a line scanner."""

from __future__ import annotations

import re
from collections.abc import Iterator

from graphpart.definitions import INVALID_PARTITION

_NUMBER = re.compile(r"[0-9]+")


class BufferedMap:
    """Assigns consecutive values to keys, storing the values in a shared list.

    Keys without a value hold ``INVALID_PARTITION`` in the shared list. When the
    list is preassigned, every key counts as present and ``clear`` leaves it alone.
    """

    def __init__(self, key_to_value: list[int], preassigned: bool) -> None:
        self.key_to_value = key_to_value
        self.preassigned = preassigned
        self.value_to_key: list[int] = []

    def has_key(self, key: int) -> bool:
        return self.preassigned or self.key_to_value[key] != INVALID_PARTITION

    def __getitem__(self, key: int) -> int:
        return self.key_to_value[key]

    def push_back(self, key: int, value: int) -> None:
        """Store ``value`` for ``key``; the value is expected to be the next index."""
        self.key_to_value[key] = value
        self.value_to_key.append(key)

    def clear(self) -> None:
        if not self.preassigned:
            for key in self.value_to_key:
                self.key_to_value[key] = INVALID_PARTITION
        self.value_to_key.clear()

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield ``(key, value)`` pairs in the order they were added."""
        for value, key in enumerate(self.value_to_key):
            yield key, value


class BufferedInput:
    """Reads runs of decimal digits from a list of text lines, one line per call."""

    def __init__(self, lines: list[str], cursor: int = 0, n_buffer_lines: int = 1) -> None:
        self.lines = lines
        self.row = cursor
        self.n_buffer_lines = n_buffer_lines

    def simple_scan_line(self) -> list[int]:
        """Return the numbers on the current line and move to the next one."""
        numbers = [int(token) for token in _NUMBER.findall(self.lines[self.row])]
        self.row += 1
        return numbers