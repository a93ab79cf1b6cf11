"""Person names and friendship pairs.

Names are the only identity a person has: case-sensitive, compared by
value. The graph itself accepts any string, but names that must survive
the adjacency-list text format cannot be empty and cannot contain
whitespace or the ``:`` separator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Anything that would split a name when the saved file is read back.
_UNSAFE_NAME = re.compile(r"[\s:]")


def is_valid_name(name: str) -> bool:
    """Return True if *name* round-trips through the adjacency-list format."""
    return bool(name) and _UNSAFE_NAME.search(name) is None


def invalid_names(names: list[str]) -> list[str]:
    """Return the subset of *names* that fail :func:`is_valid_name`, in order."""
    return [n for n in names if not is_valid_name(n)]


@dataclass(frozen=True, order=True)
class Friendship:
    """An unordered, unweighted relationship between two distinct people.

    Endpoints are stored in sorted order so ``Friendship("B", "A")`` and
    ``Friendship("A", "B")`` compare and hash equal.
    """

    first: str
    second: str

    def __post_init__(self) -> None:
        if self.first == self.second:
            msg = f"A friendship needs two distinct people, got {self.first!r} twice"
            raise ValueError(msg)
        if self.second < self.first:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)

    def involves(self, name: str) -> bool:
        return name in (self.first, self.second)

    def other(self, name: str) -> str:
        """Return the endpoint that is not *name*."""
        if name == self.first:
            return self.second
        if name == self.second:
            return self.first
        msg = f"{name!r} is not part of {self}"
        raise ValueError(msg)

    def as_tuple(self) -> tuple[str, str]:
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"{self.first} - {self.second}"
