"""Name allocation and the reverse name table used for display."""

from typing import Dict, Iterator, Optional


class NameAllocator:
    """Hands out fresh integer names in increasing order.

    One allocator is shared by everything that introduces names for a single
    problem (the parser, Skolemization, Tseitin definitions), so that two
    distinct symbols never end up with the same name.
    """

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"Names must be non-negative, got {start}")
        self._next = start

    def fresh(self) -> int:
        """Return a name that has not been handed out before."""
        name = self._next
        self._next += 1
        return name

    def peek(self) -> int:
        return self._next

    def reserve(self, bound: int):
        """Make sure no name below ``bound`` is handed out from now on."""
        if bound > self._next:
            self._next = bound

    def __repr__(self):
        return f"NameAllocator(next={self._next})"


class NameTable:
    """Maps names back to the identifiers they were parsed from."""

    def __init__(self, entries: Optional[Dict[int, str]] = None):
        self._entries: Dict[int, str] = dict(entries or {})

    def bind(self, name: int, text: str):
        self._entries[name] = text

    def lookup(self, name: int) -> Optional[str]:
        return self._entries.get(name)

    def __contains__(self, name: int) -> bool:
        return name in self._entries

    def __getitem__(self, name: int) -> str:
        return self._entries[name]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"NameTable({self._entries!r})"
