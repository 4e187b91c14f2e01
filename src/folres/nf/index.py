"""Predicate index: atoms grouped by predicate name."""

from typing import Callable, Dict, FrozenSet, Iterable, Iterator, KeysView, Mapping, Optional, Tuple

from folres.core.logic import Pred, Term, sort_key


Args = Tuple[Term, ...]


class PredicateIndex:
    """Immutable mapping from predicate name to the argument tuples used with it.

    An index stands for a set of atoms. All operations return new indices;
    names without any argument tuple are never stored, so two indices
    holding the same atoms are equal.
    """

    __slots__ = ('_entries', '_hash')

    def __init__(self, entries: Optional[Mapping[int, Iterable[Args]]] = None):
        self._entries: Dict[int, FrozenSet[Args]] = {}
        for name, args in (entries or {}).items():
            args = frozenset(tuple(a) for a in args)
            if args:
                self._entries[name] = args
        self._hash = None

    @classmethod
    def of(cls, atoms: Iterable[Pred]) -> 'PredicateIndex':
        entries: Dict[int, set] = {}
        for atom in atoms:
            entries.setdefault(atom.name, set()).add(atom.args)
        return cls(entries)

    def insert(self, atom: Pred) -> 'PredicateIndex':
        if self.contains(atom):
            return self
        entries = dict(self._entries)
        entries[atom.name] = self.get(atom.name) | {atom.args}
        return PredicateIndex(entries)

    def remove(self, atom: Pred) -> 'PredicateIndex':
        if not self.contains(atom):
            return self
        entries = dict(self._entries)
        entries[atom.name] = self._entries[atom.name] - {atom.args}
        return PredicateIndex(entries)

    def contains(self, atom: Pred) -> bool:
        return atom.args in self._entries.get(atom.name, ())

    def get(self, name: int) -> FrozenSet[Args]:
        return self._entries.get(name, frozenset())

    def names(self) -> KeysView[int]:
        return self._entries.keys()

    def has_name(self, name: int) -> bool:
        return name in self._entries

    def atoms(self) -> Iterator[Pred]:
        """Iterate over the atoms in a deterministic order."""
        for name in sorted(self._entries):
            for args in sorted(self._entries[name], key=sort_key):
                yield Pred(name, args)

    def union(self, other: 'PredicateIndex') -> 'PredicateIndex':
        entries = dict(self._entries)
        for name, args in other._entries.items():
            entries[name] = entries.get(name, frozenset()) | args
        return PredicateIndex(entries)

    def intersection(self, other: 'PredicateIndex') -> 'PredicateIndex':
        return PredicateIndex({
            name: args & other.get(name)
            for name, args in self._entries.items()
        })

    def map_args(self, function: Callable[[Args], Args]) -> 'PredicateIndex':
        """Rebuild the index with ``function`` applied to every argument tuple."""
        return PredicateIndex({
            name: {function(args) for args in argss}
            for name, argss in self._entries.items()
        })

    def is_empty(self) -> bool:
        return not self._entries

    def is_disjoint(self, other: 'PredicateIndex') -> bool:
        for name, args in self._entries.items():
            if not args.isdisjoint(other.get(name)):
                return False
        return True

    def __contains__(self, atom: Pred) -> bool:
        return self.contains(atom)

    def __iter__(self) -> Iterator[Pred]:
        return self.atoms()

    def __len__(self) -> int:
        return sum(len(args) for args in self._entries.values())

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other):
        if not isinstance(other, PredicateIndex):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._entries.items()))
        return self._hash

    def __repr__(self):
        return f"PredicateIndex({list(self.atoms())!r})"
