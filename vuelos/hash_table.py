"""A closed-addressing hash map with linear probing and tombstones."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")

_INITIAL_SIZE = 100
_MAX_LOAD = 0.7
_MIN_LOAD = 0.1
_SCALE = 2
_MISSING_KEY_MESSAGE = "La clave no pertenece al diccionario"
_EXHAUSTED_MESSAGE = "El iterador termino de iterar"

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MASK_64 = (1 << 64) - 1


def _fnv1a(data: bytes) -> int:
    """FNV-1a over the given bytes, with 64-bit wrapping arithmetic."""
    value = _FNV_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK_64
    return value


class _Tombstone:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


_DELETED = _Tombstone()


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


_Slot = Union[None, _Tombstone, _Entry]


class HashMap(Generic[K, V]):
    """A hash map whose keys are hashed by their string form.

    Missing keys raise KeyError. The table grows when the share of used and
    deleted slots passes 0.7 and shrinks when it drops under 0.1.
    """

    def __init__(self) -> None:
        self._table: List[_Slot] = [None] * _INITIAL_SIZE
        self._count = 0
        self._deleted = 0

    def _find(self, key: K) -> int:
        size = len(self._table)
        index = _fnv1a(str(key).encode()) % size
        while True:
            slot = self._table[index]
            if slot is None or (isinstance(slot, _Entry) and slot.key == key):
                return index
            index = (index + 1) % size

    def _locate(self, key: K) -> Tuple[int, Optional[_Entry]]:
        index = self._find(key)
        slot = self._table[index]
        if isinstance(slot, _Entry) and slot.key == key:
            return index, slot
        return index, None

    def _load(self) -> float:
        return (self._count + self._deleted) / len(self._table)

    def _resize(self, new_size: int) -> None:
        old_table = self._table
        self._table = [None] * new_size
        self._count = 0
        self._deleted = 0
        for slot in old_table:
            if isinstance(slot, _Entry):
                self.put(slot.key, slot.value)

    def put(self, key: K, value: V) -> None:
        """Store value under key, replacing any previous value."""
        index, entry = self._locate(key)
        if entry is None:
            self._table[index] = _Entry(key, value)
            self._count += 1
        else:
            entry.value = value
        if self._load() > _MAX_LOAD:
            self._resize(len(self._table) * _SCALE)

    def contains(self, key: K) -> bool:
        """Return True if key is stored."""
        return self._locate(key)[1] is not None

    def get(self, key: K) -> V:
        """Return the value stored under key."""
        entry = self._locate(key)[1]
        if entry is None:
            raise KeyError(_MISSING_KEY_MESSAGE)
        return entry.value

    def delete(self, key: K) -> V:
        """Remove key and return the value it held."""
        index, entry = self._locate(key)
        if entry is None:
            raise KeyError(_MISSING_KEY_MESSAGE)
        self._table[index] = _DELETED
        self._count -= 1
        self._deleted += 1
        if self._load() < _MIN_LOAD and len(self._table) > _INITIAL_SIZE:
            self._resize(len(self._table) // _SCALE)
        return entry.value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in table order."""
        for slot in self._table:
            if isinstance(slot, _Entry):
                yield slot.key, slot.value

    def iterate(self, visit: Callable[[K, V], bool]) -> None:
        """Call visit(key, value) for each pair until it returns a false value."""
        for key, value in self:
            if not visit(key, value):
                break

    def iterator(self) -> HashMapIterator[K, V]:
        """Return an external iterator positioned at the first stored pair."""
        return HashMapIterator(self)


class HashMapIterator(Generic[K, V]):
    """A cursor over the stored pairs of a HashMap, in table order."""

    def __init__(self, owner: HashMap[K, V]) -> None:
        self._owner = owner
        self._index = self._next_occupied(0)

    def _next_occupied(self, start: int) -> int:
        table = self._owner._table
        for index in range(start, len(table)):
            if isinstance(table[index], _Entry):
                return index
        return len(table)

    def _entry(self) -> Optional[_Entry]:
        table = self._owner._table
        if self._index < len(table):
            slot = table[self._index]
            if isinstance(slot, _Entry):
                return slot
        return None

    def has_next(self) -> bool:
        """Return True if the cursor is on a stored pair."""
        return self._entry() is not None

    def current(self) -> Tuple[K, V]:
        """Return the (key, value) pair under the cursor."""
        entry = self._entry()
        if entry is None:
            raise IndexError(_EXHAUSTED_MESSAGE)
        return entry.key, entry.value

    def advance(self) -> None:
        """Move the cursor to the next stored pair."""
        if self._entry() is None:
            raise IndexError(_EXHAUSTED_MESSAGE)
        self._index = self._next_occupied(self._index + 1)