import logging
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from idxpq.dway_heap.exceptions import (
    HeapUnderflowError,
    IndexAlreadyPresentError,
    IndexNotFoundError,
    InvalidKeyError,
)

logger = logging.getLogger(__name__)

# inverse map marker for indices not in the heap; never returned to callers
_ABSENT = -1


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


class IndexMinDWayHeap:
    """
    Indexed minimum priority queue backed by a D-ary heap.

    Every entry is addressed by an external integer index in
    ``[0, capacity)`` chosen by the caller. The index stays stable while the
    entry moves around the heap, so its key can be looked up, changed or
    deleted in O(log_D n).

    The heap keeps two mappings in numpy arrays: ``position -> index`` for
    the heap slots and ``index -> position`` for lookups. Keys are kept in a
    plain list so any totally ordered type can be used.

    Parameters
    ----------
    capacity : int
        Number of distinct indices the heap can hold. Fixed for the lifetime
        of the heap.
    branching_factor : int
        Number of children per node, by default 2. Must be at least 2.

    Notes
    -----
    The heap is not thread-safe. Callers sharing it across threads must
    guard every operation with one lock.
    """

    def __init__(
        self,
        capacity: int,
        branching_factor: int = 2
    ) -> None:
        capacity = _as_int(capacity, "capacity")
        branching_factor = _as_int(branching_factor, "branching_factor")
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if branching_factor < 2:
            raise ValueError(
                f"branching_factor must be >= 2, got {branching_factor}"
            )

        self._capacity = capacity
        self._d = branching_factor
        self._size = 0

        self._keys: list[Any] = [None] * capacity
        self._pq = np.zeros(capacity, dtype=np.intp)
        self._qp = np.full(capacity, _ABSENT, dtype=np.intp)

    @classmethod
    def from_keys(
        cls,
        keys: Iterable[Any],
        branching_factor: int = 2,
        capacity: Optional[int] = None
    ) -> "IndexMinDWayHeap":
        """
        Build a heap holding index ``i`` with key ``keys[i]`` for every key.

        The heap is built bottom-up in linear time.

        Parameters
        ----------
        keys : Iterable[Any]
            Mutually comparable keys. Their positions become the indices.
        branching_factor : int
            Number of children per node, by default 2.
        capacity : int, optional
            Capacity of the heap, by default the number of keys.

        Returns
        -------
        IndexMinDWayHeap
            A heap containing every key.
        """
        keys = list(keys)
        n = len(keys)
        if capacity is None:
            capacity = n
        elif capacity < n:
            raise ValueError(
                f"capacity {capacity} is smaller than the number of keys {n}"
            )

        heap = cls(capacity, branching_factor)
        heap._keys[:n] = keys
        heap._pq[:n] = np.arange(n)
        heap._qp[:n] = np.arange(n)
        heap._size = n

        for position in range((n - 2) // heap._d, -1, -1):
            heap._sink(position)

        logger.debug(
            "Heapified %d keys (capacity=%d, branching_factor=%d)",
            n, heap._capacity, heap._d
        )
        return heap

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def branching_factor(self) -> int:
        return self._d

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def contains(self, index: int) -> bool:
        """
        Return True if ``index`` is present in the heap.

        Raises ``IndexError`` if ``index`` is outside ``[0, capacity)``.
        """
        return self._position_of(self._check_index(index)) is not None

    def key_of(self, index: int) -> Any:
        """Return the key associated with ``index``."""
        index = self._check_index(index)
        self._require_position(index)
        return self._keys[index]

    def insert(self, index: int, key: Any) -> bool:
        """
        Associate ``key`` with ``index``.

        Parameters
        ----------
        index : int
            External index in ``[0, capacity)``, not currently present.
        key : Any
            Key comparable with every other key in the heap.

        Returns
        -------
        bool
            True if the entry was inserted, False if the heap is full and
            the insert was dropped.

        Raises
        ------
        IndexAlreadyPresentError
            If ``index`` is already present.
        """
        index = self._check_index(index)
        if self._position_of(index) is not None:
            raise IndexAlreadyPresentError(
                f"index {index} is already in the priority queue"
            )

        if self._size == self._capacity:
            logger.debug(
                "Priority queue full (capacity=%d), dropping insert of index %d",
                self._capacity, index
            )
            return False

        position = self._size
        self._size += 1
        self._keys[index] = key
        self._pq[position] = index
        self._qp[index] = position

        self._swim(position)
        return True

    def delete_min(self) -> int:
        """Remove the entry with the smallest key and return its index."""
        if self._size == 0:
            raise HeapUnderflowError("priority queue underflow")

        min_index = int(self._pq[0])
        last = self._size - 1
        self._exchange(0, last)
        self._size = last
        self._sink(0)

        self._keys[min_index] = None
        self._qp[min_index] = _ABSENT
        return min_index

    def delete(self, index: int) -> None:
        """Remove ``index`` and its key from the heap."""
        index = self._check_index(index)
        position = self._require_position(index)

        last = self._size - 1
        self._exchange(position, last)
        self._size = last

        # the entry moved into the vacated slot may belong above or below it
        if position < last:
            self._swim(position)
            self._sink(position)

        self._keys[index] = None
        self._qp[index] = _ABSENT

    def change_key(self, index: int, key: Any) -> None:
        """Replace the key of ``index``, in either direction."""
        index = self._check_index(index)
        position = self._require_position(index)

        self._keys[index] = key
        self._swim(position)
        self._sink(int(self._qp[index]))

    def decrease_key(self, index: int, key: Any) -> None:
        """
        Replace the key of ``index`` with a strictly smaller one.

        Raises ``InvalidKeyError`` if ``key`` is not strictly smaller than
        the current key; equal keys are rejected.
        """
        index = self._check_index(index)
        position = self._require_position(index)
        if not key < self._keys[index]:
            raise InvalidKeyError(
                f"decrease_key({index}, {key!r}) would not strictly decrease "
                f"the key {self._keys[index]!r}"
            )

        self._keys[index] = key
        self._swim(position)

    def increase_key(self, index: int, key: Any) -> None:
        """
        Replace the key of ``index`` with a strictly larger one.

        Raises ``InvalidKeyError`` if ``key`` is not strictly larger than
        the current key; equal keys are rejected.
        """
        index = self._check_index(index)
        position = self._require_position(index)
        if not key > self._keys[index]:
            raise InvalidKeyError(
                f"increase_key({index}, {key!r}) would not strictly increase "
                f"the key {self._keys[index]!r}"
            )

        self._keys[index] = key
        self._sink(position)

    def min_key(self) -> Any:
        if self._size == 0:
            raise HeapUnderflowError("priority queue underflow")
        return self._keys[self._pq[0]]

    def min_index(self) -> int:
        if self._size == 0:
            raise HeapUnderflowError("priority queue underflow")
        return int(self._pq[0])

    def peek(self) -> int:
        """Alias of ``min_index``."""
        return self.min_index()

    def top(self) -> int:
        """Alias of ``delete_min``."""
        return self.delete_min()

    def first_leaf_index(self) -> int:
        """Return the first heap position that has no children."""
        if self._size == 0:
            return 0
        return (self._size - 2) // self._d + 1

    def items(self) -> list[tuple[int, Any]]:
        """Return ``(index, key)`` pairs in heap order, not sorted."""
        return [
            (int(index), self._keys[index])
            for index in self._pq[:self._size]
        ]

    def copy(self) -> "IndexMinDWayHeap":
        other = type(self)(self._capacity, self._d)
        other._keys = list(self._keys)
        other._pq = self._pq.copy()
        other._qp = self._qp.copy()
        other._size = self._size
        return other

    def clear(self) -> None:
        """Remove every entry; the capacity is unchanged."""
        self._keys = [None] * self._capacity
        self._qp.fill(_ABSENT)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, index: int) -> bool:
        return self.contains(index)

    def __iter__(self) -> Iterator[int]:
        """Yield the present indices in ascending key order."""
        scratch = self.copy()
        while scratch:
            yield scratch.delete_min()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self._size}, "
            f"capacity={self._capacity}, branching_factor={self._d})"
        )

    def _validate(self) -> bool:
        """Check the index bijection and the heap order."""
        for position in range(self._size):
            index = int(self._pq[position])
            if self._position_of(index) != position:
                return False
            if position > 0 and self._less(position, (position - 1) // self._d):
                return False
        present = int(np.count_nonzero(self._qp != _ABSENT))
        return present == self._size

    def _check_index(self, index: int) -> int:
        index = _as_int(index, "index")
        if not 0 <= index < self._capacity:
            raise IndexError(
                f"index {index} out of range [0, {self._capacity})"
            )
        return index

    def _position_of(self, index: int) -> Optional[int]:
        position = int(self._qp[index])
        if position == _ABSENT:
            return None
        return position

    def _require_position(self, index: int) -> int:
        position = self._position_of(index)
        if position is None:
            raise IndexNotFoundError(
                f"index {index} is not in the priority queue"
            )
        return position

    def _swim(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // self._d
            if not self._less(position, parent):
                break
            self._exchange(parent, position)
            position = parent

    def _sink(self, position: int) -> None:
        d = self._d
        first_child = position * d + 1
        while first_child < self._size:
            last_child = min(first_child + d, self._size)

            smallest = first_child
            for child in range(first_child + 1, last_child):
                if self._less(child, smallest):
                    smallest = child

            if not self._less(smallest, position):
                break
            self._exchange(position, smallest)

            position = smallest
            first_child = position * d + 1

    def _less(self, i: int, j: int) -> bool:
        return self._keys[self._pq[i]] < self._keys[self._pq[j]]

    def _exchange(self, i: int, j: int) -> None:
        pq = self._pq
        pq[i], pq[j] = pq[j], pq[i]
        self._qp[pq[i]] = i
        self._qp[pq[j]] = j
