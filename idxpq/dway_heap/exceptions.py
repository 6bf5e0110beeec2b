class IndexedHeapError(Exception):
    """Base class for errors raised by the indexed heap."""


class IndexNotFoundError(IndexedHeapError, KeyError):
    """The index is not currently present in the heap."""


class IndexAlreadyPresentError(IndexedHeapError, ValueError):
    """Insert was called with an index that is already present."""


class HeapUnderflowError(IndexedHeapError, RuntimeError):
    """The heap is empty."""


class InvalidKeyError(IndexedHeapError, ValueError):
    """The new key does not strictly move in the requested direction."""

