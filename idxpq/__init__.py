__version__ = "0.1.0"

from idxpq.dway_heap.exceptions import (
    HeapUnderflowError,
    IndexAlreadyPresentError,
    IndexedHeapError,
    IndexNotFoundError,
    InvalidKeyError,
)
from idxpq.dway_heap.indexed_dway_heap import IndexMinDWayHeap
from idxpq.dway_heap.topk import get_topk
