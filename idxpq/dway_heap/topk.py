from idxpq.dway_heap.indexed_dway_heap import IndexMinDWayHeap


def get_topk(heap: IndexMinDWayHeap, k: int) -> list[int]:
    """
    Function to get the K indices with the smallest keys from a heap.

    The heap is left untouched; ties between equal keys are broken by heap
    position.

    Parameters
    ----------
    heap : IndexMinDWayHeap
        An IndexMinDWayHeap object
    k : int
        The number of 'top-K' indices to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' indices, smallest key first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    pairs = heap.items()
    pairs.sort(key=lambda x: x[1])
    return [index for index, _ in pairs[:k]]
