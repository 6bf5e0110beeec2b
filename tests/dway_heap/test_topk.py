import numpy as np

from idxpq.dway_heap.indexed_dway_heap import IndexMinDWayHeap
from idxpq.dway_heap.topk import get_topk


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = IndexMinDWayHeap.from_keys([10, 5, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_empty_heap(self):
        heap = IndexMinDWayHeap(5)
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = IndexMinDWayHeap.from_keys([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        expected = [3, 1, 0]
        assert result == expected

    def test_get_topk_does_not_mutate(self):
        heap = IndexMinDWayHeap.from_keys([10, 5, 15, 1, 20], branching_factor=3)
        before = heap.items()
        get_topk(heap, 2)
        assert heap.items() == before
        assert heap.size() == 5

    def test_get_topk_larger_than_size(self):
        heap = IndexMinDWayHeap(10)
        heap.insert(7, 2.0)
        heap.insert(4, 1.0)
        assert get_topk(heap, 5) == [4, 7]

    def test_get_topk_with_duplicate_keys(self):
        heap = IndexMinDWayHeap.from_keys([10, 10, 5, 15])
        result = get_topk(heap, 3)
        assert len(result) == 3
        assert result[0] == 2
        # both key 10
        assert 0 in result
        assert 1 in result
        assert 3 not in result

    def test_get_topk_with_negative_keys(self):
        heap = IndexMinDWayHeap.from_keys([-10, 0, 5, -5])
        assert get_topk(heap, 2) == [0, 3]

    def test_get_topk_after_updates(self):
        heap = IndexMinDWayHeap.from_keys([4, 3, 2, 1], branching_factor=4)
        heap.increase_key(3, 9)
        heap.delete(2)
        assert get_topk(heap, 2) == [1, 0]

    def test_get_topk_matches_sort(self):
        rng = np.random.default_rng(3)
        keys = rng.permutation(100).tolist()
        heap = IndexMinDWayHeap.from_keys(keys, branching_factor=5)
        expected = [int(i) for i in np.argsort(keys)[:10]]
        assert get_topk(heap, 10) == expected
