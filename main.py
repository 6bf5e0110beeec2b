from idxpq import IndexMinDWayHeap, get_topk


keys = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a 3-ary heap with room for two more indices
print("Creating 3-ary indexed heap...")
heap = IndexMinDWayHeap.from_keys(keys, branching_factor=3, capacity=8)

# Test basic properties
print(f"Heap: {heap!r}")
print(f"Is empty: {heap.is_empty()}")
print(f"First leaf index: {heap.first_leaf_index()}")
print(f"Min index: {heap.min_index()} (key {heap.min_key()})")

# Update keys by index
heap.decrease_key(2, 0.5)
print(f"After decrease_key(2, 0.5), min index: {heap.min_index()}")
heap.change_key(5, 30.0)
heap.insert(6, 4.0)
print(f"Top-3 indices: {get_topk(heap, 3)}")

heap.delete(3)
print(f"After delete(3), contains(3): {heap.contains(3)}")

print("Draining heap...")
while not heap.is_empty():
    index = heap.min_index()
    key = heap.key_of(index)
    heap.delete_min()
    print(f"  index={index} key={key}")
