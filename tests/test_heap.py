import pytest

from netinf.heap import HeapEntry, MaxHeap


def test_extracts_in_non_increasing_order():
    keys = [3.0, 1.0, 4.0, 1.5, 5.0, 9.0, 2.0, 6.0, 5.0]
    heap = MaxHeap.build_from_insertions(
        HeapEntry(f"v{i}", k) for i, k in enumerate(keys)
    )
    assert len(heap) == len(keys)
    out = [heap.extract_max().key for _ in range(len(keys))]
    assert out == sorted(keys, reverse=True)
    assert len(heap) == 0


def test_peek_does_not_remove():
    heap = MaxHeap.build_from_insertions([HeapEntry("a", 1.0), HeapEntry("b", 2.0)])
    assert heap.peek_max().name == "b"
    assert len(heap) == 2


def test_sift_up_follows_the_moving_entry():
    # An increasing sequence forces every insert to bubble to the root.
    heap = MaxHeap.build_from_insertions(HeapEntry(str(i), float(i)) for i in range(20))
    assert heap.peek_max().name == "19"
    assert [heap.extract_max().name for _ in range(20)] == [str(i) for i in range(19, -1, -1)]


def test_insert_after_extract_reuses_storage():
    heap = MaxHeap.build_from_insertions([HeapEntry("a", 1.0), HeapEntry("b", 2.0)])
    assert heap.extract_max().name == "b"
    heap.insert(HeapEntry("c", 0.5))
    assert len(heap) == 2
    assert [heap.extract_max().name for _ in range(2)] == ["a", "c"]


def test_equal_keys_all_come_out():
    heap = MaxHeap.build_from_insertions(HeapEntry(n, 1.0) for n in "abcd")
    assert sorted(heap.extract_max().name for _ in range(4)) == list("abcd")


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.peek_max()
    with pytest.raises(IndexError):
        heap.extract_max()
