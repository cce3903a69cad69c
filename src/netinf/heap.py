# src/netinf/heap.py

from dataclasses import dataclass
from typing import Iterable, List


@dataclass
class HeapEntry:
    name: str
    key: float


class MaxHeap:
    """
    Array-backed binary max-heap of (name, key) entries.

    Extraction swaps the root with the last live slot and shrinks the
    logical size; the backing list is never shortened. Equal keys have no
    guaranteed relative order.
    """

    def __init__(self):
        self._entries: List[HeapEntry] = []
        self._size = 0

    @classmethod
    def build_from_insertions(cls, entries: Iterable[HeapEntry]) -> "MaxHeap":
        heap = cls()
        for entry in entries:
            heap.insert(entry)
        return heap

    def __len__(self) -> int:
        return self._size

    def insert(self, entry: HeapEntry) -> None:
        if self._size < len(self._entries):
            self._entries[self._size] = entry
        else:
            self._entries.append(entry)
        self._size += 1
        self._sift_up(self._size - 1)

    def peek_max(self) -> HeapEntry:
        if self._size == 0:
            raise IndexError("peek from an empty heap")
        return self._entries[0]

    def extract_max(self) -> HeapEntry:
        if self._size == 0:
            raise IndexError("extract from an empty heap")
        top = self._entries[0]
        last = self._size - 1
        self._entries[0], self._entries[last] = self._entries[last], self._entries[0]
        self._size = last
        self._sift_down(0)
        return top

    def _sift_up(self, i: int) -> None:
        entries = self._entries
        while i > 0:
            p = (i - 1) // 2
            if entries[p].key >= entries[i].key:
                break
            entries[p], entries[i] = entries[i], entries[p]
            i = p

    def _sift_down(self, i: int) -> None:
        entries = self._entries
        size = self._size
        while True:
            largest = i
            left = 2 * i + 1
            right = left + 1
            if left < size and entries[left].key > entries[largest].key:
                largest = left
            if right < size and entries[right].key > entries[largest].key:
                largest = right
            if largest == i:
                return
            entries[i], entries[largest] = entries[largest], entries[i]
            i = largest
