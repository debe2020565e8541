"""Addressable max-priority queues keyed by node id."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PriorityQueue(ABC):
    """Max-priority queue of node ids whose keys can be changed in place."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of queued nodes."""

    def empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def insert(self, node: int, gain: int) -> None:
        """Queue ``node`` with key ``gain``."""

    @abstractmethod
    def max_value(self) -> int:
        """Return the largest key in the queue."""

    @abstractmethod
    def max_element(self) -> int:
        """Return a node holding the largest key."""

    @abstractmethod
    def delete_max(self) -> int:
        """Remove and return a node holding the largest key."""

    @abstractmethod
    def decrease_key(self, node: int, gain: int) -> None:
        """Lower the key of ``node`` to ``gain``."""

    @abstractmethod
    def increase_key(self, node: int, gain: int) -> None:
        """Raise the key of ``node`` to ``gain``."""

    @abstractmethod
    def change_key(self, node: int, gain: int) -> None:
        """Set the key of ``node`` to ``gain``."""

    @abstractmethod
    def get_key(self, node: int) -> int:
        """Return the key of ``node``."""

    @abstractmethod
    def delete_node(self, node: int) -> None:
        """Remove ``node`` from the queue."""

    @abstractmethod
    def __contains__(self, node: object) -> bool:
        """Tell whether ``node`` is queued."""


class BucketPQ(PriorityQueue):
    """Bucket queue for integer keys in ``0 .. gain_span - 1``.

    Nodes with equal keys come out last in, first out.
    """

    def __init__(self, gain_span: int) -> None:
        if gain_span < 1:
            raise ValueError("gain span must be positive")
        self._gain_span = gain_span
        self._buckets: list[list[int]] = [[] for _ in range(gain_span)]
        self._index: dict[int, tuple[int, int]] = {}
        self._max_idx = 0
        self._elements = 0

    def __len__(self) -> int:
        return self._elements

    def empty(self) -> bool:
        return self._elements == 0

    def _check_gain(self, gain: int) -> None:
        if not 0 <= gain < self._gain_span:
            raise ValueError(f"gain {gain} outside 0..{self._gain_span - 1}")

    def _check_node(self, node: int) -> None:
        if node not in self._index:
            raise KeyError(node)

    def _check_not_empty(self) -> None:
        if self._elements == 0:
            raise IndexError("priority queue is empty")

    def _lower_max_idx(self) -> None:
        while self._max_idx != 0:
            self._max_idx -= 1
            if self._buckets[self._max_idx]:
                break

    def insert(self, node: int, gain: int) -> None:
        self._check_gain(gain)
        if node in self._index:
            raise ValueError(f"node {node} already queued")
        if gain > self._max_idx:
            self._max_idx = gain
        bucket = self._buckets[gain]
        bucket.append(node)
        self._index[node] = (len(bucket) - 1, gain)
        self._elements += 1

    def max_value(self) -> int:
        self._check_not_empty()
        return self._max_idx

    def max_element(self) -> int:
        self._check_not_empty()
        return self._buckets[self._max_idx][-1]

    def delete_max(self) -> int:
        self._check_not_empty()
        bucket = self._buckets[self._max_idx]
        node = bucket.pop()
        del self._index[node]
        if not bucket:
            self._lower_max_idx()
        self._elements -= 1
        return node

    def decrease_key(self, node: int, gain: int) -> None:
        self.change_key(node, gain)

    def increase_key(self, node: int, gain: int) -> None:
        self._check_gain(gain)
        self.change_key(node, gain)

    def change_key(self, node: int, gain: int) -> None:
        self._check_gain(gain)
        self.delete_node(node)
        self.insert(node, gain)

    def get_key(self, node: int) -> int:
        self._check_node(node)
        return self._index[node][1]

    def delete_node(self, node: int) -> None:
        self._check_node(node)
        position, gain = self._index.pop(node)
        bucket = self._buckets[gain]
        if len(bucket) > 1:
            last = bucket[-1]
            if last != node:
                self._index[last] = (position, gain)
            bucket[position], bucket[-1] = bucket[-1], bucket[position]
            bucket.pop()
        else:
            bucket.pop()
            if gain == self._max_idx:
                self._lower_max_idx()
        self._elements -= 1

    def __contains__(self, node: object) -> bool:
        return node in self._index


class MaxNodeHeap(PriorityQueue):
    """Binary max-heap of nodes with arbitrary integer keys.

    Inserting a node that is already queued leaves the heap unchanged.
    """

    def __init__(self) -> None:
        self._heap: list[list[int]] = []  # entries are [key, node]
        self._position: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def _check_node(self, node: int) -> None:
        if node not in self._position:
            raise KeyError(node)

    def _check_not_empty(self) -> None:
        if not self._heap:
            raise IndexError("priority queue is empty")

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i][1]] = i
        self._position[heap[j][1]] = j

    def _sift_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if heap[parent][0] >= heap[pos][0]:
                return
            self._swap(parent, pos)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            cur_key = heap[pos][0]
            lhs = 2 * pos + 1
            rhs = 2 * pos + 2
            if rhs < size:
                lhs_key = heap[lhs][0]
                rhs_key = heap[rhs][0]
                if lhs_key < cur_key and rhs_key < cur_key:
                    return
                target = lhs if lhs_key > rhs_key else rhs
            elif lhs < size:
                if cur_key >= heap[lhs][0]:
                    return
                target = lhs
            else:
                return
            self._swap(pos, target)
            pos = target

    def insert(self, node: int, gain: int) -> None:
        if node in self._position:
            return
        self._heap.append([gain, node])
        self._position[node] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def max_value(self) -> int:
        self._check_not_empty()
        return self._heap[0][0]

    def max_element(self) -> int:
        self._check_not_empty()
        return self._heap[0][1]

    def delete_max(self) -> int:
        self._check_not_empty()
        node = self._heap[0][1]
        del self._position[node]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._position[last[1]] = 0
            if len(self._heap) > 1:
                self._sift_down(0)
        return node

    def delete_node(self, node: int) -> None:
        self._check_node(node)
        index = self._position.pop(node)
        last = self._heap.pop()
        if index < len(self._heap):
            self._heap[index] = last
            self._position[last[1]] = index
            if len(self._heap) > 1:
                self._sift_down(index)
                self._sift_up(index)

    def change_key(self, node: int, gain: int) -> None:
        old_gain = self.get_key(node)
        if old_gain > gain:
            self.decrease_key(node, gain)
        elif old_gain < gain:
            self.increase_key(node, gain)

    def decrease_key(self, node: int, gain: int) -> None:
        self._check_node(node)
        index = self._position[node]
        self._heap[index][0] = gain
        self._sift_down(index)

    def increase_key(self, node: int, gain: int) -> None:
        self._check_node(node)
        index = self._position[node]
        self._heap[index][0] = gain
        self._sift_up(index)

    def subtract_key(self, node: int, gain: int) -> None:
        """Add ``gain`` (normally negative) to the key of ``node`` and sift down."""
        self._check_node(node)
        index = self._position[node]
        self._heap[index][0] += gain
        self._sift_down(index)

    def get_key(self, node: int) -> int:
        self._check_node(node)
        return self._heap[self._position[node]][0]

    def __contains__(self, node: object) -> bool:
        return node in self._position