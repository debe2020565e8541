import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from graphpart.priority_queues import BucketPQ, MaxNodeHeap, PriorityQueue

SPAN = 16

_ops = st.lists(
    st.tuples(
        st.sampled_from(["insert", "delete_max", "delete_node", "change"]),
        st.integers(min_value=0, max_value=20),
        st.integers(min_value=0, max_value=SPAN - 1),
    ),
    max_size=80,
)


def _run_model(pq: PriorityQueue, ops) -> None:
    model: dict[int, int] = {}
    for op, node, gain in ops:
        if op == "insert" and node not in model:
            pq.insert(node, gain)
            model[node] = gain
        elif op == "delete_max" and model:
            top = max(model.values())
            assert pq.max_value() == top
            removed = pq.delete_max()
            assert model.pop(removed) == top
        elif op == "delete_node" and node in model:
            pq.delete_node(node)
            del model[node]
        elif op == "change" and node in model:
            pq.change_key(node, gain)
            model[node] = gain
        assert len(pq) == len(model)
        assert pq.empty() == (not model)
        for n, g in model.items():
            assert n in pq
            assert pq.get_key(n) == g
        if model:
            assert pq.max_value() == max(model.values())
            assert model[pq.max_element()] == pq.max_value()


@settings(max_examples=150)
@given(_ops)
def test_bucket_pq_matches_model(ops):
    _run_model(BucketPQ(SPAN), ops)


@settings(max_examples=150)
@given(_ops)
def test_max_node_heap_matches_model(ops):
    _run_model(MaxNodeHeap(), ops)


@given(st.dictionaries(st.integers(0, 50), st.integers(-100, 100), max_size=40))
def test_heap_drains_in_non_increasing_order(entries):
    heap = MaxNodeHeap()
    for node, gain in entries.items():
        heap.insert(node, gain)
    drained = []
    while not heap.empty():
        node = heap.delete_max()
        drained.append(entries[node])
    assert drained == sorted(entries.values(), reverse=True)


@given(st.dictionaries(st.integers(0, 50), st.integers(0, SPAN - 1), max_size=40))
def test_bucket_drains_in_non_increasing_order(entries):
    pq = BucketPQ(SPAN)
    for node, gain in entries.items():
        pq.insert(node, gain)
    drained = [entries[pq.delete_max()] for _ in range(len(entries))]
    assert drained == sorted(entries.values(), reverse=True)
    assert len(pq) == 0


def test_bucket_ties_come_out_last_in_first_out():
    pq = BucketPQ(SPAN)
    for node in (1, 2, 3):
        pq.insert(node, 5)
    assert [pq.delete_max() for _ in range(3)] == [3, 2, 1]


def test_bucket_delete_node_keeps_positions_consistent():
    pq = BucketPQ(SPAN)
    for node in (10, 11, 12):
        pq.insert(node, 4)
    pq.delete_node(10)
    assert 10 not in pq
    pq.delete_node(12)
    assert pq.delete_max() == 11
    assert pq.empty()


def test_bucket_rejects_out_of_range_gain():
    pq = BucketPQ(SPAN)
    with pytest.raises(ValueError):
        pq.insert(1, SPAN)
    with pytest.raises(ValueError):
        pq.insert(1, -1)
    pq.insert(1, 0)
    with pytest.raises(ValueError):
        pq.increase_key(1, SPAN)
    assert pq.get_key(1) == 0


def test_bucket_rejects_duplicate_insert():
    pq = BucketPQ(SPAN)
    pq.insert(7, 3)
    with pytest.raises(ValueError):
        pq.insert(7, 4)
    assert pq.get_key(7) == 3


@pytest.mark.parametrize("factory", [lambda: BucketPQ(SPAN), MaxNodeHeap])
def test_empty_queue_errors(factory):
    pq = factory()
    with pytest.raises(IndexError):
        pq.delete_max()
    with pytest.raises(IndexError):
        pq.max_value()
    with pytest.raises(IndexError):
        pq.max_element()
    with pytest.raises(KeyError):
        pq.get_key(3)
    with pytest.raises(KeyError):
        pq.delete_node(3)


def test_heap_insert_existing_is_ignored():
    heap = MaxNodeHeap()
    heap.insert(4, 10)
    heap.insert(4, 99)
    assert len(heap) == 1
    assert heap.get_key(4) == 10


def test_heap_subtract_key_adds_and_sifts_down():
    heap = MaxNodeHeap()
    heap.insert(1, 10)
    heap.insert(2, 8)
    heap.insert(3, 6)
    heap.subtract_key(1, -5)
    assert heap.get_key(1) == 5
    assert heap.max_element() == 2
    assert [heap.delete_max() for _ in range(3)] == [2, 3, 1]


def test_heap_increase_and_decrease_key():
    heap = MaxNodeHeap()
    for node, gain in ((1, 1), (2, 2), (3, 3)):
        heap.insert(node, gain)
    heap.increase_key(1, 50)
    assert heap.max_element() == 1
    heap.decrease_key(1, -50)
    assert heap.max_element() == 3
    assert heap.max_value() == 3


def test_heap_accepts_negative_keys():
    heap = MaxNodeHeap()
    heap.insert(1, -7)
    heap.insert(2, -3)
    assert heap.delete_max() == 2
    assert heap.max_value() == -7


def test_bucket_pq_requires_positive_span():
    with pytest.raises(ValueError):
        BucketPQ(0)