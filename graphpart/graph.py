"""Static graph in compressed adjacency (CSR) form with partition data."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

_T = TypeVar("_T")


def _resized(values: list[_T], size: int, fill: _T) -> list[_T]:
    """Return ``values`` cut or padded with ``fill`` to ``size`` entries."""
    if size <= len(values):
        return values[:size]
    return values + [fill] * (size - len(values))


def _checked(values: Sequence[_T], index: int, what: str) -> _T:
    if not 0 <= index < len(values):
        raise IndexError(f"{what} {index} out of range")
    return values[index]


def _check_index(values: Sequence[object], index: int, what: str) -> None:
    if not 0 <= index < len(values):
        raise IndexError(f"{what} {index} out of range")


class Graph:
    """Directed graph stored as offset array plus edge arrays.

    Nodes are added in order with ``new_node``; the edges of a node must be
    added before those of any later node. Nodes without edges are filled in
    automatically.
    """

    def __init__(self) -> None:
        self._first_edge: list[int] = [0]
        self._node_weight: list[int] = [0]
        self._partition: list[int] = []
        self._targets: list[int] = []
        self._edge_weights: list[int] = []
        self._ratings: list[float] = []
        self._second_partition: list[int] = []
        self._ghost_nodes: list[int] = []
        self._using_ghost_nodes = False
        self._max_degree_computed = False
        self._max_degree = 0
        self._building = False
        self._last_source = -1
        self._node = 0
        self._edge = 0
        self.partition_count = 0
        self.separator_block = 2

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    def _begin(self, nodes: int, edges: int, full: bool) -> None:
        self._building = True
        self._node = 0
        self._edge = 0
        self._last_source = -1
        self._first_edge = _resized(self._first_edge, nodes + 1, 0)
        self._node_weight = _resized(self._node_weight, nodes + 1, 0)
        self._targets = _resized(self._targets, edges, 0)
        self._edge_weights = _resized(self._edge_weights, edges, 0)
        if full:
            self._partition = _resized(self._partition, nodes + 1, 0)
            self._ratings = _resized(self._ratings, edges, 0.0)
        self._first_edge[0] = 0

    def start_construction(self, nodes: int, edges: int) -> None:
        """Prepare room for ``nodes`` nodes and ``edges`` edges."""
        self._begin(nodes, edges, full=True)

    def start_construction_light(self, nodes: int, edges: int) -> None:
        """Like ``start_construction`` but without partition and rating storage."""
        self._begin(nodes, edges, full=False)

    def stream_repeat_construction(self, nodes: int, edges: int) -> None:
        """Restart construction, keeping existing storage where it fits."""
        self._begin(nodes, edges, full=True)

    def new_node(self) -> int:
        """Return the id of the next node."""
        if not self._building:
            raise RuntimeError("graph is not under construction")
        node = self._node
        self._node += 1
        return node

    def new_edge(self, source: int, target: int) -> int:
        """Add an edge leaving ``source`` and return its id."""
        if not self._building:
            raise RuntimeError("graph is not under construction")
        if self._edge >= len(self._targets):
            raise IndexError("more edges than were reserved")
        if not 0 <= source < len(self._first_edge) - 1:
            raise IndexError(f"node {source} out of range")
        if source < self._last_source:
            raise ValueError("edges must be added in order of their source")
        self._targets[self._edge] = target
        edge = self._edge
        self._edge += 1
        self._first_edge[source + 1] = self._edge
        self._fill_isolated(source)
        self._last_source = source
        return edge

    def _fill_isolated(self, upto: int) -> None:
        start = self._first_edge[self._last_source + 1]
        for i in range(upto, self._last_source + 1, -1):
            self._first_edge[i] = start

    def _fill_trailing(self) -> None:
        if self._last_source != self._node - 1:
            self._fill_isolated(self._node)

    def finish_construction(self) -> None:
        """Trim storage to what was built and close construction."""
        self._first_edge = _resized(self._first_edge, self._node + 1, 0)
        self._node_weight = _resized(self._node_weight, self._node + 1, 0)
        self._partition = _resized(self._partition, self._node + 1, 0)
        self._targets = _resized(self._targets, self._edge, 0)
        self._edge_weights = _resized(self._edge_weights, self._edge, 0)
        self._ratings = _resized(self._ratings, self._edge, 0.0)
        self._building = False
        self._fill_trailing()

    def finish_construction_light(self) -> None:
        """Trim node and edge storage and close construction."""
        self._first_edge = _resized(self._first_edge, self._node + 1, 0)
        self._node_weight = _resized(self._node_weight, self._node + 1, 0)
        self._targets = _resized(self._targets, self._edge, 0)
        self._edge_weights = _resized(self._edge_weights, self._edge, 0)
        self._building = False
        self._fill_trailing()

    def stream_finish_construction(self) -> None:
        """Close construction without trimming storage."""
        self._building = False
        self._fill_trailing()

    # ------------------------------------------------------------------
    # access
    # ------------------------------------------------------------------
    def number_of_nodes(self) -> int:
        return len(self._first_edge) - 1

    def number_of_edges(self) -> int:
        return len(self._targets)

    def nodes(self) -> range:
        return range(self.number_of_nodes())

    def edges(self) -> range:
        return range(self.number_of_edges())

    def first_edge(self, node: int) -> int:
        return _checked(self._first_edge, node, "node")

    def first_invalid_edge(self, node: int) -> int:
        return _checked(self._first_edge, node + 1, "node")

    def out_edges(self, node: int) -> range:
        """Range of edge ids leaving ``node``."""
        return range(self.first_edge(node), self.first_invalid_edge(node))

    def partition_index(self, node: int) -> int:
        return _checked(self._partition, node, "node")

    def set_partition_index(self, node: int, block: int) -> None:
        _check_index(self._partition, node, "node")
        self._partition[node] = block

    def second_partition_index(self, node: int) -> int:
        return _checked(self._second_partition, node, "node")

    def set_second_partition_index(self, node: int, block: int) -> None:
        _check_index(self._second_partition, node, "node")
        self._second_partition[node] = block

    def resize_second_partition_index(self, n: int) -> None:
        self._second_partition = _resized(self._second_partition, n, 0)

    def implicit_ghost_nodes(self, node: int) -> int:
        return _checked(self._ghost_nodes, node, "node")

    def set_implicit_ghost_nodes(self, node: int, count: int) -> None:
        _check_index(self._ghost_nodes, node, "node")
        self._ghost_nodes[node] = count

    def resize_implicit_ghost_nodes(self, n: int) -> None:
        self._ghost_nodes = _resized(self._ghost_nodes, n, 0)
        self._using_ghost_nodes = True

    def has_compressed_ghost_nodes(self) -> bool:
        return self._using_ghost_nodes

    def node_weight(self, node: int) -> int:
        return _checked(self._node_weight, node, "node")

    def set_node_weight(self, node: int, weight: int) -> None:
        _check_index(self._node_weight, node, "node")
        self._node_weight[node] = weight

    def node_degree(self, node: int) -> int:
        """Number of edges leaving ``node``."""
        return len(self.out_edges(node))

    def weighted_node_degree(self, node: int) -> int:
        """Sum of the weights of the edges leaving ``node``."""
        return sum(self._edge_weights[e] for e in self.out_edges(node))

    def max_degree(self) -> int:
        """Largest weighted degree; computed once and then cached."""
        if not self._max_degree_computed:
            for node in self.nodes():
                self._max_degree = max(self._max_degree, self.weighted_node_degree(node))
            self._max_degree_computed = True
        return self._max_degree

    def edge_weight(self, edge: int) -> int:
        return _checked(self._edge_weights, edge, "edge")

    def set_edge_weight(self, edge: int, weight: int) -> None:
        _check_index(self._edge_weights, edge, "edge")
        self._edge_weights[edge] = weight

    def increment_edge_weight(self, edge: int, weight: int) -> None:
        _check_index(self._edge_weights, edge, "edge")
        self._edge_weights[edge] += weight

    def edge_target(self, edge: int) -> int:
        return _checked(self._targets, edge, "edge")

    def edge_rating(self, edge: int) -> float:
        return _checked(self._ratings, edge, "edge")

    def set_edge_rating(self, edge: int, rating: float) -> None:
        _check_index(self._ratings, edge, "edge")
        self._ratings[edge] = rating

    # ------------------------------------------------------------------
    # METIS-style arrays
    # ------------------------------------------------------------------
    def metis_xadj(self) -> list[int]:
        """Offsets of each node's edges, ``number_of_nodes() + 1`` entries."""
        return self._first_edge[: self.number_of_nodes() + 1]

    def metis_adjncy(self) -> list[int]:
        return list(self._targets)

    def metis_vwgt(self) -> list[int]:
        return [int(w) for w in self._node_weight[: self.number_of_nodes()]]

    def metis_adjwgt(self) -> list[int]:
        return [int(w) for w in self._edge_weights]

    def _reset_storage(self) -> None:
        self._first_edge = [0]
        self._node_weight = [0]
        self._partition = []
        self._targets = []
        self._edge_weights = []
        self._ratings = []
        self._max_degree_computed = False
        self._max_degree = 0

    def _build(
        self,
        xadj: Sequence[int],
        adjncy: Sequence[int],
        vwgt: Sequence[int] | None,
        adjwgt: Sequence[int] | None,
    ) -> None:
        if not xadj:
            raise ValueError("xadj must hold at least one offset")
        n = len(xadj) - 1
        self._reset_storage()
        self.start_construction(n, xadj[n])
        for i in range(n):
            node = self.new_node()
            self.set_node_weight(node, 1 if vwgt is None else vwgt[i])
            self.set_partition_index(node, 0)
            for e in range(xadj[i], xadj[i + 1]):
                edge = self.new_edge(node, adjncy[e])
                self.set_edge_weight(edge, 1 if adjwgt is None else adjwgt[e])
        self.finish_construction()

    def build_from_metis(self, xadj: Sequence[int], adjncy: Sequence[int]) -> None:
        """Rebuild from offset and target arrays with unit weights."""
        self._build(xadj, adjncy, None, None)

    def build_from_metis_weighted(
        self,
        xadj: Sequence[int],
        adjncy: Sequence[int],
        vwgt: Sequence[int],
        adjwgt: Sequence[int],
    ) -> None:
        """Rebuild from offset, target, node-weight and edge-weight arrays."""
        self._build(xadj, adjncy, vwgt, adjwgt)

    def copy(self) -> Graph:
        """Return a new graph with the same nodes, edges and weights."""
        other = Graph()
        other.start_construction(self.number_of_nodes(), self.number_of_edges())
        for node in self.nodes():
            shadow = other.new_node()
            other.set_node_weight(shadow, self.node_weight(node))
            for e in self.out_edges(node):
                shadow_edge = other.new_edge(shadow, self.edge_target(e))
                other.set_edge_weight(shadow_edge, self.edge_weight(e))
        other.finish_construction()
        return other