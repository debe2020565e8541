"""Adjacency-list residual graph for max-flow computations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ResidualEdge:
    """A directed edge of the residual graph and the index of its partner edge."""

    source: int
    target: int
    capacity: int
    flow: int
    reverse_edge_index: int


class FlowGraph:
    """Residual graph: every added edge gets a zero-capacity reverse edge.

    Edge ids are local to the node they leave from.
    """

    def __init__(self) -> None:
        self._adjacency: list[list[ResidualEdge]] = []
        self._num_nodes = 0
        self._num_edges = 0

    def start_construction(self, nodes: int, edges: int = 0) -> None:
        self._adjacency = [[] for _ in range(nodes)]
        self._num_nodes = nodes
        self._num_edges = edges

    def finish_construction(self) -> None:
        """Check that every edge and its reverse edge point at each other."""
        for node, edges in enumerate(self._adjacency):
            for index, edge in enumerate(edges):
                partner_list = self._adjacency[edge.target]
                rev = edge.reverse_edge_index
                if not 0 <= rev < len(partner_list):
                    raise ValueError(
                        f"edge {index} of node {node} has no valid reverse edge"
                    )
                partner = partner_list[rev]
                if partner.target != node or partner.reverse_edge_index != index:
                    raise ValueError(
                        f"edge {index} of node {node} and its reverse edge disagree"
                    )

    def number_of_nodes(self) -> int:
        return self._num_nodes

    def number_of_edges(self) -> int:
        return self._num_edges

    def new_edge(self, source: int, target: int, capacity: int) -> None:
        """Add an edge and its zero-capacity reverse edge."""
        forward = ResidualEdge(source, target, capacity, 0, len(self._adjacency[target]))
        self._adjacency[source].append(forward)
        backward = ResidualEdge(target, source, 0, 0, len(self._adjacency[source]) - 1)
        self._adjacency[target].append(backward)
        self._num_edges += 2

    def _check_node(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} out of range")

    def _edge(self, source: int, e: int) -> ResidualEdge:
        self._check_node(source)
        edges = self._adjacency[source]
        if not 0 <= e < len(edges):
            raise IndexError(f"edge {e} of node {source} out of range")
        return edges[e]

    def edge_target(self, source: int, e: int) -> int:
        return self._edge(source, e).target

    def edge_capacity(self, source: int, e: int) -> int:
        return self._edge(source, e).capacity

    def edge_flow(self, source: int, e: int) -> int:
        return self._edge(source, e).flow

    def set_edge_flow(self, source: int, e: int, flow: int) -> None:
        self._edge(source, e).flow = flow

    def reverse_edge(self, source: int, e: int) -> int:
        return self._edge(source, e).reverse_edge_index

    def first_edge(self, node: int) -> int:
        """Id of the first edge leaving ``node``; ids are local, so always 0."""
        self._check_node(node)
        return 0

    def first_invalid_edge(self, node: int) -> int:
        self._check_node(node)
        return len(self._adjacency[node])

    def out_edges(self, node: int) -> range:
        """Range of edge ids leaving ``node``."""
        return range(self.first_edge(node), self.first_invalid_edge(node))