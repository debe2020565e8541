"""Stack of successively coarser graphs used for multilevel uncoarsening."""

from __future__ import annotations

from collections.abc import Sequence

from graphpart.graph import Graph

_SEPARATOR_BLOCK = 2


class GraphHierarchy:
    """Graphs pushed from finest to coarsest, popped back with partition projection.

    Each graph is pushed with the mapping from its nodes to the nodes of the
    next coarser graph; the coarsest graph is pushed last.
    """

    def __init__(self) -> None:
        self._graphs: list[Graph] = []
        self._mappings: list[Sequence[int] | None] = []
        self._current_coarser: Graph | None = None
        self._coarsest: Graph | None = None
        self._current_mapping: Sequence[int] | None = None

    def push_back(self, graph: Graph, coarse_mapping: Sequence[int] | None) -> None:
        """Push ``graph``; it becomes the coarsest graph."""
        self._graphs.append(graph)
        self._mappings.append(coarse_mapping)
        self._coarsest = graph

    def _pop_level(self) -> tuple[Graph, Sequence[int] | None]:
        if not self._graphs:
            raise IndexError("graph hierarchy is empty")
        return self._graphs.pop(), self._mappings.pop()

    def _pop_finer(self) -> tuple[Graph, Sequence[int], Graph]:
        finer, mapping = self._pop_level()
        if finer is self._coarsest:
            self._current_coarser = finer
            finer, mapping = self._pop_level()
            finer.partition_count = self._current_coarser.partition_count
        coarser = self._current_coarser
        if coarser is None or mapping is None:
            raise ValueError("no coarse mapping for the finer graph")
        return finer, mapping, coarser

    def _finish(self, finer: Graph, mapping: Sequence[int], coarser: Graph) -> None:
        self._current_mapping = mapping
        finer.partition_count = coarser.partition_count
        self._current_coarser = finer

    def pop_finer_and_project(self) -> Graph:
        """Pop the next finer graph and copy the coarser partition onto it."""
        finer, mapping, coarser = self._pop_finer()
        for node in finer.nodes():
            finer.set_partition_index(node, coarser.partition_index(mapping[node]))
        self._finish(finer, mapping, coarser)
        return finer

    def pop_finer_and_project_ns(self) -> tuple[Graph, set[int]]:
        """Like ``pop_finer_and_project``, also returning the nodes in block 2."""
        finer, mapping, coarser = self._pop_finer()
        separator: set[int] = set()
        for node in finer.nodes():
            block = coarser.partition_index(mapping[node])
            finer.set_partition_index(node, block)
            if block == _SEPARATOR_BLOCK:
                separator.add(node)
        self._finish(finer, mapping, coarser)
        return finer, separator

    def coarsest(self) -> Graph | None:
        return self._coarsest

    def mapping_of_current_finer(self) -> Sequence[int] | None:
        """Mapping used for the most recent projection."""
        return self._current_mapping

    def is_empty(self) -> bool:
        return not self._graphs

    def __len__(self) -> int:
        return len(self._graphs)