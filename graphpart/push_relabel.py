"""Maximum flow and minimum cut by FIFO push-relabel."""

from __future__ import annotations

from collections import deque

from graphpart.flow_graph import FlowGraph

WORK_OP_RELABEL = 9
GLOBAL_UPDATE_FRQ = 0.51
WORK_NODE_TO_EDGES = 4


class PushRelabel:
    """FIFO push-relabel solver with global relabeling and the gap heuristic.

    The flow is written into the edges of the graph that is solved. After a
    run, ``pushes``, ``num_relabels``, ``gaps`` and ``global_updates`` hold
    counters describing the work done.
    """

    def __init__(self) -> None:
        self.pushes = 0
        self.num_relabels = 0
        self.gaps = 0
        self.global_updates = 0
        self._work = 0
        self._graph = FlowGraph()
        self._excess: list[int] = []
        self._distance: list[int] = []
        self._active: list[bool] = []
        self._count: list[int] = []
        self._bfs_touched: list[bool] = []
        self._queue: deque[int] = deque()

    def solve_max_flow_min_cut(
        self,
        graph: FlowGraph,
        source: int,
        sink: int,
        compute_source_set: bool = False,
    ) -> tuple[int, list[int]]:
        """Compute a maximum flow from ``source`` to ``sink``.

        Returns the flow value and, when ``compute_source_set`` is true, the
        nodes reachable from ``source`` in the residual graph in BFS order
        (the source side of a minimum cut); otherwise an empty list.
        """
        n = graph.number_of_nodes()
        for name, node in (("source", source), ("sink", sink)):
            if not 0 <= node < n:
                raise ValueError(f"{name} {node} out of range")
        if source == sink:
            raise ValueError("source and sink must differ")

        self._graph = graph
        self._work = 0
        self.num_relabels = 0
        self.gaps = 0
        self.pushes = 0
        self.global_updates = 1
        self._queue = deque()

        self._init(source, sink)
        self._global_relabeling(source, sink)

        work_todo = WORK_NODE_TO_EDGES * n + graph.number_of_edges()
        while self._queue:
            v = self._queue.popleft()
            self._active[v] = False
            self._discharge(v)
            if self._work > GLOBAL_UPDATE_FRQ * work_todo:
                self._global_relabeling(source, sink)
                self._work = 0
                self.global_updates += 1

        source_set: list[int] = []
        if compute_source_set:
            touched = [False] * n
            touched[source] = True
            bfs = deque([source])
            while bfs:
                node = bfs.popleft()
                source_set.append(node)
                for e in graph.out_edges(node):
                    target = graph.edge_target(node, e)
                    residual = graph.edge_capacity(node, e) - graph.edge_flow(node, e)
                    if residual > 0 and not touched[target]:
                        touched[target] = True
                        bfs.append(target)

        return self._excess[sink], source_set

    def _init(self, source: int, sink: int) -> None:
        graph = self._graph
        n = graph.number_of_nodes()
        self._excess = [0] * n
        self._distance = [0] * n
        self._active = [False] * n
        self._count = [0] * (2 * n + 1)
        self._bfs_touched = [False] * n

        self._count[0] = n - 1
        self._count[n] = 1
        self._distance[source] = n
        self._active[source] = True
        self._active[sink] = True

        for e in graph.out_edges(source):
            self._excess[source] += graph.edge_capacity(source, e)
            self._push(source, e)

    def _global_relabeling(self, source: int, sink: int) -> None:
        """Backward BFS from the sink in the residual graph to reset labels."""
        graph = self._graph
        n = graph.number_of_nodes()
        for node in range(n):
            self._distance[node] = max(self._distance[node], n)
            self._bfs_touched[node] = False

        self._bfs_touched[sink] = True
        self._bfs_touched[source] = True
        self._distance[sink] = 0
        bfs = deque([sink])
        while bfs:
            node = bfs.popleft()
            for e in graph.out_edges(node):
                target = graph.edge_target(node, e)
                if self._bfs_touched[target]:
                    continue
                rev_e = graph.reverse_edge(node, e)
                if graph.edge_capacity(target, rev_e) - graph.edge_flow(target, rev_e) > 0:
                    self._count[self._distance[target]] -= 1
                    self._distance[target] = self._distance[node] + 1
                    self._count[self._distance[target]] += 1
                    bfs.append(target)
                    self._bfs_touched[target] = True

    def _push(self, source: int, e: int) -> None:
        graph = self._graph
        self.pushes += 1
        capacity = graph.edge_capacity(source, e)
        flow = graph.edge_flow(source, e)
        amount = min(capacity - flow, self._excess[source])
        target = graph.edge_target(source, e)

        if self._distance[source] <= self._distance[target] or amount == 0:
            return

        graph.set_edge_flow(source, e, flow + amount)
        rev_e = graph.reverse_edge(source, e)
        graph.set_edge_flow(target, rev_e, graph.edge_flow(target, rev_e) - amount)

        self._excess[source] -= amount
        self._excess[target] += amount
        self._enqueue(target)

    def _enqueue(self, target: int) -> None:
        if self._active[target]:
            return
        if self._excess[target] > 0:
            self._active[target] = True
            self._queue.append(target)

    def _discharge(self, node: int) -> None:
        graph = self._graph
        for e in graph.out_edges(node):
            if self._excess[node] <= 0:
                break
            self._push(node, e)

        if self._excess[node] > 0:
            level = self._distance[node]
            if self._count[level] == 1 and level < graph.number_of_nodes():
                self._gap_heuristic(level)
            else:
                self._relabel(node)

    def _gap_heuristic(self, level: int) -> None:
        self.gaps += 1
        n = self._graph.number_of_nodes()
        for node in range(n):
            if self._distance[node] < level:
                continue
            self._count[self._distance[node]] -= 1
            self._distance[node] = max(self._distance[node], n)
            self._count[self._distance[node]] += 1
            self._enqueue(node)

    def _relabel(self, node: int) -> None:
        graph = self._graph
        self._work += WORK_OP_RELABEL
        self.num_relabels += 1

        self._count[self._distance[node]] -= 1
        label = 2 * graph.number_of_nodes()
        for e in graph.out_edges(node):
            if graph.edge_capacity(node, e) - graph.edge_flow(node, e) > 0:
                label = min(label, self._distance[graph.edge_target(node, e)] + 1)
            self._work += 1
        self._distance[node] = label
        self._count[label] += 1
        self._enqueue(node)