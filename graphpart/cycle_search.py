"""Cycle and shortest-path searches on weighted directed graphs."""

from __future__ import annotations

import random
from collections import deque

from graphpart.graph import Graph
from graphpart.strongly_connected_components import strong_components

_INFINITE_DISTANCE = (2**31 - 1) // 2
_NULL_NODE = -1

_OUT_OF_QUEUE = 0
_INACTIVE = 1
_ACTIVE = 2
_IN_QUEUE = 2


def find_random_cycle(graph: Graph, rng: random.Random | None = None) -> list[int]:
    """Return a cycle closed by a random non-tree edge of a BFS tree.

    The graph is expected to be undirected, i.e. every edge has a reverse
    edge. The returned list starts and ends with the same node.
    """
    rng = rng if rng is not None else random.Random()
    n = graph.number_of_nodes()
    m = graph.number_of_edges()
    if n == 0 or m == 0:
        raise ValueError("graph has no edges")

    root = rng.randint(0, n - 1)
    touched = [False] * n
    parent = [0] * n
    touched[root] = True
    parent[root] = root
    queue = deque([root])
    while queue:
        source = queue.popleft()
        for e in graph.out_edges(source):
            target = graph.edge_target(e)
            if not touched[target]:
                touched[target] = True
                parent[target] = source
                queue.append(target)

    sources = [0] * m
    for node in graph.nodes():
        for e in graph.out_edges(node):
            sources[e] = node

    def is_non_tree(e: int) -> bool:
        source, target = sources[e], graph.edge_target(e)
        return parent[source] != target and parent[target] != source

    if not any(is_non_tree(e) for e in graph.edges()):
        raise ValueError("graph has no non-tree edge, so no cycle exists")

    r_idx = rng.randint(0, m - 1)
    while not is_non_tree(r_idx):
        r_idx = rng.randint(0, m - 1)
    v_1, v_2 = sources[r_idx], graph.edge_target(r_idx)

    lhs_path = [v_1]
    rhs_path = [v_2]
    touched_nodes = [False] * n
    index = [0] * n
    touched_nodes[v_1] = True
    touched_nodes[v_2] = True

    cur_lhs, cur_rhs = v_1, v_2
    counter = 0
    break_lhs = False
    while True:
        if cur_lhs == parent[cur_lhs] and cur_rhs == parent[cur_rhs]:
            raise ValueError("edge endpoints lie in different search trees")
        counter += 1
        if cur_lhs != parent[cur_lhs]:
            if touched_nodes[parent[cur_lhs]]:
                break_lhs = True
                lhs_path.append(parent[cur_lhs])
                break
            cur_lhs = parent[cur_lhs]
            touched_nodes[cur_lhs] = True
            lhs_path.append(cur_lhs)
            index[cur_lhs] = counter
        if cur_rhs != parent[cur_rhs]:
            if touched_nodes[parent[cur_rhs]]:
                rhs_path.append(parent[cur_rhs])
                break
            cur_rhs = parent[cur_rhs]
            touched_nodes[cur_rhs] = True
            rhs_path.append(cur_rhs)
            index[cur_rhs] = counter

    first, second = (lhs_path, rhs_path) if break_lhs else (rhs_path, lhs_path)
    cycle = list(first)
    connecting = cycle[-1]
    cycle.extend(reversed(second[: index[connecting]]))
    cycle.append(cycle[0])
    return cycle


def _bellman_ford(graph: Graph, start: int, distance: list[int], parent: list[int]) -> int:
    """Label-correcting search with subtree disassembly.

    Returns a node on a negative cycle (whose parent closes the cycle), or
    ``_NULL_NODE`` when no negative cycle is reachable from ``start``.
    """
    n = graph.number_of_nodes()
    distance[start] = 0
    before = [_NULL_NODE] * n
    after = [0] * n
    degree = [0] * n
    status = [_OUT_OF_QUEUE] * n

    after[start] = start
    before[start] = start
    degree[start] = -1
    status[start] = _IN_QUEUE
    queue = deque([start])

    while queue:
        v = queue.popleft()
        current_status = status[v]
        status[v] = _OUT_OF_QUEUE
        if current_status == _INACTIVE:
            continue

        for e in graph.out_edges(v):
            w = graph.edge_target(e)
            delta = distance[w] - distance[v] - graph.edge_weight(e)
            if delta > 0:
                new_distance = distance[w] - delta
                x = before[w]
                y = w
                if x != _NULL_NODE:
                    total_degree = 0
                    while total_degree >= 0:
                        if y == v:
                            parent[w] = v
                            return w
                        distance[y] -= delta
                        before[y] = _NULL_NODE
                        total_degree += degree[y]
                        if status[y] == _ACTIVE:
                            status[y] = _INACTIVE
                        y = after[y]
                    degree[parent[w]] -= 1
                    after[x] = y
                    before[y] = x
                distance[w] = new_distance
                parent[w] = v

            if before[w] == _NULL_NODE and parent[w] == v:
                degree[v] += 1
                degree[w] = -1
                after_v = after[v]
                after[v] = w
                before[w] = v
                after[w] = after_v
                before[after_v] = w
                if status[w] == _OUT_OF_QUEUE:
                    queue.append(w)
                    status[w] = _IN_QUEUE
                else:
                    status[w] = _ACTIVE
    return _NULL_NODE


def _negative_cycle_detection(
    graph: Graph, start: int, distance: list[int], parent: list[int]
) -> list[int] | None:
    w = _bellman_ford(graph, start, distance, parent)
    if w < 0:
        return None

    seen = [False] * graph.number_of_nodes()
    u = parent[w]
    seen[u] = True
    predecessor = parent[u]
    while not seen[predecessor]:
        seen[predecessor] = True
        predecessor = parent[predecessor]
    start_vertex = predecessor

    cycle = [start_vertex]
    predecessor = parent[start_vertex]
    while predecessor != start_vertex:
        cycle.append(predecessor)
        predecessor = parent[predecessor]
    cycle.append(start_vertex)
    cycle.reverse()
    return cycle


def _fresh_labels(graph: Graph) -> tuple[list[int], list[int]]:
    n = graph.number_of_nodes()
    return [_INFINITE_DISTANCE] * n, [_NULL_NODE] * n


def find_negative_cycle(graph: Graph, start: int) -> list[int] | None:
    """Return a negative cycle reachable from ``start``, closed on its first node, or None."""
    distance, parent = _fresh_labels(graph)
    return _negative_cycle_detection(graph, start, distance, parent)


def find_shortest_path(graph: Graph, start: int, dest: int) -> tuple[bool, list[int]]:
    """Search a shortest path from ``start`` to ``dest``.

    Returns ``(True, cycle)`` when a negative cycle is found instead, otherwise
    ``(False, path)`` with the path running from ``start`` to ``dest``.
    """
    distance, parent = _fresh_labels(graph)
    cycle = _negative_cycle_detection(graph, start, distance, parent)
    if cycle is not None:
        return True, cycle

    path = [dest]
    cur = dest
    while cur != start:
        cur = parent[cur]
        if cur == _NULL_NODE:
            raise ValueError(f"node {dest} is not reachable from {start}")
        path.append(cur)
    path.reverse()
    return False, path


def find_zero_weight_cycle(
    graph: Graph, start: int, rng: random.Random | None = None
) -> list[int] | None:
    """Return a random directed cycle of zero total weight, or None.

    Only edges that are tight with respect to shortest distances from
    ``start`` are used. Returns None when a negative cycle exists or no
    zero-weight cycle is found. The cycle starts and ends with the same node.
    """
    rng = rng if rng is not None else random.Random()
    distance, parent = _fresh_labels(graph)
    if _negative_cycle_detection(graph, start, distance, parent) is not None:
        return None

    tight = Graph()
    tight.start_construction(graph.number_of_nodes(), graph.number_of_edges())
    for node in graph.nodes():
        shadow = tight.new_node()
        tight.set_node_weight(shadow, graph.node_weight(node))
        for e in graph.out_edges(node):
            target = graph.edge_target(e)
            if graph.edge_weight(e) + distance[node] - distance[target] == 0:
                shadow_edge = tight.new_edge(shadow, target)
                tight.set_edge_weight(shadow_edge, 0)
    tight.finish_construction()

    _, comp_num = strong_components(tight)
    comp_count = [0] * tight.number_of_nodes()
    for node in tight.nodes():
        comp_count[comp_num[node]] += 1

    candidates = [node for node in tight.nodes() if comp_count[comp_num[node]] > 1]
    if not candidates:
        return None

    start_vertex = candidates[rng.randint(0, len(candidates) - 1)]
    component = comp_num[start_vertex]
    seen = [False] * tight.number_of_nodes()
    walk: list[int] = []
    successor = start_vertex
    while True:
        seen[successor] = True
        walk.append(successor)
        neighbors = [
            tight.edge_target(e)
            for e in tight.out_edges(successor)
            if comp_num[tight.edge_target(e)] == component
        ]
        successor = neighbors[rng.randint(0, len(neighbors) - 1)]
        if seen[successor]:
            break

    start_idx = walk.index(successor)
    return walk[start_idx:] + [successor]