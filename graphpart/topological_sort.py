"""Topological ordering of a directed acyclic graph."""

from __future__ import annotations

import random

from graphpart.graph import Graph


def topological_sort(graph: Graph, rng: random.Random | None = None) -> list[int]:
    """Return the nodes in topological order.

    Depth-first searches are started from the nodes in a random order drawn
    from ``rng``; the result is the reversed order in which nodes finish.
    """
    rng = rng if rng is not None else random.Random()
    order = list(graph.nodes())
    rng.shuffle(order)

    visited = [False] * graph.number_of_nodes()
    finished: list[int] = []

    for root in order:
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph.out_edges(root)))]
        while stack:
            node, edges = stack[-1]
            for e in edges:
                target = graph.edge_target(e)
                if not visited[target]:
                    visited[target] = True
                    stack.append((target, iter(graph.out_edges(target))))
                    break
            else:
                stack.pop()
                finished.append(node)

    finished.reverse()
    return finished