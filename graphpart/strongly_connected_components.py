"""Strongly connected components of a directed graph."""

from __future__ import annotations

from graphpart.graph import Graph


def strong_components(graph: Graph) -> tuple[int, list[int]]:
    """Return the number of strong components and the component id of every node.

    Components are numbered in the order they are completed by a depth-first
    search, so for every edge ``u -> v`` the id of ``u`` is at least that of ``v``.
    """
    n = graph.number_of_nodes()
    dfsnum = [-1] * n
    comp_num = [-1] * n
    dfscount = 0
    comp_count = 0
    unfinished: list[int] = []
    roots: list[int] = []

    for start in graph.nodes():
        if dfsnum[start] != -1:
            continue
        stack: list[tuple[int, int]] = [(start, graph.first_edge(start))]
        dfsnum[start] = dfscount
        dfscount += 1
        unfinished.append(start)
        roots.append(start)

        while stack:
            current, first = stack.pop()
            for e in range(first, graph.first_invalid_edge(current)):
                target = graph.edge_target(e)
                if dfsnum[target] == -1:
                    stack.append((current, e))
                    stack.append((target, graph.first_edge(target)))
                    dfsnum[target] = dfscount
                    dfscount += 1
                    unfinished.append(target)
                    roots.append(target)
                    break
                if comp_num[target] == -1:
                    while dfsnum[roots[-1]] > dfsnum[target]:
                        roots.pop()

            if current == roots[-1]:
                while True:
                    w = unfinished.pop()
                    comp_num[w] = comp_count
                    if w == current:
                        break
                comp_count += 1
                roots.pop()

    return comp_count, comp_num