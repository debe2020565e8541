"""Graph data structures and algorithms for multilevel graph partitioning."""

__version__ = "0.1.0"

__all__ = [
    "buffered_map",
    "cycle_search",
    "definitions",
    "flow_graph",
    "graph",
    "graph_hierarchy",
    "priority_queues",
    "push_relabel",
    "strongly_connected_components",
    "topological_sort",
    "union_find",
]