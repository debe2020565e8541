# graphpart

Building blocks for multilevel graph partitioning, in pure Python with no
runtime dependencies.

## What is inside

- `graphpart.graph.Graph`: a directed graph in compressed adjacency (CSR)
  form with node weights, edge weights, edge ratings and per-node block
  assignments (`partition_index`, `second_partition_index`). It is built
  incrementally with `start_construction`, `new_node`, `new_edge` and
  `finish_construction` (edges must be added in order of their source), or
  from METIS-style arrays with `build_from_metis` and
  `build_from_metis_weighted`. `metis_xadj`, `metis_adjncy`, `metis_vwgt`
  and `metis_adjwgt` return those arrays again, and `copy` returns a new
  graph with the same nodes, edges and weights.
- `graphpart.priority_queues`: `BucketPQ` (integer gains in
  `0 .. gain_span - 1`, last in first out among equal gains) and
  `MaxNodeHeap` (a binary max-heap with arbitrary integer keys), both under
  the abstract `PriorityQueue` interface. Keys can be changed in place with
  `increase_key`, `decrease_key` and `change_key`; nodes can be removed with
  `delete_node` or `delete_max`.
- `graphpart.union_find.UnionFind`: disjoint sets with union by rank and
  path compression; `set_count` gives the number of sets.
- `graphpart.buffered_map`: `BufferedMap`, a key-to-value mapping stored in
  an external list and reset with `clear`, and `BufferedInput`, which returns
  the runs of decimal digits on a text line as integers, one line per call
  to `simple_scan_line`.
- `graphpart.flow_graph.FlowGraph`: a residual graph in which every edge
  added with `new_edge` gets a zero-capacity reverse edge.
- `graphpart.push_relabel.PushRelabel`: FIFO push-relabel maximum flow with
  global relabeling and the gap heuristic. `solve_max_flow_min_cut` returns
  the flow value and, on request, the source side of a minimum cut.
- `graphpart.strongly_connected_components.strong_components`: returns the
  number of strong components and the component id of every node.
- `graphpart.topological_sort.topological_sort`: returns the nodes in
  topological order, starting its searches in an order drawn from a
  `random.Random`.
- `graphpart.cycle_search`: `find_negative_cycle`, `find_shortest_path`,
  `find_zero_weight_cycle` and `find_random_cycle`.
- `graphpart.graph_hierarchy.GraphHierarchy`: a stack of coarsened graphs
  whose `pop_finer_and_project` copies the partition of a coarser graph onto
  the next finer one; `pop_finer_and_project_ns` also returns the nodes that
  land in block 2.
- `graphpart.definitions`: configuration enums, sentinel constants such as
  `INVALID_PARTITION`, and the FNV-1a hash helpers `fnv0a`, `fnv1a` and
  `fnv2a`.

## Installation

```
pip install .
```

## Example

```python
from graphpart.graph import Graph
from graphpart.strongly_connected_components import strong_components

g = Graph()
g.build_from_metis([0, 1, 2, 3], [1, 2, 0])  # directed cycle 0 -> 1 -> 2 -> 0
count, components = strong_components(g)
print(count)  # 1
```

Maximum flow:

```python
from graphpart.flow_graph import FlowGraph
from graphpart.push_relabel import PushRelabel

fg = FlowGraph()
fg.start_construction(4, 0)
fg.new_edge(0, 1, 3)
fg.new_edge(0, 2, 2)
fg.new_edge(1, 3, 2)
fg.new_edge(2, 3, 3)
flow, source_side = PushRelabel().solve_max_flow_min_cut(fg, 0, 3, True)
print(flow)         # 4
print(source_side)  # [0, 1]
```

## What the package does not do

graphpart holds the data structures and graph algorithms only. It has no
partitioner that splits a graph into blocks, no coarsening or refinement
steps, no readers or writers for graph or partition files, and no command
line program. Those have to be supplied by the code that uses it.

## Running the tests

```
pip install ".[test]"
pytest
```