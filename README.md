# graphkit

Graph and tree algorithms for Python, written as plain functions that take
lists and tuples and return Python values. Nothing outside the standard
library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Conventions

- Nodes are numbered from 1 unless a function's docstring says otherwise
  (`vertex_path_composite` and `min_race_length` number nodes from 0).
- Edges are `(u, v)` pairs, or `(u, v, w)` triples where they carry a weight.
- Where there is no answer, a function returns the value its docstring names,
  such as `-1` or `None`. Input that cannot be handled (a disconnected tree,
  an unknown query kind, a negative edge length where none is allowed)
  raises `ValueError`; `DisjointSet` raises `IndexError` for elements
  outside `1..n`.

## Modules

- `graphkit.dsu`: `DisjointSet(n)` with `find`, `union` (returns `False` when
  the two were already joined), `same_set`, `size` and `count`; and
  `process_union_find`, `road_construction` (component count and largest
  component after each road), `restructuring_company` (single and range
  merges).
- `graphkit.trees`: `subordinate_counts`, `tree_diameter`, `max_distances`
  (eccentricity of every node), `distance_sums`, `count_forest_trees`.
- `graphkit.lifting`: `planet_queries` (node reached after k steps in a
  successor graph), `planet_distances` (fewest steps from a to b, or -1),
  `min_cyclic_segments`.
- `graphkit.cycles`: `find_negative_cycle`, `find_round_trip` (undirected),
  `find_directed_cycle`; each returns a closed list `[v, ..., v]` or `None`.
- `graphkit.shortest_paths`: `piggyback_cost`, `shortest_path_tree`
  (lightest shortest-path tree: total weight and edge ids),
  `shortcut_savings`.
- `graphkit.grids`: `mountain_heights`, `ski_course_rating`, `tractor_cost`,
  `lit_rooms`.
- `graphkit.robot_turtle`: `robot_turtle`, which returns a command string of
  `F`, `L`, `R`, `X` for an 8 by 8 board, or `None`.
- `graphkit.mst`: `count_paths_within`, `zoo_average`, `rebuild_roads`,
  `new_road_queries`.
- `graphkit.reachability`: `count_ranked`, `min_new_roads`.
- `graphkit.lca`: `RootedTree(n, edges, root=1, labels=None)` with
  `ancestor`, `lca` and `distance`, and the attributes `parent`,
  `parent_label`, `depth`, `tin` and `order`; plus `obx_queries`,
  `barn_reach_counts`, `tree_dfs_roots`, `railway_edges`.
- `graphkit.prison`: `prison_escape`, `tree_number_queries`.
- `graphkit.tours`: `wizard_tours`, `toll_costs`.
- `graphkit.euler_tour`: `distinct_color_queries`, `promotion_counts`,
  `subtree_sum_queries`, `palindrome_queries`, `region_queries`.
- `graphkit.hld`: `water_tree`, `first_black_queries`,
  `subtree_path_queries`.
- `graphkit.subtree_offline`: `vasya_tree`, `color_count_queries`.
- `graphkit.composite`: `vertex_path_composite` (linear functions composed
  along tree paths, modulo 998244353).
- `graphkit.colors`: `victory_queries` (distinct colours in subtrees under
  repainting).
- `graphkit.centroid`: `min_race_length`, `xenia_queries`.
- `graphkit.replacement`: `shortest_path_replacements`.

## Example

```python
from graphkit.dsu import DisjointSet
from graphkit.trees import tree_diameter

sets = DisjointSet(5)
sets.union(1, 2)
sets.union(2, 3)
assert sets.same_set(1, 3)
assert sets.size(3) == 3
assert sets.count() == 3

assert tree_diameter(5, [(1, 2), (1, 3), (3, 4), (3, 5)]) == 3
```

## What it does not do

graphkit is a library only. It has no command-line program and does not read
problem input from standard input or files; callers build the lists of
nodes, edges and queries themselves and pass them to the functions.