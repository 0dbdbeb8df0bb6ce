# algokit

A small collection of classic algorithms. Each function takes plain Python
values (lists, nested lists as matrices) and returns plain values or small
frozen dataclasses.

## Modules

### `algokit.sorting`

`merge_sort(values)`, `quick_sort(values)` and `selection_sort(values)` take
any iterable of numbers, leave it untouched and return a `SortResult` with:

- `values` — the sorted list;
- `operations` — the number of basic operations counted: element comparisons
  during merging for merge sort, scan steps during partitioning for quicksort
  (first element as pivot), and element comparisons for selection sort.

### `algokit.knapsack`

- `greedy_knapsack(weights, prices, capacity)` takes items in descending
  price-to-weight order until one no longer fits. The `GreedyKnapsackResult`
  holds the chosen `items`, the `discrete_profit`, the `fractional_item`
  (the first item that did not fit whole, or `None`), the `fraction` of it
  that still fits, and the `continuous_profit` that includes that fraction.
  Weights must be positive.
- `knapsack_dp(weights, prices, capacity)` solves the 0/1 problem exactly.
  The `DPKnapsackResult` holds the full value `table`, the chosen `items`
  (indices in ascending order) and the optimal `value`.

Both raise `ValueError` when the weight and price lists differ in length or
the capacity is negative.

### `algokit.graphs`

Graphs are given as square matrices. For the spanning-tree functions an entry
of `NO_EDGE` (999) or more means there is no edge.

- `floyd(matrix)` — all-pairs shortest path costs.
- `warshall(matrix)` — transitive closure as a 0/1 matrix.
- `kruskal(cost)` and `prim(cost)` — minimum spanning trees, returned as a
  `SpanningTree` whose `edges` are `Edge(u, v, cost)` values in the order they
  were chosen and whose `cost` is their total. Prim's algorithm starts from
  vertex 0. Both raise `ValueError` if the graph is not connected.
- `topological_order(adjacency)` — vertex order by repeated removal of
  sources, lowest-numbered source first; raises `ValueError` on a cycle.

A matrix that is not square raises `ValueError`.

### `algokit.backtracking`

- `n_queens(n)` yields every placement of `n` queens (1 to `MAX_QUEENS`,
  which is 20) as a tuple giving the column of the queen in each row.
- `format_board(board)` draws a placement with ` Q ` for a queen and ` - `
  for an empty square.
- `sum_of_subsets(weights, target)` yields every subset of positive weights,
  given in non-decreasing order, that adds up to `target`.

## Installation

```
pip install .
```

## Using the library

```python
from algokit.backtracking import format_board, n_queens
from algokit.graphs import floyd, prim
from algokit.sorting import merge_sort

result = merge_sort([5, 3, 9, 1])
print(result.values, result.operations)

distances = floyd([
    [0, 3, 999],
    [999, 0, 2],
    [7, 999, 0],
])

tree = prim([
    [0, 1, 4],
    [1, 0, 2],
    [4, 2, 0],
])
print(tree.cost)

for board in n_queens(4):
    print(format_board(board))
```

## Command line

The package installs an `algokit` command with these subcommands:

```
algokit sort 20 --algorithm quick --seed 1
algokit knapsack --weights 2 3 4 --prices 3 4 5 --capacity 5
algokit knapsack --weights 2 3 4 --prices 3 4 5 --capacity 5 --dp
algokit floyd matrix.txt
algokit queens 6
algokit subsets --target 9 1 2 5 6 8
```

- `sort COUNT` sorts `COUNT` random numbers with `--algorithm` `merge`
  (default), `quick` or `selection` and prints the operation count; `--seed`
  makes the numbers reproducible.
- `knapsack` runs the greedy solver, or the dynamic-programming solver with
  `--dp`, which also prints the value table.
- `floyd` reads the number of vertices followed by the cost matrix from a
  file, or from standard input when no file is given.
- `queens N` prints every solution and the total.
- `subsets` prints every subset of the weights that sums to `--target`.

Errors in the input are reported on standard error and the command exits
with status 1. Run `algokit --help` for the full list of options.

### What the command line does not offer

Warshall's closure, Kruskal's and Prim's spanning trees and the topological
ordering are available only from Python; there are no subcommands for them.

## Running the tests

```
pip install ".[test]"
pytest
```