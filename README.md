# algocollection

A small library of classic algorithms in plain Python, with no dependencies
outside the standard library. Every function takes ordinary Python values
(lists, tuples, strings, integers) and returns new values; inputs are not
modified.

## What is inside

| Module | Contents |
| --- | --- |
| `algocollection.backtracking` | `solve_maze`, `is_valid_placement`, `solve_sudoku`, `format_sudoku` |
| `algocollection.graphs` | `Graph` (`add_edge`, `bfs`, `describe`), `DisjointSet` (`find`, `union`), `is_bipartite`, `dfs_matrix`, `dfs_stack`, `dijkstra`, `kruskal`, `topological_sort` |
| `algocollection.hashing` | `ChainedHashTable` (`hash_of`, `add`, `contains`, `buckets`, `describe`, and the `in` operator) |
| `algocollection.number_theory` | `sieve_primes`, `is_buzz_number`, `gcd_of`, `is_happy_number`, `is_palindrome_number`, `fibonacci`, `power_digits`, `prime_factorization` |
| `algocollection.geometry` | `Point`, `distance`, `triangle_area`, `contains_all`, `smallest_enclosing_circle` |
| `algocollection.spiral` | `generate_matrix`, `spiral_order` |
| `algocollection.searching` | `find_substring`, `ternary_search_iterative`, `ternary_search_recursive` |
| `algocollection.sorting` | `bitonic_sort`, `cocktail_selection_sort`, `cocktail_selection_sort_recursive`, `counting_sort`, `counting_sort_string`, `numeric_string_key`, `numeric_sort`, `bucket_sort`, `next_gap`, `comb_sort` |

## Examples

### Number theory

```python
from algocollection.number_theory import (
    fibonacci, is_buzz_number, power_digits, prime_factorization, sieve_primes,
)

fibonacci(10)              # 55
is_buzz_number(17)         # True: the last digit is 7
sieve_primes(30)           # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
power_digits(2, 10)        # "1024"
prime_factorization(360)   # [(2, 3), (3, 2), (5, 1)]
```

`is_happy_number` sums the digits repeatedly until one digit is left and
reports whether that digit is 1.

### Graphs

Vertices are numbered from 1 in `Graph`, `is_bipartite`, `dijkstra` and
`topological_sort`; a vertex outside `1..vertex_count` raises `ValueError`.
`dfs_matrix` works on a 0-indexed adjacency matrix, and `dfs_stack` on a
mapping or list of adjacency lists.

```python
from algocollection.graphs import Graph, dijkstra, kruskal, topological_sort

edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]
dijkstra(3, edges, 1, False)           # {1: 0, 2: 4, 3: 5}
kruskal(edges)                         # 5, the weight of a minimum spanning forest
topological_sort(3, [(1, 2), (2, 3)])  # [1, 2, 3]

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs(1)                               # [1, 2, 3]
```

`dijkstra` maps unreachable vertices to `None`; pass `directed=True` to use
the edges in one direction only.

### Hashing

```python
from algocollection.hashing import ChainedHashTable

table = ChainedHashTable(5)
table.add(12)
table.add(7)
12 in table        # True
table.buckets()    # [[], [], [12, 7], [], []]
print(table.describe())
```

### Backtracking

```python
from algocollection.backtracking import format_sudoku, solve_maze, solve_sudoku

maze = [
    [1, 0, 1, 0],
    [1, 0, 1, 1],
    [1, 0, 0, 1],
    [1, 1, 1, 1],
]
solve_maze(maze)   # 1 on the cells of a right/down path, or None

grid = [[0] * 9 for _ in range(9)]   # 0 marks an empty cell
solved = solve_sudoku(grid)          # the solved grid, or None
print(format_sudoku(solved))
```

### Geometry and matrices

```python
from algocollection.geometry import Point, smallest_enclosing_circle
from algocollection.spiral import generate_matrix, spiral_order

center, radius = smallest_enclosing_circle(
    [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
)                                      # centre (1, 1), radius √2

spiral_order(generate_matrix(3, 3))    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

### Searching and sorting

```python
from algocollection.searching import find_substring, ternary_search_iterative
from algocollection.sorting import bucket_sort, comb_sort, numeric_sort

find_substring("hello world", "world")      # 6, or None when absent
ternary_search_iterative([1, 2, 3, 4], 3)   # 2, or None when absent

numeric_sort(["1", "10", "100", "2", "20", "3"])
# ["1", "2", "3", "10", "20", "100"]
comb_sort([5, 3, 1, 4])                     # [1, 3, 4, 5]
bucket_sort([0.897, 0.565, 0.1234])         # [0.1234, 0.565, 0.897]
```

Some sorts have limits: `bitonic_sort` needs a power-of-two number of values,
`bucket_sort` needs values in `[0, 1)`, and both raise `ValueError`
otherwise. `find_substring` raises `ValueError` on an empty paragraph.

## What it does not do

This is a library only. It installs no commands and has no interactive
prompts: nothing reads from standard input or prints results. Where a
readable text form is useful, `format_sudoku`, `Graph.describe` and
`ChainedHashTable.describe` return it as a string for the caller to print.

## Tests

The test suite uses pytest, installed with the `test` extra:

```
pip install -e ".[test]"
pytest
```