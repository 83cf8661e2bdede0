# daakit

Classic algorithms as plain Python functions with no dependencies outside
the standard library. Each one takes ordinary Python values and returns
ordinary Python values. Invalid input raises `ValueError` or a subclass of it.

## Installation

```
pip install daakit
```

To run the test suite:

```
pip install "daakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `daakit.huffman` | `HuffmanNode`, `build_tree`, `huffman_codes`, `count_symbols`, `distinct_frequencies`, `build_tree_from_text`, `code_table`, `encode`, `fixed_size_bits` |
| `daakit.string_match` | `naive_search`, `compute_lps`, `kmp_search`, `rabin_karp_search` |
| `daakit.flow` | `edmonds_karp`, `ford_fulkerson` |
| `daakit.shortest_paths` | `Edge`, `NegativeCycleError`, `bellman_ford`, `floyd_warshall`, `format_distance_matrix` |
| `daakit.assignment` | `Assignment`, `AssignmentResult`, `lower_bound`, `solve_assignment` |
| `daakit.geometry` | `Point`, `orientation`, `on_segment`, `segments_intersect`, `graham_scan`, `jarvis_march` |
| `daakit.knapsack` | `Item`, `FractionalChoice`, `fractional_knapsack`, `knapsack_01` |
| `daakit.dynamic` | `MatrixChainResult`, `matrix_chain_order`, `lcs` |
| `daakit.scheduling` | `Job`, `AssemblyResult`, `sequence_jobs`, `assembly_line` |
| `daakit.divide_conquer` | `Subarray`, `karatsuba`, `max_subarray`, `quicksort` |
| `daakit.queens` | `solve_n_queens`, `render_board`, `queen_positions` |
| `daakit.cli` | `trace`, `parse_int_rows`, `main` |

### Notes on behaviour

- **Huffman.** `code_table` labels a left edge `0` and a right edge `1`. A tree
  with a single leaf gives that symbol the empty code. `fixed_size_bits` uses
  the smallest width of 0 to 5 bits that covers the distinct characters. It
  returns 0 when there are more than 32 distinct characters.
- **String matching.** All three searches return the list of shifts where the
  pattern occurs, overlapping matches included. An empty pattern raises
  `ValueError`.
- **Flow.** `edmonds_karp` and `ford_fulkerson` take a square capacity matrix
  and return the maximum flow. Both augment along breadth-first paths.
  `ford_fulkerson` stops each search as soon as it reaches the sink.
- **Shortest paths.** `bellman_ford` returns `math.inf` for unreachable
  vertices and raises `NegativeCycleError` when a negative cycle is reachable.
  `floyd_warshall` returns a new matrix. Use a large number such as 99999 for
  "no edge". `format_distance_matrix` prints values in 7-wide columns and shows
  `INF` for any value at or above its threshold. The threshold defaults to
  99999.
- **Assignment.** `solve_assignment` runs least-cost branch and bound over a
  square cost matrix, with rows as workers and columns as jobs. `str()` of an
  `Assignment` reads like `Assign Worker A to Job 1`.
- **Geometry.** `orientation` returns `COLLINEAR` (0), `CLOCKWISE` (1) or
  `COUNTERCLOCKWISE` (2). Both hull functions raise `ValueError` when no hull
  is possible.
- **Knapsack.**
  - `fractional_knapsack` returns one `FractionalChoice` per item, sorted by
    descending profit/weight, together with the total profit.
  - `knapsack_01` needs integer weights. It returns the best profit and the
    chosen items in input order.
- **Dynamic programming.**
  - `matrix_chain_order([10, 30, 5, 60])` returns the minimum cost and a
    bracketing such as `((A1A2)A3)`.
  - `lcs` returns one longest common subsequence.
- **Scheduling.**
  - `sequence_jobs` fills unit time slots greedily by profit and returns the
    scheduled jobs in slot order.
  - `assembly_line` handles exactly two lines. It returns the fastest time and
    the line used at each station.
- **Divide and conquer.**
  - `max_subarray` returns inclusive start and end indices and the sum.
  - `quicksort` returns a new sorted list. It accepts an optional
    `random.Random` to make the pivot choices reproducible.
- **Queens.** `solve_n_queens(n)` accepts sizes 4 to 15 and returns a boolean
  board indexed `[row][col]`.

## Examples

```python
from daakit.flow import edmonds_karp

capacity = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]
print(edmonds_karp(capacity, 0, 5))  # 23
```

```python
from daakit.string_match import kmp_search, rabin_karp_search

print(kmp_search("abababab", "abab"))              # [0, 2, 4]
print(rabin_karp_search("abababab", "abab", 101))  # [0, 2, 4]
```

```python
from daakit.huffman import build_tree_from_text, code_table, encode, fixed_size_bits

text = "abbcdbccdaabbeeebeab"
codes = code_table(build_tree_from_text(text))
bits = encode(text, codes)
print(len(bits), "bits instead of", fixed_size_bits(text))
```

```python
from daakit.shortest_paths import Edge, NegativeCycleError, bellman_ford

edges = [Edge(0, 1, 4), Edge(0, 2, 1), Edge(2, 1, 2)]
try:
    print(bellman_ford(3, edges, 0))  # [0, 3, 1]
except NegativeCycleError:
    print("the graph has a negative weight cycle")
```

```python
from daakit.divide_conquer import karatsuba

print(karatsuba(1234, 5678))  # 7006652
```

## Command line

Installing the package provides a `daakit` command with two subcommands. Both
read from standard input.

- `daakit rows` reads a count on the first line, then that many lines of
  integers. It prints each line back with every value followed by a space.
  A line ends at its first token that is not an integer.
- `daakit trace` reads a count, then that many 3 x 3 matrices as
  whitespace-separated integers. It prints the trace of each matrix.

```
printf '2\n1 2 3\n4 5\n' | daakit rows
printf '1\n1 2 3\n4 5 6\n7 8 9\n' | daakit trace
```

On malformed input the command writes a message to standard error and exits
with status 1. Run `daakit --help` for the options.

## What it does not do

The command line covers only the two readers above. The algorithms have no
interactive prompts or commands of their own. Call them from Python.