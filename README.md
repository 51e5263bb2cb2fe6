# algokit

A small library of classic algorithm solutions: breadth- and depth-first
search on grids and graphs, binary-tree and linked-list routines, sliding
windows, stack techniques, polynomial string hashing, and solvers for a set
of programming-contest problems. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.grids`: `nearest_exit(maze, entrance)` and `oranges_rotting(grid)`.
  Both return `UNREACHABLE` (`-1`) when the goal cannot be reached and raise
  `ValueError` on an empty grid. `oranges_rotting` leaves its input unchanged.
- `algokit.graphs`: `can_visit_all_rooms`, `find_circle_num` and
  `topological_sort`, which raises `CycleError` (a `ValueError`) when the
  graph has a cycle.
- `algokit.trees`: `TreeNode`, `lowest_common_ancestor`, `max_depth`.
- `algokit.linked_lists`: `ListNode` (iterable over its nodes), `build_list`,
  `list_values`, `odd_even_list`, `delete_middle`.
- `algokit.counting`: `unique_occurrences`, `close_strings`,
  `find_kth_largest` (raises `ValueError` if `k` is out of range).
- `algokit.windows`: `find_max_average`, `longest_ones`, `longest_subarray`,
  `max_vowels`, `max_area`, `is_subsequence`.
- `algokit.stacks`: `asteroid_collision`, `decode_string`, `remove_stars`;
  the last two raise `ValueError` on malformed input.
- `algokit.strings`: `gcd_of_strings`.
- `algokit.hashing`: `PolyHash` (double-modulus prefix hashes; `get(start, end)`
  hashes `text[start:end]`), `string_borders`, `count_occurrences`.
- `algokit.contest_misc`: `is_degenerate_triangle`, `petal_totals`,
  `petal_averages`, `all_beds_visited`, `predecessors`, `max_movies`,
  `longest_unique_run`, `allocate_rooms` (returns a `RoomAllocation` with
  `count` and `rooms`), `sum_of_divisors` (modulo `MOD`, 10^9 + 7).
- `algokit.tap2016`: `lacks_letter_i`, `count_unlocked`, `count_pairs`,
  `fits_first_row`, `is_valid_path`.
- `algokit.tap2019`: `insert_ic`, `circles_separate`, `max_binary_path`.

In the query-style solvers (`petal_totals`, `petal_averages`) an integer
records a flower and `None` asks for the current answer; `predecessors`
answers `None` where no smaller value has been seen.

## Examples

```python
from algokit.graphs import topological_sort, CycleError
from algokit.stacks import decode_string
from algokit.linked_lists import build_list, list_values, odd_even_list
from algokit.hashing import count_occurrences
from algokit.contest_misc import allocate_rooms

topological_sort([[1], [2], [3], [4], []])   # [0, 1, 2, 3, 4]

try:
    topological_sort([[1], [2], [3], [0]])
except CycleError:
    print("no ordering exists")

decode_string("3[a]2[bc]")                    # "aaabcbc"

list_values(odd_even_list(build_list([1, 2, 3, 4, 5])))   # [1, 3, 5, 2, 4]

count_occurrences("aaaaa", "aa")              # 4

allocate_rooms([(1, 2), (2, 4), (4, 4)])      # RoomAllocation(count=2, rooms=[1, 2, 1])
```

## What it does not do

The contest solvers are plain functions that take Python values and return
the answer. The package installs no command-line programs: nothing reads
problem input from standard input or prints formatted answers; parsing and
output are left to the caller.