# interviewkit

Small, self-contained implementations of classic algorithm and design
exercises, as a plain Python library with no runtime dependencies. It needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `interviewkit.linked_lists` | `ListNode`, `RandomListNode`, `from_values`, `to_values`, `iter_values`, `add_two_numbers`, `partition`, `clone_random_list` |
| `interviewkit.trees` | `TreeNode`, `bst_insert`, `build_bst`, `inorder`, `preorder`, `postorder`, `sum_root_to_leaf`, `lowest_common_ancestor` |
| `interviewkit.device_network` | `Device`, `find_path_iterative`, `find_path_recursive`, `build_sample_hub` |
| `interviewkit.lru_cache` | `LRUCache` with `get`, `put`, `items` and `len()` |
| `interviewkit.median` | `MedianFinder` (running median of a stream) |
| `interviewkit.dependencies` | `build_order`, `is_catalog_valid`, `is_catalog_valid_strict` |
| `interviewkit.graphs` | `Digraph` with `add_edge`, `bfs`, `dfs`, `has_cycle`, `is_bipartite`, `topological_sort`, `transpose` |
| `interviewkit.grid_path` | `shortest_path_binary_matrix` |
| `interviewkit.find` | `FileType`, `File`, `Filter`, `SizeFilter`, `TypeFilter`, `AndFilter`, `OrFilter`, `Finder`, `format_result` |
| `interviewkit.vending` | `Product`, `Water`, `Coke`, `Payment`, `CardPayment`, `CashPayment`, `VendingMachine`, `Customer` |
| `interviewkit.pizza` | `Base`, `Size`, `Topping`, `Pizza`, `format_options` |
| `interviewkit.income` | `SimpleDate`, `Income`, `IncomeCalculator`, `calculate_income` |
| `interviewkit.event_buffer` | `CircularBuffer`, `Event`, `ProcessHandler` (producer and consumer; the oldest events are dropped when the buffer is full) |
| `interviewkit.blocking_queue` | `BoundedBlockingQueue` |
| `interviewkit.fizzbuzz` | `FizzBuzz`, whose four methods take turns from four threads |
| `interviewkit.thread_pool` | `ThreadPool` with `submit` and `shutdown`, usable as a context manager |
| `interviewkit.current_monitor` | `CurrentMonitor` (average of recent samples over a time window) |
| `interviewkit.bit_patterns` | `PATTERN`, `find_pattern`, `max_consecutive_states` |
| `interviewkit.postfix` | `evaluate_postfix`, `PostfixError`, `PostfixDivisionByZero` |
| `interviewkit.arrays` | `max_recursive`, `max_divide_and_conquer`, `merge_sort`, `maximum_units`, `max_subarray`, `rotate_image`, `slowest_key` |
| `interviewkit.dynamic` | `max_score`, `fib_recursive`, `fib_memo`, `fib_bottom_up` |
| `interviewkit.strings` | `prefix_table`, `str_str`, `length_of_longest_substring`, `longest_valid_parentheses`, `min_window`, `partition_string`, `run_length_encode`, `is_robot_bounded` |

## Behaviour worth knowing

- `LRUCache.get` returns `-1` for a missing key. A cache with capacity 0
  ignores every `put`. `items()` lists entries from most to least recently
  used.
- `MedianFinder.find_median` raises `ValueError` when no numbers have been
  added.
- `build_order` and `is_catalog_valid_strict` raise `KeyError` for a
  dependency that is not a key of the mapping. `is_catalog_valid` treats such
  a dependency as having no dependencies.
- `Digraph` vertices are `0..n-1`. A vertex outside that range raises
  `ValueError`. `dfs` marks vertices when they are pushed, so later neighbours
  are visited first.
- `Finder.find` raises `NotADirectoryError` when it is given something that
  is not a directory.
- `CircularBuffer.remove(timeout)` raises `TimeoutError` when nothing arrives
  in time. `ProcessHandler.process_events` returns the number of events it
  handled once a wait times out.
- `ThreadPool.shutdown` runs every task still queued before the workers stop.
  Exceptions raised by tasks are collected in `pool.errors`. Submitting after
  shutdown has begun raises `RuntimeError`.
- `CurrentMonitor` discards readings outside -1000..1000.
- `evaluate_postfix` uses 32-bit wrap-around arithmetic and division that
  truncates toward zero. It raises `PostfixDivisionByZero` on division by zero
  and `PostfixError` for any other malformed expression.
- The Fibonacci functions count positions from 1. A position below 1 raises
  `ValueError`.
- `IncomeCalculator` takes an optional `today`; without one it uses the
  current date.

## Examples

```python
from interviewkit.linked_lists import from_values, to_values, add_two_numbers

total = add_two_numbers(from_values([7, 2, 4, 3]), from_values([5, 6, 4]))
print(to_values(total))          # [7, 8, 0, 7]
```

```python
from interviewkit.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                     # 1
cache.put(3, 3)                  # evicts key 2
cache.get(2)                     # -1
```

```python
from interviewkit.graphs import Digraph

g = Digraph(6)
for src, dest in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(src, dest)
print(g.topological_sort())      # [5, 4, 2, 3, 1, 0]
```

```python
from interviewkit.find import File, FileType, Finder, TypeFilter, format_result

root = File("root", is_directory=True)
root.add_child(File("schema", 2, FileType.XML))
root.add_child(File("notes", 20, FileType.TXT))
print(format_result(Finder().find(root, [TypeFilter(FileType.XML)])), end="")
```

```python
from interviewkit.thread_pool import ThreadPool

with ThreadPool(3) as pool:
    for i in range(10):
        pool.submit(lambda i=i: print("task", i))
```

```python
from interviewkit.postfix import evaluate_postfix

evaluate_postfix(["2", "3", "+", "4", "*"])   # 20
```

## What it does not do

- There is no command-line program. Everything is used by importing the
  modules.
- `interviewkit.find` searches trees of `File` objects that you build in
  memory. It does not read the real file system.
- `CurrentMonitor` averages the numbers it is given. It does not read any
  sensor or device.