# algobox

A small collection of classic data structures and algorithms, written for
reading and experimenting. It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.arrays` | `flatten`, `binary_search`, `bubble_sort`, `delete_value`, `delete_middle`, `find_duplicate`, `insert_sorted`, `insert_at`, `concatenate`, `merge_sorted`, `second_largest`, `summarize` (returns `ArrayStats`) |
| `algobox.matrix` | `add`, `subtract`, `multiply`, `transpose`, `determinant_3x3`, `inverse_3x3` |
| `algobox.recursion` | `factorial`, `fibonacci`, `fibonacci_sequence`, `hanoi_moves` (yields `Move`) |
| `algobox.searching` | `linear_search`, `binary_search` |
| `algobox.sorting` | `bubble_sort`, `insertion_sort` |
| `algobox.graph` | `Graph` (adjacency lists, adjacency matrix, breadth-first search), `path_count_matrices`, `path_matrix`, `is_strongly_connected` |
| `algobox.hashing` | `partition_by_mod`, `LinearProbingTable`, `QuadraticProbingTable`, `PlusThreeProbingTable`, `SeparateChainingTable`, `TableFullError` |
| `algobox.heap` | `MaxHeap`, `build_max_heap` |
| `algobox.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError` |
| `algobox.stacks` | `Stack`, `StackEmptyError`, `StackFullError` and an interactive stack menu (`main`) |
| `algobox.expression` | `priority`, `infix_to_postfix`, `evaluate_postfix`, `evaluate_infix` |
| `algobox.trees` | `Node`, `BinarySearchTree`, `BinaryTree`, `inorder`, `preorder`, `postorder`, `level_order` |

The list functions in `algobox.arrays` and the sorts return new lists and
leave their input untouched. Searches return an index, or `None` when the
value is absent.

## Examples

```python
from algobox.sorting import insertion_sort
from algobox.expression import infix_to_postfix, evaluate_infix
from algobox.recursion import hanoi_moves
from algobox.hashing import LinearProbingTable

insertion_sort([54, 68, 92, 12, 3])
# [3, 12, 54, 68, 92]

infix_to_postfix("A+(180.5*C-(D/E^F)*G)*2.0")
# 'A,180.5,C,*,D,E,F,^,/,G,*,-,2.0,*,+'

evaluate_infix("a+5.0*(2+3)-b", {"a": 1, "b": 2})
# 24.0

for move in hanoi_moves(3, "a", "b", "c"):
    print(move)
# disk 1 moved from a to b
# disk 2 moved from a to c
# ...

table = LinearProbingTable()
table.insert(45)   # 5
table.search(45)   # 5
print(table)       # ~ ~ ~ ~ ~ 45 ~ ~ ~ ~
```

Postfix expressions are comma-separated tokens. Letters in an expression name
variables, whose values are passed as a mapping; a missing name raises
`KeyError`. Operators of equal precedence, `^` included, associate to the left.

## Errors

Queues and stacks raise `QueueEmptyError`, `QueueFullError`,
`StackEmptyError` and `StackFullError` when an operation cannot be done. A
probing hash table raises `TableFullError` when it has no free slot left, and
`KeyError` when asked to delete an item it does not hold. Matrix functions
raise `ValueError` for mismatched shapes and for a singular matrix passed to
`inverse_3x3`.

An `ArrayQueue` does not reuse slots freed at its front until it has been
emptied, so it can report full while holding fewer items than its capacity;
`CircularQueue` reuses them.

## Interactive stack

The package installs a command that starts a menu-driven stack of integers:

```
algobox-stack
algobox-stack --capacity 10
```

It offers push, pop, show (top first), an emptiness check, a fullness check
and exit. The capacity defaults to 100. The session also ends at end of input.