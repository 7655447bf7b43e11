# dsakit

Compact implementations of classic data structures and algorithms, written
to be read as well as used. No runtime dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.matrices` | `DiagonalMatrix`, `SparseMatrix`, `diagonal_sum`, `spiral_order` |
| `dsakit.queues` | `CircularQueue` with `QueueFullError` / `QueueEmptyError` |
| `dsakit.stacks` | `ArrayStack` (bounded), `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `fibonacci_series`, `power`, `sum_of_naturals`, `taylor_e`, `tower_of_hanoi`, `indirect_recursion`, `tail_recursion`, `head_recursion`, `tree_recursion`, `nested_recursion` |
| `dsakit.sorting` | `counting_sort`, `radix_sort`, `quick_sort` |
| `dsakit.strings` | `is_anagram`, `to_lower`, `count_words`, `count_vowels_consonants`, `duplicates`, `reverse`, `toggle_case`, `is_valid`, `strings_equal`, `is_palindrome`, `permutations` |

## Examples

```python
from dsakit.matrices import DiagonalMatrix, SparseMatrix, spiral_order, diagonal_sum
from dsakit.queues import CircularQueue
from dsakit.stacks import ArrayStack, LinkedStack
from dsakit.recursion import factorial, tower_of_hanoi, nested_recursion
from dsakit.sorting import radix_sort, quick_sort
from dsakit.strings import is_anagram, duplicates, toggle_case

spiral_order([[1, 2, 3], [4, 5, 6]])      # [1, 2, 3, 6, 5, 4]
diagonal_sum([[1, 2], [3, 4]])            # 5

d = DiagonalMatrix(3)                     # indices are 1-based
d.set(2, 2, 7)
d.get(2, 2)                               # 7
d.get(1, 2)                               # 0, off-diagonal cells are always zero

sparse = SparseMatrix(2, 3, [(0, 1, 5), (1, 2, 9)])   # indices are 0-based
print(sparse)
# 0 5 0
# 0 0 9

q = CircularQueue(3)
q.enqueue(1)
q.enqueue(2)
q.dequeue()                               # 1

s = ArrayStack(2)
s.push(10)
s.push(20)
s.peek(1)                                 # 20, the top of the stack
list(s)                                   # [20, 10], top first

factorial(5)                              # 120
tower_of_hanoi(2, 1, 2, 3)                # [(1, 2), (1, 3), (2, 3)]
nested_recursion(95)                      # 91

radix_sort([170, 45, 75, 90, 802, 24, 2, 66])
quick_sort([10, 16, 8, 12, 15, 6, 3, 9, 5])

is_anagram("listen", "silent")            # True
duplicates("viviaana")                    # {'a': 3, 'i': 2, 'v': 2}
toggle_case("wElCoMe")                    # 'WeLcOmE'
```

## Behaviour worth knowing

- Operations that cannot proceed raise an exception instead of returning a
  sentinel: enqueueing into a full `CircularQueue` raises `QueueFullError`,
  dequeueing from an empty one raises `QueueEmptyError`, pushing onto a full
  `ArrayStack` raises `StackOverflowError`, popping an empty stack raises
  `StackUnderflowError`, and `peek` with a position outside the stack raises
  `IndexError`.
- `DiagonalMatrix.set` and `get` raise `IndexError` for positions outside the
  matrix; `SparseMatrix` raises `ValueError` for out-of-range or repeated
  positions.
- `counting_sort` and `radix_sort` accept only non-negative integers and raise
  `ValueError` otherwise; `quick_sort` sorts any mutually comparable values.
  All three return a new list.
- `count_vowels_consonants`, `duplicates`, `to_lower` and `toggle_case` look at
  ASCII letters only.

## What this package does not do

It is a library only: it installs no command-line program and reads no input
from the terminal. Every routine takes its data as arguments and returns its
result.

## Running the tests

```
pip install "dsakit[test]"
pytest
```