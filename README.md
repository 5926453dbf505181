# dsakit

A small library of classic data structures and algorithms. It uses only the
Python standard library and supports Python 3.10 and later.

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

### `dsakit.arrays`

- `second_minimum(values)`: the second smallest *distinct* value. Raises
  `ValueError` if the input is empty or has fewer than two distinct values.
- `max_subarray_sum(values)`: the largest sum of a non-empty contiguous run
  (Kadane's algorithm). Raises `ValueError` on empty input.
- `majority_element(values)`: the element that occurs more than half the time,
  found with Moore's voting algorithm and then verified; `None` if there is
  no such element.
- `find_pair_with_sum(values, target)`: the first pair, in index order, whose
  sum is `target`, as a tuple; `None` if there is none.

```python
from dsakit.arrays import max_subarray_sum, majority_element, find_pair_with_sum

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
majority_element([2, 2, 1, 1, 2, 2, 2])                   # 2
majority_element([1, 2, 3, 4, 5])                         # None
find_pair_with_sum([2, 3, 5, 6, 1, 4, 0, 9, 8, 7], 7)       # (2, 5)
```

### `dsakit.searching`

- `binary_search(values, key)`: returns an index of `key` in a sequence sorted
  in ascending order, or `None`. Raises `ValueError` if the sequence is not in
  ascending order.
- `linear_search(values, key)`: returns the index of the first occurrence of
  `key`, or `None`.

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and
`selection_sort`. Each takes an iterable and returns a new list in ascending
order; the input is left unchanged. `merge_sort` is stable; `quick_sort` uses
the last element of each range as its pivot.

```python
from dsakit.sorting import merge_sort

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
```

### `dsakit.stack`

- `LinkedStack`: an unbounded last-in, first-out stack of linked nodes with
  `push`, `pop` and `peek`. It supports `len()` and iterates from top to
  bottom.
- `Student`: a record with `roll`, `name`, `eng` and `math`; `total()` returns
  `eng + math`.
- `StudentStack(capacity=5)`: a bounded stack of `Student` records with
  `push`, `pop`, `peek` and `sort_by_marks`, which reorders the records so
  their totals ascend from bottom to top. It supports `len()` and iterates
  from top to bottom.
- `StackFullError` (an `OverflowError`) is raised when pushing onto a full
  `StudentStack`; `StackEmptyError` (an `IndexError`) when popping or peeking
  an empty stack.
- `reverse_string(text)`: reverses a string by pushing its characters onto a
  stack.

### `dsakit.postfix`

`evaluate_postfix(expression)` evaluates a whitespace-separated postfix
expression of integers with `+ - * / ^`. Integers may carry a sign (`-5`);
a lone `-` is the operator. Division truncates toward zero. A negative
exponent gives the floating-point result rounded half away from zero. An
empty or malformed expression, an invalid token, a division by zero or zero
raised to a negative power raises `PostfixError` (a `ValueError`).

```python
from dsakit.postfix import evaluate_postfix

evaluate_postfix("5 1 2 + 4 * + 3 -")   # 14
evaluate_postfix("-7 2 /")              # -3
```

### `dsakit.brackets`

`is_balanced(expression)` returns `True` if every `(`, `[` and `{` in the
string is closed by its partner in the right order. Other characters are
ignored.

### `dsakit.queues`

Each queue has `enqueue` and `dequeue`, supports `len()` and iterates from
front to rear.

- `CircularQueue(capacity=5)`: a bounded queue whose slots wrap around.
- `LinearQueue(capacity=5)`: a bounded queue over a fixed row of slots; slots
  freed at the front are not reused, so once the rear reaches the last slot
  the queue stays full until it has been emptied completely.
- `LinkedQueue()`: an unbounded queue of linked nodes.

Bounded queues raise `QueueFullError` (an `OverflowError`) when no slot is
free; every queue raises `QueueEmptyError` (an `IndexError`) when dequeued
while empty. A capacity below 1 raises `ValueError`.

### `dsakit.tree`

`Node(value, left=None, right=None)` is a binary tree node.
`insert(root, value)` adds a value to a binary search tree (larger values go
right, equal and smaller go left) and returns the root; pass `None` to start
a new tree. `inorder`, `preorder` and `postorder` are generators yielding the
values of a tree in the named order.

```python
from dsakit.tree import Node, insert, inorder, preorder, postorder

root = Node(1, Node(2, Node(4), Node(5)), Node(3))
list(inorder(root))     # [4, 2, 5, 1, 3]
list(preorder(root))    # [1, 2, 4, 5, 3]
list(postorder(root))   # [4, 5, 2, 3, 1]

bst = None
for value in [5, 3, 8, 1]:
    bst = insert(bst, value)
list(inorder(bst))      # [1, 3, 5, 8]
```

## What it does not do

The package is a library only. It installs no command and has no interactive
menus or prompts: values are passed to the functions and classes above, and
results come back as return values or exceptions.