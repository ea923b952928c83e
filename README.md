# dsakit

Small, dependency-free data structures and classic algorithm solutions.

## Install

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## What is inside

- `dsakit.tree`: `TreeNode` (a dataclass with `val`, `left`, `right`), with `preorder` (a generator of values), `inorder_traversal` (a list of values), `is_same_tree` and `max_depth`.
- `dsakit.bst`: `BST`, an unbalanced binary search tree over `TreeNode`s. `insert` adds a leaf (equal values go to the right), `search` and the `in` operator look a value up, and `render` returns the tree in pre-order, one node per line, with the root indented by two tabs, left children by one and right children by three.
- `dsakit.linked_list`: `SinglyNode` and `DoubleNode`, built with `build_singly` and `build_double`. Nodes are iterable from themselves onward, `str()` gives the node's own value, and `render` returns a titled arrow chain. `SinglyNode.search` looks for a value from the node onward. `remove_elements`, `reverse_list` (in place) and `middle_node` (the second middle for even lengths; `ValueError` for an empty list) work on singly linked lists.
- `dsakit.searching`: `binary_search` over an ascending sequence, returning a `SearchResult` with `index` (or `None`), `iterations` (the number of probes) and a `found` property.
- `dsakit.linked_queue`: `LinkedQueue`, a FIFO queue with `push`, `pop`, `front`, `back`, `empty`, `len()`, iteration and `render`. `front` and `back` raise `QueueEmptyError` (an `IndexError`) on an empty queue; `pop` returns the dequeued value, or `None` when the queue is empty.
- `dsakit.stack`: `Stack`, a LIFO stack with `push`, `pop`, `top`, `empty`, `len()` and `render`. `pop` and `top` raise `IndexError` on an empty stack.
- `dsakit.arrays`: `two_sum`, `remove_duplicates` (in place, returns the count of unique values), `move_zeroes` (in place), `intersect` (multiset intersection in the order of the second list) and `find_max_average` (`ValueError` unless `1 <= k <= len(nums)`).
- `dsakit.strings`: `is_palindrome_number`, `is_pair`, `is_valid_parentheses` (any non-bracket character makes the string invalid), `is_valid_palindrome` (ASCII letters and digits only, case ignored) and `first_uniq_char` (returns `-1` when there is none).

## Examples

```python
from dsakit.bst import BST
from dsakit.tree import TreeNode

root = TreeNode(10, TreeNode(5, TreeNode(2), TreeNode(7)), TreeNode(15))
bst = BST(root)
7 in bst          # True
bst.search(11)    # False
bst.insert(8)
print(bst.render())
```

```python
from dsakit.linked_list import build_singly, reverse_list

head = build_singly([5, 1, 2, 6])
print(head.render())
# Single Linked list
# 5->1->2->6->null
print(list(reverse_list(head)))      # [6, 2, 1, 5]
```

```python
from dsakit.searching import binary_search

result = binary_search([1, 3, 5, 7, 9, 12], 9)
result.index, result.found           # (4, True)
```

```python
from dsakit.arrays import two_sum
from dsakit.strings import is_valid_parentheses

two_sum([2, 7, 11, 15], 9)           # [1, 0]
is_valid_parentheses("()[]{}")       # True
```

## What it does not do

- There is no command-line program; everything is used as a library.
- `BST` cannot delete values, and it does no balancing.
- `DoubleNode` lists have no insertion helpers beyond `build_double`.