# dskit

Small, readable implementations of classic data structures and the
algorithms that go with them.

## Contents

- `dskit.matrices`: square matrices that store only the elements their
  shape allows, addressed with 1-based `get(i, j)` and `set(i, j, value)`:
  `DiagonalMatrix`, `LowerTriangularRowMajor`, `LowerTriangularColumnMajor`,
  `UpperTriangularRowMajor`, `UpperTriangularColumnMajor`, `SymmetricMatrix`,
  `TriDiagonalMatrix` (with `main_diagonal`, `upper_diagonal`,
  `lower_diagonal`) and `ToeplitzMatrix` (with `distinct_values`), all built
  on the dense `SquareMatrix`. Each has `from_rows`, `rows` and `render`.
  `SparseMatrix` keeps only `(row, column, value)` entries. The helpers
  `diagonal_of` and `lower_triangle` work on plain lists of rows.
- `dskit.polynomial`: `Term` and `Polynomial`, with addition of polynomials
  whose terms are listed by descending exponent, `evaluate` and a
  `3x^2+1x^0` style string form.
- `dskit.expressions`: `is_balanced` bracket matching, `to_postfix` for infix
  expressions of single-character operands, and `evaluate_postfix` for
  single-digit operands (division truncates toward zero). The precedence
  helpers `is_operand`, `precedence`, `in_stack_precedence` and
  `out_stack_precedence` are public too.
- `dskit.permute`: `swap_permutations`, a generator that yields `len(text)!`
  arrangements by swapping characters in place without swapping them back,
  so for longer strings some arrangements repeat.
- `dskit.linked_list`: a singly linked `LinkedList` with `append`, `insert`,
  `insert_sorted`, `total`, `maximum`, `search`, `search_move_to_front`,
  `middle`, `reverse_recursive` and `render`.
- `dskit.list_ops`: `is_sorted`, `concatenate`, `remove_value`,
  `create_loop`, `has_loop`, `merge_sorted`, `remove_duplicates`,
  `reverse_values` and `reverse_links` for `LinkedList` objects.
- `dskit.row_lists`: `RowListMatrix`, which keeps each row as a linked list
  of `(column, value)` entries.
- `dskit.doubly`: `DoublyLinkedList`, iterable both ways, with `insert`,
  `remove` and in-place `reverse`.
- `dskit.circular`: `CircularLinkedList` and `CircularDoublyLinkedList`, the
  latter with `middle`, which raises `ValueError` for an even length.
- `dskit.binary_tree`: `BinaryTree` built with `from_level_order`, with
  recursive and iterative traversals, `height` and node counts by degree.
- `dskit.tree_build`: `build_from_traversals`, which rebuilds a tree from
  its preorder and inorder sequences.

Out-of-range positions raise `IndexError`; operations that have no answer,
such as the maximum of an empty list, raise `ValueError`.

## Installation

```
pip install .
```

## Example

```python
from dskit.matrices import SymmetricMatrix
from dskit.expressions import to_postfix, evaluate_postfix
from dskit.binary_tree import BinaryTree

m = SymmetricMatrix.from_rows([[1, 2], [2, 3]])
print(m.render())

postfix = to_postfix("3*5+6/2-4")
print(postfix, evaluate_postfix(postfix))   # 35*62/+4- 14

tree = BinaryTree.from_level_order([1, 2, 3])
print(tree.preorder(), tree.count_leaves())  # [1, 2, 3] 2
```

In `from_level_order`, `None` marks a missing child, and children missing
at the end of the values count as absent.

## What it does not do

dskit is a library only: it has no command-line program and reads no
input. It offers no stand-alone stack or queue containers; use Python's
`list` and `collections.deque` for those.

## Running the tests

```
pip install .[test]
pytest
```