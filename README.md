# bintree

A small binary tree library. Every node holds an integer value and knows its
parent as well as its children, so a node can report its depth, sibling or
uncle as well as measure and walk the subtree below it. An ASCII printer draws
a tree with each value shown as `(NNN)`.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 goes in between root and 402
```

`insert_left` and `insert_right` add a new child on that side and return it.
If the side is already taken, the old child moves down under the new node, on
the same side.

`Node(value, parent)` only records the parent; it does not attach the new
node. To attach it yourself, assign it to `parent.left` or `parent.right`:

```python
root = Node(98)
root.left = Node(12, root)
```

## Asking questions

```python
root.size()            # number of nodes in the subtree
root.height()          # edges on the longest path down to a leaf (0 for a leaf)
root.leaves()          # number of leaves
root.internal_nodes()  # nodes with at least one child
root.balance()         # height of left subtree minus height of right subtree
root.is_full()         # every node has zero or two children
root.is_perfect()      # full, with all leaves on the same level
left.depth()           # edges from this node up to the root
left.is_leaf(), root.is_root()
left.sibling(), left.uncle()   # None when there is none
```

Traversals are generators of values:

```python
list(root.preorder())    # node, left, right
list(root.inorder())     # left, node, right
list(root.postorder())   # left, right, node
```

`delete()` detaches a node, together with its subtree, from its parent and
clears every parent and child link inside that subtree.

## Printing

```python
from bintree.printing import render, print_tree

print_tree(root)      # writes to standard output
text = render(root)   # the same drawing as a string
```

For the tree built above this draws:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

Each level takes one newline-ended line. `render(None)` returns an empty
string, and `print_tree(None)` writes nothing. `print_tree` also takes a
`file` argument to write somewhere other than standard output.

## Demonstrations

The `bintree.demo` module carries numbered scenarios, 0 to 18. Each builds a
small tree, prints it and shows one operation on it: printing, insertion on
either side, deletion, the leaf and root checks, the three traversals, height,
depth, size, leaves, internal nodes, balance, fullness, perfection, siblings
and uncles.

```
bintree-demo 14
```

From Python, `bintree.demo.run_demo(number)` does the same, writing to
standard output or to the `file` given; an unknown number raises
`ValueError`.