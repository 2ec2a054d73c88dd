"""Binary tree nodes with parent links, and the usual measurements on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value.

    A node knows its parent as well as its children.  Creating a node with a
    parent does not attach it to that parent: assign it to ``parent.left`` or
    ``parent.right``, or use :meth:`insert_left` / :meth:`insert_right`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _nodes(self) -> Iterator[Node]:
        """Yield every node of the subtree, in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and break all links inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._nodes()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield the values of the subtree: node, left subtree, right subtree."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield the values of the subtree: left subtree, node, right subtree."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield the values of the subtree: left subtree, right subtree, node."""
        out: list[int] = []
        stack = [self]
        while stack:
            node = stack.pop()
            out.append(node.value)
            stack.extend(node._children())
        yield from reversed(out)

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf (0 for a leaf)."""
        level = [self]
        height = -1
        while level:
            height += 1
            level = [child for node in level for child in node._children()]
        return height

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node in the subtree has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """True if every inner node has two children and all leaves share a level."""
        return self.size() == 2 ** (self.height() + 1) - 1

    def sibling(self) -> Node | None:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Node | None:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Node | None) -> int:
    """Number of levels in a subtree, 0 for an empty one."""
    return 0 if node is None else node.height() + 1