"""Small scripted scenarios exercising the tree operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from functools import partial
from typing import TextIO

from bintree.printing import print_tree
from bintree.tree import Node


def _sample_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_tree(left_right: int) -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(left_right, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _describe(node: Node | None) -> str:
    return "(nil)" if node is None else str(node.value)


def _demo_print(out: TextIO) -> None:
    print_tree(_seven_tree(16), out)


def _demo_insert_left(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _demo_insert_right(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _demo_delete(out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    root.delete()


def _demo_predicate(label: str, test: Callable[[Node], bool], out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a {label}: {int(test(node))}", file=out)


def _demo_traversal(order: Callable[[Node], object], out: TextIO) -> None:
    root = _seven_tree(56)
    print_tree(root, out)
    for value in order(root):
        print(value, file=out)


def _demo_measure(label: str, measure: Callable[[Node], int], out: TextIO) -> None:
    root = _sample_tree()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        print(f"{label} {node.value}: {measure(node)}", file=out)


def _demo_balance(out: TextIO) -> None:
    root = _sample_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {node.balance():+d}", file=out)


def _demo_full(out: TextIO) -> None:
    root = _sample_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(node.is_full())}", file=out)


def _demo_perfect(out: TextIO) -> None:
    root = _sample_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}", file=out)


def _demo_sibling(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_describe(node.sibling())}", file=out)


def _demo_uncle(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_describe(node.uncle())}", file=out)


DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_print,
    1: _demo_insert_left,
    2: _demo_insert_right,
    3: _demo_delete,
    4: partial(_demo_predicate, "leaf", Node.is_leaf),
    5: partial(_demo_predicate, "root", Node.is_root),
    6: partial(_demo_traversal, Node.preorder),
    7: partial(_demo_traversal, Node.inorder),
    8: partial(_demo_traversal, Node.postorder),
    9: partial(_demo_measure, "Height from", Node.height),
    10: partial(_demo_measure, "Depth of", Node.depth),
    11: partial(_demo_measure, "Size of", Node.size),
    12: partial(_demo_measure, "Leaves in", Node.leaves),
    13: partial(_demo_measure, "Nodes in", Node.internal_nodes),
    14: _demo_balance,
    15: _demo_full,
    16: _demo_perfect,
    17: _demo_sibling,
    18: _demo_uncle,
}


def run_demo(number: int, file: TextIO | None = None) -> None:
    """Run scenario ``number`` (0-18), writing its output to ``file``."""
    try:
        demo = DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}") from None
    demo(sys.stdout if file is None else file)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: run one numbered scenario."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Run a binary tree demonstration."
    )
    parser.add_argument("number", type=int, choices=sorted(DEMOS))
    args = parser.parse_args(argv)
    run_demo(args.number)
    return 0


if __name__ == "__main__":
    sys.exit(main())