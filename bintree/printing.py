"""Render a binary tree as ASCII art, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from bintree.tree import Node


class _Canvas:
    """Rows of characters that grow to the right as they are written to."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        if col < 0:
            return
        cells = self._rows[row]
        if col >= len(cells):
            cells.extend(" " * (col + 1 - len(cells)))
        cells[col] = char

    def write(self, row: int, col: int, text: str) -> None:
        for offset, char in enumerate(text):
            self.put(row, col + offset, char)

    def fill(self, row: int, col: int, count: int, char: str) -> None:
        for offset in range(count):
            self.put(row, col + offset, char)

    def lines(self) -> list[str]:
        # The first two columns always survive trimming.
        return ["".join(cells).rstrip(" ").ljust(2) for cells in self._rows]


def _layout(node: Node | None, offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw the subtree at ``offset`` on row ``depth``; return its width."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    box = f"({node.value:03d})"
    width = len(box)
    left = _layout(node.left, offset, depth + 1, canvas)
    right = _layout(node.right, offset + left + width, depth + 1, canvas)
    canvas.write(depth, offset + left, box)
    if depth:
        if is_left:
            canvas.fill(depth - 1, offset + left + width // 2, width + right, "-")
        else:
            canvas.fill(depth - 1, offset - width // 2, left + width, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of ``tree``, each level on its own newline-ended line."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _layout(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))