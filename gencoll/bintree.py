"""Binary tree nodes with parent links, traversal and rotation."""

from __future__ import annotations

import sys
from typing import Callable, Iterator, Optional

DEFAULT_INDENT = 0
DEFAULT_STEP = 3


class Node:
    """A binary tree node linked to its children and to its parent (top)."""

    def __init__(self) -> None:
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        self.top: Optional[Node] = None


def left_deepest(node: Optional[Node]) -> Optional[Node]:
    """Return the first node of a postorder walk of the subtree at node."""
    if node is None:
        return None
    while True:
        if node.left is not None:
            node = node.left
        elif node.right is not None:
            node = node.right
        else:
            return node


def next_postorder(node: Optional[Node]) -> Optional[Node]:
    """Return the node after node in postorder, or None."""
    if node is None:
        return None
    top = node.top
    if top is not None and node is top.left and top.right is not None:
        return left_deepest(top.right)
    return top


def left_most(node: Optional[Node]) -> Optional[Node]:
    """Return the left-most node of the subtree at node."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def right_most(node: Optional[Node]) -> Optional[Node]:
    """Return the right-most node of the subtree at node."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def next_inorder(node: Optional[Node]) -> Optional[Node]:
    """Return the inorder successor of node, or None."""
    if node is None:
        return None
    if node.right is not None:
        return left_most(node.right)
    parent = node.top
    while parent is not None and node is parent.right:
        node = parent
        parent = parent.top
    return parent


def prev_inorder(node: Optional[Node]) -> Optional[Node]:
    """Return the inorder predecessor of node, or None."""
    if node is None:
        return None
    if node.left is not None:
        return right_most(node.left)
    parent = node.top
    while parent is not None and node is parent.left:
        node = parent
        parent = parent.top
    return parent


def distance(node: Optional[Node]) -> int:
    """Return the number of edges from node up to the root."""
    count = -1
    while node is not None:
        node = node.top
        count += 1
    return count


class BinaryTree:
    """A binary tree held by its root node."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def is_empty(self) -> bool:
        return self.root is None

    def size(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self.iter_postorder())

    def edge_height(self) -> int:
        """Return the largest number of edges from the root to a leaf."""
        return max(
            (distance(n) for n in self.iter_inorder()
             if n.left is None and n.right is None),
            default=0,
        )

    def iter_postorder(self) -> Iterator[Node]:
        node = left_deepest(self.root)
        while node is not None:
            following = next_postorder(node)
            yield node
            node = following

    def iter_inorder(self) -> Iterator[Node]:
        node = left_most(self.root)
        while node is not None:
            yield node
            node = next_inorder(node)

    def iter_reverse_inorder(self) -> Iterator[Node]:
        node = right_most(self.root)
        while node is not None:
            yield node
            node = prev_inorder(node)

    def change_child(self, old: Node, new: Optional[Node],
                     parent: Optional[Node]) -> None:
        """Put new where old hangs under parent (or at the root)."""
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def rotate_left(self, x: Node) -> Node:
        """Rotate left around x; its right child takes its place."""
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.top = x
        y.top = x.top
        self.change_child(x, y, x.top)
        y.left = x
        x.top = y
        return y

    def rotate_right(self, x: Node) -> Node:
        """Rotate right around x; its left child takes its place."""
        y = x.left
        x.left = y.right
        if y.right is not None:
            y.right.top = x
        y.top = x.top
        self.change_child(x, y, x.top)
        y.right = x
        x.top = y
        return y

    def pprint(self, render: Optional[Callable[[Node], str]] = None,
               indent: int = DEFAULT_INDENT, step: int = DEFAULT_STEP) -> None:
        """Print the tree sideways, right subtree first, one node per line."""
        render = render or str
        lines = [
            " " * (indent + step * distance(node)) + render(node) + "\n"
            for node in self.iter_reverse_inorder()
        ]
        sys.stdout.write("".join(lines))