"""Red-black tree over keys ordered by a three-way comparator."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterator, Optional

from .bintree import Node
from .bst import Comparator, KeyNode, SearchTree, insert_position


class Color(IntEnum):
    """Node colour; the sum of the colours on a path is its black count."""

    RED = 0
    BLACK = 1


class RBNode(KeyNode):
    """A key node with a colour; new nodes are red."""

    def __init__(self, key: Any, color: Color = Color.RED) -> None:
        super().__init__(key)
        self.color = color

    def __repr__(self) -> str:
        name = self.color.name if isinstance(self.color, Color) else self.color
        return f"RBNode({self.key!r}, {name})"


def color_of(node: Optional[Node]) -> Color:
    """Return the colour of node; an absent node counts as black."""
    if node is None:
        return Color.BLACK
    return node.color


def _near(node: Node, left: bool) -> Optional[Node]:
    return node.left if left else node.right


def _far(node: Node, left: bool) -> Optional[Node]:
    return node.right if left else node.left


class RedBlackTree(SearchTree):
    """Self-balancing binary search tree; duplicate keys are kept."""

    def __init__(self, cmp: Optional[Comparator] = None,
                 root: Optional[Node] = None) -> None:
        super().__init__(cmp, root)

    def _rotate(self, x: Node, to_left: bool) -> Node:
        return self.rotate_left(x) if to_left else self.rotate_right(x)

    def attach(self, node: RBNode, parent: Optional[RBNode],
               right: bool) -> RBNode:
        """Hang node under parent (at the root if None) and rebalance."""
        node.color = Color.RED
        node.top = parent
        if parent is None:
            self.root = node
            node.color = Color.BLACK
            return node
        if right:
            parent.right = node
        else:
            parent.left = node
        if color_of(parent) == Color.RED:
            self._insert_fixup(node, parent)
        return node

    def _insert_fixup(self, n: RBNode, p: RBNode) -> None:
        while True:
            gp = p.top
            is_left = p is gp.left
            uncle = _far(gp, is_left)
            if color_of(uncle) == Color.RED:
                p.color = Color.BLACK
                uncle.color = Color.BLACK
                gp.color = Color.RED
                n = gp
                p = n.top
                if p is None:
                    n.color = Color.BLACK
                    break
                if color_of(p) == Color.BLACK:
                    break
            else:
                if n is _far(p, is_left):
                    self._rotate(p, is_left)
                    n = p
                    p = n.top
                p.color = Color.BLACK
                gp = p.top
                gp.color = Color.RED
                self._rotate(gp, not is_left)
                break

    def insert(self, key: Any) -> RBNode:
        """Insert key and return its new node."""
        parent, right, _ = insert_position(self.root, key, self.cmp)
        return self.attach(RBNode(key), parent, right)

    def search(self, key: Any) -> Optional[RBNode]:
        """Return a node whose key equals key, or None."""
        return super().search(key)

    def search_gte(self, key: Any) -> Optional[RBNode]:
        """Return the node with the smallest key not less than key, or None."""
        return super().search_gte(key)

    def search_lte(self, key: Any) -> Optional[RBNode]:
        """Return the node with the largest key not greater than key, or None."""
        return super().search_lte(key)

    def delete_node(self, node: RBNode) -> RBNode:
        """Unlink node from the tree, keeping it balanced, and return it."""
        child = node.right
        tmp = node.left
        rebalance: Optional[RBNode] = None
        if tmp is None:
            p = node.top
            c = color_of(node)
            self.change_child(node, child, p)
            if child is not None:
                child.top = p
                child.color = c
            elif c == Color.BLACK:
                rebalance = p
        elif child is None:
            p = node.top
            c = color_of(node)
            tmp.top = p
            tmp.color = c
            self.change_child(node, tmp, p)
        else:
            successor = child
            tmp = child.left
            if tmp is None:
                parent = successor
                child2 = successor.right
            else:
                while tmp is not None:
                    parent = successor
                    successor = tmp
                    tmp = tmp.left
                child2 = successor.right
                parent.left = child2
                successor.right = child
                child.top = successor
            successor.left = node.left
            node.left.top = successor
            p = node.top
            c = color_of(node)
            self.change_child(node, successor, p)
            if child2 is not None:
                child2.top = parent
                child2.color = Color.BLACK
            elif color_of(successor) == Color.BLACK:
                rebalance = parent
            successor.top = p
            successor.color = c
        if rebalance is not None:
            self._delete_fixup(rebalance)
        node.left = node.right = node.top = None
        return node

    def _delete_fixup(self, parent: RBNode) -> None:
        node: Optional[RBNode] = None
        while True:
            is_left = node is not parent.right
            sibling = _far(parent, is_left)
            if color_of(sibling) == Color.RED:
                self._rotate(parent, is_left)
                parent.color = Color.RED
                sibling.color = Color.BLACK
                sibling = _far(parent, is_left)
            distant = _far(sibling, is_left)
            if color_of(distant) == Color.BLACK:
                close = _near(sibling, is_left)
                if color_of(close) == Color.BLACK:
                    sibling.color = Color.RED
                    if color_of(parent) == Color.RED:
                        parent.color = Color.BLACK
                    else:
                        node = parent
                        parent = node.top
                        if parent is not None:
                            continue
                    break
                self._rotate(sibling, not is_left)
                sibling = _far(parent, is_left)
            distant = _far(sibling, is_left)
            self._rotate(parent, is_left)
            sibling.color = color_of(parent)
            parent.color = Color.BLACK
            distant.color = Color.BLACK
            break

    def delete(self, node: RBNode) -> None:
        """Unlink node from the tree, keeping it balanced."""
        self.delete_node(node)

    def remove(self, key: Any) -> Optional[RBNode]:
        """Remove a node whose key equals key and return it, or None."""
        node = self.search(key)
        if node is None:
            return None
        return self.delete_node(node)

    def keys(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        return super().keys()


def is_valid(tree) -> bool:
    """Check the red-black properties of a tree of coloured nodes."""
    root = tree.root
    if root is None:
        return True
    if color_of(root) == Color.RED:
        return False
    heights: set = set()

    def walk(node: Optional[Node], blacks: int) -> bool:
        if node is None:
            heights.add(blacks)
            return len(heights) == 1
        color = node.color
        if color == Color.RED:
            if (color_of(node.left) == Color.RED
                    or color_of(node.right) == Color.RED):
                return False
        elif color == Color.BLACK:
            blacks += 1
        else:
            return False
        return walk(node.left, blacks) and walk(node.right, blacks)

    return walk(root, 0)