"""Binary search tree over keys ordered by a three-way comparator."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Tuple

from .bintree import DEFAULT_INDENT, DEFAULT_STEP, BinaryTree, Node, left_most

Comparator = Callable[[Any, Any], int]


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _node_key(node: "KeyNode") -> Any:
    return node.key


class KeyNode(Node):
    """A tree node carrying a key."""

    def __init__(self, key: Any) -> None:
        super().__init__()
        self.key = key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


def insert_position(
    root: Optional[Node],
    key: Any,
    cmp: Comparator,
    key_of: Callable[[Node], Any] = _node_key,
) -> Tuple[Optional[Node], bool, Optional[Node]]:
    """Find where key would be inserted below root.

    Returns (parent, right, same): the node to attach under (None for an
    empty tree), whether the new node goes to its right, and the last node
    met on the way whose key compares equal (None if there is none).
    Equal keys are placed to the right.
    """
    parent: Optional[Node] = None
    same: Optional[Node] = None
    right = False
    node = root
    while node is not None:
        parent = node
        order = cmp(key, key_of(node))
        if order == 0:
            same = node
        right = order >= 0
        node = node.right if right else node.left
    return parent, right, same


class SearchTree(BinaryTree):
    """Unbalanced binary search tree; duplicates are kept."""

    def __init__(self, cmp: Optional[Comparator] = None,
                 root: Optional[Node] = None) -> None:
        super().__init__(root)
        self.cmp = cmp or _natural_cmp

    def insert(self, key: Any) -> KeyNode:
        """Insert key and return its new node."""
        node = KeyNode(key)
        parent, right, _ = insert_position(self.root, key, self.cmp)
        node.top = parent
        if parent is None:
            self.root = node
        elif right:
            parent.right = node
        else:
            parent.left = node
        return node

    def search(self, key: Any) -> Optional[KeyNode]:
        """Return a node whose key equals key, or None."""
        node = self.root
        while node is not None:
            order = self.cmp(key, node.key)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def search_gte(self, key: Any) -> Optional[KeyNode]:
        """Return the node with the smallest key not less than key, or None."""
        found = None
        node = self.root
        while node is not None:
            order = self.cmp(key, node.key)
            if order == 0:
                return node
            if order < 0:
                found = node
                node = node.left
            else:
                node = node.right
        return found

    def search_lte(self, key: Any) -> Optional[KeyNode]:
        """Return the node with the largest key not greater than key, or None."""
        found = None
        node = self.root
        while node is not None:
            order = self.cmp(key, node.key)
            if order == 0:
                return node
            if order > 0:
                found = node
                node = node.right
            else:
                node = node.left
        return found

    def delete(self, node: Node) -> None:
        """Unlink node from the tree, keeping the search order."""
        lc, rc, top = node.left, node.right, node.top
        if lc is None:
            self.change_child(node, rc, top)
            if rc is not None:
                rc.top = top
        elif rc is None:
            self.change_child(node, lc, top)
            lc.top = top
        else:
            successor = left_most(rc)
            rc2, top2 = successor.right, successor.top
            self.change_child(successor, rc2, top2)
            if rc2 is not None:
                rc2.top = top2
            successor.left = node.left
            successor.right = node.right
            successor.top = top
            self.change_child(node, successor, top)
            if successor.left is not None:
                successor.left.top = successor
            if successor.right is not None:
                successor.right.top = successor
        node.left = node.right = node.top = None

    def keys(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        for node in self.iter_inorder():
            yield node.key

    def pprint(self, render: Optional[Callable[[Any], str]] = None) -> None:
        """Print the keys sideways, one per line, indented by depth."""
        render_key = render or str
        super().pprint(lambda n: render_key(n.key), DEFAULT_INDENT, DEFAULT_STEP)


__all__ = ["KeyNode", "SearchTree", "insert_position"]