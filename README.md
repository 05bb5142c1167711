# gencoll

This package provides generic collection types whose structure you can inspect directly.
You can use them as ordinary data structures. You can also use them to study and test tree algorithms,
because the nodes, parent links and colours are all reachable.

## Installation

```
pip install gencoll
```

## What is included

- `gencoll.hashing` provides hash functions and three-way comparators.
  - `hgen(data)` is a 32-bit one-at-a-time hash of bytes or a string.
  - `hash_str(s)` is a 32-bit djb2 hash.
  - `hash_int(n)` returns the low 32 bits of an integer.
  - `hash_float(d)` returns the integer part as an unsigned 32-bit value.
  - `compare_int`, `compare_float` and `compare_str` are comparators. `compare_int` returns the difference of its arguments. `compare_float` and `compare_str` return -1, 0 or 1.
- `gencoll.dynarray.DynArray` is an array that tracks its size and its capacity separately.
  - `append` grows the capacity when the array is full: by 30 while the capacity is 100 or less, and by 30% above that.
  - `set_capacity` drops any elements beyond the new capacity.
  - `set_size` grows the capacity if needed and fills new slots with `None`.
- `gencoll.sll.SinglyLinkedList` is a singly linked list that also works as a stack or a queue.
  - It provides `push_front`, `push_back`, `pop_front`, `front`, `back`, `clear` and `foreach`.
  - `foreach` stops when the callback returns a true value.
  - You can pass an optional `on_remove` hook. It is called with each value that is popped or cleared.
  - Popping from an empty list, or peeking at one, raises `IndexError`.
- `gencoll.dll.DoublyLinkedList` is a doubly linked list of `DNode` handles.
  - `push_back`, `push_front`, `insert_after` and `insert_before` return the new node.
  - `erase(node)` unlinks a node and returns its value.
  - `front()` and `back()` return nodes, or `None` when the list is empty.
  - `reversed()` iterates the values from the back.
- `gencoll.bintree` provides `Node` and `BinaryTree`.
  - `BinaryTree` has postorder, inorder and reverse inorder iterators, `size`, `edge_height`, `rotate_left`, `rotate_right`, `change_child` and a sideways `pprint`.
  - The module also has free helpers: `left_most`, `right_most`, `next_inorder`, `prev_inorder`, `left_deepest`, `next_postorder` and `distance`.
- `gencoll.bst.SearchTree` is an unbalanced binary search tree of `KeyNode`s. It keeps duplicate keys.
  - `search` finds an exact key.
  - `search_gte` finds the smallest key at or above the given key.
  - `search_lte` finds the largest key at or below it.
  - `delete(node)` unlinks a node, and `keys()` yields the keys in ascending order.
  - `insert_position` finds where a key would be attached.
- `gencoll.rbtree.RedBlackTree` is a balanced tree of `RBNode`s coloured with `Color.RED` and `Color.BLACK`. It has the same search interface as `SearchTree`.
  - `remove(key)` returns the removed node, or `None` if no node has that key.
  - `delete_node(node)` unlinks a given node.
  - `attach(node, parent, right)` hangs a node under a parent and rebalances the tree.
  - `color_of(node)` treats a missing node as black.
  - `is_valid(tree)` checks the red-black properties.
- `gencoll.textio` provides `getline(stream)` and `remove_tail_lf(s)`.
  - `getline` returns one line with its line feed, or `None` at end of input.
  - `remove_tail_lf` removes one trailing line feed.

## Examples

```python
from gencoll.hashing import compare_int
from gencoll.rbtree import RedBlackTree, is_valid

tree = RedBlackTree(compare_int)
for k in (5, 1, 9, 3, 7):
    tree.insert(k)
print(list(tree.keys()))           # [1, 3, 5, 7, 9]
print(tree.search_gte(4).key)      # 5
print(tree.search_lte(4).key)      # 3
tree.remove(5)
print(is_valid(tree))              # True
```

```python
from gencoll.dynarray import DynArray

arr = DynArray(0)
arr.append(1)
arr.append(2)
print(len(arr), arr.capacity())    # 2 30
```

```python
from gencoll.sll import SinglyLinkedList

queue = SinglyLinkedList()
queue.push_back(1)
queue.push_back(2)
print(queue.pop_front())           # 1
```

```python
from gencoll.dll import DoublyLinkedList

items = DoublyLinkedList()
a = items.push_back("a")
items.push_back("c")
items.insert_after(a, "b")
print(list(items), list(reversed(items)))   # ['a', 'b', 'c'] ['c', 'b', 'a']
```

## What is not included

The package has no hash map, hash set or priority queue. `gencoll.hashing` supplies only hash functions and comparators that such containers could use. There is no command-line program.

## Running the tests

```
pip install "gencoll[test]"
pytest
```