"""Generic collections: dynamic arrays, linked lists, search trees, red-black trees and hashing helpers."""

__version__ = "0.1.0"
__all__ = ["bintree", "bst", "dll", "dynarray", "hashing", "rbtree", "sll", "textio"]