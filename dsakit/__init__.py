"""Small data structures (trees, a BST, linked lists, a queue, a stack) and classic algorithm solutions."""

__version__ = "0.1.0"