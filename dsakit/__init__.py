"""Classic data structures and algorithms in plain Python.

Linked lists, stacks and queues, string matching, searching, sorting,
hashing, binary, threaded, search and Huffman trees, and graph algorithms.
"""

__version__ = "0.1.0"