"""Classic data structures and algorithms: arrays, matrices, recursion, searching,
sorting, graphs, hashing, heaps, queues, stacks, expressions and trees."""

__version__ = "0.1.0"