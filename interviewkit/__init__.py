"""Classic algorithm and design exercises: lists, trees, graphs, caches, concurrency primitives and string routines."""

__version__ = "0.1.0"