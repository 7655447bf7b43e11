"""Classic data structures and algorithms: matrices, queues, stacks, recursion, sorting and strings."""

__version__ = "0.1.0"
__all__ = ["matrices", "queues", "recursion", "sorting", "stacks", "strings"]