"""Sort integers with two stacks and print the operations used, plus small text and byte helpers."""

__version__ = "0.1.0"