"""Validate integers, hold them in two stacks and print the operations applied to them."""

__version__ = "0.1.0"