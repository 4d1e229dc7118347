"""Singly linked list algorithms, spiral matrices and integer-array routines."""

__version__ = "0.1.0"