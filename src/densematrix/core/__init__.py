"""
Core matrix value type, numerical primitives, and serialization contracts.

This module contains the foundational building blocks that are independent
of any solver built on top of the matrix type.
"""
