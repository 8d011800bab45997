"""
Core identity primitives, containers, contracts and invariants.

This module contains the foundational building blocks that are independent
of any particular application.
"""
