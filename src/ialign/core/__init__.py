"""
Core domain primitives and contracts.

This package contains building blocks that are independent of external
systems (HTTP layer, databases, etc.).
"""
