"""Infrastructure Layer — upstream HTTP client and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping
"""
