"""Pydantic Schemas — upstream payloads and API response contracts.

Invariants:
    - Schemas validate at system boundary (upstream JSON in, API JSON out)
"""
