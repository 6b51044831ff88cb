"""Pokedex Gateway — thin HTTP gateway over the PokeAPI pokemon list.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
