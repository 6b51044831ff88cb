"""Domain Types — rich types and bounds shared across the gateway.

Invariants:
    - PokemonId is an unsigned 32-bit integer (0..U32_MAX)
    - limit/offset are unsigned 32-bit integers; defaults are 20 and 0

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

import re
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PokemonId = NewType("PokemonId", int)           # 0..U32_MAX


# ─── Bounds & Defaults ───────────────────────────────────────────

U32_MAX = 2**32 - 1

DEFAULT_LIMIT = 20
DEFAULT_OFFSET = 0

# Relative path joined onto the upstream base url
POKEMON_RESOURCE = "pokemon"

# Plain unsigned base-10: ASCII digits only, no sign, space or underscore
UNSIGNED_DECIMAL = re.compile(r"[0-9]+")
