"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CardId and ListId wrap positive ints: one identifier scheme for seed and created records
    - Identifiers compare by exact equality (no loose str/int matching)
    - Runtime modes encoded as an Enum: no raw string matching
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", int)
ListId = NewType("ListId", int)


def parse_id(raw: str) -> int | None:
    """Parse a path segment into an identifier. None when it cannot name any record."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


# ─── Enums ───────────────────────────────────────────────────────

class RuntimeMode(str, Enum):
    """Process runtime mode: read from NODE_ENV."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
