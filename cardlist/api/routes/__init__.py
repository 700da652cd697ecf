"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Validation and not-found outcomes are returned as responses, never raised
"""
