"""Core Domain: identifier types and the in-memory store.

Invariants:
    - No FastAPI imports: core is usable (and tested) without an HTTP stack
"""
