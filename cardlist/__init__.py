"""Cardlist Application Package: in-memory cards and lists REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
