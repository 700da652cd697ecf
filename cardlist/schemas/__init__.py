"""Pydantic Schemas: request/response bodies for API endpoints.

Invariants:
    - Request schemas only check shape; presence of required fields is checked by routes
      so missing fields answer with the plain-text "Invalid data" contract

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored records
"""
