"""Card Schemas: creation body for POST /cards."""

from pydantic import BaseModel


class CardCreate(BaseModel):
    """Card creation input. Both fields are required by the route, not here."""
    title: str | None = None
    content: str | None = None
