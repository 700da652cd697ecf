"""List Schemas: creation body and response for POST /lists.

Invariants:
    - ListCreate.card_ids defaults to an empty list when omitted
    - ListCreated carries only the new id
"""

from pydantic import BaseModel, ConfigDict, Field

from cardlist.core.domain_types import CardId, ListId


class ListCreate(BaseModel):
    """List creation input: "cardIds" on the wire."""
    model_config = ConfigDict(populate_by_name=True)

    header: str | None = None
    card_ids: list[CardId] = Field(default_factory=list, alias="cardIds")


class ListCreated(BaseModel):
    id: ListId
