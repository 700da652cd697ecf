"""CardList: named grouping referencing zero or more cards by id.

Invariants:
    - card_ids referenced existing cards when the list was created
    - Serialized as "cardIds" (alias); constructible by either name
"""

from pydantic import BaseModel, ConfigDict, Field

from cardlist.core.domain_types import CardId, ListId


class CardList(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: ListId
    header: str
    card_ids: list[CardId] = Field(default_factory=list, alias="cardIds")
