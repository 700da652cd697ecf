"""Card: atomic content record with title and content text."""

from pydantic import BaseModel, ConfigDict

from cardlist.core.domain_types import CardId


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: CardId
    title: str
    content: str
