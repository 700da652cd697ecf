"""Domain Records: Card and CardList as stored and served.

Invariants:
    - Records are frozen: never mutated after creation
    - JSON field names match the public API (cardIds, not card_ids)
"""

from cardlist.models.card import Card
from cardlist.models.card_list import CardList

__all__ = ["Card", "CardList"]
