"""Card Routes: list, fetch and create cards.

Invariants:
    - GET /cards returns every card in insertion order
    - GET /cards/{card_id} → 404 plain text "Card not found" for unknown ids
    - POST /cards requires title then content (400 plain text "Invalid data"),
      answers 201 with a Location header and the full card
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from cardlist.api.dependencies import get_app_settings, get_card_store
from cardlist.api.error_handlers import INVALID_DATA
from cardlist.config import Settings
from cardlist.core.domain_types import CardId, parse_id
from cardlist.core.store import Store
from cardlist.models.card import Card
from cardlist.schemas.card import CardCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cards", tags=["cards"])

CARD_NOT_FOUND = "Card not found"


@router.get("", response_model=list[Card])
async def list_cards(cards: Store[Card] = Depends(get_card_store)):
    return cards.all()


@router.get("/{card_id}", response_model=Card)
async def get_card(card_id: str, cards: Store[Card] = Depends(get_card_store)):
    parsed = parse_id(card_id)
    card = cards.get(parsed) if parsed is not None else None
    if card is None:
        logger.error(
            f"Card with id {card_id} is not found.", extra={"card_id": card_id},
        )
        return PlainTextResponse(CARD_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return card


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Card)
async def create_card(
    body: CardCreate | None = Body(None),
    cards: Store[Card] = Depends(get_card_store),
    settings: Settings = Depends(get_app_settings),
):
    body = body or CardCreate()
    if not body.title:
        logger.error("Title is required")
        return PlainTextResponse(INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST)
    if not body.content:
        logger.error("Content is required")
        return PlainTextResponse(INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST)

    card = cards.add(lambda new_id: Card(
        id=CardId(new_id), title=body.title, content=body.content,
    ))
    logger.info(f"Card with id {card.id} created", extra={"card_id": card.id})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=card.model_dump(mode="json"),
        headers={"Location": f"{settings.public_base_url}/cards/{card.id}"},
    )
