"""List Routes: list, fetch and create card lists.

Invariants:
    - GET /lists returns every list in insertion order
    - GET /lists/{list_id} → 404 plain text "List not found" for unknown ids
    - POST /lists requires header; every cardIds entry must name an existing card.
      All ids are checked (one log record per missing id) before answering 400
    - Successful creation answers 201 with a Location header and {"id": ...} only
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from cardlist.api.dependencies import get_app_settings, get_card_store, get_list_store
from cardlist.api.error_handlers import INVALID_DATA
from cardlist.config import Settings
from cardlist.core.domain_types import CardId, ListId, parse_id
from cardlist.core.store import Store
from cardlist.models.card import Card
from cardlist.models.card_list import CardList
from cardlist.schemas.card_list import ListCreate, ListCreated

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/lists", tags=["lists"])

LIST_NOT_FOUND = "List not found"


def find_missing_cards(card_ids: list[CardId], cards: Store[Card]) -> list[CardId]:
    """Ids in card_ids that do not resolve to a card, in request order."""
    missing = []
    for cid in card_ids:
        if not cards.contains(cid):
            logger.error(
                f"Card with id {cid} not found in cards store.",
                extra={"card_id": cid},
            )
            missing.append(cid)
    return missing


@router.get("", response_model=list[CardList])
async def list_lists(lists: Store[CardList] = Depends(get_list_store)):
    return lists.all()


@router.get("/{list_id}", response_model=CardList)
async def get_list(list_id: str, lists: Store[CardList] = Depends(get_list_store)):
    parsed = parse_id(list_id)
    card_list = lists.get(parsed) if parsed is not None else None
    if card_list is None:
        logger.error(
            f"List with id {list_id} is not found.", extra={"list_id": list_id},
        )
        return PlainTextResponse(LIST_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return card_list


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ListCreated)
async def create_list(
    body: ListCreate | None = Body(None),
    lists: Store[CardList] = Depends(get_list_store),
    cards: Store[Card] = Depends(get_card_store),
    settings: Settings = Depends(get_app_settings),
):
    body = body or ListCreate()
    if not body.header:
        logger.error("Header is required")
        return PlainTextResponse(INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST)
    if find_missing_cards(body.card_ids, cards):
        return PlainTextResponse(INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST)

    card_list = lists.add(lambda new_id: CardList(
        id=ListId(new_id), header=body.header, card_ids=list(body.card_ids),
    ))
    logger.info(
        f"List with id {card_list.id} created", extra={"list_id": card_list.id},
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=ListCreated(id=card_list.id).model_dump(mode="json"),
        headers={"Location": f"{settings.public_base_url}/lists/{card_list.id}"},
    )
