"""Route Dependencies: resolve app-owned state for handlers."""

from fastapi import Request

from cardlist.config import Settings
from cardlist.core.store import Store
from cardlist.models.card import Card
from cardlist.models.card_list import CardList


def get_card_store(request: Request) -> Store[Card]:
    return request.app.state.card_store


def get_list_store(request: Request) -> Store[CardList]:
    return request.app.state.list_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
