"""Application ports package."""

from .advice_client import AdviceClientPort
from .database import DatabaseEnginePort
from .price_feed import PriceFeedPort
from .state_repository import StateRepositoryPort

__all__ = [
    "AdviceClientPort",
    "DatabaseEnginePort",
    "PriceFeedPort",
    "StateRepositoryPort",
]
