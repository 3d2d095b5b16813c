"""Composition root for wiring infrastructure adapters."""

from src.application.ports.advice_client import AdviceClientPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.price_feed import PriceFeedPort
from src.application.ports.state_repository import StateRepositoryPort
from src.application.state_store import AppStateStore
from src.application.use_cases.load_state import LoadStateUseCase
from src.application.use_cases.refresh_prices import RefreshPricesUseCase
from src.application.use_cases.save_state import SaveStateUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.gemini_advice_client import GeminiAdviceClient
from src.infrastructure.json_state_repository import JsonFileStateRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.price_ticker import PriceTicker
from src.infrastructure.random_price_feed import RandomPriceFeed
from src.infrastructure.settings import AppSettings
from src.infrastructure.sqlalchemy_state_repository import (
    SqlAlchemyStateRepository,
)
from src.utils.utils import get_project_root


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url=db_url)


def build_state_repository(
    settings: AppSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> StateRepositoryPort:
    """Return the configured snapshot repository."""
    resolved = settings or AppSettings.from_env()
    if resolved.backend == "sqlalchemy":
        if not resolved.state_db_url and db_port is None:
            raise RuntimeError(
                "sqlalchemy state backend requires a STATE_DB_URL value."
            )
        return SqlAlchemyStateRepository(
            db_port or build_database_adapter(resolved.state_db_url),
            logger=get_app_logger(),
        )
    return JsonFileStateRepository(
        resolved.state_dir or get_project_root() / "data",
        logger=get_app_logger(),
    )


def build_state_store(
    settings: AppSettings | None = None,
    repository: StateRepositoryPort | None = None,
) -> AppStateStore:
    """Load the stored snapshot into a store that saves every change."""
    resolved = settings or AppSettings.from_env()
    resolved_repo = repository or build_state_repository(resolved)
    state = LoadStateUseCase(resolved_repo).execute(resolved.state_key)
    store = AppStateStore(initial_state=state)
    saver = SaveStateUseCase(resolved_repo, key=resolved.state_key)
    store.subscribe(saver.execute)
    return store


def build_price_feed() -> PriceFeedPort:
    """Return the simulated price feed."""
    return RandomPriceFeed()


def build_price_ticker(
    store: AppStateStore,
    settings: AppSettings | None = None,
    price_feed: PriceFeedPort | None = None,
) -> PriceTicker:
    """Return a ticker refreshing prices at the configured interval."""
    resolved = settings or AppSettings.from_env()
    use_case = RefreshPricesUseCase(store, price_feed or build_price_feed())
    return PriceTicker(
        use_case.execute,
        interval=float(resolved.price_tick_seconds),
    )


def build_advice_client(
    settings: AppSettings | None = None,
) -> AdviceClientPort:
    """Return the advice assistant client."""
    resolved = settings or AppSettings.from_env()
    return GeminiAdviceClient(
        api_key=resolved.gemini_api_key,
        model=resolved.gemini_model,
    )


__all__ = [
    "build_database_adapter",
    "build_state_repository",
    "build_state_store",
    "build_price_feed",
    "build_price_ticker",
    "build_advice_client",
]
