"""Application use cases package."""

from .export_transactions import ExportTransactionsUseCase, TransactionsExport
from .get_dashboard_view import DashboardView, GetDashboardViewUseCase
from .get_goal_progress import GetGoalProgressUseCase
from .get_portfolio_summary import GetPortfolioSummaryUseCase, PortfolioView
from .load_state import LoadStateUseCase, initial_state
from .refresh_prices import RefreshPricesUseCase
from .request_advice import (
    AdviceConversation,
    ChatMessage,
    RequestAdviceUseCase,
)
from .save_state import SaveStateUseCase

__all__ = [
    "ExportTransactionsUseCase",
    "TransactionsExport",
    "DashboardView",
    "GetDashboardViewUseCase",
    "GetGoalProgressUseCase",
    "GetPortfolioSummaryUseCase",
    "PortfolioView",
    "LoadStateUseCase",
    "initial_state",
    "RefreshPricesUseCase",
    "AdviceConversation",
    "ChatMessage",
    "RequestAdviceUseCase",
    "SaveStateUseCase",
]
