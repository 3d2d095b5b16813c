"""Domain constants for the finance tracker."""

from decimal import Decimal

from .models.entities import TransactionType

DEFAULT_CATEGORY_COLOR = "#94a3b8"

DEFAULT_CATEGORIES = (
    ("Gaji", TransactionType.INCOME, "#22c55e"),
    ("Bonus", TransactionType.INCOME, "#10b981"),
    ("Makan", TransactionType.EXPENSE, "#ef4444"),
    ("Transport", TransactionType.EXPENSE, "#f97316"),
    ("Belanja", TransactionType.EXPENSE, "#f59e0b"),
    ("Hiburan", TransactionType.EXPENSE, "#8b5cf6"),
)

CATEGORY_PALETTE = (
    "#ef4444",
    "#f97316",
    "#f59e0b",
    "#84cc16",
    "#22c55e",
    "#10b981",
    "#06b6d4",
    "#0ea5e9",
    "#3b82f6",
    "#6366f1",
    "#8b5cf6",
    "#d946ef",
    "#f43f5e",
    "#64748b",
    "#71717a",
)

PRICE_TICK_MIN = Decimal("0.99")
PRICE_TICK_MAX = Decimal("1.01")

QUICK_DEPOSIT_AMOUNTS = (100_000, 500_000)

CSV_HEADERS = ("Tanggal", "Deskripsi", "Tipe", "Kategori", "Jumlah")


__all__ = [
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_CATEGORIES",
    "CATEGORY_PALETTE",
    "PRICE_TICK_MIN",
    "PRICE_TICK_MAX",
    "QUICK_DEPOSIT_AMOUNTS",
    "CSV_HEADERS",
]
