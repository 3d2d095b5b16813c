"""Category colour resolution."""

from collections.abc import Iterable

from src.domain.constants import DEFAULT_CATEGORIES, DEFAULT_CATEGORY_COLOR
from src.domain.models.entities import Category, TransactionType


def build_color_index(
    categories: Iterable[Category],
) -> dict[tuple[str, TransactionType], str]:
    """Map ``(name, type)`` pairs to their display colour.

    The first category wins when several share a name and type.
    """
    index: dict[tuple[str, TransactionType], str] = {}
    for category in categories:
        index.setdefault((category.name, category.type), category.color)
    return index


def default_categories() -> tuple[Category, ...]:
    """Return the categories seeded into new or legacy snapshots."""
    return tuple(
        Category(id=str(index), name=name, type=category_type, color=color)
        for index, (name, category_type, color) in enumerate(
            DEFAULT_CATEGORIES,
            start=1,
        )
    )


def resolve_color(
    categories: Iterable[Category],
    name: str,
    transaction_type: TransactionType,
) -> str:
    """Return the colour of the category matching name and type.

    Args:
        categories: Known categories.
        name: Category name recorded on a transaction.
        transaction_type: Type the transaction was recorded under.

    Returns:
        str: Category colour, or the neutral default when nothing matches.
    """
    for category in categories:
        if category.name == name and category.type == transaction_type:
            return category.color
    return DEFAULT_CATEGORY_COLOR


__all__ = ["build_color_index", "default_categories", "resolve_color"]
