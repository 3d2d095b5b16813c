"""Cashflow Sankey presentation logic for the Streamlit UI.

Pure transformations from a ``DashboardView`` to a Sankey model and Plotly
figure. The layout has three columns:
    income categories -> cash flow -> expense categories
plus a ``Surplus`` node on the right when income exceeds expense, or a
``Defisit`` node on the left when expense exceeds income.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from src.domain.models import DashboardView

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


LEFT_PREFIX = "L:"
MIDDLE_PREFIX = "M:"
RIGHT_PREFIX = "R:"

MIDDLE_LABEL = "Arus Kas"
SURPLUS_LABEL = "Surplus"
DEFICIT_LABEL = "Defisit"

MIDDLE_KEY = f"{MIDDLE_PREFIX}CASHFLOW"
SURPLUS_KEY = f"{RIGHT_PREFIX}SURPLUS"
DEFICIT_KEY = f"{LEFT_PREFIX}DEFICIT"

MIDDLE_COLOR = "#3b82f6"
SURPLUS_COLOR = "#10b981"
DEFICIT_COLOR = "#f43f5e"


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    node_keys: list[str]
    node_colors: list[str]
    links: list[SankeyLink]
    side_by_key: dict[str, Literal["L", "M", "R"]]


def build_sankey_model(view: DashboardView) -> SankeyModel:
    """Build a Sankey model from the period's category totals.

    Args:
        view: Dashboard view for the selected period.

    Returns:
        SankeyModel: Nodes and links; categories keep their display colour.
    """
    node_labels: list[str] = []
    node_keys: list[str] = []
    node_colors: list[str] = []
    side_by_key: dict[str, Literal["L", "M", "R"]] = {}

    def _add_node(
        key: str,
        label: str,
        color: str,
        side: Literal["L", "M", "R"],
    ) -> int:
        if key in side_by_key:
            return node_keys.index(key)
        node_keys.append(key)
        node_labels.append(label)
        node_colors.append(color)
        side_by_key[key] = side
        return len(node_keys) - 1

    links: list[SankeyLink] = []
    incoming = [
        (_add_node(f"{LEFT_PREFIX}{item.name}", item.name, item.color, "L"),
         item.amount)
        for item in view.income_by_category
        if item.amount > 0
    ]
    diff = view.cashflow.cashflow
    deficit_index = (
        _add_node(DEFICIT_KEY, DEFICIT_LABEL, DEFICIT_COLOR, "L")
        if diff < 0
        else None
    )
    middle_index = _add_node(MIDDLE_KEY, MIDDLE_LABEL, MIDDLE_COLOR, "M")
    outgoing = [
        (_add_node(f"{RIGHT_PREFIX}{item.name}", item.name, item.color, "R"),
         item.amount)
        for item in view.expense_by_category
        if item.amount > 0
    ]
    surplus_index = (
        _add_node(SURPLUS_KEY, SURPLUS_LABEL, SURPLUS_COLOR, "R")
        if diff > 0
        else None
    )

    for source, amount in incoming:
        links.append(SankeyLink(source=source, target=middle_index,
                                value=amount))
    if deficit_index is not None:
        links.append(SankeyLink(source=deficit_index, target=middle_index,
                                value=abs(diff)))
    for target, amount in outgoing:
        links.append(SankeyLink(source=middle_index, target=target,
                                value=amount))
    if surplus_index is not None:
        links.append(SankeyLink(source=middle_index, target=surplus_index,
                                value=diff))

    return SankeyModel(
        node_labels=node_labels,
        node_keys=node_keys,
        node_colors=node_colors,
        links=links,
        side_by_key=side_by_key,
    )


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    node_x: list[float] = []
    node_y: list[float] = []
    left_count = sum(1 for s in model.side_by_key.values() if s == "L")
    right_count = sum(1 for s in model.side_by_key.values() if s == "R")

    left_seen = 0
    right_seen = 0
    for key in model.node_keys:
        side = model.side_by_key.get(key, "M")
        if side == "L":
            node_x.append(0.02)
            node_y.append((left_seen + 1) / (left_count + 1))
            left_seen += 1
        elif side == "R":
            node_x.append(0.98)
            node_y.append((right_seen + 1) / (right_count + 1))
            right_seen += 1
        else:
            node_x.append(0.5)
            node_y.append(0.5)

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    color=model.node_colors,
                    x=node_x,
                    y=node_y,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=420,
    )
    return fig


__all__ = [
    "SankeyLink",
    "SankeyModel",
    "build_sankey_model",
    "build_plotly_figure",
]
