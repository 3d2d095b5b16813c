"""Chart data preparation and Altair builders for the Streamlit UI."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.domain.constants import DEFAULT_CATEGORY_COLOR
from src.domain.models import AllocationSlice, CategoryTotal, DailyFlow
from src.utils.formatting import format_idr, format_percent

OTHER_LABEL = "Lainnya"
INCOME_SERIES = "Pemasukan"
EXPENSE_SERIES = "Pengeluaran"
ALLOCATION_PALETTE = (
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ef4444",
    "#06b6d4",
    "#ec4899",
    "#84cc16",
)


def prepare_donut_data(
    items: Sequence[CategoryTotal],
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Category totals, largest first.
        max_categories: Maximum categories to keep before grouping.

    Returns:
        Altair-ready rows carrying each category's own colour.
    """
    sorted_items = sorted(items, key=lambda item: item.amount, reverse=True)
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    total = sum((item.amount for item in sorted_items), start=Decimal("0"))

    rows = [
        (item.name, item.amount, item.color) for item in top_items
    ]
    other_amount = sum(
        (item.amount for item in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        rows.append((OTHER_LABEL, other_amount, DEFAULT_CATEGORY_COLOR))

    data: list[dict[str, str | float]] = []
    for name, amount, color in rows:
        share = (amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "color": color,
                "amount_label": format_idr(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def prepare_trend_data(
    flows: Sequence[DailyFlow],
) -> list[dict[str, str | float]]:
    """Flatten daily flows into one row per day and series."""
    data: list[dict[str, str | float]] = []
    for flow in flows:
        day = flow.date.isoformat()
        data.append(
            {"date": day, "series": INCOME_SERIES,
             "amount": float(flow.income)}
        )
        data.append(
            {"date": day, "series": EXPENSE_SERIES,
             "amount": float(flow.expense)}
        )
    return data


def prepare_allocation_data(
    slices: Sequence[AllocationSlice],
) -> list[dict[str, str | float]]:
    """Prepare allocation slices for a donut chart."""
    return [
        {
            "category": item.label,
            "amount": float(item.value),
            "color": ALLOCATION_PALETTE[index % len(ALLOCATION_PALETTE)],
            "amount_label": format_idr(item.value),
            "share_label": format_percent(item.share_percent, digits=1),
        }
        for index, item in enumerate(slices)
    ]


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
    legend_columns: int = 2,
) -> alt.LayerChart:
    """Build a donut chart coloured by each row's ``color`` field.

    Args:
        data: Rows from ``prepare_donut_data`` or
            ``prepare_allocation_data``.
        chart_size: Width/height for the chart canvas.
        legend_columns: Column count of the legend.

    Returns:
        Layered Altair chart with a hover label in the centre.
    """
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=legend_columns,
                labelLimit=180,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=14,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def build_trend_chart(data: list[dict[str, str | float]]) -> alt.Chart:
    """Build a grouped daily bar chart of income against expense."""
    return alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("date:T", title=None),
        xOffset=alt.XOffset("series:N"),
        y=alt.Y("amount:Q", title="IDR"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=[INCOME_SERIES, EXPENSE_SERIES],
                range=["#10b981", "#f43f5e"],
            ),
            legend=alt.Legend(orient="top", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    ).properties(height=280)


__all__ = [
    "OTHER_LABEL",
    "INCOME_SERIES",
    "EXPENSE_SERIES",
    "prepare_donut_data",
    "prepare_trend_data",
    "prepare_allocation_data",
    "build_donut_chart",
    "build_trend_chart",
]
