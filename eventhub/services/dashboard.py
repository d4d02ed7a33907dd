"""Chart derivation for the admin dashboard.

Builds Chart.js-ready data and option dictionaries from dashboard state. The
inputs are never mutated: revenue stays in minor units in storage and is only
converted when producing display values and labels.
"""

from eventhub.core.config import get_settings
from eventhub.models.dashboard import MembershipSlice, TrendsData
from eventhub.utils.formatting import (
    MINOR_UNITS_PER_MAJOR,
    format_minor_units,
    minor_to_major,
)

MONTH_LABELS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Saffron
REGISTRATION_FILL = "rgba(255, 153, 0, 0.2)"
REGISTRATION_BORDER = "rgba(255, 153, 0, 1)"
# Green
REVENUE_FILL = "rgba(16, 185, 129, 0.2)"
REVENUE_BORDER = "rgba(16, 185, 129, 1)"

LINE_TENSION = 0.4


def _line_series(label: str, data: list[int], fill: str, border: str) -> dict:
    return {
        "labels": list(MONTH_LABELS),
        "datasets": [
            {
                "label": label,
                "data": list(data),
                "fill": True,
                "backgroundColor": fill,
                "borderColor": border,
                "tension": LINE_TENSION,
            }
        ],
    }


def derive_registration_series(trends: TrendsData) -> dict:
    """
    Build the registration trend line chart data.

    Value i of `trends.registrations` is plotted against month label i.

    Returns:
        dict: Chart.js data with twelve month labels and one "Registrations" dataset.
    """
    return _line_series(
        "Registrations", trends.registrations, REGISTRATION_FILL, REGISTRATION_BORDER
    )


def derive_revenue_series(trends: TrendsData) -> dict:
    """
    Build the revenue trend line chart data.

    The dataset `data` keeps the stored minor-unit values; the major-unit
    equivalents (divided by 100) and their currency strings are attached as
    `display_values` and `formatted_values`, index for index.

    Returns:
        dict: Chart.js data with twelve month labels and one "Revenue" dataset.
    """
    series = _line_series("Revenue", trends.revenue, REVENUE_FILL, REVENUE_BORDER)
    dataset = series["datasets"][0]
    dataset["display_values"] = [float(minor_to_major(v)) for v in trends.revenue]
    dataset["formatted_values"] = [format_minor_units(v) for v in trends.revenue]
    return series


def derive_membership_series(membership: list[MembershipSlice]) -> dict:
    """
    Build the membership doughnut chart data.

    Labels, counts and colours keep the order of `membership`.
    """
    return {
        "labels": [item.category for item in membership],
        "datasets": [
            {
                "data": [item.count for item in membership],
                "backgroundColor": [item.color for item in membership],
            }
        ],
    }


def chart_options() -> dict:
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": {"legend": {"position": "top"}},
    }


def format_revenue_tick(value: int | float) -> str:
    """Currency label for a revenue axis tick given in minor units."""
    return format_minor_units(value)


def revenue_chart_options(trends: TrendsData) -> dict:
    """
    Options for the revenue chart with currency-formatted ticks and tooltips.

    Chart.js callbacks cannot be serialized, so the labels are precomputed:
    `tooltipLabels` holds one string per month and the page script formats
    axis ticks through the `tickFormat` locale and currency.
    """
    return {
        "maintainAspectRatio": False,
        "scales": {"y": {"ticks": {"tickFormat": _tick_format()}}},
        "plugins": {
            "tooltip": {
                "tooltipLabels": [format_revenue_tick(v) for v in trends.revenue]
            }
        },
    }


def _tick_format() -> dict:
    settings = get_settings()
    return {
        "locale": settings.CURRENCY_LOCALE.replace("_", "-"),
        "currency": settings.CURRENCY_CODE,
        "divisor": MINOR_UNITS_PER_MAJOR,
    }
