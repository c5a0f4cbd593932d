"""
Catalogue of the chart types an analysis may recommend.

The order of ``CHART_TYPES`` is the order presented to the LLM and returned
by ``GET /api/chart-types``.
"""
from typing import List, Tuple, Union

from chartbrief.models import ChartType

CHART_TYPES: List[Tuple[ChartType, str]] = [
    (ChartType.BAR, "Bar Chart"),
    (ChartType.LINE, "Line Chart"),
    (ChartType.PIE, "Pie Chart"),
    (ChartType.DOUGHNUT, "Doughnut Chart"),
    (ChartType.POLAR_AREA, "Polar Area Chart"),
    (ChartType.RADAR, "Radar Chart"),
]

CARTESIAN_CHART_TYPES = (ChartType.BAR, ChartType.LINE)


def chart_type_values() -> List[str]:
    """Wire values in catalogue order, e.g. ``["bar", "line", ...]``."""
    return [chart_type.value for chart_type, _ in CHART_TYPES]


def is_valid_chart_type(value: object) -> bool:
    return isinstance(value, str) and value in chart_type_values()


def get_chart_type_label(chart_type: Union[ChartType, str]) -> str:
    """Human-readable label; unknown values are returned unchanged."""
    value = chart_type.value if isinstance(chart_type, ChartType) else chart_type
    for known, label in CHART_TYPES:
        if known.value == value:
            return label
    return value


def is_cartesian_chart(chart_type: Union[ChartType, str]) -> bool:
    """Bar and line charts have x/y axes; the radial types do not."""
    value = chart_type.value if isinstance(chart_type, ChartType) else chart_type
    return value in [known.value for known in CARTESIAN_CHART_TYPES]
