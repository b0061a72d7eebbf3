"""Bar charts grouped by day, one bar per hour of the day."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter

from ..datapoint import DataPoint
from .base import Chart, valid_points

SLOT_LABELS: tuple[str, ...] = (
    "00-01", "01-02", "02-03", "03-04",
    "04-05", "05-06", "06-07", "07-08",
    "08-09", "09-10", "10-11", "11-12",
    "12-13", "13-14", "14-15", "15-16",
    "16-17", "17-18", "18-19", "19-20",
    "20-21", "21-22", "22-23", "23-00",
)

_SLOT_COLORS: tuple[str, ...] = (
    "#ff0000", "#00ff00", "#0000ff", "#00ffff",
    "#ff00ff", "#ffff00", "#800000", "#008000", "#000080",
    "#008080", "#800080", "#808000", "#a0a0a4", "#c0c0c0",
    "#808080", "#000000", "#ffa500", "#800080", "#4b0082",
    "#a52a2a", "#ffc0cb", "#008080", "#808000", "#d2691e",
)


@dataclass
class BarChartLayout:
    """Everything needed to draw a grouped bar chart."""

    title: str
    categories: list[str]
    slot_labels: tuple[str, ...]
    slot_values: list[list[float]]
    colors: list[str]
    edge_color: Optional[str]
    y_range: tuple[float, float]


def _gray(level: int) -> str:
    return f"#{level:02x}{level:02x}{level:02x}"


def _y_range(lowest: float, highest: float) -> tuple[float, float]:
    if abs(highest - lowest) >= 1e-9:
        y_min, y_max = lowest, highest
        padding = (highest - lowest) * 0.1
        if abs(padding) < 1e-6:
            padding = 0.1 if highest == 0.0 else abs(highest * 0.1)
        if abs(padding) <= 1e-12:
            padding = 0.5
        y_min -= padding
        y_max += padding
        if lowest >= 0 and y_min < 0:
            y_min = 0.0
        if highest <= 0 and y_max > 0:
            y_max = 0.0
    elif lowest == 0.0:
        y_min, y_max = -1.0, 1.0
    else:
        padding = abs(lowest * 0.1)
        if padding < 1e-6:
            padding = 1.0
        y_min, y_max = lowest - padding, highest + padding
    if y_min >= y_max - 1e-9:
        y_max = y_min + 1.0
    return y_min, y_max


def build_bar_layout(
    data: Iterable[DataPoint], monochrome: bool = False
) -> Optional[BarChartLayout]:
    """Group points by day and hour and average each group.

    Returns ``None`` when there is no valid point to show.
    """
    data = list(data)
    points = valid_points(data)
    if not points:
        return None

    slot_count = len(SLOT_LABELS)
    grouped: dict[date, dict[int, list[float]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for point in points:
        slot = min(max(point.date.hour, 0), slot_count - 1)
        grouped[point.date.date()][slot].append(point.value)

    days = sorted(grouped)
    categories = [day.strftime("%d.%m.%Y") for day in days]
    slot_values = [
        [
            sum(values) / len(values) if (values := grouped[day].get(slot)) else 0.0
            for day in days
        ]
        for slot in range(slot_count)
    ]

    if monochrome:
        colors = [_gray(50 + 150 * slot // slot_count) for slot in range(slot_count)]
        edge_color: Optional[str] = "#000000"
    else:
        colors = list(_SLOT_COLORS[:slot_count])
        edge_color = None

    values = [point.value for point in points]
    return BarChartLayout(
        title=f"Bar Chart for {len(data)} values",
        categories=categories,
        slot_labels=SLOT_LABELS,
        slot_values=slot_values,
        colors=colors,
        edge_color=edge_color,
        y_range=_y_range(min(values), max(values)),
    )


class BarChart(Chart):
    """Bars per day, one coloured bar for each hour of the day."""

    def draw(
        self, data: Iterable[DataPoint], figure: Figure, monochrome: bool = False
    ) -> None:
        layout = build_bar_layout(data, monochrome)
        if layout is None:
            return

        figure.clear()
        axes = figure.add_subplot()
        slot_count = len(layout.slot_labels)
        width = 0.8 / slot_count
        positions = list(range(len(layout.categories)))
        for slot, (label, values, color) in enumerate(
            zip(layout.slot_labels, layout.slot_values, layout.colors)
        ):
            offset = (slot - (slot_count - 1) / 2) * width
            bars = axes.bar(
                [position + offset for position in positions],
                values,
                width,
                label=label,
                color=color,
                edgecolor=layout.edge_color,
            )
            axes.bar_label(bars, fmt="%g", fontsize="xx-small")

        axes.set_title(layout.title)
        axes.set_xticks(positions)
        axes.set_xticklabels(layout.categories, rotation=45, ha="right")
        axes.set_ylim(*layout.y_range)
        axes.yaxis.set_major_formatter(FormatStrFormatter("%.1f"))
        axes.legend(
            loc="upper center",
            bbox_to_anchor=(0.5, -0.15),
            ncol=8,
            fontsize="x-small",
        )