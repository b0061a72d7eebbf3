"""Scatter charts of value against time."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Optional

from matplotlib.dates import DateFormatter
from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter, LinearLocator

from ..datapoint import DataPoint
from .base import Chart, show_message, valid_points

NO_DATA_TITLE = "No data to display"
NO_VALID_DATA_TITLE = "No valid data to display"
SERIES_NAME = "Data Points"


@dataclass
class ScatterLayout:
    """Everything needed to draw a scatter chart."""

    title: str
    times: list[datetime] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    color: str = "#000000"
    x_range: Optional[tuple[datetime, datetime]] = None
    y_range: Optional[tuple[float, float]] = None


def _x_range(earliest: datetime, latest: datetime) -> tuple[datetime, datetime]:
    if earliest == latest:
        minute = timedelta(seconds=60)
        return earliest - minute, latest + minute
    span_ms = (latest - earliest) // timedelta(milliseconds=1)
    padding = timedelta(milliseconds=max(1000, span_ms // 20))
    return earliest - padding, latest + padding


def _y_range(lowest: float, highest: float) -> tuple[float, float]:
    spread = highest - lowest
    padding = spread * 0.1
    if abs(spread) < 1e-6:
        padding = max(0.5, abs(lowest * 0.1))
    low = lowest - padding
    high = highest + padding
    if abs(low - high) < 1e-9:
        low = lowest - (abs(lowest * 0.1) if abs(lowest) > 1e-6 else 0.5)
        high = highest + (abs(highest * 0.1) if abs(highest) > 1e-6 else 0.5)
        if abs(low - high) < 1e-9:
            low -= 0.5
            high += 0.5
    return low, high


def build_scatter_layout(
    data: Iterable[DataPoint], monochrome: bool = False
) -> ScatterLayout:
    """Compute points and axis ranges; without valid points only a title is set."""
    data = list(data)
    if not data:
        return ScatterLayout(title=NO_DATA_TITLE)
    points = valid_points(data)
    if not points:
        return ScatterLayout(title=NO_VALID_DATA_TITLE)

    times = [point.date for point in points]
    values = [point.value for point in points]
    return ScatterLayout(
        title=f"Skatter Chart for {len(data)} values",
        times=times,
        values=values,
        color="#000000" if monochrome else "#1e90ff",
        x_range=_x_range(min(times), max(times)),
        y_range=_y_range(min(values), max(values)),
    )


class ScatterChart(Chart):
    """Each point drawn as a small circle at its time and value."""

    def draw(
        self, data: Iterable[DataPoint], figure: Figure, monochrome: bool = False
    ) -> None:
        layout = build_scatter_layout(data, monochrome)
        if not layout.times:
            show_message(figure, layout.title)
            return

        figure.clear()
        axes = figure.add_subplot()
        axes.scatter(
            layout.times,
            layout.values,
            s=16,
            marker="o",
            c=layout.color,
            edgecolors="#000000",
            label=SERIES_NAME,
        )
        axes.set_title(layout.title)
        axes.set_xlim(*layout.x_range)
        axes.set_ylim(*layout.y_range)
        axes.xaxis.set_major_locator(LinearLocator(10))
        axes.xaxis.set_major_formatter(DateFormatter("%d.%m.%Y %H:%M:%S"))
        axes.yaxis.set_major_formatter(FormatStrFormatter("%.2f"))
        axes.set_xlabel("Time")
        axes.set_ylabel("Value")
        for label in axes.get_xticklabels():
            label.set_rotation(45)
            label.set_horizontalalignment("right")
        axes.legend(loc="lower center")