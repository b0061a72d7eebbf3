"""Pie charts with one slice per point, averaged down for large inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from itertools import islice
from typing import Iterable, Iterator

from matplotlib.figure import Figure

from ..datapoint import DataPoint
from .base import Chart, show_message

TARGET_SLICE_COUNT = 2000
EMPTY_TITLE = "Нет данных для отображения"


@dataclass
class PieLayout:
    """Everything needed to draw a pie chart."""

    title: str
    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    border_color: str = "#000000"
    border_width: float = 0.0


def _hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def _chunks(points: list[DataPoint], size: int) -> Iterator[list[DataPoint]]:
    iterator = iter(points)
    while chunk := list(islice(iterator, size)):
        yield chunk


def _date_key(point: DataPoint) -> tuple[bool, datetime]:
    return (point.date is not None, point.date or datetime.min)


def _reduce(points: list[DataPoint]) -> list[DataPoint]:
    if len(points) <= TARGET_SLICE_COUNT:
        return list(points)
    ordered = sorted(points, key=_date_key)
    group_size = math.ceil(len(ordered) / TARGET_SLICE_COUNT)
    return [
        DataPoint(chunk[0].date, sum(point.value for point in chunk) / len(chunk))
        for chunk in _chunks(ordered, group_size)
    ]


def build_pie_layout(data: Iterable[DataPoint], monochrome: bool = False) -> PieLayout:
    """Compute the slices, largest first; an empty input gives no slices."""
    data = list(data)
    if not data:
        return PieLayout(title=EMPTY_TITLE)

    slices = sorted(_reduce(data), key=lambda point: point.value, reverse=True)
    if monochrome:
        colors = [
            _hex(*(50 + (index * 37) % 170,) * 3) for index in range(len(slices))
        ]
        border_width = 0.0
    else:
        colors = [
            _hex(
                (index * 41 + 50) % 256,
                (index * 61 + 100) % 256,
                (index * 97 + 150) % 256,
            )
            for index in range(len(slices))
        ]
        border_width = 2.0

    return PieLayout(
        title=f"Pie Chart for {len(data)} value",
        labels=[
            point.date.strftime("%d.%m.%y %H:%M") if point.date else ""
            for point in slices
        ],
        values=[point.value for point in slices],
        colors=colors,
        border_color="#000000",
        border_width=border_width,
    )


class PieChart(Chart):
    """One slice per point, coloured by position."""

    def draw(
        self, data: Iterable[DataPoint], figure: Figure, monochrome: bool = False
    ) -> None:
        layout = build_pie_layout(data, monochrome)
        if not layout.values:
            show_message(figure, layout.title)
            return

        figure.clear()
        axes = figure.add_subplot()
        axes.set_title(layout.title)
        sizes = [
            value if math.isfinite(value) and value > 0 else 0.0
            for value in layout.values
        ]
        if sum(sizes) <= 0:
            axes.set_axis_off()
            return
        wedges, *_ = axes.pie(
            sizes,
            colors=layout.colors,
            startangle=90,
            counterclock=False,
            wedgeprops={
                "edgecolor": layout.border_color,
                "linewidth": layout.border_width,
            },
        )
        for wedge, label in zip(wedges, layout.labels):
            wedge.set_label(label)