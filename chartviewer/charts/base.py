"""The interface shared by all chart renderers and helpers they use."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..datapoint import DataPoint


class Chart(ABC):
    """Something that draws a list of points onto a matplotlib figure."""

    @abstractmethod
    def draw(
        self, data: Iterable[DataPoint], figure: Figure, monochrome: bool = False
    ) -> None:
        """Replace the contents of ``figure`` with a chart of ``data``."""


def valid_points(data: Iterable[DataPoint]) -> list[DataPoint]:
    """Keep the points that have a date and a finite value, in order."""
    return [
        point
        for point in data
        if point.is_valid() and math.isfinite(point.value)
    ]


def show_message(figure: Figure, title: str) -> Axes:
    """Clear ``figure`` and show an empty chart that carries only ``title``."""
    figure.clear()
    axes = figure.add_subplot()
    axes.set_title(title)
    axes.set_axis_off()
    return axes