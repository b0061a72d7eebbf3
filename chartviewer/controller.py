"""Connects data readers and chart renderers to a figure."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from matplotlib.figure import Figure

from .charts.bar_chart import BarChart
from .charts.base import Chart
from .charts.pie_chart import PieChart
from .charts.scatter_chart import ScatterChart
from .container import ServiceContainer, default_container
from .datapoint import DataPoint, DataReader, PathLike
from .json_reader import JSONReader
from .sql_reader import SQLReader

logger = logging.getLogger(__name__)

BAR_CHART = "Гистограмма"
PIE_CHART = "Круговая диаграмма"
SCATTER_CHART = "Точечная диаграмма"

CHART_KEYS: dict[str, str] = {
    BAR_CHART: "barchart",
    PIE_CHART: "piechart",
    SCATTER_CHART: "scatterchart",
}

READER_KEYS: dict[str, str] = {
    "json": "json_reader",
    "sqlite": "sql_reader",
    "db": "sql_reader",
}

ERROR_TITLE = "Ошибка чтения файла"

ErrorHandler = Callable[[str, str], None]


def register_services(container: ServiceContainer) -> None:
    """Register every data reader and chart renderer under its key."""
    container.register("json_reader", JSONReader())
    container.register("sql_reader", SQLReader())
    container.register("barchart", BarChart())
    container.register("piechart", PieChart())
    container.register("scatterchart", ScatterChart())


def _suffix(file_path: str) -> str:
    name = os.path.basename(file_path)
    if "." not in name:
        return ""
    return name.rpartition(".")[2].lower()


class AppController:
    """Loads data from files and keeps the figure showing the chosen chart."""

    def __init__(
        self,
        container: Optional[ServiceContainer] = None,
        on_error: Optional[ErrorHandler] = None,
    ) -> None:
        self.container = container if container is not None else default_container()
        self.on_error = on_error
        self.figure: Optional[Figure] = None
        self.data: list[DataPoint] = []
        self.chart_type = BAR_CHART
        self.monochrome = False

    def set_figure(self, figure: Figure) -> None:
        """Use ``figure`` as the drawing surface."""
        self.figure = figure

    def _report(self, title: str, message: str) -> None:
        if self.on_error is not None:
            self.on_error(title, message)

    def on_file_selected(self, file_path: PathLike) -> None:
        """Load ``file_path`` with the reader its extension calls for and redraw."""
        path = os.fspath(file_path) if file_path else ""
        if not path or self.figure is None:
            return
        logger.debug("Controller: File selected %s", path)

        self.data = []
        extension = _suffix(path)
        reader_key = READER_KEYS.get(extension)
        if reader_key is None:
            self._report(ERROR_TITLE, f"Неподдерживаемый тип файла: .{extension}")
            self._update_chart()
            return

        try:
            reader = self.container.resolve(reader_key, DataReader)
            self.data = reader.read(path)
            logger.debug("Controller: Data loaded, %d points.", len(self.data))
        except Exception as exc:
            logger.error("Controller: An error occurred - %s", exc)
            self._report(ERROR_TITLE, str(exc))

        self._update_chart()

    def on_chart_type_changed(self, chart_name: str) -> None:
        """Switch to the chart called ``chart_name`` and redraw."""
        logger.debug("Controller: Chart type changed to %s", chart_name)
        self.chart_type = chart_name
        self._update_chart()

    def on_monochrome_toggled(self, is_monochrome: bool) -> None:
        """Turn grey-scale drawing on or off and redraw."""
        logger.debug("Controller: Monochrome mode %s", "ON" if is_monochrome else "OFF")
        self.monochrome = bool(is_monochrome)
        self._update_chart()

    def _update_chart(self) -> None:
        if self.figure is None:
            return
        chart_key = CHART_KEYS.get(self.chart_type)
        if chart_key is None:
            logger.warning("Unknown chart type: %s", self.chart_type)
            self.figure.clear()
            return
        try:
            chart = self.container.resolve(chart_key, Chart)
            chart.draw(self.data, self.figure, self.monochrome)
            logger.debug("Controller: Chart updated successfully.")
        except Exception as exc:
            logger.error("Controller: Failed to draw chart - %s", exc)

    def save_pdf(self, file_path: PathLike) -> bool:
        """Write the current chart to ``file_path`` as PDF; return whether it was saved."""
        if self.figure is None or not self.figure.axes:
            logger.warning("No chart to save.")
            return False
        path = os.fspath(file_path) if file_path else ""
        if not path:
            return False
        self.figure.savefig(path, format="pdf")
        logger.debug("Chart saved to %s", path)
        return True