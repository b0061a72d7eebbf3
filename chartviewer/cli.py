"""Command line entry point: browse data files and render them as charts."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from matplotlib.figure import Figure

from .container import ServiceContainer
from .controller import (
    BAR_CHART,
    PIE_CHART,
    SCATTER_CHART,
    AppController,
    register_services,
)
from .datapoint import PathLike

DATA_SUFFIXES = (".json", ".sqlite", ".db")
WINDOW_TITLE = "Chart Viewer MVC/IoC"

_CHART_ALIASES: dict[str, str] = {
    "bar": BAR_CHART,
    "pie": PIE_CHART,
    "scatter": SCATTER_CHART,
    BAR_CHART: BAR_CHART,
    PIE_CHART: PIE_CHART,
    SCATTER_CHART: SCATTER_CHART,
}


def list_data_files(directory: PathLike) -> list[Path]:
    """Return the data files directly inside ``directory``, sorted by name."""
    return sorted(
        entry
        for entry in Path(directory).iterdir()
        if entry.is_file() and entry.suffix.lower() in DATA_SUFFIXES
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chartviewer",
        description="List data files in a directory or draw one of them as a chart.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=str(Path.home()),
        help="a directory to list or a .json/.sqlite/.db file to draw",
    )
    parser.add_argument(
        "-t", "--type", choices=list(_CHART_ALIASES), default="bar",
        help="chart type",
    )
    parser.add_argument(
        "-m", "--monochrome", action="store_true", help="draw in shades of grey"
    )
    parser.add_argument("-o", "--pdf", metavar="FILE", help="save the chart as PDF")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; return the process exit status."""
    args = _parser().parse_args(argv)
    path = Path(args.path)

    if path.is_dir():
        print(f"Выбранный путь: {path}")
        for entry in list_data_files(path):
            print(entry.name)
        return 0

    errors: list[tuple[str, str]] = []
    container = ServiceContainer()
    register_services(container)
    controller = AppController(
        container, on_error=lambda title, message: errors.append((title, message))
    )

    if args.pdf:
        figure = Figure(figsize=(16, 8))
        pyplot = None
    else:
        from matplotlib import pyplot

        figure = pyplot.figure(figsize=(16, 8))
        manager = figure.canvas.manager
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)

    controller.set_figure(figure)
    controller.on_chart_type_changed(_CHART_ALIASES[args.type])
    controller.on_monochrome_toggled(args.monochrome)
    print(f"Загрузка файла: {path}")
    controller.on_file_selected(str(path))

    if errors:
        for title, message in errors:
            print(f"{title}: {message}", file=sys.stderr)
        return 1

    if args.pdf:
        if not controller.save_pdf(args.pdf):
            print("No chart to save.", file=sys.stderr)
            return 1
        print(f"Chart saved to {args.pdf}")
    elif pyplot is not None:
        pyplot.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())