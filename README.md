# chartviewer

Reads time-stamped measurements from JSON files or SQLite databases and
draws them with matplotlib as a bar chart, a pie chart or a scatter chart,
in colour or in shades of grey. A chart can be saved as PDF.

## Installation

```
pip install .
```

## Command line

```
chartviewer --help
chartviewer [PATH] [-t TYPE] [-m] [-o FILE]
```

- `PATH` — a directory or a data file; defaults to your home directory.
  Given a directory, the command prints `Выбранный путь: <dir>` and then
  the names of the `*.json`, `*.sqlite` and `*.db` files directly inside it,
  sorted by name.
- Given a file, the command loads it and draws a chart:
  - `-t`, `--type` — `bar` (default), `pie` or `scatter`; the names
    `Гистограмма`, `Круговая диаграмма` and `Точечная диаграмма` are also
    accepted.
  - `-m`, `--monochrome` — draw in shades of grey.
  - `-o FILE`, `--pdf FILE` — save the chart to `FILE` as PDF instead of
    opening a matplotlib window.

If the file cannot be read (unsupported extension, bad content), the error
is printed to standard error and the exit status is 1. Without `--pdf` the
chart is shown with `matplotlib.pyplot`, which needs an interactive
matplotlib backend.

## Input formats

**JSON** — the root must be an array. Objects in it carry a `Datetime` and a
`Value` field; other entries are skipped:

```json
[
  {"Datetime": "2024-03-01T10:15:00", "Value": 12.5},
  {"Datetime": 1709288100, "Value": 13.0}
]
```

`Datetime` is either an ISO 8601 string (a trailing `Z` is accepted) or a
Unix timestamp in local time; numbers above 100000000000 are read as
milliseconds, smaller ones as seconds. A missing or non-numeric `Value`
counts as 0. Entries whose time cannot be read are skipped. If the array has
entries but none of them could be read, `DataReadError` is raised; it is
also raised when the file cannot be opened, is not valid JSON, or its root
is not an array.

**SQLite** (`.sqlite` or `.db`) — the first table of the database is read,
taking its `Time` and `Value` columns. `Time` holds either
`dd.MM.yyyy HH:mm` or a date followed by the number of minutes since
midnight (0–1439), such as `01.03.2024 615`. `parse_time` in
`chartviewer.sql_reader` parses both forms and returns `None` otherwise.
Rows whose time cannot be parsed are skipped. `DataReadError` is raised when
the database has no tables, the query fails, or no row could be read.

## Charts

All drawers live in `chartviewer.charts` and implement `Chart.draw(data,
figure, monochrome)`, replacing the contents of a matplotlib `Figure`.
Points without a date or with a non-finite value are left out by the bar and
scatter charts.

- **Bar chart** (`charts.bar_chart.BarChart`) — values averaged per date and
  per hour of the day, one bar per hour slot (`00-01` … `23-00`) within each
  date. With no valid points the figure is left untouched.
  `build_bar_layout` returns the computed `BarChartLayout` (or `None`).
- **Pie chart** (`charts.pie_chart.PieChart`) — one slice per value, largest
  first; more than 2000 points are averaged in time-ordered groups down to at
  most 2000 slices. Empty input shows the title `Нет данных для отображения`.
  `build_pie_layout` returns the `PieLayout`.
- **Scatter chart** (`charts.scatter_chart.ScatterChart`) — each value placed
  at its time, with padded axis ranges. Empty input shows `No data to
  display`, input with no valid point `No valid data to display`.
  `build_scatter_layout` returns the `ScatterLayout`.

## Library use

```python
from matplotlib.figure import Figure

from chartviewer.container import ServiceContainer
from chartviewer.controller import AppController, PIE_CHART, register_services

container = ServiceContainer()
register_services(container)

controller = AppController(container, on_error=lambda title, message: print(title, message))
controller.set_figure(Figure())
controller.on_chart_type_changed(PIE_CHART)
controller.on_monochrome_toggled(True)
controller.on_file_selected("measurements.json")
controller.save_pdf("chart.pdf")  # True when a chart was written
```

Readers (`JSONReader`, `SQLReader`) can also be used on their own; both
return a list of `DataPoint(date, value)`:

```python
from chartviewer.json_reader import JSONReader

points = JSONReader().read("measurements.json")
```

`ServiceContainer` maps keys to services; `resolve(key, expected_type)`
raises `ServiceNotFoundError` for an unknown key and `ServiceTypeError` when
the service is of the wrong type. `register_services` fills a container with
the readers (`json_reader`, `sql_reader`) and the charts (`barchart`,
`piechart`, `scatterchart`), and `default_container()` returns the shared
container that `AppController` uses when none is given.

`chartviewer.typed_container.TypeContainer` resolves objects by interface
type instead of by key: `register_instance`, `register_functor` and
`register_factory` register how an interface is obtained, and `get` builds
it, resolving declared dependency types first.

## What it does not do

There is no graphical file browser: directories are listed on the command
line, and a file is chosen by passing its path.

## Running the tests

```
pip install .[test]
pytest
```