import math
from datetime import datetime, timedelta

from matplotlib.figure import Figure

from chartviewer.charts.scatter_chart import (
    NO_DATA_TITLE,
    ScatterChart,
    build_scatter_layout,
)
from chartviewer.datapoint import DataPoint


def _points():
    start = datetime(2024, 2, 1, 12, 0, 0)
    return [
        DataPoint(start, 2.0),
        DataPoint(start + timedelta(hours=5), 8.0),
        DataPoint(start + timedelta(hours=1), math.nan),
        DataPoint(start + timedelta(hours=2), -3.0),
    ]


def test_empty_data_gives_message_layout():
    layout = build_scatter_layout([], False)
    assert layout.title == "No data to display"
    assert layout.times == []


def test_only_invalid_data_gives_other_message():
    layout = build_scatter_layout([DataPoint(None, 1.0), DataPoint(datetime(2024, 1, 1), math.inf)])
    assert layout.title == "No valid data to display"
    assert layout.x_range is None


def test_invalid_points_are_skipped_but_counted_in_title():
    layout = build_scatter_layout(_points(), False)
    assert layout.values == [2.0, 8.0, -3.0]
    assert layout.title == f"Skatter Chart for {len(_points())} values"


def test_ranges_enclose_all_points():
    layout = build_scatter_layout(_points(), False)
    low_x, high_x = layout.x_range
    low_y, high_y = layout.y_range
    assert all(low_x < moment < high_x for moment in layout.times)
    assert all(low_y < value < high_y for value in layout.values)


def test_single_point_ranges():
    moment = datetime(2024, 6, 1, 8, 30)
    layout = build_scatter_layout([DataPoint(moment, 0.0)])
    assert layout.x_range == (moment - timedelta(seconds=60), moment + timedelta(seconds=60))
    assert layout.y_range == (-0.5, 0.5)


def test_short_spans_get_at_least_a_second_of_padding():
    start = datetime(2024, 6, 1, 8, 30)
    end = start + timedelta(seconds=10)
    layout = build_scatter_layout([DataPoint(start, 1.0), DataPoint(end, 2.0)])
    assert layout.x_range == (start - timedelta(milliseconds=1000), end + timedelta(milliseconds=1000))


def test_colours():
    assert build_scatter_layout(_points(), True).color == "#000000"
    assert build_scatter_layout(_points(), False).color == "#1e90ff"


def test_draw_plots_valid_points():
    figure = Figure()
    ScatterChart().draw(_points(), figure, False)
    axes = figure.axes[0]
    assert len(axes.collections[0].get_offsets()) == 3
    assert axes.get_xlabel() == "Time"
    assert axes.get_ylabel() == "Value"
    assert axes.get_ylim() == build_scatter_layout(_points()).y_range


def test_draw_empty_shows_message():
    figure = Figure()
    ScatterChart().draw([], figure, False)
    assert [axes.get_title() for axes in figure.axes] == [NO_DATA_TITLE]