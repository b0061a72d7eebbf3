import math
from datetime import datetime

import pytest
from matplotlib.figure import Figure

from chartviewer.charts.base import Chart, show_message, valid_points
from chartviewer.datapoint import DataPoint


def test_valid_points_drops_missing_dates_and_non_finite_values():
    good_a = DataPoint(datetime(2024, 1, 1, 8), 1.5)
    good_b = DataPoint(datetime(2024, 1, 2, 9), -2.0)
    data = [
        good_a,
        DataPoint(None, 3.0),
        DataPoint(datetime(2024, 1, 1), math.nan),
        DataPoint(datetime(2024, 1, 1), math.inf),
        DataPoint(datetime(2024, 1, 1), -math.inf),
        good_b,
    ]
    assert valid_points(data) == [good_a, good_b]


def test_valid_points_of_empty_input_is_empty():
    assert valid_points([]) == []


def test_valid_points_accepts_generators():
    points = [DataPoint(datetime(2024, 5, 1, hour), float(hour)) for hour in range(3)]
    assert valid_points(point for point in points) == points


def test_show_message_replaces_previous_axes():
    figure = Figure()
    figure.add_subplot()
    figure.add_subplot()
    axes = show_message(figure, "No data to display")
    assert figure.axes == [axes]
    assert axes.get_title() == "No data to display"
    assert not axes.axison


def test_chart_is_abstract():
    with pytest.raises(TypeError):
        Chart()