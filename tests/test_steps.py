import logging

import pytest
from prometheus_client import REGISTRY

from tracker.steps import report_steps


def test_report_steps():
    report = report_steps("6000,1h0m", 70, 180)
    assert report == (
        "Steps count: 6000.\n"
        "Distance was 3.90 km.\n"
        "You burned 17010.00 kcal.\n"
    )


def test_report_steps_distance_ignores_height():
    short = report_steps("5000,1h30m", 75, 150)
    tall = report_steps("5000,1h30m", 75, 200)
    assert "Distance was 3.25 km." in short
    assert "Distance was 3.25 km." in tall
    assert short != tall


@pytest.mark.parametrize("data", ["1,1s", "5000,2h30m", "123456,45m", "+42,10m"])
def test_report_steps_contains_step_count(data):
    report = report_steps(data, 80, 170)
    assert report
    assert f"Steps count: {int(data.split(',')[0])}." in report


@pytest.mark.parametrize("data, weight, height", [
    ("5000", 75, 175),
    ("5000,Walking,1h", 75, 175),
    ("abc,1h", 75, 175),
    ("0,1h", 75, 175),
    ("-5,1h", 75, 175),
    ("5000,later", 75, 175),
    ("5000,0s", 75, 175),
    ("5000,1h", 0, 175),
    ("5000,1h", 75, 0),
])
def test_report_steps_returns_empty_string_on_error(data, weight, height):
    assert report_steps(data, weight, height) == ""


def test_report_steps_logs_swallowed_error(caplog):
    with caplog.at_level(logging.ERROR, logger="tracker.steps"):
        assert report_steps("0,1h", 75, 175) == ""
    assert "invalid steps count" in caplog.text


@pytest.mark.parametrize("data", [
    "5000,99999999999999h",
    "1" + "0" * 400 + ",1h",
    str(2 ** 63) + ",1h",
])
def test_report_steps_swallows_out_of_range_values(data):
    assert report_steps(data, 75, 175) == ""


def test_report_steps_accepts_sub_microsecond_duration():
    assert report_steps("5000,500ns", 75, 175).startswith("Steps count: 5000.\n")


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_report_steps_counts_errors():
    errors_before = _sample("tracker_reports_total", {"report": "steps", "status": "error"})
    kind_before = _sample("tracker_report_errors_total", {"report": "steps", "kind": "steps"})

    assert report_steps("0,1h", 75, 175) == ""

    assert _sample("tracker_reports_total", {"report": "steps", "status": "error"}) == errors_before + 1
    assert _sample("tracker_report_errors_total", {"report": "steps", "kind": "steps"}) == kind_before + 1


def test_report_steps_counts_success():
    success_before = _sample("tracker_reports_total", {"report": "steps", "status": "success"})
    observed_before = _sample("tracker_report_duration_seconds_count", {"report": "steps"})

    assert report_steps("5000,1h", 75, 175)

    assert _sample("tracker_reports_total", {"report": "steps", "status": "success"}) == success_before + 1
    assert _sample("tracker_report_duration_seconds_count", {"report": "steps"}) == observed_before + 1
