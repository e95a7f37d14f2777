# tests/test_statistics.py
import time

import pytest

from atcs.intersection import create_intersection, run_one_cycle
from atcs.statistics import (
    IntersectionSummary,
    format_state,
    format_stats_record,
    save_statistics,
    summarize,
)
from utils.exceptions import StatisticsLogError


def _set_counters(it, served, waits):
    for lane, s, w in zip(it.lanes, served, waits):
        lane.vehicles_served = s
        lane.total_wait_secs = w


# ------------------------- summarize -------------------------

def test_summary_after_canonical_cycle(busy_intersection):
    run_one_cycle(busy_intersection)
    summary = summarize(busy_intersection)
    assert summary == IntersectionSummary(1, 8, 99, pytest.approx(99 / 8, abs=1e-9))
    assert summary.avg_wait_per_vehicle == pytest.approx(12.375, abs=1e-9)


def test_summary_average_matches_ratio(intersection):
    _set_counters(intersection, [2, 0, 5, 1], [13, 0, 40, 7])
    summary = summarize(intersection)
    assert summary.total_served == 8
    assert summary.total_wait_secs == 60
    assert summary.avg_wait_per_vehicle == pytest.approx(60 / 8, abs=1e-9)


def test_summary_no_vehicles_served(intersection):
    _set_counters(intersection, [0, 0, 0, 0], [12, 3, 0, 0])
    summary = summarize(intersection)
    assert summary.avg_wait_per_vehicle == 0.0
    assert summary.total_wait_secs == 15


def test_summary_to_dict_rounds(intersection):
    _set_counters(intersection, [3, 0, 0, 0], [10, 0, 0, 0])
    assert summarize(intersection).to_dict()["avg_wait_per_vehicle"] == 3.33


# ------------------------- Console report -------------------------

def test_format_state_lines(busy_intersection):
    text = format_state(busy_intersection)
    lines = text.splitlines()
    assert lines[0] == "Intersection: Main_1 | Cycles: 0"
    assert lines[3] == " Lane 3 -> waiting: 5, served: 0, total_wait_secs: 0"
    assert len(lines) == 5


# ------------------------- Stats log -------------------------

def test_stats_record_format(busy_intersection):
    run_one_cycle(busy_intersection)
    ts = 1_700_000_000
    record = format_stats_record(busy_intersection, timestamp=ts)
    assert record == (
        f"=== Stats for intersection 'Main_1' at {time.ctime(ts)}\n"
        "Cycles run: 1\n"
        "Total vehicles served: 8\n"
        "Total wait seconds (sum over vehicles): 99\n"
        "Average wait time per vehicle: 12.38 seconds\n\n"
    )


def test_save_statistics_appends(tmp_path, busy_intersection):
    log = tmp_path / "traffic_stats.txt"
    log.write_text("previous run\n")
    run_one_cycle(busy_intersection)
    save_statistics(busy_intersection, log)
    save_statistics(busy_intersection, str(log))
    content = log.read_text()
    assert content.startswith("previous run\n")
    assert content.count("=== Stats for intersection 'Main_1'") == 2


def test_save_statistics_failure_raises(tmp_path, intersection):
    missing_dir = tmp_path / "nope" / "stats.txt"
    with pytest.raises(StatisticsLogError):
        save_statistics(intersection, missing_dir)
