#!/usr/bin/env python3
"""
Aggregate statistics for a simulated intersection and the append-only stats log.
"""

import time
from pathlib import Path
from typing import NamedTuple, Optional, Union

from utils.exceptions import StatisticsLogError
from utils.logger import get_logger

from .intersection import Intersection

logger = get_logger("statistics")

class IntersectionSummary(NamedTuple):
    cycles: int
    total_served: int
    total_wait_secs: int
    avg_wait_per_vehicle: float

    def to_dict(self):
        return {
            "cycles": self.cycles,
            "total_served": self.total_served,
            "total_wait_secs": self.total_wait_secs,
            "avg_wait_per_vehicle": round(self.avg_wait_per_vehicle, 2)
        }

def summarize(it: Intersection) -> IntersectionSummary:
    """Totals across the four lanes plus the average wait per served vehicle."""
    total_served = sum(lane.vehicles_served for lane in it.lanes)
    total_wait_secs = sum(lane.total_wait_secs for lane in it.lanes)
    avg = (total_wait_secs / total_served) if total_served > 0 else 0.0
    return IntersectionSummary(it.cycles, total_served, total_wait_secs, avg)

def format_state(it: Intersection) -> str:
    """Console report of the current state, one line per lane."""
    lines = [f"Intersection: {it.name} | Cycles: {it.cycles}"]
    for i, lane in enumerate(it.lanes):
        lines.append(
            f" Lane {i + 1} -> waiting: {lane.vehicles}, served: {lane.vehicles_served}, "
            f"total_wait_secs: {lane.total_wait_secs}"
        )
    return "\n".join(lines)

def format_stats_record(it: Intersection, timestamp: Optional[float] = None) -> str:
    """Text block appended to the stats log for one run."""
    summary = summarize(it)
    stamp = time.ctime(timestamp if timestamp is not None else time.time())
    return (
        f"=== Stats for intersection '{it.name}' at {stamp}\n"
        f"Cycles run: {summary.cycles}\n"
        f"Total vehicles served: {summary.total_served}\n"
        f"Total wait seconds (sum over vehicles): {summary.total_wait_secs}\n"
        f"Average wait time per vehicle: {summary.avg_wait_per_vehicle:.2f} seconds\n\n"
    )

def save_statistics(it: Intersection, filename: Union[str, Path],
                    timestamp: Optional[float] = None) -> Path:
    """Append one stats record to `filename`; never truncates existing records."""
    path = Path(filename)
    record = format_stats_record(it, timestamp)
    try:
        with open(path, "a") as f:
            f.write(record)
    except OSError as e:
        logger.error(f"Could not append statistics to {path}: {e}")
        raise StatisticsLogError(f"Failed to write statistics to {path}: {e}")

    logger.info(f"Statistics for '{it.name}' appended to {path}")
    return path
