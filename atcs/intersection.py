#!/usr/bin/env python3
"""
atcs/intersection.py

Four-lane intersection model. Each cycle gives every lane one green phase in
fixed order (lane 0..3); green length comes from atcs.optimizer.green_time.

Per simulated second of a phase:
 - the green lane discharges up to VEHICLE_PASS_PER_SEC vehicles
 - every other lane adds its current queue depth to total_wait_secs

so total_wait_secs is the sum over idle seconds of queue depth
(vehicle-seconds of delay), not a per-vehicle FIFO timer.
"""

from typing import Any, Dict, Iterable, Tuple

from config.settings import config
from utils.exceptions import SimulationError
from utils.logger import get_logger
from utils.validators import validate_intersection_name, validate_lane_counts

from .optimizer import BASE_GREEN, green_time

LANES = config.lane_count
VEHICLE_PASS_PER_SEC = config.vehicle_pass_per_sec

logger = get_logger("intersection")

class Lane:
    """Counters for one approach of the intersection."""

    __slots__ = ("vehicles", "total_wait_secs", "vehicles_served")

    def __init__(self):
        self.vehicles = 0
        self.total_wait_secs = 0
        self.vehicles_served = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "waiting": self.vehicles,
            "served": self.vehicles_served,
            "total_wait_secs": self.total_wait_secs
        }

    def __repr__(self):
        return (f"Lane(vehicles={self.vehicles}, served={self.vehicles_served}, "
                f"total_wait_secs={self.total_wait_secs})")

class Intersection:
    """A named intersection owning exactly four lanes."""

    def __init__(self, name: str):
        self.name = validate_intersection_name(name, config.max_name_length)
        self._lanes: Tuple[Lane, ...] = tuple(Lane() for _ in range(LANES))
        self.cycles = 0

    @property
    def lanes(self) -> Tuple[Lane, ...]:
        # tuple: lanes are mutable, the lane set is not
        return self._lanes

    def waiting_counts(self):
        return [lane.vehicles for lane in self._lanes]

    def snapshot(self) -> Dict[str, Any]:
        """Return a JSON-friendly view of the current state."""
        return {
            "name": self.name,
            "cycles": self.cycles,
            "lanes": [lane.to_dict() for lane in self._lanes]
        }

def create_intersection(name: str = None) -> Intersection:
    """Create an intersection with zeroed lanes."""
    it = Intersection(name if name is not None else config.intersection_name)
    logger.debug(f"Created intersection '{it.name}' with {LANES} lanes")
    return it

def seed_lanes(it: Intersection, counts: Iterable[Any]) -> None:
    """Set the initial waiting count of every lane (negative counts clamp to 0)."""
    values = validate_lane_counts(list(counts), LANES)
    for lane, v in zip(it.lanes, values):
        lane.vehicles = v
    logger.debug(f"Seeded '{it.name}' with {values}")

def run_one_cycle(it: Intersection) -> None:
    """Run one full cycle of signals; each lane gets green in ascending order."""
    lanes = it.lanes
    for lane_idx in range(LANES):
        green = max(green_time(lanes[lane_idx].vehicles), BASE_GREEN)

        for _sec in range(green):
            current = lanes[lane_idx]
            if current.vehicles > 0:
                current.vehicles = max(0, current.vehicles - VEHICLE_PASS_PER_SEC)
                current.vehicles_served += VEHICLE_PASS_PER_SEC

            for j in range(LANES):
                if j == lane_idx:
                    continue
                if lanes[j].vehicles > 0:
                    lanes[j].total_wait_secs += lanes[j].vehicles

        logger.debug(f"{it.name}: lane {lane_idx + 1} green for {green}s")

    it.cycles += 1

def run_cycles(it: Intersection, count: int) -> None:
    """Run `count` consecutive cycles without arrivals in between."""
    if count < 0:
        raise SimulationError(f"Cannot run a negative number of cycles: {count}")
    for _ in range(count):
        run_one_cycle(it)
