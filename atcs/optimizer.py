#!/usr/bin/env python3
"""
ATCS optimizer: compute the green time each lane receives from its queue depth.
"""

from typing import Dict, Sequence

from config.settings import config

BASE_GREEN = config.base_green
MAX_GREEN = config.max_green
SECONDS_PER_VEHICLE = config.seconds_per_vehicle

def green_time(waiting: int) -> int:
    """
    Linear green allocation: base + 2 sec per waiting vehicle,
    clamped to [BASE_GREEN, MAX_GREEN].
    """
    t = BASE_GREEN + SECONDS_PER_VEHICLE * waiting
    return max(BASE_GREEN, min(t, MAX_GREEN))

def plan_greens(counts: Sequence[int]) -> Dict[int, int]:
    """
    counts: queue depth per lane, in lane order
    returns: dict {lane_index: green_time}
    """
    return {i: green_time(max(0, c)) for i, c in enumerate(counts)}

if __name__ == "__main__":
    demo = [2, 0, 5, 1]
    print("Queue depths:", demo)
    print("Green times (sec):", plan_greens(demo))
