#!/usr/bin/env python3
"""
Random vehicle arrivals injected between cycles.

The generator is seeded exactly once, when the injector is built. Without an
explicit seed the wall clock is used, so runs are not reproducible unless a
seed is passed (CLI --seed, TRAFFIC_SEED, or tests).
"""

import time
from typing import List, Optional

import numpy as np

from config.settings import config
from utils.logger import get_logger
from utils.validators import validate_seed

from .intersection import Intersection

MAX_ARRIVALS = config.max_arrivals_per_lane

logger = get_logger("arrivals")

class ArrivalInjector:
    """Draws 0..MAX_ARRIVALS new vehicles per lane from a private numpy Generator."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        if rng is not None:
            self._seed = None
            self._rng = rng
        else:
            seed = validate_seed(seed)
            if seed is None:
                seed = int(time.time())
            self._seed = seed
            self._rng = np.random.default_rng(seed)
        logger.debug(f"Arrival injector ready (seed={self._seed})")

    @property
    def seed(self) -> Optional[int]:
        """Seed used for the generator; None when an external generator was supplied."""
        return self._seed

    def draw(self, lanes: int) -> List[int]:
        return [int(v) for v in self._rng.integers(0, MAX_ARRIVALS + 1, size=lanes)]

    def inject(self, it: Intersection) -> List[int]:
        """Add a random arrival count to every lane; returns what was added."""
        arrivals = self.draw(len(it.lanes))
        for lane, n in zip(it.lanes, arrivals):
            lane.vehicles += n
        logger.debug(f"{it.name}: arrivals {arrivals}")
        return arrivals

def inject_arrivals(it: Intersection, injector: ArrivalInjector) -> List[int]:
    return injector.inject(it)
