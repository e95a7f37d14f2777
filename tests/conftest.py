# tests/conftest.py
import os
import tempfile

# keep test logs out of the repo; must run before config is imported
os.environ.setdefault("TRAFFIC_LOG_DIR", tempfile.mkdtemp(prefix="signal_sim_logs_"))

import pytest

from atcs.arrivals import ArrivalInjector
from atcs.intersection import create_intersection, seed_lanes


@pytest.fixture
def intersection():
    return create_intersection("Main_1")


@pytest.fixture
def busy_intersection():
    it = create_intersection("Main_1")
    seed_lanes(it, [2, 0, 5, 1])
    return it


@pytest.fixture
def injector():
    return ArrivalInjector(seed=1234)
