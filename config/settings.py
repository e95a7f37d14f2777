# config/settings.py
"""
Signal Simulator Configuration Settings
Centralized configuration for the four-lane intersection simulator.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional

from utils.exceptions import ConfigurationError

class SimulatorConfig:
    """Centralized configuration management for the simulator."""

    def __init__(self):
        self.root_dir = Path(__file__).parent.parent
        self._load_config()

    def _load_config(self):
        """Load configuration from environment."""
        # Directory paths
        self.logs_dir = Path(os.getenv("TRAFFIC_LOG_DIR", str(self.root_dir / "logs")))
        self.logs_dir.mkdir(parents=True, exist_ok=True)

        # Statistics log (append-only)
        self.stats_file = Path(os.getenv("TRAFFIC_STATS_FILE", "traffic_stats.txt"))

        # Intersection settings
        self.intersection_name = os.getenv("TRAFFIC_INTERSECTION_NAME", "Main_1")
        self.lane_count = 4
        self.max_name_length = 63

        # Green-time policy
        self.base_green = 5
        self.max_green = 40
        self.seconds_per_vehicle = 2
        self.vehicle_pass_per_sec = 1

        # Arrivals between cycles
        self.max_arrivals_per_lane = 3
        self.seed = self._optional_int_env("TRAFFIC_SEED")

        # Server settings
        self.server_host = os.getenv("TRAFFIC_HOST", "0.0.0.0")
        self.server_port = self._int_env("TRAFFIC_PORT", 8000)
        self.max_cycles_per_request = self._int_env("TRAFFIC_MAX_API_CYCLES", 1000)

        # Logging settings
        self.log_level = os.getenv("TRAFFIC_LOG_LEVEL", "INFO").upper()

        self._check_consistency()

    def _int_env(self, name: str, default: int) -> int:
        """Read an integer environment variable."""
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")

    def _optional_int_env(self, name: str) -> Optional[int]:
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            return None
        value = self._int_env(name, 0)
        if value < 0:
            raise ConfigurationError(f"{name} must be non-negative, got {value}")
        return value

    def _check_consistency(self):
        if self.max_cycles_per_request <= 0:
            raise ConfigurationError("TRAFFIC_MAX_API_CYCLES must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for API responses."""
        return {
            "intersection_name": self.intersection_name,
            "lane_count": self.lane_count,
            "base_green": self.base_green,
            "max_green": self.max_green,
            "seconds_per_vehicle": self.seconds_per_vehicle,
            "vehicle_pass_per_sec": self.vehicle_pass_per_sec,
            "max_arrivals_per_lane": self.max_arrivals_per_lane,
            "max_cycles_per_request": self.max_cycles_per_request,
            "stats_file": str(self.stats_file)
        }

# Global configuration instance
config = SimulatorConfig()
