# utils/__init__.py
"""
Signal Simulator Utilities Package
Common utilities for logging, validation, and error handling.
"""

from .logger import get_logger, get_logger_instance, SimulatorLogger
from .exceptions import (
    SignalSimException,
    ValidationError,
    ConfigurationError,
    SimulationError,
    StatisticsLogError
)
from .validators import (
    validate_lane_count,
    validate_lane_counts,
    validate_cycle_count,
    validate_intersection_name,
    validate_seed
)

__all__ = [
    'get_logger',
    'get_logger_instance',
    'SimulatorLogger',
    'SignalSimException',
    'ValidationError',
    'ConfigurationError',
    'SimulationError',
    'StatisticsLogError',
    'validate_lane_count',
    'validate_lane_counts',
    'validate_cycle_count',
    'validate_intersection_name',
    'validate_seed'
]
