# utils/exceptions.py
"""
Signal Simulator Custom Exceptions
Centralized exception handling for the intersection simulator.
"""

class SignalSimException(Exception):
    """Base exception for the signal simulator."""
    pass

class ValidationError(SignalSimException):
    """Exception raised for invalid initial conditions or request data."""
    pass

class ConfigurationError(SignalSimException):
    """Exception raised for configuration issues."""
    pass

class SimulationError(SignalSimException):
    """Exception raised when the intersection model is used incorrectly."""
    pass

class StatisticsLogError(SignalSimException):
    """Exception raised when the statistics log cannot be appended."""
    pass
