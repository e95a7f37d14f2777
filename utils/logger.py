# utils/logger.py
"""
Signal Simulator Logging System
Centralized logging configuration for the entire project.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

class SimulatorLogger:
    """Centralized logger for the signal simulator."""

    def __init__(self, log_dir: Optional[Path] = None, level: Optional[str] = None):
        # config imports utils.exceptions, so it is resolved here rather than at module load
        from config.settings import config

        self.log_dir = log_dir or config.logs_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = level or config.log_level
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging configuration."""
        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Setup file handler for all logs
        log_file = self.log_dir / f"signal_sim_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        # Setup console handler; stderr keeps the state report on stdout clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, self.level, logging.INFO))
        console_handler.setFormatter(formatter)

        # Configure package logger
        root_logger = logging.getLogger("signal_sim")
        root_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        # Prevent duplicate logs
        root_logger.propagate = False

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger for a specific module."""
        return logging.getLogger(f"signal_sim.{name}")

# Global logger instance, created on first use
logger_instance: Optional[SimulatorLogger] = None

def get_logger_instance() -> SimulatorLogger:
    """Return the process-wide logger, configuring it on first call."""
    global logger_instance
    if logger_instance is None:
        logger_instance = SimulatorLogger()
    return logger_instance

def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return get_logger_instance().get_logger(name)
