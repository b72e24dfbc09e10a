"""
Logging System for the Expression Engine

Centralized logger with verbosity levels. The engine runs inside tight
fitting loops, so the default level keeps everything below warnings silent
and debug traces are formatted lazily.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression engine"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and important information only
    MODERATE = 2    # Candidate generation summaries
    DETAILED = 3    # Per-candidate information
    VERBOSE = 4     # Parser, simplifier and generator traces


class EngineLogger:
    """
    Centralized logger for the expression engine
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        self.logger = logging.getLogger('fit_data')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"fit_data_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
                self.log_file_path = log_file_path
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def is_verbose(self) -> bool:
        return self._should_log(LogLevel.VERBOSE)

    def critical(self, message: str, *args):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error("CRITICAL: " + message, *args)

    def info(self, message: str, *args, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message, *args)

    def warning(self, message: str, *args):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message, *args)

    def debug(self, message: str, *args):
        """Debug traces - only in verbose mode, arguments formatted lazily"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug("DEBUG: " + message, *args)


# Global logger instance
_global_logger: Optional[EngineLogger] = None


def get_logger() -> EngineLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EngineLogger(log_level=level)
    elif _global_logger.log_level == LogLevel.SILENT and level != LogLevel.SILENT:
        # A silent logger was built without a console handler
        configure_logging(level, _global_logger.log_to_file, _global_logger.log_file_path)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> EngineLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = EngineLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, *args, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, *args, required_level=level)


def log_warning(message: str, *args):
    """Log warning message"""
    get_logger().warning(message, *args)


def log_debug(message: str, *args):
    """Log debug message"""
    get_logger().debug(message, *args)
