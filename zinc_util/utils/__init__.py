"""
Utility functions and helpers
"""

from .logging_setup import setup_logging, create_logger
from .formatters import format_elapsed, format_timestamp, parse_duration, timing
from .paths import normalise

__all__ = [
   'setup_logging', 'create_logger', 'format_elapsed', 'format_timestamp',
   'parse_duration', 'timing', 'normalise'
]
