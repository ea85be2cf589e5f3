"""
Logging setup utility for zinc-util
"""

import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%d-%m %H:%M"

LEVELS = {
   'DEBUG': logging.DEBUG,
   'INFO': logging.INFO,
   'WARN': logging.WARNING,
   'WARNING': logging.WARNING,
   'ERROR': logging.ERROR,
   'CRITICAL': logging.CRITICAL
}


def _console_handler(use_colors: bool, date_format: str) -> logging.Handler:
   """Build a console handler, colored through rich when requested"""
   if use_colors and sys.stdout.isatty():
      return RichHandler(
         console=Console(file=sys.stdout),
         show_path=False,
         log_time_format=date_format
      )
   return logging.StreamHandler(sys.stdout)


def setup_logging(
   level: int = logging.INFO,
   log_file: Optional[str] = None,
   log_format: Optional[str] = None,
   date_format: Optional[str] = None,
   console_output: bool = True,
   use_colors: bool = False
) -> None:
   """
   Set up logging configuration for zinc-util

   Args:
      level: Logging level (default: INFO)
      log_file: Path to log file (optional)
      log_format: Custom log format (optional)
      date_format: Date format for timestamps (default: DD-MM HH:MM)
      console_output: Whether to output to console (default: True)
      use_colors: Use colored console output when attached to a terminal
   """

   if date_format is None:
      date_format = DEFAULT_DATE_FORMAT

   if log_format is None:
      log_format = DEFAULT_LOG_FORMAT

   formatter = logging.Formatter(
      fmt=log_format,
      datefmt=date_format
   )

   # Get root logger
   logger = logging.getLogger()
   logger.setLevel(level)

   # Clear existing handlers
   logger.handlers.clear()

   # Console handler
   if console_output:
      console_handler = _console_handler(use_colors, date_format)
      console_handler.setLevel(level)
      if not isinstance(console_handler, RichHandler):
         console_handler.setFormatter(formatter)
      logger.addHandler(console_handler)

   # File handler
   if log_file:
      try:
         # Create directory if it doesn't exist
         log_path = Path(log_file)
         log_path.parent.mkdir(parents=True, exist_ok=True)

         # Create rotating file handler (10MB max, 5 backups)
         file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
         )
         file_handler.setLevel(level)
         file_handler.setFormatter(formatter)
         logger.addHandler(file_handler)

      except Exception as e:
         # If file logging fails, log to console
         console_logger = logging.getLogger(__name__)
         console_logger.error(f"Failed to set up file logging: {str(e)}")


def create_logger(quiet: bool,
                  level: int = logging.INFO,
                  color: bool = False,
                  name: str = "zinc") -> logging.Logger:
   """
   Create a logger based on quiet, level and color settings

   Args:
      quiet: Return a logger that discards everything
      level: Logging level for a non-quiet logger
      color: Use colored output when stdout is a terminal
      name: Logger name

   Returns:
      Logger instance
   """
   logger = logging.getLogger(name)
   logger.handlers.clear()
   logger.propagate = False

   if quiet:
      logger.addHandler(logging.NullHandler())
      logger.setLevel(logging.CRITICAL + 1)
      return logger

   handler = _console_handler(color, DEFAULT_DATE_FORMAT)
   if not isinstance(handler, RichHandler):
      handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
   logger.addHandler(handler)
   logger.setLevel(level)
   return logger


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
   """
   Convert a level name to a logging level

   Args:
      name: Level name, case-insensitive (e.g. "debug")
      default: Level returned for unknown names

   Returns:
      Numeric logging level
   """
   if not name:
      return default
   return LEVELS.get(name.upper(), default)


def get_logger(name: str) -> logging.Logger:
   """
   Get a logger instance with the specified name

   Args:
      name: Logger name

   Returns:
      Logger instance
   """
   return logging.getLogger(name)


def set_log_level(level: int) -> None:
   """
   Set log level for all loggers

   Args:
      level: New log level
   """
   root_logger = logging.getLogger()
   root_logger.setLevel(level)

   # Update all handlers
   for handler in root_logger.handlers:
      handler.setLevel(level)
