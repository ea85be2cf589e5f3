"""
zinc-util - Support utilities for build tool wrappers
"""

__version__ = "0.1.0"
__author__ = "zinc-util Team"
__description__ = "Logging, timing, properties and debug output helpers for build tool wrappers"

from .alarm import Alarm, timer
from .printer import render, show
from .config import Config

__all__ = ['Alarm', 'timer', 'render', 'show', 'Config']
