"""
Command line interface for zinc-util
"""

from .main import main
from .commands import ShowCommand, DurationCommand, RelationsCommand, PropertiesCommand, WaitCommand

__all__ = ['main', 'ShowCommand', 'DurationCommand', 'RelationsCommand', 'PropertiesCommand', 'WaitCommand']
