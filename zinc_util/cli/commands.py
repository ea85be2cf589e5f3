"""
Command implementations for zinc-util CLI
"""

import argparse
import logging
import threading
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

import yaml
from tabulate import tabulate
from rich.console import Console

from ..alarm import timer
from ..config import Config
from ..printer import show
from ..properties import properties_from_resource, system_properties
from ..relations import Analysis, format_relations, print_relations
from ..utils.formatters import counted, format_elapsed, parse_duration, timing
from ..utils.paths import normalise


class BaseCommand(ABC):
   """Base class for CLI commands"""

   def __init__(self, config: Config):
      self.config = config
      self.logger = logging.getLogger(__name__)
      self.console = Console(
         highlight=False,
         no_color=not config.logging.use_colors
      )

   @abstractmethod
   def execute(self, args: argparse.Namespace) -> int:
      """Execute the command"""
      pass

   def _print_table(self, headers: List[str], rows: List[List[Any]]) -> None:
      """Print a table using the configured tabulate format"""
      print(tabulate(rows, headers=headers, tablefmt=self.config.display.table_format))

   def _load_yaml(self, path: Path) -> Any:
      """Load a YAML (or JSON) document"""
      with open(path, 'r') as f:
         return yaml.safe_load(f)


class ShowCommand(BaseCommand):
   """Print a YAML or JSON document as an indented structure"""

   def execute(self, args: argparse.Namespace) -> int:
      path = normalise(args.cwd, args.file)
      try:
         data = self._load_yaml(path)
      except (OSError, yaml.YAMLError) as e:
         self.logger.error(f"Failed to read {path}: {str(e)}")
         return 1

      if args.key is not None:
         if not isinstance(data, dict) or args.key not in data:
            self.logger.error(f"Key not found in {path}: {args.key}")
            return 1
         data = (args.key, data[args.key])

      show(data, print)
      return 0


class DurationCommand(BaseCommand):
   """Parse duration strings and show them in seconds"""

   def execute(self, args: argparse.Namespace) -> int:
      rows = []
      invalid = 0
      for arg in args.durations:
         seconds = parse_duration(arg, -1.0)
         if seconds < 0:
            invalid += 1
            rows.append([arg, "N/A", "N/A"])
         else:
            rows.append([arg, int(seconds), format_elapsed(seconds)])

      self._print_table(["Duration", "Seconds", "Elapsed"], rows)

      if invalid:
         self.logger.warning(f"{counted(invalid, 'invalid duration', '', 's')} "
                             "(expected Nh, Nm or Ns)")
         return 1
      return 0


class RelationsCommand(BaseCommand):
   """Dump analysis relations"""

   def execute(self, args: argparse.Namespace) -> int:
      start = time.time()
      path = normalise(args.cwd, args.file)
      try:
         analysis = Analysis.from_dict(self._load_yaml(path))
      except (OSError, yaml.YAMLError, AttributeError) as e:
         self.logger.error(f"Failed to read analysis {path}: {str(e)}")
         return 1

      if args.output is None:
         print(format_relations(analysis, args.cwd))
         return 0

      output = normalise(args.cwd, args.output)
      print_relations(analysis, output, args.cwd)
      self.logger.info(f"Wrote {counted(analysis.size(), 'relation', '', 's')} "
                       f"to {output} {timing(start, format_str=self.config.display.time_format)}")
      return 0


class PropertiesCommand(BaseCommand):
   """List system properties or a packaged properties resource"""

   def execute(self, args: argparse.Namespace) -> int:
      if args.resource:
         props = properties_from_resource(args.resource)
         if not props:
            self.logger.error(f"No properties found in resource {args.resource}")
            return 1
      else:
         props = dict(system_properties)

      if not props:
         print("No properties set")
         return 0

      rows = [[key, props[key]] for key in sorted(props)]
      self._print_table(["Property", "Value"], rows)
      return 0


class WaitCommand(BaseCommand):
   """Block until a resettable alarm fires"""

   def execute(self, args: argparse.Namespace) -> int:
      if args.duration:
         delay = parse_duration(args.duration, -1.0)
         if delay <= 0:
            self.logger.error(f"Invalid duration: {args.duration} (expected Nh, Nm or Ns)")
            return 1
      else:
         delay = self.config.timer.idle_timeout_seconds()
         if delay <= 0:
            self.logger.error(f"Idle timeout disabled or invalid: {self.config.timer.idle_timeout}")
            return 1

      fired = threading.Event()
      start = time.time()
      alarm = timer(delay, fired.set)

      try:
         for i in range(args.resets):
            if fired.wait(delay / 2):
               break
            alarm.reset()
            self.logger.info(f"Alarm reset ({i + 1}/{args.resets})")

         fired.wait()
      finally:
         alarm.cancel()

      self.console.print(
         f"{args.message} {timing(start, format_str=self.config.display.time_format)}",
         style="bold green",
         markup=False
      )
      return 0
