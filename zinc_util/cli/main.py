"""
Main CLI entry point for zinc-util
"""

import argparse
import sys
import logging
from typing import List, Optional

from ..config import Config
from ..properties import property_from_resource, set_properties
from ..utils.logging_setup import setup_logging
from .commands import ShowCommand, DurationCommand, RelationsCommand, PropertiesCommand, WaitCommand


def create_parser() -> argparse.ArgumentParser:
   """Create argument parser for zinc-util CLI"""

   version = property_from_resource("zinc.properties", "version") or "unknown"

   parser = argparse.ArgumentParser(
      prog="zinc-util",
      description="""Support utilities for build tool wrappers

Configuration file locations (searched in order):
  ~/.zinc_util.yaml
  ~/.config/zinc_util/config.yaml
  /etc/zinc_util/config.yaml
  zinc_util.yaml (current directory)""",
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  zinc-util show build.yaml             # Print a document as a structure
  zinc-util show build.yaml --key deps  # Print one top-level entry
  zinc-util duration 30m 2h             # Convert durations to seconds
  zinc-util relations analysis.yaml     # Dump compile relations
  zinc-util -D jobs=4 properties        # Show system properties
  zinc-util wait 10s --resets 2         # Wait on a resettable alarm
  zinc-util config --create             # Create sample configuration
      """
   )

   # Global options
   parser.add_argument(
      "-c", "--config",
      help="Configuration file path",
      default=None
   )

   parser.add_argument(
      "-v", "--verbose",
      action="store_true",
      help="Enable verbose logging"
   )

   parser.add_argument(
      "-q", "--quiet",
      action="store_true",
      help="Suppress normal output"
   )

   parser.add_argument(
      "--log-file",
      help="Log file path",
      default=None
   )

   parser.add_argument(
      "--no-color",
      action="store_true",
      help="Disable colored output"
   )

   parser.add_argument(
      "--cwd",
      help="Working directory that relative paths are resolved against",
      default=None
   )

   parser.add_argument(
      "-D",
      dest="properties",
      action="append",
      default=[],
      metavar="KEY=VALUE",
      help="Set a system property (repeatable)"
   )

   parser.add_argument(
      "--version",
      action="version",
      version=f"%(prog)s {version}"
   )

   # Create subparsers
   subparsers = parser.add_subparsers(
      dest="command",
      help="Available commands"
   )

   # Show command
   show_parser = subparsers.add_parser(
      "show",
      help="Print a YAML or JSON document as an indented structure"
   )
   show_parser.add_argument(
      "file",
      help="Document to print"
   )
   show_parser.add_argument(
      "-k", "--key",
      help="Only print the entry under this top-level key"
   )

   # Duration command
   duration_parser = subparsers.add_parser(
      "duration",
      help="Convert Nh, Nm or Ns durations to seconds"
   )
   duration_parser.add_argument(
      "durations",
      nargs="+",
      help="Duration strings (e.g., 30m)"
   )

   # Relations command
   relations_parser = subparsers.add_parser(
      "relations",
      help="Dump compile analysis relations"
   )
   relations_parser.add_argument(
      "file",
      help="Analysis YAML file (relation name -> source -> targets)"
   )
   relations_parser.add_argument(
      "-o", "--output",
      help="Write the dump to this file instead of stdout"
   )

   # Properties command
   properties_parser = subparsers.add_parser(
      "properties",
      help="Show system properties"
   )
   properties_parser.add_argument(
      "--resource",
      help="Show a packaged properties resource instead (e.g., zinc.properties)"
   )

   # Wait command
   wait_parser = subparsers.add_parser(
      "wait",
      help="Wait until a resettable alarm fires"
   )
   wait_parser.add_argument(
      "duration",
      nargs="?",
      help="Alarm delay as Nh, Nm or Ns (default: timer.idle_timeout from config)"
   )
   wait_parser.add_argument(
      "--resets",
      type=int,
      default=0,
      help="Reset the alarm this many times, at half-delay intervals"
   )
   wait_parser.add_argument(
      "--message",
      default="Alarm fired",
      help="Message printed when the alarm fires"
   )

   # Config command
   config_parser = subparsers.add_parser(
      "config",
      help="Configuration management"
   )
   config_parser.add_argument(
      "--create",
      action="store_true",
      help="Create sample configuration file"
   )
   config_parser.add_argument(
      "--show",
      action="store_true",
      help="Show current configuration"
   )

   return parser


def setup_logging_from_args(args: argparse.Namespace, config: Config) -> None:
   """Setup logging based on command line arguments and configuration"""

   # Determine log level
   if args.verbose:
      level = logging.DEBUG
   elif args.quiet:
      level = logging.ERROR
   else:
      level = config.get_log_level()

   # Determine log file
   log_file = args.log_file or config.logging.log_file

   # Setup logging
   setup_logging(
      level=level,
      log_file=log_file,
      log_format=config.logging.log_format,
      date_format=config.logging.date_format,
      console_output=not args.quiet,
      use_colors=config.logging.use_colors
   )


def apply_cli_overrides(args: argparse.Namespace, config: Config) -> None:
   """Apply command-line overrides to configuration"""

   if args.no_color:
      config.logging.use_colors = False


def handle_config_command(args: argparse.Namespace, config: Config) -> int:
   """Handle configuration management commands"""

   if args.create:
      config.create_sample_config()
      print(f"Sample configuration created at {config.config_file}")
      return 0

   if args.show:
      print(f"Configuration file: {config.config_file}")
      print(f"Log level: {config.logging.level}")
      print(f"Log file: {config.logging.log_file or 'N/A'}")
      print(f"Use colors: {config.logging.use_colors}")
      print(f"Idle timeout: {config.timer.idle_timeout} ({config.timer.idle_timeout_seconds():.0f}s)")
      print(f"Time format: {config.display.time_format}")
      print(f"Table format: {config.display.table_format}")
      return 0

   print("Use --create to create sample configuration or --show to display current settings")
   return 1


def main(argv: Optional[List[str]] = None) -> int:
   """
   Main entry point for zinc-util CLI

   Args:
      argv: Command line arguments (optional, for testing)

   Returns:
      Exit code
   """

   # Parse arguments
   parser = create_parser()
   args = parser.parse_args(argv)

   # Load configuration
   try:
      config = Config(config_file=args.config)
   except Exception as e:
      print(f"Error loading configuration: {str(e)}", file=sys.stderr)
      return 1

   # Apply command-line overrides to config
   apply_cli_overrides(args, config)

   # Setup logging
   setup_logging_from_args(args, config)
   logger = logging.getLogger(__name__)

   set_properties(args.properties)

   # Handle no command
   if not args.command:
      parser.print_help()
      return 1

   # Handle config command
   if args.command == "config":
      return handle_config_command(args, config)

   commands = {
      "show": ShowCommand,
      "duration": DurationCommand,
      "relations": RelationsCommand,
      "properties": PropertiesCommand,
      "wait": WaitCommand
   }

   # Execute command
   try:
      command_class = commands.get(args.command)
      if command_class is None:
         print(f"Unknown command: {args.command}", file=sys.stderr)
         return 1

      cmd = command_class(config)
      return cmd.execute(args)

   except KeyboardInterrupt:
      print("\nInterrupted by user", file=sys.stderr)
      return 130

   except Exception as e:
      logger.error(f"Command execution failed: {str(e)}")
      print(f"Error: {str(e)}", file=sys.stderr)
      return 1


if __name__ == "__main__":
   sys.exit(main())
