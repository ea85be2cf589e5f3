"""
Configuration management for zinc-util
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass

from .utils.formatters import parse_duration
from .utils.logging_setup import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT, parse_level


@dataclass
class LoggingConfig:
   """Logging configuration"""

   # Log level
   level: str = "INFO"

   # Log file path
   log_file: Optional[str] = None

   # Log format
   log_format: str = DEFAULT_LOG_FORMAT

   # Date format
   date_format: str = DEFAULT_DATE_FORMAT

   # Colored console output
   use_colors: bool = True


@dataclass
class TimerConfig:
   """Timer configuration"""

   # Idle timeout as Nh, Nm or Ns (0 disables)
   idle_timeout: str = "0"

   def idle_timeout_seconds(self) -> float:
      return parse_duration(self.idle_timeout, 0.0)


@dataclass
class DisplayConfig:
   """Display and output configuration"""

   # Time format
   time_format: str = "%d-%m %H:%M"

   # tabulate table format
   table_format: str = "simple"


class Config:
   """Main configuration manager"""

   def __init__(self, config_file: Optional[str] = None):
      """
      Initialize configuration

      Args:
         config_file: Path to configuration file
      """
      self.config_file = config_file or self._get_default_config_path()
      self.logger = logging.getLogger(__name__)

      # Initialize default configurations
      self.logging = LoggingConfig()
      self.timer = TimerConfig()
      self.display = DisplayConfig()

      # Load configuration from file
      self._load_config()

   def _get_default_config_path(self) -> str:
      """Get default configuration file path"""
      # Try these locations in order
      config_paths = [
         os.path.expanduser("~/.zinc_util.yaml"),
         os.path.expanduser("~/.config/zinc_util/config.yaml"),
         "/etc/zinc_util/config.yaml",
         "zinc_util.yaml"
      ]

      for path in config_paths:
         if os.path.exists(path):
            return path

      # Return first path as default
      return config_paths[0]

   def _load_config(self) -> None:
      """Load configuration from file"""
      if not os.path.exists(self.config_file):
         self.logger.debug(f"Configuration file not found: {self.config_file}")
         return

      try:
         with open(self.config_file, 'r') as f:
            config_data = yaml.safe_load(f)

         if not config_data:
            return

         if 'logging' in config_data:
            self._update_config_object(self.logging, config_data['logging'])

         if 'timer' in config_data:
            self._update_config_object(self.timer, config_data['timer'])

         if 'display' in config_data:
            self._update_config_object(self.display, config_data['display'])

         self.logger.info(f"Configuration loaded from {self.config_file}")

      except Exception as e:
         self.logger.error(f"Failed to load configuration: {str(e)}")

   def _update_config_object(self, config_obj: Any, config_data: Dict[str, Any]) -> None:
      """Update configuration object with data from file"""
      if not isinstance(config_data, dict):
         return
      for key, value in config_data.items():
         if hasattr(config_obj, key):
            setattr(config_obj, key, value)

   def to_dict(self) -> Dict[str, Dict[str, Any]]:
      """Current configuration as nested dictionaries"""
      return {
         'logging': self._config_to_dict(self.logging),
         'timer': self._config_to_dict(self.timer),
         'display': self._config_to_dict(self.display)
      }

   def save_config(self) -> None:
      """Save current configuration to file"""
      try:
         # Create directory if it doesn't exist
         config_dir = os.path.dirname(self.config_file)
         if config_dir:
            os.makedirs(config_dir, exist_ok=True)

         with open(self.config_file, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

         self.logger.info(f"Configuration saved to {self.config_file}")

      except Exception as e:
         self.logger.error(f"Failed to save configuration: {str(e)}")

   def _config_to_dict(self, config_obj: Any) -> Dict[str, Any]:
      """Convert configuration object to dictionary"""
      if hasattr(config_obj, '__dict__'):
         return {k: v for k, v in config_obj.__dict__.items() if not k.startswith('_')}
      return {}

   def create_sample_config(self) -> None:
      """Create a sample configuration file"""
      sample_config = {
         'logging': {
            'level': 'INFO',
            'log_file': None,
            'log_format': DEFAULT_LOG_FORMAT,
            'date_format': DEFAULT_DATE_FORMAT,
            'use_colors': True
         },
         'timer': {
            'idle_timeout': '30m'
         },
         'display': {
            'time_format': '%d-%m %H:%M',
            'table_format': 'simple'
         }
      }

      try:
         config_dir = os.path.dirname(self.config_file)
         if config_dir:
            os.makedirs(config_dir, exist_ok=True)

         with open(self.config_file, 'w') as f:
            yaml.dump(sample_config, f, default_flow_style=False, indent=2)

         self.logger.info(f"Sample configuration created at {self.config_file}")

      except Exception as e:
         self.logger.error(f"Failed to create sample configuration: {str(e)}")

   def get_log_level(self) -> int:
      """Get numeric log level"""
      return parse_level(self.logging.level)

   def __str__(self) -> str:
      return f"Config(file={self.config_file})"
