"""
Basic tests for zinc-util components
"""

import logging
import pytest
from pathlib import Path
from datetime import datetime

from zinc_util.config import Config
from zinc_util.utils.formatters import (
   counted, format_elapsed, format_timestamp, parse_duration, timing
)
from zinc_util.utils.paths import normalise, normalise_map, normalise_opt, normalise_seq


class TestFormatters:
   """Test formatting utilities"""

   def test_format_elapsed(self):
      """Test elapsed time formatting"""
      assert format_elapsed(0.042) == "0.042s"
      assert format_elapsed(5) == "5.000s"
      assert format_elapsed(65.25) == "1:05.250s"
      assert format_elapsed(600) == "10:00.000s"

   def test_format_timestamp(self):
      """Test timestamp formatting"""
      dt = datetime(2023, 10, 30, 14, 30, 0)
      assert format_timestamp(dt) == "30-10 14:30"
      assert format_timestamp(dt.timestamp()) == "30-10 14:30"
      assert format_timestamp(None) == "N/A"

   def test_timing(self):
      """Test timing string"""
      end = datetime(2023, 10, 30, 14, 30, 0).timestamp()
      assert timing(end - 1.5, now=end) == "at 30-10 14:30 [1.500s]"

   def test_parse_duration(self):
      """Test duration parsing"""
      assert parse_duration("2h", 0) == 7200
      assert parse_duration("30m", 0) == 1800
      assert parse_duration("45s", 0) == 45
      assert parse_duration("0s", 7) == 0

   def test_parse_duration_default(self):
      """Test invalid durations give the default"""
      assert parse_duration("10", 3) == 3
      assert parse_duration("1d", 3) == 3
      assert parse_duration("-5m", 3) == 3
      assert parse_duration(None, 3) == 3
      assert parse_duration("", 3) == 3

   def test_counted(self):
      """Test singular and plural counts"""
      assert counted(1, "relation", "", "s") == "1 relation"
      assert counted(3, "relation", "", "s") == "3 relations"
      assert counted(0, "class", "", "es") == "0 classes"


class TestPaths:
   """Test path normalisation"""

   def test_normalise_relative(self):
      """Test relative paths resolve against cwd"""
      assert normalise("/work", "src/A.scala") == Path("/work/src/A.scala")

   def test_normalise_absolute(self):
      """Test absolute paths are left alone"""
      assert normalise("/work", "/tmp/out") == Path("/tmp/out")

   def test_normalise_without_cwd(self):
      """Test no cwd leaves paths unchanged"""
      assert normalise(None, "src") == Path("src")
      assert normalise_seq(None, ["a", "b"]) == [Path("a"), Path("b")]

   def test_normalise_opt(self):
      """Test optional path normalisation"""
      assert normalise_opt("/work", None) is None
      assert normalise_opt("/work", "a") == Path("/work/a")

   def test_normalise_map(self):
      """Test both keys and values are normalised"""
      mapped = normalise_map("/work", {"src": "/out", "lib": "classes"})

      assert mapped == {
         Path("/work/src"): Path("/out"),
         Path("/work/lib"): Path("/work/classes"),
      }


class TestConfig:
   """Test configuration management"""

   def test_config_creation(self, tmp_path):
      """Test config defaults"""
      config = Config(config_file=str(tmp_path / "missing.yaml"))

      assert config.logging.level == "INFO"
      assert config.logging.use_colors == True
      assert config.timer.idle_timeout_seconds() == 0
      assert config.display.table_format == "simple"

   def test_config_log_level(self, tmp_path):
      """Test log level conversion"""
      config = Config(config_file=str(tmp_path / "missing.yaml"))
      config.logging.level = "DEBUG"

      assert config.get_log_level() == logging.DEBUG

   def test_config_from_file(self, tmp_path):
      """Test values are read from YAML and unknown keys ignored"""
      config_file = tmp_path / "config.yaml"
      config_file.write_text(
         "logging:\n"
         "  level: WARNING\n"
         "  bogus: 1\n"
         "timer:\n"
         "  idle_timeout: 5m\n"
      )

      config = Config(config_file=str(config_file))

      assert config.get_log_level() == logging.WARNING
      assert config.timer.idle_timeout_seconds() == 300
      assert not hasattr(config.logging, "bogus")

   def test_save_and_reload(self, tmp_path):
      """Test saved configuration round trips"""
      config_file = tmp_path / "nested" / "config.yaml"
      config = Config(config_file=str(config_file))
      config.display.table_format = "grid"
      config.save_config()

      reloaded = Config(config_file=str(config_file))
      assert reloaded.display.table_format == "grid"

   def test_sample_config(self, tmp_path):
      """Test sample configuration is loadable"""
      config_file = tmp_path / "sample.yaml"
      Config(config_file=str(config_file)).create_sample_config()

      config = Config(config_file=str(config_file))
      assert config.timer.idle_timeout == "30m"


class TestCLI:
   """Test CLI components"""

   def test_cli_import(self):
      """Test CLI module imports"""
      from zinc_util.cli.main import main
      from zinc_util.cli.commands import ShowCommand

      assert callable(main)
      assert ShowCommand is not None

   def test_cli_help(self):
      """Test CLI help output"""
      from zinc_util.cli.main import main

      with pytest.raises(SystemExit) as exc:
         main(['--help'])
      assert exc.value.code == 0


if __name__ == '__main__':
   pytest.main([__file__])
