"""
Formatting utilities for zinc-util
"""

import re
import time
from datetime import datetime
from typing import Optional, Union


DURATION_PATTERN = re.compile(r'^(\d+)([hms])$')

DURATION_UNITS = {
   'h': 60 * 60,
   'm': 60,
   's': 1
}


def format_elapsed(seconds: Union[int, float]) -> str:
   """
   Format elapsed time as minutes:seconds.millis

   Args:
      seconds: Elapsed time in seconds

   Returns:
      Formatted string (e.g., "1:05.250s", "0.042s")
   """
   millis = int(round(seconds * 1000))
   secs = millis // 1000
   m, s, ms = secs // 60, secs % 60, millis % 1000

   if m > 0:
      return f"{m}:{s:02d}.{ms:03d}s"
   return f"{s}.{ms:03d}s"


def format_timestamp(
   timestamp: Union[datetime, float, int, None],
   format_str: str = "%d-%m %H:%M"
) -> str:
   """
   Format timestamp to string

   Args:
      timestamp: Datetime object or epoch seconds to format
      format_str: Format string (default: DD-MM HH:MM)

   Returns:
      Formatted timestamp string
   """
   if timestamp is None:
      return "N/A"

   try:
      if not isinstance(timestamp, datetime):
         timestamp = datetime.fromtimestamp(timestamp)
      return timestamp.strftime(format_str)
   except (ValueError, TypeError, OverflowError, OSError):
      return "N/A"


def timing(start: float,
           now: Optional[float] = None,
           format_str: str = "%d-%m %H:%M") -> str:
   """
   Current timestamp and time passed since start

   Args:
      start: Start time in epoch seconds
      now: End time in epoch seconds (default: current time)
      format_str: Timestamp format

   Returns:
      String like "at 19-10 14:30 [1.250s]"
   """
   end = time.time() if now is None else now
   return f"at {format_timestamp(end, format_str)} [{format_elapsed(end - start)}]"


def parse_duration(arg: Optional[str], default: float) -> float:
   """
   Seconds from a duration string of the form Nh, Nm or Ns

   Args:
      arg: Duration string (e.g., "30m")
      default: Value returned when arg is not a duration

   Returns:
      Duration in seconds
   """
   if not arg:
      return default

   match = DURATION_PATTERN.match(arg.strip())
   if not match:
      return default

   length, unit = match.groups()
   return float(int(length) * DURATION_UNITS[unit])


def counted(count: int, prefix: str, single: str, plural: str) -> str:
   """
   Format a count with a singular or plural noun

   Args:
      count: Number of things
      prefix: Noun stem
      single: Suffix used when count is one
      plural: Suffix used otherwise

   Returns:
      String like "3 relations"
   """
   return f"{count} {prefix}{single if count == 1 else plural}"
