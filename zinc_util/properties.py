"""
System properties for zinc-util

A process-wide key/value registry with typed accessors, plus loading of
Java-style .properties files shipped as package resources.
"""

import logging
import re
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, MutableMapping, Optional, Set


logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_PACKAGE = "zinc_util.resources"

_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_HEX_DIGITS = re.compile(r'[0-9a-fA-F]{4}')


class SystemProperties(MutableMapping):
   """Thread-compatible string to string property registry"""

   def __init__(self, initial: Optional[Dict[str, str]] = None):
      self._values: Dict[str, str] = dict(initial or {})

   def __getitem__(self, key: str) -> str:
      return self._values[key]

   def __setitem__(self, key: str, value: str) -> None:
      self._values[str(key)] = str(value)

   def __delitem__(self, key: str) -> None:
      del self._values[key]

   def __iter__(self) -> Iterator[str]:
      return iter(self._values)

   def __len__(self) -> int:
      return len(self._values)

   def __repr__(self) -> str:
      return f"SystemProperties({self._values!r})"


system_properties = SystemProperties()


def _props(props: Optional[MutableMapping]) -> MutableMapping:
   return system_properties if props is None else props


def int_property(name: str, default: int, props: Optional[MutableMapping] = None) -> int:
   """Create int from system property, default when unset or invalid"""
   value = _props(props).get(name)
   if value is None:
      return default
   try:
      return int(value)
   except (ValueError, TypeError):
      logger.debug(f"Invalid integer for property {name}: {value!r}")
      return default


def string_set_property(name: str,
                        default: Set[str],
                        props: Optional[MutableMapping] = None) -> Set[str]:
   """Create set of strings, split by comma, from system property"""
   value = _props(props).get(name)
   if value is None:
      return default

   # Trailing empty items are dropped, as Java's String.split does
   items = value.split(",")
   while len(items) > 1 and items[-1] == "":
      items.pop()
   if items == [""] and value:
      items = []
   return set(items)


def file_property(name: str, props: Optional[MutableMapping] = None) -> Path:
   """Create a path, default empty, from system property"""
   return Path(_props(props).get(name, ""))


def opt_file_property(name: str, props: Optional[MutableMapping] = None) -> Optional[Path]:
   """Create an optional path from system property"""
   value = _props(props).get(name)
   return Path(value) if value is not None else None


def set_properties(entries: Iterable[str], props: Optional[MutableMapping] = None) -> None:
   """
   Set system properties from key=value strings

   Args:
      entries: Strings of the form key=value, others are ignored
      props: Property registry (default: process-wide registry)
   """
   target = _props(props)
   for entry in entries:
      kv = entry.split("=")
      if len(kv) == 2:
         target[kv[0]] = kv[1]
      else:
         logger.debug(f"Ignoring malformed property: {entry!r}")


def _unescape(text: str) -> str:
   result = []
   i = 0
   while i < len(text):
      char = text[i]
      if char != '\\':
         result.append(char)
         i += 1
         continue

      nxt = text[i + 1:i + 2]
      code = text[i + 2:i + 6]
      if nxt == 'u' and _HEX_DIGITS.fullmatch(code):
         result.append(chr(int(code, 16)))
         i += 6
      else:
         result.append(_ESCAPES.get(nxt, nxt))
         i += 2
   return "".join(result)


def _logical_lines(text: str) -> List[str]:
   """Join continuation lines and drop blanks and comments"""
   lines = []
   pending = ""
   for raw in text.splitlines():
      line = raw.lstrip()
      if not pending and (not line or line[0] in "#!"):
         continue

      trailing = len(line) - len(line.rstrip('\\'))
      if trailing % 2 == 1:
         pending += line[:-1]
         continue

      lines.append(pending + line)
      pending = ""

   if pending:
      lines.append(pending)
   return lines


def load_properties(text: str) -> Dict[str, str]:
   """
   Parse Java .properties content

   Args:
      text: File content

   Returns:
      Mapping of property names to values
   """
   result: Dict[str, str] = {}

   for line in _logical_lines(text):
      key_end = len(line)
      i = 0
      while i < len(line):
         char = line[i]
         if char == '\\':
            i += 2
            continue
         if char in "=: \t\f":
            key_end = i
            break
         i += 1

      key = line[:key_end]
      rest = line[key_end:].lstrip(" \t\f")
      if rest[:1] in ("=", ":"):
         rest = rest[1:].lstrip(" \t\f")

      result[_unescape(key)] = _unescape(rest)

   return result


def properties_from_resource(resource: str,
                             package: str = DEFAULT_RESOURCE_PACKAGE) -> Dict[str, str]:
   """
   Get all properties from a properties file resource

   Args:
      resource: Resource file name
      package: Package containing the resource

   Returns:
      Property mapping, empty if the resource cannot be read
   """
   try:
      text = resources.files(package).joinpath(resource).read_text(encoding="latin-1")
   except (FileNotFoundError, ModuleNotFoundError) as e:
      logger.warning(f"Failed to load properties resource {resource}: {str(e)}")
      return {}

   return load_properties(text)


def property_from_resource(resource: str,
                           prop: str,
                           package: str = DEFAULT_RESOURCE_PACKAGE) -> Optional[str]:
   """Get a property from a properties file resource"""
   return properties_from_resource(resource, package).get(prop)
