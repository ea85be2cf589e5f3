"""
Structure printer for debug output

Renders nested values (labeled pairs, optionals, collections and scalars)
as indented text, one line at a time, through a caller-supplied sink.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple, Union

INDENT = "   "


@dataclass(frozen=True)
class Labeled:
   """A label decorating a value, rendered as 'label = value'"""
   label: Any
   value: "Value"


@dataclass(frozen=True)
class Present:
   """An optional value that is present"""
   value: "Value"


@dataclass(frozen=True)
class Absent:
   """An optional value that is absent"""
   pass


@dataclass(frozen=True)
class Collection:
   """An ordered, finite sequence of values"""
   items: Tuple["Value", ...] = ()

   def __post_init__(self):
      object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Scalar:
   """An opaque value rendered with str()"""
   value: Any


Value = Union[Labeled, Present, Absent, Collection, Scalar]

ABSENT = Absent()


def render(value: Value,
           sink: Callable[[str], None],
           prefix: str = "",
           depth: int = 0) -> None:
   """
   Render a value as indented lines

   Args:
      value: Value to render
      sink: Called once per emitted line
      prefix: Text placed before the value on its first line
      depth: Nesting level, each level indents by three spaces

   Raises:
      TypeError: If value is not one of the Value variants
   """
   indent = INDENT * depth

   if isinstance(value, Labeled):
      render(value.value, sink, f"{value.label} = ", depth)
   elif isinstance(value, Present):
      render(value.value, sink, prefix, depth)
   elif isinstance(value, Absent):
      sink(indent + prefix)
   elif isinstance(value, Collection):
      if not value.items:
         sink(indent + prefix + "{}")
      else:
         sink(indent + prefix + "{")
         for item in value.items:
            render(item, sink, "", depth + 1)
         sink(indent + "}")
   elif isinstance(value, Scalar):
      sink(indent + prefix + str(value.value))
   else:
      raise TypeError(f"Cannot render {type(value).__name__}, expected a printer Value")


def render_lines(value: Value, prefix: str = "", depth: int = 0) -> List[str]:
   """Render a value and return the emitted lines"""
   lines: List[str] = []
   render(value, lines.append, prefix, depth)
   return lines


def as_value(obj: Any) -> Value:
   """
   Convert plain Python data into a printer Value

   None becomes absent, 2-tuples become labeled pairs, dicts become
   collections of labeled pairs, lists/tuples/sets become collections and
   everything else is a scalar. Input must be acyclic.

   Args:
      obj: Object to convert

   Returns:
      Equivalent Value
   """
   if isinstance(obj, (Labeled, Present, Absent, Collection, Scalar)):
      return obj
   if obj is None:
      return ABSENT
   if isinstance(obj, tuple) and len(obj) == 2:
      return Labeled(obj[0], as_value(obj[1]))
   if isinstance(obj, dict):
      return Collection(tuple(Labeled(k, as_value(v)) for k, v in obj.items()))
   if isinstance(obj, (list, tuple, set, frozenset)):
      return Collection(tuple(as_value(item) for item in obj))
   return Scalar(obj)


def show(obj: Any,
         sink: Callable[[str], None],
         prefix: str = "",
         depth: int = 0) -> None:
   """Render plain Python data for debug output"""
   render(as_value(obj), sink, prefix, depth)
