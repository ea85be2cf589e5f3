"""
Compile analysis relations and their text dump
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Set, Tuple, Union


Relation = Set[Tuple[str, str]]

SECTIONS = [
   ("products", "products"),
   ("binary_dependencies", "binary dependencies"),
   ("source_dependencies", "source dependencies"),
   ("external_dependencies", "external dependencies"),
   ("class_names", "class names"),
]


def relation_from_mapping(mapping: Optional[Mapping[str, Any]]) -> Relation:
   """
   Build a relation from a source -> targets mapping

   Args:
      mapping: Source mapped to a target or a list of targets

   Returns:
      Set of (source, target) pairs
   """
   relation: Relation = set()
   for source, targets in (mapping or {}).items():
      if targets is None:
         continue
      if isinstance(targets, (str, Path)):
         targets = [targets]
      for target in targets:
         relation.add((str(source), str(target)))
   return relation


@dataclass
class Analysis:
   """Relations recorded by an incremental compile"""

   products: Relation = field(default_factory=set)
   binary_dependencies: Relation = field(default_factory=set)
   source_dependencies: Relation = field(default_factory=set)
   external_dependencies: Relation = field(default_factory=set)
   class_names: Relation = field(default_factory=set)

   @classmethod
   def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Analysis':
      """
      Create analysis from a mapping of relation name to source/targets

      Both attribute names ("binary_dependencies") and section titles
      ("binary dependencies") are accepted as relation names.
      """
      data = data or {}
      kwargs = {}
      for attr, title in SECTIONS:
         value = data.get(attr, data.get(title))
         kwargs[attr] = relation_from_mapping(value)
      return cls(**kwargs)

   def relations(self) -> List[Tuple[str, Relation]]:
      """Section titles paired with their relations, in dump order"""
      return [(title, getattr(self, attr)) for attr, title in SECTIONS]

   def size(self) -> int:
      return sum(len(relation) for _, relation in self.relations())


def format_relations(analysis: Analysis, cwd: Optional[Union[str, Path]] = None) -> str:
   """
   Format analysis relations as text

   Args:
      analysis: Analysis to format
      cwd: Directory prefix stripped from paths (default: current directory)

   Returns:
      Text with one section per relation
   """
   user_dir = str(cwd if cwd is not None else os.getcwd()) + "/"

   def no_cwd(path: str) -> str:
      return path[len(user_dir):] if path.startswith(user_dir) else path

   sections = []
   for title, relation in analysis.relations():
      lines = sorted(f"   {no_cwd(src)} -> {no_cwd(dst)}" for src, dst in relation)
      sections.append(f"{title}:\n" + "\n".join(lines))

   return "\n".join(sections)


def print_relations(analysis: Analysis,
                    output: Optional[Union[str, Path]],
                    cwd: Optional[Union[str, Path]] = None) -> None:
   """
   Print analysis relations to file

   Args:
      analysis: Analysis to dump
      output: Output file, nothing is written when None
      cwd: Directory prefix stripped from paths
   """
   if output is None:
      return

   path = Path(output)
   path.parent.mkdir(parents=True, exist_ok=True)
   path.write_text(format_relations(analysis, cwd))
   logging.getLogger(__name__).debug(f"Relations written to {path}")
