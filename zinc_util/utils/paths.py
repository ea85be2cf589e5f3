"""
Path normalisation relative to a working directory

Each helper takes an optional working directory. When it is None the
paths are returned unchanged, otherwise relative paths are resolved
against it.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

PathLike = Union[str, Path]


def normalise(cwd: Optional[PathLike], path: PathLike) -> Path:
   """Normalise a path in relation to the working directory"""
   path = Path(path)
   if cwd is not None and not path.is_absolute():
      return Path(cwd) / path
   return path


def normalise_opt(cwd: Optional[PathLike], path: Optional[PathLike]) -> Optional[Path]:
   """Normalise an optional path"""
   if path is None:
      return None
   return normalise(cwd, path)


def normalise_seq(cwd: Optional[PathLike], paths: Iterable[PathLike]) -> List[Path]:
   """Normalise a sequence of paths"""
   return [normalise(cwd, p) for p in paths]


def normalise_map(cwd: Optional[PathLike],
                  mapped: Mapping[PathLike, PathLike]) -> Dict[Path, Path]:
   """Normalise both sides of a path mapping"""
   return {normalise(cwd, k): normalise(cwd, v) for k, v in mapped.items()}
