"""Dataclasses describing a module's export surface and its generated test."""

import dataclasses
import enum
import json
from pathlib import Path
from typing import List


class SourceLanguage(enum.Enum):
  """Languages a unit test can be generated for."""

  JAVASCRIPT = "javascript"
  TYPESCRIPT = "typescript"


class ExportNodeKind(enum.Enum):
  """The syntax node kinds the export classifier distinguishes.

  OTHER is the catch-all: any node not in the allow-list is traversed
  generically.
  """

  DECLARATION = 0
  VARIABLE_STATEMENT = 1
  EXPORT_ASSIGNMENT = 2
  EXPORT_SPECIFIER = 3
  OTHER = 4


@dataclasses.dataclass
class ExportSurface:
  """What a module exposes to an importer."""

  named_exports: List[str] = dataclasses.field(default_factory=list)
  has_default_export: bool = False

  @property
  def is_empty(self) -> bool:
    return not self.named_exports and not self.has_default_export


@dataclasses.dataclass(frozen=True)
class TestFileTarget:
  """Where a generated test goes and how it refers to the module under test."""

  __test__ = False

  base_name: str
  module_specifier: str
  directory: Path
  path: Path


class DataclassJSONEncoder(json.JSONEncoder):
  """JSON encoder for dataclasses, enums and paths."""

  def default(self, o):
    if dataclasses.is_dataclass(o):
      return dataclasses.asdict(o)
    if isinstance(o, enum.Enum):
      return o.name
    if isinstance(o, Path):
      return str(o)
    return super().default(o)


def to_json(data, indent=None) -> str:
  """Converts a dataclass instance to a JSON string."""
  return json.dumps(data, cls=DataclassJSONEncoder, indent=indent)
