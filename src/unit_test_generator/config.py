import dataclasses
import logging
from pathlib import Path
from typing import Optional

import yaml

from unit_test_generator.errors import ErrorCode, GeneratorError
from unit_test_generator.types import SourceLanguage

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.yaml"

REPO_ROOT_MARKERS = ["package.json", "tsconfig.json"]


@dataclasses.dataclass
class GeneratorConfig:
    test_directory: str = "__tests__"
    suffix: str = "spec"
    open_in_editor: bool = False
    editor: Optional[str] = None


_FIELDS = {f.name for f in dataclasses.fields(GeneratorConfig)}


def get_repo_root(input_path: Path) -> Path | None:
    for parent in input_path.parents:
        if any((parent / marker).exists() for marker in REPO_ROOT_MARKERS):
            return parent
    return None


def read_config_file(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GeneratorError(
            ErrorCode.UNKNOWN, f"Failed to read configuration {config_path}: {e}"
        ) from e


def find_config(source_path: Path) -> dict:
    # Priority: Config in CWD > Config in the source's project root
    config = read_config_file(Path(".") / CONFIG_FILE_NAME)
    if not config:
        repo_root = get_repo_root(source_path.resolve())
        if repo_root:
            config = read_config_file(repo_root / CONFIG_FILE_NAME)
    return config


def load_config(
    source_path: Path,
    language: SourceLanguage,
    config_path: Optional[Path] = None,
) -> GeneratorConfig:
    """Build the configuration for one source file.

    Top-level keys apply to every language; a section named after the
    language (e.g. ``typescript:``) overrides them.
    """
    raw = read_config_file(config_path) if config_path else find_config(
        source_path
    )
    if not isinstance(raw, dict):
        logger.warning("Ignoring malformed configuration: %r", raw)
        raw = {}

    values = {k: v for k, v in raw.items() if k in _FIELDS}
    section = raw.get(language.value) or {}
    if not isinstance(section, dict):
        logger.warning("Ignoring malformed %s section", language.value)
        section = {}
    values.update({k: v for k, v in section.items() if k in _FIELDS})

    ignored = set(raw) - _FIELDS - {lang.value for lang in SourceLanguage}
    if ignored:
        logger.debug("Ignoring unknown configuration keys: %s", sorted(ignored))

    return GeneratorConfig(**values)
