import os
from pathlib import Path, PurePath

from unit_test_generator.config import GeneratorConfig
from unit_test_generator.types import TestFileTarget
from unit_test_generator.utils.strings import to_identifier


def relative_specifier(module_path: Path, from_directory: Path) -> str:
    """Import specifier for module_path as seen from a file in from_directory."""
    rel = os.path.relpath(module_path, from_directory)
    rel = PurePath(rel).as_posix()
    if not rel.startswith("."):
        rel = f"./{rel}"
    return rel


def get_test_file_target(
    source_path: Path, config: GeneratorConfig
) -> TestFileTarget:
    """Place the test next to its source: src/foo.ts -> src/__tests__/foo.spec.ts."""
    stem = source_path.stem
    extension = source_path.suffix
    directory = source_path.parent / config.test_directory

    return TestFileTarget(
        base_name=to_identifier(stem),
        module_specifier=relative_specifier(source_path.parent / stem, directory),
        directory=directory,
        path=directory / f"{stem}.{config.suffix}{extension}",
    )
