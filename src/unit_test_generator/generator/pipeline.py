"""
Generate a unit test file for a JavaScript or TypeScript module.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from unit_test_generator.config import GeneratorConfig
from unit_test_generator.extractors.extractor_ts import detect_language
from unit_test_generator.generator import file_utils
from unit_test_generator.generator.engines import get_engine
from unit_test_generator.generator.targets import get_test_file_target
from unit_test_generator.types import TestFileTarget

logger = logging.getLogger(__name__)


def create_file_contents(
    source_path: Path, target: TestFileTarget
) -> str:
    """Render the test file for source_path without touching the disk."""
    language = detect_language(source_path)
    return get_engine(language).create_file_contents(source_path, target)


def generate_unit_test(
    source_path: Path,
    config: GeneratorConfig,
    force: bool = False,
    confirm: Callable[[Path], bool] = file_utils.confirm_overwrite,
    open_in_editor: Optional[bool] = None,
) -> TestFileTarget:
    """Create (or overwrite) the test file for source_path.

    Steps run in order and the first failure stops the rest.

    Raises:
        UnsupportedLanguageError: source_path is not JavaScript/TypeScript.
        GeneratorError: an I/O step failed, or the user declined to
            overwrite an existing test (UNIT_TEST_FILE_EXISTS).
    """
    detect_language(source_path)
    target = get_test_file_target(source_path, config)
    logger.debug("Test file target: %s", target.path)

    file_utils.ensure_directory_exists(target.directory)
    if not force:
        file_utils.warn_if_file_exists(target.path, confirm)

    content = create_file_contents(source_path, target)
    file_utils.write_content_to_file(content, target.path)

    if open_in_editor is None:
        open_in_editor = config.open_in_editor
    if open_in_editor:
        file_utils.open_file_in_editor(target.path, config.editor)

    return target
