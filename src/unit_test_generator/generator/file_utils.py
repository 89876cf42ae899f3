import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Callable, Optional

from unit_test_generator.errors import ErrorCode, GeneratorError

logger = logging.getLogger(__name__)


def ensure_directory_exists(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GeneratorError(
            ErrorCode.UNABLE_TO_CREATE_TEST_DIRECTORY,
            f"Unable to create test directory {path}: {e}",
        ) from e


def confirm_overwrite(path: Path) -> bool:
    try:
        answer = input(f"{path} already exists. Overwrite? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def warn_if_file_exists(
    path: Path, confirm: Callable[[Path], bool] = confirm_overwrite
) -> None:
    """Ask before clobbering an existing test file.

    Raises:
        GeneratorError: with UNIT_TEST_FILE_EXISTS when the user declines.
    """
    if not path.exists():
        return
    if confirm(path):
        logger.info("Overwriting %s", path)
        return
    raise GeneratorError(
        ErrorCode.UNIT_TEST_FILE_EXISTS, f"Unit test file {path} already exists."
    )


def write_content_to_file(content: str, path: Path) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise GeneratorError(ErrorCode.UNKNOWN, str(e)) from e
    logger.info("Wrote %s", path)


def resolve_editor(editor: Optional[str] = None) -> Optional[str]:
    return editor or os.environ.get("VISUAL") or os.environ.get("EDITOR")


def open_file_in_editor(path: Path, editor: Optional[str] = None) -> None:
    command = resolve_editor(editor)
    if not command:
        logger.warning("No editor configured; set $EDITOR to open %s", path)
        return
    try:
        subprocess.run([*shlex.split(command), str(path)], check=False)
    except OSError as e:
        raise GeneratorError(
            ErrorCode.UNKNOWN, f"Failed to launch editor {command!r}: {e}"
        ) from e
