import logging
import pathlib
from typing import Optional

import tree_sitter_typescript as tsts
from tree_sitter import Language, Parser, Tree

from unit_test_generator.errors import (
    ErrorCode,
    GeneratorError,
    UnsupportedLanguageError,
)
from unit_test_generator.extractors.classifier import ExportClassifier
from unit_test_generator.types import ExportSurface, SourceLanguage

# Initialize Tree-sitter
TS_LANGUAGE = Language(tsts.language_typescript())
TSX_LANGUAGE = Language(tsts.language_tsx())

PARSER = Parser()
PARSER.language = TS_LANGUAGE

TSX_PARSER = Parser()
TSX_PARSER.language = TSX_LANGUAGE

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".js": SourceLanguage.JAVASCRIPT,
    ".jsx": SourceLanguage.JAVASCRIPT,
    ".mjs": SourceLanguage.JAVASCRIPT,
    ".cjs": SourceLanguage.JAVASCRIPT,
    ".ts": SourceLanguage.TYPESCRIPT,
    ".tsx": SourceLanguage.TYPESCRIPT,
    ".mts": SourceLanguage.TYPESCRIPT,
    ".cts": SourceLanguage.TYPESCRIPT,
}

# Used only to name the file type when rejecting it.
KNOWN_LANGUAGE_IDS = {
    ".py": "python",
    ".go": "go",
    ".java": "java",
    ".rs": "rust",
    ".rb": "ruby",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".php": "php",
    ".json": "json",
    ".md": "markdown",
    ".html": "html",
    ".css": "css",
    ".yaml": "yaml",
    ".yml": "yaml",
}

# The plain TypeScript grammar rejects JSX, and the TSX grammar rejects
# angle-bracket type assertions, so only these use the former.
_TYPESCRIPT_ONLY_EXTENSIONS = {".ts", ".mts", ".cts"}


def detect_language(file_path: pathlib.Path) -> SourceLanguage:
    """Map a file's extension to a supported language.

    Raises:
        UnsupportedLanguageError: naming the file type when it is neither
            JavaScript nor TypeScript.
    """
    suffix = file_path.suffix.lower()
    language = SUPPORTED_EXTENSIONS.get(suffix)
    if language is None:
        language_id = KNOWN_LANGUAGE_IDS.get(suffix) or suffix.lstrip(".")
        raise UnsupportedLanguageError(language_id or "plaintext")
    return language


def get_parser(file_path: pathlib.Path) -> Parser:
    if file_path.suffix.lower() in _TYPESCRIPT_ONLY_EXTENSIONS:
        return PARSER
    return TSX_PARSER


def parse_source(
    content: bytes, file_path: pathlib.Path, parser: Optional[Parser] = None
) -> Tree:
    parser = parser or get_parser(file_path)
    tree = parser.parse(content)
    if tree.root_node.has_error:
        logger.warning(
            "%s contains syntax errors; exports may be incomplete.", file_path
        )
    return tree


def read_source(file_path: pathlib.Path) -> bytes:
    try:
        return file_path.read_bytes()
    except OSError as e:
        logger.error("Failed to read %s: %s", file_path, e)
        raise GeneratorError(ErrorCode.UNKNOWN, str(e)) from e


def extract_exports(
    file_path: pathlib.Path, parser: Optional[Parser] = None
) -> ExportSurface:
    """Read, parse and classify a JavaScript or TypeScript module."""
    content = read_source(file_path)
    tree = parse_source(content, file_path, parser)

    surface = ExportClassifier().classify(tree.root_node)
    logger.debug(
        "%s: default export=%s, named exports=%s",
        file_path,
        surface.has_default_export,
        surface.named_exports,
    )
    return surface
