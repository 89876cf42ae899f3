"""
Language engines turn a source file into the contents of its test file.
"""

from pathlib import Path
from typing import Dict, Protocol

from tree_sitter import Parser

from unit_test_generator.extractors import extractor_ts
from unit_test_generator.generator.imports import synthesize
from unit_test_generator.types import SourceLanguage, TestFileTarget


class LanguageEngine(Protocol):
    def create_file_contents(
        self, source_path: Path, target: TestFileTarget
    ) -> str:
        ...


def describe_block(suite_name: str) -> str:
    return f"describe('{suite_name}', () => {{}});"


def build_test_file(
    source_path: Path, target: TestFileTarget, parser: Parser
) -> str:
    surface = extractor_ts.extract_exports(source_path, parser)
    import_line = synthesize(surface, target.base_name, target.module_specifier)
    return f"{import_line}\n\n{describe_block(target.base_name)}\n"


class JavaScriptEngine:
    """Jest/Mocha style test file for a JavaScript module."""

    def create_file_contents(
        self, source_path: Path, target: TestFileTarget
    ) -> str:
        # JSX is valid in any JavaScript file.
        return build_test_file(source_path, target, extractor_ts.TSX_PARSER)


class TypeScriptEngine:
    """Same layout as JavaScript; the grammar depends on the extension."""

    def create_file_contents(
        self, source_path: Path, target: TestFileTarget
    ) -> str:
        return build_test_file(
            source_path, target, extractor_ts.get_parser(source_path)
        )


ENGINES: Dict[SourceLanguage, LanguageEngine] = {
    SourceLanguage.JAVASCRIPT: JavaScriptEngine(),
    SourceLanguage.TYPESCRIPT: TypeScriptEngine(),
}


def get_engine(language: SourceLanguage) -> LanguageEngine:
    return ENGINES[language]
