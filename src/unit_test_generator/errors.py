"""Errors raised by the test file generation pipeline."""

import enum


class ErrorCode(enum.Enum):
    UNKNOWN = 0
    UNABLE_TO_CREATE_TEST_DIRECTORY = 1
    UNIT_TEST_FILE_EXISTS = 2


# Codes the user has already been told about; they end the run silently.
BYPASS_ERROR_CODES = frozenset({ErrorCode.UNIT_TEST_FILE_EXISTS})


class GeneratorError(RuntimeError):
    """Raised when a pipeline step fails."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def is_bypassed(self) -> bool:
        return self.code in BYPASS_ERROR_CODES


class UnsupportedLanguageError(ValueError):
    """Raised when the source file is not JavaScript or TypeScript."""

    def __init__(self, language: str):
        super().__init__(
            f"{language} files are not supported at the moment. Sorry!"
        )
        self.language = language
