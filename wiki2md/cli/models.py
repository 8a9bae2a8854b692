"""Data models for CLI operations."""

from enum import IntEnum

from wiki2md.models.conversion_result import FailureKind


class ExitCode(IntEnum):
    """Exit codes for the wiki2md command.

    - SUCCESS (0): Markdown produced
    - GENERAL_ERROR (1): Bad input file, config or output path
    - NOT_APPLICABLE (2): Page is not an article
    - CONTENT_NOT_FOUND (3): Article content container missing
    - CONVERSION_ERROR (4): Unexpected error while rendering

    Example:
        >>> exit_code = ExitCode.for_failure(FailureKind.NOT_APPLICABLE)
        >>> int(exit_code)
        2
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_APPLICABLE = 2
    CONTENT_NOT_FOUND = 3
    CONVERSION_ERROR = 4

    @classmethod
    def for_failure(cls, kind: FailureKind) -> 'ExitCode':
        return {
            FailureKind.NOT_APPLICABLE: cls.NOT_APPLICABLE,
            FailureKind.CONTENT_NOT_FOUND: cls.CONTENT_NOT_FOUND,
            FailureKind.INTERNAL_ERROR: cls.CONVERSION_ERROR,
        }[kind]
