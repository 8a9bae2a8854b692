"""Command-line interface for wiki2md.

This package provides the `wiki2md` CLI tool that loads a saved article
page, resolves conversion options from config files, the environment and
flags, and writes the resulting Markdown to stdout or a file.
"""

from .config import ConfigLoader
from .errors import CLIError, ConfigError, OutputWriteError
from .filename import title_to_filename
from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ConfigLoader',
    'CLIError',
    'ConfigError',
    'OutputWriteError',
    'title_to_filename',
    'ExitCode',
    'OutputHandler',
]
