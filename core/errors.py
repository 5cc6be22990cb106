"""
catalog-stager - error types
"""
from pathlib import Path
from typing import Optional


class StagingError(Exception):
    """Base class for catalog staging errors"""


class ConfigurationError(StagingError):
    """Run cannot start: missing source directory, unset app id, ..."""


class CompilationError(StagingError):
    """A source catalog could not be compiled to its output path"""

    def __init__(self, source: Path, output: Path, reason: str, detail: Optional[str] = None):
        self.source = source
        self.output = output
        self.reason = reason
        self.detail = detail
        message = f"{source} -> {output}: {reason}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
