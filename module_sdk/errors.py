"""Errors raised while scaffolding construct library modules."""

from typing import Optional


class ScaffoldError(RuntimeError):
    """Base error for the module scaffolder."""


class RootDirectoryError(ScaffoldError):
    """Raised when the scaffolder is not pointed at the expected packages directory."""


class SpecificationError(ScaffoldError):
    """Raised when the resource specification cannot be read or parsed."""


class ManifestValidationError(ScaffoldError):
    """Raised when a generated package manifest does not match its schema."""


class BuildCommandError(ScaffoldError):
    """Raised when the build orchestrator exits with a non-zero status."""

    def __init__(self, command: str, returncode: Optional[int]):
        super().__init__(f"non-zero exit code: {returncode}")
        self.command = command
        self.returncode = returncode
