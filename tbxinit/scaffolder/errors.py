"""Exceptions raised while scaffolding a toolbox.

Every error is fatal to the run.  Nothing is retried and nothing already
written is cleaned up, so the caller decides what to do with a partially
created tree.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""


class UnsupportedEnvironment(ScaffoldError):
    """Raised when the host MATLAB release is unknown or too old."""

    def __init__(self, minimum: str, found: str | None = None) -> None:
        self.minimum = minimum
        self.found = found
        if found is None:
            detail = "could not determine the installed MATLAB release"
        else:
            detail = f"found MATLAB {found}"
        super().__init__(f"MATLAB {minimum} or newer is required ({detail})")


class DirectoryCreationFailed(ScaffoldError):
    """Raised when a directory of the plan cannot be created.

    This includes the case where the directory already exists.
    """

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not create directory {self.path}: {cause}")


class FileCopyFailed(ScaffoldError):
    """Raised when a template cannot be copied to its destination."""

    def __init__(self, template: str, destination: str | Path, cause: BaseException) -> None:
        self.template = template
        self.destination = Path(destination)
        self.cause = cause
        super().__init__(
            f"Could not copy template '{template}' to {self.destination}: {cause}"
        )


class FileTransformFailed(ScaffoldError):
    """Raised when token substitution cannot read or rewrite a copied file."""

    def __init__(self, destination: str | Path, cause: BaseException) -> None:
        self.destination = Path(destination)
        self.cause = cause
        super().__init__(f"Could not apply replacements to {self.destination}: {cause}")
