"""Exceptions raised while adding an alias."""

from __future__ import annotations

from pathlib import Path


class AliasItError(Exception):
    """Base class for alias-it errors."""


class MissingArgumentError(AliasItError):
    """Alias name or command was not given on the command line."""


class UnsupportedShellError(AliasItError):
    def __init__(self, shell_path: str | None = None) -> None:
        self.shell_path = shell_path
        super().__init__("unsupported shell, only zsh and bash are supported for now")


class HomeDirectoryError(AliasItError):
    """The user's home directory could not be resolved. Not recoverable."""


class ShellConfigWriteError(AliasItError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"could not write to {path}: {cause.strerror or cause}")
