"""Shell alias: detect the shell, find its rc file and append an alias line."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Sequence, TextIO

from rich.console import Console
from rich.markup import escape

from alias_it.errors import (
    HomeDirectoryError,
    MissingArgumentError,
    ShellConfigWriteError,
    UnsupportedShellError,
)

logger = logging.getLogger(__name__)

USAGE = "alias-it <alias_name> <command_name>"

ESCAPE_HINT = (
    "Hint: to prevent variable expansion, remember about prepending $ with a slash, "
    "e.g. $PWD -> \\$PWD"
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

HomeDirResolver = Callable[[], "str | Path"]
ShellResolver = Callable[[], "str | None"]


class ShellKind(enum.Enum):
    ZSH = "zsh"
    BASH = "bash"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ShellProps:
    config_file_name: str
    path_suffix: str


SHELL_PROPS = MappingProxyType({
    ShellKind.ZSH: ShellProps(config_file_name=".zshrc", path_suffix="/zsh"),
    ShellKind.BASH: ShellProps(config_file_name=".bashrc", path_suffix="/bash"),
})


@dataclass(frozen=True)
class AliasRequest:
    name: str
    command: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> AliasRequest:
        """Build a request from positional args: alias name, then command tokens."""
        if len(args) < 1:
            raise MissingArgumentError("missing alias name")
        if len(args) < 2:
            raise MissingArgumentError("missing command")
        return cls(name=args[0], command=" ".join(args[1:]))


def _env_shell() -> str | None:
    return os.environ.get("SHELL")


def detect_shell(shell_path: str | None) -> ShellKind:
    """Match a shell executable path (e.g. $SHELL) against the supported suffixes.

    If several entries match, the last one in table order wins.
    """
    if not shell_path:
        return ShellKind.UNKNOWN
    shell_path = shell_path.rstrip()
    detected = ShellKind.UNKNOWN
    for kind, props in SHELL_PROPS.items():
        if shell_path.endswith(props.path_suffix):
            detected = kind
    return detected


def get_shell_config_path(home_dir: str | Path, shell: ShellKind) -> Path:
    """Path to the rc file of ``shell`` inside ``home_dir``."""
    props = SHELL_PROPS.get(shell)
    if props is None:
        raise UnsupportedShellError()
    return Path(home_dir) / props.config_file_name


def format_alias_line(request: AliasRequest) -> str:
    # Leading newline keeps the alias on its own line even without a trailing newline in the file.
    return f'\nalias {request.name}="{request.command}"'


def _printable(text: str) -> str:
    """Replace undecodable argv bytes so the console can always print ``text``."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def append_to_shell_config(path: Path, text: str) -> None:
    """Append ``text`` to ``path``, creating it with mode 0644 if missing."""
    try:
        fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o644)
    except OSError as exc:
        raise ShellConfigWriteError(path, exc) from exc
    try:
        # surrogateescape writes undecodable argv bytes back out unchanged.
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as f:
            f.write(text)
    except OSError as exc:
        raise ShellConfigWriteError(path, exc) from exc
    logger.info("Appended %d chars to %s", len(text), path)


class AliasCLI:
    """The add-alias workflow with its outside world injected.

    ``printer`` receives every user-facing message, ``home_dir_resolver`` and
    ``shell_resolver`` stand in for ``Path.home`` and ``$SHELL`` so tests can
    run against a temporary directory.
    """

    def __init__(
        self,
        printer: TextIO | None = None,
        home_dir_resolver: HomeDirResolver = Path.home,
        shell_resolver: ShellResolver = _env_shell,
        detect: bool = True,
        default_shell: ShellKind = ShellKind.ZSH,
    ) -> None:
        self.console = Console(
            file=printer,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        self.home_dir_resolver = home_dir_resolver
        self.shell_resolver = shell_resolver
        self.detect = detect
        self.default_shell = default_shell

    def add(self, args: Sequence[str]) -> int:
        """Run the whole workflow for one invocation and return an exit status."""
        try:
            request = self.parse_args(args)
        except MissingArgumentError:
            return EXIT_USAGE

        try:
            shell = self.ensure_supported_shell()
        except UnsupportedShellError:
            return EXIT_FAILURE

        config_path = self.get_shell_config_path(shell)

        try:
            self.add_alias(request, config_path)
        except ShellConfigWriteError as exc:
            logger.info("Alias %r not added: %s", request.name, exc)
            self.console.print(f"[red bold]Error:[/red bold]\t{escape(str(exc))}")
            return EXIT_FAILURE
        return EXIT_OK

    def parse_args(self, args: Sequence[str]) -> AliasRequest:
        try:
            request = AliasRequest.from_args(args)
        except MissingArgumentError as exc:
            self.console.print(f"[red bold]Error:[/red bold]\t {exc}")
            self.console.print(f"Usage:\t {USAGE}")
            raise

        self.console.print(f"🏡 Alias name:\t[bold]{escape(_printable(request.name))}[/bold]")
        self.console.print(f"💻 Command:\t[bold]{escape(_printable(request.command))}[/bold]")
        return request

    def ensure_supported_shell(self) -> ShellKind:
        if not self.detect:
            return self.default_shell

        shell_path = self.shell_resolver()
        shell = detect_shell(shell_path)
        if shell is ShellKind.UNKNOWN:
            err = UnsupportedShellError(shell_path)
            logger.info("Unsupported shell %r", shell_path)
            self.console.print(f"[red bold]Error:[/red bold]\t {err}")
            raise err
        logger.debug("Detected %s from %r", shell.value, shell_path)
        return shell

    def get_shell_config_path(self, shell: ShellKind) -> Path:
        try:
            home_dir = self.home_dir_resolver()
        except Exception as exc:
            logger.exception("Could not resolve home directory")
            self.console.print(f"[red bold]Error:[/red bold]\t {escape(str(exc))}")
            raise HomeDirectoryError(str(exc)) from exc
        return get_shell_config_path(home_dir, shell)

    def add_alias(self, request: AliasRequest, config_path: Path) -> None:
        alias_line = format_alias_line(request)
        append_to_shell_config(config_path, alias_line)

        self.console.print(f"\nAdded alias:{escape(_printable(alias_line))}\n")
        self.console.print(ESCAPE_HINT)
        self.console.print(
            f'\n👉 Remember to source your shell config file (e.g. "source ~/{config_path.name}")\n'
            "or open a new terminal tab to start using your alias"
        )
