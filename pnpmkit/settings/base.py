from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .arguments import ProcessArgumentBuilder
from .exceptions import InvalidArgumentError


class PnpmLogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class ArgumentRenderer(ABC):
    @abstractmethod
    def render_arguments(self, args: ProcessArgumentBuilder) -> None:
        """Append this object's tokens to `args`."""
        raise NotImplementedError()


class CommandArguments(ArgumentRenderer):
    def __init__(
        self,
        command: str,
        is_global: bool = False,
        log_level: Optional[PnpmLogLevel] = None,
    ):
        """The options every pnpm subcommand accepts.

        Args:
            command: The pnpm subcommand, e.g. "remove".
            is_global: Whether to pass `--global`.
            log_level: Value for `--loglevel`. Omitted when None.
        """
        self.command = command
        self.is_global = is_global
        self.log_level = log_level

    def render_arguments(self, args: ProcessArgumentBuilder) -> None:
        if self.is_global:
            args.append("--global")
        if self.log_level is not None:
            args.append_switch("--loglevel", PnpmLogLevel(self.log_level).value)


class PnpmSettings(ArgumentRenderer):
    """Settings of a single pnpm subcommand.

    Subclasses hold a `CommandArguments` value in `self.base` and render only
    their own tokens in `render_arguments`.
    """

    def __init__(self, command: str):
        self.base = CommandArguments(command)

    @property
    def command(self) -> str:
        return self.base.command

    @property
    def log_level(self) -> Optional[PnpmLogLevel]:
        return self.base.log_level

    def set_log_level(self, log_level: Optional[PnpmLogLevel]):
        """Apply the --loglevel parameter, or drop it when `log_level` is None."""
        if log_level is None:
            self.base.log_level = None
            return self
        try:
            self.base.log_level = PnpmLogLevel(log_level)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown pnpm log level: {log_level}") from e
        return self


def evaluate(settings: PnpmSettings) -> ProcessArgumentBuilder:
    """Build the full argument list for `settings`, excluding the pnpm executable.

    The subcommand comes first, then the shared options, then the
    subcommand's own tokens.
    """
    args = ProcessArgumentBuilder().append(settings.command)
    settings.base.render_arguments(args)
    settings.render_arguments(args)
    return args
