import logging
import rainbowlog
import yaml
from statistics import median
from typing import Any, Callable, Mapping, Optional, Sequence
from pathlib import Path
from functools import wraps

from pnpmkit import consts, utils
from pnpmkit.exceptions import PnpmkitError
from pnpmkit.pnpm import Pnpm
from pnpmkit.pnpm.exceptions import PnpmNotFoundError
from pnpmkit.pnpm.installers import ensure_pnpm
from pnpmkit.settings import PnpmLogLevel

import click

from pnpmkit.utils import FullPath


def common(f: Callable) -> Callable:
    """
    This decorator adds common options to the CLI.
    """
    options: Sequence[Callable] = (
        pnpm,
        click.help_option("-h", "--help"),
    )

    for op in options:
        f = op(f)

    return f


packages = click.argument("packages", nargs=-1)


def _config_file_callback(_, __, config_file: Optional[Path]) -> Mapping[str, Any]:
    try:
        with (config_file or consts.DEFAULT_PATHS.conf_file).open() as cf:
            config = yaml.safe_load(cf) or {}
    except FileNotFoundError:
        config = {}

    if not isinstance(config, dict):
        raise click.BadParameter(
            f"Config file {config_file} must contain a dict as its root."
        )

    return config


config = click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help=f"Custom path to a pnpmkit config file in YAML. Default: {consts.DEFAULT_PATHS.conf_file}",
    callback=_config_file_callback,
)

is_global = click.option(
    "-g",
    "--global",
    "is_global",
    help="Operate on globally installed packages.",
    is_flag=True,
    default=False,
)

pnpm_log_level = click.option(
    "--loglevel",
    "pnpm_log_level",
    type=click.Choice([level.value for level in PnpmLogLevel]),
    help="Log level passed on to pnpm.",
    default=None,
)

verbose = click.option(
    "-v",
    "--verbose",
    count=True,
    help="Raise verbosity level.",
)

quiet = click.option(
    "-q",
    "--quiet",
    count=True,
    help="Decrease verbosity level.",
)

working_dir = click.option(
    "-C",
    "--dir",
    "working_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run pnpm in this directory instead of the current one.",
)

pnpm_exe = click.option(
    "--pnpm",
    "pnpm_exe",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the pnpm executable. Default: found on PATH or downloaded.",
)


def pnpm(f: Callable) -> Callable:
    """
    This click option decorator adds the --pnpm, --dir and --config options as well as all those added by `options.log_level` to the CLI.
    It constructs a `Pnpm` object and passes it to the decorated function as `pnpm`.
    It reads the config file and passes it as a dict to the decorated function as `config`.
    """

    @log_level
    @config
    @working_dir
    @pnpm_exe
    @wraps(f)
    def construct_pnpm_hook(
        config: Mapping[str, Any],
        working_dir: Optional[Path],
        pnpm_exe: Optional[Path],
        **kwargs,
    ):
        try:
            exe = resolve_pnpm(pnpm_exe, config)
        except PnpmkitError as e:
            logging.getLogger(__name__).error(e.message)
            raise SystemExit(e.exit_code) from e

        return f(
            pnpm=Pnpm(
                exe,
                working_dir=working_dir,
                env={str(k): str(v) for k, v in (config.get("env", None) or {}).items()},
            ),
            config=config,
            **kwargs,
        )

    return construct_pnpm_hook


def resolve_pnpm(pnpm_exe: Optional[Path], config: Mapping[str, Any]) -> Path:
    """--pnpm, else the `pnpm` key of the config file, else `ensure_pnpm`.

    Raises:
        PnpmNotFoundError: If the configured path is not an executable file.
    """
    if pnpm_exe is not None:
        return FullPath(pnpm_exe)

    configured = config.get("pnpm", None)
    if configured is not None:
        exe = FullPath(str(configured))
        if not utils.is_executable(exe):
            raise PnpmNotFoundError((str(exe),))
        return exe

    return ensure_pnpm(FullPath(config.get("bin_dir", None) or consts.DEFAULT_PATHS.bin_dir))


def resolve_global(is_global: bool, config: Mapping[str, Any]) -> bool:
    """--global, or the `global` key of the config file."""
    return is_global or utils.to_bool(config.get("global", False))


def log_level(f: Callable) -> Callable:
    """
    This click option decorator adds -v and -q options to the CLI, then sets up logging with the specified level.
    It passes the level to the decorated function as `log_level`.
    """

    @verbose
    @quiet
    @wraps(f)
    def setup_logging_hook(verbose: int, quiet: int, **kwargs):
        handler = logging.StreamHandler()
        logger = logging.getLogger((__package__ or __name__).split(".", 1)[0])
        handler.setFormatter(rainbowlog.Formatter(logging.Formatter()))
        logger.addHandler(handler)
        level = int(
            median(
                (logging.DEBUG, logging.INFO - 10 * (verbose - quiet), logging.CRITICAL)
            )
        )
        logger.setLevel(level)
        return f(log_level=level, **kwargs)

    return setup_logging_hook
