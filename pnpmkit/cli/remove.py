import logging
from typing import Any, List, Mapping, Optional

import click

from pnpmkit import utils
from pnpmkit.exceptions import PnpmkitError
from pnpmkit.pnpm import Pnpm
from pnpmkit.settings import RemovePackagesSettings

from . import cli, options

logger = logging.getLogger(__name__)


@cli.command(
    help="""
    Remove packages with pnpm.

    PACKAGES are given as NAME, NAME@VERSION or @SCOPE/NAME@VERSION.
    """,
)
@click.option(
    "--url",
    help="Remove the package at this absolute url instead of PACKAGES.",
    default=None,
)
@options.is_global
@options.pnpm_log_level
@options.common
@options.packages
def remove(
    packages: List[str],
    url: Optional[str],
    is_global: bool,
    pnpm_log_level: Optional[str],
    pnpm: Pnpm,
    config: Mapping[str, Any],
    **_,
):
    if not (url or packages):
        raise click.BadArgumentUsage("No packages specified.")

    if url and packages:
        raise click.BadArgumentUsage("Cannot specify packages and --url.")

    try:
        settings = RemovePackagesSettings().set_global(
            options.resolve_global(is_global, config)
        )
        settings.set_log_level(pnpm_log_level or config.get("loglevel", None))
        if url:
            settings.add_package_from_url(url)
        for spec in packages:
            name, version_or_tag, scope = utils.split_package_spec(spec)
            settings.add_package(name, version_or_tag, scope)

        pnpm.remove(settings)
    except PnpmkitError as e:
        logger.error(e.message)
        raise SystemExit(e.exit_code) from e

    logger.info(f"Removed {' '.join(settings.packages)}")
