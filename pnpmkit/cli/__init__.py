import click

from pnpmkit import __version__, consts


@click.group(
    help=f"""Run pnpm package-manager tasks.

    Default variables:

      Config file is {consts.DEFAULT_PATHS.conf_file}\n
      A downloaded pnpm is placed in {consts.DEFAULT_PATHS.bin_dir}
    """
)
@click.version_option(
    __version__,
    message="%(prog)s %(version)s",
)
@click.help_option("-h", "--help")
def cli(**_):
    return
