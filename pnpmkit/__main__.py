from pnpmkit.cli import cli
from pnpmkit.cli import remove  # noqa: F401


def main():
    cli()


if __name__ == "__main__":
    main()
