import urllib.parse
from typing import Dict, Optional, Tuple

from pnpmkit import utils
from .arguments import ProcessArgumentBuilder
from .base import PnpmSettings
from .exceptions import InvalidArgumentError


def _lower_host(netloc: str) -> str:
    """Lowercase the host and port of `netloc`, keeping the case of any userinfo."""
    userinfo, sep, hostport = netloc.rpartition("@")
    userinfo = urllib.parse.quote(userinfo, safe=":%!$&()*+,;=~")
    return f"{userinfo}{sep}{hostport.lower()}"


def _absolute_url(url: str) -> str:
    """Normalize an absolute URL, or raise if `url` is relative."""
    parts = urllib.parse.urlsplit(url.strip())
    if not parts.scheme or (not parts.netloc and parts.scheme != "file"):
        raise InvalidArgumentError("You must provide an absolute url to a package")

    return urllib.parse.urlunsplit(
        (
            parts.scheme.lower(),
            _lower_host(parts.netloc),
            urllib.parse.quote(parts.path or "/", safe="/%:@!$&()*+,;=~"),
            urllib.parse.quote(parts.query, safe="=&%/:?@!$()*+,;~"),
            urllib.parse.quote(parts.fragment, safe="=&%/:?@!$()*+,;~#"),
        )
    )


class RemovePackagesSettings(PnpmSettings):
    """Settings for `pnpm remove`."""

    def __init__(self):
        super().__init__("remove")
        self._packages: Dict[str, None] = {}

    @property
    def packages(self) -> Tuple[str, ...]:
        """Packages to remove, in the order they were added."""
        return tuple(self._packages)

    @property
    def is_global(self) -> bool:
        return self.base.is_global

    def add_package_from_url(self, url: str) -> "RemovePackagesSettings":
        """Remove the package at `url`, replacing any packages added before.

        Args:
            url: Absolute url to a directory containing package.json.

        Raises:
            InvalidArgumentError: If `url` is not absolute.
        """
        package = _absolute_url(url)
        self._packages.clear()
        self._packages[package] = None
        return self

    def add_package(
        self,
        name: str,
        version_or_tag: Optional[str] = None,
        scope: Optional[str] = None,
    ) -> "RemovePackagesSettings":
        """Remove a package by name, with optional version/tag and scope.

        Args:
            name: Package name.
            version_or_tag: Package version, range or dist-tag. Values with
                spaces (semver ranges) are quoted.
            scope: Package scope, starting with "@".

        Raises:
            InvalidArgumentError: If `name` is blank or `scope` lacks the leading "@".
        """
        if utils.is_blank(name):
            raise InvalidArgumentError("The package name must not be empty")

        package = name
        if not utils.is_blank(version_or_tag):
            if " " in version_or_tag:
                version_or_tag = utils.quote_value(version_or_tag)
            package = f"{name}@{version_or_tag}"

        if not utils.is_blank(scope):
            if not scope.startswith("@"):
                raise InvalidArgumentError("The scope should start with @")
            package = f"{scope}/{package}"

        self._packages[package] = None
        return self

    def set_global(self, enabled: bool = True) -> "RemovePackagesSettings":
        """Apply the --global parameter."""
        self.base.is_global = enabled
        return self

    def render_arguments(self, args: ProcessArgumentBuilder) -> None:
        for package in self._packages:
            args.append(package)
