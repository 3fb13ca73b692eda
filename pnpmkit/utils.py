import os
from pathlib import Path
import platform
from typing import Optional, Tuple, Union
import urllib.parse

from pnpmkit.exceptions import PnpmkitError


class FullPath(Path):
    def __new__(cls, *args, **kwargs):
        return super().__new__(Path, Path(*args, **kwargs).expanduser().resolve())


def mkdir(path: Path) -> None:
    """mkdir -p path"""
    path.mkdir(exist_ok=True, parents=True)


def is_blank(value: Optional[str]) -> bool:
    """True for None, the empty string, or whitespace only."""
    return value is None or not value.strip()


def quote_value(value: str) -> str:
    """Wrap `value` in double quotes unless it already is.

    Embedded backslashes and double quotes are escaped so the result splits
    back into `value` with `shlex.split`.

    >>> quote_value(">=1.0.0 <2.0.0")
    '">=1.0.0 <2.0.0"'
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def split_package_spec(spec: str) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split a pnpm package reference into (<name>, <version or tag>, <scope>).

    >>> split_package_spec("lodash")
    ('lodash', None, None)

    >>> split_package_spec("lodash@4.17.21")
    ('lodash', '4.17.21', None)

    >>> split_package_spec("@types/node@latest")
    ('node', 'latest', '@types')

    >>> split_package_spec("@types/node")
    ('node', None, '@types')
    """
    spec = spec.strip()
    scope = None
    if spec.startswith("@") and "/" in spec:
        scope, spec = spec.split("/", 1)

    name, sep, version = spec.partition("@")
    return name, (version or None) if sep else None, scope


def is_executable(path: Path) -> bool:
    """
    Check if a file is executable.
    """
    if not path.is_file():
        return False

    if os.name == "nt":
        pathexts = [
            ext.strip().lower()
            for ext in os.environ.get("PATHEXT", "").split(os.pathsep)
        ]
        ext = path.suffix.lower()
        return bool(ext) and (ext in pathexts)

    return os.access(path, os.X_OK)


class UnsupportedPlatformError(PnpmkitError):
    def __init__(self):
        super().__init__(
            30, f"Unsupported platform: {platform.system()} {platform.machine()}"
        )


def get_pnpm_url() -> str:
    """
    Get the URL of the latest standalone pnpm release for this platform.
    """
    base = "https://github.com/pnpm/pnpm/releases/latest/download/"
    system, machine = platform.system(), platform.machine().lower()
    if machine in ("x86_64", "amd64"):
        arch = "x64"
    elif machine in ("aarch64", "arm64"):
        arch = "arm64"
    else:
        raise UnsupportedPlatformError()

    if system == "Linux":
        asset = f"pnpm-linux-{arch}"
    elif system == "Darwin":
        asset = f"pnpm-macos-{arch}"
    elif system == "Windows":
        asset = f"pnpm-win-{arch}.exe"
    else:
        raise UnsupportedPlatformError()

    url = urllib.parse.urljoin(base, asset)
    return url


def to_bool(value: Union[str, bool, int, None]) -> bool:
    if not isinstance(value, str):
        return bool(value)

    if not value:
        return False

    if value.lower() in ("false", "no", "off"):
        return False

    if value.lower() in ("true", "yes", "on"):
        return True

    try:
        return int(value) > 0
    except ValueError:
        return False
