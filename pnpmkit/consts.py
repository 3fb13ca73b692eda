import os
from dataclasses import dataclass
from pathlib import Path


from pnpmkit.utils import FullPath


IS_WIN = os.name == "nt"
IS_UNIX = not IS_WIN


@dataclass
class Paths:
    conf_dir: Path
    data_dir: Path
    conf_file_name: str = "config.yaml"
    bins_dir_name: str = "bins"

    @property
    def conf_file(self) -> Path:
        return self.conf_dir / self.conf_file_name

    @property
    def bin_dir(self) -> Path:
        return self.data_dir / self.bins_dir_name


class _WindowsPaths(Paths):
    def __init__(self):
        conf_dir = data_dir = (
            FullPath(os.environ.get("LOCALAPPDATA", "~/AppData/Local"))
            / "pnpmkit/pnpmkit"
        )
        super().__init__(conf_dir=conf_dir, data_dir=data_dir)


class _UnixPaths(Paths):
    def __init__(self):
        super().__init__(
            conf_dir=FullPath(os.environ.get("XDG_CONFIG_HOME", "~/.config"))
            / "pnpmkit",
            data_dir=FullPath(os.environ.get("XDG_DATA_HOME", "~/.local/share"))
            / "pnpmkit",
        )


DEFAULT_PATHS: Paths = _UnixPaths() if IS_UNIX else _WindowsPaths()
