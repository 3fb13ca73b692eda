import shutil
import logging
import requests
import os
import stat
from pathlib import Path

from pnpmkit.utils import FullPath
from pnpmkit import utils, consts
from .exceptions import PnpmNotFoundError

logger = logging.getLogger(__name__)


DEFAULT_PNPM_BINS_DIR = consts.DEFAULT_PATHS.bin_dir
PNPM_EXECUTABLES = ("pnpm",)


def ensure_pnpm(bin_dir: Path = DEFAULT_PNPM_BINS_DIR) -> Path:
    """Find pnpm on PATH or in `bin_dir`, installing it there if missing."""
    path = os.pathsep.join((os.environ.get("PATH", ""), str(bin_dir)))
    for exe in PNPM_EXECUTABLES:
        exe_path = shutil.which(exe, path=path)
        if exe_path is not None:
            return FullPath(exe_path)

    logger.info("No existing pnpm installation found. Installing the standalone")
    try:
        return install_pnpm(bin_dir)
    except requests.RequestException as e:
        logger.error(str(e))
        raise PnpmNotFoundError(path.split(os.pathsep)) from e


def install_pnpm(bin_dir: Path = DEFAULT_PNPM_BINS_DIR) -> Path:
    url = utils.get_pnpm_url()
    logger.info(f"Downloading pnpm from {url}")
    resp = requests.get(url, allow_redirects=True)
    resp.raise_for_status()
    utils.mkdir(bin_dir)
    exe_name = "pnpm.exe" if os.name == "nt" else "pnpm"
    target_filename = bin_dir / exe_name
    with open(target_filename, "wb") as fo:
        fo.write(resp.content)
    st = os.stat(target_filename)
    os.chmod(target_filename, st.st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return target_filename
