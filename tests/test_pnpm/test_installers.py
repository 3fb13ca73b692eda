import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from pnpmkit.pnpm import installers
from pnpmkit.pnpm.exceptions import PnpmNotFoundError


def test_ensure_pnpm_finds_existing(pnpm_exe: Path, monkeypatch):
    monkeypatch.setenv("PATH", "")
    assert installers.ensure_pnpm(pnpm_exe.parent) == pnpm_exe.resolve()


def test_ensure_pnpm_installs_when_missing(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("PATH", "")
    bin_dir = tmp_path / "bins"
    with patch.object(installers, "install_pnpm", return_value=bin_dir / "pnpm") as install:
        assert installers.ensure_pnpm(bin_dir) == bin_dir / "pnpm"
    install.assert_called_once_with(bin_dir)


def test_ensure_pnpm_download_failure(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("PATH", "")
    error = requests.ConnectionError("offline")
    with patch.object(installers, "install_pnpm", side_effect=error):
        with pytest.raises(PnpmNotFoundError):
            installers.ensure_pnpm(tmp_path)


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
def test_install_pnpm(tmp_path: Path):
    response = MagicMock(content=b"binary")
    with patch.object(installers.utils, "get_pnpm_url", return_value="https://x/pnpm"), patch.object(
        installers.requests, "get", return_value=response
    ) as get:
        exe = installers.install_pnpm(tmp_path / "bins")

    get.assert_called_once_with("https://x/pnpm", allow_redirects=True)
    response.raise_for_status.assert_called_once_with()
    assert exe == tmp_path / "bins" / "pnpm"
    assert exe.read_bytes() == b"binary"
    assert os.access(exe, os.X_OK)
