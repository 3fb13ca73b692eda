import logging
from pathlib import Path

import pytest

from pnpmkit.pnpm import Pnpm
from pnpmkit.pnpm.exceptions import PnpmCommandError
from pnpmkit.settings import InvalidArgumentError, RemovePackagesSettings


def test_remove_runs_pnpm(pnpm: Pnpm, pnpm_exe: Path, fake_popen):
    settings = RemovePackagesSettings().add_package("lodash").set_global()
    p = pnpm.remove(settings)

    assert p.returncode == 0
    (call,) = fake_popen.calls
    assert call["args"] == [str(pnpm_exe), "remove", "--global", "lodash"]


def test_quoted_range_is_one_argument(pnpm: Pnpm, pnpm_exe: Path, fake_popen):
    settings = RemovePackagesSettings().add_package("foo", ">=1.0.0 <2.0.0")
    pnpm.run(settings)

    (call,) = fake_popen.calls
    assert call["args"] == [str(pnpm_exe), "remove", "foo@>=1.0.0 <2.0.0"]


def test_working_dir_and_env(pnpm_exe: Path, fake_popen, tmp_path: Path):
    pnpm = Pnpm(pnpm_exe, working_dir=tmp_path, env={"CI": "true"})
    pnpm.run(RemovePackagesSettings().add_package("foo"))

    (call,) = fake_popen.calls
    assert call["cwd"] == tmp_path
    assert call["env"]["CI"] == "true"
    assert "PATH" in call["env"]


def test_output_is_logged(pnpm: Pnpm, fake_popen, caplog):
    fake_popen.stdout_text = "Packages: -1\n"
    fake_popen.stderr_text = "WARN something\n"

    with caplog.at_level(logging.DEBUG, logger="pnpmkit"):
        pnpm.run(RemovePackagesSettings().add_package("foo"))

    messages = [(r.levelno, r.getMessage().strip()) for r in caplog.records]
    assert (logging.DEBUG, "Packages: -1") in messages
    assert (logging.ERROR, "WARN something") in messages


def test_failure_raises(pnpm: Pnpm, fake_popen):
    fake_popen.returncode = 1

    with pytest.raises(PnpmCommandError) as excinfo:
        pnpm.run(RemovePackagesSettings().add_package("foo"))

    assert excinfo.value.returncode == 1
    assert excinfo.value.exit_code == 202
    assert "remove foo" in excinfo.value.message


def test_url_with_quote_characters(pnpm: Pnpm, pnpm_exe: Path, fake_popen):
    settings = RemovePackagesSettings().add_package_from_url(
        "https://example.com/it's-\"pkg\""
    )
    pnpm.remove(settings)

    (call,) = fake_popen.calls
    assert call["args"] == [
        str(pnpm_exe),
        "remove",
        "https://example.com/it%27s-%22pkg%22",
    ]


def test_range_with_quote_and_backslash(pnpm: Pnpm, pnpm_exe: Path, fake_popen):
    settings = RemovePackagesSettings().add_package("foo", 'a "b" c\\d')
    pnpm.run(settings)

    (call,) = fake_popen.calls
    assert call["args"] == [str(pnpm_exe), "remove", 'foo@a "b" c\\d']


def test_unbalanced_quote_in_name(pnpm: Pnpm, fake_popen):
    with pytest.raises(InvalidArgumentError):
        pnpm.run(RemovePackagesSettings().add_package("it's"))

    assert fake_popen.calls == []


def test_output_is_returned(pnpm: Pnpm, fake_popen):
    fake_popen.stdout_text = "line 1\nline 2\n"
    fake_popen.stderr_text = "WARN one\n"

    p = pnpm.run(RemovePackagesSettings().add_package("foo"))

    assert p.stdout == "line 1\nline 2\n"
    assert p.stderr == "WARN one\n"
