from pathlib import Path
import os
import shlex
import subprocess
import logging
import sys
import threading
from typing import IO, List, Mapping, Optional
from halo import Halo

from pnpmkit.settings import (
    InvalidArgumentError,
    PnpmSettings,
    RemovePackagesSettings,
    evaluate,
)
from .exceptions import PnpmCommandError
from .installers import ensure_pnpm


logger = logging.getLogger(__name__)


class Pnpm:
    def __init__(
        self,
        exe: Optional[Path] = None,
        working_dir: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        """This class is a wrapper for pnpm's CLI.

        Args:
            exe: The pnpm executable. Located or installed when not given.
            working_dir: Directory to run pnpm in. Defaults to the current one.
            env: Environment variables added to the inherited environment.
        """
        self.exe = exe or ensure_pnpm()
        self.working_dir = working_dir
        self.env = dict(env or {})

    def remove(self, settings: RemovePackagesSettings) -> subprocess.CompletedProcess:
        """Remove packages.

        Args:
            settings: Which packages to remove and how.
        """
        what = " ".join(settings.packages) or "packages"
        if logger.getEffectiveLevel() <= logging.INFO:
            with Halo(text=f"Removing {what}", spinner="dots", stream=sys.stderr):
                return self.run(settings)
        return self.run(settings)

    def run(
        self,
        settings: PnpmSettings,
        stdout_level: int = logging.DEBUG,
        stderr_level: int = logging.ERROR,
    ) -> subprocess.CompletedProcess:
        """Run the pnpm subcommand described by `settings`.

        Raises:
            PnpmCommandError: If pnpm exits with a non-zero code.
        """
        return self._run(evaluate(settings).render(), stdout_level, stderr_level)

    def _run(
        self,
        command: str,
        stdout_level: int = logging.DEBUG,
        stderr_level: int = logging.ERROR,
    ) -> subprocess.CompletedProcess:
        """Run a pnpm command.

        Args:
            command: The command to run excluding the pnpm executable.

        Raises:
            InvalidArgumentError: If `command` does not split into shell words.
        """
        cmd = f"{shlex.quote(str(self.exe))} {command}"
        logger.debug(f"Running: {cmd}")
        try:
            cmd_list = shlex.split(cmd)
        except ValueError as e:
            raise InvalidArgumentError(f"Cannot split `{command}`: {e}") from e

        p = subprocess.Popen(
            cmd_list,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=self.working_dir,
            env={**os.environ, **self.env},
        )

        # stderr is drained on its own thread so a full pipe cannot block pnpm
        stderr_lines: List[str] = []
        stderr_reader = threading.Thread(
            target=self._log_stream,
            args=(p.stderr, stderr_level, stderr_lines),
            daemon=True,
        )
        stderr_reader.start()
        stdout_lines: List[str] = []
        self._log_stream(p.stdout, stdout_level, stdout_lines)
        stderr_reader.join()

        ret_code = p.wait()
        if ret_code != 0:
            raise PnpmCommandError(command, ret_code)

        return subprocess.CompletedProcess(
            cmd_list, ret_code, "".join(stdout_lines), "".join(stderr_lines)
        )

    def _log_stream(
        self, stream: Optional[IO[str]], log_level: int, lines: List[str]
    ) -> None:
        """Log process output line by line until the stream is depleted.

        Args:
            stream: The stream to read from.
            log_level: The log level to use.
            lines: Collects every line read.
        """
        if stream is None:
            return
        for line in iter(stream.readline, ""):
            lines.append(line)
            logger.log(log_level, f"\r{line.rstrip()}")
