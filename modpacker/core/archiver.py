from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from modpacker.config import ARCHIVER_PROBE_ARGS, ARCHIVER_PROBE_TOKEN

logger = logging.getLogger(__name__)


class ArchiverError(RuntimeError):
    """The external archiver could not be launched or exited non-zero."""

    def __init__(self, message: str, returncode: Optional[int] = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class Archiver:
    """
    Thin wrapper around the external archive tool (Archive2.exe).

    Every call blocks until the process exits and inherits the current
    working directory. Archive contents are never read by this tool.
    """

    def __init__(
        self,
        exe_path: str,
        probe_args: Sequence[str] = ARCHIVER_PROBE_ARGS,
        probe_token: str = ARCHIVER_PROBE_TOKEN,
        timeout: Optional[float] = None,
    ):
        self.exe_path = str(exe_path)
        self.probe_args = tuple(probe_args)
        self.probe_token = probe_token
        self.timeout = timeout

    def exists(self) -> bool:
        return Path(self.exe_path).is_file()

    def _creationflags(self) -> int:
        return subprocess.CREATE_NO_WINDOW if os.name == "nt" else 0

    def probe(self) -> bool:
        """
        True when the probe invocation prints the identifying token.
        Launch failures and timeouts count as a failed probe.
        """
        command = [self.exe_path, *self.probe_args]
        logger.debug("Probing archiver: %s", command)
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout or 30,
                creationflags=self._creationflags(),
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("Archiver probe failed to run: %s", e)
            return False

        output = (proc.stdout or "") + (proc.stderr or "")
        return self.probe_token.lower() in output.lower()

    def _run(self, args: List[str]) -> str:
        command = [self.exe_path, *args]
        logger.debug("Running: %s", command)
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                creationflags=self._creationflags(),
            )
        except OSError as e:
            raise ArchiverError(f"Could not run archiver {self.exe_path}: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ArchiverError(f"Archiver timed out: {' '.join(command)}") from e

        output = (proc.stdout or "") + (proc.stderr or "")
        if proc.returncode != 0:
            raise ArchiverError(
                f"Archiver failed with return code {proc.returncode}: {' '.join(command)}",
                returncode=proc.returncode,
                output=output,
            )
        return output

    def extract(self, archive: str, dest: str) -> None:
        self._run([str(archive), f"-extract={dest}", "-quiet"])

    def create(self, sources: Sequence[str], archive: str, root: str, fmt: str) -> None:
        if not sources:
            raise ValueError("At least one source folder is required to build an archive.")
        self._run(
            [
                ",".join(str(s) for s in sources),
                f"-create={archive}",
                f"-root={root}",
                f"-format={fmt}",
                "-quiet",
            ]
        )
