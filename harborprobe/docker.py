"""Thin wrapper running the docker command line tool."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import List


class DockerError(Exception):
    """Raised when a docker command cannot be started or fails."""


@dataclass
class DockerClient:
    """Runs docker commands through the given executable."""

    executable: str = "docker"

    def status(self) -> None:
        """Check that the docker daemon answers."""
        self._run_quiet(["info"])

    def pull(self, image: str) -> None:
        if not image.strip():
            raise ValueError("empty image")
        self._run_streaming(["pull", image])

    def tag(self, source: str, target: str) -> None:
        if not source.strip() or not target.strip():
            raise ValueError("empty images")
        self._run_streaming(["tag", source, target])

    def push(self, image: str) -> None:
        if not image.strip():
            raise ValueError("empty image")
        self._run_streaming(["push", image])

    def login(self, username: str, password: str, uri: str) -> None:
        if not username.strip() or not password.strip():
            raise ValueError("invalid credential")
        self._run_streaming(["login", "-u", username, "-p", password, uri])

    def _command(self, args: List[str]) -> List[str]:
        return [self.executable, *args]

    def _run_quiet(self, args: List[str]) -> None:
        try:
            result = subprocess.run(
                self._command(args),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            raise DockerError(f"cannot run {self.executable}: {exc}") from exc
        if result.returncode != 0:
            raise DockerError(f"{self.executable} {args[0]} exited with status {result.returncode}")

    def _run_streaming(self, args: List[str]) -> None:
        try:
            process = subprocess.Popen(
                self._command(args),
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
            )
        except OSError as exc:
            raise DockerError(f"cannot run {self.executable}: {exc}") from exc
        with process as proc:
            for line in proc.stdout:
                text = line.rstrip("\r\n")
                print(f"{self.executable} out | {text}")
            returncode = proc.wait()
        if returncode != 0:
            raise DockerError(f"{self.executable} {args[0]} exited with status {returncode}")