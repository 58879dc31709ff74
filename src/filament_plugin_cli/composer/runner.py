"""Invoke composer in the host project."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120


class ComposerRunner:
    """Run composer commands from the project root."""

    def __init__(self, project_root: Path, executable: str = "composer") -> None:
        self.project_root = Path(project_root)
        self.executable = executable

    def update(self, package: str, timeout: int = DEFAULT_TIMEOUT) -> bool:
        """Run ``composer update <package> --no-interaction``. True on exit code 0."""
        args = [self.executable, "update", package, "--no-interaction"]
        try:
            completed = subprocess.run(
                args,
                cwd=str(self.project_root),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                timeout=timeout,
            )
        except FileNotFoundError:
            logger.warning("%s executable not found on PATH", self.executable)
            return False
        except subprocess.TimeoutExpired:
            logger.warning("%s timed out after %ss", " ".join(args), timeout)
            return False

        if completed.returncode != 0:
            logger.warning(
                "%s exited with %s: %s",
                " ".join(args),
                completed.returncode,
                (completed.stderr or "").strip(),
            )
            return False
        return True


__all__ = ["ComposerRunner", "DEFAULT_TIMEOUT"]
