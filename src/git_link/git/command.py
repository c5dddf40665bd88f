"""Thin wrapper around the git command-line program."""

import subprocess
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


def run_git(*args: str, cwd: Path | str | None = None) -> bytes:
    """Run a git command and return raw stdout without the trailing newline.

    Output is returned undecoded; callers decide how strictly to decode it.
    Raises ``subprocess.CalledProcessError`` on a non-zero exit and
    ``FileNotFoundError`` when git is not installed.
    """
    logger.debug("Running git", args=args, cwd=str(cwd) if cwd else None)
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        check=True,
    )
    return result.stdout.rstrip(b"\n")
