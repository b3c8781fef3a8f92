"""Availability probe for the external agent."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)


def check_agent_installed(
    executable: str = "codex",
    *,
    timeout_seconds: float | None = None,
) -> bool:
    """Return True when ``<executable> --version`` starts and exits with code 0.

    Every failure (missing binary, permission error, non-zero exit, timeout)
    collapses to False.
    """

    try:
        completed = subprocess.run(  # noqa: S603
            [executable, "--version"],
            check=False,
            capture_output=True,
            stdin=subprocess.DEVNULL,
            timeout=timeout_seconds,
        )
    except subprocess.TimeoutExpired:
        logger.debug("Agent probe timed out: executable=%s", executable)
        return False
    except OSError as error:
        logger.debug("Agent probe failed to start: executable=%s error=%s", executable, error)
        return False

    logger.debug(
        "Agent probe finished: executable=%s exit_code=%d",
        executable,
        completed.returncode,
    )
    return completed.returncode == 0
