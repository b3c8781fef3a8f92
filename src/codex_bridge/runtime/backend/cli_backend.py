"""Subprocess-based backend for the Codex CLI agent."""

from __future__ import annotations

import logging
import subprocess
import time

from codex_bridge.runtime.backend.base import AgentRunRequest, AgentRunResult
from codex_bridge.runtime.errors import AgentTimeout, SpawnFailure

logger = logging.getLogger(__name__)


class CodexCliBackend:
    """Run ``codex exec`` non-interactively and capture its terminated output."""

    def run(self, request: AgentRunRequest) -> AgentRunResult:
        run_args = build_run_args(
            executable=request.executable,
            model=request.model,
            prompt=request.prompt,
        )
        logger.debug(
            "Spawning agent: executable=%s model=%s prompt_chars=%d",
            request.executable,
            request.model,
            len(request.prompt),
        )

        start_monotonic = time.monotonic()
        try:
            completed = subprocess.run(  # noqa: S603
                run_args,
                check=False,
                capture_output=True,
                stdin=subprocess.DEVNULL,
                timeout=request.timeout_seconds,
            )
        except subprocess.TimeoutExpired as error:
            raise AgentTimeout(
                f"Codex CLI timed out after {request.timeout_seconds}s",
                timeout_seconds=request.timeout_seconds or 0,
            ) from error
        except OSError as error:
            raise SpawnFailure(f"Failed to execute Codex CLI: {error}") from error

        elapsed = time.monotonic() - start_monotonic
        logger.debug(
            "Agent finished: exit_code=%d elapsed=%.1fs stdout_bytes=%d",
            completed.returncode,
            elapsed,
            len(completed.stdout),
        )
        return AgentRunResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            elapsed_seconds=elapsed,
        )


def build_run_args(*, executable: str, model: str, prompt: str) -> list[str]:
    """Return the fixed argv; the prompt is always the last positional argument."""

    return [
        executable,
        "exec",
        "--model",
        model,
        "--skip-git-repo-check",
        prompt,
    ]
