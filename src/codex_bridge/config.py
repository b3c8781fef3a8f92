"""Runtime configuration for the Codex CLI bridge."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_EXECUTABLE = "codex"
DEFAULT_MODEL = "gpt-5.2"


@dataclass(slots=True)
class BridgeSettings:
    """Agent invocation settings.

    ``timeout_seconds=None`` runs the agent unbounded and ``max_concurrency=0``
    places no limit on concurrent subprocesses.
    """

    executable: str = DEFAULT_EXECUTABLE
    model: str = DEFAULT_MODEL
    timeout_seconds: float | None = None
    max_concurrency: int = 0

    @classmethod
    def from_env(cls) -> BridgeSettings:
        """Load settings from environment with defaults matching the stock agent."""

        return cls(
            executable=os.getenv("CODEX_BRIDGE_EXECUTABLE", DEFAULT_EXECUTABLE).strip()
            or DEFAULT_EXECUTABLE,
            model=os.getenv("CODEX_BRIDGE_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            timeout_seconds=_env_optional_float("CODEX_BRIDGE_TIMEOUT_SECONDS"),
            max_concurrency=_env_int("CODEX_BRIDGE_MAX_CONCURRENCY", default=0),
        )

    def validate(self) -> None:
        """Raise configuration error on invalid values."""

        if not self.executable.strip():
            raise ValueError("CODEX_BRIDGE_EXECUTABLE must not be empty.")
        if not self.model.strip():
            raise ValueError("CODEX_BRIDGE_MODEL must not be empty.")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("CODEX_BRIDGE_TIMEOUT_SECONDS must be > 0.")
        if self.max_concurrency < 0:
            raise ValueError("CODEX_BRIDGE_MAX_CONCURRENCY must be >= 0.")


def _env_optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as error:
        raise ValueError(f"Invalid {name} value: {raw!r}") from error


def _env_int(name: str, *, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as error:
        raise ValueError(f"Invalid {name} value: {raw!r}") from error
