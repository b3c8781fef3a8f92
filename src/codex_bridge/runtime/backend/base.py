"""Backend interface for agent subprocess execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class AgentRunRequest:
    """Inputs required to execute one agent call."""

    prompt: str
    executable: str
    model: str
    timeout_seconds: float | None = None


@dataclass(slots=True)
class AgentRunResult:
    """Raw outcome of one terminated agent subprocess."""

    exit_code: int
    stdout: bytes
    stderr: bytes
    elapsed_seconds: float

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class AgentBackend(Protocol):
    """Protocol implemented by agent backends."""

    def run(self, request: AgentRunRequest) -> AgentRunResult:
        """Run the agent to completion and return its captured output."""
