"""Agent backend implementations."""

from codex_bridge.runtime.backend.base import AgentBackend, AgentRunRequest, AgentRunResult
from codex_bridge.runtime.backend.cli_backend import CodexCliBackend, build_run_args

__all__ = [
    "AgentBackend",
    "AgentRunRequest",
    "AgentRunResult",
    "CodexCliBackend",
    "build_run_args",
]
