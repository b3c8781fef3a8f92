"""Typed failures surfaced by the agent bridge."""

from __future__ import annotations


class BridgeError(RuntimeError):
    """Base class for every failure of one agent call."""

    kind = "bridge_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class SpawnFailure(BridgeError):
    """The agent subprocess could not be started."""

    kind = "spawn_failure"


class NonZeroExit(BridgeError):
    """The agent terminated with a non-zero exit status."""

    kind = "non_zero_exit"

    def __init__(
        self,
        detail: str,
        *,
        exit_code: int,
        stderr: str = "",
        reason_code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.exit_code = exit_code
        self.stderr = stderr
        self.reason_code = reason_code


class DecodeFailure(BridgeError):
    """Agent stdout is not valid UTF-8."""

    kind = "decode_failure"


class ExtractionFailure(BridgeError):
    """No image URL could be found in the agent response."""

    kind = "extraction_failure"

    def __init__(self, detail: str, *, response: str) -> None:
        super().__init__(detail)
        self.response = response


class AgentTimeout(BridgeError):
    """The agent exceeded the configured timeout and was killed."""

    kind = "agent_timeout"

    def __init__(self, detail: str, *, timeout_seconds: float) -> None:
        super().__init__(detail)
        self.timeout_seconds = timeout_seconds
