"""Controllers for bridge CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from codex_bridge.config import BridgeSettings
from codex_bridge.runtime.errors import BridgeError, NonZeroExit
from codex_bridge.runtime.services import CodexBridge


@dataclass(slots=True)
class AgentOptions:
    """Global CLI overrides applied on top of environment settings."""

    executable: str | None = None
    model: str | None = None
    timeout_seconds: float | None = None


@dataclass(slots=True)
class RequestCommand:
    """CLI input for the generic request."""

    prompt: str
    context: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None


@dataclass(slots=True)
class TaskCommand:
    """CLI input for one fixed-template task."""

    task: str
    arguments: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class BridgeCommandResult:
    """Command report to render in CLI."""

    lines: list[str]
    success: bool


class BridgeCliController:
    """Resolves settings and runs bridge operations for the CLI."""

    def check(self, options: AgentOptions) -> BridgeCommandResult:
        try:
            settings = _resolve_settings(options)
        except ValueError as error:
            return BridgeCommandResult(lines=[str(error)], success=False)

        available = CodexBridge(settings).check_agent_installed()
        return BridgeCommandResult(
            lines=[
                f"agent={settings.executable} available={'yes' if available else 'no'}",
            ],
            success=available,
        )

    def request(self, options: AgentOptions, command: RequestCommand) -> BridgeCommandResult:
        try:
            bridge = CodexBridge(_resolve_settings(options))
            text = bridge.request(
                command.prompt,
                command.context,
                max_tokens=command.max_tokens,
                temperature=command.temperature,
            )
        except (BridgeError, ValueError) as error:
            return _failure(error)
        return BridgeCommandResult(lines=[text], success=True)

    def run_task(self, options: AgentOptions, command: TaskCommand) -> BridgeCommandResult:
        try:
            bridge = CodexBridge(_resolve_settings(options))
            text = bridge.run_task(command.task, **command.arguments)
        except (BridgeError, ValueError) as error:
            return _failure(error)
        return BridgeCommandResult(lines=[text], success=True)


def _resolve_settings(options: AgentOptions) -> BridgeSettings:
    settings = BridgeSettings.from_env()
    if options.executable is not None:
        settings.executable = options.executable
    if options.model is not None:
        settings.model = options.model
    if options.timeout_seconds is not None:
        settings.timeout_seconds = options.timeout_seconds
    settings.validate()
    return settings


def _failure(error: Exception) -> BridgeCommandResult:
    if isinstance(error, NonZeroExit):
        lines = [
            f"{error.kind}: exit_code={error.exit_code} reason={error.reason_code}",
            error.detail,
        ]
    elif isinstance(error, BridgeError):
        lines = [f"{error.kind}: {error.detail}"]
    else:
        lines = [str(error)]
    return BridgeCommandResult(lines=lines, success=False)
