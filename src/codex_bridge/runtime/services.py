"""Task façade: generic agent request plus fixed-template writing tasks."""

from __future__ import annotations

import logging

from codex_bridge.config import BridgeSettings
from codex_bridge.runtime.backend import (
    AgentBackend,
    AgentRunRequest,
    AgentRunResult,
    CodexCliBackend,
)
from codex_bridge.runtime.errors import DecodeFailure, NonZeroExit
from codex_bridge.runtime.extraction import post_process_response, trim_response
from codex_bridge.runtime.failure_classifier import classify_agent_failure
from codex_bridge.runtime.probe import check_agent_installed
from codex_bridge.runtime.prompts import DEFAULT_IMAGE_SIZE, TASK_TEMPLATES, compose_prompt

logger = logging.getLogger(__name__)

AGENT_NAME = "codex"


def decode_agent_output(result: AgentRunResult) -> str:
    """Map a terminated agent run to trimmed stdout text or a typed error."""

    if not result.success:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise NonZeroExit(
            f"Codex CLI error: {stderr}",
            exit_code=result.exit_code,
            stderr=stderr,
            reason_code=classify_agent_failure(agent=AGENT_NAME, stderr=stderr),
        )

    try:
        response = result.stdout.decode("utf-8")
    except UnicodeDecodeError as error:
        raise DecodeFailure(f"Failed to parse Codex output: {error}") from error
    return trim_response(response)


class CodexBridge:
    """Stateless synchronous bridge to the Codex CLI agent.

    Each call spawns one subprocess and blocks until it terminates. Without
    explicit settings, ``CODEX_BRIDGE_*`` environment variables are used.
    """

    def __init__(
        self,
        settings: BridgeSettings | None = None,
        *,
        backend: AgentBackend | None = None,
    ) -> None:
        self.settings = settings or BridgeSettings.from_env()
        self.settings.validate()
        self.backend = backend or CodexCliBackend()

    def execute(self, composed_prompt: str) -> str:
        """Run the agent on an already composed prompt and return trimmed stdout."""

        result = self.backend.run(
            AgentRunRequest(
                prompt=composed_prompt,
                executable=self.settings.executable,
                model=self.settings.model,
                timeout_seconds=self.settings.timeout_seconds,
            ),
        )
        return decode_agent_output(result)

    def request(
        self,
        prompt: str,
        context: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Compose and run one prompt.

        ``max_tokens`` and ``temperature`` are accepted for compatibility with
        API-backed providers; the Codex CLI invocation does not take them.
        """

        if max_tokens is not None or temperature is not None:
            logger.debug(
                "Ignoring generation parameters: max_tokens=%s temperature=%s",
                max_tokens,
                temperature,
            )
        return self.execute(compose_prompt(prompt, context))

    def run_task(self, name: str, **arguments: str) -> str:
        """Run one fixed-template task from ``TASK_TEMPLATES``."""

        try:
            task = TASK_TEMPLATES[name]
        except KeyError as error:
            raise ValueError(f"Unknown task: {name!r}") from error

        prompt, context = task.render(arguments)
        response = self.request(
            prompt,
            context,
            max_tokens=task.max_tokens,
            temperature=task.temperature,
        )
        return post_process_response(response, task.post_process)

    def improve_text(self, text: str) -> str:
        return self.run_task("improve_text", text=text)

    def continue_story(self, context: str) -> str:
        return self.run_task("continue_story", context=context)

    def analyze_story(self, text: str) -> str:
        return self.run_task("analyze_story", text=text)

    def generate_image(self, prompt: str, size: str = DEFAULT_IMAGE_SIZE) -> str:
        """Ask the agent for an image and return only its URL."""

        return self.run_task("generate_image", prompt=prompt, size=size)

    def generate_character(self, description: str) -> str:
        return self.run_task("generate_character", description=description)

    def generate_plot_ideas(self, premise: str) -> str:
        return self.run_task("generate_plot_ideas", premise=premise)

    def check_agent_installed(self) -> bool:
        return check_agent_installed(
            self.settings.executable,
            timeout_seconds=self.settings.timeout_seconds,
        )
