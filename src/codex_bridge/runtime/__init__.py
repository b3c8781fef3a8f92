"""Request composition, agent execution, and response extraction.

Every call is stateless: compose the prompt, spawn ``codex exec`` once,
map the terminated output to text or a typed ``BridgeError``.
"""

from codex_bridge.runtime.async_service import AsyncCodexBridge
from codex_bridge.runtime.errors import (
    AgentTimeout,
    BridgeError,
    DecodeFailure,
    ExtractionFailure,
    NonZeroExit,
    SpawnFailure,
)
from codex_bridge.runtime.extraction import extract_image_url, trim_response
from codex_bridge.runtime.probe import check_agent_installed
from codex_bridge.runtime.prompts import TASK_TEMPLATES, TaskTemplate, compose_prompt
from codex_bridge.runtime.services import CodexBridge, decode_agent_output

__all__ = [
    "TASK_TEMPLATES",
    "AgentTimeout",
    "AsyncCodexBridge",
    "BridgeError",
    "CodexBridge",
    "DecodeFailure",
    "ExtractionFailure",
    "NonZeroExit",
    "SpawnFailure",
    "TaskTemplate",
    "check_agent_installed",
    "compose_prompt",
    "decode_agent_output",
    "extract_image_url",
    "trim_response",
]
