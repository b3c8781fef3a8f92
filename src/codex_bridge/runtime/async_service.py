"""Asyncio façade that offloads blocking agent calls to worker threads."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TypeVar

from codex_bridge.config import BridgeSettings
from codex_bridge.runtime.backend import AgentBackend
from codex_bridge.runtime.prompts import DEFAULT_IMAGE_SIZE
from codex_bridge.runtime.services import CodexBridge

T = TypeVar("T")


class AsyncCodexBridge:
    """Coroutine counterpart of ``CodexBridge``.

    Each call suspends the awaiting task until the subprocess terminates while
    other tasks on the loop keep running. Spawned subprocesses are never
    cancelled; cancelling the awaiting task only abandons the result.
    ``settings.max_concurrency`` bounds in-flight subprocesses when > 0.
    """

    def __init__(
        self,
        settings: BridgeSettings | None = None,
        *,
        backend: AgentBackend | None = None,
    ) -> None:
        self.bridge = CodexBridge(settings, backend=backend)
        limit = self.bridge.settings.max_concurrency
        self._semaphore = asyncio.Semaphore(limit) if limit > 0 else None

    async def _offload(self, func: Callable[..., T], /, *args, **kwargs) -> T:
        if self._semaphore is None:
            return await asyncio.to_thread(func, *args, **kwargs)
        async with self._semaphore:
            return await asyncio.to_thread(func, *args, **kwargs)

    async def request(
        self,
        prompt: str,
        context: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        return await self._offload(
            self.bridge.request,
            prompt,
            context,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    async def run_task(self, name: str, **arguments: str) -> str:
        return await self._offload(self.bridge.run_task, name, **arguments)

    async def improve_text(self, text: str) -> str:
        return await self._offload(self.bridge.improve_text, text)

    async def continue_story(self, context: str) -> str:
        return await self._offload(self.bridge.continue_story, context)

    async def analyze_story(self, text: str) -> str:
        return await self._offload(self.bridge.analyze_story, text)

    async def generate_image(self, prompt: str, size: str = DEFAULT_IMAGE_SIZE) -> str:
        return await self._offload(self.bridge.generate_image, prompt, size)

    async def generate_character(self, description: str) -> str:
        return await self._offload(self.bridge.generate_character, description)

    async def generate_plot_ideas(self, premise: str) -> str:
        return await self._offload(self.bridge.generate_plot_ideas, premise)

    async def check_agent_installed(self) -> bool:
        return await self._offload(self.bridge.check_agent_installed)
