"""Prompt composition and fixed task templates."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

PostProcess = Literal["text", "image_url"]

DEFAULT_IMAGE_SIZE = "1024x1024"

IMPROVE_TEXT_PROMPT = (
    "다음 텍스트를 더 나은 문장으로 개선해주세요. "
    "원래의 의미와 톤은 유지하되, 문법과 표현을 향상시켜주세요:\n\n{text}"
)

CONTINUE_STORY_PROMPT = "이야기를 자연스럽게 이어서 작성해주세요."

ANALYZE_STORY_PROMPT = (
    "다음 스토리를 분석하고 캐릭터, 플롯, 구조에 대한 피드백을 제공해주세요:\n\n{text}"
)

GENERATE_IMAGE_PROMPT = """\
Please generate an image using DALL-E 3 with the following prompt and return ONLY \
the image URL (nothing else):

Prompt: {prompt}
Size: {size}"""

GENERATE_CHARACTER_PROMPT = (
    "다음 설명을 바탕으로 캐릭터의 상세한 프로필을 작성해주세요 "
    "(이름, 나이, 성격, 배경 등):\n\n{description}"
)

GENERATE_PLOT_IDEAS_PROMPT = "다음 전제를 바탕으로 5개의 플롯 아이디어를 제안해주세요:\n\n{premise}"


def compose_prompt(prompt: str, context: str | None = None) -> str:
    """Prepend optional context to the prompt, separated by one blank line."""

    if context is None:
        return prompt
    return f"{context}\n\n{prompt}"


@dataclass(frozen=True, slots=True)
class TaskTemplate:
    """One fixed-template task routed through the generic request."""

    name: str
    template: str
    parameters: tuple[str, ...]
    context_parameter: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    post_process: PostProcess = "text"

    def render(self, arguments: dict[str, str]) -> tuple[str, str | None]:
        """Return ``(prompt, context)`` for the given task arguments."""

        missing = [name for name in self.parameters if name not in arguments]
        if missing:
            raise TypeError(f"Task {self.name!r} missing argument(s): {', '.join(missing)}")
        unexpected = sorted(set(arguments) - set(self.parameters))
        if unexpected:
            raise TypeError(
                f"Task {self.name!r} got unexpected argument(s): {', '.join(unexpected)}",
            )

        template_values = {
            name: value for name, value in arguments.items() if name != self.context_parameter
        }
        prompt = self.template.format(**template_values)
        context = arguments[self.context_parameter] if self.context_parameter else None
        return prompt, context


TASK_TEMPLATES: MappingProxyType[str, TaskTemplate] = MappingProxyType(
    {
        task.name: task
        for task in (
            TaskTemplate(
                name="improve_text",
                template=IMPROVE_TEXT_PROMPT,
                parameters=("text",),
                max_tokens=1024,
            ),
            TaskTemplate(
                name="continue_story",
                template=CONTINUE_STORY_PROMPT,
                parameters=("context",),
                context_parameter="context",
                max_tokens=2048,
                temperature=0.8,
            ),
            TaskTemplate(
                name="analyze_story",
                template=ANALYZE_STORY_PROMPT,
                parameters=("text",),
                max_tokens=2048,
            ),
            TaskTemplate(
                name="generate_image",
                template=GENERATE_IMAGE_PROMPT,
                parameters=("prompt", "size"),
                post_process="image_url",
            ),
            TaskTemplate(
                name="generate_character",
                template=GENERATE_CHARACTER_PROMPT,
                parameters=("description",),
                max_tokens=1024,
            ),
            TaskTemplate(
                name="generate_plot_ideas",
                template=GENERATE_PLOT_IDEAS_PROMPT,
                parameters=("premise",),
                max_tokens=1536,
                temperature=0.9,
            ),
        )
    },
)
