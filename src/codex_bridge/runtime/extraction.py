"""Post-processing of agent stdout per task type."""

from __future__ import annotations

from codex_bridge.runtime.errors import ExtractionFailure
from codex_bridge.runtime.prompts import PostProcess

_URL_PREFIX = "http"


def trim_response(text: str) -> str:
    """Strip surrounding whitespace from an agent response."""

    return text.strip()


def extract_image_url(text: str) -> str:
    """Return the image URL from an agent response.

    A response that already starts with ``http`` is returned as is. Otherwise
    the first ``\\n``-separated line (in order) starting with ``http`` wins.
    A bare ``\\r`` or Unicode line separator does not start a new line.
    """

    trimmed = trim_response(text)
    if trimmed.startswith(_URL_PREFIX):
        return trimmed

    for line in trimmed.split("\n"):
        candidate = line.strip()
        if candidate.startswith(_URL_PREFIX):
            return candidate

    raise ExtractionFailure(
        f"Failed to extract image URL from response: {trimmed}",
        response=trimmed,
    )


def post_process_response(text: str, post_process: PostProcess) -> str:
    if post_process == "image_url":
        return extract_image_url(text)
    return trim_response(text)
