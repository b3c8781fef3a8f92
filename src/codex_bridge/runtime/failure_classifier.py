"""Deterministic reason codes for non-zero agent exits, for host-side messaging."""

from __future__ import annotations

import re

_REASON_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "billing_or_quota",
        re.compile(
            r"\bquota\b|\busage limit\b|\bresource_exhausted\b|\bbilling\b"
            r"|\binsufficient[_ ](?:quota|credits|funds)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "access_or_auth",
        re.compile(
            r"\bunauthori[sz]ed\b|\bforbidden\b|\binvalid api key\b|\bnot logged in\b"
            r"|\bauth(?:entication|orization)?\b",
            re.IGNORECASE,
        ),
    ),
    (
        "model_not_available",
        re.compile(
            r"\b(?:unknown|unsupported|invalid) model\b|\bmodel not found\b"
            r"|\bmodel is not available\b",
            re.IGNORECASE,
        ),
    ),
    (
        "rate_limited",
        re.compile(r"\btoo many requests\b|\brate[ _-]?limit(?:ed)?\b|\b429\b", re.IGNORECASE),
    ),
    (
        "network",
        re.compile(
            r"\bconnection (?:reset|refused)\b|\bnetwork error\b|\bcould not resolve host\b"
            r"|\btemporarily unavailable\b",
            re.IGNORECASE,
        ),
    ),
)


def classify_agent_failure(*, agent: str, stderr: str) -> str:
    """Return ``<agent>_<reason>`` for the first rule matching agent stderr.

    Rules are checked in order; ``<agent>_unknown`` when none matches.
    """

    for reason, pattern in _REASON_RULES:
        if pattern.search(stderr):
            return f"{agent}_{reason}"
    return f"{agent}_unknown"
