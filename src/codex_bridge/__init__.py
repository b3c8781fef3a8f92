"""Bridge from host applications to the Codex CLI agent."""

__version__ = "0.1.0"
