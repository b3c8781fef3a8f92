"""Shared test fixtures."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from codex_bridge.runtime.backend import AgentRunRequest, AgentRunResult

_FAKE_AGENT_SCRIPT = """
import json
import os
import sys
import time

if "--version" in sys.argv:
    print("codex-cli 0.0.0-test")
    raise SystemExit(int(os.environ.get("FAKE_AGENT_VERSION_EXIT", "0")))

argv_file = os.environ.get("FAKE_AGENT_ARGV_FILE")
if argv_file:
    with open(argv_file, "w", encoding="utf-8") as handle:
        json.dump(sys.argv[1:], handle, ensure_ascii=False)

time.sleep(float(os.environ.get("FAKE_AGENT_SLEEP", "0")))

if "FAKE_AGENT_STDOUT_HEX" in os.environ:
    sys.stdout.buffer.write(bytes.fromhex(os.environ["FAKE_AGENT_STDOUT_HEX"]))
elif "FAKE_AGENT_STDOUT" in os.environ:
    sys.stdout.buffer.write(os.environ["FAKE_AGENT_STDOUT"].encode("utf-8"))
else:
    sys.stdout.buffer.write(("echo: " + sys.argv[-1] + "\\n").encode("utf-8"))
sys.stdout.flush()

if "FAKE_AGENT_STDERR" in os.environ:
    sys.stderr.buffer.write(os.environ["FAKE_AGENT_STDERR"].encode("utf-8"))
    sys.stderr.flush()

raise SystemExit(int(os.environ.get("FAKE_AGENT_EXIT", "0")))
"""


def write_fake_agent(bin_dir: Path, name: str = "codex") -> Path:
    """Write an executable fake agent driven by FAKE_AGENT_* environment variables."""

    bin_dir.mkdir(parents=True, exist_ok=True)
    implementation = bin_dir / f"{name}_impl.py"
    implementation.write_text(_FAKE_AGENT_SCRIPT.strip() + "\n", "utf-8")

    if os.name == "nt":
        launcher = bin_dir / f"{name}.cmd"
        launcher.write_text(
            f'@echo off\r\n"{sys.executable}" "{implementation}" %*\r\n',
            "utf-8",
        )
        return launcher

    launcher = bin_dir / name
    launcher.write_text(
        f'#!/usr/bin/env sh\nexec "{sys.executable}" "{implementation}" "$@"\n',
        "utf-8",
    )
    launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)
    return launcher


@pytest.fixture()
def fake_agent(tmp_path: Path, monkeypatch) -> Path:
    """Put a fake ``codex`` first on PATH and return its path."""

    bin_dir = tmp_path / "bin"
    launcher = write_fake_agent(bin_dir)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    for name in list(os.environ):
        if name.startswith("FAKE_AGENT_"):
            monkeypatch.delenv(name)
    return launcher


@pytest.fixture(autouse=True)
def _isolate_bridge_env(monkeypatch) -> None:
    """Keep CODEX_BRIDGE_* settings of the host shell out of every test."""

    for name in list(os.environ):
        if name.startswith("CODEX_BRIDGE_"):
            monkeypatch.delenv(name)


@dataclass
class RecordingBackend:
    """In-process backend returning a canned result and recording requests."""

    stdout: bytes = b""
    stderr: bytes = b""
    exit_code: int = 0
    requests: list[AgentRunRequest] = field(default_factory=list)

    def run(self, request: AgentRunRequest) -> AgentRunResult:
        self.requests.append(request)
        return AgentRunResult(
            exit_code=self.exit_code,
            stdout=self.stdout,
            stderr=self.stderr,
            elapsed_seconds=0.0,
        )


@pytest.fixture()
def recording_backend() -> RecordingBackend:
    return RecordingBackend()
