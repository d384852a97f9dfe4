"""Shared test fixtures for context-probe tests.

This module provides:
- make_executable: writes throwaway executables that run a Python body
- mock_assistant: the mock assistant CLI from tests/fixtures
- RecordingInvoker: an in-process invoker that records call order
"""

import asyncio
import stat
import sys
import textwrap
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from context_probe.errors import InvocationError
from context_probe.shared.logging import configure_logging

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep structlog on stderr at warning level for every test."""
    configure_logging("warning")


def _write_wrapper(path: Path, script: Path) -> Path:
    """Write a shell wrapper that runs a Python script with this interpreter."""
    path.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_executable(tmp_path) -> Callable[[str, str], Path]:
    """Factory for executables whose behaviour is a snippet of Python.

    Returns a function taking (name, body) and returning the executable path.
    """

    def _make(name: str, body: str) -> Path:
        script = tmp_path / f"{name}_impl.py"
        script.write_text(textwrap.dedent(body))
        return _write_wrapper(tmp_path / name, script)

    return _make


@pytest.fixture
def mock_assistant(tmp_path) -> Path:
    """Executable path of the mock assistant CLI."""
    return _write_wrapper(tmp_path / "claude", FIXTURES_DIR / "mock_assistant.py")


@dataclass
class RecordingInvoker:
    """Invoker that answers from a table and records every event in order."""

    replies: dict[tuple[str, bool], str] = field(default_factory=dict)
    default_reply: str = "ok"
    fail_on: str | None = None
    events: list[tuple[str, ...]] = field(default_factory=list)
    calls: list[tuple[str, bool]] = field(default_factory=list)

    async def invoke(self, prompt: str, use_continue: bool = False) -> str:
        self.calls.append((prompt, use_continue))
        self.events.append(("start", prompt))
        await asyncio.sleep(0.01)
        if self.fail_on and self.fail_on in prompt:
            self.events.append(("fail", prompt))
            raise InvocationError(1, f"refused: {prompt}")
        self.events.append(("end", prompt))
        return self.replies.get((prompt, use_continue), self.default_reply)


@pytest.fixture
def recording_invoker() -> RecordingInvoker:
    """Fixture providing a RecordingInvoker."""
    return RecordingInvoker()
