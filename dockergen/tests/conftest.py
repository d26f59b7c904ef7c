import subprocess
from typing import Dict, List, Sequence, Tuple

import pytest
from rich.console import Console

from dockergen.config import DEFAULT_TEMPLATE_DIR, Settings
from dockergen.models import HostPlatform


class ScriptedPrompter:
    """Answers wizard questions from a message -> answer mapping and records what was asked."""

    def __init__(self, answers: Dict[str, object]) -> None:
        self.answers = answers
        self.asked: List[str] = []

    def choose(self, message: str, choices: Sequence[Tuple[str, str]]) -> str:
        self.asked.append(message)
        value = self.answers[message]
        assert value in {choice for _, choice in choices}
        return value

    def confirm(self, message: str, default: bool = True) -> bool:
        self.asked.append(message)
        return bool(self.answers.get(message, default))

    def ask(self, message: str, default: str) -> str:
        self.asked.append(message)
        return self.answers.get(message) or default


class FakeChmod:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: List[dict] = []

    def __call__(self, command, **kwargs):
        self.calls.append({"command": command, **kwargs})
        if self.fail:
            raise subprocess.CalledProcessError(1, command, stderr="Operation not permitted")
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")


@pytest.fixture()
def make_settings():
    def _make(platform: HostPlatform = HostPlatform.POSIX, **overrides) -> Settings:
        return Settings(platform=platform, template_dir=DEFAULT_TEMPLATE_DIR, **overrides)

    return _make


@pytest.fixture()
def project_dir(tmp_path):
    path = tmp_path / "MyApp"
    path.mkdir()
    return path


@pytest.fixture()
def console():
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture()
def scripted():
    return ScriptedPrompter


@pytest.fixture()
def fake_chmod():
    return FakeChmod
