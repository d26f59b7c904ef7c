"""Interactive question sequence for the wizard."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence, Tuple

from rich.console import Console
from rich.prompt import Confirm, Prompt

from dockergen.config import Settings
from dockergen.logging_utils import get_logger
from dockergen.models import ProjectType, SessionAnswers

LOGGER = get_logger(__name__)

PROJECT_TYPE_MESSAGE = "What language is your project using?"
NODEMON_MESSAGE = "Do you want to use Nodemon?"
GO_WEB_MESSAGE = "Does your Go project use a web server?"
PORT_MESSAGE = "Which port is your app listening to?"
IMAGE_NAME_MESSAGE = "What do you want to name your image?"
DOCKER_HOST_MESSAGE = "What's the name of your docker host machine?"


class Prompter(Protocol):
    """Source of answers for the wizard questions."""

    def choose(self, message: str, choices: Sequence[Tuple[str, str]]) -> str:
        ...

    def confirm(self, message: str, default: bool = True) -> bool:
        ...

    def ask(self, message: str, default: str) -> str:
        ...


class RichPrompter:
    """Prompter backed by `rich.prompt` on a terminal console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def choose(self, message: str, choices: Sequence[Tuple[str, str]]) -> str:
        self.console.print(f"[bold]{message}[/bold]")
        for index, (label, value) in enumerate(choices, 1):
            self.console.print(f"  {index}) {label} [dim]({value})[/dim]")
        lookup = {str(index): value for index, (_, value) in enumerate(choices, 1)}
        lookup.update({value: value for _, value in choices})
        answer = Prompt.ask(
            "  Enter number or name",
            console=self.console,
            choices=list(lookup),
            show_choices=False,
        )
        return lookup[answer]

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, console=self.console, default=default)

    def ask(self, message: str, default: str) -> str:
        answer = Prompt.ask(message, console=self.console, default=default)
        return answer.strip() or default


def default_image_name(cwd: Path) -> str:
    """Suggested image name: lowercased directory name with an `_image` suffix."""

    return f"{cwd.name.lower()}_image"


def collect_answers(prompter: Prompter, *, cwd: Path, settings: Settings) -> SessionAnswers:
    """Ask the wizard questions in order, skipping those the project type rules out."""

    choices = [(project_type.label, project_type.value) for project_type in ProjectType]
    project_type = ProjectType(prompter.choose(PROJECT_TYPE_MESSAGE, choices))

    use_monitor = False
    uses_web_server = False
    if project_type is ProjectType.NODEJS:
        use_monitor = prompter.confirm(NODEMON_MESSAGE, default=True)
    if project_type is ProjectType.GOLANG:
        uses_web_server = prompter.confirm(GO_WEB_MESSAGE, default=True)

    port_number: Optional[str] = None
    if project_type is ProjectType.NODEJS or (project_type is ProjectType.GOLANG and uses_web_server):
        port_number = prompter.ask(PORT_MESSAGE, default=settings.default_port) or settings.default_port

    image_name = prompter.ask(IMAGE_NAME_MESSAGE, default=default_image_name(cwd)) or default_image_name(cwd)
    docker_host_name = (
        prompter.ask(DOCKER_HOST_MESSAGE, default=settings.docker_host_name) or settings.docker_host_name
    )

    answers = SessionAnswers(
        project_type=project_type,
        use_monitor=use_monitor,
        uses_web_server=uses_web_server,
        port_number=port_number,
        image_name=image_name,
        docker_host_name=docker_host_name,
    )
    LOGGER.debug(
        "Collected answers for %s project",
        project_type.value,
        extra={"event": "prompts.collected", "payload": answers},
    )
    return answers


__all__ = ["Prompter", "RichPrompter", "collect_answers", "default_image_name"]
