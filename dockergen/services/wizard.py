"""Wizard orchestration: prompts, template selection, writing and the chmod step."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console

from dockergen.config import Settings
from dockergen.errors import UnsupportedProjectTypeError
from dockergen.logging_utils import get_log_manager, get_logger
from dockergen.models import HostPlatform, WizardResult
from dockergen.services.permissions import Runner, make_executable
from dockergen.services.prompts import Prompter, RichPrompter, collect_answers
from dockergen.services.render import write_artifacts
from dockergen.services.selector import plan_generation

LOGGER = get_logger(__name__)

READY_MESSAGE = "Your project is now ready to run in a Docker container!"
ERROR_BANNER = ":( errors occured."
UNSUPPORTED_MESSAGE = "Not implemented yet :("


class Wizard:
    """Runs one scaffolding session against a project directory."""

    def __init__(
        self,
        settings: Settings,
        *,
        cwd: Path,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
        chmod_runner: Optional[Runner] = None,
    ) -> None:
        self.settings = settings
        self.cwd = cwd
        self.console = console or Console()
        self.prompter = prompter or RichPrompter(self.console)
        self.chmod_runner = chmod_runner

    def run(self) -> WizardResult:
        """Ask, select, write and finalize; errors logged during the session mark it errored."""

        log_manager = get_log_manager()
        log_manager.clear()
        answers = collect_answers(self.prompter, cwd=self.cwd, settings=self.settings)
        try:
            plan = plan_generation(
                answers,
                platform=self.settings.platform,
                project_name=self.cwd.name,
                settings=self.settings,
            )
        except UnsupportedProjectTypeError as exc:
            LOGGER.debug(
                "%s",
                exc,
                extra={"event": "wizard.unsupported", "payload": {"project_type": answers.project_type.value}},
            )
            self.console.print(f"[red]{UNSUPPORTED_MESSAGE}[/red]")
            return WizardResult(unsupported=True, errored=True)

        written = write_artifacts(plan, self.cwd, template_dir=self.settings.template_dir)
        result = WizardResult(plan=plan, written=written)

        if plan.platform is HostPlatform.POSIX and plan.script.executable:
            make_executable(self.cwd / plan.script_name, runner=self.chmod_runner)

        result.errored = log_manager.error_count() > 0
        self._report(result)
        return result

    def _report(self, result: WizardResult) -> None:
        if result.errored:
            self.console.print(f"[red]{ERROR_BANNER}[/red]")
        elif result.plan is not None:
            self.console.print(READY_MESSAGE)
            self.console.print(
                f"Run [green]{result.plan.script_name}[/green] to build a Docker image and run your app in a container."
            )
        LOGGER.info(
            "Wizard finished with %d file(s) written",
            len(result.written),
            extra={
                "event": "wizard.complete",
                "payload": {"errored": result.errored, "written": [str(path) for path in result.written]},
            },
        )


__all__ = ["Wizard"]
