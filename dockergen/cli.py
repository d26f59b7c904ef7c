"""Command line entry point for the Docker generator."""
from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from dockergen import __version__
from dockergen.config import load_settings
from dockergen.logging_utils import configure_logging
from dockergen.services.wizard import Wizard

WELCOME_MESSAGE = (
    "Welcome to the [red]Docker[/red] generator!\n"
    "[green]Let's add Docker container magic to your app![/green]"
)


@click.command()
@click.version_option(__version__, prog_name="dockergen")
def main() -> None:
    """Add a Dockerfile and a build/run task script to the current project."""

    console = Console()
    settings = load_settings()
    configure_logging(level=settings.log_level, console=Console(stderr=True))

    console.print(Panel(WELCOME_MESSAGE, border_style="blue", expand=False))
    result = Wizard(settings, cwd=Path.cwd(), console=console).run()
    sys.exit(result.exit_code(strict=settings.strict_exit))


if __name__ == "__main__":
    main()
