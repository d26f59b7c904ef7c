"""Best-effort permission fix for the generated task script."""
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from dockergen.logging_utils import get_logger

LOGGER = get_logger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def chmod_command(script_name: str) -> str:
    return f"chmod +x {script_name}"


def make_executable(script: Path, *, runner: Optional[Runner] = None) -> bool:
    """Run `chmod +x` on `script`; log the manual fix and return False on failure."""

    run = runner or subprocess.run
    command: Sequence[str] = ["chmod", "+x", script.name]
    try:
        run(
            list(command),
            cwd=str(script.parent),
            check=True,
            text=True,
            capture_output=True,
        )
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        _log_failure(script, detail)
        return False
    except OSError as exc:
        _log_failure(script, str(exc))
        return False

    LOGGER.info(
        "Marked %s executable",
        script.name,
        extra={"event": "permissions.chmod", "payload": {"script": str(script)}},
    )
    return True


def _log_failure(script: Path, detail: str) -> None:
    LOGGER.error(
        "Error making script executable (%s). Run %s manually.",
        detail,
        chmod_command(script.name),
        extra={
            "event": "permissions.chmod_failed",
            "payload": {"script": str(script), "detail": detail, "command": chmod_command(script.name)},
        },
    )


__all__ = ["chmod_command", "make_executable"]
