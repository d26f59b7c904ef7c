"""Render the selected templates and write them into the project directory."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from dockergen.errors import TemplateRenderError
from dockergen.logging_utils import get_logger
from dockergen.models import ArtifactSpec, GenerationPlan, HostPlatform

LOGGER = get_logger(__name__)


@lru_cache()
def _environment(template_dir: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_dir),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )


def render_artifact(artifact: ArtifactSpec, *, template_dir: Path) -> str:
    """Render a single artifact's template with its context."""

    try:
        template = _environment(str(template_dir)).get_template(artifact.template)
        return template.render(**artifact.context)
    except TemplateError as exc:
        LOGGER.error(
            "Failed to render template %s",
            artifact.template,
            extra={
                "event": "render.failed",
                "payload": {"template": artifact.template, "template_dir": str(template_dir)},
            },
        )
        raise TemplateRenderError(artifact.template, str(exc) or type(exc).__name__) from exc


def write_artifacts(plan: GenerationPlan, destination: Path, *, template_dir: Path) -> List[Path]:
    """Render every artifact of `plan` into `destination`, replacing existing files."""

    newline = "\r\n" if plan.platform is HostPlatform.WINDOWS else "\n"
    written: List[Path] = []
    for artifact in plan.artifacts:
        content = render_artifact(artifact, template_dir=template_dir)
        target = destination / artifact.destination
        # Command scripts need CRLF; the Dockerfile stays LF on every host.
        line_ending = newline if artifact is plan.script else "\n"
        with target.open("w", encoding="utf-8", newline=line_ending) as handle:
            handle.write(content)
        written.append(target)
        LOGGER.info(
            "Wrote %s from %s",
            artifact.destination,
            artifact.template,
            extra={
                "event": "render.write",
                "payload": {"destination": str(target), "chars": len(content)},
            },
        )
    return written


__all__ = ["render_artifact", "write_artifacts"]
