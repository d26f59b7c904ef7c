"""Exceptions raised by the Docker generator."""
from __future__ import annotations

from typing import Any


class DockerGenError(Exception):
    """Base class for generator failures."""


class UnsupportedProjectTypeError(DockerGenError):
    """Raised when the chosen project type has no templates yet."""

    def __init__(self, project_type: Any) -> None:
        self.project_type = project_type
        label = getattr(project_type, "value", project_type)
        super().__init__(f"Project type {label!r} is not implemented yet.")


class TemplateRenderError(DockerGenError):
    """Raised when a template cannot be loaded or rendered."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        super().__init__(f"Failed to render {template}: {reason}")


__all__ = ["DockerGenError", "TemplateRenderError", "UnsupportedProjectTypeError"]
