"""Core Pydantic models for the Docker generator."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProjectType(str, Enum):
    """Languages offered by the wizard."""

    ASPNET = "aspnet"
    GOLANG = "golang"
    NODEJS = "nodejs"

    @property
    def label(self) -> str:
        return _PROJECT_LABELS[self]


_PROJECT_LABELS = {
    ProjectType.ASPNET: "ASP.NET 5",
    ProjectType.GOLANG: "Golang",
    ProjectType.NODEJS: "Node.js",
}


class HostPlatform(str, Enum):
    """Shell flavour the generated script targets."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def script_extension(self) -> str:
        return ".cmd" if self is HostPlatform.WINDOWS else ".sh"


class SessionAnswers(BaseModel):
    """Answers collected by the prompt sequence for one wizard run."""

    project_type: ProjectType
    use_monitor: bool = Field(False, description="Install and launch through nodemon (Node.js only).")
    uses_web_server: bool = Field(False, description="The Go project serves HTTP (Go only).")
    port_number: Optional[str] = Field(
        None,
        description="Port the app listens on, kept verbatim as typed by the user.",
    )
    image_name: str = Field(..., description="Name of the image built by the task script.")
    docker_host_name: str = Field("default", description="docker-machine host used to build and run.")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def drop_unrelated_answers(cls, data: Any) -> Any:
        """Clear follow-up answers that do not apply to the chosen project type."""

        if not isinstance(data, dict):
            return data
        values = dict(data)
        try:
            project_type = ProjectType(values.get("project_type"))
        except ValueError:
            return values
        if project_type is not ProjectType.NODEJS:
            values["use_monitor"] = False
        if project_type is not ProjectType.GOLANG:
            values["uses_web_server"] = False
        wants_port = project_type is ProjectType.NODEJS or (
            project_type is ProjectType.GOLANG and bool(values.get("uses_web_server"))
        )
        if not wants_port:
            values["port_number"] = None
        return values


class ArtifactSpec(BaseModel):
    """A template to render and the file it is written to."""

    template: str = Field(..., description="Template filename inside the template directory.")
    destination: str = Field(..., description="Output filename relative to the project directory.")
    context: Dict[str, Any] = Field(default_factory=dict, description="Values injected into the template.")
    executable: bool = Field(False, description="Mark the written file executable on POSIX hosts.")

    model_config = ConfigDict(frozen=True)


class GenerationPlan(BaseModel):
    """Everything needed to write the Docker artifacts for one session."""

    project_type: ProjectType
    platform: HostPlatform
    dockerfile: ArtifactSpec
    script: ArtifactSpec

    model_config = ConfigDict(frozen=True)

    @property
    def artifacts(self) -> List[ArtifactSpec]:
        return [self.dockerfile, self.script]

    @property
    def script_name(self) -> str:
        return self.script.destination


class WizardResult(BaseModel):
    """Outcome of a wizard run as reported to the user."""

    plan: Optional[GenerationPlan] = None
    written: List[Path] = Field(default_factory=list)
    errored: bool = False
    unsupported: bool = False

    def exit_code(self, *, strict: bool = True) -> int:
        if (self.unsupported or self.errored) and strict:
            return 1
        return 0


__all__ = [
    "ArtifactSpec",
    "GenerationPlan",
    "HostPlatform",
    "ProjectType",
    "SessionAnswers",
    "WizardResult",
]
