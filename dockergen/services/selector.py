"""Template selection for a wizard session.

Maps the collected answers and the host platform onto the two artifacts the
generator writes. Nothing here touches the terminal or the file system.
"""
from __future__ import annotations

from typing import Optional

from dockergen.config import Settings
from dockergen.errors import UnsupportedProjectTypeError
from dockergen.logging_utils import get_logger
from dockergen.models import ArtifactSpec, GenerationPlan, HostPlatform, ProjectType, SessionAnswers

LOGGER = get_logger(__name__)

DOCKERFILE_NAME = "Dockerfile"
SCRIPT_BASENAME = "dockerTask"

NODEMON_INSTALL_COMMAND = "RUN npm install nodemon -g"
NODEMON_RUN_COMMAND = 'CMD ["nodemon"]'
NODE_RUN_COMMAND = 'CMD ["node", "./bin/www"]'

_NODE_RUN_COMMANDS = {
    (HostPlatform.POSIX, True): "docker run -di -p $publicPort:$containerPort -v `pwd`:/src $imageName",
    (HostPlatform.POSIX, False): "docker run -di -p $publicPort:$containerPort $imageName",
    (HostPlatform.WINDOWS, True): 'docker run -di -p %publicPort%:%containerPort% -v "%cd%":/src %imageName%',
    (HostPlatform.WINDOWS, False): "docker run -di -p %publicPort%:%containerPort% %imageName%",
}


def destination_script_name(platform: HostPlatform) -> str:
    """Return the task script filename written for `platform`."""

    return f"{SCRIPT_BASENAME}{platform.script_extension}"


def script_template_name(project_type: ProjectType, platform: HostPlatform) -> str:
    if project_type is ProjectType.NODEJS:
        return f"_dockerTaskNodejs{platform.script_extension}"
    if project_type is ProjectType.GOLANG:
        return f"_dockerTaskGolang{platform.script_extension}"
    raise UnsupportedProjectTypeError(project_type)


def dockerfile_template_name(project_type: ProjectType) -> str:
    if project_type in (ProjectType.NODEJS, ProjectType.GOLANG):
        return f"_Dockerfile.{project_type.value}"
    raise UnsupportedProjectTypeError(project_type)


def node_container_run_command(platform: HostPlatform, use_monitor: bool) -> str:
    """Container run command for Node.js; nodemon needs the source mounted to see edits."""

    return _NODE_RUN_COMMANDS[(platform, use_monitor)]


def golang_open_web_site_command(platform: HostPlatform, port_number: str) -> str:
    """Command opening the browser at the docker host address and published port."""

    if platform is HostPlatform.WINDOWS:
        return "for /f %%i in ('docker-machine ip %dockerHostName%') do start http://%%i:%publicPort%"
    return f'open "http://$(docker-machine ip $dockerHostName):{port_number}"'


def _plan_nodejs(
    answers: SessionAnswers, platform: HostPlatform, settings: Settings
) -> tuple[ArtifactSpec, ArtifactSpec]:
    port_number = answers.port_number or settings.default_port
    if answers.use_monitor:
        nodemon_command = NODEMON_INSTALL_COMMAND
        run_command = NODEMON_RUN_COMMAND
    else:
        nodemon_command = ""
        run_command = NODE_RUN_COMMAND

    dockerfile = ArtifactSpec(
        template=dockerfile_template_name(ProjectType.NODEJS),
        destination=DOCKERFILE_NAME,
        context={
            "image_name": settings.node_base_image,
            "nodemon_command": nodemon_command,
            "port_number": port_number,
            "run_command": run_command,
        },
    )
    script = ArtifactSpec(
        template=script_template_name(ProjectType.NODEJS, platform),
        destination=destination_script_name(platform),
        context={
            "image_name": answers.image_name,
            "port_number": port_number,
            "docker_host_name": answers.docker_host_name,
            "container_run_command": node_container_run_command(platform, answers.use_monitor),
        },
        executable=True,
    )
    return dockerfile, script


def _plan_golang(
    answers: SessionAnswers, platform: HostPlatform, project_name: str, settings: Settings
) -> tuple[ArtifactSpec, ArtifactSpec]:
    open_web_site_command = ""
    port_number: Optional[str] = None
    run_image_command = f"docker run -di {answers.image_name}"

    if answers.uses_web_server:
        port_number = answers.port_number or settings.default_port
        open_web_site_command = golang_open_web_site_command(platform, port_number)
        run_image_command = f"docker run -di -p {port_number}:{port_number} {answers.image_name}"

    dockerfile = ArtifactSpec(
        template=dockerfile_template_name(ProjectType.GOLANG),
        destination=DOCKERFILE_NAME,
        context={
            "image_name": settings.golang_base_image,
            "project_name": project_name,
        },
    )
    script = ArtifactSpec(
        template=script_template_name(ProjectType.GOLANG, platform),
        destination=destination_script_name(platform),
        context={
            "image_name": answers.image_name,
            "port_number": port_number,
            "docker_host_name": answers.docker_host_name,
            "run_image_command": run_image_command,
            "open_web_site_command": open_web_site_command,
        },
        executable=True,
    )
    return dockerfile, script


def plan_generation(
    answers: SessionAnswers,
    *,
    platform: HostPlatform,
    project_name: str,
    settings: Optional[Settings] = None,
) -> GenerationPlan:
    """Select the templates and render values for a session.

    Raises `UnsupportedProjectTypeError` for project types without templates.
    """

    resolved_settings = settings or Settings(platform=platform)
    if answers.project_type is ProjectType.NODEJS:
        dockerfile, script = _plan_nodejs(answers, platform, resolved_settings)
    elif answers.project_type is ProjectType.GOLANG:
        dockerfile, script = _plan_golang(answers, platform, project_name, resolved_settings)
    else:
        raise UnsupportedProjectTypeError(answers.project_type)

    LOGGER.debug(
        "Selected %s and %s for %s on %s",
        dockerfile.template,
        script.template,
        answers.project_type.value,
        platform.value,
        extra={
            "event": "selector.plan",
            "payload": {
                "project_type": answers.project_type.value,
                "platform": platform.value,
                "script": script.destination,
            },
        },
    )
    return GenerationPlan(
        project_type=answers.project_type,
        platform=platform,
        dockerfile=dockerfile,
        script=script,
    )


__all__ = [
    "DOCKERFILE_NAME",
    "destination_script_name",
    "dockerfile_template_name",
    "golang_open_web_site_command",
    "node_container_run_command",
    "plan_generation",
    "script_template_name",
]
