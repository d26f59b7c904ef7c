from dockergen.logging_utils import get_log_manager
from dockergen.models import HostPlatform
from dockergen.services import prompts
from dockergen.services.wizard import ERROR_BANNER, READY_MESSAGE, UNSUPPORTED_MESSAGE, Wizard


def _wizard(settings, project_dir, console, prompter, chmod=None):
    return Wizard(settings, cwd=project_dir, console=console, prompter=prompter, chmod_runner=chmod)


def test_aspnet_writes_nothing(scripted, make_settings, project_dir, console, fake_chmod):
    chmod = fake_chmod()
    prompter = scripted({prompts.PROJECT_TYPE_MESSAGE: "aspnet"})
    result = _wizard(make_settings(), project_dir, console, prompter, chmod).run()

    assert result.unsupported is True
    assert result.exit_code() == 1
    assert result.exit_code(strict=False) == 0
    assert list(project_dir.iterdir()) == []
    assert chmod.calls == []
    assert console.export_text().count(UNSUPPORTED_MESSAGE) == 1
    assert get_log_manager().error_messages() == []


def test_nodejs_session_on_posix(scripted, make_settings, project_dir, console, fake_chmod):
    chmod = fake_chmod()
    prompter = scripted(
        {
            prompts.PROJECT_TYPE_MESSAGE: "nodejs",
            prompts.NODEMON_MESSAGE: True,
            prompts.PORT_MESSAGE: "8080",
            prompts.IMAGE_NAME_MESSAGE: "myapp_image",
        }
    )
    result = _wizard(make_settings(), project_dir, console, prompter, chmod).run()

    assert sorted(path.name for path in project_dir.iterdir()) == ["Dockerfile", "dockerTask.sh"]
    assert chmod.calls[0]["command"] == ["chmod", "+x", "dockerTask.sh"]
    assert result.errored is False
    assert result.exit_code() == 0
    output = console.export_text()
    assert READY_MESSAGE in output
    assert "Run dockerTask.sh to build a Docker image" in output


def test_windows_session_skips_chmod(scripted, make_settings, project_dir, console, fake_chmod):
    chmod = fake_chmod()
    prompter = scripted({prompts.PROJECT_TYPE_MESSAGE: "golang", prompts.GO_WEB_MESSAGE: False})
    result = _wizard(make_settings(HostPlatform.WINDOWS), project_dir, console, prompter, chmod).run()

    assert (project_dir / "dockerTask.cmd").exists()
    assert chmod.calls == []
    assert result.errored is False


def test_chmod_failure_keeps_files_and_reports(scripted, make_settings, project_dir, console, fake_chmod):
    prompter = scripted({prompts.PROJECT_TYPE_MESSAGE: "golang", prompts.GO_WEB_MESSAGE: True})
    result = _wizard(make_settings(), project_dir, console, prompter, fake_chmod(fail=True)).run()

    assert (project_dir / "Dockerfile").exists()
    assert (project_dir / "dockerTask.sh").exists()
    assert result.errored is True
    assert result.exit_code() == 1
    assert result.exit_code(strict=False) == 0
    errors = get_log_manager().error_messages()
    assert len(errors) == 1
    assert "Run chmod +x dockerTask.sh manually." in errors[0]
    output = console.export_text()
    assert "chmod +x" not in output
    assert ERROR_BANNER in output
    assert READY_MESSAGE not in output
