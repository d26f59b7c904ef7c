from click.testing import CliRunner

from dockergen.cli import main


def test_cli_generates_nodejs_files(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCKERGEN_PLATFORM", "posix")
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path) as workdir:
        # project type, nodemon, port, image name, docker host
        result = runner.invoke(main, input="nodejs\ny\n8080\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Welcome to the Docker generator!" in result.output
        assert "dockerTask.sh" in result.output
        dockerfile = (tmp_path / workdir / "Dockerfile").read_text(encoding="utf-8")
        assert "EXPOSE 8080" in dockerfile


def test_cli_aspnet_exits_non_zero(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCKERGEN_PLATFORM", "posix")
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(main, input="1\n\n\n")

        assert result.exit_code == 1
        assert "Not implemented yet :(" in result.output


def test_cli_version():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "dockergen" in result.output


def test_cli_blank_nodemon_answer_installs_nodemon(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCKERGEN_PLATFORM", "posix")
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path) as workdir:
        result = runner.invoke(main, input="nodejs\n\n\n\n\n")

        assert result.exit_code == 0, result.output
        dockerfile = (tmp_path / workdir / "Dockerfile").read_text(encoding="utf-8")
        assert "RUN npm install nodemon -g" in dockerfile
        assert "EXPOSE 3000" in dockerfile


def test_cli_aspnet_exits_zero_without_strict_exit(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCKERGEN_PLATFORM", "posix")
    monkeypatch.setenv("DOCKERGEN_STRICT_EXIT", "false")
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path) as workdir:
        result = runner.invoke(main, input="aspnet\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Not implemented yet :(" in result.output
        assert list((tmp_path / workdir).iterdir()) == []
