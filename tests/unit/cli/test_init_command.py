"""
Init Command Tests
CliRunner로 실제 파일시스템에 프로젝트를 생성하고 종료 코드/출력/결과 트리 확인
"""

import sys

import pytest
from typer.testing import CliRunner

from mlscaffold.cli.commands.init_command import build_runner, get_project_name
from mlscaffold.cli.main_commands import app
from mlscaffold.scaffold.external import CREATE_ENV, VCS_INIT
from mlscaffold.settings import ScaffoldConfig
from tests.helpers import FileBuilder

runner = CliRunner()


def _flat(output: str) -> str:
    """Rich 줄바꿈 영향을 받지 않도록 공백 정규화"""
    return " ".join(output.split())


class TestInitCommandSuccess:
    def test_creates_project(self, clean_config_env):
        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env"]
        )

        assert result.exit_code == 0, result.output
        root = clean_config_env / "demo_project"
        assert (root / "README.md").read_text() == "# demo_project"
        assert (root / "logs" / "logs.log").is_file()
        assert (root / "research" / "data_ingestion.ipynb").is_file()
        assert "프로젝트 생성 완료" in result.output
        assert "[1/7] root" in result.output
        assert "skipped" in result.output

    def test_env_dir_option_written_to_gitignore(self, clean_config_env):
        result = runner.invoke(
            app,
            ["demo_project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env", "--env-dir", "env"],
        )

        assert result.exit_code == 0, result.output
        gitignore = (clean_config_env / "demo_project" / ".gitignore").read_text()
        assert gitignore == "env/\nartifacts/\n"

    def test_verbose_shows_entry_logs(self, clean_config_env):
        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env", "-v"]
        )

        assert result.exit_code == 0, result.output
        assert "[SCAF:directories]" in result.output
        assert "✓" in result.output

    def test_interactive_name_prompt_retries_until_valid(self, clean_config_env):
        result = runner.invoke(
            app,
            ["-p", str(clean_config_env), "--skip-vcs", "--skip-env"],
            input="bad name\ndemo_project\n",
        )

        assert result.exit_code == 0, result.output
        assert "영문자, 숫자, 밑줄(_)만 사용할 수 있습니다." in result.output
        assert (clean_config_env / "demo_project" / "main.py").is_file()
        assert not (clean_config_env / "bad name").exists()

    def test_external_commands_from_config(self, clean_config_env):
        config_path = FileBuilder.create_yaml_file(
            clean_config_env / "scaffold.yaml",
            {
                "commands": {
                    "vcs_init": [sys.executable, "-c", "open('vcs_marker', 'w').close()"],
                    "create_env": [sys.executable, "-c", "open('env_marker', 'w').close()"],
                }
            },
        )
        parent = clean_config_env / "projects"
        parent.mkdir()

        result = runner.invoke(app, ["demo_project", "-p", str(parent), "-c", str(config_path)])

        assert result.exit_code == 0, result.output
        root = parent / "demo_project"
        assert (root / "vcs_marker").is_file()
        assert (root / "env_marker").is_file()
        assert "ok" in result.output

    def test_next_steps_point_at_project_root(self, clean_config_env):
        parent = clean_config_env / "workspace"
        parent.mkdir()

        result = runner.invoke(app, ["demo_project", "-p", str(parent), "--skip-vcs", "--skip-env"])

        assert result.exit_code == 0, result.output
        assert f"cd {parent / 'demo_project'}\n" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("mlscaffold ")


class TestInitCommandFailures:
    def test_invalid_name(self, clean_config_env):
        result = runner.invoke(
            app, ["my project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env"]
        )

        assert result.exit_code == 1
        assert "Invalid project name" in _flat(result.output)
        assert not (clean_config_env / "my project").exists()

    def test_existing_root(self, clean_config_env):
        existing = clean_config_env / "demo_project"
        existing.mkdir()
        (existing / "notes.txt").write_text("keep me")

        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env"]
        )

        assert result.exit_code == 1
        assert "already exists" in _flat(result.output)
        assert [p.name for p in existing.iterdir()] == ["notes.txt"]
        assert (existing / "notes.txt").read_text() == "keep me"

    def test_missing_config_file(self, clean_config_env):
        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "-c", str(clean_config_env / "missing.yaml")]
        )

        assert result.exit_code == 1
        assert "Config file not found" in _flat(result.output)
        assert not (clean_config_env / "demo_project").exists()

    def test_uncreatable_log_directory(self, clean_config_env):
        (clean_config_env / "blocker").write_text("")
        config_path = FileBuilder.create_yaml_file(
            clean_config_env / "scaffold.yaml",
            {"logging": {"base_path": str(clean_config_env / "blocker" / "logs")}},
        )

        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "-c", str(config_path), "--skip-vcs", "--skip-env"]
        )

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "로그 설정 실패" in result.output
        assert not (clean_config_env / "demo_project").exists()

    def test_invalid_env_dir_option(self, clean_config_env):
        result = runner.invoke(
            app, ["demo_project", "-p", str(clean_config_env), "--skip-vcs", "--skip-env", "--env-dir", "../x"]
        )

        assert result.exit_code == 1
        assert "잘못된 옵션 값" in result.output
        assert not (clean_config_env / "demo_project").exists()


class TestHelpers:
    def test_build_runner_respects_flags(self):
        config = ScaffoldConfig(run_vcs_init=False, create_env=True)

        selective = build_runner(config)

        assert selective.enabled == {VCS_INIT: False, CREATE_ENV: True}

    def test_get_project_name_passthrough(self):
        class NoPromptUI:
            def text_input(self, *args, **kwargs):
                pytest.fail("prompt should not be shown when a name is given")

        assert get_project_name("demo_project", NoPromptUI()) == "demo_project"
