"""
mlscaffold CLI - Main Commands Router
단순 라우팅만 담당하는 메인 CLI 진입점

사용법:
    mlscaffold <project_name> [options]
"""

import typer

from mlscaffold.cli.commands.init_command import init_command

# 명령이 하나뿐이므로 `mlscaffold <project_name>` 형태로 바로 실행됩니다.
app = typer.Typer(
    help="ML project scaffolding generator",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("init", help="프로젝트 초기화 - 기본 디렉토리 구조 및 파일 생성")(init_command)


if __name__ == "__main__":
    app()
