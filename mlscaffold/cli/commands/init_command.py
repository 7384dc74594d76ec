"""
Init Command Implementation
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from mlscaffold.cli.utils.cli_progress import CLIProgress
from mlscaffold.cli.utils.header import __version__, print_command_header, print_divider, print_item, print_section
from mlscaffold.cli.utils.interactive_ui import InteractiveUI
from mlscaffold.scaffold.exceptions import ConfigError
from mlscaffold.scaffold.external import CREATE_ENV, VCS_INIT, SelectiveCommandRunner, SubprocessCommandRunner
from mlscaffold.scaffold.models import CommandOutcome, RunSummary
from mlscaffold.scaffold.orchestrator import PhaseOrchestrator
from mlscaffold.scaffold.resolver import is_valid_project_name
from mlscaffold.settings import ScaffoldConfig, load_config
from mlscaffold.utils.core.logger import get_current_log_file, setup_logging


def version_callback(value: bool) -> None:
    """--version 옵션 처리"""
    if value:
        typer.echo(f"mlscaffold {__version__}")
        raise typer.Exit()


def get_project_name(project_name: Optional[str], ui: InteractiveUI) -> str:
    """
    프로젝트 이름 결정.

    인자로 주어지면 그대로 반환하고(검증은 orchestrator가 담당),
    없으면 규칙을 만족할 때까지 대화형으로 입력받습니다.
    """
    if project_name is not None:
        return project_name
    return ui.text_input(
        "프로젝트 이름을 입력하세요",
        validator=is_valid_project_name,
        error_message="영문자, 숫자, 밑줄(_)만 사용할 수 있습니다.",
    )


def build_runner(config: ScaffoldConfig) -> SelectiveCommandRunner:
    """설정에 따라 외부 명령 실행기 구성"""
    runner = SubprocessCommandRunner(config.resolved_commands(), timeout=config.commands.timeout)
    return SelectiveCommandRunner(
        runner,
        enabled={VCS_INIT: config.run_vcs_init, CREATE_ENV: config.create_env},
    )


def init_command(
    project_name: Annotated[
        Optional[str], typer.Argument(help="프로젝트 이름 (영문자, 숫자, 밑줄)")
    ] = None,
    parent_dir: Annotated[
        Path, typer.Option("--parent-dir", "-p", help="프로젝트를 생성할 상위 디렉토리")
    ] = Path("."),
    config_path: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="YAML 설정 파일 경로")
    ] = None,
    env_dir: Annotated[
        Optional[str], typer.Option("--env-dir", help="가상환경 디렉토리 이름")
    ] = None,
    skip_vcs: Annotated[bool, typer.Option("--skip-vcs", help="git init 생략")] = False,
    skip_env: Annotated[bool, typer.Option("--skip-env", help="가상환경 생성 생략")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="항목별 상세 로그 출력")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="경고 이상만 로그 출력")] = False,
    version: Annotated[
        bool, typer.Option("--version", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
) -> None:
    """
    ML 프로젝트 기본 구조 생성.

    생성되는 구조:
        - artifacts/ (파이프라인 단계별 8개 디렉토리), config/config.yaml
        - .gitignore, requirements.txt, main.py, app.py, README.md
        - logs/logs.log, research/ (단계별 8개 노트북)
        - git 저장소, 가상환경
    """
    ui = InteractiveUI()

    try:
        config = load_config(config_path)
    except ConfigError as e:
        ui.show_error(f"설정 로드 실패: {e}")
        raise typer.Exit(1)

    try:
        if env_dir is not None:
            config.env_dir = env_dir
        if skip_vcs:
            config.run_vcs_init = False
        if skip_env:
            config.create_env = False
        if quiet:
            config.logging.level = "WARNING"
    except ValidationError as e:
        ui.show_error(f"잘못된 옵션 값: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    try:
        setup_logging(config, verbose=verbose)
    except OSError as e:
        ui.show_error(f"로그 설정 실패: {config.logging.base_path}: {e.strerror or e}")
        raise typer.Exit(1)

    print_command_header("Init Project", "ML project scaffolding")

    try:
        name = get_project_name(project_name, ui)
    except KeyboardInterrupt:
        ui.show_error("프로젝트 초기화가 취소되었습니다")
        raise typer.Exit(1)

    orchestrator = PhaseOrchestrator(
        parent_dir,
        runner=build_runner(config),
        env_dir=config.env_dir,
    )
    orchestrator.progress = CLIProgress(total_steps=orchestrator.total_steps, verbose=verbose)

    try:
        summary = orchestrator.run(name)
    except KeyboardInterrupt:
        ui.show_error("프로젝트 초기화가 중단되었습니다 (생성된 항목은 그대로 남아 있습니다)")
        raise typer.Exit(1)

    if summary.aborted:
        ui.show_error(f"프로젝트 초기화 중단: {summary.error}")
        raise typer.Exit(summary.exit_code)

    _show_completion_message(summary, ui)


def _describe_command(outcome: Optional[CommandOutcome]) -> str:
    if outcome is None:
        return "-"
    if outcome.skipped:
        return "skipped"
    if outcome.error:
        return f"failed ({outcome.error})"
    if outcome.returncode != 0:
        return f"exit {outcome.returncode}"
    return "ok"


def _show_completion_message(summary: RunSummary, ui: InteractiveUI) -> None:
    """완료 메시지 표시"""
    print_divider()
    if summary.completed_with_errors:
        print_section("WARN", "프로젝트 생성 완료 (일부 항목 실패)", style="yellow", newline=False)
    else:
        print_section("OK", "프로젝트 생성 완료", style="green", newline=False)
    print_item("NAME", summary.project_name)
    print_item("PATH", str(summary.project_root))

    vcs_phase = summary.phase("vcs")
    env_phase = summary.phase("config_files")
    print_item("GIT", _describe_command(vcs_phase.command if vcs_phase else None))
    print_item("ENV", _describe_command(env_phase.command if env_phase else None))

    log_file = get_current_log_file()
    if log_file:
        print_item("LOG", str(log_file))

    if summary.completed_with_errors:
        rows = [
            [result.entry.relative_path, phase.phase, result.reason or ""]
            for phase in summary.phases
            for result in phase.failed
        ]
        ui.show_table("직접 확인이 필요한 항목", ["PATH", "PHASE", "REASON"], rows)

    print_section("NEXT", "다음 단계", style="blue")
    sys.stdout.write("  1. 프로젝트 디렉토리 이동\n")
    sys.stdout.write(f"     cd {summary.project_root}\n")
    sys.stdout.write("  2. 의존성 목록 작성\n")
    sys.stdout.write("     requirements.txt\n")
    sys.stdout.write("  3. 단계별 노트북에서 실험 시작\n")
    sys.stdout.write("     research/<stage>.ipynb\n")
    sys.stdout.flush()

    print_divider()
