"""
Phase Orchestrator
프로젝트 루트 생성 → phase 순차 실행 → 실행 요약 반환

상태 전이:
    INIT → CREATING_ROOT → RUNNING_PHASE(phase)... → DONE
    INIT/CREATING_ROOT → ABORTED (이름 오류, 루트 존재, 루트 생성 실패)
    RUNNING_PHASE → ABORTED (manifest 경로 오류)

항목별 실패는 기록만 하고 다음 phase로 계속 진행합니다.
"""

from pathlib import Path
from typing import Optional, Union

from mlscaffold.scaffold.applier import FilesystemApplier
from mlscaffold.scaffold.exceptions import (
    EntryCreationError,
    InvalidNameError,
    InvalidPathError,
    RootAlreadyExistsError,
    ScaffoldError,
)
from mlscaffold.scaffold.external import CREATE_ENV, VCS_INIT, ExternalCommandRunner, NoOpCommandRunner
from mlscaffold.scaffold.manifest import DEFAULT_ENV_DIR, PHASES, ManifestBuilder
from mlscaffold.scaffold.models import PhaseResult, RunState, RunSummary
from mlscaffold.scaffold.resolver import resolve_project_root
from mlscaffold.utils.core.logger import log_scaf, log_scaf_warning

# phase별 외부 명령: (명령 이름, manifest 적용 전 실행 여부)
PHASE_COMMANDS = {
    "vcs": (VCS_INIT, True),
    "config_files": (CREATE_ENV, False),
}

ROOT_STEP = "root"


class PhaseOrchestrator:
    """
    스캐폴딩 phase 실행기.

    모든 경로는 parent_dir를 기준으로 명시적으로 구성하며,
    프로세스의 현재 작업 디렉토리를 변경하지 않습니다.
    """

    def __init__(
        self,
        parent_dir: Union[str, Path],
        runner: Optional[ExternalCommandRunner] = None,
        applier: Optional[FilesystemApplier] = None,
        env_dir: str = DEFAULT_ENV_DIR,
        progress=None,
    ):
        """
        Args:
            parent_dir: 프로젝트 루트가 생성될 상위 디렉토리
            runner: 외부 명령 실행기 (기본값: 실행하지 않음)
            applier: Manifest 적용기
            env_dir: 가상환경 디렉토리 이름 (.gitignore에 기록)
            progress: step_start/step_done/step_fail을 제공하는 진행 표시기 (CLIProgress)
        """
        self.parent_dir = Path(parent_dir)
        self.runner = runner or NoOpCommandRunner()
        self.applier = applier or FilesystemApplier()
        self.env_dir = env_dir
        self.progress = progress

    @property
    def total_steps(self) -> int:
        return len(PHASES) + 1

    def run(self, project_name: str) -> RunSummary:
        """
        프로젝트 스캐폴딩 실행.

        Args:
            project_name: 프로젝트 이름

        Returns:
            RunSummary. 오류 분류에 속하는 예외는 발생시키지 않고 summary.error에 기록합니다.
        """
        summary = RunSummary(project_name=project_name)
        self._transition(summary, RunState.INIT)

        # 1. 이름 검증 (파일시스템 변경 전)
        try:
            project_root = resolve_project_root(self.parent_dir, project_name)
        except InvalidNameError as e:
            return self._abort(summary, e)
        summary.project_root = project_root

        # 2. 프로젝트 루트 생성
        self._transition(summary, RunState.CREATING_ROOT)
        self._step_start(ROOT_STEP)
        try:
            self._create_root(project_root)
        except ScaffoldError as e:
            self._step_fail(str(e))
            return self._abort(summary, e)
        self._step_done(str(project_root))

        # 3. phase 순차 실행
        builder = ManifestBuilder(project_name, env_dir=self.env_dir)
        for phase in PHASES:
            self._transition(summary, RunState.RUNNING_PHASE, phase)
            self._step_start(phase)
            try:
                phase_result = self._run_phase(phase, builder, project_root)
            except InvalidPathError as e:
                self._step_fail(str(e))
                return self._abort(summary, e)

            summary.phases.append(phase_result)
            self._report_phase(phase_result)

        self._transition(summary, RunState.DONE)
        if summary.completed_with_errors:
            log_scaf_warning(
                f"완료 (오류 {len(summary.failed_results)}건): {project_root}"
            )
        else:
            log_scaf(f"완료: {project_root}")
        return summary

    def _create_root(self, project_root: Path) -> None:
        try:
            if project_root.exists() or project_root.is_symlink():
                raise RootAlreadyExistsError(project_root)
            project_root.mkdir(parents=True)
        except FileExistsError as e:
            raise RootAlreadyExistsError(project_root) from e
        except OSError as e:
            raise EntryCreationError(str(project_root), e, phase=ROOT_STEP) from e
        log_scaf(f"프로젝트 루트 생성: {project_root}", ROOT_STEP)

    def _run_phase(self, phase: str, builder: ManifestBuilder, project_root: Path) -> PhaseResult:
        manifest = builder.build(phase)
        phase_result = PhaseResult(phase=phase)
        command_name, command_first = PHASE_COMMANDS.get(phase, (None, False))

        if command_name and command_first:
            phase_result.command = self.runner.run(command_name, project_root)

        phase_result.results = self.applier.apply(manifest, project_root)

        if command_name and not command_first:
            phase_result.command = self.runner.run(command_name, project_root)

        return phase_result

    def _report_phase(self, phase_result: PhaseResult) -> None:
        phase = phase_result.phase
        stats = (
            f"created {len(phase_result.created)}, "
            f"existing {len(phase_result.already_existing)}, "
            f"failed {len(phase_result.failed)}"
        )
        if phase_result.has_failures:
            for failed in phase_result.failed:
                log_scaf_warning(f"실패 항목: {failed.entry.relative_path} ({failed.reason})", phase)
            self._step_fail(stats)
        else:
            log_scaf(stats, phase)
            self._step_done(stats)

    def _abort(self, summary: RunSummary, error: ScaffoldError) -> RunSummary:
        summary.error = error
        self._transition(summary, RunState.ABORTED)
        log_scaf_warning(f"중단: {error}")
        return summary

    @staticmethod
    def _transition(summary: RunSummary, state: RunState, phase: Optional[str] = None) -> None:
        summary.state = state
        summary.state_history.append((state, phase))

    def _step_start(self, name: str) -> None:
        if self.progress is not None:
            self.progress.step_start(name)

    def _step_done(self, stats: str = "") -> None:
        if self.progress is not None:
            self.progress.step_done(stats)

    def _step_fail(self, error: Optional[str] = None) -> None:
        if self.progress is not None:
            self.progress.step_fail(error)


def run(
    project_name: str,
    parent_dir: Union[str, Path] = ".",
    runner: Optional[ExternalCommandRunner] = None,
    env_dir: str = DEFAULT_ENV_DIR,
) -> RunSummary:
    """PhaseOrchestrator 단축 함수"""
    return PhaseOrchestrator(parent_dir, runner=runner, env_dir=env_dir).run(project_name)
