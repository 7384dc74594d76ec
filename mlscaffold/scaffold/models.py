"""
Scaffold Models
스캐폴딩 엔진 전용 데이터 구조

- PathEntry / Manifest: phase별로 생성할 항목 목록
- ApplyResult / PhaseResult: 항목별, phase별 적용 결과
- RunSummary: 전체 실행 결과 및 상태 전이 기록
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from mlscaffold.scaffold.exceptions import EntryCreationError, ScaffoldError


class EntryKind(Enum):
    """생성할 항목의 종류"""
    DIRECTORY = "directory"
    FILE = "file"


class Outcome(Enum):
    """항목별 적용 결과"""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


class RunState(Enum):
    """Orchestrator 상태"""
    INIT = "init"
    CREATING_ROOT = "creating_root"
    RUNNING_PHASE = "running_phase"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class PathEntry:
    """
    스캐폴딩의 최소 단위: 디렉토리 하나 또는 파일 하나.

    Attributes:
        relative_path: 프로젝트 루트 기준 상대 경로 ("/" 구분자)
        kind: 디렉토리/파일 구분
        content: 파일에 기록할 고정 내용 (None이면 빈 파일)
    """
    relative_path: str
    kind: EntryKind
    content: Optional[str] = None

    @property
    def depth(self) -> int:
        return len([part for part in self.relative_path.replace("\\", "/").split("/") if part])

    @classmethod
    def directory(cls, relative_path: str) -> "PathEntry":
        return cls(relative_path, EntryKind.DIRECTORY)

    @classmethod
    def file(cls, relative_path: str, content: Optional[str] = None) -> "PathEntry":
        return cls(relative_path, EntryKind.FILE, content)


def _entry_order(entry: PathEntry) -> Tuple[int, int]:
    # 디렉토리 먼저 (얕은 것부터), 그 다음 파일
    if entry.kind is EntryKind.DIRECTORY:
        return (0, entry.depth)
    return (1, 0)


@dataclass
class Manifest:
    """
    하나의 phase에서 생성할 PathEntry의 순서 있는 목록.

    생성 시 안정 정렬로 모든 디렉토리 항목이 파일 항목보다 앞에 오고,
    상위 디렉토리가 하위 디렉토리보다 앞에 오도록 재배열됩니다.
    """
    phase: str
    entries: List[PathEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.entries = sorted(self.entries, key=_entry_order)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def directories(self) -> List[PathEntry]:
        return [e for e in self.entries if e.kind is EntryKind.DIRECTORY]

    @property
    def files(self) -> List[PathEntry]:
        return [e for e in self.entries if e.kind is EntryKind.FILE]


@dataclass
class ApplyResult:
    """
    PathEntry 하나에 대한 적용 결과.

    Attributes:
        entry: 적용 대상 항목
        outcome: 생성/기존 존재/실패
        path: 해석된 절대 경로
        error: 실패 시 EntryCreationError
    """
    entry: PathEntry
    outcome: Outcome
    path: Optional[Path] = None
    error: Optional[EntryCreationError] = None

    @property
    def reason(self) -> Optional[str]:
        return self.error.reason if self.error else None

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILED


@dataclass
class CommandOutcome:
    """
    외부 명령(VCS 초기화, 가상환경 생성) 실행 결과.

    returncode가 None이면 명령을 실행조차 하지 못한 경우입니다.
    """
    name: str
    command: List[str] = field(default_factory=list)
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None
    skipped: bool = False

    @property
    def succeeded(self) -> bool:
        return self.skipped or (self.error is None and self.returncode == 0)


@dataclass
class PhaseResult:
    """phase 하나의 적용 결과 (항목 결과 + 외부 명령 결과)"""
    phase: str
    results: List[ApplyResult] = field(default_factory=list)
    command: Optional[CommandOutcome] = None

    def _with(self, outcome: Outcome) -> List[ApplyResult]:
        return [r for r in self.results if r.outcome is outcome]

    @property
    def created(self) -> List[ApplyResult]:
        return self._with(Outcome.CREATED)

    @property
    def already_existing(self) -> List[ApplyResult]:
        return self._with(Outcome.ALREADY_EXISTS)

    @property
    def failed(self) -> List[ApplyResult]:
        return self._with(Outcome.FAILED)

    @property
    def has_failures(self) -> bool:
        return any(r.failed for r in self.results)


@dataclass
class RunSummary:
    """
    전체 스캐폴딩 실행 요약.

    Attributes:
        project_name: 입력된 프로젝트 이름
        project_root: 프로젝트 루트 절대 경로 (이름 검증 실패 시 None)
        state: 최종 상태 (DONE 또는 ABORTED)
        phases: 실행된 phase 결과 목록
        error: 중단 원인 (ABORTED인 경우)
        state_history: 상태 전이 기록 (phase 이름 포함)
    """
    project_name: str
    project_root: Optional[Path] = None
    state: RunState = RunState.INIT
    phases: List[PhaseResult] = field(default_factory=list)
    error: Optional[ScaffoldError] = None
    state_history: List[Tuple[RunState, Optional[str]]] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return self.state is RunState.ABORTED

    @property
    def failed_results(self) -> List[ApplyResult]:
        return [r for phase in self.phases for r in phase.failed]

    @property
    def completed_with_errors(self) -> bool:
        return self.state is RunState.DONE and bool(self.failed_results)

    @property
    def exit_code(self) -> int:
        return 0 if self.state is RunState.DONE else 1

    def phase(self, name: str) -> Optional[PhaseResult]:
        for phase_result in self.phases:
            if phase_result.phase == name:
                return phase_result
        return None
