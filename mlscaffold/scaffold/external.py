"""
External Command Runner
VCS 초기화, 가상환경 생성 등 외부 명령 실행 인터페이스

스캐폴딩 엔진은 명령의 내부 동작을 알지 못하며, 실행 결과(CommandOutcome)만 기록합니다.
테스트에서는 NoOpCommandRunner 또는 가짜 구현으로 대체합니다.
"""

import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from mlscaffold.scaffold.models import CommandOutcome
from mlscaffold.utils.core.logger import log_cmd

VCS_INIT = "vcs_init"
CREATE_ENV = "create_env"

DEFAULT_TIMEOUT = 120


def default_commands(env_dir: str = "venv") -> Dict[str, List[str]]:
    """기본 외부 명령 구성 (git init, python -m venv)"""
    return {
        VCS_INIT: ["git", "init"],
        CREATE_ENV: [sys.executable, "-m", "venv", env_dir],
    }


class ExternalCommandRunner(ABC):
    """외부 명령 실행기 인터페이스"""

    @abstractmethod
    def run(self, name: str, cwd: Path) -> CommandOutcome:
        """
        이름으로 지정된 외부 명령을 cwd에서 실행.

        Args:
            name: 명령 이름 (VCS_INIT, CREATE_ENV)
            cwd: 작업 디렉토리 (프로젝트 루트)

        Returns:
            실행 결과. 실행 실패도 예외가 아니라 결과로 보고합니다.
        """


class SubprocessCommandRunner(ExternalCommandRunner):
    """subprocess 기반 외부 명령 실행기"""

    def __init__(
        self,
        commands: Optional[Dict[str, List[str]]] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self.commands = commands if commands is not None else default_commands()
        self.timeout = timeout

    def run(self, name: str, cwd: Path) -> CommandOutcome:
        if name not in self.commands:
            raise KeyError(f"Unknown external command: {name!r}")

        cmd = list(self.commands[name])
        log_cmd(f"실행: {' '.join(cmd)}", name)

        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            log_cmd(f"시간 초과 ({self.timeout}s)", name)
            return CommandOutcome(name, cmd, error=f"timed out after {self.timeout}s")
        except OSError as e:
            log_cmd(f"실행 불가: {e}", name)
            return CommandOutcome(name, cmd, error=str(e))

        log_cmd(f"종료 코드 {result.returncode}", name)
        return CommandOutcome(
            name,
            cmd,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )


class NoOpCommandRunner(ExternalCommandRunner):
    """명령을 실행하지 않고 건너뜀으로 기록하는 실행기"""

    def __init__(self):
        self.calls: List[str] = []

    def run(self, name: str, cwd: Path) -> CommandOutcome:
        self.calls.append(name)
        log_cmd("건너뜀", name)
        return CommandOutcome(name, skipped=True)


class SelectiveCommandRunner(ExternalCommandRunner):
    """
    일부 명령만 실제로 실행하는 실행기.

    --skip-vcs, --skip-env 옵션처럼 명령별로 비활성화할 때 사용합니다.
    """

    def __init__(self, runner: ExternalCommandRunner, enabled: Dict[str, bool]):
        self.runner = runner
        self.enabled = enabled
        self._skipper = NoOpCommandRunner()

    def run(self, name: str, cwd: Path) -> CommandOutcome:
        if self.enabled.get(name, True):
            return self.runner.run(name, cwd)
        return self._skipper.run(name, cwd)
