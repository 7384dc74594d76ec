"""
CLI 진행 상태 표시기
터미널에 깔끔한 인라인 phase 진행 상태를 표시합니다.
"""

import os
import sys
from typing import Optional

# [중요] 로거와의 순환 참조를 피하기 위해 환경 변수로 플래그 공유
# MLSCAFFOLD_CLI_LINE_ACTIVE: 로그 출력 시 들여쓰기 필요 여부
# MLSCAFFOLD_CLI_NEEDS_NEWLINE: 로그 출력 전 줄바꿈 필요 여부 (인라인 모드에서 True)


def set_cli_line_active(active: bool, needs_newline: bool = False) -> None:
    """
    CLI 진행 상태 플래그 설정.

    Args:
        active: 들여쓰기 활성화 여부
        needs_newline: 로그 출력 전 줄바꿈 필요 여부 (기본 모드에서 True)
    """
    os.environ["MLSCAFFOLD_CLI_LINE_ACTIVE"] = "1" if active else "0"
    os.environ["MLSCAFFOLD_CLI_NEEDS_NEWLINE"] = "1" if needs_newline else "0"


def is_cli_line_active() -> bool:
    """현재 진행바 라인이 출력 중인지 확인"""
    return os.environ.get("MLSCAFFOLD_CLI_LINE_ACTIVE") == "1"


class CLIProgress:
    """
    인라인 진행 상태 표시 클래스.

    기본 모드: [2/7] directories        done  created 11, existing 0, failed 0
    상세 모드 (-v):
        [2/7] directories
          [SCAF:directories] created  artifacts/
          ✓ created 11, existing 0, failed 0
    """

    def __init__(self, total_steps: int, verbose: bool = False):
        self.total_steps = total_steps
        self.current_step = 0
        self.verbose = verbose
        self._step_width = 30

    def step_start(self, name: str) -> None:
        """단계 시작 표시"""
        self.current_step += 1
        step_text = f"[{self.current_step}/{self.total_steps}] {name}"

        if is_cli_line_active():
            sys.stdout.write("\n")

        if self.verbose:
            sys.stdout.write(f"{step_text}\n")
            sys.stdout.flush()
            set_cli_line_active(True, needs_newline=False)
        else:
            sys.stdout.write(f"{step_text:<{self._step_width}}")
            sys.stdout.flush()
            set_cli_line_active(True, needs_newline=True)

    def step_done(self, stats: str = "") -> None:
        """단계 완료 표시"""
        if self.verbose:
            sys.stdout.write(f"  ✓ {stats}\n" if stats else "  ✓ done\n")
        else:
            sys.stdout.write(f"  done  {stats}\n" if stats else "  done\n")
        sys.stdout.flush()
        set_cli_line_active(False)

    def step_fail(self, error: Optional[str] = None) -> None:
        """단계 실패 표시"""
        sys.stdout.write("  fail\n")
        if error:
            sys.stdout.write(f"  [ERROR] {error}\n")
        sys.stdout.flush()
        set_cli_line_active(False)
