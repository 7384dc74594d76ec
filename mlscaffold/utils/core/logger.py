import logging
import os
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mlscaffold.settings import ScaffoldConfig

# CLI 전용 로그 레벨 정의 (INFO=20, WARNING=30 사이)
# 기본: phase 요약만 출력, -v 옵션 시 항목별 상세 로그 출력
CLI_LEVEL = 25
logging.addLevelName(CLI_LEVEL, "CLI")

# 전역 로거 객체
logger = logging.getLogger("mlscaffold")

# 현재 세션의 로그 파일 경로 (파일 로깅이 설정된 경우에만)
_current_log_file: Optional[Path] = None


class TerminalFormatter(logging.Formatter):
    """
    터미널용 포맷터: CLI 진행 상태와 연동하여 들여쓰기 적용.

    MLSCAFFOLD_CLI_LINE_ACTIVE: 들여쓰기 활성화 여부
    MLSCAFFOLD_CLI_NEEDS_NEWLINE: 줄바꿈 필요 여부 (기본 모드에서 인라인 텍스트 후)
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()

        if os.environ.get("MLSCAFFOLD_CLI_LINE_ACTIVE") == "1":
            if os.environ.get("MLSCAFFOLD_CLI_NEEDS_NEWLINE") == "1":
                return f"\n  {message}"
            return f"  {message}"

        return message


class FileFormatter(logging.Formatter):
    """파일용 포맷터: 타임스탬프 및 레벨 포함"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )


def get_current_log_file() -> Optional[Path]:
    """현재 세션의 로그 파일 경로 반환"""
    return _current_log_file


# 카테고리: SCAF(스캐폴딩 phase/항목), CMD(외부 명령), CONFIG(설정), SYS(시스템)


def log_scaf(message: str, phase: str = None) -> None:
    """스캐폴딩 phase 로그"""
    if phase:
        logger.info(f"[SCAF:{phase}] {message}")
    else:
        logger.info(f"[SCAF] {message}")


def log_scaf_debug(message: str, phase: str = None) -> None:
    """스캐폴딩 항목별 상세 로그 (DEBUG)"""
    if phase:
        logger.debug(f"[SCAF:{phase}] {message}")
    else:
        logger.debug(f"[SCAF] {message}")


def log_scaf_warning(message: str, phase: str = None) -> None:
    """스캐폴딩 항목 실패 로그 (WARNING, 실행은 계속됨)"""
    if phase:
        logger.warning(f"[SCAF:{phase}] {message}")
    else:
        logger.warning(f"[SCAF] {message}")


def log_cmd(message: str, name: str = None) -> None:
    """외부 명령 실행 로그"""
    if name:
        logger.info(f"[CMD:{name}] {message}")
    else:
        logger.info(f"[CMD] {message}")


def log_config(message: str) -> None:
    """설정 로드 관련 로그"""
    logger.info(f"[CONFIG] {message}")


def log_sys_debug(message: str) -> None:
    """시스템/환경 상세 로그 (DEBUG)"""
    logger.debug(f"[SYS] {message}")


def setup_logging(config: "ScaffoldConfig", verbose: bool = False) -> None:
    """
    주입된 설정(config) 객체를 기반으로 전역 로거를 설정합니다.
    config.logging.base_path가 지정된 경우에만 실행별 로그 파일을 남깁니다.

    Args:
        config: ScaffoldConfig 객체
        verbose: True면 터미널에도 상세 로그 출력 (-v 옵션)

    Raises:
        OSError: 로그 디렉토리나 로그 파일을 만들 수 없는 경우
    """
    global _current_log_file

    root_logger = logging.getLogger()

    # 핸들러 중복 등록 방지
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    logging_config = getattr(config, "logging", None)
    base_path = getattr(logging_config, "base_path", None)
    retention_days = getattr(logging_config, "retention_days", 30)
    configured_level = logging.getLevelName(getattr(logging_config, "level", "INFO"))
    if not isinstance(configured_level, int):
        configured_level = logging.INFO

    # 터미널 로그 레벨: 기본은 CLI_LEVEL(25) 이상, -v 옵션 시 DEBUG까지
    console_log_level = logging.DEBUG if verbose else max(configured_level, CLI_LEVEL)

    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(TerminalFormatter())
    root_logger.addHandler(console_handler)

    _current_log_file = None
    if base_path:
        log_dir = Path(base_path)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"mlscaffold_{timestamp}.log"

        # 파일 핸들러: DEBUG 이상 모든 로그 기록
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        root_logger.addHandler(file_handler)
        _current_log_file = log_file

        _cleanup_old_logs(log_dir, retention_days)


def _cleanup_old_logs(log_dir: Path, retention_days: int) -> None:
    """지정된 보관 일수보다 오래된 로그 파일 삭제"""
    cutoff_time = datetime.now() - timedelta(days=retention_days)

    for log_file in log_dir.glob("mlscaffold_*.log"):
        try:
            file_mtime = datetime.fromtimestamp(log_file.stat().st_mtime)
            if file_mtime < cutoff_time:
                log_file.unlink()
                logger.debug(f"오래된 로그 파일 삭제: {log_file}")
        except OSError as e:
            logger.warning(f"로그 파일 정리 중 오류: {e}")
