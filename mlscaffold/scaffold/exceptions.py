"""
Scaffolding Errors
프로젝트 스캐폴딩 중 발생하는 오류 계층

- InvalidNameError: 프로젝트 이름 규칙 위반 (파일시스템 변경 전 중단)
- InvalidPathError: manifest 경로가 프로젝트 루트를 벗어남 (프로그래밍 오류, 치명적)
- RootAlreadyExistsError: 대상 디렉토리가 이미 존재 (파일시스템 변경 전 중단)
- EntryCreationError: 개별 항목 생성 실패 (기록 후 계속 진행)
- ConfigError: 설정 파일 로드/검증 실패
"""

from typing import Optional


class ScaffoldError(Exception):
    """
    스캐폴딩 오류의 기본 클래스.

    오류가 발생한 phase와 원본 예외를 함께 보관합니다.
    """

    def __init__(
        self,
        message: str,
        phase: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        스캐폴딩 오류를 초기화합니다.

        Args:
            message: 오류 메시지
            phase: 오류가 발생한 phase 이름 (있는 경우)
            original_error: 원본 예외 (있는 경우)
        """
        super().__init__(message)
        self.phase = phase
        self.original_error = original_error

    def __str__(self) -> str:
        phase_str = f"[{self.phase}] " if self.phase else ""
        return f"{phase_str}{super().__str__()}"


class InvalidNameError(ScaffoldError):
    """프로젝트 이름이 영문자/숫자/밑줄 규칙을 위반함"""

    def __init__(self, name: str):
        super().__init__(
            f"Invalid project name {name!r}: "
            "only letters, digits and underscores are allowed"
        )
        self.name = name


class InvalidPathError(ScaffoldError):
    """manifest 경로가 프로젝트 루트 밖을 가리킴"""

    def __init__(self, relative_path: str, reason: str, phase: Optional[str] = None):
        super().__init__(f"Invalid path {relative_path!r}: {reason}", phase=phase)
        self.relative_path = relative_path
        self.reason = reason


class RootAlreadyExistsError(ScaffoldError):
    """프로젝트 루트 디렉토리가 이미 존재함"""

    def __init__(self, project_root):
        super().__init__(
            f"Project directory already exists: {project_root} "
            "(choose another name or remove the directory)"
        )
        self.project_root = project_root


class EntryCreationError(ScaffoldError):
    """개별 디렉토리/파일 생성 실패"""

    def __init__(
        self,
        relative_path: str,
        original_error: Exception,
        phase: Optional[str] = None,
    ):
        if isinstance(original_error, OSError) and original_error.strerror:
            reason = original_error.strerror
        else:
            reason = str(original_error)
        super().__init__(
            f"Failed to create {relative_path}: {reason}",
            phase=phase,
            original_error=original_error,
        )
        self.relative_path = relative_path
        self.reason = reason


class ConfigError(ScaffoldError):
    """설정 파일을 읽거나 검증할 수 없음"""
