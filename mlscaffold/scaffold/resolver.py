"""
Path Resolver
프로젝트 이름 검증 및 manifest 상대 경로 → 절대 경로 변환

모든 함수는 부수효과가 없는 순수 함수입니다.
"""

import re
from pathlib import Path, PurePosixPath
from typing import Union

from mlscaffold.scaffold.exceptions import InvalidNameError, InvalidPathError

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# C:, D: 등 드라이브 접두사
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


def is_valid_project_name(name: str) -> bool:
    """프로젝트 이름이 영문자/숫자/밑줄로만 구성되었는지 확인"""
    return bool(name) and PROJECT_NAME_PATTERN.fullmatch(name) is not None


def validate_project_name(name: str) -> str:
    """
    프로젝트 이름 검증.

    Args:
        name: 외부 입력으로 받은 프로젝트 이름

    Returns:
        검증된 프로젝트 이름 (변경 없음)

    Raises:
        InvalidNameError: 빈 문자열이거나 허용되지 않은 문자가 포함된 경우
    """
    if not isinstance(name, str) or not is_valid_project_name(name):
        raise InvalidNameError(name)
    return name


def normalize_relative_path(relative_path: str) -> PurePosixPath:
    """
    manifest 상대 경로를 호스트와 무관한 POSIX 형태로 정규화.

    "\\"와 "/"를 모두 구분자로 취급하고, 빈 세그먼트와 "."은 제거합니다.

    Raises:
        InvalidPathError: 빈 경로, 절대 경로, 드라이브 접두사, ".." 세그먼트
    """
    if not relative_path or not relative_path.strip():
        raise InvalidPathError(relative_path, "empty path")

    unified = relative_path.replace("\\", "/")
    if unified.startswith("/"):
        raise InvalidPathError(relative_path, "absolute paths are not allowed")
    if _DRIVE_PATTERN.match(unified):
        raise InvalidPathError(relative_path, "drive prefixes are not allowed")

    segments = [segment for segment in unified.split("/") if segment not in ("", ".")]
    if ".." in segments:
        raise InvalidPathError(relative_path, "path escapes the project root")
    if not segments:
        raise InvalidPathError(relative_path, "path resolves to the project root itself")

    return PurePosixPath(*segments)


def resolve(project_root: Union[str, Path], relative_path: str) -> Path:
    """
    프로젝트 루트 기준 상대 경로를 절대 경로로 변환.

    Args:
        project_root: 프로젝트 루트 디렉토리
        relative_path: manifest에 기록된 상대 경로

    Returns:
        project_root 내부의 절대 경로

    Raises:
        InvalidPathError: 경로가 프로젝트 루트를 벗어나는 경우
    """
    root = Path(project_root).absolute()
    normalized = normalize_relative_path(relative_path)
    return root.joinpath(*normalized.parts)


def resolve_project_root(parent_dir: Union[str, Path], project_name: str) -> Path:
    """
    프로젝트 이름을 검증하고 프로젝트 루트 절대 경로를 반환.

    Raises:
        InvalidNameError: 프로젝트 이름이 규칙을 위반하는 경우
    """
    validate_project_name(project_name)
    return Path(parent_dir).absolute() / project_name
