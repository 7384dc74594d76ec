"""
mlscaffold - Core Test Fixtures
Real filesystem under tmp_path, fake external commands, minimal mocking
"""

import logging
import os

import pytest

from tests.helpers import FakeCommandRunner


@pytest.fixture
def fake_runner():
    """호출 기록용 가짜 외부 명령 실행기"""
    return FakeCommandRunner()


@pytest.fixture
def project_root(tmp_path):
    """비어 있는 프로젝트 루트 디렉토리"""
    root = tmp_path / "demo_project"
    root.mkdir()
    return root


@pytest.fixture
def clean_config_env(tmp_path, monkeypatch):
    """설정 로더가 외부 .env나 MLSCAFFOLD_CONFIG에 영향받지 않도록 격리"""
    monkeypatch.delenv("MLSCAFFOLD_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def isolate_cli_state():
    """CLI 진행 플래그 환경변수와 루트 로거 핸들러를 테스트마다 복원"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)

    os.environ.pop("MLSCAFFOLD_CLI_LINE_ACTIVE", None)
    os.environ.pop("MLSCAFFOLD_CLI_NEEDS_NEWLINE", None)
