"""순수 Config Pydantic 스키마"""

import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CommandsConfig(BaseModel):
    vcs_init: List[str] = Field(default_factory=lambda: ["git", "init"], description="VCS 초기화 명령")
    create_env: Optional[List[str]] = Field(
        None, description="가상환경 생성 명령 (None이면 '<python> -m venv <env_dir>')"
    )
    timeout: float = Field(default=120, gt=0, description="명령별 타임아웃(초)")


class LoggingConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", description="터미널 로그 레벨")
    base_path: Optional[str] = Field(None, description="로그 파일 디렉토리 (None이면 파일 로깅 안 함)")
    retention_days: int = Field(default=30, ge=1, description="로그 파일 보관 일수")


class ScaffoldConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    env_dir: str = Field(default="venv", pattern=r"^[A-Za-z0-9_\-][A-Za-z0-9_.\-]*$", description="가상환경 디렉토리 이름")
    run_vcs_init: bool = Field(default=True, description="VCS 초기화 실행 여부")
    create_env: bool = Field(default=True, description="가상환경 생성 실행 여부")
    commands: CommandsConfig = Field(default_factory=CommandsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def resolved_commands(self) -> dict:
        """외부 명령 이름 → argv 매핑"""
        create_env = self.commands.create_env or [sys.executable, "-m", "venv", self.env_dir]
        return {
            "vcs_init": list(self.commands.vcs_init),
            "create_env": list(create_env),
        }
