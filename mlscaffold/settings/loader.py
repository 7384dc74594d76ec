"""
Config Loader
YAML 설정 파일 로드, 환경변수 치환, Pydantic 검증

우선순위: 명시적 경로 > MLSCAFFOLD_CONFIG 환경변수 > 기본값
"""

import os
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from mlscaffold.scaffold.exceptions import ConfigError
from mlscaffold.settings.config import ScaffoldConfig
from mlscaffold.utils.core.logger import log_config, log_sys_debug

CONFIG_ENV_VAR = "MLSCAFFOLD_CONFIG"

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def load_env_file(base_path: Optional[Path] = None) -> bool:
    """
    현재 디렉토리의 .env 파일 로드.

    Returns:
        bool: .env 파일 로드 여부
    """
    env_file = (base_path or Path.cwd()) / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)
        log_sys_debug(f"환경변수 로드 완료: {env_file}")
        return True
    return False


def resolve_env_variables(value: Any) -> Any:
    """
    재귀적으로 환경변수 치환.
    ${VAR_NAME:default} 패턴 지원.

    Args:
        value: 치환할 값 (문자열, 딕셔너리, 리스트 등)

    Returns:
        환경변수가 치환된 값
    """
    if isinstance(value, str):
        full_match = _ENV_PATTERN.fullmatch(value)

        if full_match:
            # 완전히 환경변수인 경우 타입 변환 시도
            expr = full_match.group(1)
            if ":" in expr:
                var_name, default_value = expr.split(":", 1)
                result = os.getenv(var_name.strip(), default_value.strip())
            else:
                result = os.getenv(expr.strip(), value)

            if result.lower() in ("true", "false"):
                return result.lower() == "true"
            try:
                if "." not in result:
                    return int(result)
                return float(result)
            except ValueError:
                return result

        def replacer(match):
            expr = match.group(1)
            if ":" in expr:
                var_name, default_value = expr.split(":", 1)
                return str(os.getenv(var_name.strip(), default_value.strip()))
            return str(os.getenv(expr.strip(), match.group(0)))

        return _ENV_PATTERN.sub(replacer, value)

    elif isinstance(value, dict):
        return {k: resolve_env_variables(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [resolve_env_variables(item) for item in value]

    return value


def load_config(config_path: Optional[Union[str, Path]] = None) -> ScaffoldConfig:
    """
    스캐폴딩 설정 로드.

    Args:
        config_path: YAML 설정 파일 경로 (없으면 MLSCAFFOLD_CONFIG, 그것도 없으면 기본값)

    Returns:
        검증된 ScaffoldConfig

    Raises:
        ConfigError: 파일 없음, YAML 문법 오류, 스키마 검증 실패
    """
    load_env_file()

    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        log_sys_debug("설정 파일 없음, 기본값 사용")
        return ScaffoldConfig()

    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", original_error=e) from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    try:
        config = ScaffoldConfig(**resolve_env_variables(raw))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}", original_error=e) from e

    log_config(f"Config 로드 완료: {path}")
    return config
