"""
Template Engine for ML project scaffolding
Jinja2 기반 seed 파일 내용 렌더링

Manifest Builder가 .gitignore, README.md 등 고정 내용 파일의
본문을 만들 때 사용합니다. 파일 쓰기는 FilesystemApplier가 담당합니다.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class TemplateEngine:
    """Jinja2 기반 템플릿 렌더링 엔진.

    패키지에 포함된 seed 템플릿을 프로젝트 이름 등 최소한의 변수로 렌더링합니다.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """템플릿 엔진 초기화.

        Args:
            template_dir: 템플릿 파일이 위치한 디렉토리 경로 (기본값: 패키지 내장 템플릿)

        Raises:
            FileNotFoundError: 템플릿 디렉토리가 존재하지 않을 경우
        """
        template_dir = template_dir or DEFAULT_TEMPLATES_DIR
        if not template_dir.exists():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """템플릿 파일을 렌더링하여 문자열로 반환.

        Args:
            template_name: 렌더링할 템플릿 파일 이름 (상대 경로)
            context: 템플릿에 전달할 변수 딕셔너리

        Returns:
            렌더링된 템플릿 문자열

        Raises:
            TemplateNotFound: 템플릿 파일을 찾을 수 없을 경우
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound:
            logger.error(f"Template을 찾을 수 없습니다: {template_name}")
            raise

    def list_templates(self, pattern: Optional[str] = None) -> List[str]:
        """사용 가능한 템플릿 파일 목록 반환.

        Args:
            pattern: 파일 패턴 (예: "*.j2", "project/*.j2")

        Returns:
            템플릿 파일 이름 리스트 ("/" 구분자)
        """
        if pattern:
            template_paths = self.template_dir.glob(pattern)
        else:
            template_paths = self.template_dir.rglob("*")

        templates = [
            path.relative_to(self.template_dir).as_posix()
            for path in template_paths
            if path.is_file()
        ]
        return sorted(templates)
