"""
Manifest Builder
phase별로 생성할 디렉토리/파일 목록(manifest) 구성

각 phase의 항목 목록은 모듈 수준의 고정 테이블입니다.
.gitignore와 README.md 본문만 패키지 내장 템플릿으로 렌더링합니다.
"""

from typing import Callable, Dict, List, Optional

from mlscaffold.cli.utils.template_engine import TemplateEngine
from mlscaffold.scaffold.models import Manifest, PathEntry

DEFAULT_ENV_DIR = "venv"

# ML 파이프라인 단계 (artifacts 하위 디렉토리, research 노트북 이름)
PIPELINE_STAGES = (
    "data_collection",
    "data_ingestion",
    "data_preprocessing",
    "exploratory_data_analysis",
    "feature_engineering",
    "model_training",
    "model_evaluation",
    "model_deployment",
)

ARTIFACTS_DIR = "artifacts"
RESEARCH_DIR = "research"
NOTEBOOK_SUFFIX = ".ipynb"

# Orchestrator 실행 순서
PHASES = ("directories", "vcs", "config_files", "docs", "logs", "research")

DIRECTORIES_TABLE = (
    [PathEntry.directory(ARTIFACTS_DIR)]
    + [PathEntry.directory(f"{ARTIFACTS_DIR}/{stage}") for stage in PIPELINE_STAGES]
    + [
        PathEntry.directory("config"),
        PathEntry.file("config/config.yaml"),
    ]
)

CONFIG_FILES_TABLE = [
    PathEntry.file("requirements.txt"),
    PathEntry.file("main.py"),
    PathEntry.file("app.py"),
]

LOGS_TABLE = [
    PathEntry.directory("logs"),
    PathEntry.file("logs/logs.log"),
]

RESEARCH_TABLE = [PathEntry.directory(RESEARCH_DIR)] + [
    PathEntry.file(f"{RESEARCH_DIR}/{stage}{NOTEBOOK_SUFFIX}") for stage in PIPELINE_STAGES
]

GITIGNORE_TEMPLATE = "project/gitignore.j2"
README_TEMPLATE = "project/README.md.j2"


class ManifestBuilder:
    """
    phase 이름으로 Manifest를 생성하는 빌더.

    고정 테이블을 복사해 매번 새 Manifest를 만들며, 구성 과정에서 실패하지 않습니다.
    """

    def __init__(
        self,
        project_name: str,
        env_dir: str = DEFAULT_ENV_DIR,
        template_engine: Optional[TemplateEngine] = None,
    ):
        self.project_name = project_name
        self.env_dir = env_dir
        self.template_engine = template_engine or TemplateEngine()
        self._builders: Dict[str, Callable[[], List[PathEntry]]] = {
            "directories": lambda: list(DIRECTORIES_TABLE),
            "vcs": self._vcs_entries,
            "config_files": lambda: list(CONFIG_FILES_TABLE),
            "docs": self._docs_entries,
            "logs": lambda: list(LOGS_TABLE),
            "research": lambda: list(RESEARCH_TABLE),
        }

    @property
    def context(self) -> Dict[str, str]:
        return {"project_name": self.project_name, "env_dir": self.env_dir}

    def _vcs_entries(self) -> List[PathEntry]:
        content = self.template_engine.render_template(GITIGNORE_TEMPLATE, self.context)
        return [PathEntry.file(".gitignore", content)]

    def _docs_entries(self) -> List[PathEntry]:
        content = self.template_engine.render_template(README_TEMPLATE, self.context)
        return [PathEntry.file("README.md", content)]

    def build(self, phase: str) -> Manifest:
        """
        phase에 해당하는 Manifest 생성.

        Args:
            phase: PHASES 중 하나

        Returns:
            디렉토리 → 파일 순서로 정렬된 Manifest

        Raises:
            KeyError: 알 수 없는 phase 이름
        """
        if phase not in self._builders:
            raise KeyError(f"Unknown phase: {phase!r} (available: {', '.join(PHASES)})")
        return Manifest(phase=phase, entries=self._builders[phase]())


def build_manifest(phase: str, project_name: str, env_dir: str = DEFAULT_ENV_DIR) -> Manifest:
    """ManifestBuilder 단축 함수"""
    return ManifestBuilder(project_name, env_dir=env_dir).build(phase)
