"""CLI Utilities Module

CLI 명령어 실행에 필요한 유틸리티 함수들을 제공합니다.
"""

from .cli_progress import CLIProgress
from .interactive_ui import InteractiveUI
from .template_engine import TemplateEngine

__all__ = [
    "CLIProgress",
    "InteractiveUI",
    "TemplateEngine",
]
