"""
Interactive UI Components for mlscaffold CLI
Rich 기반 대화형 입력 및 결과 표시
"""

from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table


class InteractiveUI:
    """Rich 라이브러리 기반 대화형 UI 컴포넌트.

    프로젝트 이름 입력, 결과 테이블 및 오류 메시지 출력을 제공합니다.
    """

    def __init__(self, console: Optional[Console] = None):
        """InteractiveUI 초기화."""
        self.console = console or Console()

    def text_input(
        self,
        prompt: str,
        default: Optional[str] = None,
        show_default: bool = True,
        validator: Optional[Callable[[str], bool]] = None,
        error_message: str = "올바르지 않은 입력입니다. 다시 시도해주세요.",
    ) -> str:
        """텍스트 입력 프롬프트.

        검증 함수가 주어지면 통과할 때까지 다시 입력받습니다.

        Args:
            prompt: 입력 프롬프트 메시지
            default: 기본값
            show_default: 기본값 표시 여부
            validator: 입력 검증 함수 (str -> bool)
            error_message: 검증 실패 시 출력할 메시지

        Returns:
            사용자 입력 문자열
        """
        while True:
            result = Prompt.ask(
                prompt,
                default=default,
                show_default=show_default and default is not None,
                console=self.console,
            )

            if validator is None or validator(result):
                return result
            self.console.print(f"[red]{escape(error_message)}[/red]")

    def show_table(self, title: str, headers: List[str], rows: List[List[str]]) -> None:
        """테이블 형식으로 데이터 표시.

        Args:
            title: 테이블 제목
            headers: 컬럼 헤더 리스트
            rows: 데이터 행 리스트
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")

        for header in headers:
            table.add_column(header)

        for row in rows:
            table.add_row(*[escape(cell) for cell in row])

        self.console.print(table)

    def show_error(self, message: str) -> None:
        """에러 메시지 표시."""
        self.console.print(f"[bold red]{escape(message)}[/bold red]")
