"""
cli/ui/console.py - Rich 콘솔 유틸리티

온보딩 메시지 출력용 전역 콘솔과 헬퍼 (사용자 입력 문자열은 마크업 이스케이프)
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# httpx 요청 로그 제한
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def get_log_handler() -> RichHandler:
    """전역 콘솔에 출력하는 Rich 로그 핸들러"""
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    return handler


# =============================================================================
# 표준 출력 스타일 (이모지 없이 Rich 스타일만 사용)
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러
SYMBOL_WARNING = "!"  # 경고
SYMBOL_INFO = "•"  # 정보


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """정보 메시지 출력 (파란색 정보)"""
    console.print(f"[blue]{SYMBOL_INFO} {escape(message)}[/blue]")


def print_plain(message: str) -> None:
    """스타일 없는 메시지 출력"""
    console.print(escape(message))

