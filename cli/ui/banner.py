"""
cli/ui/banner.py - ASCII 아트 배너

시작 시 제품명/버전과 작업 중인 개발자 계정을 표시합니다.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from cli.i18n import t
from core.config import get_version

# (style, ascii_art, suffix) 형식
LOGO_LINES: list[tuple[str, str, str]] = [
    ("#FFE600", "  _ __ ___   __ _", "   [bold white]MeLi Accounts CLI[/] [dim]v{version}[/]"),
    ("#FFE600", " | '_ ` _ \\ / _` |", "  [dim cyan]━━━━━━━━━━━━━━━━━━━━━━━━[/]"),
    ("#2D3277", " | | | | | | (_| |", "  [white]{developer}[/]"),
    ("#2D3277", " |_| |_| |_|\\__,_|", "  [cyan]{welcome}[/]"),
]


def print_banner(console: Console, developer: str) -> None:
    """배너 출력

    Args:
        console: Rich Console 인스턴스
        developer: 개발자 계정 닉네임
    """
    format_vars = {
        "version": get_version(),
        "developer": escape(developer),
        "welcome": t("common.welcome"),
    }

    console.print()
    for color, ascii_art, suffix in LOGO_LINES:
        text = Text()
        text.append(ascii_art, style=f"bold {color}")
        # Rich 마크업이 포함된 suffix는 별도 인자로 출력
        console.print(text, suffix.format(**format_vars))
    console.print()
