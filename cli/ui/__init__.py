# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (메뉴 선택, 배너, 콘솔 출력)
"""

# Direct imports (rich/questionary are commonly used, no lazy import needed)
from .banner import print_banner
from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    get_console,
    get_log_handler,
    print_error,
    print_info,
    print_plain,
    print_success,
    print_warning,
)
from .main_menu import build_choices, prompt_action

__all__: list[str] = [
    "print_banner",
    "build_choices",
    "prompt_action",
    "console",
    "get_console",
    "get_log_handler",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "SYMBOL_INFO",
    # 메시지 출력
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_plain",
]
