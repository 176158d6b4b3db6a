"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI options, help text, and startup errors.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Help Text
    # =========================================================================
    "description": {
        "ko": "MercadoLibre 사용자 계정 관리를 위한 대화형 CLI.",
        "en": "Interactive CLI for MercadoLibre user Accounts management.",
    },
    "user_option_help": {
        "ko": "MeLi API 요청에 사용할 개발자 계정 닉네임.",
        "en": "Run using specified nickname Account keys for MeLi API requests.",
    },
    "lang_option_help": {
        "ko": "UI 언어 설정 (ko: 한국어, en: English)",
        "en": "UI language (ko: Korean, en: English)",
    },
    "debug_option_help": {
        "ko": "디버그 로그와 상세 오류 출력",
        "en": "Show debug logs and error tracebacks",
    },
    # =========================================================================
    # Startup Errors
    # =========================================================================
    "user_required": {
        "ko": "-u|--user <nickname> 옵션을 지정하세요.",
        "en": "Please specify -u|--user <nickname> option.",
    },
    "config_error": {
        "ko": "설정 오류: {error}",
        "en": "Configuration error: {error}",
    },
    "startup_failed": {
        "ko": "시작 실패: {error}",
        "en": "Startup failed: {error}",
    },
}
