"""
cli/i18n/messages/common.py - Common Messages

Shared translations used across the CLI (errors, exit, confirmations).
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "welcome": {
        "ko": "환영합니다!",
        "en": "Welcome!",
    },
    "bye": {
        "ko": "안녕히 가세요!",
        "en": "Bye!",
    },
    "exit": {
        "ko": "종료",
        "en": "Exit",
    },
    "error": {
        "ko": "오류",
        "en": "Error",
    },
    "unexpected_error": {
        "ko": "예기치 않은 오류: {error}",
        "en": "Unexpected error: {error}",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
    "shutdown_failed": {
        "ko": "리소스 정리 중 오류: {error}",
        "en": "Error while releasing resources: {error}",
    },
}
