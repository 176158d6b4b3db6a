"""
cli/i18n/messages/menu.py - Menu Messages

Contains translations for the main action menu.
"""

from __future__ import annotations

MENU_MESSAGES = {
    # =========================================================================
    # Main Menu
    # =========================================================================
    "title": {
        "ko": "무엇을 하시겠습니까?",
        "en": "What do you want to do?",
    },
    "new_test_account": {
        "ko": "새 테스트 계정 생성",
        "en": "Create a new test account",
    },
    "existing_account": {
        "ko": "기존 계정으로 로그인",
        "en": "Log in with an existing account",
    },
    "first_account": {
        "ko": "첫 계정 로그인 (개발자 계정 권장)",
        "en": "Log in your first account (developer account recommended)",
    },
    "exit": {
        "ko": "종료",
        "en": "Exit",
    },
    # =========================================================================
    # Status / Disabled Reasons
    # =========================================================================
    "db_connected": {
        "ko": "저장소: 연결됨",
        "en": "Store: connected",
    },
    "db_disconnected": {
        "ko": "저장소: 연결 끊김",
        "en": "Store: disconnected",
    },
    "requires_db": {
        "ko": "저장소 연결 필요",
        "en": "requires store connection",
    },
    "requires_registered_account": {
        "ko": "먼저 계정을 등록하세요",
        "en": "register an account first",
    },
}
