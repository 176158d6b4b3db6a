"""
cli/i18n/messages/onboarding.py - Onboarding Flow Messages

Contains translations for login, registration, test account creation
and owner data recovery.
"""

from __future__ import annotations

ONBOARDING_MESSAGES = {
    # =========================================================================
    # Actions
    # =========================================================================
    "creating_test_account": {
        "ko": "테스트 계정 생성 중...",
        "en": "Creating test account...",
    },
    "login_existing": {
        "ko": "기존 계정으로 로그인하세요.",
        "en": "Please log in with an existing account.",
    },
    "test_account_is": {
        "ko": "테스트 계정: {account}",
        "en": "Test account is: {account}",
    },
    "open_auth_url": {
        "ko": "브라우저에서 로그인하세요 (열리지 않으면 직접 접속): {url}",
        "en": "Log in on the browser (open it manually if needed): {url}",
    },
    "logged_in": {
        "ko": "로그인 완료!",
        "en": "Logged in!",
    },
    "registered_new": {
        "ko": "새 {kind}계정 '{nickname}' 등록 완료.",
        "en": "Registered new {kind}account '{nickname}' succesfully.",
    },
    "updated_existing": {
        "ko": "기존 {kind}계정 '{nickname}' 갱신 완료.",
        "en": "Updated existing {kind}account '{nickname}' succesfully.",
    },
    "kind_test": {
        "ko": "테스트 ",
        "en": "test ",
    },
    # =========================================================================
    # Stage Failures
    # =========================================================================
    "test_account_failed": {
        "ko": "테스트 계정을 생성할 수 없습니다: {reason}",
        "en": "Whoops, could not create a test account: {reason}",
    },
    "login_failed": {
        "ko": "인증을 완료할 수 없습니다. 사유: {reason}",
        "en": "Could not complete authentication. Reason: {reason}",
    },
    "registration_failed": {
        "ko": "계정 등록 중 문제가 발생했습니다: {reason}",
        "en": "Problem registering account: {reason}",
    },
    # =========================================================================
    # Owner Data
    # =========================================================================
    "owner_unavailable": {
        "ko": "클라이언트 오너 계정 정보를 가져올 수 없습니다. 사유: {reason} 아무 계정으로나 로그인한 뒤 다시 시도하세요.",
        "en": "Could not retrieve client owner account data. Reason: {reason} Please log in with any account and try again.",
    },
    "owner_failed": {
        "ko": "클라이언트 오너 계정 정보를 확인할 수 없습니다: {reason}",
        "en": "Could not resolve client owner account data: {reason}",
    },
    "owner_refresh_failed": {
        "ko": "오너 계정 정보 갱신 실패: {reason}",
        "en": "Could not refresh owner account data: {reason}",
    },
    "owner_resolved": {
        "ko": "클라이언트 오너: {nickname} ({owner_id})",
        "en": "Client owner: {nickname} ({owner_id})",
    },
    # =========================================================================
    # Dispatch
    # =========================================================================
    "invalid_option": {
        "ko": "선택한 옵션이 유효하지 않습니다: {choice}",
        "en": "Selected option is not valid: {choice}",
    },
}
