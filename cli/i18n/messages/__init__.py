"""
cli/i18n/messages - 메시지 레지스트리

네임스페이스별 메시지 테이블을 ``네임스페이스.키`` 로 펼쳐 MESSAGES에 모읍니다.

    MESSAGES["onboarding.logged_in"] == {"ko": "로그인 완료!", "en": "Logged in!"}
"""

from __future__ import annotations

from typing import TypedDict

from .cli_commands import CLI_MESSAGES
from .common import COMMON_MESSAGES
from .menu import MENU_MESSAGES
from .onboarding import ONBOARDING_MESSAGES


class MessageDict(TypedDict):
    ko: str
    en: str


MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """네임스페이스 메시지 등록 (같은 키는 덮어씀)"""
    MESSAGES.update({f"{namespace}.{key}": value for key, value in messages.items()})


for _namespace, _table in (
    ("common", COMMON_MESSAGES),
    ("cli", CLI_MESSAGES),
    ("menu", MENU_MESSAGES),
    ("onboarding", ONBOARDING_MESSAGES),
):
    register_messages(_namespace, _table)


__all__ = ["MESSAGES", "MessageDict", "register_messages"]
