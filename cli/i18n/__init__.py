"""
cli/i18n - 다국어(ko/en) 메시지

기본 언어는 한국어(ko)이며 --lang en 으로 영어 메시지를 사용합니다.
현재 언어는 ContextVar에 보관되고 cli.app에서 한 번 설정됩니다.

메시지 키는 ``네임스페이스.키`` 형식입니다 (common, cli, menu, onboarding).

Usage:
    from cli.i18n import t, set_lang

    t("common.welcome")                                   # "환영합니다!"
    t("onboarding.login_failed", reason="access_denied")  # 보간
    t("common.bye", lang="en")                            # "Bye!"
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

logger = logging.getLogger(__name__)

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

_current_lang: ContextVar[str] = ContextVar("meli_accounts_lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    """현재 언어 코드"""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """현재 언어 설정 (지원하지 않는 코드는 기본 언어로)"""
    _current_lang.set(_normalize(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어로 번역

    Args:
        key: ``네임스페이스.키`` 형식의 메시지 키
        lang: 언어 강제 지정 (생략 시 현재 언어)
        **kwargs: 메시지 보간 인자

    Returns:
        번역된 문자열. 키가 없으면 키 자체, 보간 인자가 부족하면 보간 전 원문.
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        logger.debug("번역 키 없음: %s", key)
        return key

    template = entry.get(_normalize(lang or get_lang())) or entry[DEFAULT_LANG]
    if not kwargs:
        return template

    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError) as e:
        logger.debug("메시지 보간 실패 (%s): %s", key, e)
        return template


__all__ = ["t", "get_lang", "set_lang", "SUPPORTED_LANGS", "DEFAULT_LANG"]
