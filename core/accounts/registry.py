"""
core/accounts/registry.py - 계정 등록/조회

로그인 결과(프로필 + 토큰)를 계정 저장소에 등록하거나 갱신합니다.
닉네임이 유일 키이며, 같은 닉네임으로 다시 등록하면 기존 레코드를 갱신합니다.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from core.accounts.models import AccountRecord, Profile, Tokens
from core.exceptions import RegistrationError, StoreError

if TYPE_CHECKING:
    from core.meli.client import MeliClient
    from core.store import AccountStore

logger = logging.getLogger(__name__)


class AccountRegistry:
    """계정 레지스트리

    Args:
        store: 계정 저장소 (연결 관리는 호출자 책임)
    """

    def __init__(self, store: AccountStore):
        self.store = store

    def register(self, profile: Profile, tokens: Tokens, is_test_account: bool = False) -> AccountRecord:
        """계정 등록 또는 갱신

        Args:
            profile: 로그인한 사용자 프로필
            tokens: 발급받은 토큰
            is_test_account: 테스트 계정 여부 (호출자가 결정, 프로필 태그로 바꾸지 않음)

        Returns:
            AccountRecord (is_new_account()로 신규 여부 확인)

        Raises:
            RegistrationError: 저장 실패
        """
        if not profile.nickname:
            raise RegistrationError("프로필에 닉네임이 없습니다")

        try:
            existing = self.store.get(profile.nickname)
        except StoreError as e:
            raise RegistrationError(str(e), cause=e) from e

        if profile.is_test_user != is_test_account:
            logger.debug(
                "프로필 test_user 태그(%s)와 분류(%s)가 다름: %s",
                profile.is_test_user,
                is_test_account,
                profile.nickname,
            )

        now = datetime.now(timezone.utc).isoformat()
        record = AccountRecord(
            nickname=profile.nickname,
            id=profile.id,
            profile=asdict(profile),
            tokens=asdict(tokens),
            is_test_account=is_test_account,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        record._is_new = existing is None

        try:
            self.store.put(record)
        except StoreError as e:
            raise RegistrationError(str(e), cause=e) from e

        logger.debug(
            "계정 %s: %s (test=%s)",
            "등록" if record.is_new_account() else "갱신",
            record.nickname,
            record.is_test_account,
        )
        return record

    def update_tokens(self, record: AccountRecord, tokens: Tokens) -> AccountRecord:
        """토큰만 갱신한 새 레코드를 저장

        전달받은 레코드는 바꾸지 않으므로 저장 실패 시 저장소의 레코드는 파일과 같습니다.

        Raises:
            StoreError: 저장 실패
        """
        updated = replace(
            record,
            tokens=asdict(tokens),
            updated_at=datetime.now(timezone.utc).isoformat(),
            _is_new=False,
        )
        self.store.put(updated)
        return updated

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def find_by_nickname(self, nickname: str) -> AccountRecord | None:
        return self.store.get(nickname)

    def find_by_id(self, user_id: int) -> AccountRecord | None:
        for record in self.store.all():
            if record.id == user_id:
                return record
        return None

    def find_any_authorized(self) -> AccountRecord | None:
        """갱신 가능한 토큰을 가진 계정 하나 (없으면 None)"""
        for record in self.store.all():
            if record.is_authorized():
                return record
        return None

    # -------------------------------------------------------------------------
    # 토큰
    # -------------------------------------------------------------------------

    def get_access_token(self, record: AccountRecord, client: MeliClient) -> str:
        """유효한 access token 반환 (만료 시 refresh 후 저장)

        Raises:
            MeliAPIError: refresh 실패
            ValueError: 토큰이 없는 계정
        """
        tokens = record.get_tokens()
        if tokens is None:
            raise ValueError(f"'{record.nickname}' 계정에 토큰이 없습니다")

        if not tokens.is_expired() or not tokens.refresh_token:
            return tokens.access_token

        logger.debug("토큰 만료, 갱신: %s", record.nickname)
        refreshed = Tokens.from_response(client.refresh_token(tokens.refresh_token))
        if not refreshed.refresh_token:
            refreshed.refresh_token = tokens.refresh_token
        try:
            self.update_tokens(record, refreshed)
        except StoreError as e:
            # 갱신된 토큰은 이번 호출에서만 사용
            logger.warning("갱신된 토큰 저장 실패 (%s): %s", record.nickname, e)
        return refreshed.access_token


__all__ = ["AccountRegistry"]
