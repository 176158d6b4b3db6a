# cli/flow/orchestrator.py
"""
Onboarding Orchestrator - 계정 온보딩 단계 실행

액션:
    provision_new_test_account  테스트 계정 생성 → 로그인 → 등록(test)
    provision_existing_account  로그인 → 등록
    resolve_owner_data          오너 조회 (실패 시 1회 복구 후 재조회)

각 단계의 실패는 단계별 메시지로 래핑되어 호출자에게 전달되며,
앞 단계가 실패하면 뒤 단계는 호출되지 않습니다.

오너 조회 상태 전이:
    RESOLVING ─성공→ SUCCESS
        └─실패→ RECOVERING (경고, 로그인, 등록)
                   └→ RESOLVING(재시도) ─성공→ SUCCESS
                                          └─실패→ FATAL
복구는 단 1회입니다. 두 번째 조회 실패는 저장소/API 자체의 문제로 보고 즉시 치명적 오류로 올립니다.
복구 중 로그인이나 등록이 실패하면 두 번째 조회 없이 바로 FATAL입니다.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from cli.i18n import t
from cli.ui.console import print_info, print_plain, print_success, print_warning
from core.accounts.models import AccountRecord, Credentials, OwnerAccount, OwnerData, Profile, TestAccount, Tokens
from core.exceptions import (
    CollaboratorError,
    LoginError,
    OwnerResolutionError,
    ProvisioningError,
    RegistrationError,
    get_error_reason,
)

from .context import SessionState

logger = logging.getLogger(__name__)


# =============================================================================
# 협력자 인터페이스
# =============================================================================


class LoginProvider(Protocol):
    def setup(self) -> None: ...

    def run(self) -> Credentials: ...

    def clean(self) -> None: ...


class Registry(Protocol):
    def register(self, profile: Profile, tokens: Tokens, is_test_account: bool = False) -> AccountRecord: ...

    def find_any_authorized(self) -> AccountRecord | None: ...


class OwnerLookup(Protocol):
    def get(self) -> OwnerAccount: ...


class Provisioner(Protocol):
    def create(self, dev_nickname: str) -> TestAccount: ...


class OwnerState(Enum):
    """오너 조회 상태"""

    RESOLVING = "resolving"
    RECOVERING = "recovering"
    SUCCESS = "success"
    FATAL = "fatal"


# =============================================================================
# Orchestrator
# =============================================================================


class Onboarding:
    """온보딩 오케스트레이터

    Args:
        session: 세션 상태
        login: 로그인 흐름
        registry: 계정 레지스트리
        owner_resolver: 오너 조회
        provisioner: 테스트 계정 생성기
    """

    def __init__(
        self,
        session: SessionState,
        login: LoginProvider,
        registry: Registry,
        owner_resolver: OwnerLookup,
        provisioner: Provisioner,
    ):
        self.session = session
        self.login = login
        self.registry = registry
        self.owner_resolver = owner_resolver
        self.provisioner = provisioner
        self.owner_state: OwnerState | None = None

    # -------------------------------------------------------------------------
    # 액션
    # -------------------------------------------------------------------------

    def provision_new_test_account(self, dev_nickname: str | None = None) -> AccountRecord:
        """테스트 계정 생성 → 로그인 → 테스트 계정으로 등록

        Raises:
            ProvisioningError / LoginError / RegistrationError
        """
        print_info(t("onboarding.creating_test_account"))
        self.generate_test_account(dev_nickname or self.session.dev_nickname)
        credentials = self.do_login_flow()
        record = self.register_account(credentials, is_test_account=True)
        self._refresh_owner_data()
        return record

    def provision_existing_account(self) -> AccountRecord:
        """로그인 → 등록

        Raises:
            LoginError / RegistrationError
        """
        print_info(t("onboarding.login_existing"))
        credentials = self.do_login_flow()
        record = self.register_account(credentials)
        self._refresh_owner_data()
        return record

    def resolve_owner_data(self) -> OwnerData:
        """클라이언트 오너 데이터를 조회해 세션에 저장

        테스트 계정 생성/관리와 일반 계정 갱신에 필요합니다.

        Raises:
            OwnerResolutionError: 복구 후 재조회도 실패했거나 복구 로그인/등록 실패 (FATAL)
        """
        self.owner_state = OwnerState.RESOLVING
        try:
            owner = self.owner_resolver.get()
        except Exception as first_error:
            reason = get_error_reason(first_error)
            logger.debug("오너 조회 실패 (1차): %s", reason)
            self.owner_state = OwnerState.RECOVERING
            print_warning(t("onboarding.owner_unavailable", reason=reason))
            self._recover_owner_account()
            owner = self._resolve_again()

        self.session.set_owner_data(owner.client_owner_data)
        self.owner_state = OwnerState.SUCCESS
        logger.debug("오너 데이터: %s", owner.client_owner_data)
        return owner.client_owner_data

    # -------------------------------------------------------------------------
    # 단계
    # -------------------------------------------------------------------------

    def generate_test_account(self, dev_nickname: str) -> TestAccount:
        try:
            test_account = self.provisioner.create(dev_nickname)
        except Exception as e:
            raise ProvisioningError(t("onboarding.test_account_failed", reason=get_error_reason(e)), cause=e) from e

        print_plain(t("onboarding.test_account_is", account=str(test_account)))
        return test_account

    def do_login_flow(self) -> Credentials:
        try:
            credentials = self.login.run()
        except Exception as e:
            raise LoginError(t("onboarding.login_failed", reason=get_error_reason(e)), cause=e) from e

        print_success(t("onboarding.logged_in"))
        return credentials

    def register_account(self, credentials: Credentials, is_test_account: bool = False) -> AccountRecord:
        try:
            record = self.registry.register(credentials.profile, credentials.tokens, is_test_account=is_test_account)
        except Exception as e:
            raise RegistrationError(t("onboarding.registration_failed", reason=get_error_reason(e)), cause=e) from e

        self.session.mark_registered()
        key = "onboarding.registered_new" if record.is_new_account() else "onboarding.updated_existing"
        kind = t("onboarding.kind_test") if record.is_test_account else ""
        print_success(t(key, kind=kind, nickname=record.nickname))
        return record

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _recover_owner_account(self) -> None:
        """RECOVERING: 아무 계정으로 로그인 후 등록 (실패 시 FATAL)"""
        try:
            credentials = self.do_login_flow()
            self.register_account(credentials)
        except CollaboratorError as e:
            self.owner_state = OwnerState.FATAL
            raise OwnerResolutionError(t("onboarding.owner_failed", reason=e.message), cause=e) from e

    def _resolve_again(self) -> OwnerAccount:
        """RESOLVING(재시도): 결과가 최종"""
        self.owner_state = OwnerState.RESOLVING
        try:
            return self.owner_resolver.get()
        except Exception as e:
            self.owner_state = OwnerState.FATAL
            raise OwnerResolutionError(t("onboarding.owner_failed", reason=get_error_reason(e)), cause=e) from e

    def _refresh_owner_data(self) -> None:
        """등록 후 무효화된 오너 데이터를 1회 다시 조회 (실패해도 계속)"""
        try:
            owner = self.owner_resolver.get()
        except Exception as e:
            logger.debug("오너 데이터 재조회 실패", exc_info=True)
            print_warning(t("onboarding.owner_refresh_failed", reason=get_error_reason(e)))
            return
        self.session.set_owner_data(owner.client_owner_data)
