# cli/flow/runner.py
"""
Flow Runner - 시작/대화형 루프/종료를 관리하는 핵심 모듈.

실행 순서:
    setup()   저장소 연결 → 로그인 흐름 초기화 → 오너 데이터 조회 (FATAL이면 시작 실패)
    loop()    메뉴 표시 → 액션 실행, exit 선택 시 종료
    exit()    로그인 흐름 정리 → 저장소 연결 해제 (모든 종료 경로에서 실행)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from cli.i18n import t
from cli.ui.console import console, print_error, print_info, print_plain
from core.exceptions import DispatchError, MAError, StoreError

from .context import MenuAction, MenuChoice, SessionState
from .orchestrator import LoginProvider, Onboarding, Registry

logger = logging.getLogger(__name__)


class BackingStore(Protocol):
    def connect(self) -> None: ...

    def disconnect(self) -> None: ...

    def is_connected(self) -> bool: ...


class MenuPrompt(Protocol):
    def __call__(self, *, is_db_connected: bool, is_first_login: bool) -> MenuChoice: ...


class OnboardingRunner:
    """온보딩 CLI 실행기

    Args:
        session: 세션 상태
        store: 계정 저장소
        login: 로그인 흐름
        registry: 계정 레지스트리
        onboarding: 오케스트레이터
        prompt: 메뉴 렌더러 (is_db_connected, is_first_login → MenuChoice)
        on_exit: 저장소 해제 뒤 실행할 추가 정리 함수 (HTTP 클라이언트 등)
    """

    def __init__(
        self,
        session: SessionState,
        store: BackingStore,
        login: LoginProvider,
        registry: Registry,
        onboarding: Onboarding,
        prompt: MenuPrompt,
        on_exit: list[Callable[[], None]] | None = None,
    ):
        self.session = session
        self.store = store
        self.login = login
        self.registry = registry
        self.onboarding = onboarding
        self.prompt = prompt
        self._on_exit = list(on_exit or [])
        self._actions: dict[MenuAction, Callable[[], None]] = {
            MenuAction.NEW_TEST_ACCOUNT: self._new_test_account,
            MenuAction.EXISTING_ACCOUNT: self._existing_account,
            MenuAction.EXIT: self._exit_action,
        }

    # -------------------------------------------------------------------------
    # 시작 / 종료
    # -------------------------------------------------------------------------

    def setup(self) -> None:
        """필요한 서비스 초기화 (실패 시 예외 전파, 재시도 없음)"""
        self.store.connect()
        self.login.setup()
        owner_data = self.onboarding.resolve_owner_data()
        print_info(t("onboarding.owner_resolved", nickname=owner_data.nickname or "-", owner_id=owner_data.owner_id))

    def exit(self) -> None:
        """열린 서비스 정리 (정리하지 않으면 프로세스가 종료되지 않음)"""
        try:
            self.login.clean()
        finally:
            try:
                self.store.disconnect()
            finally:
                for close in self._on_exit:
                    close()

    def run(self) -> None:
        """setup → 대화형 루프 → exit

        exit()은 setup/루프 실패, Ctrl+C를 포함한 모든 경로에서 실행됩니다.
        """
        try:
            self.setup()
            self.session.is_first_login = self._detect_first_login()
            self.loop()
        finally:
            self.exit()

    # -------------------------------------------------------------------------
    # 대화형 루프
    # -------------------------------------------------------------------------

    def loop(self) -> None:
        """exit가 선택될 때까지 메뉴 표시 → 액션 실행"""
        while True:
            try:
                choice = self.prompt(
                    is_db_connected=self.store.is_connected(),
                    is_first_login=self.session.is_first_login,
                )
            except KeyboardInterrupt:
                console.print()
                choice = MenuChoice.of(MenuAction.EXIT)

            if not self.dispatch(choice):
                break

    def dispatch(self, choice: MenuChoice) -> bool:
        """선택된 액션 실행

        Returns:
            True: 루프 계속, False: 종료
        """
        handler = self._actions.get(choice.action) if choice.action is not None else None
        if handler is None:
            error = DispatchError(choice.raw)
            logger.warning("%s", error)
            print_error(t("onboarding.invalid_option", choice=repr(choice.raw)))
            return True

        handler()
        return not choice.is_exit

    # -------------------------------------------------------------------------
    # 액션 핸들러 (자체 실패는 보고만 하고 루프 유지)
    # -------------------------------------------------------------------------

    def _new_test_account(self) -> None:
        try:
            self.onboarding.provision_new_test_account(self.session.dev_nickname)
        except MAError as e:
            logger.debug("테스트 계정 액션 실패", exc_info=True)
            print_error(str(e))

    def _existing_account(self) -> None:
        try:
            self.onboarding.provision_existing_account()
        except MAError as e:
            logger.debug("기존 계정 액션 실패", exc_info=True)
            print_error(str(e))

    def _exit_action(self) -> None:
        print_plain(t("common.bye"))

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _detect_first_login(self) -> bool:
        """오너 데이터도, 인증된 계정도 없는 첫 실행인지 확인"""
        if self.session.owner_data is not None:
            return False
        try:
            return self.registry.find_any_authorized() is None
        except StoreError:
            logger.debug("첫 로그인 여부 확인 실패", exc_info=True)
            return False


def create_runner(dev_nickname: str) -> OnboardingRunner:
    """환경 설정으로 실제 협력자를 구성한 실행기 생성

    Raises:
        ConfigurationError: 필수 환경변수 누락
    """
    from cli.ui.main_menu import prompt_action
    from core.accounts import AccountRegistry, OwnerResolver, TestAccountProvisioner
    from core.config import MeliConfig
    from core.meli import LoginFlow, MeliClient
    from core.store import AccountStore

    config = MeliConfig.from_env()
    session = SessionState(dev_nickname=dev_nickname)
    store = AccountStore(config.store_path)
    client = MeliClient(config)
    registry = AccountRegistry(store)
    login = LoginFlow(
        config,
        client,
        on_auth_url=lambda url: print_plain(t("onboarding.open_auth_url", url=url)),
    )
    onboarding = Onboarding(
        session=session,
        login=login,
        registry=registry,
        owner_resolver=OwnerResolver(registry, client),
        provisioner=TestAccountProvisioner(registry, client, default_site_id=config.site_id),
    )
    return OnboardingRunner(
        session=session,
        store=store,
        login=login,
        registry=registry,
        onboarding=onboarding,
        prompt=prompt_action,
        on_exit=[client.close],
    )
