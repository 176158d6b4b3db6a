"""
tests/conftest.py - pytest 공통 픽스처

외부 협력자(로그인, 레지스트리, 오너 조회, 테스트 계정 생성, 저장소)의
가짜 구현과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_login, fake_registry, session):
        fake_login.results = [make_credentials("seller123")]
        ...
"""

import sys
from pathlib import Path
from typing import Any

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cli.flow.context import MenuChoice, SessionState  # noqa: E402
from cli.i18n import set_lang  # noqa: E402
from core.accounts.models import (  # noqa: E402
    AccountRecord,
    Credentials,
    OwnerAccount,
    OwnerData,
    Profile,
    TestAccount,
    Tokens,
)
from core.config import MeliConfig  # noqa: E402
from core.exceptions import OwnerResolutionError  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (언어/환경변수 초기화)"""
    for name in (
        "MELI_CLIENT_ID",
        "MELI_CLIENT_SECRET",
        "MELI_SITE_ID",
        "MELI_AUTH_URL",
        "MELI_CALLBACK_PORT",
        "MELI_ACCOUNTS_STORE",
        "MELI_OPEN_BROWSER",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    set_lang("ko")

    yield

    set_lang("ko")


@pytest.fixture
def meli_config(tmp_path):
    """테스트용 MeliConfig (저장소는 tmp_path)"""
    return MeliConfig(
        client_id="123456",
        client_secret="s3cr3t",
        callback_port=0,
        store_path=tmp_path / "accounts.json",
    )


# =============================================================================
# 데이터 헬퍼
# =============================================================================


def make_profile(nickname: str = "seller123", user_id: int = 1001, **kwargs: Any) -> Profile:
    return Profile(id=user_id, nickname=nickname, site_id=kwargs.pop("site_id", "MLA"), **kwargs)


def make_tokens(access: str = "APP_USR-access", refresh: str | None = "TG-refresh", **kwargs: Any) -> Tokens:
    return Tokens(access_token=access, refresh_token=refresh, **kwargs)


def make_credentials(nickname: str = "seller123", user_id: int = 1001) -> Credentials:
    return Credentials(profile=make_profile(nickname, user_id), tokens=make_tokens())


def make_owner_account(nickname: str = "owner_dev", owner_id: int = 777) -> OwnerAccount:
    account = AccountRecord(nickname=nickname, id=owner_id, tokens={"access_token": "a", "refresh_token": "r"})
    return OwnerAccount(
        account=account,
        client_owner_data=OwnerData(client_id="123456", owner_id=owner_id, nickname=nickname, site_id="MLA"),
    )


# =============================================================================
# 협력자 가짜 구현
# =============================================================================


class FakeLogin:
    """호출 기록을 남기는 로그인 흐름

    results 항목이 Exception이면 raise, 아니면 반환합니다.
    """

    def __init__(self, results: list | None = None):
        self.results = list(results or [])
        self.calls: list[str] = []

    def setup(self) -> None:
        self.calls.append("setup")

    def run(self) -> Credentials:
        self.calls.append("run")
        result = self.results.pop(0) if self.results else make_credentials()
        if isinstance(result, Exception):
            raise result
        return result

    def clean(self) -> None:
        self.calls.append("clean")

    @property
    def run_count(self) -> int:
        return self.calls.count("run")


class FakeRegistry:
    """메모리 기반 레지스트리 (AccountRegistry와 같은 신규/갱신 판정)"""

    def __init__(self, error: Exception | None = None, authorized: AccountRecord | None = None):
        self.error = error
        self.authorized = authorized
        self.records: dict[str, AccountRecord] = {}
        self.calls: list[dict[str, Any]] = []

    def register(self, profile: Profile, tokens: Tokens, is_test_account: bool = False) -> AccountRecord:
        self.calls.append({"profile": profile, "tokens": tokens, "is_test_account": is_test_account})
        if self.error is not None:
            raise self.error
        existing = self.records.get(profile.nickname)
        record = AccountRecord(
            nickname=profile.nickname,
            id=profile.id,
            tokens={"access_token": tokens.access_token, "refresh_token": tokens.refresh_token},
            is_test_account=is_test_account,
        )
        record._is_new = existing is None
        self.records[profile.nickname] = record
        return record

    def find_any_authorized(self) -> AccountRecord | None:
        return self.authorized


class FakeOwnerResolver:
    """results 순서대로 응답하는 오너 조회 (Exception 항목은 raise)"""

    def __init__(self, results: list | None = None):
        self.results = list(results or [])
        self.call_count = 0

    def get(self) -> OwnerAccount:
        self.call_count += 1
        result = self.results.pop(0) if self.results else OwnerResolutionError("not found")
        if isinstance(result, Exception):
            raise result
        return result


class FakeProvisioner:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[str] = []

    def create(self, dev_nickname: str) -> TestAccount:
        self.calls.append(dev_nickname)
        if self.error is not None:
            raise self.error
        return TestAccount(id=5001, nickname="TETE8812345", password="qatest1234", site_status="active")


class FakeStore:
    def __init__(self, connect_error: Exception | None = None):
        self.connect_error = connect_error
        self.connected = False
        self.calls: list[str] = []

    def connect(self) -> None:
        self.calls.append("connect")
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def disconnect(self) -> None:
        self.calls.append("disconnect")
        self.connected = False

    def is_connected(self) -> bool:
        return self.connected


class ScriptedPrompt:
    """미리 정한 선택값을 차례로 돌려주는 메뉴 렌더러

    항목이 BaseException이면 raise 합니다 (KeyboardInterrupt 재현용).
    """

    def __init__(self, answers: list):
        self.answers = list(answers)
        self.calls: list[dict[str, bool]] = []

    def __call__(self, *, is_db_connected: bool, is_first_login: bool):
        self.calls.append({"is_db_connected": is_db_connected, "is_first_login": is_first_login})
        if not self.answers:
            raise AssertionError("메뉴가 예상보다 많이 호출되었습니다")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return MenuChoice.of(answer)


# =============================================================================
# 픽스처
# =============================================================================


@pytest.fixture
def session():
    return SessionState(dev_nickname="seller123")


@pytest.fixture
def fake_login():
    return FakeLogin()


@pytest.fixture
def fake_registry():
    return FakeRegistry()


@pytest.fixture
def fake_provisioner():
    return FakeProvisioner()


@pytest.fixture
def fake_store():
    return FakeStore()
