"""
tests/core/meli/test_login_flow.py - core/meli/login.py 테스트

콜백 서버는 임시 포트(0)로 띄우고, 브라우저 대신 콜백을 직접 호출합니다.
"""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from core.config import settings
from core.exceptions import LoginError
from core.meli import LoginFlow, MeliClient


def api_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/oauth/token":
        return httpx.Response(200, json={"access_token": "APP_USR-1", "refresh_token": "TG-1", "expires_in": 21600})
    if request.url.path == "/users/me":
        return httpx.Response(200, json={"id": 1001, "nickname": "seller123", "site_id": "MLA", "tags": ["normal"]})
    return httpx.Response(404, json={"message": "not found"})


@pytest.fixture
def client(meli_config):
    http = httpx.Client(base_url=meli_config.api_base_url, transport=httpx.MockTransport(api_handler))
    return MeliClient(meli_config, http=http)


def state_of(url: str) -> str:
    return parse_qs(urlparse(url).query)["state"][0]


class FakeBrowser:
    """인증 URL을 받아 콜백 결과를 큐에 넣는 브라우저"""

    def __init__(self, flow_ref: list, params_for):
        self.flow_ref = flow_ref
        self.params_for = params_for
        self.urls: list[str] = []

    def __call__(self, url: str) -> bool:
        self.urls.append(url)
        self.flow_ref[0]._server.results.put(self.params_for(url))
        return True


def build_flow(meli_config, client, params_for, **kwargs) -> tuple[LoginFlow, FakeBrowser]:
    ref: list = [None]
    browser = FakeBrowser(ref, params_for)
    flow = LoginFlow(meli_config, client, open_browser=browser, timeout=2, **kwargs)
    ref[0] = flow
    return flow, browser


class TestLifecycle:
    def test_run_without_setup(self, meli_config, client):
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True)
        with pytest.raises(LoginError):
            flow.run()

    def test_clean_idempotent(self, meli_config, client):
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True)
        flow.setup()
        assert flow.is_ready is True

        flow.clean()
        flow.clean()

        assert flow.is_ready is False


class TestRun:
    def test_success(self, meli_config, client):
        """콜백 → 토큰 교환 → 프로필 조회"""
        announced: list[str] = []
        flow, browser = build_flow(
            meli_config,
            client,
            lambda url: {"code": "TG-code", "state": state_of(url)},
            on_auth_url=announced.append,
        )
        flow.setup()
        try:
            credentials = flow.run()
        finally:
            flow.clean()

        assert credentials.profile.nickname == "seller123"
        assert credentials.tokens.refresh_token == "TG-1"
        assert announced == browser.urls
        assert browser.urls[0].startswith(f"{meli_config.auth_base_url}/authorization?")

    def test_authorization_denied(self, meli_config, client):
        flow, _ = build_flow(
            meli_config,
            client,
            lambda url: {"error": "access_denied", "error_description": "user denied", "state": state_of(url)},
        )
        flow.setup()
        try:
            with pytest.raises(LoginError, match="user denied"):
                flow.run()
        finally:
            flow.clean()

    def test_state_mismatch_ignored_until_timeout(self, meli_config, client):
        """state가 다른 콜백만 오면 시간 초과"""
        flow, _ = build_flow(meli_config, client, lambda url: {"code": "TG-code", "state": "forged"})
        flow.timeout = 0.3
        flow.setup()
        try:
            with pytest.raises(LoginError, match="시간 초과"):
                flow.run()
        finally:
            flow.clean()

    def test_foreign_error_callback_does_not_abort(self, meli_config, client):
        """state 없는 error 콜백은 무시하고 진짜 콜백을 기다림"""

        def browser(url: str) -> bool:
            results = flow._server.results
            results.put({"error": "access_denied", "error_description": "forged"})
            results.put({"code": "TG-code", "state": state_of(url)})
            return True

        flow = LoginFlow(meli_config, client, open_browser=browser, timeout=2)
        flow.setup()
        try:
            credentials = flow.run()
        finally:
            flow.clean()

        assert credentials.profile.nickname == "seller123"

    def test_wait_without_server(self, meli_config, client):
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True)
        with pytest.raises(LoginError):
            flow._wait_for_code("state")

    def test_timeout(self, meli_config, client):
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True, timeout=0.1)
        flow.setup()
        try:
            with pytest.raises(LoginError):
                flow.run()
        finally:
            flow.clean()


class TestCallbackServer:
    """실제 HTTP 콜백 처리"""

    def test_callback_request(self, meli_config, client):
        def browser(url: str) -> bool:
            port = flow._server.server_address[1]
            response = httpx.get(
                f"http://127.0.0.1:{port}{settings.CALLBACK_PATH}",
                params={"code": "TG-code", "state": state_of(url)},
                trust_env=False,
            )
            assert response.status_code == 200
            return True

        flow = LoginFlow(meli_config, client, open_browser=browser, timeout=5)
        flow.setup()
        try:
            credentials = flow.run()
        finally:
            flow.clean()

        assert credentials.profile.id == 1001

    def test_error_page_escaped(self, meli_config, client):
        """콜백 페이지의 오류 설명은 HTML 이스케이프"""
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True)
        flow.setup()
        try:
            port = flow._server.server_address[1]
            response = httpx.get(
                f"http://127.0.0.1:{port}{settings.CALLBACK_PATH}",
                params={"error": "x", "error_description": "<script>alert(1)</script>"},
                trust_env=False,
            )
        finally:
            flow.clean()

        assert response.status_code == 200
        assert "<script>" not in response.text
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in response.text

    def test_unknown_path_404(self, meli_config, client):
        flow = LoginFlow(meli_config, client, open_browser=lambda url: True)
        flow.setup()
        try:
            port = flow._server.server_address[1]
            response = httpx.get(f"http://127.0.0.1:{port}/favicon.ico", trust_env=False)
        finally:
            flow.clean()

        assert response.status_code == 404
