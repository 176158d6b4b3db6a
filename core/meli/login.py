"""
core/meli/login.py - CLI OAuth 로그인 흐름

브라우저에서 MercadoLibre 로그인/승인을 진행하고, 로컬 콜백 서버로
authorization code를 받아 토큰과 프로필로 교환합니다.

수명 주기:
    setup()  - 콜백 서버 시작 (프로세스당 1회)
    run()    - 로그인 1회 수행 → Credentials
    clean()  - 콜백 서버 종료 (여러 번 호출해도 안전)
"""

from __future__ import annotations

import html
import logging
import queue
import secrets
import threading
import time
import webbrowser
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import parse_qs, urlencode, urlparse

from core.accounts.models import Credentials, Profile, Tokens
from core.config import MeliConfig, settings
from core.exceptions import LoginError, MeliAPIError
from core.meli.client import MeliClient

logger = logging.getLogger(__name__)

_CALLBACK_PAGE = """<!doctype html>
<html><head><meta charset="utf-8"><title>meli-accounts</title></head>
<body style="font-family: sans-serif">
<h3>{title}</h3>
<p>{body}</p>
</body></html>
"""


class _CallbackServer(HTTPServer):
    """콜백 결과를 큐에 전달하는 HTTPServer"""

    def __init__(self, address: tuple[str, int], callback_path: str):
        super().__init__(address, _CallbackHandler)
        self.callback_path = callback_path
        self.results: queue.Queue[dict[str, str]] = queue.Queue()


class _CallbackHandler(BaseHTTPRequestHandler):
    server: _CallbackServer

    def do_GET(self) -> None:  # noqa: N802
        parsed = urlparse(self.path)
        if parsed.path != self.server.callback_path:
            self.send_error(404)
            return

        params = {key: values[0] for key, values in parse_qs(parsed.query).items() if values}
        self.server.results.put(params)

        if "error" in params:
            page = _CALLBACK_PAGE.format(
                title="Login failed",
                body=html.escape(params.get("error_description") or params["error"]),
            )
        else:
            page = _CALLBACK_PAGE.format(title="Logged in!", body="You can close this window and return to the terminal.")

        content = page.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(content)))
        self.end_headers()
        self.wfile.write(content)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug("callback: " + format, *args)


class LoginFlow:
    """CLI 로그인 흐름

    Args:
        config: 애플리케이션 설정
        client: MeliClient (토큰 교환, 프로필 조회)
        open_browser: URL을 여는 함수 (기본: webbrowser.open)
        on_auth_url: 인증 URL 안내 콜백 (브라우저가 열리지 않을 때 사용자가 직접 접속)
        timeout: 콜백 대기 시간 (초)
    """

    def __init__(
        self,
        config: MeliConfig,
        client: MeliClient,
        open_browser: Callable[[str], bool] = webbrowser.open,
        on_auth_url: Callable[[str], None] | None = None,
        timeout: float = settings.LOGIN_TIMEOUT_SECONDS,
    ):
        self.config = config
        self.client = client
        self._open_browser = open_browser
        self._on_auth_url = on_auth_url
        self.timeout = timeout
        self._server: _CallbackServer | None = None
        self._thread: threading.Thread | None = None

    @property
    def is_ready(self) -> bool:
        return self._server is not None

    # -------------------------------------------------------------------------
    # 수명 주기
    # -------------------------------------------------------------------------

    def setup(self) -> None:
        """콜백 서버 시작

        Raises:
            LoginError: 포트를 열 수 없는 경우
        """
        if self._server is not None:
            return

        address = (self.config.callback_host, self.config.callback_port)
        try:
            server = _CallbackServer(address, settings.CALLBACK_PATH)
        except OSError as e:
            raise LoginError(
                f"로그인 콜백 서버를 시작할 수 없습니다 ({address[0]}:{address[1]}): {e}", cause=e
            ) from e

        self._server = server
        self._thread = threading.Thread(target=server.serve_forever, name="meli-login-callback", daemon=True)
        self._thread.start()
        logger.debug("로그인 콜백 서버 시작: %s", self.config.redirect_uri)

    def clean(self) -> None:
        """콜백 서버 종료"""
        server, thread = self._server, self._thread
        self._server = None
        self._thread = None
        if server is None:
            return

        server.shutdown()
        server.server_close()
        if thread is not None:
            thread.join(timeout=5)
        logger.debug("로그인 콜백 서버 종료")

    # -------------------------------------------------------------------------
    # 로그인
    # -------------------------------------------------------------------------

    def build_authorization_url(self, state: str) -> str:
        query = urlencode(
            {
                "response_type": "code",
                "client_id": self.config.client_id,
                "redirect_uri": self.config.redirect_uri,
                "state": state,
            }
        )
        return f"{self.config.auth_base_url}/authorization?{query}"

    def run(self) -> Credentials:
        """로그인 1회 수행

        Returns:
            Credentials (프로필 + 토큰)

        Raises:
            LoginError: 콜백 서버 미시작, 시간 초과, 승인 거부, 토큰 교환 실패
        """
        if self._server is None:
            raise LoginError("로그인 흐름이 초기화되지 않았습니다 (setup 필요)")

        # 이전 시도의 잔여 콜백 제거
        while not self._server.results.empty():
            self._server.results.get_nowait()

        state = secrets.token_urlsafe(16)
        url = self.build_authorization_url(state)

        if self._on_auth_url is not None:
            self._on_auth_url(url)
        if not (self.config.open_browser and self._open_browser(url)):
            logger.info("브라우저를 열 수 없습니다. 직접 접속하세요: %s", url)

        code = self._wait_for_code(state)

        try:
            tokens = Tokens.from_response(self.client.exchange_code(code))
            profile = Profile.from_api(self.client.get_me(tokens.access_token))
        except MeliAPIError as e:
            raise LoginError(e.reason, cause=e) from e
        except (KeyError, TypeError, ValueError) as e:
            raise LoginError(f"예상하지 못한 응답 형식: {e}", cause=e) from e

        logger.debug("로그인 완료: %s (%s)", profile.nickname, profile.id)
        return Credentials(profile=profile, tokens=tokens)

    def _wait_for_code(self, state: str) -> str:
        """state가 일치하는 콜백을 기다려 authorization code 반환

        state가 다른 콜백(다른 로그인 요청, 외부 요청)은 무시하고 계속 기다립니다.
        """
        server = self._server
        if server is None:
            raise LoginError("로그인 흐름이 초기화되지 않았습니다 (setup 필요)")

        deadline = time.monotonic() + self.timeout
        params: dict[str, str] | None = None
        while params is None:
            try:
                params = server.results.get(timeout=max(deadline - time.monotonic(), 0))
            except queue.Empty:
                raise LoginError(f"로그인 대기 시간 초과 ({int(self.timeout)}초)") from None

            if params.get("state") != state:
                logger.debug("state 불일치 콜백 무시: %s", sorted(params))
                params = None

        if "error" in params:
            raise LoginError(params.get("error_description") or params["error"])
        code = params.get("code")
        if not code:
            raise LoginError("authorization code가 없습니다")
        return code
