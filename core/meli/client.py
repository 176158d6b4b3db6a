"""
core/meli/client.py - MercadoLibre REST API 클라이언트

httpx.Client를 감싸 타임아웃/헤더/오류 변환을 한 곳에서 처리합니다.
모든 실패(비 2xx 응답, 전송 오류)는 MeliAPIError로 변환됩니다.

Usage:
    from core.meli import MeliClient

    with MeliClient(config) as client:
        me = client.get_me(access_token)
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import MeliConfig, settings
from core.exceptions import MeliAPIError

logger = logging.getLogger(__name__)


def _extract_error_message(response: httpx.Response) -> str | None:
    """API 오류 응답에서 메시지 추출 (message → error_description → error)"""
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None

    if isinstance(body, dict):
        for key in ("message", "error_description", "error"):
            value = body.get(key)
            if value:
                return str(value)
    return None


class MeliClient:
    """MercadoLibre API 클라이언트

    Args:
        config: 애플리케이션 설정
        http: 주입할 httpx.Client (테스트용, 미지정 시 생성)
    """

    def __init__(self, config: MeliConfig, http: httpx.Client | None = None):
        self.config = config
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=config.api_base_url,
            timeout=httpx.Timeout(settings.API_TIMEOUT),
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> MeliClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # -------------------------------------------------------------------------
    # OAuth
    # -------------------------------------------------------------------------

    def exchange_code(self, code: str) -> dict[str, Any]:
        """authorization code → 토큰"""
        return self._request(
            "POST",
            "/oauth/token",
            data={
                "grant_type": "authorization_code",
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "code": code,
                "redirect_uri": self.config.redirect_uri,
            },
        )

    def refresh_token(self, refresh_token: str) -> dict[str, Any]:
        """refresh token으로 access token 갱신"""
        return self._request(
            "POST",
            "/oauth/token",
            data={
                "grant_type": "refresh_token",
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "refresh_token": refresh_token,
            },
        )

    # -------------------------------------------------------------------------
    # Users / Applications
    # -------------------------------------------------------------------------

    def get_me(self, access_token: str) -> dict[str, Any]:
        """토큰 소유자 프로필"""
        return self._request("GET", "/users/me", access_token=access_token)

    def get_user(self, user_id: int | str) -> dict[str, Any]:
        """공개 사용자 정보"""
        return self._request("GET", f"/users/{user_id}")

    def get_application(self, access_token: str) -> dict[str, Any]:
        """현재 애플리케이션(client) 정보 (owner_id 포함)"""
        return self._request("GET", f"/applications/{self.config.client_id}", access_token=access_token)

    def create_test_user(self, access_token: str, site_id: str) -> dict[str, Any]:
        """테스트 사용자 생성 (개발자 계정 토큰 필요)"""
        return self._request(
            "POST",
            "/users/test_user",
            access_token=access_token,
            json={"site_id": site_id},
        )

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        access_token: str | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        headers: dict[str, str] = {}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        logger.debug("MeLi API 요청: %s %s", method, path)
        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise MeliAPIError(method, path, error_message=str(e) or e.__class__.__name__, cause=e) from e

        if response.is_error:
            error_message = _extract_error_message(response)
            logger.debug("MeLi API 오류: %s %s -> %d %s", method, path, response.status_code, error_message)
            raise MeliAPIError(method, path, status_code=response.status_code, error_message=error_message)

        try:
            body = response.json()
        except ValueError as e:
            raise MeliAPIError(
                method, path, status_code=response.status_code, error_message="JSON 응답이 아닙니다", cause=e
            ) from e

        if not isinstance(body, dict):
            raise MeliAPIError(
                method, path, status_code=response.status_code, error_message="예상하지 못한 응답 형식"
            )
        return body
