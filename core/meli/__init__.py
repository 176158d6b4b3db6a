"""
core/meli - MercadoLibre API 연동

- MeliClient: REST API 클라이언트 (httpx)
- LoginFlow: 브라우저 + 로컬 콜백 기반 OAuth 로그인
"""

from .client import MeliClient
from .login import LoginFlow

__all__ = ["MeliClient", "LoginFlow"]
