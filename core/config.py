"""
core/config.py - 중앙 설정 관리

애플리케이션 전체에서 사용되는 상수와 환경변수 기반 설정을 한 곳에서 관리합니다.

구성:
    - Settings: 불변 상수 (API 주소, 타임아웃, 콜백 서버 설정)
    - MeliConfig: 환경변수에서 읽는 MercadoLibre 앱 자격증명/경로
    - LogConfig: 로깅 설정
    - 헬퍼: get_env_bool, get_env_int, get_project_root, get_data_path, get_version

환경변수:
    MELI_CLIENT_ID        (필수) MercadoLibre 애플리케이션 ID
    MELI_CLIENT_SECRET    (필수) MercadoLibre 애플리케이션 시크릿
    MELI_SITE_ID          기본 사이트 (기본값: MLA)
    MELI_AUTH_URL         인증 서버 주소 (기본값: https://auth.mercadolibre.com.ar)
    MELI_CALLBACK_PORT    OAuth 콜백 포트 (기본값: 3000)
    MELI_ACCOUNTS_STORE   계정 저장 파일 경로
    MELI_OPEN_BROWSER     로그인 시 브라우저 자동 실행 (기본값: true)
    LOG_LEVEL / LOG_FORMAT

Usage:
    from core.config import settings, MeliConfig

    config = MeliConfig.from_env()
    print(config.redirect_uri)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# 상수
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """애플리케이션 상수 (불변)"""

    # MercadoLibre API
    API_BASE_URL: str = "https://api.mercadolibre.com"
    AUTH_BASE_URL: str = "https://auth.mercadolibre.com.ar"
    DEFAULT_SITE_ID: str = "MLA"
    API_TIMEOUT: int = 30

    # OAuth 콜백 서버
    CALLBACK_HOST: str = "localhost"
    CALLBACK_PORT: int = 3000
    CALLBACK_PATH: str = "/auth/mercadolibre/callback"
    LOGIN_TIMEOUT_SECONDS: int = 300

    # 토큰 만료 판단 버퍼 (초)
    TOKEN_EXPIRY_BUFFER_SECONDS: int = 60

    # 저장소
    STORE_DIR_NAME: str = "accounts"
    STORE_FILE_NAME: str = "accounts.json"


settings = Settings()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 (core/config.py 기준 2단계 상위)"""
    return Path(__file__).resolve().parent.parent


def get_data_path(category: str, filename: str) -> Path:
    """데이터 파일 경로 반환 (``{project_root}/temp/{category}/{filename}``)

    디렉토리는 만들지 않습니다. 저장 시점에 생성됩니다.
    """
    return get_project_root() / "temp" / category / filename


# =============================================================================
# 환경변수 헬퍼
# =============================================================================

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환 (알 수 없는 값이면 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (변환 실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.debug("정수가 아닌 환경변수 값 무시: %s=%r", name, value)
        return default


def get_env_str(name: str, default: str | None = None) -> str | None:
    """환경변수 문자열 (빈 문자열은 미설정으로 취급)"""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt에서 버전 문자열 반환"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError as e:
        logger.debug("버전 파일 읽기 실패: %s", e)
        return "0.0.0"


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정

    CLI 출력에 로그가 섞이지 않도록 기본 레벨은 WARNING입니다.
    """

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=(get_env_str("LOG_LEVEL") or default.level).upper(),
            format=get_env_str("LOG_FORMAT") or default.format,
        )


# =============================================================================
# MercadoLibre 애플리케이션 설정
# =============================================================================


@dataclass(frozen=True)
class MeliConfig:
    """MercadoLibre 애플리케이션 설정

    Attributes:
        client_id: 애플리케이션 ID
        client_secret: 애플리케이션 시크릿
        site_id: 기본 사이트 ID (테스트 계정 생성 시 사용)
        auth_base_url: 인증(authorization) 서버 주소
        api_base_url: REST API 주소
        callback_host: 로컬 콜백 서버 호스트
        callback_port: 로컬 콜백 서버 포트
        store_path: 계정 저장 파일 경로
        open_browser: 로그인 시 브라우저 자동 실행 여부 (MELI_OPEN_BROWSER)
    """

    client_id: str
    client_secret: str
    site_id: str = settings.DEFAULT_SITE_ID
    auth_base_url: str = settings.AUTH_BASE_URL
    api_base_url: str = settings.API_BASE_URL
    callback_host: str = settings.CALLBACK_HOST
    callback_port: int = settings.CALLBACK_PORT
    store_path: Path = field(
        default_factory=lambda: get_data_path(settings.STORE_DIR_NAME, settings.STORE_FILE_NAME)
    )
    open_browser: bool = True

    @property
    def redirect_uri(self) -> str:
        """OAuth redirect URI (애플리케이션에 등록된 값과 같아야 함)"""
        return f"http://{self.callback_host}:{self.callback_port}{settings.CALLBACK_PATH}"

    @classmethod
    def from_env(cls) -> MeliConfig:
        """환경변수에서 설정 로드

        Raises:
            ConfigurationError: MELI_CLIENT_ID / MELI_CLIENT_SECRET 누락 시
        """
        client_id = get_env_str("MELI_CLIENT_ID")
        client_secret = get_env_str("MELI_CLIENT_SECRET")

        missing = [
            name
            for name, value in (("MELI_CLIENT_ID", client_id), ("MELI_CLIENT_SECRET", client_secret))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"필수 환경변수가 설정되지 않았습니다: {', '.join(missing)}",
                details={"missing": missing},
            )

        store = get_env_str("MELI_ACCOUNTS_STORE")
        store_path = (
            Path(store).expanduser()
            if store
            else get_data_path(settings.STORE_DIR_NAME, settings.STORE_FILE_NAME)
        )

        return cls(
            client_id=str(client_id),
            client_secret=str(client_secret),
            site_id=(get_env_str("MELI_SITE_ID") or settings.DEFAULT_SITE_ID).upper(),
            auth_base_url=(get_env_str("MELI_AUTH_URL") or settings.AUTH_BASE_URL).rstrip("/"),
            callback_port=get_env_int("MELI_CALLBACK_PORT", settings.CALLBACK_PORT),
            store_path=store_path,
            open_browser=get_env_bool("MELI_OPEN_BROWSER", True),
        )
