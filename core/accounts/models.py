"""
core/accounts/models.py - 계정 도메인 데이터 클래스

포함 항목:
    - Tokens: OAuth 토큰 쌍 (access/refresh) + 만료 시각
    - Profile: /users/me 응답에서 추출한 사용자 프로필
    - Credentials: 로그인 결과 (Profile + Tokens)
    - AccountRecord: 저장소에 보관되는 계정 레코드 (닉네임 기준 유일)
    - OwnerData / OwnerAccount: 애플리케이션 오너 메타데이터
    - TestAccount: 테스트(샌드박스) 계정 생성 응답
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any

from core.config import settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# =============================================================================
# Tokens
# =============================================================================


@dataclass
class Tokens:
    """OAuth 토큰 쌍

    Attributes:
        access_token: API 호출용 토큰
        refresh_token: 갱신용 토큰 (offline_access 권한이 없으면 None)
        expires_at: access_token 만료 시각 (ISO format, UTC)
        scope: 부여된 권한 범위
    """

    access_token: str
    refresh_token: str | None = None
    expires_at: str | None = None
    scope: str | None = None

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> Tokens:
        """/oauth/token 응답으로부터 생성 (expires_in 초 → 만료 시각)"""
        expires_at = None
        expires_in = data.get("expires_in")
        if isinstance(expires_in, (int, float)):
            expires_at = (_utcnow() + timedelta(seconds=int(expires_in))).isoformat()

        return cls(
            access_token=str(data["access_token"]),
            refresh_token=data.get("refresh_token"),
            expires_at=expires_at,
            scope=data.get("scope"),
        )

    def is_expired(self, buffer_seconds: int = settings.TOKEN_EXPIRY_BUFFER_SECONDS) -> bool:
        """만료 여부 (만료 시각을 모르면 만료되지 않은 것으로 간주)"""
        expires_at = _parse_datetime(self.expires_at)
        if expires_at is None:
            return False
        return _utcnow() >= expires_at - timedelta(seconds=buffer_seconds)


# =============================================================================
# Profile / Credentials
# =============================================================================


@dataclass
class Profile:
    """MercadoLibre 사용자 프로필 (/users/me)"""

    id: int
    nickname: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    site_id: str | None = None
    user_type: str | None = None
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Profile:
        """API 응답 딕셔너리에서 필요한 필드만 추출"""
        return cls(
            id=int(data["id"]),
            nickname=str(data["nickname"]),
            email=data.get("email"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            site_id=data.get("site_id"),
            user_type=data.get("user_type"),
            tags=list(data.get("tags") or []),
        )

    @property
    def is_test_user(self) -> bool:
        """MercadoLibre가 테스트 사용자로 태깅했는지 여부"""
        return "test_user" in self.tags


@dataclass
class Credentials:
    """로그인 흐름의 결과 (프로필 + 토큰)"""

    profile: Profile
    tokens: Tokens


# =============================================================================
# AccountRecord
# =============================================================================


@dataclass
class AccountRecord:
    """저장소에 보관되는 계정 레코드

    닉네임이 유일 키입니다. ``_is_new``는 저장되지 않으며
    등록(register) 호출 시점에 이전 레코드가 없었는지를 나타냅니다.
    """

    nickname: str
    id: int
    profile: dict[str, Any] = field(default_factory=dict)
    tokens: dict[str, Any] | None = None
    is_test_account: bool = False
    created_at: str = ""
    updated_at: str = ""
    _is_new: bool = field(default=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        now = _utcnow().isoformat()
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = self.created_at

    def is_new_account(self) -> bool:
        """이번 등록으로 새로 생성된 레코드인지 여부"""
        return self._is_new

    def get_tokens(self) -> Tokens | None:
        """저장된 토큰을 Tokens 객체로 반환"""
        if not self.tokens or not self.tokens.get("access_token"):
            return None
        return Tokens(**{k: v for k, v in self.tokens.items() if k in _TOKEN_FIELDS})

    def is_authorized(self) -> bool:
        """갱신 가능한 토큰을 가지고 있는지 여부"""
        tokens = self.get_tokens()
        return tokens is not None and bool(tokens.refresh_token)

    @property
    def site_id(self) -> str | None:
        return self.profile.get("site_id")

    def to_dict(self) -> dict[str, Any]:
        """저장용 딕셔너리 (_is_new 제외)"""
        data = asdict(self)
        data.pop("_is_new", None)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountRecord:
        """저장된 딕셔너리에서 생성 (알 수 없는 필드 무시)"""
        filtered = {k: v for k, v in data.items() if k in _RECORD_FIELDS}
        return cls(**filtered)


_TOKEN_FIELDS = {f.name for f in fields(Tokens)}
_RECORD_FIELDS = {f.name for f in fields(AccountRecord) if not f.name.startswith("_")}


# =============================================================================
# Owner
# =============================================================================


@dataclass(frozen=True)
class OwnerData:
    """애플리케이션(client) 오너 메타데이터"""

    client_id: str
    owner_id: int
    nickname: str | None = None
    site_id: str | None = None


@dataclass
class OwnerAccount:
    """오너 조회 결과

    Attributes:
        account: 조회에 사용된 인증 계정
        client_owner_data: 애플리케이션 오너 메타데이터
    """

    account: AccountRecord
    client_owner_data: OwnerData


# =============================================================================
# TestAccount
# =============================================================================


@dataclass
class TestAccount:
    """POST /users/test_user 응답"""

    __test__ = False  # pytest 수집 제외

    id: int
    nickname: str
    password: str | None = None
    email: str | None = None
    site_status: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> TestAccount:
        return cls(
            id=int(data["id"]),
            nickname=str(data["nickname"]),
            password=data.get("password"),
            email=data.get("email"),
            site_status=data.get("site_status"),
        )

    def __str__(self) -> str:
        return f"{self.nickname} (id={self.id}, password={self.password})"
