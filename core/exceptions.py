"""
core/exceptions.py - meli-accounts 예외

온보딩 단계(테스트 계정, 로그인, 등록, 오너 조회)별로 실패를 구분하고,
사용자에게 보여줄 사유를 예외에서 꺼내는 헬퍼를 제공합니다.

예외 계층 구조:
    MAError (베이스)
    ├── ConfigurationError (필수 설정 누락)
    ├── StoreError (계정 저장소 연결/읽기/쓰기)
    ├── MeliAPIError (MercadoLibre API 호출)
    ├── CollaboratorError (단계별로 래핑된 외부 협력자 실패)
    │   ├── ProvisioningError   - 테스트 계정 생성
    │   ├── LoginError          - 로그인(OAuth) 흐름
    │   ├── RegistrationError   - 계정 등록
    │   └── OwnerResolutionError - 오너 계정 조회
    └── DispatchError (메뉴 선택값에 대응하는 액션 없음)

Usage:
    from core.exceptions import LoginError, get_error_reason

    try:
        credentials = login.run()
    except Exception as e:
        raise LoginError(f"인증을 완료할 수 없습니다: {get_error_reason(e)}", cause=e)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class MAError(Exception):
    """meli-accounts 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 / 저장소 / API
# =============================================================================


class ConfigurationError(MAError):
    """필수 시작 입력(개발자 닉네임, 앱 자격증명 등) 누락"""

    pass


class StoreError(MAError):
    """계정 저장소 관련 예외"""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.path = path
        if path:
            self.details["path"] = path


class MeliAPIError(MAError):
    """MercadoLibre API 호출 실패

    HTTP 상태 코드와 API가 돌려준 오류 메시지를 함께 보관합니다.
    전송 계층 실패(연결 불가, 타임아웃)는 status_code가 None입니다.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"{method} {path}"
        if status_code is not None:
            message = f"{message} 실패 ({status_code})"
        else:
            message = f"{message} 실패"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.error_message = error_message
        self.details.update(
            {
                "method": method,
                "path": path,
                "status_code": status_code,
            }
        )

    @property
    def reason(self) -> str:
        """사용자에게 보여줄 짧은 사유"""
        return self.error_message or self.message


# =============================================================================
# 협력자(collaborator) 실패
# =============================================================================


class Stage(Enum):
    """실패가 발생한 온보딩 단계"""

    TEST_ACCOUNT = "test_account"
    LOGIN = "login"
    REGISTRATION = "registration"
    OWNER = "owner"

    def __str__(self) -> str:
        return self.value


class CollaboratorError(MAError):
    """외부 협력자 호출 실패를 단계 정보와 함께 래핑한 예외"""

    stage: Stage

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, cause, details)
        self.details["stage"] = str(self.stage)


class ProvisioningError(CollaboratorError):
    """테스트 계정 생성 실패"""

    stage = Stage.TEST_ACCOUNT


class LoginError(CollaboratorError):
    """로그인 흐름 실패"""

    stage = Stage.LOGIN


class RegistrationError(CollaboratorError):
    """계정 등록 실패"""

    stage = Stage.REGISTRATION


class OwnerResolutionError(CollaboratorError):
    """오너 계정 조회 실패"""

    stage = Stage.OWNER


# =============================================================================
# 메뉴 디스패치
# =============================================================================


class DispatchError(MAError):
    """메뉴 선택값에 대응하는 액션이 없음 (결함이지만 치명적이지 않음)"""

    def __init__(self, action: Any):
        super().__init__(f"알 수 없는 액션: {action!r}")
        self.action = action
        self.details["action"] = repr(action)


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def get_error_reason(error: BaseException) -> str:
    """예외에서 사용자에게 보여줄 사유 추출

    message 속성, data 속성, str() 순으로 확인합니다.

    Args:
        error: 예외

    Returns:
        사유 문자열 (비어 있으면 예외 클래스 이름)
    """
    if isinstance(error, MeliAPIError):
        return error.reason

    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message

    data = getattr(error, "data", None)
    if data:
        return str(data)

    return str(error) or error.__class__.__name__


def format_error_chain(error: BaseException) -> str:
    """cause 체인을 따라가며 ' <- '로 연결한 메시지 (디버그 출력용)"""
    parts: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = error

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(f"{current.__class__.__name__}: {current}")
        if isinstance(current, MAError) and current.cause is not None:
            current = current.cause
        else:
            current = current.__cause__

    return " <- ".join(parts)


__all__ = [
    "MAError",
    "ConfigurationError",
    "StoreError",
    "MeliAPIError",
    "Stage",
    "CollaboratorError",
    "ProvisioningError",
    "LoginError",
    "RegistrationError",
    "OwnerResolutionError",
    "DispatchError",
    "get_error_reason",
    "format_error_chain",
]
