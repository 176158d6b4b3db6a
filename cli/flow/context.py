# cli/flow/context.py
"""
Flow 상태 및 메뉴 선택 타입

- SessionState: 프로세스 단위 세션 상태 (개발자 닉네임, 오너 데이터, 첫 로그인 여부)
- MenuAction: 메뉴 액션 태그 (닫힌 집합)
- MenuChoice: 메뉴 렌더러가 돌려주는 선택 결과 (알 수 없는 태그도 표현 가능)
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import Any

from core.accounts.models import OwnerData


class MenuAction(Enum):
    """메뉴 액션 태그"""

    NEW_TEST_ACCOUNT = "newTestAccount"
    EXISTING_ACCOUNT = "existingAccount"
    EXIT = "exit"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Any) -> MenuAction | None:
        """태그 값 → MenuAction (알 수 없으면 None)"""
        if isinstance(value, cls):
            return value
        for action in cls:
            if action.value == value:
                return action
        return None


@dataclass(frozen=True)
class MenuChoice:
    """메뉴 선택 결과

    Attributes:
        raw: 렌더러가 돌려준 원래 값
        action: 해석된 액션 (알 수 없는 값이면 None)
    """

    raw: Any
    action: MenuAction | None = field(default=None)

    @classmethod
    def of(cls, raw: Any) -> MenuChoice:
        return cls(raw=raw, action=MenuAction.from_value(raw))

    @property
    def is_exit(self) -> bool:
        return self.action is MenuAction.EXIT


@dataclass
class SessionState:
    """세션 상태

    불변식: owner_data는 마지막 등록 이후 오너 조회가 성공했을 때만 None이 아닙니다.

    Attributes:
        dev_nickname: 개발자 계정 닉네임 (프로세스 동안 불변)
        owner_data: 클라이언트 오너 메타데이터
        is_first_login: 등록된 인증 계정도 오너 데이터도 없는 첫 실행 여부
    """

    dev_nickname: str
    owner_data: OwnerData | None = None
    is_first_login: bool = False

    def __post_init__(self) -> None:
        if not self.dev_nickname or not self.dev_nickname.strip():
            raise ValueError("dev_nickname은 비어 있을 수 없습니다")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "dev_nickname" and "dev_nickname" in self.__dict__:
            raise FrozenInstanceError("dev_nickname은 변경할 수 없습니다")
        super().__setattr__(name, value)

    def set_owner_data(self, owner_data: OwnerData) -> None:
        self.owner_data = owner_data

    def invalidate_owner_data(self) -> None:
        """새 등록 후 캐시된 오너 데이터 무효화"""
        self.owner_data = None

    def mark_registered(self) -> None:
        """계정 등록 성공 반영"""
        self.invalidate_owner_data()
        self.is_first_login = False
