"""
core/accounts - 계정 도메인

- models: Profile, Tokens, Credentials, AccountRecord, OwnerData, OwnerAccount, TestAccount
- registry: AccountRegistry (등록/조회/토큰 갱신)
- owner: OwnerResolver (애플리케이션 오너 조회)
- test_accounts: TestAccountProvisioner (테스트 계정 생성)
"""

from .models import (
    AccountRecord,
    Credentials,
    OwnerAccount,
    OwnerData,
    Profile,
    TestAccount,
    Tokens,
)
from .owner import OwnerResolver
from .registry import AccountRegistry
from .test_accounts import TestAccountProvisioner

__all__ = [
    "AccountRecord",
    "Credentials",
    "OwnerAccount",
    "OwnerData",
    "Profile",
    "TestAccount",
    "Tokens",
    "AccountRegistry",
    "OwnerResolver",
    "TestAccountProvisioner",
]
