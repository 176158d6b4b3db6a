"""
core/accounts/test_accounts.py - 테스트(샌드박스) 계정 생성

등록된 개발자 계정의 토큰으로 MercadoLibre 테스트 사용자를 생성합니다.
생성된 계정은 바로 로그인 흐름에서 사용할 수 있도록 닉네임/비밀번호를 돌려줍니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.accounts.models import TestAccount
from core.exceptions import MeliAPIError, ProvisioningError, StoreError

if TYPE_CHECKING:
    from core.accounts.registry import AccountRegistry
    from core.meli.client import MeliClient

logger = logging.getLogger(__name__)


class TestAccountProvisioner:
    """테스트 계정 생성기

    Args:
        registry: 계정 레지스트리 (개발자 계정 조회)
        client: MeliClient
        default_site_id: 개발자 계정의 사이트를 알 수 없을 때 사용할 사이트
    """

    __test__ = False  # pytest 수집 제외

    def __init__(self, registry: AccountRegistry, client: MeliClient, default_site_id: str):
        self.registry = registry
        self.client = client
        self.default_site_id = default_site_id

    def create(self, dev_nickname: str) -> TestAccount:
        """개발자 계정 아래 테스트 계정 생성

        Raises:
            ProvisioningError: 개발자 계정 미등록/미인증, 권한 없음 등 API 실패
        """
        if not dev_nickname or not dev_nickname.strip():
            raise ProvisioningError("개발자 계정 닉네임이 비어 있습니다")

        try:
            developer = self.registry.find_by_nickname(dev_nickname)
        except StoreError as e:
            raise ProvisioningError(str(e), cause=e) from e

        if developer is None:
            raise ProvisioningError(f"developer account '{dev_nickname}' is not registered")
        if developer.get_tokens() is None:
            raise ProvisioningError(f"developer account '{dev_nickname}' is not authorized")

        site_id = developer.site_id or self.default_site_id
        try:
            access_token = self.registry.get_access_token(developer, self.client)
            data = self.client.create_test_user(access_token, site_id)
            account = TestAccount.from_api(data)
        except MeliAPIError as e:
            raise ProvisioningError(e.reason, cause=e) from e
        except (KeyError, TypeError, ValueError) as e:
            raise ProvisioningError(f"예상하지 못한 응답 형식: {e}", cause=e) from e

        logger.debug("테스트 계정 생성: %s (site=%s, dev=%s)", account.nickname, site_id, dev_nickname)
        return account
