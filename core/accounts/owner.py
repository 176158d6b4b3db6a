"""
core/accounts/owner.py - 애플리케이션 오너 계정 조회

등록된 인증 계정 하나로 애플리케이션(client) 정보를 조회해 오너 ID를 얻고,
오너의 공개 사용자 정보로 OwnerData를 구성합니다.
어떤 인증 계정으로 조회해도 결과는 같으므로, 아무 계정이나 하나만 있으면 됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from core.accounts.models import OwnerAccount, OwnerData
from core.exceptions import MeliAPIError, OwnerResolutionError, StoreError

if TYPE_CHECKING:
    from core.accounts.registry import AccountRegistry
    from core.meli.client import MeliClient

logger = logging.getLogger(__name__)


class OwnerResolver:
    """오너 계정 조회

    Args:
        registry: 계정 레지스트리
        client: MeliClient
    """

    def __init__(self, registry: AccountRegistry, client: MeliClient):
        self.registry = registry
        self.client = client

    def get(self) -> OwnerAccount:
        """오너 계정 정보 조회

        Returns:
            OwnerAccount (client_owner_data에 OwnerData)

        Raises:
            OwnerResolutionError: 인증 계정이 없거나 API 조회 실패
        """
        try:
            account = self.registry.find_any_authorized()
        except StoreError as e:
            raise OwnerResolutionError(str(e), cause=e) from e

        if account is None:
            raise OwnerResolutionError("no authorized account found")

        try:
            access_token = self.registry.get_access_token(account, self.client)
            application = self.client.get_application(access_token)
            owner_id = int(application["owner_id"])
            owner = self.client.get_user(owner_id)
        except MeliAPIError as e:
            raise OwnerResolutionError(e.reason, cause=e) from e
        except (KeyError, TypeError, ValueError) as e:
            raise OwnerResolutionError(f"애플리케이션 정보에서 오너를 확인할 수 없습니다: {e}", cause=e) from e

        owner_data = OwnerData(
            client_id=self.client.config.client_id,
            owner_id=owner_id,
            nickname=owner.get("nickname"),
            site_id=owner.get("site_id"),
        )
        logger.debug("오너 계정 확인: %s (%s) via %s", owner_data.nickname, owner_id, account.nickname)
        return OwnerAccount(account=account, client_owner_data=owner_data)
