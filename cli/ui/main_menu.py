"""
cli/ui/main_menu.py - 메인 액션 메뉴

저장소 연결 상태와 첫 로그인 여부에 따라 선택지를 구성하고,
선택된 태그를 MenuChoice로 돌려줍니다.
"""

import logging

import questionary

from cli.flow.context import MenuAction, MenuChoice
from cli.i18n import t
from cli.ui.console import console

logger = logging.getLogger(__name__)


def build_choices(*, is_db_connected: bool, is_first_login: bool) -> list[questionary.Choice]:
    """메뉴 선택지 구성

    - 저장소 연결이 끊기면 계정 관련 액션은 비활성화
    - 첫 로그인이면 테스트 계정 생성 비활성화 (개발자 계정 등록이 먼저)

    Args:
        is_db_connected: 저장소 연결 여부
        is_first_login: 첫 로그인 여부

    Returns:
        questionary.Choice 목록 (value는 MenuAction 태그 문자열)
    """
    db_reason = None if is_db_connected else t("menu.requires_db")
    new_test_reason = db_reason or (t("menu.requires_registered_account") if is_first_login else None)
    existing_title = t("menu.first_account") if is_first_login else t("menu.existing_account")

    return [
        questionary.Choice(
            t("menu.new_test_account"),
            value=MenuAction.NEW_TEST_ACCOUNT.value,
            disabled=new_test_reason,
        ),
        questionary.Choice(existing_title, value=MenuAction.EXISTING_ACCOUNT.value, disabled=db_reason),
        questionary.Choice(t("menu.exit"), value=MenuAction.EXIT.value),
    ]


def prompt_action(*, is_db_connected: bool, is_first_login: bool) -> MenuChoice:
    """메뉴 표시 후 선택 결과 반환

    Raises:
        KeyboardInterrupt: 사용자가 취소한 경우
    """
    status = t("menu.db_connected") if is_db_connected else t("menu.db_disconnected")
    style = "green" if is_db_connected else "red"
    console.print(f"[{style}]{status}[/{style}]")

    answer = questionary.select(
        t("menu.title"),
        choices=build_choices(is_db_connected=is_db_connected, is_first_login=is_first_login),
    ).ask()

    if answer is None:
        raise KeyboardInterrupt("사용자가 취소했습니다.")

    logger.debug("메뉴 선택: %s", answer)
    return MenuChoice.of(answer)
