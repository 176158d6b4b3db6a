"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

주요 기능:
    - 개발자 계정 닉네임(-u/--user) 필수 확인
    - 배너 출력 후 대화형 온보딩 메뉴 실행
    - 버전 정보 표시

명령어 구조:
    meli-accounts -u <nickname>          # 대화형 메뉴
    meli-accounts -u <nickname> --debug  # 디버그 로그 포함
    meli-accounts --version              # 버전 표시

종료 코드:
    0   정상 종료, 또는 -u 누락 (사용법 안내 후 종료)
    1   설정 오류, 시작 실패 등 처리되지 않은 오류

Usage:
    $ meli-accounts -u seller123
    $ python main.py -u seller123
"""

import logging
import sys
import traceback

import click
from click import Context

from cli.i18n import set_lang, t
from core.config import LogConfig, get_version
from core.exceptions import ConfigurationError, MAError, format_error_chain

logger = logging.getLogger(__name__)

VERSION = get_version()


def configure_logging(debug: bool = False) -> None:
    """루트 로거 설정

    기본은 WARNING 레벨로 도구 출력에 INFO 로그가 섞이지 않도록 하고,
    --debug 지정 시 DEBUG 레벨의 Rich 핸들러로 전환합니다.
    """
    config = LogConfig.from_env()
    level = logging.DEBUG if debug else getattr(logging, config.level, logging.WARNING)

    if debug:
        from cli.ui.console import get_log_handler

        logging.basicConfig(level=level, handlers=[get_log_handler()], force=True)
    else:
        logging.basicConfig(level=level, format=config.format, datefmt=config.date_format, force=True)


@click.command(help=t("cli.description", lang="en"))
@click.version_option(VERSION, prog_name="meli-accounts")
@click.option(
    "-u",
    "--user",
    "user",
    metavar="<nickname>",
    help=t("cli.user_option_help", lang="en"),
)
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--debug", is_flag=True, help=t("cli.debug_option_help", lang="en"))
@click.pass_context
def cli(ctx: Context, user: str | None, lang: str, debug: bool) -> None:
    """MeLi Accounts - MercadoLibre 계정 온보딩 CLI"""
    set_lang(lang)

    if not user or not user.strip():
        click.echo(t("cli.user_required"), err=True)
        click.echo(ctx.get_help())
        ctx.exit(0)

    configure_logging(debug)

    from cli.flow import create_runner
    from cli.ui.banner import print_banner
    from cli.ui.console import console, print_error

    print_banner(console, user)

    try:
        runner = create_runner(user)
    except ConfigurationError as e:
        print_error(t("cli.config_error", error=e.message))
        raise SystemExit(1) from e

    try:
        runner.run()
    except KeyboardInterrupt:
        console.print(f"\n[dim]{t('common.exit')}[/dim]")
    except MAError as e:
        logger.debug("시작 실패", exc_info=True)
        print_error(t("cli.startup_failed", error=e.message))
        if debug:
            console.print(format_error_chain(e), markup=False)
        raise SystemExit(1) from e
    except Exception as e:
        print_error(t("common.unexpected_error", error=str(e)))
        if debug:
            console.print(traceback.format_exc(), markup=False)
        raise SystemExit(1) from e


if __name__ == "__main__":
    sys.exit(cli())
