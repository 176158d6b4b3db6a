# core/__init__.py
"""
core - meli-accounts 인프라

CLI 흐름(cli/flow)이 호출하는 외부 협력자와 공통 인프라를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── accounts/       # 계정 모델, 레지스트리, 오너 조회, 테스트 계정 생성
    ├── meli/           # MercadoLibre API 클라이언트, OAuth 로그인 흐름
    ├── store/          # 계정 저장소 (JSON 파일)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import MeliConfig
    from core.store import AccountStore
    from core.accounts import AccountRegistry

    config = MeliConfig.from_env()
    store = AccountStore(config.store_path)
    store.connect()
    registry = AccountRegistry(store)
"""

__all__: list[str] = [
    "accounts",
    "config",
    "exceptions",
    "meli",
    "store",
]
