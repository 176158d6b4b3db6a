# cli/flow/__init__.py
"""
CLI Flow Module - 계정 온보딩 Flow

이 모듈은 시작 → 대화형 메뉴 루프 → 종료로 이어지는 CLI 실행 흐름을 관리합니다.
questionary 기반 대화형 UI를 포함하므로 CLI 전용입니다.

구조:
    context.py       - SessionState, MenuAction, MenuChoice
    orchestrator.py  - Onboarding (테스트 계정 생성, 로그인, 등록, 오너 조회)
    runner.py        - OnboardingRunner, 시작/루프/종료 관리

사용법:
    from cli.flow import create_runner

    runner = create_runner("seller123")
    runner.run()

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Context
    "SessionState",
    "MenuAction",
    "MenuChoice",
    # Orchestrator
    "Onboarding",
    "OwnerState",
    # Runner
    "OnboardingRunner",
    "create_runner",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    "SessionState": (".context", "SessionState"),
    "MenuAction": (".context", "MenuAction"),
    "MenuChoice": (".context", "MenuChoice"),
    "Onboarding": (".orchestrator", "Onboarding"),
    "OwnerState": (".orchestrator", "OwnerState"),
    "OnboardingRunner": (".runner", "OnboardingRunner"),
    "create_runner": (".runner", "create_runner"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
