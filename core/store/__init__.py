"""
core/store - 계정 저장소

Usage:
    from core.store import AccountStore
"""

from .store import AccountStore

__all__ = ["AccountStore"]
