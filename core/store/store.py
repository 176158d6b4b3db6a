"""
core/store/store.py - 계정 저장소 (JSON 파일)

계정 레코드를 JSON 파일에 닉네임 기준으로 보관합니다.
연결(connect) 시 파일을 읽어 메모리에 올리고, 쓰기마다 원자적으로 저장합니다.
연결되지 않은 상태에서의 읽기/쓰기는 StoreError입니다.
"""

from __future__ import annotations

import json
import logging
import tempfile
import threading
from pathlib import Path

from core.accounts.models import AccountRecord
from core.exceptions import StoreError

logger = logging.getLogger(__name__)


class AccountStore:
    """JSON 파일 기반 계정 저장소

    Example:
        store = AccountStore(Path("temp/accounts/accounts.json"))
        store.connect()
        store.put(record)
        store.disconnect()
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._records: dict[str, AccountRecord] = {}
        self._connected = False
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # -------------------------------------------------------------------------
    # 연결 관리
    # -------------------------------------------------------------------------

    def connect(self) -> None:
        """저장소 파일을 읽어 연결 상태로 전환

        Raises:
            StoreError: 파일을 읽을 수 없거나 형식이 잘못된 경우
        """
        if self._connected:
            return

        with self._lock:
            self._records = self._load()
            self._connected = True

        logger.debug("계정 저장소 연결: %s (%d개)", self._path, len(self._records))

    def disconnect(self) -> None:
        """연결 해제 (메모리 데이터 폐기, 여러 번 호출해도 안전)"""
        with self._lock:
            self._records = {}
            self._connected = False
        logger.debug("계정 저장소 연결 해제: %s", self._path)

    def is_connected(self) -> bool:
        return self._connected

    # -------------------------------------------------------------------------
    # 조회 / 저장
    # -------------------------------------------------------------------------

    def get(self, nickname: str) -> AccountRecord | None:
        """닉네임으로 조회"""
        self._ensure_connected()
        return self._records.get(nickname)

    def all(self) -> list[AccountRecord]:
        """전체 레코드 (생성 순)"""
        self._ensure_connected()
        return sorted(self._records.values(), key=lambda r: r.created_at)

    def put(self, record: AccountRecord) -> None:
        """레코드 추가/갱신 후 파일에 저장

        Raises:
            StoreError: 연결되지 않았거나 파일 쓰기 실패
        """
        self._ensure_connected()
        with self._lock:
            previous = self._records.get(record.nickname)
            self._records[record.nickname] = record
            try:
                self._save()
            except OSError as e:
                # 메모리 상태를 파일과 맞춤
                if previous is None:
                    self._records.pop(record.nickname, None)
                else:
                    self._records[record.nickname] = previous
                raise StoreError(f"계정 저장 실패: {e}", path=str(self._path), cause=e) from e

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise StoreError("계정 저장소에 연결되지 않았습니다", path=str(self._path))

    def _load(self) -> dict[str, AccountRecord]:
        """파일에서 로드

        개별 항목 파싱 실패 시 해당 항목만 건너뜁니다.
        """
        if not self._path.exists():
            return {}

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            raise StoreError(f"계정 저장소를 읽을 수 없습니다: {e}", path=str(self._path), cause=e) from e

        if not isinstance(data, list):
            raise StoreError("계정 저장소 형식이 올바르지 않습니다 (list 아님)", path=str(self._path))

        records: dict[str, AccountRecord] = {}
        for raw in data:
            if not isinstance(raw, dict):
                continue
            try:
                record = AccountRecord.from_dict(raw)
            except (TypeError, KeyError, ValueError):
                logger.debug("계정 항목 로드 스킵: %s", raw)
                continue
            records[record.nickname] = record
        return records

    def _save(self) -> None:
        """파일에 원자적으로 저장 (write-to-temp-then-rename)"""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = [record.to_dict() for record in sorted(self._records.values(), key=lambda r: r.created_at)]
        content = json.dumps(data, ensure_ascii=False, indent=2)

        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp", prefix=".accounts_")
        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            Path(tmp_path).replace(self._path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
