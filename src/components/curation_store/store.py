"""CurationItemをメモリ上で管理するストア."""

import logging
import threading
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter

from src.common.defs.curation import CurationItem

logger = logging.getLogger(__name__)

_item_adapter: TypeAdapter[CurationItem] = TypeAdapter(CurationItem)


class CurationItemStore:
    """ID昇順でCurationItemを提供するストアクラス."""

    def __init__(self, seed_items: Iterable[dict[str, Any]] = ()) -> None:
        """CurationItemStoreを初期化する.

        Args:
            seed_items: 初期投入するアイテム定義（idを除く）
        """
        self._items: dict[int, CurationItem] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        for item in seed_items:
            self.create(item)

    def get(self, item_id: int) -> CurationItem | None:
        """IDを指定してCurationItemを取得する.

        Args:
            item_id: CurationItemのID

        Returns:
            CurationItem. 存在しない場合はNone.
        """
        with self._lock:
            return self._items.get(item_id)

    def list_items(self, limit: int = 10, offset: int = 0) -> list[CurationItem]:
        """ID昇順のリストからoffset件目以降をlimit件返す."""
        with self._lock:
            ordered = sorted(self._items.values(), key=lambda item: item.id)
        return ordered[offset : offset + limit]

    def count(self) -> int:
        """登録済みCurationItemの件数を返す."""
        with self._lock:
            return len(self._items)

    def create(self, item: dict[str, Any]) -> CurationItem:
        """新しいIDを割り当ててCurationItemを登録する.

        Args:
            item: アイテム定義. outputTypeに応じたペイロードを含む.

        Returns:
            登録されたCurationItem

        Raises:
            pydantic.ValidationError: アイテム定義が不正な場合
        """
        with self._lock:
            created = _item_adapter.validate_python({**item, "id": self._next_id})
            self._items[created.id] = created
            self._next_id += 1
        logger.info("Registered curation item %d (%s)", created.id, created.output_type)
        return created
