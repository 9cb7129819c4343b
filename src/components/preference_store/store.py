"""UserPreferenceをメモリ上で管理するストア."""

import logging
import threading

from src.common.defs.errors import NotFoundError
from src.common.defs.preference import PreferenceInput, PreferenceUpdate, UserPreference

logger = logging.getLogger(__name__)

MERGE_FIELDS = ("preferred_model", "model_a_edited", "model_b_edited")


class PreferenceStore:
    """CurationItemごとのUserPreferenceを保持するストアクラス.

    1つのitem_idに対するレコードは常に1件以下に保たれる.
    """

    def __init__(self) -> None:
        """PreferenceStoreを初期化する."""
        self._preferences: dict[int, UserPreference] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def get(self, item_id: int) -> UserPreference | None:
        """指定アイテムのPreferenceを取得する.

        Args:
            item_id: CurationItemのID

        Returns:
            UserPreferenceのコピー. 未保存の場合はNone.
        """
        with self._lock:
            existing = self._find(item_id)
            return existing.model_copy(deep=True) if existing else None

    def upsert(self, preference: PreferenceInput) -> UserPreference:
        """Preferenceを新規作成、または既存レコードにマージする.

        Args:
            preference: 保存するPreference

        Returns:
            保存後のUserPreference
        """
        with self._lock:
            if self._find(preference.item_id) is not None:
                return self.update(preference.item_id, preference)

            record = UserPreference(
                id=self._next_id,
                item_id=preference.item_id,
                preferred_model=preference.preferred_model,
                model_a_edited=preference.model_a_edited,
                model_b_edited=preference.model_b_edited,
            )
            self._next_id += 1
            self._preferences[record.id] = record
            logger.info("Created preference %d for item %d", record.id, record.item_id)
            return record.model_copy(deep=True)

    def update(self, item_id: int, updates: PreferenceUpdate) -> UserPreference:
        """既存Preferenceに部分更新をマージする.

        updatesで明示的に指定されたフィールドのみ上書きし、それ以外は保持する.

        Args:
            item_id: CurationItemのID
            updates: 部分更新

        Returns:
            更新後のUserPreference

        Raises:
            NotFoundError: 指定アイテムのPreferenceが存在しない場合
        """
        with self._lock:
            existing = self._find(item_id)
            if existing is None:
                msg = f"Preference for item {item_id} not found"
                raise NotFoundError(msg)

            changes = {
                field: getattr(updates, field)
                for field in MERGE_FIELDS
                if field in updates.model_fields_set
            }
            updated = existing.model_copy(update=changes, deep=True)
            self._preferences[existing.id] = updated
            logger.info("Updated preference %d for item %d: %s", updated.id, item_id, sorted(changes))
            return updated.model_copy(deep=True)

    def count(self) -> int:
        """保存済みPreferenceの件数を返す."""
        with self._lock:
            return len(self._preferences)

    def _find(self, item_id: int) -> UserPreference | None:
        for preference in self._preferences.values():
            if preference.item_id == item_id:
                return preference
        return None
