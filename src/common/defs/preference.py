"""UserPreferenceのデータモデルの定義."""

from typing import Literal

from src.common.defs.base import CamelModel

PreferredModel = Literal["a", "b"]


class PreferenceUpdate(CamelModel):
    """既存Preferenceへの部分更新.

    リクエストに含まれたフィールドだけがmodel_fields_setに入り、上書き対象となる.
    明示的なnullは値のクリアとして扱う.
    """

    preferred_model: PreferredModel | None = None
    model_a_edited: list[str] | None = None
    model_b_edited: list[str] | None = None


class PreferenceInput(PreferenceUpdate):
    """Preference保存リクエスト."""

    item_id: int


class UserPreference(CamelModel):
    """CurationItemに対するユーザーの判断."""

    id: int
    item_id: int
    preferred_model: PreferredModel | None = None
    model_a_edited: list[str] | None = None
    model_b_edited: list[str] | None = None
