"""API境界で共有するベースモデルの定義."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSONではcamelCase、Pythonではsnake_caseで扱うベースモデル.

    入力はエイリアス名とフィールド名のどちらでも受け付ける.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())
