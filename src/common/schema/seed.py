"""シードデータYAMLのPydanticスキーマ."""

from typing import Any

from pydantic import BaseModel, Field


class SeedFile(BaseModel):
    """seed_items.yaml全体のルートモデル.

    各アイテムはidを持たず、ストア登録時に採番される.
    """

    items: list[dict[str, Any]] = Field(default_factory=list)
