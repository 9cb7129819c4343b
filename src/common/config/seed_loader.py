"""seed_items.yamlからシード用CurationItem定義を読み込むローダー."""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.common.schema.seed import SeedFile

logger = logging.getLogger(__name__)


class SeedItemLoader:
    """シードYAMLを読み込むローダー."""

    def __init__(self, seed_path: str = "config/seed_items.yaml", enabled: bool = True) -> None:
        """SeedItemLoaderを初期化する.

        Args:
            seed_path: シードファイルのパス
            enabled: Falseの場合はシードを読み込まない
        """
        self.seed_path = Path(seed_path)
        self.enabled = enabled

    def load(self) -> list[dict[str, Any]]:
        """YAMLを読み込みアイテム定義のリストを返す.

        ファイルが存在しない場合は警告を出して空リストを返す.

        Returns:
            アイテム定義のリスト

        Raises:
            yaml.YAMLError: YAML構文が不正な場合
            pydantic.ValidationError: ルート構造が不正な場合
        """
        if not self.enabled:
            return []
        if not self.seed_path.exists():
            logger.warning("Seed file not found: %s. Starting with no curation items.", self.seed_path)
            return []
        data = yaml.safe_load(self.seed_path.read_text(encoding="utf-8")) or {}
        seed = SeedFile(**data)
        logger.info("Loaded %d seed items from %s", len(seed.items), self.seed_path)
        return seed.items
