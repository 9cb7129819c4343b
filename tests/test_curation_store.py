"""CurationItemStoreとシードローダーのテスト."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.common.config.seed_loader import SeedItemLoader
from src.common.defs.curation import BoundingBoxCurationItem, SvgCurationItem, TextCurationItem
from src.components.curation_store import CurationItemStore

SEED_PATH = Path(__file__).resolve().parent.parent / "config" / "seed_items.yaml"


def _svg_item(name: str) -> dict:
    return {
        "inputData": name,
        "outputType": "svg",
        "modelAOutput": {"svgContent": "<svg/>"},
        "modelBOutput": {"svgContent": "<svg></svg>", "complexity": "High"},
    }


# ---------------------------------------------------------------------------
# ユニットテスト: CurationItemStore
# ---------------------------------------------------------------------------


def test_create_assigns_sequential_ids():
    """登録順に1から連番のIDが割り当てられる."""
    store = CurationItemStore()
    first = store.create(_svg_item("first"))
    second = store.create(_svg_item("second"))
    assert (first.id, second.id) == (1, 2)
    assert isinstance(first, SvgCurationItem)
    assert second.model_b_output.complexity == "High"


def test_list_items_is_a_slice_of_id_order():
    """一覧はID昇順のリストのスライスになる."""
    store = CurationItemStore(seed_items=[_svg_item(f"item {i}") for i in range(5)])
    assert [item.id for item in store.list_items()] == [1, 2, 3, 4, 5]
    assert [item.id for item in store.list_items(limit=2, offset=1)] == [2, 3]
    assert store.list_items(limit=10, offset=10) == []
    assert store.count() == 5


def test_get_missing_item_returns_none():
    """存在しないIDはNoneを返す."""
    assert CurationItemStore().get(42) is None


def test_items_are_immutable():
    """CurationItemは生成後に変更できない."""
    item = CurationItemStore().create(_svg_item("frozen"))
    with pytest.raises(ValidationError):
        item.input_data = "changed"


def test_invalid_item_is_rejected():
    """outputTypeとペイロードが一致しない定義はValidationErrorになる."""
    store = CurationItemStore()
    with pytest.raises(ValidationError):
        store.create({"inputData": "x", "outputType": "bounding-box", "modelAOutput": {"svgContent": 1}})
    with pytest.raises(ValidationError):
        store.create({**_svg_item("x"), "outputType": "video"})
    assert store.count() == 0


# ---------------------------------------------------------------------------
# ユニットテスト: SeedItemLoader
# ---------------------------------------------------------------------------


def test_bundled_seed_file_has_one_item_per_output_type():
    """同梱のシードファイルは出力種別ごとに1件のアイテムを持つ."""
    store = CurationItemStore(seed_items=SeedItemLoader(str(SEED_PATH)).load())
    items = store.list_items()
    assert [type(item) for item in items] == [TextCurationItem, BoundingBoxCurationItem, SvgCurationItem]
    assert len(items[0].model_b_output.outputs) == 3
    assert items[1].model_a_output.boxes[0].label == "Car"
    assert items[2].model_a_output.complexity == "Low"


def test_loader_missing_file_returns_empty(tmp_path, caplog):
    """シードファイルが無い場合は警告を出して空リストを返す."""
    loader = SeedItemLoader(seed_path=str(tmp_path / "missing.yaml"))
    assert loader.load() == []
    assert "Seed file not found" in caplog.text


def test_loader_disabled_skips_file():
    """enabled=Falseの場合はファイルを読まない."""
    assert SeedItemLoader(str(SEED_PATH), enabled=False).load() == []


def test_loader_reads_yaml(tmp_path):
    """YAMLのitemsを読み込む."""
    path = tmp_path / "seed.yaml"
    path.write_text(yaml.dump({"items": [_svg_item("from yaml")]}))
    assert SeedItemLoader(str(path)).load()[0]["inputData"] == "from yaml"


def test_loader_invalid_yaml_syntax(tmp_path):
    """不正なYAML構文でyaml.YAMLErrorが発生する."""
    path = tmp_path / "bad.yaml"
    path.write_text("{{invalid: yaml: content")
    with pytest.raises(yaml.YAMLError):
        SeedItemLoader(str(path)).load()
