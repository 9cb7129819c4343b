"""CurationSessionBuilderとギャラリーのテスト."""

import logging

import pytest

from src.application.gallery import available_filters, build_gallery, filter_gallery
from src.application.sessions import CurationSessionBuilder
from src.common.defs.curation import (
    BoundingBoxCurationItem,
    OutputType,
    SvgCurationItem,
    TextCurationItem,
)
from src.common.defs.errors import MalformedInputError
from src.components.csv_parser import parse_csv

MODEL_A_TEXT = """filename,tag,text,graphicType
cat.png,title,A cat,photo
cat.png,caption,Sleeping,photo
dog.png,title,A dog,chart
"""

MODEL_B_TEXT = """filename,tag,text
cat.png,title,Cat
dog.png,title,Dog
dog.png,note,
"""


@pytest.fixture()
def builder() -> CurationSessionBuilder:
    return CurationSessionBuilder()


# ---------------------------------------------------------------------------
# ユニットテスト: CurationSessionBuilder
# ---------------------------------------------------------------------------


def test_text_session_pairs_outputs_by_filename(builder):
    """テキストセッションはモデルAの重複なしfilenameごとに1アイテムを作る."""
    items = builder.build_from_text(MODEL_A_TEXT, MODEL_B_TEXT, OutputType.TEXT)

    assert [item.id for item in items] == [1, 2]
    assert [item.input_data for item in items] == ["Image 1", "Image 2"]
    assert all(isinstance(item, TextCurationItem) for item in items)
    assert items[0].model_a_output.texts == ["title: A cat", "caption: Sleeping"]
    assert items[0].model_b_output.texts == ["title: Cat"]
    assert items[1].model_b_output.texts == ["title: Dog"]


def test_bbox_session_sets_image_reference(builder):
    """画像名が与えられた場合、ボックス出力の画像参照に使われる."""
    csv_a = 'filename,bbox\ncat.png,"1,2,3,4"\ndog.png,"5,6,7,8"'
    csv_b = "filename,bbox\ncat.png,\ndog.png,"
    items = builder.build_from_text(csv_a, csv_b, OutputType.BOUNDING_BOX, images=["cat.png", "dog.png"])

    assert all(isinstance(item, BoundingBoxCurationItem) for item in items)
    assert items[1].model_a_output.boxes[0].x == 5
    assert items[1].model_a_output.image_url == "dog.png"
    assert items[0].model_b_output.boxes == []
    assert items[0].model_b_output.image_url == "cat.png"


def test_svg_session_without_filename_uses_row_count(builder):
    """filename列が無い場合はモデルAの行数がアイテム数になる."""
    csv_a = "svg\n<svg>a1</svg>\n<svg>a2</svg>"
    csv_b = "svg_path\nb1.svg"
    items = builder.build_from_text(csv_a, csv_b, OutputType.SVG)

    assert len(items) == 2
    assert all(isinstance(item, SvgCurationItem) for item in items)
    assert items[1].model_a_output.svg_content == "<svg>a2</svg>"
    assert items[1].model_b_output.svg_content == ""


def test_malformed_csv_propagates(builder):
    """解釈できないCSVはMalformedInputErrorになる."""
    with pytest.raises(MalformedInputError):
        builder.build_from_text("filename,text", MODEL_B_TEXT, OutputType.TEXT)


# ---------------------------------------------------------------------------
# ユニットテスト: ギャラリー
# ---------------------------------------------------------------------------


@pytest.fixture()
def entries():
    return build_gallery(
        ["cat.png", "dog.png", "bird.png"],
        parse_csv(MODEL_A_TEXT),
        parse_csv(MODEL_B_TEXT),
        OutputType.TEXT,
    )


def test_gallery_collects_tags_and_graphic_type(entries):
    """タグとgraphicTypeはモデルAのfilename一致行から集める."""
    assert entries[0].tags == ["title", "caption"]
    assert entries[0].graphic_type == "photo"
    assert entries[1].graphic_type == "chart"
    assert entries[2].tags == []
    assert entries[2].graphic_type == ""
    assert entries[2].model_a_output.texts == ["No text data"]


def test_gallery_bbox_entries_match_session_image_reference(builder):
    """ボックス出力の画像参照はギャラリーとセッションで同じ画像名になる."""
    csv_a = 'filename,bbox\ncat.png,"1,2,3,4"\ndog.png,"5,6,7,8"'
    csv_b = "filename,bbox\ncat.png,\ndog.png,"
    images = ["cat.png", "dog.png"]
    gallery_entries = build_gallery(images, parse_csv(csv_a), parse_csv(csv_b), OutputType.BOUNDING_BOX)
    items = builder.build_from_text(csv_a, csv_b, OutputType.BOUNDING_BOX, images=images)

    assert [entry.model_a_output.image_url for entry in gallery_entries] == images
    assert [entry.model_b_output.image_url for entry in gallery_entries] == images
    for entry, item in zip(gallery_entries, items):
        assert entry.model_a_output == item.model_a_output
        assert entry.model_b_output == item.model_b_output


def test_gallery_available_filters_are_sorted(entries):
    """フィルタ候補はソート済みで重複しない."""
    filters = available_filters(entries)
    assert filters.tags == ["caption", "title"]
    assert filters.graphic_types == ["chart", "photo"]


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, ["cat.png", "dog.png", "bird.png"]),
        ({"search": "DO"}, ["dog.png"]),
        ({"tag": "caption"}, ["cat.png"]),
        ({"graphic_type": "chart"}, ["dog.png"]),
        ({"search": "png", "tag": "title", "graphic_type": "photo"}, ["cat.png"]),
    ],
)
def test_filter_gallery(entries, kwargs, expected):
    """検索語・タグ・graphicTypeを組み合わせて絞り込める."""
    assert [entry.filename for entry in filter_gallery(entries, **kwargs)] == expected


# ---------------------------------------------------------------------------
# ユニットテスト: build_session スクリプト
# ---------------------------------------------------------------------------


def test_build_session_script_logs_summary(tmp_path, caplog):
    """CSVファイルを読み込み、アイテムごとのサマリーをログに出力する."""
    from src.scripts.build_session import main

    model_a = tmp_path / "a.csv"
    model_b = tmp_path / "b.csv"
    model_a.write_text(MODEL_A_TEXT)
    model_b.write_text(MODEL_B_TEXT)

    caplog.set_level(logging.INFO)
    main([str(model_a), str(model_b), "--output-type", "text"])

    assert "Curation session: 2 items (text)" in caplog.text
    assert "[1] Image 1: A=2 texts, B=1 texts" in caplog.text


def test_build_session_script_exits_on_missing_file(tmp_path):
    """入力ファイルが無い場合は終了コード1で終了する."""
    from src.scripts.build_session import main

    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.csv"), str(tmp_path / "other.csv")])
    assert excinfo.value.code == 1
