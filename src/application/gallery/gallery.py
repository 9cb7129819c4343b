"""画像ギャラリー用のエントリ生成とフィルタリング."""

from collections.abc import Sequence

from pydantic import Field

from src.common.defs.base import CamelModel
from src.common.defs.curation import BoundingBoxOutput, ModelOutput, OutputType
from src.components.csv_parser.models import ParsedTable
from src.components.output_extractor.extractor import extract_model_output


class GalleryEntry(CamelModel):
    """ギャラリーに表示する1画像分の情報."""

    filename: str
    model_a_output: ModelOutput
    model_b_output: ModelOutput
    tags: list[str] = Field(default_factory=list)
    graphic_type: str = ""


class GalleryFilters(CamelModel):
    """ギャラリーで選択可能なフィルタ値."""

    tags: list[str] = Field(default_factory=list)
    graphic_types: list[str] = Field(default_factory=list)


def _with_image(output: ModelOutput, filename: str) -> ModelOutput:
    if isinstance(output, BoundingBoxOutput):
        return output.model_copy(update={"image_url": filename})
    return output


def build_gallery(
    images: Sequence[str],
    table_a: ParsedTable,
    table_b: ParsedTable,
    output_type: OutputType,
) -> list[GalleryEntry]:
    """画像ファイル名ごとにギャラリーエントリを生成する.

    出力は画像の並び順をインデックスとして抽出し、タグとgraphicTypeは
    モデルAのCSVでfilenameが一致する行から集める.

    Args:
        images: 画像ファイル名のリスト
        table_a: モデルAのCSV
        table_b: モデルBのCSV
        output_type: 出力種別

    Returns:
        GalleryEntryのリスト
    """
    entries = []
    for index, filename in enumerate(images):
        rows = [row for row in table_a.rows if row.get("filename") == filename]
        tags: dict[str, None] = {}
        for row in rows:
            tag = row.get("tag", "")
            if tag.strip():
                tags.setdefault(tag, None)
        entries.append(
            GalleryEntry(
                filename=filename,
                model_a_output=_with_image(extract_model_output(table_a, output_type, index), filename),
                model_b_output=_with_image(extract_model_output(table_b, output_type, index), filename),
                tags=list(tags),
                graphic_type=rows[0].get("graphicType", "") if rows else "",
            )
        )
    return entries


def available_filters(entries: Sequence[GalleryEntry]) -> GalleryFilters:
    """エントリに含まれるタグとgraphicTypeをソート済みで返す."""
    tags = {tag for entry in entries for tag in entry.tags}
    graphic_types = {entry.graphic_type for entry in entries if entry.graphic_type}
    return GalleryFilters(tags=sorted(tags), graphic_types=sorted(graphic_types))


def filter_gallery(
    entries: Sequence[GalleryEntry],
    search: str = "",
    tag: str = "",
    graphic_type: str = "",
) -> list[GalleryEntry]:
    """検索語・タグ・graphicTypeでエントリを絞り込む.

    空の条件はすべてのエントリに一致する.

    Args:
        entries: 絞り込み対象のエントリ
        search: ファイル名の部分一致（大文字小文字を区別しない）
        tag: 完全一致するタグ
        graphic_type: 完全一致するgraphicType

    Returns:
        条件に一致したエントリのリスト
    """
    needle = search.lower()
    return [
        entry
        for entry in entries
        if needle in entry.filename.lower()
        and (not tag or tag in entry.tags)
        and (not graphic_type or entry.graphic_type == graphic_type)
    ]
