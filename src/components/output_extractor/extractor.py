"""ParsedTableから1モデル分の出力ペイロードを取り出す抽出器.

テキストは重複を除いたfilenameの出現順でインデックスを解釈し、
バウンディングボックスとSVGは生の行位置でインデックスを解釈する.
2つのCSVを同じ画像セットに対応付けるため、この非対称性はそのまま維持する.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.common.defs.curation import (
    BoundingBox,
    BoundingBoxOutput,
    ModelOutput,
    OutputType,
    SvgOutput,
    TextEntry,
    TextOutput,
)
from src.components.csv_parser.models import ParsedTable

logger = logging.getLogger(__name__)

NO_TEXT = "No text"
NO_TEXT_DATA = "No text data"
DEFAULT_TAG = "text"
SEPARATOR = ","
SVG_FALLBACK_COLUMNS = ("svg", "svg_path", "svg_file", "path")

BboxStrategy = Callable[[str], list[BoundingBox] | None]

_box_list_adapter = TypeAdapter(list[BoundingBox])


def unique_filenames(table: ParsedTable) -> list[str]:
    """空でないfilename列の値を初出順に重複なしで返す.

    Args:
        table: パース済みCSV

    Returns:
        filenameのリスト
    """
    seen: dict[str, None] = {}
    for filename in table.column("filename"):
        if filename.strip():
            seen.setdefault(filename, None)
    return list(seen)


def extract_text_lines(table: ParsedTable, index: int) -> list[str]:
    """index番目のfilenameに属する行を `"<tag>: <text>"` 形式で返す.

    Args:
        table: パース済みCSV
        index: 重複なしfilenameの順序でのインデックス

    Returns:
        テキスト行のリスト. 該当なしの場合は ``["No text data"]``.
    """
    filenames = unique_filenames(table)
    if not 0 <= index < len(filenames):
        return [NO_TEXT_DATA]

    target = filenames[index]
    lines = []
    for row in table.rows:
        if row.get("filename") != target:
            continue
        text = row.get("text", "")
        tag = row.get("tag", "")
        line = f"{tag if tag.strip() else DEFAULT_TAG}: {text if text.strip() else NO_TEXT}"
        if NO_TEXT not in line:
            lines.append(line)

    return lines or [NO_TEXT_DATA]


def _parse_bbox_json(cell: str) -> list[BoundingBox] | None:
    try:
        parsed: Any = json.loads(cell)
    except json.JSONDecodeError:
        return None
    if isinstance(parsed, dict):
        parsed = [parsed]
    try:
        return _box_list_adapter.validate_python(parsed)
    except ValidationError:
        logger.debug("bbox JSON did not describe boxes: %s", cell)
        return None


def _parse_bbox_coordinates(cell: str) -> list[BoundingBox] | None:
    if SEPARATOR not in cell:
        return None
    values = cell.split(SEPARATOR)
    if len(values) < 4:
        return None
    try:
        x, y, width, height = (float(value) for value in values[:4])
    except ValueError:
        return None
    return [BoundingBox(x=x, y=y, width=width, height=height)]


BBOX_STRATEGIES: tuple[BboxStrategy, ...] = (
    _parse_bbox_json,
    _parse_bbox_coordinates,
)


def extract_bounding_boxes(table: ParsedTable, index: int) -> BoundingBoxOutput:
    """index行目のbbox列をバウンディングボックス出力に変換する.

    BBOX_STRATEGIESを順に試し、最初に成功した結果を使う.
    どれも成功しない場合は空の出力を返す.

    Args:
        table: パース済みCSV
        index: 行位置のインデックス

    Returns:
        BoundingBoxOutput
    """
    row = table.row_at(index)
    cell = row.get("bbox", "") if row is not None else ""
    if not cell:
        return BoundingBoxOutput()

    for strategy in BBOX_STRATEGIES:
        boxes = strategy(cell)
        if boxes is not None:
            return BoundingBoxOutput(boxes=boxes)

    logger.debug("Could not parse bbox cell at row %d: %s", index, cell)
    return BoundingBoxOutput()


def extract_svg(table: ParsedTable, index: int) -> SvgOutput:
    """index行目からSVGマークアップを取り出す.

    tag列を優先し、空なら svg / svg_path / svg_file / path の順に最初の値を使う.

    Args:
        table: パース済みCSV
        index: 行位置のインデックス

    Returns:
        SvgOutput
    """
    row = table.row_at(index)
    if row is None:
        return SvgOutput()
    for column in ("tag", *SVG_FALLBACK_COLUMNS):
        if row.get(column):
            return SvgOutput(svg_content=row[column])
    return SvgOutput()


def extract_model_output(table: ParsedTable, output_type: OutputType, index: int) -> ModelOutput:
    """出力種別に応じて1モデル分のペイロードを取り出す.

    Args:
        table: パース済みCSV
        output_type: 出力種別
        index: アイテムのインデックス（0始まり）

    Returns:
        出力種別に対応するペイロード
    """
    match output_type:
        case OutputType.TEXT:
            lines = extract_text_lines(table, index)
            return TextOutput(outputs=[TextEntry(text=line) for line in lines])
        case OutputType.BOUNDING_BOX:
            return extract_bounding_boxes(table, index)
        case OutputType.SVG:
            return extract_svg(table, index)
    msg = f"Unknown output type: {output_type}"
    raise ValueError(msg)
