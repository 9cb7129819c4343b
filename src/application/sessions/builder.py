"""2つのCSVからキュレーションセッションのCurationItemを組み立てる."""

import logging
from collections.abc import Sequence

from src.common.defs.curation import (
    BoundingBoxCurationItem,
    BoundingBoxOutput,
    CurationItem,
    OutputType,
    SvgCurationItem,
    SvgOutput,
    TextCurationItem,
    TextOutput,
)
from src.components.csv_parser.models import ParsedTable
from src.components.csv_parser.parser import parse_csv
from src.components.output_extractor.extractor import extract_model_output, unique_filenames

logger = logging.getLogger(__name__)


class CurationSessionBuilder:
    """モデルA/BのParsedTableからCurationItemを合成するビルダー.

    合成したアイテムはストアに保存せず、呼び出し側に返すだけとする.
    """

    def build(
        self,
        table_a: ParsedTable,
        table_b: ParsedTable,
        output_type: OutputType,
        images: Sequence[str] | None = None,
    ) -> list[CurationItem]:
        """CurationItemのリストを生成する.

        アイテム数はモデルAの重複なしfilename数とし、
        filenameが無い場合はモデルAの行数とする.

        Args:
            table_a: モデルAのCSV
            table_b: モデルBのCSV
            output_type: 出力種別
            images: 画像ファイル名のリスト（バウンディングボックスの画像参照に使用）

        Returns:
            idが1から始まるCurationItemのリスト
        """
        item_count = len(unique_filenames(table_a)) or len(table_a.rows)
        items = [
            self._build_item(index, table_a, table_b, output_type, images)
            for index in range(item_count)
        ]
        logger.info("Built %d %s items from CSV data", len(items), output_type.value)
        return items

    def build_from_text(
        self,
        csv_a: str,
        csv_b: str,
        output_type: OutputType,
        images: Sequence[str] | None = None,
    ) -> list[CurationItem]:
        """CSVテキストをパースしてからbuildする.

        Raises:
            MalformedInputError: いずれかのCSVが解釈できない場合
        """
        return self.build(parse_csv(csv_a), parse_csv(csv_b), output_type, images)

    def _build_item(
        self,
        index: int,
        table_a: ParsedTable,
        table_b: ParsedTable,
        output_type: OutputType,
        images: Sequence[str] | None,
    ) -> CurationItem:
        output_a = extract_model_output(table_a, output_type, index)
        output_b = extract_model_output(table_b, output_type, index)
        item_id = index + 1
        input_data = f"Image {item_id}"

        match output_a, output_b:
            case TextOutput(), TextOutput():
                return TextCurationItem(
                    id=item_id, input_data=input_data, model_a_output=output_a, model_b_output=output_b
                )
            case BoundingBoxOutput(), BoundingBoxOutput():
                if images and index < len(images):
                    output_a = output_a.model_copy(update={"image_url": images[index]})
                    output_b = output_b.model_copy(update={"image_url": images[index]})
                return BoundingBoxCurationItem(
                    id=item_id, input_data=input_data, model_a_output=output_a, model_b_output=output_b
                )
            case SvgOutput(), SvgOutput():
                return SvgCurationItem(
                    id=item_id, input_data=input_data, model_a_output=output_a, model_b_output=output_b
                )
        msg = f"Mismatched outputs for {output_type}"
        raise TypeError(msg)
