"""2つのCSVファイルからキュレーションセッションを組み立てて内容を確認するスクリプト."""

import argparse
import sys

from dotenv import load_dotenv

from src.application.sessions.builder import CurationSessionBuilder
from src.common.defs.curation import (
    BoundingBoxCurationItem,
    CurationItem,
    OutputType,
    SvgCurationItem,
    TextCurationItem,
)
from src.common.lib.logging import getLogger
from src.components.csv_parser.parser import read_csv_file

logger = getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数パーサーを生成する."""
    parser = argparse.ArgumentParser(description="Build a curation session from two model CSV files")
    parser.add_argument("model_a", help="Model A CSV file")
    parser.add_argument("model_b", help="Model B CSV file")
    parser.add_argument(
        "--output-type",
        choices=[output_type.value for output_type in OutputType],
        default=OutputType.TEXT.value,
    )
    parser.add_argument("--images", nargs="*", default=[], help="Image filenames in gallery order")
    return parser


def summarize(item: CurationItem) -> str:
    """アイテムの1行サマリーを返す."""
    match item:
        case TextCurationItem():
            return f"A={len(item.model_a_output.outputs)} texts, B={len(item.model_b_output.outputs)} texts"
        case BoundingBoxCurationItem():
            return f"A={len(item.model_a_output.boxes)} boxes, B={len(item.model_b_output.boxes)} boxes"
        case SvgCurationItem():
            return (
                f"A={len(item.model_a_output.svg_content)} chars, "
                f"B={len(item.model_b_output.svg_content)} chars"
            )


def main(argv: list[str] | None = None) -> None:
    """CSVを読み込みセッションの内容をログに出力する."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        table_a = read_csv_file(args.model_a)
        table_b = read_csv_file(args.model_b)
        items = CurationSessionBuilder().build(table_a, table_b, OutputType(args.output_type), args.images)

        logger.info("=" * 60)
        logger.info("Curation session: %d items (%s)", len(items), args.output_type)
        logger.info("=" * 60)
        for item in items:
            logger.info("[%d] %s: %s", item.id, item.input_data, summarize(item))

    except Exception:
        logger.exception("Failed to build curation session")
        sys.exit(1)


if __name__ == "__main__":
    main()
