"""引用符を考慮したカンマ区切りテキストのパーサー."""

import logging
from pathlib import Path

from src.common.defs.errors import MalformedInputError
from src.components.csv_parser.models import ParsedTable, Row

logger = logging.getLogger(__name__)

QUOTE = '"'
SEPARATOR = ","


def split_line(line: str) -> list[str]:
    """1行をフィールドに分割する.

    `"` は引用モードを切り替えるだけでフィールドには含めない.
    引用モード外のカンマのみを区切りとして扱い、各フィールドの前後空白を除去する.

    Args:
        line: CSVの1行

    Returns:
        フィールドのリスト
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def _strip_quotes(value: str) -> str:
    """先頭と末尾の `"` をそれぞれ1つだけ取り除く."""
    if value.startswith(QUOTE):
        value = value[1:]
    if value.endswith(QUOTE):
        value = value[:-1]
    return value


def _tokenize(line: str) -> list[str]:
    return [_strip_quotes(token) for token in split_line(line)]


def parse_csv(text: str) -> ParsedTable:
    """CSVテキストをParsedTableに変換する.

    空行はスキップする. 列数が足りない行は不足分を空文字列で補い、
    余分なフィールドは無視する.

    Args:
        text: CSVテキスト全体

    Returns:
        ParsedTable

    Raises:
        MalformedInputError: ヘッダー行とデータ行が揃っていない場合
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        msg = "CSV must have at least a header and one data row"
        raise MalformedInputError(msg)

    headers = _tokenize(lines[0])
    rows: list[Row] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = _tokenize(line)
        row: Row = {}
        for index, header in enumerate(headers):
            row[header] = values[index] if index < len(values) else ""
        rows.append(row)

    logger.debug("Parsed CSV with %d columns and %d rows", len(headers), len(rows))
    return ParsedTable(headers=headers, rows=rows)


def read_csv_file(path: str | Path) -> ParsedTable:
    """CSVファイルを読み込みParsedTableに変換する.

    Args:
        path: CSVファイルのパス

    Returns:
        ParsedTable

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        MalformedInputError: CSVとして解釈できない場合
    """
    file_path = Path(path)
    if not file_path.exists():
        msg = f"CSV file not found: {file_path}"
        logger.error(msg)
        raise FileNotFoundError(msg)
    return parse_csv(file_path.read_text(encoding="utf-8-sig"))
