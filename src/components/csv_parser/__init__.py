"""Permissive CSV parser component."""

from src.components.csv_parser.models import ParsedTable, Row
from src.components.csv_parser.parser import parse_csv, read_csv_file, split_line

__all__ = [
    "ParsedTable",
    "Row",
    "parse_csv",
    "read_csv_file",
    "split_line",
]
