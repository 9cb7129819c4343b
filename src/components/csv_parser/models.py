"""パース済みCSVのデータモデル定義."""

from pydantic import BaseModel, Field

Row = dict[str, str]


class ParsedTable(BaseModel):
    """ヘッダー行とデータ行を保持するパース結果.

    Attributes:
        headers: 列名（ファイル内の順序）
        rows: 列名→セル値のdict（ファイル内の順序）. 全行がheadersと同じキー集合を持つ.
    """

    headers: list[str]
    rows: list[Row] = Field(default_factory=list)

    def column(self, name: str) -> list[str]:
        """指定列の値を行順に返す. 列が存在しない行は空文字列とする.

        Args:
            name: 列名

        Returns:
            セル値のリスト
        """
        return [row.get(name, "") for row in self.rows]

    def row_at(self, index: int) -> Row | None:
        """位置インデックスの行を返す. 範囲外ならNone."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None
