"""CurationItemと出力ペイロードのデータモデルの定義."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import ConfigDict, Field

from src.common.defs.base import CamelModel


class OutputType(str, Enum):
    """モデル出力の種類."""

    TEXT = "text"
    BOUNDING_BOX = "bounding-box"
    SVG = "svg"


class TextEntry(CamelModel):
    """テキスト出力の1件."""

    text: str
    label: str | None = None
    confidence: float | None = Field(default=None, ge=0, le=100)
    word_count: int | None = None


class TextOutput(CamelModel):
    """テキスト出力ペイロード."""

    model_config = ConfigDict(extra="forbid")

    outputs: list[TextEntry] = Field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        """テキスト本文のみを順序通りに返す."""
        return [entry.text for entry in self.outputs]


class BoundingBox(CamelModel):
    """1つのバウンディングボックス.

    CSVの座標列から復元した場合はlabelが空、confidenceがNoneとなる.
    """

    x: float
    y: float
    width: float
    height: float
    label: str = ""
    confidence: float | None = Field(default=None, ge=0, le=1)


class BoundingBoxOutput(CamelModel):
    """バウンディングボックス出力ペイロード."""

    model_config = ConfigDict(extra="forbid")

    image_url: str = ""
    boxes: list[BoundingBox] = Field(default_factory=list)
    avg_confidence: float | None = None


class SvgOutput(CamelModel):
    """SVG出力ペイロード.

    ペイロード同士を区別できるよう、未知のキーは受け付けない.
    """

    model_config = ConfigDict(extra="forbid")

    svg_content: str = ""
    file_size: str | None = None
    element_count: int | None = None
    complexity: Literal["Low", "Medium", "High"] | None = None


ModelOutput = TextOutput | BoundingBoxOutput | SvgOutput


class _CurationItemBase(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    input_data: str


class TextCurationItem(_CurationItemBase):
    """テキスト出力を比較するCurationItem."""

    output_type: Literal["text"] = "text"
    model_a_output: TextOutput
    model_b_output: TextOutput


class BoundingBoxCurationItem(_CurationItemBase):
    """バウンディングボックス出力を比較するCurationItem."""

    output_type: Literal["bounding-box"] = "bounding-box"
    model_a_output: BoundingBoxOutput
    model_b_output: BoundingBoxOutput


class SvgCurationItem(_CurationItemBase):
    """SVG出力を比較するCurationItem."""

    output_type: Literal["svg"] = "svg"
    model_a_output: SvgOutput
    model_b_output: SvgOutput


CurationItem = Annotated[
    TextCurationItem | BoundingBoxCurationItem | SvgCurationItem,
    Field(discriminator="output_type"),
]
