"""APIリクエスト/レスポンススキーマ."""

from typing import Any

from pydantic import Field

from src.application.gallery.gallery import GalleryEntry
from src.common.defs.base import CamelModel
from src.common.defs.curation import CurationItem, OutputType


class CurationItemsResponse(CamelModel):
    """CurationItem一覧レスポンス."""

    items: list[CurationItem]
    total: int


class CurationSessionRequest(CamelModel):
    """2つのCSVからCurationItemを合成するリクエスト."""

    output_type: OutputType
    model_a_csv: str
    model_b_csv: str
    images: list[str] = Field(default_factory=list)


class GalleryRequest(CurationSessionRequest):
    """ギャラリー表示リクエスト."""

    search: str = ""
    tag: str = ""
    graphic_type: str = ""


class GalleryResponse(CamelModel):
    """ギャラリー表示レスポンス."""

    entries: list[GalleryEntry]
    tags: list[str]
    graphic_types: list[str]
    total: int


class ErrorResponse(CamelModel):
    """エラーレスポンス."""

    message: str
    errors: list[dict[str, Any]] | None = None
