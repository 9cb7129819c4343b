"""共通の型定義をエクスポートする."""

from src.common.defs.curation import (
    BoundingBox,
    BoundingBoxCurationItem,
    BoundingBoxOutput,
    CurationItem,
    ModelOutput,
    OutputType,
    SvgCurationItem,
    SvgOutput,
    TextCurationItem,
    TextEntry,
    TextOutput,
)
from src.common.defs.errors import CurationError, MalformedInputError, NotFoundError
from src.common.defs.preference import PreferenceInput, PreferenceUpdate, UserPreference

__all__ = [
    "OutputType",
    "TextEntry",
    "TextOutput",
    "BoundingBox",
    "BoundingBoxOutput",
    "SvgOutput",
    "ModelOutput",
    "CurationItem",
    "TextCurationItem",
    "BoundingBoxCurationItem",
    "SvgCurationItem",
    "PreferenceInput",
    "PreferenceUpdate",
    "UserPreference",
    "CurationError",
    "MalformedInputError",
    "NotFoundError",
]
