"""Gallery view of uploaded images and their model outputs."""

from src.application.gallery.gallery import (
    GalleryEntry,
    GalleryFilters,
    available_filters,
    build_gallery,
    filter_gallery,
)

__all__ = [
    "GalleryEntry",
    "GalleryFilters",
    "available_filters",
    "build_gallery",
    "filter_gallery",
]
