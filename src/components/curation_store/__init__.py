"""In-memory curation item store component."""

from src.components.curation_store.store import CurationItemStore

__all__ = ["CurationItemStore"]
