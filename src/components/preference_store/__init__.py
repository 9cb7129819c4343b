"""In-memory preference store component."""

from src.components.preference_store.store import PreferenceStore

__all__ = ["PreferenceStore"]
