"""Curation session assembly from uploaded CSV files."""

from src.application.sessions.builder import CurationSessionBuilder

__all__ = ["CurationSessionBuilder"]
