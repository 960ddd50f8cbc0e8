"""Textual front-end for President."""

from .app import run_textual_app

__all__ = ["run_textual_app"]
