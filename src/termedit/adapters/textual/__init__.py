"""Textual host for the editor; the app module is imported lazily."""

from .controller import TextualEditorAdapter, TextualUIHooks, create_default_manager

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "create_default_manager"]
