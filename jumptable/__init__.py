"""Dispatch tables and numbered menus of callables, with small demo commands."""

__version__ = "0.1.0"
__all__ = ["table", "menu", "parsers", "demos"]