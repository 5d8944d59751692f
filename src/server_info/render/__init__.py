"""Render package - Presentation of collected reports."""

from server_info.render.console import ConsoleRenderer
from server_info.render.html import HTMLRenderer, RenderMode

__all__ = ["ConsoleRenderer", "HTMLRenderer", "RenderMode"]
