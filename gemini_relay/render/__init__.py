from .markdown_lite import render_markdown

__all__ = ["render_markdown"]
