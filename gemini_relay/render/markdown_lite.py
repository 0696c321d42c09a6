"""
Markdown-lite to HTML.

Handles a fixed subset only: newlines, **bold**, *italic*, [links](url),
``## `` headings and ``* `` list items. There is no parser: each rule is a
global substitution over the output of the previous one, so the order of
``RULES`` is part of the behavior (bold must run before italic, and list
items must exist before the list wrap).

Known quirk, kept on purpose: when any list item is present the *whole*
output is wrapped in a single ``<ul>``, including non-list content and
separate list blocks.
"""

from __future__ import annotations

import re
from typing import Pattern, Tuple

# After newlines become <br>, a "line" starts at the string start or right after a <br>.
_LINE_START = r"(^|<br>)"
_LINE_REST = r"(.*?)(?=<br>|$)"

RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"\n"), "<br>"),
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    # asterisks must hug the text and stay on one line, so "* item" markers survive
    (re.compile(r"\*(?!\s)((?:(?!<br>).)+?)(?<!\s)\*"), r"<em>\1</em>"),
    (re.compile(r"\[(.*?)\]\((.*?)\)"), r'<a href="\2" target="_blank">\1</a>'),
    (re.compile(_LINE_START + r"[ \t]*##\s" + _LINE_REST), r"\1<h3>\2</h3>"),
    (re.compile(_LINE_START + r"\*\s" + _LINE_REST), r"\1<li>\2</li>"),
)


def wrap_list(html: str) -> str:
    if "<li>" not in html:
        return html
    if html.startswith("<ul>") and html.endswith("</ul>"):
        return html
    return f"<ul>{html}</ul>"


def render_markdown(text: str) -> str:
    html = text
    for pattern, replacement in RULES:
        html = pattern.sub(replacement, html)
    return wrap_list(html)
