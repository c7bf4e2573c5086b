"""
html.py

HTML-документ с секциями <div class="..."> и списками <ul>/<li>; весь текст экранируется.
"""

from __future__ import annotations

from html import escape

from .renderer import HeaderLevel, Indent, Renderer, SectionKind
from ..core.constants import TOOL_NAME

_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
body { font-family: Arial, sans-serif; margin: 40px; line-height: 1.6; }
h1 { color: #333; border-bottom: 2px solid #333; padding-bottom: 10px; }
h2 { font-size: 1.1em; margin: 0; }
h3 { color: #777; font-size: 1em; }
.success, .warning, .error { border: 1px solid #ddd; padding: 10px 15px; margin: 10px 0; border-radius: 5px; }
.success { border-left: 5px solid #28a745; }
.warning { border-left: 5px solid #ffc107; }
.error { border-left: 5px solid #dc3545; }
.content { background: #f8f9fa; padding: 10px; border-radius: 3px; }
code { background: #eee; padding: 1px 4px; border-radius: 3px; }
</style>
</head>
<body>
"""

_TAIL = """</body>
</html>
"""


class HtmlRenderer(Renderer):

    def __init__(self, title: str = TOOL_NAME):
        super().__init__()
        self.title = title

    def begin(self) -> None:
        self.write(_HEAD.replace("{title}", escape(self.title)))

    def end(self) -> None:
        self.write(_TAIL)

    def section_begin(self, kind: SectionKind) -> None:
        self.write(f'<div class="{kind.value}">\n')

    def section_end(self, kind: SectionKind) -> None:
        self.write("</div>\n")

    def header(self, text: str, level: HeaderLevel) -> None:
        self.write(f"<h{level.value}>{escape(text)}</h{level.value}>\n")

    def list_begin(self) -> None:
        self.write("<ul>\n")

    def list_end(self) -> None:
        self.write("</ul>\n")

    def item_begin(self, indent: Indent) -> None:
        self.write("<li>\n")

    def item_end(self, indent: Indent) -> None:
        self.write("</li>\n")

    def bullet(self, text: str, indent: Indent) -> None:
        self.write(f"<li>{escape(text)}</li>\n")

    def text(self, line: str) -> None:
        self.write(f"<p>{escape(line)}</p>\n")

    def pre(self, block: str, indent: Indent) -> None:
        self.write(f"<code>{escape(block)}</code>\n")

    def new_line(self, count: int = 1) -> None:
        self.write("\n" * count)
