"""Markdown to HTML fragment conversion."""

from __future__ import annotations

import re

import markdown

DEFAULT_EXTENSIONS = ["tables", "footnotes", "fenced_code"]

_ATX_HEADING = re.compile(r"^#{1,6}[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_SETEXT_UNDERLINE = re.compile(r"^(=+|-+)[ \t]*$")
_FENCE = re.compile(r"^(```|~~~)")
_CODE_INDENT = 4


class MarkdownConverter:
    """Convert Markdown text into an HTML fragment.

    Conversion never fails: malformed constructs come out as literal text.
    """

    def __init__(self, extensions: list[str] | None = None) -> None:
        self.extensions = list(extensions or DEFAULT_EXTENSIONS)
        self._md = markdown.Markdown(extensions=self.extensions, output_format="html")

    def convert(self, text: str) -> str:
        # reset() clears footnotes and other per-document parser state
        try:
            return self._md.convert(text)
        finally:
            self._md.reset()


def extract_title(text: str) -> str | None:
    """Return the text of the first heading in a Markdown document.

    Recognizes ATX (``# Title``) and setext (``Title`` over ``===``)
    headings, ignoring fenced and indented code blocks. A heading may be
    indented by at most three spaces.
    """
    in_fence = False
    previous = ""
    for line in text.splitlines():
        stripped = line.strip()
        expanded = line.expandtabs(4)
        if len(expanded) - len(expanded.lstrip(" ")) >= _CODE_INDENT:
            # indented code after a blank line, otherwise a paragraph continuation
            if not in_fence:
                previous = stripped if previous else ""
            continue
        if _FENCE.match(stripped):
            in_fence = not in_fence
            previous = ""
            continue
        if in_fence:
            continue
        match = _ATX_HEADING.match(stripped)
        if match:
            return match.group(1).strip()
        if previous and _SETEXT_UNDERLINE.match(stripped):
            return previous
        previous = stripped
    return None
