import markdown
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.tables import TableExtension
from pygments.formatters import HtmlFormatter
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from mdblog.errors import RenderError

HIGHLIGHT_CSS_CLASS = "highlight"


class MarkdownRenderer:
    """Markdown to HTML with Pygments highlighting for fenced code blocks.

    The output is trusted operator content and is not sanitized.
    """

    def __init__(self, style: str = "dracula"):
        try:
            get_style_by_name(style)
        except ClassNotFound as e:
            raise ValueError(f"Unknown code highlighting style: {style}") from e
        self.style = style
        self.css = HtmlFormatter(style=style).get_style_defs(
            f".{HIGHLIGHT_CSS_CLASS}"
        )

    def _extensions(self) -> list:
        return [
            FencedCodeExtension(),
            CodeHiliteExtension(
                css_class=HIGHLIGHT_CSS_CLASS,
                guess_lang=False,
                pygments_style=self.style,
            ),
            TableExtension(),
            "sane_lists",
        ]

    def render(self, body: str) -> str:
        # Markdown instances carry per-document state, so build one per call
        md = markdown.Markdown(extensions=self._extensions(), output_format="html")
        try:
            return md.convert(body)
        except Exception as e:
            raise RenderError(f"rendering markdown: {e}") from e
