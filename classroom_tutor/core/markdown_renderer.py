"""Markdown + LaTeX rendering for question and lesson text.

Questions and lesson steps are stored as Markdown that may contain ``$...$``
math. The renderer turns them into HTML and leaves the math for MathJax to
typeset when the page is shown in the Qt web view.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "Classroom Tutor",
        font_size: int = 14,
        text_color: str = "#000000",
    ) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""
        return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{html.escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: {text_color}; }}
      .content-html {{ font-size: {font_size}pt; line-height: 1.5; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src="{_MATHJAX_SCRIPT}"></script>
  </head>
  <body>
    <div class="content-html">{body_html}</div>
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "Classroom Tutor", font_size: int = 14) -> str:
        fragment = self.render_fragment(markdown_text)
        return self.wrap_with_mathjax(fragment, title=title, font_size=font_size)


renderer = MarkdownMathRenderer()
# Shared instance; MarkdownIt renders are read-only so reuse across threads is fine.
