# convertfast/core/functions/page_renderer.py
"""
Page Renderer - Plain text to fixed-page PDF

Lays plain text out on fixed-size pages with PyMuPDF: greedy word wrapping
by measured glyph width, page breaks at the bottom margin, one line of text
per line height. Text is measured and drawn with the same fitz.Font through
a TextWriter, so characters outside Latin-1 keep their glyphs.

The renderer is an ordinary object built once by DocumentConverter and
handed to handlers through the config, so no module-level PDF state exists.

Usage:
    from convertfast.core.functions.page_renderer import PageLayout, PdfPageRenderer

    renderer = PdfPageRenderer(PageLayout(font_size=11))
    pdf_bytes = renderer.render("Hello\\nWorld", on_progress=print)
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

import fitz

logger = logging.getLogger("convertfast.renderer")

ProgressCallback = Callable[[int], None]

# A4 in PDF points
A4_WIDTH = 595.28
A4_HEIGHT = 841.89


@dataclass(frozen=True)
class PageLayout:
    """
    Page geometry and typography for the renderer.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        margin: Margin on all four sides in points
        line_height: Baseline-to-baseline distance in points
        font: PyMuPDF built-in font name ("helv" is Helvetica)
        font_file: Optional TrueType/OpenType file used instead of ``font``
        font_size: Font size in points
        tab_size: Columns per tab stop when expanding tabs
    """
    page_width: float = A4_WIDTH
    page_height: float = A4_HEIGHT
    margin: float = 40
    line_height: float = 16
    font: str = "helv"
    font_size: float = 12
    tab_size: int = 4
    font_file: Optional[str] = None

    def __post_init__(self):
        if self.usable_width <= 0:
            raise ValueError(
                f"Margin {self.margin} leaves no usable width on a {self.page_width}pt page"
            )
        if self.line_height <= 0 or self.font_size <= 0:
            raise ValueError("line_height and font_size must be positive")
        if self.lines_per_page < 1:
            raise ValueError(
                f"Line height {self.line_height} does not fit between the margins"
            )

    @property
    def usable_width(self) -> float:
        return self.page_width - self.margin * 2

    @property
    def lines_per_page(self) -> int:
        """Number of lines that fit between the top and bottom margins."""
        count = 0
        y = self.margin
        while y + self.line_height <= self.page_height - self.margin:
            count += 1
            y += self.line_height
        return count

    def with_overrides(self, **overrides) -> "PageLayout":
        """Copy with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values) if values else self


class PdfPageRenderer:
    """
    Plain-text to PDF renderer.

    Attributes:
        layout: PageLayout in use
    """

    def __init__(self, layout: Optional[PageLayout] = None):
        """
        Initialize PdfPageRenderer.

        Args:
            layout: Page layout (default: A4, 40pt margin, Helvetica 12/16)
        """
        self._layout = layout or PageLayout()
        self._font = self._load_font(self._layout)
        self._logger = logger

    @staticmethod
    def _load_font(layout: PageLayout) -> fitz.Font:
        if layout.font_file:
            return fitz.Font(fontfile=layout.font_file)
        return fitz.Font(layout.font)

    @property
    def layout(self) -> PageLayout:
        return self._layout

    def measure(self, text: str) -> float:
        """Width of ``text`` in points with the layout's font."""
        return self._font.text_length(text, fontsize=self._layout.font_size)

    def wrap_text(self, text: str) -> List[str]:
        """
        Split text into lines that fit the usable width.

        Each newline starts a new paragraph; empty paragraphs become blank
        lines.

        Args:
            text: Plain text

        Returns:
            List of lines
        """
        lines: List[str] = []
        for paragraph in text.replace('\r\n', '\n').replace('\r', '\n').split('\n'):
            lines.extend(self._wrap_paragraph(paragraph.expandtabs(self._layout.tab_size)))
        return lines

    def _wrap_paragraph(self, paragraph: str) -> List[str]:
        if not paragraph.strip():
            return [""]

        width = self._layout.usable_width
        lines: List[str] = []
        current = ""

        # Leading spaces stay attached to the first word
        indent = len(paragraph) - len(paragraph.lstrip(' '))
        words = paragraph[indent:].split(' ')
        words[0] = paragraph[:indent] + words[0]

        for word in words:
            candidate = f"{current} {word}" if current else word
            if self.measure(candidate) <= width:
                current = candidate
                continue

            if current:
                lines.append(current)

            # A single word wider than the page is split by characters
            while len(word) > 1 and self.measure(word) > width:
                cut = self._fit_prefix(word, width)
                lines.append(word[:cut])
                word = word[cut:]
            current = word

        lines.append(current)
        return lines

    def _fit_prefix(self, word: str, width: float) -> int:
        """Length of the longest prefix of ``word`` that fits (at least 1)."""
        cut = 1
        while cut < len(word) and self.measure(word[:cut + 1]) <= width:
            cut += 1
        return cut

    def render(self, text: str, on_progress: Optional[ProgressCallback] = None) -> bytes:
        """
        Render text to a PDF document.

        Always produces at least one page.

        Args:
            text: Plain text (any length, may contain newlines and tabs)
            on_progress: Optional callback receiving coarse progress (0-100)

        Returns:
            PDF file bytes
        """
        layout = self._layout
        lines = self.wrap_text(text or "")
        if on_progress:
            on_progress(60)

        doc = fitz.open()
        try:
            page = doc.new_page(width=layout.page_width, height=layout.page_height)
            writer = fitz.TextWriter(page.rect)
            has_text = False
            y = layout.margin

            for line in lines:
                if y + layout.line_height > layout.page_height - layout.margin:
                    if has_text:
                        writer.write_text(page)
                    page = doc.new_page(width=layout.page_width, height=layout.page_height)
                    writer = fitz.TextWriter(page.rect)
                    has_text = False
                    y = layout.margin
                if line:
                    writer.append((layout.margin, y), line, font=self._font, fontsize=layout.font_size)
                    has_text = True
                y += layout.line_height

            if has_text:
                writer.write_text(page)

            page_count = doc.page_count
            if on_progress:
                on_progress(90)

            pdf_bytes = doc.tobytes()
        finally:
            doc.close()

        self._logger.debug(f"Rendered {len(lines)} lines on {page_count} page(s)")
        return pdf_bytes


__all__ = [
    "A4_HEIGHT",
    "A4_WIDTH",
    "PageLayout",
    "PdfPageRenderer",
    "ProgressCallback",
]
