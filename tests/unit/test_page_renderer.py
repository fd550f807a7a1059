"""
Unit tests for the PDF page renderer.
"""

import fitz
import pytest

from convertfast.core.functions.page_renderer import (
    A4_HEIGHT,
    A4_WIDTH,
    PageLayout,
    PdfPageRenderer,
)


class TestPageLayout:
    """Tests for PageLayout."""

    def test_defaults(self):
        layout = PageLayout()
        assert (layout.page_width, layout.page_height) == (A4_WIDTH, A4_HEIGHT)
        assert layout.margin == 40
        assert layout.line_height == 16
        assert layout.font == "helv"
        assert layout.font_size == 12

    def test_lines_per_page(self):
        assert PageLayout().lines_per_page == 47

    def test_usable_width(self):
        assert PageLayout(page_width=200, margin=50).usable_width == 100

    @pytest.mark.parametrize("kwargs", [
        {"margin": 300},
        {"line_height": 0},
        {"font_size": -1},
        {"page_height": 100, "margin": 45},
    ])
    def test_invalid_geometry(self, kwargs):
        with pytest.raises(ValueError):
            PageLayout(**kwargs)

    def test_with_overrides(self):
        layout = PageLayout()
        assert layout.with_overrides(margin=None) is layout
        changed = layout.with_overrides(margin=72, font_size=None)
        assert changed.margin == 72
        assert changed.font_size == 12
        assert layout.margin == 40


class TestWrapText:
    """Tests for PdfPageRenderer.wrap_text."""

    @pytest.fixture
    def renderer(self):
        return PdfPageRenderer()

    def test_short_lines(self, renderer):
        assert renderer.wrap_text("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self, renderer):
        assert renderer.wrap_text("") == [""]

    def test_crlf(self, renderer):
        assert renderer.wrap_text("a\r\nb\rc") == ["a", "b", "c"]

    def test_tabs_expanded(self, renderer):
        assert renderer.wrap_text("a\tb") == ["a   b"]

    def test_leading_indent_kept(self, renderer):
        assert renderer.wrap_text("    indented") == ["    indented"]
        assert renderer.wrap_text("\tx") == ["    x"]

    def test_inner_spaces_kept(self, renderer):
        assert renderer.wrap_text("a  b") == ["a  b"]

    def test_long_paragraph_wrapped(self, renderer):
        words = ["word{}".format(i) for i in range(200)]
        lines = renderer.wrap_text(" ".join(words))

        assert len(lines) > 1
        assert " ".join(lines).split() == words
        width = renderer.layout.usable_width
        assert all(renderer.measure(line) <= width for line in lines)

    def test_long_word_split(self, renderer):
        word = "x" * 500
        lines = renderer.wrap_text(word)

        assert len(lines) > 1
        assert "".join(lines) == word
        width = renderer.layout.usable_width
        assert all(renderer.measure(line) <= width for line in lines)


class TestRender:
    """Tests for PdfPageRenderer.render."""

    @pytest.fixture
    def renderer(self):
        return PdfPageRenderer()

    def test_renders_pdf(self, renderer, read_pdf):
        pdf_bytes = renderer.render("Hello\nWorld")

        assert pdf_bytes.startswith(b"%PDF")
        pages = read_pdf(pdf_bytes)
        assert len(pages) == 1
        assert "Hello" in pages[0]
        assert "World" in pages[0]

    def test_empty_text_has_one_page(self, renderer, read_pdf):
        assert len(read_pdf(renderer.render(""))) == 1

    def test_page_breaks(self, renderer, read_pdf):
        text = "\n".join("Line {}".format(i) for i in range(100))
        pages = read_pdf(renderer.render(text))

        assert len(pages) == 3
        assert "Line 46" in pages[0]
        assert "Line 47" in pages[1]
        assert "Line 99" in pages[2]

    def test_typographic_glyphs_survive(self, renderer, read_pdf):
        text = "don\u2019t \u2014 \u2022 \u201cq\u201d"
        page = read_pdf(renderer.render(text))[0]

        for glyph in ("\u2019", "\u2014", "\u2022", "\u201c", "\u201d"):
            assert glyph in page
        assert "don\u2019t" in page

    def test_measure_uses_layout_font(self, renderer):
        font = fitz.Font("helv")
        assert renderer.measure("Hello") == pytest.approx(font.text_length("Hello", fontsize=12))
        assert renderer.measure("\u2014") > 0

    def test_font_file(self, tmp_path, read_pdf):
        font_path = tmp_path / "body.cff"
        font_path.write_bytes(fitz.Font("helv").buffer)
        renderer = PdfPageRenderer(PageLayout(font_file=str(font_path)))

        assert renderer.measure("abc") == pytest.approx(PdfPageRenderer().measure("abc"))
        assert "Hello" in read_pdf(renderer.render("Hello"))[0]

    def test_progress(self, renderer, progress_log):
        renderer.render("Hello", on_progress=progress_log.append)
        assert progress_log == [60, 90]

    def test_page_size(self):
        renderer = PdfPageRenderer(PageLayout(page_width=300, page_height=400, margin=20))
        doc = fitz.open(stream=renderer.render("x"), filetype="pdf")
        try:
            rect = doc[0].rect
            assert (round(rect.width), round(rect.height)) == (300, 400)
        finally:
            doc.close()
