"""
Pytest configuration and shared fixtures.
"""

import pytest
import fitz

from convertfast import DocumentConverter
from convertfast.core.processor.rtf_helper import RTFTextExtractor


SAMPLE_RTF = (
    r"{\rtf1\ansi\ansicpg1252\deff0"
    r"{\fonttbl{\f0\fswiss Helvetica;}}"
    r"{\colortbl;\red255\green0\blue0;}"
    r"{\info{\title Quarterly Report}{\author Jane Doe}"
    r"{\creatim\yr2024\mo3\dy15\hr9\min30}}"
    r"{\header Page header}"
    r"\f0\fs24 Hello\par World\par\par\par Done}"
)

SAMPLE_TEXT = "Hello\nWorld\n\nDone"


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def extractor():
    """Create a text extractor with default settings."""
    return RTFTextExtractor()


@pytest.fixture
def converter():
    """Create a document converter with default settings."""
    return DocumentConverter()


@pytest.fixture
def sample_rtf():
    """RTF source with font/color tables, an info group and a header."""
    return SAMPLE_RTF


@pytest.fixture
def sample_text():
    """Plain text expected from sample_rtf."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_rtf_bytes():
    return SAMPLE_RTF.encode("ascii")


@pytest.fixture
def rtf_file(tmp_path, sample_rtf_bytes):
    """Write sample_rtf to a temporary .rtf file."""
    path = tmp_path / "sample.rtf"
    path.write_bytes(sample_rtf_bytes)
    return path


@pytest.fixture
def progress_log():
    """Collect progress callback values."""
    return []


# ============================================================================
# Helpers
# ============================================================================


@pytest.fixture
def read_pdf():
    """Return a function that opens PDF bytes and yields page texts."""
    def _read(pdf_bytes):
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        try:
            return [page.get_text() for page in doc]
        finally:
            doc.close()
    return _read
