"""
convertfast Library

Plain-text extraction and conversion for RTF documents.

Package Structure:
- core: Document conversion core module
    - DocumentConverter: Main conversion class
    - processor: Format handlers and the RTF text extractor
    - functions: Shared building blocks (metadata, page renderer)

Usage:
    from convertfast import DocumentConverter, extract_rtf_text

    text = extract_rtf_text(r"{\\rtf1 Hello\\par World}")

    converter = DocumentConverter()
    result = converter.convert("document.rtf", "pdf")
    result.save("output/")
"""

__version__ = "0.1.0"

# Expose core classes at top level
from convertfast.core import (
    ConversionResult,
    DocumentConverter,
    create_converter,
)
from convertfast.core.processor.rtf_helper import (
    RTFTextExtractor,
    extract_rtf_text,
)

# Explicit subpackages
from convertfast import core

__all__ = [
    "__version__",
    # Core classes
    "ConversionResult",
    "DocumentConverter",
    "create_converter",
    # Extraction
    "RTFTextExtractor",
    "extract_rtf_text",
    # Subpackages
    "core",
]
