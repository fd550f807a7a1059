"""
Core - Document Conversion Core Module

Module Structure:
- document_converter: Main DocumentConverter class
- processor/: Format handlers
    - rtf_handler: RTF document processing
    - rtf_helper/: RTF decoding, text and metadata extraction
- functions/: Shared building blocks
    - file_converter: Binary -> workable object interface
    - metadata_extractor: DocumentMetadata and formatting
    - page_renderer: Plain text -> PDF (PyMuPDF)

Usage:
    from convertfast import DocumentConverter
    from convertfast.core.processor import RTFHandler
    from convertfast.core.functions import PageLayout, PdfPageRenderer
"""

# === Main Class ===
from convertfast.core.document_converter import (
    ConversionResult,
    CurrentFile,
    DocumentConverter,
    create_converter,
)

# === Explicit Subpackage Imports ===
from convertfast.core import processor
from convertfast.core import functions

__all__ = [
    # Main Class
    "ConversionResult",
    "CurrentFile",
    "DocumentConverter",
    "create_converter",
    # Subpackages
    "processor",
    "functions",
]
