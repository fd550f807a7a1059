# convertfast/core/functions/__init__.py
"""
Functions - Shared building blocks used by every handler

Modules:
- file_converter: BaseFileConverter interface
- metadata_extractor: DocumentMetadata, MetadataFormatter, BaseMetadataExtractor
- page_renderer: PageLayout, PdfPageRenderer
"""

from convertfast.core.functions.file_converter import BaseFileConverter
from convertfast.core.functions.metadata_extractor import (
    BaseMetadataExtractor,
    DocumentMetadata,
    MetadataField,
    MetadataFormatter,
)
from convertfast.core.functions.page_renderer import (
    PageLayout,
    PdfPageRenderer,
    ProgressCallback,
)

__all__ = [
    # File conversion
    "BaseFileConverter",
    # Metadata
    "BaseMetadataExtractor",
    "DocumentMetadata",
    "MetadataField",
    "MetadataFormatter",
    # Rendering
    "PageLayout",
    "PdfPageRenderer",
    "ProgressCallback",
]
