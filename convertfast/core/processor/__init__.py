# convertfast/core/processor/__init__.py
"""
Processor - Format handlers

Handler classes:
- BaseHandler: Abstract base for all handlers
- RTFHandler: RTF text extraction and PDF conversion

Usage:
    from convertfast.core.processor import RTFHandler
"""

from convertfast.core.processor.base_handler import BaseHandler
from convertfast.core.processor.rtf_handler import RTFHandler

# Helper package
from convertfast.core.processor import rtf_helper

__all__ = [
    "BaseHandler",
    "RTFHandler",
    "rtf_helper",
]
