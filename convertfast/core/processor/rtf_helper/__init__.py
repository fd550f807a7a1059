# convertfast/core/processor/rtf_helper/__init__.py
"""
RTF Helper Module

Provides RTF decoding and extraction utilities with proper interface separation.

Architecture:
    - RTFFileConverter: bytes -> decoded RTF source (encoding detection)
    - RTFTextExtractor: RTF source -> plain text (single pass)
    - RTFMetadataExtractor: {\\info} group -> DocumentMetadata

Usage:
    from convertfast.core.processor.rtf_helper import (
        RTFFileConverter,
        RTFTextExtractor,
        RTFMetadataExtractor,
        RTFSourceInfo,
        extract_rtf_text,
    )
"""

# Converter
from convertfast.core.processor.rtf_helper.rtf_file_converter import (
    RTFFileConverter,
    RTFConvertedData,
)

# Text extraction
from convertfast.core.processor.rtf_helper.rtf_text_extractor import (
    ControlWord,
    RTFTextExtractor,
    extract_rtf_text,
    normalize_output,
    read_control_word,
)

# Metadata
from convertfast.core.processor.rtf_helper.rtf_metadata_extractor import (
    RTFMetadataExtractor,
    RTFSourceInfo,
)

# Decoder utilities
from convertfast.core.processor.rtf_helper.rtf_decoder import (
    detect_encoding,
    decode_content,
)

# Constants
from convertfast.core.processor.rtf_helper.rtf_constants import (
    CONTROL_SYMBOLS,
    CONTROL_WORD_SUBSTITUTIONS,
    SKIP_DESTINATIONS,
)

__all__ = [
    # Converter
    'RTFFileConverter',
    'RTFConvertedData',
    # Text extraction
    'ControlWord',
    'RTFTextExtractor',
    'extract_rtf_text',
    'normalize_output',
    'read_control_word',
    # Metadata
    'RTFMetadataExtractor',
    'RTFSourceInfo',
    # Decoder
    'detect_encoding',
    'decode_content',
    # Constants
    'CONTROL_SYMBOLS',
    'CONTROL_WORD_SUBSTITUTIONS',
    'SKIP_DESTINATIONS',
]
