# convertfast/core/processor/rtf_helper/rtf_file_converter.py
"""
RTF File Converter

Decodes raw RTF bytes into a string container for the handler.
"""
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional

from convertfast.core.functions.file_converter import BaseFileConverter
from convertfast.core.processor.rtf_helper.rtf_constants import RTF_MAGIC
from convertfast.core.processor.rtf_helper.rtf_decoder import (
    decode_content,
    detect_bom,
    detect_encoding,
)

logger = logging.getLogger("convertfast.rtf.converter")


@dataclass
class RTFConvertedData:
    """
    RTF converted data container.

    Attributes:
        content: Decoded RTF source text
        encoding: Encoding used for decoding
        original_size: Original binary data size
    """
    content: str
    encoding: str = "cp1252"
    original_size: int = 0


class RTFFileConverter(BaseFileConverter):
    """
    RTF file converter.

    Detects the encoding (BOM, \\ansicpg, chardet) and decodes the bytes.
    """

    def __init__(self, default_encoding: str = "cp1252"):
        """
        Initialize RTFFileConverter.

        Args:
            default_encoding: Encoding for input that declares none
        """
        self._default_encoding = default_encoding
        self.logger = logger

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        encoding: Optional[str] = None,
        **kwargs
    ) -> RTFConvertedData:
        """
        Decode RTF bytes.

        Args:
            file_data: Raw binary RTF data
            file_stream: Not used
            encoding: Force a specific encoding (None to detect)
            **kwargs: Not used

        Returns:
            RTFConvertedData with the decoded content
        """
        encoding = encoding or detect_encoding(file_data, self._default_encoding)
        content = decode_content(file_data, encoding)
        self.logger.debug(f"Decoded {len(file_data)} bytes as {encoding}")
        return RTFConvertedData(
            content=content,
            encoding=encoding,
            original_size=len(file_data),
        )

    def get_format_name(self) -> str:
        """Return format name."""
        return "RTF Document"

    def validate(self, file_data: bytes) -> bool:
        """Check for the {\\rtf signature, ignoring a BOM and leading whitespace."""
        head = file_data[:256]
        text = head.decode(detect_bom(head) or 'latin-1', errors='ignore')
        return text.lstrip('\uFEFF \t\r\n').startswith(RTF_MAGIC)


__all__ = [
    'RTFFileConverter',
    'RTFConvertedData',
]
