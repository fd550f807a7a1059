# convertfast/core/processor/rtf_handler.py
"""
RTF Handler

Class-based handler for RTF files.
1. Converter: bytes -> decoded RTF source (encoding detection)
2. Metadata: {\\info} group -> DocumentMetadata (optional)
3. Extractor: RTF source -> plain text
4. Renderer: plain text -> PDF (PDF target only)
"""
from typing import Optional, TYPE_CHECKING

from convertfast.core.functions.metadata_extractor import DocumentMetadata
from convertfast.core.functions.page_renderer import ProgressCallback
from convertfast.core.processor.base_handler import BaseHandler, report_progress
from convertfast.core.processor.rtf_helper import (
    RTFConvertedData,
    RTFFileConverter,
    RTFMetadataExtractor,
    RTFSourceInfo,
    extract_rtf_text,
)

if TYPE_CHECKING:
    from convertfast.core.document_converter import CurrentFile


class RTFHandler(BaseHandler):
    """
    RTF Document Processing Handler.

    Processing flow:
    1. file_converter.convert() -> RTFConvertedData (decoded string)
    2. extract_rtf_text() -> plain text
    3. metadata_extractor.extract() -> DocumentMetadata (when requested)
    4. page_renderer.render() -> PDF bytes (convert_to_pdf only)
    """

    def _create_file_converter(self) -> RTFFileConverter:
        """Create RTF-specific file converter."""
        return RTFFileConverter(
            default_encoding=self.config.get("default_encoding") or "cp1252"
        )

    def _create_metadata_extractor(self) -> RTFMetadataExtractor:
        """Create RTF-specific metadata extractor."""
        return RTFMetadataExtractor(formatter=self.metadata_formatter)

    def _decode(self, current_file: "CurrentFile") -> RTFConvertedData:
        file_path = current_file.get("file_path", "unknown")
        file_data = current_file.get("file_data", b"")
        converted: RTFConvertedData = self.convert_file(current_file)

        if file_data and not self.file_converter.validate(file_data):
            self.logger.warning(f"Missing {{\\rtf header, extracting anyway: {file_path}")

        return converted

    def extract_text(
        self,
        current_file: "CurrentFile",
        extract_metadata: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> str:
        """
        Extract text from RTF file.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            extract_metadata: Whether to prepend the formatted metadata block
            on_progress: Optional progress callback (10, 30, 100)
            **kwargs: Additional options

        Returns:
            Extracted text
        """
        file_path = current_file.get("file_path", "unknown")
        self.logger.info(f"{self.file_converter.get_format_name()} processing: {file_path}")

        report_progress(on_progress, 10)
        converted = self._decode(current_file)
        report_progress(on_progress, 30)

        text = extract_rtf_text(converted.content)

        if extract_metadata:
            metadata_block = self.extract_and_format_metadata(
                RTFSourceInfo(content=converted.content, encoding=converted.encoding)
            )
            if metadata_block:
                text = f"{metadata_block}\n\n{text}" if text else metadata_block

        report_progress(on_progress, 100)
        self.logger.debug(f"RTF extracted {len(text)} chars ({converted.encoding}): {file_path}")
        return text

    def convert_to_pdf(
        self,
        current_file: "CurrentFile",
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> bytes:
        """
        Convert RTF file to a PDF of its plain text.

        Progress: 10 (start), 20 (decoded), 40 (text extracted), 60 and 90
        from the renderer, 100 (done).

        Args:
            current_file: CurrentFile dict containing file info and binary data
            on_progress: Optional progress callback
            **kwargs: Additional options

        Returns:
            PDF file bytes
        """
        file_path = current_file.get("file_path", "unknown")
        self.logger.info(f"RTF to PDF: {file_path}")

        report_progress(on_progress, 10)
        converted = self._decode(current_file)
        report_progress(on_progress, 20)

        text = extract_rtf_text(converted.content)
        report_progress(on_progress, 40)

        pdf_bytes = self.render_pdf(text, on_progress=on_progress)
        report_progress(on_progress, 100)
        return pdf_bytes

    def extract_document_metadata(self, current_file: "CurrentFile") -> DocumentMetadata:
        """Extract the {\\info} properties of an RTF file."""
        converted = self.convert_file(current_file)
        return self.extract_metadata(
            RTFSourceInfo(content=converted.content, encoding=converted.encoding)
        )


__all__ = ["RTFHandler"]
