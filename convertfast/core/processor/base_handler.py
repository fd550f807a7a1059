# convertfast/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for document conversion handlers

Defines the base interface for all document handlers.
Manages config, the page renderer, and the format-specific file converter
and metadata extractor. Collaborators are passed from DocumentConverter
through the config dict so one instance is shared by every handler.

Each handler must override:
- _create_file_converter(): Provide format-specific file converter
- _create_metadata_extractor(): Provide format-specific metadata extractor

Processing Pipeline:
    1. file_converter.convert() - Binary -> Format-specific object (e.g., bytes -> decoded RTF)
    2. metadata_extractor.extract() - Extract document metadata (optional)
    3. Format-specific text extraction
    4. page_renderer.render() - Plain text -> PDF (PDF target only)
"""
import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

from convertfast.core.functions.file_converter import BaseFileConverter
from convertfast.core.functions.metadata_extractor import (
    BaseMetadataExtractor,
    DocumentMetadata,
    MetadataFormatter,
)
from convertfast.core.functions.page_renderer import (
    PageLayout,
    PdfPageRenderer,
    ProgressCallback,
)

if TYPE_CHECKING:
    from convertfast.core.document_converter import CurrentFile


class BaseHandler(ABC):
    """
    Abstract base class for document handlers.

    Attributes:
        config: Configuration dictionary passed from DocumentConverter
        page_renderer: Shared PdfPageRenderer (from config or built from page_layout)
        metadata_formatter: Shared MetadataFormatter (from config or default)
        metadata_extractor: Format-specific metadata extractor (lazy-initialized)
        file_converter: Format-specific file converter (lazy-initialized)
        logger: Logging instance
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        page_renderer: Optional[PdfPageRenderer] = None,
    ):
        """
        Initialize BaseHandler.

        Args:
            config: Configuration dictionary (passed from DocumentConverter)
            page_renderer: PdfPageRenderer instance (passed from DocumentConverter)
        """
        self._config = config or {}
        self._page_renderer = page_renderer or self._get_page_renderer_from_config()
        self._metadata_formatter = self._get_metadata_formatter_from_config()
        self._metadata_extractor: Optional[BaseMetadataExtractor] = None
        self._file_converter: Optional[BaseFileConverter] = None
        self._logger = logging.getLogger(f"convertfast.handler.{self.__class__.__name__}")

    def _get_page_renderer_from_config(self) -> PdfPageRenderer:
        """Get PdfPageRenderer from config or create one from page_layout."""
        if "page_renderer" in self._config:
            return self._config["page_renderer"]
        layout = self._config.get("page_layout") or PageLayout()
        return PdfPageRenderer(layout)

    def _get_metadata_formatter_from_config(self) -> MetadataFormatter:
        """Get MetadataFormatter from config or create default."""
        if "metadata_formatter" in self._config:
            return self._config["metadata_formatter"]
        return MetadataFormatter()

    @abstractmethod
    def _create_file_converter(self) -> BaseFileConverter:
        """
        Create format-specific file converter.

        The file converter transforms raw binary data into a workable
        format-specific object.
        """
        pass

    @abstractmethod
    def _create_metadata_extractor(self) -> BaseMetadataExtractor:
        """Create format-specific metadata extractor."""
        pass

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def page_renderer(self) -> PdfPageRenderer:
        return self._page_renderer

    @property
    def metadata_formatter(self) -> MetadataFormatter:
        return self._metadata_formatter

    @property
    def metadata_extractor(self) -> BaseMetadataExtractor:
        """Format-specific metadata extractor (lazy-initialized)."""
        if self._metadata_extractor is None:
            self._metadata_extractor = self._create_metadata_extractor()
        return self._metadata_extractor

    @property
    def file_converter(self) -> BaseFileConverter:
        """Format-specific file converter (lazy-initialized)."""
        if self._file_converter is None:
            self._file_converter = self._create_file_converter()
        return self._file_converter

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def extract_text(
        self,
        current_file: "CurrentFile",
        extract_metadata: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> str:
        """
        Extract text from file.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            extract_metadata: Whether to prepend a metadata block
            on_progress: Optional progress callback (0-100)
            **kwargs: Additional options

        Returns:
            Extracted text
        """
        pass

    @abstractmethod
    def convert_to_pdf(
        self,
        current_file: "CurrentFile",
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> bytes:
        """
        Convert file to a PDF of its plain text.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            on_progress: Optional progress callback (0-100)
            **kwargs: Additional options

        Returns:
            PDF file bytes
        """
        pass

    def convert_file(self, current_file: "CurrentFile", **kwargs) -> Any:
        """
        Convert binary file data to workable format.

        Convenience method that wraps self.file_converter.convert().
        """
        file_data = current_file.get("file_data", b"")
        file_stream = self.get_file_stream(current_file)
        return self.file_converter.convert(file_data, file_stream, **kwargs)

    def extract_metadata(self, source: Any) -> DocumentMetadata:
        """Extract metadata from source using format-specific extractor."""
        return self.metadata_extractor.extract(source)

    def extract_and_format_metadata(self, source: Any) -> str:
        """Extract and format metadata in one step."""
        return self.metadata_extractor.extract_and_format(source)

    def render_pdf(self, text: str, on_progress: Optional[ProgressCallback] = None) -> bytes:
        """Render plain text with the shared page renderer."""
        return self._page_renderer.render(text, on_progress=on_progress)

    def get_file_stream(self, current_file: "CurrentFile") -> io.BytesIO:
        """
        Get a fresh BytesIO stream from current_file.

        Resets the stream position to the beginning for reuse.
        """
        stream = current_file.get("file_stream")
        if stream is not None:
            stream.seek(0)
            return stream
        return io.BytesIO(current_file.get("file_data", b""))


def report_progress(on_progress: Optional[ProgressCallback], value: int) -> None:
    """Call the progress callback if one was given."""
    if on_progress:
        on_progress(value)


__all__ = [
    "BaseHandler",
    "report_progress",
]
