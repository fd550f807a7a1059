# convertfast/core/document_converter.py
"""DocumentConverter - Document Conversion Class

Main conversion class for the convertfast library.
Provides a unified interface for turning RTF documents into plain text or
into a PDF rendering of that text.

Usage Example:
    from convertfast.core.document_converter import DocumentConverter

    converter = DocumentConverter(font_size=11)

    # Plain text
    text = converter.extract_text("letter.rtf")

    # PDF with progress reporting
    result = converter.convert("letter.rtf", "pdf", on_progress=print)
    result.save("output/")
"""

import io
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union, TypedDict

from convertfast.core.functions.metadata_extractor import (
    DocumentMetadata,
    MetadataFormatter,
)
from convertfast.core.functions.page_renderer import (
    PageLayout,
    PdfPageRenderer,
    ProgressCallback,
)

logger = logging.getLogger("convertfast")


class CurrentFile(TypedDict, total=False):
    """
    TypedDict containing file information.

    Standard structure for reading files at binary level and passing to handlers.

    Attributes:
        file_path: Absolute path of the original file
        file_name: File name (including extension)
        file_extension: File extension (lowercase, without dot)
        file_data: Binary data of the file
        file_stream: BytesIO stream (reusable)
        file_size: File size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_stream: io.BytesIO
    file_size: int


class ConversionResult:
    """
    Container for a converted document.

    Attributes:
        data: Output file bytes
        mime_type: MIME type of the output
        file_name: Suggested output file name (source stem + target extension)

    Example:
        >>> result = converter.convert("notes.rtf", "pdf")
        >>> result.mime_type
        'application/pdf'
        >>> result.save("output/")
        'output/notes.pdf'
    """

    def __init__(self, data: bytes, mime_type: str, file_name: str):
        self._data = data
        self._mime_type = mime_type
        self._file_name = file_name

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def text(self) -> str:
        """Decoded text of a text/plain result."""
        if not self._mime_type.startswith("text/"):
            raise ValueError(f"Result is not text: {self._mime_type}")
        return self._data.decode("utf-8")

    def save(self, path: Optional[Union[str, Path]] = None) -> str:
        """
        Write the result to disk.

        Args:
            path: File path or directory to save (default: current directory)
                  - If path has the result's extension, uses it as the file path
                  - Otherwise, treats as directory and uses file_name

        Returns:
            Saved file path. An existing file is never overwritten; a
            numeric suffix is added instead (notes_1.pdf, notes_2.pdf, ...).
        """
        suffix = Path(self._file_name).suffix.lower()

        if path is None:
            file_path = Path.cwd() / self._file_name
        else:
            path = Path(path)
            if path.suffix.lower() == suffix:
                file_path = path
            else:
                path.mkdir(parents=True, exist_ok=True)
                file_path = path / self._file_name

        file_path.parent.mkdir(parents=True, exist_ok=True)

        if file_path.exists():
            base = file_path.stem
            parent = file_path.parent
            counter = 1
            while file_path.exists():
                file_path = parent / f"{base}_{counter}{file_path.suffix}"
                counter += 1

        file_path.write_bytes(self._data)

        logger.info(f"Saved {len(self._data)} bytes to {file_path}")
        return str(file_path)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return (
            f"ConversionResult(file_name={self._file_name!r}, "
            f"mime_type={self._mime_type!r}, size={len(self._data)})"
        )


class DocumentConverter:
    """
    convertfast Main Document Conversion Class

    Attributes:
        config: Configuration dictionary
        supported_extensions: List of supported source extensions
        target_formats: List of supported target formats

    Example:
        >>> converter = DocumentConverter()
        >>> text = converter.extract_text("document.rtf")
        >>> pdf = converter.convert("document.rtf", "pdf")
    """

    # === Supported File Type Classifications ===
    SOURCE_TYPES = frozenset(['rtf'])
    TARGET_FORMATS = {
        'txt': 'text/plain; charset=utf-8',
        'pdf': 'application/pdf',
    }

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        page_layout: Optional[PageLayout] = None,
        page_renderer: Optional[PdfPageRenderer] = None,
        page_width: Optional[float] = None,
        page_height: Optional[float] = None,
        margin: Optional[float] = None,
        line_height: Optional[float] = None,
        font: Optional[str] = None,
        font_size: Optional[float] = None,
        font_file: Optional[str] = None,
        default_encoding: Optional[str] = None,
        metadata_tag_prefix: Optional[str] = None,
        metadata_tag_suffix: Optional[str] = None,
        metadata_language: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize DocumentConverter.

        Args:
            config: Configuration dictionary (None: default settings)
            page_layout: Page geometry for PDF output
                   - Default: A4, 40pt margin, Helvetica 12pt on 16pt lines
            page_renderer: Prebuilt renderer (takes precedence over layout options)
            page_width, page_height, margin, line_height, font, font_size, font_file:
                   Overrides applied on top of page_layout
            default_encoding: Encoding for RTF that declares none
                   - Default: "cp1252"
            metadata_tag_prefix: Opening tag for metadata section
                   - Default: "<Document-Metadata>"
            metadata_tag_suffix: Closing tag for metadata section
                   - Default: "</Document-Metadata>"
            metadata_language: Label language for metadata ("en" or "ko")
            **kwargs: Additional configuration options

        Raises:
            ValueError: If the page layout is invalid

        Example:
            >>> converter = DocumentConverter(margin=72, font_size=10)
            >>> converter = DocumentConverter(
            ...     {"default_encoding": "cp1251"},
            ...     metadata_tag_prefix="<meta>",
            ...     metadata_tag_suffix="</meta>",
            ... )
        """
        self._config = config if config is not None else {}
        self._kwargs = kwargs
        self._supported_extensions: Optional[List[str]] = None

        # Logger setup
        self._logger = logging.getLogger("convertfast.converter")

        # Handler registry
        self._handler_registry: Optional[Dict[str, Any]] = None

        if default_encoding is not None:
            self._config["default_encoding"] = default_encoding

        # Create instance-specific PdfPageRenderer
        self._page_renderer = (
            page_renderer
            or self._config.get("page_renderer")
            or self._create_page_renderer(
                page_layout=page_layout or self._config.get("page_layout"),
                page_width=page_width,
                page_height=page_height,
                margin=margin,
                line_height=line_height,
                font=font,
                font_size=font_size,
                font_file=font_file,
            )
        )

        # Create instance-specific MetadataFormatter
        self._metadata_formatter = self._create_metadata_formatter(
            metadata_tag_prefix=metadata_tag_prefix or self._config.get("metadata_tag_prefix"),
            metadata_tag_suffix=metadata_tag_suffix or self._config.get("metadata_tag_suffix"),
            metadata_language=metadata_language or self._config.get("metadata_language"),
        )

        # Add collaborators to config for handlers to access
        self._config["page_renderer"] = self._page_renderer
        self._config["metadata_formatter"] = self._metadata_formatter

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def supported_extensions(self) -> List[str]:
        """List of all supported source extensions."""
        if self._supported_extensions is None:
            self._supported_extensions = sorted(self.SOURCE_TYPES)
        return self._supported_extensions.copy()

    @property
    def target_formats(self) -> List[str]:
        """List of supported target formats."""
        return sorted(self.TARGET_FORMATS)

    @property
    def config(self) -> Dict[str, Any]:
        """Current configuration."""
        return self._config

    @property
    def page_renderer(self) -> PdfPageRenderer:
        """PdfPageRenderer shared by this converter's handlers."""
        return self._page_renderer

    @property
    def page_layout(self) -> PageLayout:
        return self._page_renderer.layout

    @property
    def metadata_formatter(self) -> MetadataFormatter:
        return self._metadata_formatter

    # =========================================================================
    # Public Methods - Conversion
    # =========================================================================

    def extract_text(
        self,
        file_path: Union[str, Path],
        file_extension: Optional[str] = None,
        *,
        extract_metadata: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> str:
        """
        Extract plain text from a file.

        Args:
            file_path: File path
            file_extension: File extension (if None, auto-extracted from file_path)
            extract_metadata: Whether to prepend the document metadata block
            on_progress: Optional progress callback (0-100)
            **kwargs: Additional handler-specific options

        Returns:
            Extracted text string

        Raises:
            FileNotFoundError: If file cannot be found
            ValueError: If file format is not supported
        """
        file_path_str, ext = self._resolve_source(file_path, file_extension)

        self._logger.info(f"Extracting text from: {file_path_str} (ext={ext})")

        current_file = self._create_current_file(file_path_str, ext)
        handler = self._get_handler(ext)
        return handler.extract_text(
            current_file,
            extract_metadata=extract_metadata,
            on_progress=on_progress,
            **kwargs
        )

    def convert(
        self,
        file_path: Union[str, Path],
        target_format: str = "txt",
        *,
        file_extension: Optional[str] = None,
        extract_metadata: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> ConversionResult:
        """
        Convert a file to the target format.

        Args:
            file_path: File path
            target_format: "txt" or "pdf"
            file_extension: Source extension (if None, auto-extracted from file_path)
            extract_metadata: Prepend the metadata block (txt target only)
            on_progress: Optional progress callback (0-100)
            **kwargs: Additional handler-specific options

        Returns:
            ConversionResult

        Raises:
            FileNotFoundError: If file cannot be found
            ValueError: If source or target format is not supported
        """
        target = self._resolve_target(target_format)
        file_path_str, ext = self._resolve_source(file_path, file_extension)

        self._logger.info(f"Converting {file_path_str} to {target}")

        current_file = self._create_current_file(file_path_str, ext)
        return self._invoke_handler(
            current_file, ext, target, extract_metadata, on_progress, **kwargs
        )

    def convert_bytes(
        self,
        file_data: bytes,
        file_name: str,
        target_format: str = "txt",
        *,
        file_extension: Optional[str] = None,
        extract_metadata: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> ConversionResult:
        """
        Convert in-memory file data to the target format.

        Args:
            file_data: Binary file content
            file_name: Original file name (used for the extension and output name)
            target_format: "txt" or "pdf"
            file_extension: Source extension (if None, taken from file_name)
            extract_metadata: Prepend the metadata block (txt target only)
            on_progress: Optional progress callback (0-100)

        Returns:
            ConversionResult

        Raises:
            ValueError: If source or target format is not supported
        """
        target = self._resolve_target(target_format)
        if file_extension is None:
            file_extension = os.path.splitext(file_name)[1].lstrip('.')
        ext = self._check_extension(file_extension)

        current_file = self._create_current_file_from_bytes(file_data, file_name, ext)
        return self._invoke_handler(
            current_file, ext, target, extract_metadata, on_progress, **kwargs
        )

    def extract_metadata(
        self,
        file_path: Union[str, Path],
        file_extension: Optional[str] = None,
    ) -> DocumentMetadata:
        """
        Extract document properties without the body text.

        Raises:
            FileNotFoundError: If file cannot be found
            ValueError: If file format is not supported
        """
        file_path_str, ext = self._resolve_source(file_path, file_extension)
        current_file = self._create_current_file(file_path_str, ext)
        return self._get_handler(ext).extract_document_metadata(current_file)

    def is_supported(self, file_extension: str) -> bool:
        """
        Check if file extension is supported.

        Args:
            file_extension: File extension (with or without dot)

        Returns:
            True if supported
        """
        return file_extension.lower().lstrip('.') in self.SOURCE_TYPES

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _create_page_renderer(
        self,
        page_layout: Optional[PageLayout] = None,
        **overrides
    ) -> PdfPageRenderer:
        """
        Create a PdfPageRenderer for this DocumentConverter.

        Keyword overrides that are not None replace the matching
        PageLayout attributes.
        """
        layout = (page_layout or PageLayout()).with_overrides(**overrides)
        return PdfPageRenderer(layout)

    def _create_metadata_formatter(
        self,
        metadata_tag_prefix: Optional[str] = None,
        metadata_tag_suffix: Optional[str] = None,
        metadata_language: Optional[str] = None,
    ) -> MetadataFormatter:
        """
        Create a MetadataFormatter instance for this DocumentConverter.

        Args:
            metadata_tag_prefix: Opening tag (default: "<Document-Metadata>")
            metadata_tag_suffix: Closing tag (default: "</Document-Metadata>")
            metadata_language: Label language (default: "en")

        Returns:
            MetadataFormatter instance
        """
        kwargs = {}
        if metadata_tag_prefix is not None:
            kwargs["metadata_tag_prefix"] = metadata_tag_prefix
        if metadata_tag_suffix is not None:
            kwargs["metadata_tag_suffix"] = metadata_tag_suffix
        if metadata_language is not None:
            kwargs["language"] = metadata_language

        return MetadataFormatter(**kwargs)

    def _get_handler_registry(self) -> Dict[str, Any]:
        """Build and cache handler registry.

        All handlers are class-based, inheriting from BaseHandler.
        """
        if self._handler_registry is not None:
            return self._handler_registry

        self._handler_registry = {}

        # RTF handler
        try:
            from convertfast.core.processor.rtf_handler import RTFHandler
            rtf_handler = RTFHandler(
                config=self._config,
                page_renderer=self._page_renderer,
            )
            self._handler_registry['rtf'] = rtf_handler
        except ImportError as e:
            self._logger.warning(f"RTF handler not available: {e}")

        return self._handler_registry

    def _get_handler(self, ext: str) -> Any:
        """Get handler for file extension."""
        handler = self._get_handler_registry().get(ext)
        if handler is None:
            raise ValueError(f"No handler available for extension: {ext}")
        return handler

    def _invoke_handler(
        self,
        current_file: CurrentFile,
        ext: str,
        target: str,
        extract_metadata: bool,
        on_progress: Optional[ProgressCallback],
        **kwargs
    ) -> ConversionResult:
        """
        Run the handler for the target format and wrap its output.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            ext: Source extension
            target: Target format ("txt" or "pdf")
            extract_metadata: Whether to prepend metadata (txt only)
            on_progress: Optional progress callback
            **kwargs: Additional options

        Returns:
            ConversionResult
        """
        handler = self._get_handler(ext)

        if target == "pdf":
            data = handler.convert_to_pdf(current_file, on_progress=on_progress, **kwargs)
        else:
            text = handler.extract_text(
                current_file,
                extract_metadata=extract_metadata,
                on_progress=on_progress,
                **kwargs
            )
            # Lone surrogates can't be encoded in UTF-8
            text = text.encode('utf-8', errors='surrogatepass').decode('utf-8', errors='replace')
            data = text.encode('utf-8')

        stem = Path(current_file.get("file_name") or "document").stem or "document"
        return ConversionResult(
            data=data,
            mime_type=self.TARGET_FORMATS[target],
            file_name=f"{stem}.{target}",
        )

    def _resolve_source(
        self,
        file_path: Union[str, Path],
        file_extension: Optional[str],
    ) -> Tuple[str, str]:
        file_path_str = str(file_path)

        if not os.path.exists(file_path_str):
            raise FileNotFoundError(f"File not found: {file_path_str}")

        if file_extension is None:
            file_extension = os.path.splitext(file_path_str)[1].lstrip('.')

        return file_path_str, self._check_extension(file_extension)

    def _check_extension(self, file_extension: str) -> str:
        ext = file_extension.lower().lstrip('.')
        if not self.is_supported(ext):
            raise ValueError(f"Unsupported file format: {ext}")
        return ext

    def _resolve_target(self, target_format: str) -> str:
        target = target_format.lower().lstrip('.')
        if target not in self.TARGET_FORMATS:
            raise ValueError(
                f"Unsupported target format: {target_format} "
                f"(expected one of {', '.join(self.target_formats)})"
            )
        return target

    def _create_current_file(self, file_path: str, ext: str) -> CurrentFile:
        """
        Create a CurrentFile dict from a file path.

        Reads the file at binary level to avoid path encoding issues
        (e.g., non-ASCII characters in Windows paths).

        Args:
            file_path: Path to the file
            ext: File extension (lowercase, without dot)

        Returns:
            CurrentFile dict containing file info and binary data
        """
        file_path = os.path.abspath(file_path)

        with open(file_path, 'rb') as f:
            file_data = f.read()

        current_file = self._create_current_file_from_bytes(
            file_data, os.path.basename(file_path), ext
        )
        current_file["file_path"] = file_path
        return current_file

    def _create_current_file_from_bytes(
        self,
        file_data: bytes,
        file_name: str,
        ext: str,
    ) -> CurrentFile:
        return {
            "file_path": file_name,
            "file_name": file_name,
            "file_extension": ext,
            "file_data": file_data,
            "file_stream": io.BytesIO(file_data),
            "file_size": len(file_data),
        }

    # =========================================================================
    # Context Manager Support
    # =========================================================================

    def __enter__(self) -> "DocumentConverter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self._handler_registry = None

    # =========================================================================
    # String Representation
    # =========================================================================

    def __repr__(self) -> str:
        return (
            f"DocumentConverter(supported_extensions={self.supported_extensions}, "
            f"target_formats={self.target_formats})"
        )

    def __str__(self) -> str:
        return f"convertfast DocumentConverter ({len(self.supported_extensions)} supported formats)"


# === Module-level Convenience Functions ===

def create_converter(
    config: Optional[Dict[str, Any]] = None,
    *,
    page_layout: Optional[PageLayout] = None,
    default_encoding: Optional[str] = None,
    **kwargs
) -> DocumentConverter:
    """
    Create a DocumentConverter instance.

    Args:
        config: Configuration dictionary
        page_layout: Page geometry for PDF output
        default_encoding: Encoding for RTF that declares none
        **kwargs: Additional DocumentConverter options

    Returns:
        DocumentConverter instance

    Example:
        >>> converter = create_converter()
        >>> converter = create_converter(page_layout=PageLayout(margin=72))
    """
    return DocumentConverter(
        config=config,
        page_layout=page_layout,
        default_encoding=default_encoding,
        **kwargs
    )


__all__ = [
    "ConversionResult",
    "CurrentFile",
    "DocumentConverter",
    "create_converter",
]
