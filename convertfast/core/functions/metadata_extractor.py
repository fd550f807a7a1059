# convertfast/core/functions/metadata_extractor.py
"""
Metadata Extractor Interface

Provides the abstract base class and shared formatting for document metadata.

This module defines:
- DocumentMetadata: Standardized metadata container dataclass
- MetadataField: Enum for standard metadata field names
- BaseMetadataExtractor: Abstract base class for metadata extractors
- MetadataFormatter: Shared formatter for consistent metadata output

Usage Example:
    from convertfast.core.functions.metadata_extractor import (
        BaseMetadataExtractor,
        DocumentMetadata,
    )

    class RTFMetadataExtractor(BaseMetadataExtractor):
        def extract(self, source: Any) -> DocumentMetadata:
            ...
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger("convertfast.metadata")


class MetadataField(str, Enum):
    """Standard metadata field names."""
    TITLE = "title"
    SUBJECT = "subject"
    AUTHOR = "author"
    KEYWORDS = "keywords"
    COMMENTS = "comments"
    LAST_SAVED_BY = "last_saved_by"
    CREATE_TIME = "create_time"
    LAST_SAVED_TIME = "last_saved_time"


_STANDARD_FIELDS = frozenset(f.value for f in MetadataField)


@dataclass
class DocumentMetadata:
    """
    Standardized metadata container.

    Attributes:
        title: Document title
        subject: Document subject
        author: Document author/creator
        keywords: Document keywords
        comments: Document comments/description
        last_saved_by: Last person who saved the document
        create_time: Document creation timestamp
        last_saved_time: Last modification timestamp
        custom: Dictionary for format-specific additional fields
    """
    title: Optional[str] = None
    subject: Optional[str] = None
    author: Optional[str] = None
    keywords: Optional[str] = None
    comments: Optional[str] = None
    last_saved_by: Optional[str] = None
    create_time: Optional[datetime] = None
    last_saved_time: Optional[datetime] = None
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert metadata to dictionary.

        Returns:
            Dictionary containing all non-empty metadata fields.
        """
        result = {}
        for metadata_field in MetadataField:
            value = getattr(self, metadata_field.value)
            if value:
                result[metadata_field.value] = value

        result.update(self.custom)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentMetadata":
        """
        Create DocumentMetadata from dictionary.

        Standard fields are extracted into their respective attributes,
        while non-standard fields go into the custom dictionary.
        """
        custom = {k: v for k, v in data.items() if k not in _STANDARD_FIELDS}
        standard = {k: data.get(k) for k in _STANDARD_FIELDS}
        return cls(custom=custom, **standard)

    def is_empty(self) -> bool:
        """Check if no metadata field is set."""
        return not self.to_dict()

    def __bool__(self) -> bool:
        return not self.is_empty()


class MetadataFormatter:
    """
    Shared formatter for consistent metadata output.

    Example:
        >>> formatter = MetadataFormatter()
        >>> print(formatter.format(metadata))
        <Document-Metadata>
          Title: Annual Report
          Author: John Doe
        </Document-Metadata>
    """

    LABELS_EN = {
        MetadataField.TITLE.value: "Title",
        MetadataField.SUBJECT.value: "Subject",
        MetadataField.AUTHOR.value: "Author",
        MetadataField.KEYWORDS.value: "Keywords",
        MetadataField.COMMENTS.value: "Comments",
        MetadataField.LAST_SAVED_BY.value: "Last Saved By",
        MetadataField.CREATE_TIME.value: "Created",
        MetadataField.LAST_SAVED_TIME.value: "Last Modified",
    }

    LABELS_KO = {
        MetadataField.TITLE.value: "제목",
        MetadataField.SUBJECT.value: "주제",
        MetadataField.AUTHOR.value: "작성자",
        MetadataField.KEYWORDS.value: "키워드",
        MetadataField.COMMENTS.value: "설명",
        MetadataField.LAST_SAVED_BY.value: "마지막 수정자",
        MetadataField.CREATE_TIME.value: "작성일",
        MetadataField.LAST_SAVED_TIME.value: "수정일",
    }

    FIELD_ORDER = [f.value for f in MetadataField]

    def __init__(
        self,
        metadata_tag_prefix: str = "<Document-Metadata>",
        metadata_tag_suffix: str = "</Document-Metadata>",
        date_format: str = "%Y-%m-%d %H:%M:%S",
        language: str = "en",
        indent: str = "  ",
    ):
        """
        Initialize MetadataFormatter.

        Args:
            metadata_tag_prefix: Opening tag for metadata section
            metadata_tag_suffix: Closing tag for metadata section
            date_format: strftime format for datetime values
            language: Output language ('en' or 'ko')
            indent: Indentation string for each field
        """
        self.metadata_tag_prefix = metadata_tag_prefix
        self.metadata_tag_suffix = metadata_tag_suffix
        self.date_format = date_format
        self.language = language
        self.indent = indent
        self.field_labels = self.LABELS_KO if language == "ko" else self.LABELS_EN

    def format(self, metadata: DocumentMetadata) -> str:
        """
        Format DocumentMetadata as a string.

        Returns:
            Formatted metadata block, or empty string if metadata is empty.
        """
        if not metadata:
            return ""

        data = metadata.to_dict()
        lines = [self.metadata_tag_prefix]

        for field_name in self.FIELD_ORDER:
            if field_name in data:
                lines.append(self._format_field(field_name, data.pop(field_name)))

        # Remaining custom fields
        for field_name, value in data.items():
            lines.append(self._format_field(field_name, value))

        lines.append(self.metadata_tag_suffix)
        return "\n".join(lines)

    def _format_field(self, field_name: str, value: Any) -> str:
        if isinstance(value, datetime):
            value = value.strftime(self.date_format)
        return f"{self.indent}{self.get_label(field_name)}: {value}"

    def get_label(self, field_name: str) -> str:
        """Display label for a field name."""
        return self.field_labels.get(field_name, field_name.replace("_", " ").title())


class BaseMetadataExtractor(ABC):
    """
    Abstract base class for metadata extractors.

    Subclasses must implement:
        - extract(): Extract metadata from format-specific source object

    Attributes:
        formatter: MetadataFormatter instance for output formatting
        logger: Logger instance for this extractor
    """

    def __init__(
        self,
        formatter: Optional[MetadataFormatter] = None,
        language: str = "en",
    ):
        """
        Initialize BaseMetadataExtractor.

        Args:
            formatter: Custom MetadataFormatter instance (optional)
            language: Language for the default formatter
        """
        self._formatter = formatter or MetadataFormatter(language=language)
        self._logger = logging.getLogger(
            f"convertfast.metadata.{self.__class__.__name__}"
        )

    @property
    def formatter(self) -> MetadataFormatter:
        return self._formatter

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def extract(self, source: Any) -> DocumentMetadata:
        """
        Extract metadata from source object.

        Args:
            source: Format-specific source object

        Returns:
            DocumentMetadata instance containing extracted metadata.
        """
        pass

    def format(self, metadata: DocumentMetadata) -> str:
        """Format metadata as a string."""
        return self._formatter.format(metadata)

    def extract_and_format(self, source: Any) -> str:
        """
        Extract metadata and format as string in one step.

        Extraction failures are logged and produce an empty string.
        """
        try:
            metadata = self.extract(source)
            return self.format(metadata)
        except Exception as e:
            self._logger.warning(f"Failed to extract metadata: {e}")
            return ""


__all__ = [
    "MetadataField",
    "DocumentMetadata",
    "MetadataFormatter",
    "BaseMetadataExtractor",
]
