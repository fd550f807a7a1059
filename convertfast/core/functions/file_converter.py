# convertfast/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for file format conversion

Defines the interface for converting binary file data to a workable format.
Each handler provides a format-specific converter.

This is the FIRST step in the processing pipeline:
    Binary Data -> FileConverter -> Workable Object -> Handler Processing

Usage:
    class RTFFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, file_stream: BinaryIO) -> Any:
            return RTFConvertedData(content=decode_content(file_data))

        def get_format_name(self) -> str:
            return "RTF Document"
"""
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Optional


class BaseFileConverter(ABC):
    """
    Abstract base class for file format converters.

    Converts raw binary file data into a format-specific workable object.

    Subclasses must implement:
    - convert(): Convert binary data to workable format
    - get_format_name(): Return human-readable format name
    """

    @abstractmethod
    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        **kwargs
    ) -> Any:
        """
        Convert binary file data to a workable format.

        Args:
            file_data: Raw binary file data
            file_stream: Optional file stream (BytesIO) for libraries that prefer streams
            **kwargs: Additional format-specific options

        Returns:
            Format-specific object
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """
        Return human-readable format name.

        Returns:
            Format name string (e.g., "RTF Document")
        """
        pass

    def validate(self, file_data: bytes) -> bool:
        """
        Validate if the file data can be converted by this converter.

        Default implementation returns True.
        """
        return True


__all__ = [
    "BaseFileConverter",
]
