# xgen_doc2docx/core/functions/file_converter.py
"""
BaseFileConverter - Abstract base class for source file conversion

Defines the interface for turning the raw bytes of a source file (PDF,
image, text) into whatever the matching DOCX producer consumes: extracted
text, decoded image dimensions, and so on.

This is the FIRST step in the build pipeline:
    Source Bytes -> FileConverter -> Producer Input -> Producer -> DOCX Bytes

Usage:
    class PDFFileConverter(BaseFileConverter):
        def convert(self, file_data: bytes, file_stream=None, **kwargs) -> Any:
            import fitz
            return fitz.open(stream=file_data, filetype="pdf")

        def get_format_name(self) -> str:
            return "PDF Document"
"""
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, List, Optional


class BaseFileConverter(ABC):
    """
    Abstract base class for source file converters.

    Subclasses must implement:
    - convert(): Convert binary data to the producer's input
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
            file_stream: Optional file stream for libraries that prefer streams
            **kwargs: Additional format-specific options

        Returns:
            Format-specific object

        Raises:
            PreconditionError: If the data cannot be converted
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable format name."""
        pass

    def validate(self, file_data: bytes) -> bool:
        """
        Check whether the data looks convertible by this converter.

        Default implementation returns True.
        """
        return True

    def close(self, converted_object: Any) -> None:
        """Release the converted object if it holds resources."""
        pass


class TextFileConverter(BaseFileConverter):
    """
    Converter for plain text sources.

    Decodes binary data to a string, trying a list of encodings in order.
    """

    DEFAULT_ENCODINGS = ['utf-8', 'utf-8-sig', 'cp949', 'euc-kr', 'latin-1']

    def __init__(self, encodings: Optional[List[str]] = None):
        self._encodings = encodings or self.DEFAULT_ENCODINGS
        self._detected_encoding: Optional[str] = None

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        encoding: Optional[str] = None,
        **kwargs
    ) -> str:
        """
        Decode binary data to text.

        Args:
            file_data: Raw binary file data
            file_stream: Ignored
            encoding: Encoding to try first (None for auto-detect)

        Returns:
            Decoded text
        """
        candidates = [encoding] + list(self._encodings) if encoding else self._encodings
        for enc in candidates:
            try:
                result = file_data.decode(enc)
            except UnicodeDecodeError:
                continue
            self._detected_encoding = enc
            return result.lstrip('\ufeff')

        self._detected_encoding = 'utf-8'
        return file_data.decode('utf-8', errors='replace')

    def get_format_name(self) -> str:
        if self._detected_encoding:
            return f"Text ({self._detected_encoding})"
        return "Text"

    @property
    def detected_encoding(self) -> Optional[str]:
        """Encoding detected during the last conversion."""
        return self._detected_encoding


__all__ = [
    "BaseFileConverter",
    "TextFileConverter",
]
