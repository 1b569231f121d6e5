# xgen_doc2docx/core/processor/base_producer.py
"""
BaseProducer - Abstract base class for DOCX producers

A producer assembles the named parts of one OOXML package from its input
and hands them to the ZIP writer. Producers know nothing about ZIP
mechanics; the ZIP writer knows nothing about what the parts mean.

Each producer should override:
- build_package(): Assemble the DocumentPackage for the input
- _create_file_converter(): Provide the converter for source files (optional)

Build Pipeline:
    1. file_converter.convert() - Source bytes -> producer input (optional)
    2. build_package() - Producer input -> DocumentPackage
    3. archive_builder.build() - DocumentPackage -> DOCX bytes

Usage Example:
    class TextDocxProducer(BaseProducer):
        def build_package(self, text: str) -> DocumentPackage:
            package = DocumentPackage()
            ...
            return package
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from xgen_doc2docx.core.functions.file_converter import BaseFileConverter
from xgen_doc2docx.core.functions.zip_writer import ZipArchiveBuilder
from xgen_doc2docx.core.processor.docx_helper.docx_package import DocumentPackage


class BaseProducer(ABC):
    """
    Abstract base class for DOCX producers.

    Attributes:
        config: Configuration dictionary passed from DocxBuilder
        archive_builder: ZipArchiveBuilder used to serialize packages
        file_converter: Source file converter (lazy-initialized, may be None)
        logger: Logging instance
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        archive_builder: Optional[ZipArchiveBuilder] = None,
        timestamp: Optional[datetime] = None,
    ):
        """
        Initialize BaseProducer.

        Args:
            config: Configuration dictionary (passed from DocxBuilder)
            archive_builder: ZipArchiveBuilder instance (passed from DocxBuilder)
            timestamp: Fixed ZIP entry timestamp, used when no archive_builder is given
        """
        self._config = config or {}
        self._archive_builder = archive_builder or self._get_archive_builder_from_config(timestamp)
        self._file_converter: Optional[BaseFileConverter] = None
        self._logger = logging.getLogger(f"xgen_doc2docx.{self.__class__.__name__}")

    def _get_archive_builder_from_config(self, timestamp: Optional[datetime]) -> ZipArchiveBuilder:
        """Get ZipArchiveBuilder from config or create one."""
        if "archive_builder" in self._config:
            return self._config["archive_builder"]
        return ZipArchiveBuilder(timestamp=timestamp)

    def _create_file_converter(self) -> Optional[BaseFileConverter]:
        """
        Create the source file converter.

        Override this method in producers that read source files.

        Returns:
            BaseFileConverter subclass instance, or None
        """
        return None

    @property
    def config(self) -> Dict[str, Any]:
        """Configuration dictionary."""
        return self._config

    @property
    def archive_builder(self) -> ZipArchiveBuilder:
        """ZipArchiveBuilder instance."""
        return self._archive_builder

    @property
    def file_converter(self) -> Optional[BaseFileConverter]:
        """Source file converter (lazy-initialized)."""
        if self._file_converter is None:
            self._file_converter = self._create_file_converter()
        return self._file_converter

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    @abstractmethod
    def build_package(self, *args, **kwargs) -> DocumentPackage:
        """
        Assemble the package parts for the producer input.

        Returns:
            DocumentPackage with every part in archive order
        """
        pass

    def produce(self, *args, **kwargs) -> bytes:
        """
        Build the package and serialize it as DOCX bytes.

        Arguments are forwarded to build_package().

        Returns:
            DOCX file bytes
        """
        package = self.build_package(*args, **kwargs)
        data = self._archive_builder.build(package.to_entries())
        self._logger.debug(f"Produced DOCX: {len(package)} parts, {len(data)} bytes")
        return data


__all__ = [
    "BaseProducer",
]
