# xgen_doc2docx/core/document_builder.py
"""DocxBuilder - DOCX Building Class

Main entry point of the xgen_doc2docx library. Builds Word documents from
plain text, from a single image, or from the text of a PDF, without any
archive or document-model library on the write path.

Usage Example:
    from xgen_doc2docx import DocxBuilder

    builder = DocxBuilder()

    # Plain text -> one paragraph per non-blank line
    result = builder.text_to_docx("Hello\\n\\nWorld")
    result.save("output/hello.docx")

    # Image file -> one inline picture
    result = builder.image_file_to_docx("photo.png")

    # PDF file -> page text with "--- Page N ---" markers
    result = builder.pdf_to_docx("report.pdf")
    result.save("output/")  # writes output/report.docx
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypedDict, Union

from xgen_doc2docx.core.functions.page_tag_processor import PageTagProcessor
from xgen_doc2docx.core.functions.zip_writer import ArchiveConfig, ZipArchiveBuilder
from xgen_doc2docx.core.processor.docx_helper.docx_constants import DOCX_MIME_TYPE
from xgen_doc2docx.core.processor.docx_helper.docx_drawing import ImagePlacementConfig
from xgen_doc2docx.core.processor.image_producer import ImageDocxProducer
from xgen_doc2docx.core.processor.pdf_helpers.pdf_text_extractor import PDFTextExtractor
from xgen_doc2docx.core.processor.text_producer import TextDocxProducer

logger = logging.getLogger("xgen_doc2docx")


class CurrentFile(TypedDict, total=False):
    """
    TypedDict containing source file information.

    Attributes:
        file_path: Absolute path of the original file
        file_name: File name (including extension)
        file_extension: File extension (lowercase, without dot)
        file_data: Binary data of the file
        file_size: File size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_size: int


class DocxResult:
    """
    A built DOCX document.

    Attributes:
        data: DOCX file bytes
        mime_type: Always the WordprocessingML document MIME type
        source_file: Original source file path (if available)

    Example:
        >>> result = builder.pdf_to_docx("report.pdf")
        >>> result.suggested_filename
        'report.docx'
        >>> result.save("output/")
    """

    def __init__(self, data: bytes, source_file: Optional[str] = None):
        self._data = data
        self._source_file = source_file

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def mime_type(self) -> str:
        return DOCX_MIME_TYPE

    @property
    def source_file(self) -> Optional[str]:
        return self._source_file

    @property
    def suggested_filename(self) -> str:
        """Source file stem with a .docx suffix, or document.docx."""
        if self._source_file:
            return f"{Path(self._source_file).stem}.docx"
        return "document.docx"

    def save(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        filename: Optional[str] = None,
        overwrite: bool = False,
    ) -> str:
        """
        Write the document to disk.

        Args:
            path: File path or directory (default: current directory)
                  - If path ends with .docx, uses it as the file path
                  - Otherwise, treats it as a directory and uses filename
            filename: Filename to use when path is a directory
                  (default: suggested_filename)
            overwrite: Replace an existing file instead of adding a
                  _1, _2, ... suffix

        Returns:
            Saved file path
        """
        filename = filename or self.suggested_filename
        if path is None:
            file_path = Path.cwd() / filename
        else:
            path = Path(path)
            if path.suffix.lower() == ".docx":
                file_path = path
            else:
                path.mkdir(parents=True, exist_ok=True)
                file_path = path / filename

        file_path.parent.mkdir(parents=True, exist_ok=True)

        if file_path.exists() and not overwrite:
            base = file_path.stem
            suffix = file_path.suffix
            parent = file_path.parent
            counter = 1
            while file_path.exists():
                file_path = parent / f"{base}_{counter}{suffix}"
                counter += 1

        file_path.write_bytes(self._data)
        logger.info(f"Saved DOCX ({len(self._data)} bytes) to {file_path}")
        return str(file_path)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"DocxResult(size={len(self._data)}, source_file={self._source_file!r})"


class DocxBuilder:
    """
    xgen_doc2docx Main DOCX Building Class

    Args:
        config: Configuration dictionary (None: defaults)
        timestamp: Fixed modification time for ZIP entries. With a fixed
            timestamp identical inputs give byte-identical output.
        max_width_emu: Widest image placement (default: 5486400, 6 inches)
        emu_per_pixel: Pixel-to-EMU multiplier (default: 9144)
        page_tag_prefix: PDF page marker prefix (default: "--- Page ")
        page_tag_suffix: PDF page marker suffix (default: " ---")

    Example:
        >>> builder = DocxBuilder(timestamp=datetime(2024, 1, 1))
        >>> result = builder.text_to_docx("A & B < C")
    """

    PDF_TYPES = frozenset(['pdf'])
    IMAGE_TYPES = frozenset(['jpg', 'jpeg', 'png', 'webp', 'gif', 'bmp'])
    TEXT_TYPES = frozenset(['txt', 'md', 'markdown'])

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        timestamp: Optional[datetime] = None,
        max_width_emu: Optional[int] = None,
        emu_per_pixel: Optional[int] = None,
        page_tag_prefix: Optional[str] = None,
        page_tag_suffix: Optional[str] = None,
    ):
        self._config = dict(config) if config else {}
        self._logger = logging.getLogger("xgen_doc2docx.builder")

        timestamp = timestamp if timestamp is not None else self._config.get("timestamp")
        self._archive_builder = ZipArchiveBuilder(config=ArchiveConfig(timestamp=timestamp))

        placement_defaults = ImagePlacementConfig()
        self._placement_config = ImagePlacementConfig(
            max_width_emu=self._pick("max_width_emu", max_width_emu, placement_defaults.max_width_emu),
            emu_per_pixel=self._pick("emu_per_pixel", emu_per_pixel, placement_defaults.emu_per_pixel),
        )

        self._page_tag_processor = PageTagProcessor(
            tag_prefix=self._pick("page_tag_prefix", page_tag_prefix, None),
            tag_suffix=self._pick("page_tag_suffix", page_tag_suffix, None),
        )

        # Shared with producers
        self._config["archive_builder"] = self._archive_builder
        self._config["image_placement"] = self._placement_config

        self._text_producer = TextDocxProducer(config=self._config)
        self._image_producer = ImageDocxProducer(config=self._config)
        self._pdf_text_extractor = PDFTextExtractor(page_tag_processor=self._page_tag_processor)

        self._handler_registry: Optional[Dict[str, Callable[[CurrentFile], DocxResult]]] = None

    def _pick(self, key: str, explicit: Any, default: Any) -> Any:
        if explicit is not None:
            return explicit
        return self._config.get(key, default)

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> Dict[str, Any]:
        """Current configuration."""
        return self._config

    @property
    def supported_extensions(self) -> List[str]:
        """List of file extensions accepted by convert()."""
        return sorted(self.PDF_TYPES | self.IMAGE_TYPES | self.TEXT_TYPES)

    @property
    def placement_config(self) -> ImagePlacementConfig:
        return self._placement_config

    @property
    def page_tag_processor(self) -> PageTagProcessor:
        return self._page_tag_processor

    # =========================================================================
    # Conversions
    # =========================================================================

    def text_to_docx(self, text: Optional[str], source_file: Optional[str] = None) -> DocxResult:
        """
        Build a DOCX with one paragraph per non-blank line of text.

        Args:
            text: Plain text (empty text gives an empty document)
            source_file: Source path, used for the suggested filename

        Returns:
            DocxResult
        """
        return DocxResult(self._text_producer.produce(text), source_file=source_file)

    def image_to_docx(
        self,
        image_data: bytes,
        extension: Optional[str],
        pixel_width: Optional[int] = None,
        pixel_height: Optional[int] = None,
        source_file: Optional[str] = None,
    ) -> DocxResult:
        """
        Build a DOCX containing one inline image.

        Args:
            image_data: Encoded image bytes (embedded unchanged)
            extension: File extension ("png"; anything else is stored as jpeg)
            pixel_width: Decoded width; decoded with Pillow when both are omitted
            pixel_height: Decoded height
            source_file: Source path, used for the suggested filename

        Returns:
            DocxResult

        Raises:
            PreconditionError: If the image cannot be decoded or a dimension is missing
        """
        if pixel_width is None and pixel_height is None:
            data = self._image_producer.produce_from_bytes(image_data, extension)
        else:
            data = self._image_producer.produce(image_data, extension, pixel_width, pixel_height)
        return DocxResult(data, source_file=source_file)

    def pdf_bytes_to_docx(self, pdf_data: bytes, source_file: Optional[str] = None) -> DocxResult:
        """Build a DOCX from the page text of PDF bytes."""
        text = self._pdf_text_extractor.extract(pdf_data)
        return self.text_to_docx(text, source_file=source_file)

    def image_file_to_docx(self, file_path: Union[str, Path]) -> DocxResult:
        """Build a DOCX from an image file; the extension comes from its name."""
        current_file = self._create_current_file(file_path)
        return self._convert_image(current_file)

    def pdf_to_docx(self, file_path: Union[str, Path]) -> DocxResult:
        """Build a DOCX from the text of a PDF file."""
        current_file = self._create_current_file(file_path)
        return self._convert_pdf(current_file)

    def convert(self, file_path: Union[str, Path]) -> DocxResult:
        """
        Build a DOCX from a file, dispatching on its extension.

        Args:
            file_path: PDF, image or text file

        Returns:
            DocxResult

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not supported
        """
        current_file = self._create_current_file(file_path)
        ext = current_file["file_extension"]

        handler = self._get_handler_registry().get(ext)
        if handler is None:
            raise ValueError(f"Unsupported file format: {ext}")

        self._logger.info(f"Converting {current_file['file_name']} ({ext}) to DOCX")
        try:
            return handler(current_file)
        except Exception as e:
            self._logger.error(f"Error converting {current_file['file_path']}: {e}")
            raise

    # =========================================================================
    # Internals
    # =========================================================================

    def _get_handler_registry(self) -> Dict[str, Callable[[CurrentFile], DocxResult]]:
        if self._handler_registry is None:
            registry: Dict[str, Callable[[CurrentFile], DocxResult]] = {}
            for ext in self.PDF_TYPES:
                registry[ext] = self._convert_pdf
            for ext in self.IMAGE_TYPES:
                registry[ext] = self._convert_image
            for ext in self.TEXT_TYPES:
                registry[ext] = self._convert_text
            self._handler_registry = registry
        return self._handler_registry

    def _convert_pdf(self, current_file: CurrentFile) -> DocxResult:
        return self.pdf_bytes_to_docx(current_file["file_data"], source_file=current_file["file_path"])

    def _convert_image(self, current_file: CurrentFile) -> DocxResult:
        return self.image_to_docx(
            current_file["file_data"],
            current_file["file_extension"],
            source_file=current_file["file_path"],
        )

    def _convert_text(self, current_file: CurrentFile) -> DocxResult:
        data = self._text_producer.produce_from_bytes(current_file["file_data"])
        return DocxResult(data, source_file=current_file["file_path"])

    @staticmethod
    def _create_current_file(file_path: Union[str, Path]) -> CurrentFile:
        """Read a file into a CurrentFile dict."""
        file_path_str = os.path.abspath(str(file_path))
        if not os.path.isfile(file_path_str):
            raise FileNotFoundError(f"File not found: {file_path_str}")

        with open(file_path_str, "rb") as f:
            file_data = f.read()

        file_name = os.path.basename(file_path_str)
        return CurrentFile(
            file_path=file_path_str,
            file_name=file_name,
            file_extension=os.path.splitext(file_name)[1].lower().lstrip("."),
            file_data=file_data,
            file_size=len(file_data),
        )

    def __repr__(self) -> str:
        return f"DocxBuilder(timestamp={self._archive_builder.config.timestamp!r})"


__all__ = [
    "CurrentFile",
    "DocxResult",
    "DocxBuilder",
]
