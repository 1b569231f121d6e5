# xgen_doc2docx/core/processor/docx_helper/docx_package.py
"""
DOCX package assembly

Builds the fixed XML parts of an OOXML package ([Content_Types].xml, the
package and document relationship parts, the document part wrapper) and
collects them, together with binary media, into an ordered DocumentPackage
that the ZIP writer serializes.

DocumentPackage.validate() checks that the required parts are present and
that every relationship target resolves to a part with the exact
(case-sensitive) name.
"""
import logging
import posixpath
from typing import Dict, List, Optional, Sequence, Tuple, Union

from xgen_doc2docx.core.functions.errors import ArchiveConstructionError, PreconditionError
from xgen_doc2docx.core.processor.docx_helper.docx_constants import (
    CONTENT_TYPES_PART,
    DOCUMENT_MAIN_CONTENT_TYPE,
    DOCUMENT_PART,
    NAMESPACES,
    OFFICE_DOCUMENT_REL_TYPE,
    PACKAGE_RELS_PART,
    RELATIONSHIPS_CONTENT_TYPE,
    XML_CONTENT_TYPE,
    ImageType,
    Relationship,
)

logger = logging.getLogger("xgen_doc2docx.docx.package")

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def build_content_types_xml(image_type: Optional[ImageType] = None) -> str:
    """
    Build [Content_Types].xml.

    Args:
        image_type: Image media type to declare as a Default extension
            mapping, or None for text-only packages

    Returns:
        Content types XML
    """
    defaults = [
        ('rels', RELATIONSHIPS_CONTENT_TYPE),
        ('xml', XML_CONTENT_TYPE),
    ]
    if image_type is not None:
        defaults.append((image_type.extension, image_type.mime_type))

    lines = [XML_DECLARATION, f'<Types xmlns="{NAMESPACES["ct"]}">']
    for extension, content_type in defaults:
        lines.append(f'  <Default Extension="{extension}" ContentType="{content_type}"/>')
    lines.append(f'  <Override PartName="/{DOCUMENT_PART}" ContentType="{DOCUMENT_MAIN_CONTENT_TYPE}"/>')
    lines.append('</Types>')
    return '\n'.join(lines)


def build_relationships_xml(relationships: Sequence[Relationship] = ()) -> str:
    """Build a .rels part from a list of relationships (may be empty)."""
    lines = [XML_DECLARATION, f'<Relationships xmlns="{NAMESPACES["rel"]}">']
    for rel in relationships:
        lines.append(
            f'  <Relationship Id="{rel.rel_id}" Type="{rel.rel_type}" Target="{rel.target}"/>'
        )
    lines.append('</Relationships>')
    return '\n'.join(lines)


def package_relationships() -> List[Relationship]:
    """Relationships of _rels/.rels: rId1 points at the main document part."""
    return [Relationship(rel_id='rId1', rel_type=OFFICE_DOCUMENT_REL_TYPE, target=DOCUMENT_PART)]


def build_document_xml(body_xml: str) -> str:
    """
    Wrap body content in a w:document element.

    A terminal <w:sectPr/> is appended after the body content.
    """
    namespace_decls = ' '.join(
        f'xmlns:{prefix}="{NAMESPACES[prefix]}"' for prefix in ('w', 'r', 'wp', 'a', 'pic')
    )
    return (
        f'{XML_DECLARATION}\n'
        f'<w:document {namespace_decls}>\n'
        f'  <w:body>{body_xml}<w:sectPr/></w:body>\n'
        f'</w:document>'
    )


class DocumentPackage:
    """
    Ordered set of named parts making up one OOXML package.

    Part order is kept as added; it determines the ZIP layout.

    Example:
        >>> package = DocumentPackage()
        >>> package.add_part(CONTENT_TYPES_PART, build_content_types_xml())
        >>> entries = package.to_entries()
    """

    def __init__(self):
        self._parts: Dict[str, bytes] = {}
        self._relationships: Dict[str, List[Relationship]] = {}

    def add_part(self, name: str, data: Union[str, bytes]) -> None:
        """Add a part; str data is encoded as UTF-8."""
        if name in self._parts:
            raise ArchiveConstructionError(f"Duplicate package part: {name!r}")
        self._parts[name] = data.encode('utf-8') if isinstance(data, str) else bytes(data)

    def add_relationships_part(self, name: str, relationships: Sequence[Relationship] = ()) -> None:
        """Add a .rels part and remember its relationships for validation."""
        self.add_part(name, build_relationships_xml(relationships))
        self._relationships[name] = list(relationships)

    @property
    def part_names(self) -> List[str]:
        return list(self._parts)

    def get_part(self, name: str) -> bytes:
        return self._parts[name]

    def __contains__(self, name: str) -> bool:
        return name in self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def validate(self) -> None:
        """
        Check the cross references between parts.

        Raises:
            PreconditionError: If a required part is missing or a
                relationship target does not resolve to a part
        """
        for required in (CONTENT_TYPES_PART, PACKAGE_RELS_PART, DOCUMENT_PART):
            if required not in self._parts:
                raise PreconditionError(f"Package is missing required part: {required}")

        for rels_name, relationships in self._relationships.items():
            seen_ids = set()
            for rel in relationships:
                if rel.rel_id in seen_ids:
                    raise PreconditionError(f"Duplicate relationship id {rel.rel_id} in {rels_name}")
                seen_ids.add(rel.rel_id)

                target = resolve_relationship_target(rels_name, rel.target)
                if target not in self._parts:
                    raise PreconditionError(
                        f"Relationship {rel.rel_id} in {rels_name} targets missing part: {target}"
                    )

    def to_entries(self) -> List[Tuple[str, bytes]]:
        """Return [(name, data)] in insertion order for the ZIP writer."""
        self.validate()
        logger.debug(f"Package parts: {', '.join(self._parts)}")
        return list(self._parts.items())


def resolve_relationship_target(rels_part_name: str, target: str) -> str:
    """
    Resolve a relationship target to a package part name.

    Targets are relative to the directory of the source part: "_rels/.rels"
    resolves against the package root, "word/_rels/document.xml.rels"
    against "word/".
    """
    if target.startswith('/'):
        return target.lstrip('/')
    rels_dir = posixpath.dirname(rels_part_name)
    source_dir = posixpath.dirname(rels_dir)
    return posixpath.normpath(posixpath.join(source_dir, target)) if source_dir else posixpath.normpath(target)


__all__ = [
    'XML_DECLARATION',
    'build_content_types_xml',
    'build_relationships_xml',
    'package_relationships',
    'build_document_xml',
    'DocumentPackage',
    'resolve_relationship_target',
]
