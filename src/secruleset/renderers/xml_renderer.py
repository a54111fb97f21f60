"""
XML renderer for secruleset.

Serializes ruleset documents to the UTF-8, indented form phpcs reads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from secruleset.domain.exceptions import RulesetWriteError

if TYPE_CHECKING:
    from xml.dom.minidom import Document

logger = logging.getLogger(__name__)


class XmlRenderer:
    """
    Renders a DOM document as pretty-printed XML bytes.

    Escaping, indentation and the XML declaration are all left to
    the minidom serializer; attribute and child order follow
    insertion order, so identical documents give identical bytes.
    """

    ENCODING = "UTF-8"

    def __init__(self, indent: str = "  ") -> None:
        """
        Initialize the XML renderer.

        Args:
            indent: Indentation unit for nested elements.
        """
        self.indent = indent

    def render(self, document: Document) -> bytes:
        """
        Render a document as XML.

        Args:
            document: The DOM document to serialize.

        Returns:
            Encoded XML, starting with the XML declaration.
        """
        return document.toprettyxml(indent=self.indent, newl="\n", encoding=self.ENCODING)

    def render_to_file(self, document: Document, path: Path | str) -> int:
        """
        Render a document and overwrite the file at path.

        Args:
            document: The DOM document to serialize.
            path: Output file path.

        Returns:
            Number of bytes written.

        Raises:
            RulesetWriteError: If the file cannot be written.
        """
        content = self.render(document)
        path = Path(path)

        try:
            path.write_bytes(content)
        except OSError as e:
            raise RulesetWriteError(
                f"Cannot write ruleset to {path}: {e.strerror or e}",
                path=str(path),
                errno=e.errno,
                strerror=e.strerror,
            ) from e

        logger.info("Wrote %d bytes to %s", len(content), path)
        return len(content)
