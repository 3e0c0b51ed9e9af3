"""Parse XML documents and validate them against an XSD schema.

This module is the only place that touches the XML engine. It wraps ``lxml``
so callers deal with one error type (:class:`InvalidXMLFileFormatError`) and a
couple of navigation helpers instead of the engine's own exception hierarchy.

Typical usage:
        from pathlib import Path
        from xml_property_store.xml_loader import XMLLoader

        loader = XMLLoader()
        if loader.validate(Path("app_properties.xml"), Path("properties_schema.xsd")):
                tree = loader.load(Path("app_properties.xml"), Path("properties_schema.xsd"))
                property_list = loader.find_element(tree, "property_list")
                for node in loader.find_child_elements(property_list, "property"):
                        print(node.get("name"), node.get("value"))

Notes:
* ``validate`` never raises; it is meant for pre-flight checks.
* ``load`` raises on any failure: unreadable file, malformed XML, unreadable
    schema, or a document that does not conform to the schema.
* Compiled schemas are kept per loader instance, keyed on the resolved
    schema path.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from lxml import etree

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class InvalidXMLFileFormatError(ValueError):
    """Raised when a document cannot be parsed or fails schema validation.

    Attributes:
        path: Document path that failed to load (if known).
        errors: Individual validation messages reported by the schema, in
            ``"line N: message"`` form. Empty for parse or I/O failures.
    """

    def __init__(
        self,
        message: str,
        path: Optional[PathLike] = None,
        errors: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.errors: List[str] = list(errors or [])


class XMLLoader:
    """Load schema-validated XML documents and navigate their elements.

    Example:
        loader = XMLLoader()
        tree = loader.load("data/app.xml", "schema/properties_schema.xsd")
        root = tree.getroot()
    """

    def __init__(self) -> None:
        self._parser = etree.XMLParser(
            resolve_entities=False, no_network=True, remove_comments=True
        )
        self._schemas: Dict[str, etree.XMLSchema] = {}
        # lxml parsers and schema error logs are not safe to share across threads,
        # so loads through one loader run one at a time
        self._lock = threading.Lock()

    def validate(self, document_path: PathLike, schema_path: PathLike) -> bool:
        """Return True iff the document is well formed and matches the schema.

        Args:
            document_path: XML document to check.
            schema_path: XSD the document must conform to.

        Returns:
            bool: ``False`` for every failure mode; never raises.
        """
        try:
            self.load(document_path, schema_path)
        except InvalidXMLFileFormatError as exc:
            logger.debug(f"Validation of {document_path} failed: {exc}")
            return False
        return True

    def load(self, document_path: PathLike, schema_path: PathLike) -> etree._ElementTree:
        """Parse the document and validate it against the schema.

        Args:
            document_path: XML document to load.
            schema_path: XSD the document must conform to.

        Returns:
            The parsed element tree.

        Raises:
            InvalidXMLFileFormatError: If the document or schema cannot be read
                or parsed, or the document violates the schema.
        """
        with self._lock:
            return self._load(Path(document_path), Path(schema_path))

    def _load(self, document_path: Path, schema_path: Path) -> etree._ElementTree:
        schema = self._get_schema(schema_path)

        try:
            tree = etree.parse(str(document_path), self._parser)
        except etree.XMLSyntaxError as exc:
            logger.warning(f"Malformed XML in {document_path}: {exc}")
            raise InvalidXMLFileFormatError(
                f"{document_path} is not well-formed XML: {exc}", path=document_path
            ) from exc
        except (OSError, ValueError) as exc:
            logger.warning(f"Unable to read {document_path}: {exc}")
            raise InvalidXMLFileFormatError(
                f"Unable to read {document_path}: {exc}", path=document_path
            ) from exc

        if not schema.validate(tree):
            errors = [f"line {entry.line}: {entry.message}" for entry in schema.error_log]
            logger.warning(
                f"{document_path} failed schema validation with {len(errors)} error(s)"
            )
            summary = errors[0] if errors else "unknown validation error"
            raise InvalidXMLFileFormatError(
                f"{document_path} does not conform to the schema: {summary}",
                path=document_path,
                errors=errors,
            )

        logger.debug(f"Loaded and validated {document_path}")
        return tree

    def _get_schema(self, schema_path: Path) -> etree.XMLSchema:
        try:
            key = str(schema_path.resolve())
            schema = self._schemas.get(key)
            if schema is not None:
                return schema
            schema = etree.XMLSchema(etree.parse(key, self._parser))
        except (etree.XMLSyntaxError, etree.XMLSchemaParseError, OSError, ValueError) as exc:
            logger.error(f"Unable to compile schema {schema_path}: {exc}")
            raise InvalidXMLFileFormatError(
                f"Unable to compile schema {schema_path}: {exc}", path=schema_path
            ) from exc

        self._schemas[key] = schema
        return schema

    @staticmethod
    def find_element(
        tree: Union[etree._ElementTree, etree._Element], element_name: str
    ) -> Optional[etree._Element]:
        """Return the first element named ``element_name`` (depth-first), or None."""
        return next(tree.iter(element_name), None)

    @staticmethod
    def find_child_elements(
        node: Optional[etree._Element], element_name: str
    ) -> List[etree._Element]:
        """Return the immediate children named ``element_name`` in document order."""
        if node is None:
            return []
        return node.findall(element_name)

    @staticmethod
    def get_element_text(node: etree._Element) -> str:
        """Return all text contained in ``node`` and its descendants."""
        return "".join(node.itertext())


def validate_xml(document_path: PathLike, schema_path: PathLike) -> bool:
    """Convenience wrapper around :meth:`XMLLoader.validate`."""
    return XMLLoader().validate(document_path, schema_path)


def load_xml(document_path: PathLike, schema_path: PathLike) -> etree._ElementTree:
    """Convenience wrapper around :meth:`XMLLoader.load`."""
    return XMLLoader().load(document_path, schema_path)
