"""In-memory store of properties and option lists loaded from XML.

The store keeps two maps for the lifetime of the host application:

        * properties: ``name -> value`` strings
        * option lists: ``name -> [option, ...]`` in document order

Documents are resolved against a base directory set once with
:meth:`PropertiesStore.set_data_path` and validated against the bundled
``properties_schema.xsd`` before any data is read from them.

Example::

        from xml_property_store.store import PropertiesStore

        store = PropertiesStore()
        store.set_data_path("config/")
        store.load("app_properties.xml")

        title = store.get_property("WINDOW_TITLE")
        languages = store.get_option_list("LANGUAGES")
        default_language = languages[0] if languages else None

Loading semantics:
        * Loads are additive. A key redeclared by a later document is
            overwritten; everything else stays until removed or cleared.
        * A document is parsed completely into a
            :class:`~xml_property_store.models.PropertiesDocument` first and only
            then merged, so a failed load leaves the store exactly as it was.

Thread safety:
        All map access goes through one re-entrant lock. Parsing happens outside
        the lock; only the final merge holds it.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from .models import PropertiesDocument
from .xml_loader import PathLike, XMLLoader

logger = logging.getLogger(__name__)

# Element and attribute names used by properties documents
PROPERTY_LIST_ELEMENT = "property_list"
PROPERTY_ELEMENT = "property"
PROPERTY_OPTIONS_LIST_ELEMENT = "property_options_list"
PROPERTY_OPTIONS_ELEMENT = "property_options"
OPTION_ELEMENT = "option"
NAME_ATT = "name"
VALUE_ATT = "value"

PROPERTIES_SCHEMA_FILE_NAME = "properties_schema.xsd"
PROPERTIES_SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / PROPERTIES_SCHEMA_FILE_NAME


def _check_key(key: str) -> str:
    if not isinstance(key, str):
        raise TypeError(
            f"Property keys must be str, got {type(key).__name__}; "
            "pass the key's string form explicitly (e.g. MyProps.MY_STRING.name)"
        )
    return key


class PropertiesStore:
    """Holds properties and option lists for one application.

    Construct one instance at startup and hand it to whatever needs it. Each
    instance is independent; there is no module-level shared state.

    Args:
        loader: XML loader used by :meth:`load` (a fresh :class:`XMLLoader` by default).
            Documents are always validated against the bundled
            ``properties_schema.xsd``.
    """

    def __init__(self, loader: Optional[XMLLoader] = None) -> None:
        self._properties: Dict[str, str] = {}
        self._option_lists: Dict[str, List[str]] = {}
        self._loader = loader or XMLLoader()
        self._data_path: Optional[str] = None
        self._lock = threading.RLock()

    # ---------------- Data path ---------------- #

    @property
    def data_path(self) -> Optional[str]:
        """Base directory used to resolve document names passed to :meth:`load`."""
        return self._data_path

    def set_data_path(self, path: PathLike) -> None:
        """Set the directory that documents are loaded from.

        Only needs to be called once if every properties file lives in the
        same directory. The path is not checked here; a bad path surfaces as a
        load failure.
        """
        self._data_path = str(path)

    def _resolve(self, file_name: PathLike) -> Path:
        if self._data_path is None:
            logger.warning(
                f"No data path set; resolving {file_name} against the working directory"
            )
            return Path(file_name)
        return Path(self._data_path) / file_name

    # ---------------- Loading ---------------- #

    def load(self, file_name: PathLike) -> None:
        """Load a properties document from the data path.

        Args:
            file_name: Document name, relative to :attr:`data_path`.

        Raises:
            InvalidXMLFileFormatError: If the document cannot be read, is not
                well formed, or does not conform to the properties schema. The
                store is left unchanged.
        """
        document_path = self._resolve(file_name)
        document = self.parse_document(document_path)

        with self._lock:
            self._properties.update(document.properties)
            self._option_lists.update(document.option_lists)
            logger.debug(
                f"Store now holds {len(self._properties)} properties and "
                f"{len(self._option_lists)} option lists"
            )

        logger.info(
            f"Loaded {document.property_count} properties and "
            f"{document.option_list_count} option lists from {document_path}"
        )

    def parse_document(self, document_path: PathLike) -> PropertiesDocument:
        """Read a validated document into a :class:`PropertiesDocument` without touching the store."""
        tree = self._loader.load(document_path, PROPERTIES_SCHEMA_PATH)
        document = PropertiesDocument(source=str(document_path))

        property_list = self._loader.find_element(tree, PROPERTY_LIST_ELEMENT)
        for node in self._loader.find_child_elements(property_list, PROPERTY_ELEMENT):
            document.properties[node.get(NAME_ATT)] = node.get(VALUE_ATT)

        # Option lists are optional
        options_list = self._loader.find_element(tree, PROPERTY_OPTIONS_LIST_ELEMENT)
        for node in self._loader.find_child_elements(options_list, PROPERTY_OPTIONS_ELEMENT):
            options: List[str] = []
            document.option_lists[node.get(NAME_ATT)] = options
            for option in self._loader.find_child_elements(node, OPTION_ELEMENT):
                options.append(self._loader.get_element_text(option))

        return document

    # ---------------- Properties ---------------- #

    def add_property(self, key: str, value: str) -> None:
        """Add or overwrite a single property."""
        with self._lock:
            self._properties[_check_key(key)] = value

    def get_property(self, key: str) -> Optional[str]:
        """Return the property's value, or None if it is not loaded."""
        with self._lock:
            return self._properties.get(_check_key(key))

    def has_property(self, key: str) -> bool:
        with self._lock:
            return _check_key(key) in self._properties

    def is_true(self, key: str) -> bool:
        """Return True if the property's value is ``"true"`` (any case).

        Absent properties and any other value (``"yes"``, ``"1"``...) are False.
        """
        value = self.get_property(key)
        return value is not None and value.lower() == "true"

    def remove_property(self, key: str) -> None:
        """Remove a property. Removing an absent key does nothing."""
        with self._lock:
            self._properties.pop(_check_key(key), None)

    def count(self) -> int:
        with self._lock:
            return len(self._properties)

    # ---------------- Option lists ---------------- #

    def add_option_list(self, key: str, values: List[str]) -> None:
        """Add or overwrite an option list. The list is copied."""
        with self._lock:
            self._option_lists[_check_key(key)] = list(values)

    def get_option_list(self, key: str) -> Optional[List[str]]:
        """Return a copy of the option list, or None if it is not loaded."""
        with self._lock:
            options = self._option_lists.get(_check_key(key))
            return list(options) if options is not None else None

    def has_option_list(self, key: str) -> bool:
        with self._lock:
            return _check_key(key) in self._option_lists

    def remove_option_list(self, key: str) -> None:
        """Remove an option list. Removing an absent key does nothing."""
        with self._lock:
            self._option_lists.pop(_check_key(key), None)

    def option_list_count(self) -> int:
        with self._lock:
            return len(self._option_lists)

    # ---------------- Whole store ---------------- #

    def clear(self) -> None:
        """Remove every property and option list."""
        with self._lock:
            self._properties.clear()
            self._option_lists.clear()

    def snapshot(self) -> PropertiesDocument:
        """Return a copy of the current contents."""
        with self._lock:
            return PropertiesDocument(
                properties=dict(self._properties),
                option_lists={k: list(v) for k, v in self._option_lists.items()},
            )
