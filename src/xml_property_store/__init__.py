"""XML Property Store
==================

Load named properties and option lists from schema-validated XML documents
and serve them to application code by key.

Key capabilities
----------------
- Validate properties documents against the bundled ``properties_schema.xsd``.
- Parse ``property`` entries into a ``name -> value`` map and
  ``property_options`` entries into ordered ``name -> [option, ...]`` lists.
- Additive loading: later documents overwrite matching keys only.
- Atomic loads: a document that fails validation never changes the store.

Minimal quick start
-------------------
>>> from xml_property_store import PropertiesStore
>>> store = PropertiesStore()
>>> store.set_data_path("config/")
>>> store.load("app_properties.xml")
>>> store.get_property("WINDOW_TITLE")

Environment-configured store:
>>> from xml_property_store import create_store
>>> store = create_store()  # PROPERTIES_DATA_PATH / PROPERTIES_FILES

Public surface
--------------
Only the classes and helpers an application needs are exported here; the
navigation helpers live in :mod:`xml_property_store.xml_loader`.
"""

__version__ = "0.1.0"

from .config import StoreConfig, create_store, get_store_config
from .models import PropertiesDocument
from .store import PROPERTIES_SCHEMA_PATH, PropertiesStore
from .xml_loader import InvalidXMLFileFormatError, XMLLoader

__all__ = [
    "InvalidXMLFileFormatError",
    "PROPERTIES_SCHEMA_PATH",
    "PropertiesDocument",
    "PropertiesStore",
    "StoreConfig",
    "XMLLoader",
    "create_store",
    "get_store_config",
]
