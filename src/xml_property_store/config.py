"""Environment-driven construction of a :class:`PropertiesStore`.

Hosts that prefer configuration over code can describe their store with
environment variables and call :func:`create_store` once at startup:

        PROPERTIES_DATA_PATH   Directory holding the properties documents.
        PROPERTIES_FILES       Comma separated document names, loaded in order.

Example:
        $ PROPERTIES_DATA_PATH=config PROPERTIES_FILES=base.xml,local.xml python app.py

        from xml_property_store.config import create_store
        store = create_store()          # reads the environment
        print(store.count())

The schema is always the bundled one; neither the environment nor
:class:`StoreConfig` can replace it.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .store import PropertiesStore

logger = logging.getLogger(__name__)


@dataclass
class StoreConfig:
    """Settings used by :func:`create_store`.

    Args:
        data_path: Base directory for properties documents. ``None`` leaves
            the store without a data path.
        preload_files: Document names loaded, in order, when the store is created.
    """

    data_path: Optional[str] = None
    preload_files: List[str] = field(default_factory=list)


def get_store_config() -> StoreConfig:
    """Get store configuration from environment variables."""
    config = StoreConfig()

    data_path = os.getenv("PROPERTIES_DATA_PATH")
    if data_path:
        config.data_path = data_path

    files = os.getenv("PROPERTIES_FILES", "")
    config.preload_files = [name.strip() for name in files.split(",") if name.strip()]

    return config


def create_store(config: Optional[StoreConfig] = None) -> PropertiesStore:
    """Build a store and load its preload files.

    Args:
        config: Explicit settings; read from the environment when omitted.

    Returns:
        A ready-to-use :class:`PropertiesStore`.

    Raises:
        InvalidXMLFileFormatError: If any preload document fails to load. No
            store is returned in that case.
    """
    config = config or get_store_config()
    store = PropertiesStore()

    if config.data_path is not None:
        store.set_data_path(config.data_path)

    for file_name in config.preload_files:
        logger.info(f"Preloading properties from {file_name}")
        store.load(file_name)

    return store
