"""Core data structures for parsed property documents.

A :class:`PropertiesDocument` holds everything read from one XML properties
file before it is merged into a live :class:`~xml_property_store.store.PropertiesStore`.
Keeping the parsed result separate from the store lets a load be committed in
one step once the whole document has been walked.

Typical construction (simplified)::

        from xml_property_store.models import PropertiesDocument

        doc = PropertiesDocument(source="config/app_properties.xml")
        doc.properties["WINDOW_TITLE"] = "My Application"
        doc.option_lists["LANGUAGES"] = ["English", "French"]

        payload = doc.to_dict()

Design notes:
        * Option lists are plain lists so their document order is kept; the
            first entry is conventionally the default choice.
        * ``to_dict`` copies every container so callers can serialize or mutate
            the payload without touching the snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class PropertiesDocument:
    """Properties and option lists declared by a single document.

    Attributes:
        properties: Mapping of property name to its string value.
        option_lists: Mapping of option list name to its ordered entries.
        source: Path of the document the data was read from (``None`` for
            snapshots built from a live store).

    Example:
        >>> doc = PropertiesDocument()
        >>> doc.properties["MY_STRING"] = "Hello, World"
        >>> doc.property_count
        1
    """

    properties: Dict[str, str] = field(default_factory=dict)
    option_lists: Dict[str, List[str]] = field(default_factory=dict)
    source: Optional[str] = None

    @property
    def property_count(self) -> int:
        return len(self.properties)

    @property
    def option_list_count(self) -> int:
        return len(self.option_lists)

    def to_dict(self) -> dict:
        """Convert the document into a JSON-serializable dictionary.

        Returns:
            dict: Primitive types only, safe for direct JSON encoding.

        Example:
            >>> PropertiesDocument(source="a.xml").to_dict()["source"]
            'a.xml'
        """
        return {
            "source": self.source,
            "properties": dict(self.properties),
            "option_lists": {
                name: list(values) for name, values in self.option_lists.items()
            },
        }
