# pos/domain/ports.py

"""
POS PORTS

Contracts the API layer depends on. Concrete implementations are wired
through settings (POS_SERVICE_CLASS / OSM_DATA_SERVICE_CLASS), see
pos/services/registry.py.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .model import CampusType, Pos


@dataclass(frozen=True)
class OsmNode:
    """
    The subset of an OpenStreetMap node needed to build a POS.

    tags holds the raw OSM key/value tags (e.g. "addr:street").
    """

    node_id: int
    tags: dict[str, str] = field(default_factory=dict)

    def tag(self, key: str) -> str:
        return (self.tags.get(key) or "").strip()


class OsmDataService(ABC):
    @abstractmethod
    def fetch_node(self, node_id: int) -> OsmNode:
        """
        Load a node from OpenStreetMap.

        Raises OsmNodeNotFoundError if the node does not exist,
        OsmServiceError on transport/payload failures.
        """


class PosService(ABC):
    """
    Owns all POS domain logic and storage.

    Guarantees expected by the API layer:
    - get_all() returns a stable (insertion) order
    - get_by_id() raises PosNotFoundError when absent
    - upsert() creates when pos.id is None, otherwise replaces the
      existing record; it returns the persisted entity with its id
    """

    @abstractmethod
    def get_all(self) -> list[Pos]: ...

    @abstractmethod
    def get_by_id(self, pos_id: int) -> Pos: ...

    @abstractmethod
    def upsert(self, pos: Pos) -> Pos: ...

    @abstractmethod
    def import_from_osm_node(self, node_id: int, campus_type: CampusType) -> Pos: ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every POS (tests + reseeding)."""
