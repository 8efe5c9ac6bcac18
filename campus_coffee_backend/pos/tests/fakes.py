# pos/tests/fakes.py

"""
Test doubles for the OSM port.

Wire with:
    @override_settings(OSM_DATA_SERVICE_CLASS="pos.tests.fakes.FakeOsmDataService")
"""

from __future__ import annotations

from pos.domain.exceptions import OsmNodeNotFoundError, OsmServiceError
from pos.domain.ports import OsmDataService, OsmNode

RADA_NODE_ID = 5589879349
INCOMPLETE_NODE_ID = 1111
UNKNOWN_NODE_ID = 9999

NODES = {
    RADA_NODE_ID: OsmNode(
        node_id=RADA_NODE_ID,
        tags={
            "amenity": "cafe",
            "name": "Rada Coffee & Rösterei",
            "description": "Caffé and Rösterei",
            "addr:street": "Untere Straße",
            "addr:housenumber": "21",
            "addr:postcode": "69117",
            "addr:city": "Heidelberg",
        },
    ),
    INCOMPLETE_NODE_ID: OsmNode(
        node_id=INCOMPLETE_NODE_ID,
        tags={"amenity": "cafe", "name": "Nameless Street Café"},
    ),
}


class FakeOsmDataService(OsmDataService):
    def __init__(self, nodes: dict[int, OsmNode] | None = None):
        self.nodes = NODES if nodes is None else nodes
        self.fetched: list[int] = []

    def fetch_node(self, node_id: int) -> OsmNode:
        self.fetched.append(node_id)
        try:
            return self.nodes[node_id]
        except KeyError:
            raise OsmNodeNotFoundError(node_id) from None


class UnreachableOsmDataService(OsmDataService):
    """OSM API that is down: every fetch fails at the transport level."""

    def fetch_node(self, node_id: int) -> OsmNode:
        raise OsmServiceError(f"OpenStreetMap unreachable while fetching node {node_id}.")
