# pos/domain/__init__.py

from .exceptions import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    OsmServiceError,
    PosNotFoundError,
    PosServiceError,
)
from .model import CampusType, Pos, PosType
from .ports import OsmDataService, OsmNode, PosService

__all__ = [
    "CampusType",
    "Pos",
    "PosType",
    "OsmNode",
    "OsmDataService",
    "PosService",
    "PosServiceError",
    "PosNotFoundError",
    "DuplicatePosNameError",
    "OsmNodeNotFoundError",
    "OsmNodeMissingFieldsError",
    "OsmServiceError",
]
