# pos/domain/exceptions.py

"""
POS SERVICE ERRORS

Centralized domain errors raised by PosService implementations.
The API layer maps each one to an HTTP status (see pos/views/api.py).
"""


class PosServiceError(Exception):
    """Base exception for all POS service failures."""


class PosNotFoundError(PosServiceError):
    """Raised when no POS matches an identifier or a name filter."""

    def __init__(self, message: str | None = None, *, pos_id: int | None = None):
        self.pos_id = pos_id
        if message is None:
            message = f"POS with ID {pos_id} does not exist."
        super().__init__(message)


class DuplicatePosNameError(PosServiceError):
    """Raised when a POS name is already taken by another POS."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"POS with name '{name}' already exists.")


class OsmNodeNotFoundError(PosServiceError):
    """Raised when OpenStreetMap has no node with the given id."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OpenStreetMap node {node_id} does not exist.")


class OsmNodeMissingFieldsError(PosServiceError):
    """Raised when an OSM node lacks the tags needed to build a POS."""

    def __init__(self, node_id: int, missing: list[str]):
        self.node_id = node_id
        self.missing = list(missing)
        super().__init__(
            f"OpenStreetMap node {node_id} is missing required fields: "
            + ", ".join(self.missing)
        )


class OsmServiceError(PosServiceError):
    """Raised when the OpenStreetMap API cannot be reached or answers garbage."""
