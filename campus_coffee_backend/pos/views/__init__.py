from .api import (
    PosDetailView,
    PosFilterView,
    PosListCreateView,
    PosOsmImportView,
)

__all__ = [
    "PosListCreateView",
    "PosDetailView",
    "PosFilterView",
    "PosOsmImportView",
]
