from .registry import get_osm_data_service, get_pos_service

__all__ = [
    "get_osm_data_service",
    "get_pos_service",
]
