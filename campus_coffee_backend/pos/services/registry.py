# pos/services/registry.py

"""
SERVICE WIRING

Resolves the configured PosService / OsmDataService implementations from
settings (dotted paths). Views and commands go through these factories;
tests swap implementations with override_settings or mock.patch.
"""

from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from pos.domain.ports import OsmDataService, PosService


def _load(setting_name: str, expected: type):
    dotted = (getattr(settings, setting_name, "") or "").strip()
    if not dotted:
        raise ImproperlyConfigured(f"{setting_name} is not configured.")

    cls = import_string(dotted)
    if not (isinstance(cls, type) and issubclass(cls, expected)):
        raise ImproperlyConfigured(
            f"{setting_name}={dotted} is not a {expected.__name__} implementation."
        )
    return cls


def get_osm_data_service() -> OsmDataService:
    return _load("OSM_DATA_SERVICE_CLASS", OsmDataService)()


def get_pos_service() -> PosService:
    return _load("POS_SERVICE_CLASS", PosService)()
