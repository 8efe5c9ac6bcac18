"""
PATH: pos/models/__init__.py

POS models export surface.
"""

from .point_of_sale import PointOfSale

__all__ = [
    "PointOfSale",
]
