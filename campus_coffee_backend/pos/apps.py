"""
POS APP CONFIG

Campus coffee Points of Sale:
- REST resource under /api/pos
- OpenStreetMap import
"""

from django.apps import AppConfig


class PosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pos"
    verbose_name = "Points of Sale"
