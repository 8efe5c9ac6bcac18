"""
PATH: pos/models/point_of_sale.py

POINT OF SALE (PERSISTENCE)

Purpose:
- Storage row behind the POS domain entity (pos.domain.Pos).
- Integer ids, assigned by the database (exposed in URLs as /api/pos/<id>).

Rules:
- name is unique across all POS (enforced here AND checked by the service
  so the API can answer 409 instead of a raw IntegrityError).
- Rows are never deleted through the API.
"""

from django.db import models

from pos.domain.model import CampusType, PosType


class PointOfSale(models.Model):
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")

    type = models.CharField(
        max_length=32,
        choices=PosType.choices,
        default=PosType.CAFE,
    )
    campus = models.CharField(
        max_length=32,
        choices=CampusType.choices,
        db_index=True,
    )

    street = models.CharField(max_length=255, blank=True, default="")
    house_number = models.CharField(max_length=32, blank=True, default="")
    postal_code = models.CharField(max_length=16, blank=True, default="")
    city = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "pos"
        ordering = ["id"]
        verbose_name = "point of sale"
        verbose_name_plural = "points of sale"

    def __str__(self):
        return f"{self.name} ({self.campus})"
