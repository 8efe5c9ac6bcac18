# pos/domain/model.py

"""
POS DOMAIN MODEL

Pure value objects used between the HTTP layer and the service layer.
Persistence lives in pos.models; the API never hands ORM rows around.

Enums reuse Django TextChoices so the same values drive
model choices, serializer validation and the domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from django.db import models


class CampusType(models.TextChoices):
    ALTSTADT = "ALTSTADT", "Altstadt"
    BERGHEIM = "BERGHEIM", "Bergheim"
    INF = "INF", "Im Neuenheimer Feld"
    NEUENHEIM = "NEUENHEIM", "Neuenheim"


class PosType(models.TextChoices):
    CAFE = "CAFE", "Café"
    VENDING_MACHINE = "VENDING_MACHINE", "Vending machine"
    BAKERY = "BAKERY", "Bakery"
    CAFETERIA = "CAFETERIA", "Cafeteria"


@dataclass(frozen=True)
class Pos:
    """
    A point of sale (coffee sales location).

    id is None until the service has persisted it.
    """

    name: str
    campus: CampusType
    type: PosType = PosType.CAFE
    description: str = ""
    street: str = ""
    house_number: str = ""
    postal_code: str = ""
    city: str = ""
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
