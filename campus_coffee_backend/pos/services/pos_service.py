# pos/services/pos_service.py

"""
POS DOMAIN SERVICE (ORM)

SINGLE SOURCE OF TRUTH for:
- POS creation / replacement (upsert)
- Name uniqueness
- OSM node -> POS conversion

GUARANTEES:
- upsert is atomic
- an id that does not exist is never silently created
- created_at survives updates
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from pos.domain.exceptions import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    PosNotFoundError,
)
from pos.domain.model import CampusType, Pos, PosType
from pos.domain.ports import OsmDataService, OsmNode, PosService
from pos.models import PointOfSale
from pos.services.registry import get_osm_data_service

logger = logging.getLogger(__name__)

# OSM tag -> POS field; every one of these must be present on import
OSM_REQUIRED_TAGS = {
    "name": "name",
    "addr:street": "street",
    "addr:housenumber": "house_number",
    "addr:postcode": "postal_code",
    "addr:city": "city",
}

OSM_TYPE_BY_TAG = {
    "cafe": PosType.CAFE,
    "vending_machine": PosType.VENDING_MACHINE,
    "bakery": PosType.BAKERY,
}

_WRITABLE_FIELDS = [
    "name",
    "description",
    "type",
    "campus",
    "street",
    "house_number",
    "postal_code",
    "city",
]


def _to_domain(row: PointOfSale) -> Pos:
    return Pos(
        id=row.id,
        name=row.name,
        description=row.description,
        type=PosType(row.type),
        campus=CampusType(row.campus),
        street=row.street,
        house_number=row.house_number,
        postal_code=row.postal_code,
        city=row.city,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def pos_type_from_osm(node: OsmNode) -> PosType:
    for key in ("amenity", "shop"):
        value = node.tag(key).lower()
        if value in OSM_TYPE_BY_TAG:
            return OSM_TYPE_BY_TAG[value]
    return PosType.CAFETERIA


def pos_from_osm_node(node: OsmNode, campus_type: CampusType) -> Pos:
    missing = [tag for tag in OSM_REQUIRED_TAGS if not node.tag(tag)]
    if missing:
        raise OsmNodeMissingFieldsError(node.node_id, missing)

    values = {field: node.tag(tag) for tag, field in OSM_REQUIRED_TAGS.items()}
    return Pos(
        description=node.tag("description"),
        type=pos_type_from_osm(node),
        campus=CampusType(campus_type),
        **values,
    )


class OrmPosService(PosService):
    def __init__(self, *, osm_data_service: OsmDataService | None = None):
        self._osm_data_service = osm_data_service

    @property
    def osm_data_service(self) -> OsmDataService:
        if self._osm_data_service is None:
            self._osm_data_service = get_osm_data_service()
        return self._osm_data_service

    def get_all(self) -> list[Pos]:
        return [_to_domain(row) for row in PointOfSale.objects.order_by("id")]

    def get_by_id(self, pos_id: int) -> Pos:
        row = PointOfSale.objects.filter(id=pos_id).first()
        if row is None:
            raise PosNotFoundError(pos_id=pos_id)
        return _to_domain(row)

    @transaction.atomic
    def upsert(self, pos: Pos) -> Pos:
        if pos.id is None:
            row = PointOfSale()
        else:
            row = PointOfSale.objects.select_for_update().filter(id=pos.id).first()
            if row is None:
                raise PosNotFoundError(pos_id=pos.id)

        name = (pos.name or "").strip()
        taken = PointOfSale.objects.filter(name=name)
        if row.pk is not None:
            taken = taken.exclude(pk=row.pk)
        if taken.exists():
            raise DuplicatePosNameError(name)

        row.name = name
        row.description = pos.description or ""
        row.type = PosType(pos.type or PosType.CAFE).value
        row.campus = CampusType(pos.campus).value
        row.street = pos.street or ""
        row.house_number = pos.house_number or ""
        row.postal_code = pos.postal_code or ""
        row.city = pos.city or ""

        creating = row.pk is None
        try:
            # savepoint; the unique name can still collide under concurrent writes
            with transaction.atomic():
                if creating:
                    row.save()
                else:
                    row.save(update_fields=[*_WRITABLE_FIELDS, "updated_at"])
        except IntegrityError as exc:
            raise DuplicatePosNameError(name) from exc

        logger.info(
            "POS created" if creating else "POS updated",
            extra={"pos_id": row.id, "pos_name": row.name},
        )
        return _to_domain(row)

    def import_from_osm_node(self, node_id: int, campus_type: CampusType) -> Pos:
        node = self.osm_data_service.fetch_node(node_id)
        pos = pos_from_osm_node(node, campus_type)
        created = self.upsert(pos)
        logger.info(
            "POS imported from OSM",
            extra={"osm_node_id": node_id, "pos_id": created.id},
        )
        return created

    def clear(self) -> None:
        deleted, _ = PointOfSale.objects.all().delete()
        logger.info("POS table cleared", extra={"deleted": deleted})
