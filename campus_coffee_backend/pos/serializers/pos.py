# pos/serializers/pos.py

"""
POS DTO SERIALIZER + MAPPER

Purpose:
- Wire form of a POS (PosDto) for /api/pos.
- Map between the wire form and the domain entity (pos.domain.Pos).

This serializer does NOT touch the database.
Persistence is owned by the PosService implementation.
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from pos.domain.model import CampusType, Pos, PosType


class PosDtoSerializer(serializers.Serializer):
    """
    Rules:
    - id is optional on create and required (matching the path) on update;
      the path/body check is done by the view
    - created_at / updated_at are read-only (owned by persistence)
    """

    id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    type = serializers.ChoiceField(choices=PosType.choices, default=PosType.CAFE)
    campus = serializers.ChoiceField(choices=CampusType.choices)
    street = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    house_number = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=32
    )
    postal_code = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=16
    )
    city = serializers.CharField(
        required=False, allow_blank=True, default="", max_length=255
    )
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v


class CampusTypeField(serializers.ChoiceField):
    """
    Import body: a bare campus value ("ALTSTADT").
    {"campus": "ALTSTADT"} is accepted too for form-style clients.
    """

    def __init__(self, **kwargs):
        super().__init__(choices=CampusType.choices, **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, dict):
            data = data.get("campus")
        value = super().to_internal_value(data)
        return CampusType(value)


def parse_campus_type(raw: Any) -> CampusType:
    """Raises serializers.ValidationError for unknown/missing values."""
    return CampusTypeField().run_validation(raw)


def to_domain(data: dict[str, Any]) -> Pos:
    return Pos(
        id=data.get("id"),
        name=data["name"],
        campus=CampusType(data["campus"]),
        type=PosType(data.get("type") or PosType.CAFE),
        description=data.get("description") or "",
        street=data.get("street") or "",
        house_number=data.get("house_number") or "",
        postal_code=data.get("postal_code") or "",
        city=data.get("city") or "",
    )


def from_domain(pos: Pos) -> dict[str, Any]:
    return PosDtoSerializer(pos).data
