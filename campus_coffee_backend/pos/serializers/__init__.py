# pos/serializers/__init__.py

from .pos import (
    CampusTypeField,
    PosDtoSerializer,
    from_domain,
    parse_campus_type,
    to_domain,
)

__all__ = [
    "PosDtoSerializer",
    "CampusTypeField",
    "parse_campus_type",
    "to_domain",
    "from_domain",
]
