# pos/tests/test_serializers.py

from django.test import SimpleTestCase
from rest_framework import serializers

from pos.domain.model import CampusType, Pos, PosType
from pos.serializers import PosDtoSerializer, from_domain, parse_campus_type, to_domain


class PosDtoMappingTests(SimpleTestCase):
    """
    Wire form <-> domain mapping.

    GUARANTEES:
    - optional fields fall back to empty strings / CAFE
    - enums go out as their plain values
    """

    def test_to_domain_applies_defaults(self):
        serializer = PosDtoSerializer(data={"name": " Cafe A ", "campus": "NEUENHEIM"})
        self.assertTrue(serializer.is_valid(), serializer.errors)

        pos = to_domain(serializer.validated_data)

        self.assertIsNone(pos.id)
        self.assertEqual(pos.name, "Cafe A")
        self.assertEqual(pos.campus, CampusType.NEUENHEIM)
        self.assertEqual(pos.type, PosType.CAFE)
        self.assertEqual(pos.street, "")

    def test_to_domain_keeps_id(self):
        serializer = PosDtoSerializer(
            data={"id": 42, "name": "Cafe A", "campus": "INF", "type": "BAKERY"}
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)

        pos = to_domain(serializer.validated_data)

        self.assertEqual(pos.id, 42)
        self.assertEqual(pos.type, PosType.BAKERY)

    def test_from_domain_renders_plain_values(self):
        data = from_domain(
            Pos(id=7, name="Cafe A", campus=CampusType.BERGHEIM, type=PosType.CAFETERIA)
        )

        self.assertEqual(data["id"], 7)
        self.assertEqual(data["campus"], "BERGHEIM")
        self.assertEqual(data["type"], "CAFETERIA")
        self.assertIsNone(data["created_at"])

    def test_non_positive_id_is_invalid(self):
        serializer = PosDtoSerializer(data={"id": 0, "name": "Cafe A", "campus": "INF"})
        self.assertFalse(serializer.is_valid())
        self.assertIn("id", serializer.errors)

    def test_unknown_type_is_invalid(self):
        serializer = PosDtoSerializer(
            data={"name": "Cafe A", "campus": "INF", "type": "FOOD_TRUCK"}
        )
        self.assertFalse(serializer.is_valid())
        self.assertIn("type", serializer.errors)


class CampusTypeParsingTests(SimpleTestCase):
    def test_bare_value(self):
        self.assertEqual(parse_campus_type("ALTSTADT"), CampusType.ALTSTADT)

    def test_object_value(self):
        self.assertEqual(parse_campus_type({"campus": "INF"}), CampusType.INF)

    def test_invalid_values(self):
        for raw in ("altstadt", "", None, {"other": "INF"}, 3):
            with self.subTest(raw=raw):
                with self.assertRaises(serializers.ValidationError):
                    parse_campus_type(raw)
