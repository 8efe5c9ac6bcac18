# pos/tests/test_api.py

"""
POS API TESTS

Run with:
    python manage.py test pos -v 2

Hits the real URL table + ORM service; only the OSM port is faked.
"""

from __future__ import annotations

from unittest import mock
from urllib.parse import urlparse

from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from pos.models import PointOfSale
from pos.tests.fakes import INCOMPLETE_NODE_ID, RADA_NODE_ID, UNKNOWN_NODE_ID

POS_URL = "/api/pos"


def _payload(**overrides):
    data = {
        "name": "Schmelzpunkt",
        "description": "Great waffles",
        "type": "CAFE",
        "campus": "ALTSTADT",
        "street": "Hauptstraße",
        "house_number": "90",
        "postal_code": "69117",
        "city": "Heidelberg",
    }
    data.update(overrides)
    return data


def _without_timestamps(data: dict) -> dict:
    return {k: v for k, v in data.items() if k not in ("created_at", "updated_at")}


@override_settings(OSM_DATA_SERVICE_CLASS="pos.tests.fakes.FakeOsmDataService")
class PosApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()

    def create(self, **overrides):
        response = self.client.post(POS_URL, _payload(**overrides), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        return response


class PosCreateTests(PosApiTestCase):
    """
    GUARANTEES:
    - create answers 201 with a Location header
    - Location resolves to the same entity
    - invalid bodies never reach the database
    """

    def test_create_returns_201_with_location(self):
        response = self.client.post(
            POS_URL, {"name": "Cafe A", "campus": "NEUENHEIM"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertIsNotNone(body["id"])
        self.assertEqual(urlparse(response["Location"]).path, f"/api/pos/{body['id']}")

    def test_location_resolves_to_created_entity(self):
        created = self.create(name="Cafe A", campus="NEUENHEIM")

        response = self.client.get(urlparse(created["Location"]).path)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), created.json())

    def test_create_applies_defaults(self):
        body = self.client.post(
            POS_URL, {"name": "Cafe A", "campus": "NEUENHEIM"}, format="json"
        ).json()

        self.assertEqual(body["type"], "CAFE")
        self.assertEqual(body["description"], "")
        self.assertEqual(body["city"], "")
        self.assertIsNotNone(body["created_at"])

    def test_create_ignores_read_only_timestamps(self):
        body = self.create(created_at="2000-01-01T00:00:00Z").json()
        self.assertNotEqual(body["created_at"], "2000-01-01T00:00:00Z")

    def test_missing_name_is_rejected(self):
        data = _payload()
        del data["name"]

        response = self.client.post(POS_URL, data, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.json())
        self.assertEqual(PointOfSale.objects.count(), 0)

    def test_blank_name_is_rejected(self):
        response = self.client.post(POS_URL, _payload(name="   "), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_campus_is_rejected(self):
        response = self.client.post(POS_URL, _payload(campus="MARS"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("campus", response.json())

    def test_duplicate_name_conflicts(self):
        self.create()

        response = self.client.post(POS_URL, _payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.json()["error"]["code"], "DUPLICATE_POS_NAME")
        self.assertEqual(PointOfSale.objects.count(), 1)

    def test_trailing_slash_is_accepted(self):
        response = self.client.post(f"{POS_URL}/", _payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)


class PosReadTests(PosApiTestCase):
    def test_list_is_empty_initially(self):
        response = self.client.get(POS_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), [])

    def test_list_keeps_insertion_order(self):
        names = ["Zeta Café", "Alpha Bakery", "Mensa Bistro"]
        for name in names:
            self.create(name=name)

        response = self.client.get(POS_URL)

        self.assertEqual([p["name"] for p in response.json()], names)

    def test_get_by_id(self):
        pos_id = self.create().json()["id"]

        response = self.client.get(f"{POS_URL}/{pos_id}")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["id"], pos_id)
        self.assertEqual(response.json()["name"], "Schmelzpunkt")

    def test_get_unknown_id_is_404(self):
        response = self.client.get(f"{POS_URL}/424242")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["error"]["code"], "POS_NOT_FOUND")


class PosFilterTests(PosApiTestCase):
    """
    Filter = case-insensitive substring containment on name.
    """

    def setUp(self):
        super().setUp()
        self.create(name="Schmelzpunkt")
        self.create(name="Café Botanik", campus="INF")

    def test_matches_case_insensitive_fragments(self):
        for fragment in ("schmelz", "PUNKT", "Schmelzpunkt"):
            with self.subTest(fragment=fragment):
                response = self.client.get(f"{POS_URL}/filter", {"name": fragment})

                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual(
                    [p["name"] for p in response.json()], ["Schmelzpunkt"]
                )

    def test_fragment_can_match_several(self):
        response = self.client.get(f"{POS_URL}/filter", {"name": "t"})
        self.assertEqual(len(response.json()), 2)

    def test_no_match_is_404_naming_the_term(self):
        response = self.client.get(f"{POS_URL}/filter", {"name": "xyz"})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        error = response.json()["error"]
        self.assertEqual(error["code"], "POS_NOT_FOUND")
        self.assertIn("xyz", error["message"])

    def test_missing_name_parameter_is_400(self):
        response = self.client.get(f"{POS_URL}/filter")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_empty_fragment_matches_everything(self):
        response = self.client.get(f"{POS_URL}/filter", {"name": ""})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [p["name"] for p in response.json()], ["Schmelzpunkt", "Café Botanik"]
        )

    def test_space_fragment_matches_names_with_spaces(self):
        response = self.client.get(f"{POS_URL}/filter", {"name": " "})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in response.json()], ["Café Botanik"])

    def test_matching_is_plain_lowercase(self):
        self.create(name="Hauptstraße Kiosk")

        self.assertEqual(
            self.client.get(f"{POS_URL}/filter", {"name": "STRASSE"}).status_code,
            status.HTTP_404_NOT_FOUND,
        )
        self.assertEqual(
            self.client.get(f"{POS_URL}/filter", {"name": "STRAßE"}).status_code,
            status.HTTP_200_OK,
        )


class PosUpdateTests(PosApiTestCase):
    def setUp(self):
        super().setUp()
        self.created = self.create().json()
        self.pos_id = self.created["id"]

    def test_update_returns_200_without_location(self):
        data = _payload(id=self.pos_id, description="Even better waffles")

        response = self.client.put(f"{POS_URL}/{self.pos_id}", data, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("Location", response)
        self.assertEqual(response.json()["description"], "Even better waffles")
        self.assertEqual(response.json()["created_at"], self.created["created_at"])

    def test_update_is_idempotent(self):
        data = _payload(id=self.pos_id, name="Schmelzpunkt 2", campus="BERGHEIM")
        url = f"{POS_URL}/{self.pos_id}"

        first = self.client.put(url, data, format="json").json()
        second = self.client.put(url, data, format="json").json()

        self.assertEqual(_without_timestamps(first), _without_timestamps(second))
        self.assertEqual(
            _without_timestamps(self.client.get(url).json()),
            _without_timestamps(second),
        )
        self.assertEqual(PointOfSale.objects.count(), 1)

    def test_id_mismatch_is_400_and_never_reaches_service(self):
        data = _payload(id=self.pos_id + 1)

        with mock.patch(
            "pos.services.pos_service.OrmPosService.upsert"
        ) as upsert:
            response = self.client.put(
                f"{POS_URL}/{self.pos_id}", data, format="json"
            )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()["error"]["message"],
            "POS ID in path and body do not match.",
        )
        upsert.assert_not_called()

    def test_missing_body_id_is_a_mismatch(self):
        response = self.client.put(
            f"{POS_URL}/{self.pos_id}", _payload(), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"]["code"], "INVALID_ARGUMENT")

    def test_update_unknown_id_is_404(self):
        response = self.client.put(
            f"{POS_URL}/777", _payload(id=777), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(PointOfSale.objects.count(), 1)

    def test_rename_onto_existing_name_conflicts(self):
        self.create(name="Café Botanik")

        response = self.client.put(
            f"{POS_URL}/{self.pos_id}",
            _payload(id=self.pos_id, name="Café Botanik"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)


class PosOsmImportTests(PosApiTestCase):
    def url(self, node_id):
        return f"{POS_URL}/import/osm/{node_id}"

    def test_import_creates_pos_with_location(self):
        response = self.client.post(self.url(RADA_NODE_ID), "ALTSTADT", format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body["name"], "Rada Coffee & Rösterei")
        self.assertEqual(body["campus"], "ALTSTADT")
        self.assertEqual(body["type"], "CAFE")
        self.assertEqual(body["postal_code"], "69117")
        self.assertEqual(urlparse(response["Location"]).path, f"/api/pos/{body['id']}")

        again = self.client.get(urlparse(response["Location"]).path)
        self.assertEqual(again.json(), body)

    def test_import_accepts_object_body(self):
        response = self.client.post(
            self.url(RADA_NODE_ID), {"campus": "INF"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()["campus"], "INF")

    def test_unknown_campus_is_400(self):
        response = self.client.post(self.url(RADA_NODE_ID), "MARS", format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(PointOfSale.objects.count(), 0)

    def test_unknown_node_is_404(self):
        response = self.client.post(self.url(UNKNOWN_NODE_ID), "ALTSTADT", format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["error"]["code"], "OSM_NODE_NOT_FOUND")

    def test_incomplete_node_is_400(self):
        response = self.client.post(
            self.url(INCOMPLETE_NODE_ID), "ALTSTADT", format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        error = response.json()["error"]
        self.assertEqual(error["code"], "OSM_NODE_MISSING_FIELDS")
        self.assertIn("addr:street", error["message"])

    def test_importing_twice_conflicts(self):
        self.client.post(self.url(RADA_NODE_ID), "ALTSTADT", format="json")

        response = self.client.post(self.url(RADA_NODE_ID), "ALTSTADT", format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    @override_settings(
        OSM_DATA_SERVICE_CLASS="pos.tests.fakes.UnreachableOsmDataService"
    )
    def test_unreachable_osm_is_a_server_error(self):
        client = APIClient(raise_request_exception=False)

        response = client.post(self.url(RADA_NODE_ID), "ALTSTADT", format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(PointOfSale.objects.count(), 0)
