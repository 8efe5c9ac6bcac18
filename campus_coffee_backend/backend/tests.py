# backend/tests.py

"""
PROJECT-LEVEL TESTS

Root index, health check and the OpenAPI schema endpoint.
"""

from unittest import mock

from django.db.utils import OperationalError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient


class ProjectEndpointTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_api_root_lists_modules(self):
        response = self.client.get("/api/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["modules"]["pos"], "/api/pos")

    def test_health_check_ok(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"status": "ok", "db": "ok"})

    def test_health_check_reports_db_down(self):
        with mock.patch("backend.urls.connections") as fake_connections:
            fake_connections.__getitem__.side_effect = OperationalError("db gone")
            response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["db"], "down")

    def test_schema_is_served(self):
        response = self.client.get("/api/schema/", {"format": "json"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_root_redirects_to_docs(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/api/docs/")
