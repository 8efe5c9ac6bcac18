"""
PATH: pos/urls.py

POS URLS

Mounted at /api/pos (no trailing slash, matching the resource contract).
Every route also accepts a trailing slash.

Order matters: "filter" and "import" must win over "<id>".
"""

from django.urls import re_path

from pos.views import (
    PosDetailView,
    PosFilterView,
    PosListCreateView,
    PosOsmImportView,
)

app_name = "pos"

urlpatterns = [
    re_path(r"^/?$", PosListCreateView.as_view(), name="list"),
    re_path(r"^/filter/?$", PosFilterView.as_view(), name="filter"),
    re_path(
        r"^/import/osm/(?P<node_id>[0-9]+)/?$",
        PosOsmImportView.as_view(),
        name="import-osm",
    ),
    re_path(r"^/(?P<pos_id>[0-9]+)/?$", PosDetailView.as_view(), name="detail"),
]
