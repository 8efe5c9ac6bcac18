# pos/services/osm.py
from __future__ import annotations

import json
import logging
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings

from pos.domain.exceptions import OsmNodeNotFoundError, OsmServiceError
from pos.domain.ports import OsmDataService, OsmNode

logger = logging.getLogger(__name__)

OSM_DEFAULT_BASE = "https://api.openstreetmap.org/api/0.6"


def _osm_cfg() -> dict:
    cfg = getattr(settings, "OSM", {}) or {}
    return cfg if isinstance(cfg, dict) else {}


def _safe_preview(text: str, limit: int = 300) -> str:
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + " …(truncated)"


def _node_from_payload(node_id: int, payload: dict[str, Any]) -> OsmNode:
    """
    OSM JSON shape:
        {"version": "0.6", "elements": [{"type": "node", "id": 1, "tags": {...}}]}
    """
    elements = payload.get("elements")
    if not isinstance(elements, list):
        raise OsmServiceError(f"OSM payload for node {node_id} has no elements")

    for element in elements:
        if not isinstance(element, dict):
            continue
        if element.get("type") != "node" or element.get("id") != node_id:
            continue
        tags = element.get("tags") or {}
        if not isinstance(tags, dict):
            tags = {}
        return OsmNode(
            node_id=node_id,
            tags={str(k): str(v) for k, v in tags.items()},
        )

    # A deleted node comes back without its element.
    raise OsmNodeNotFoundError(node_id)


class OpenStreetMapClient(OsmDataService):
    """
    Read-only client for the OSM editing API (node lookups only).

    GET {base}/node/{id}.json
    - 404 / 410 -> OsmNodeNotFoundError
    - anything else that is not a JSON object -> OsmServiceError
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: int | None = None,
        user_agent: str | None = None,
    ):
        cfg = _osm_cfg()
        self.base_url = (base_url or cfg.get("API_BASE_URL") or OSM_DEFAULT_BASE).rstrip("/")
        self.timeout = int(timeout or cfg.get("TIMEOUT_SECONDS") or 10)
        self.user_agent = user_agent or cfg.get("USER_AGENT") or "campus-coffee-backend/1.0"

    def _node_url(self, node_id: int) -> str:
        return f"{self.base_url}/node/{int(node_id)}.json"

    def fetch_node(self, node_id: int) -> OsmNode:
        url = self._node_url(node_id)
        req = Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": self.user_agent,
            },
            method="GET",
        )

        try:
            with urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read().decode("utf-8", errors="replace")
        except HTTPError as e:
            if e.code in (404, 410):
                raise OsmNodeNotFoundError(node_id) from e
            logger.warning(
                "OSM node fetch rejected",
                extra={"node_id": node_id, "status": e.code},
            )
            raise OsmServiceError(f"OSM HTTPError: {e.code} for node {node_id}") from e
        except URLError as e:
            logger.warning("OSM unreachable", extra={"node_id": node_id})
            raise OsmServiceError(f"OSM URLError: {e.reason}") from e

        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise OsmServiceError(
                f"OSM returned non-JSON: {_safe_preview(raw)}"
            ) from e

        if not isinstance(payload, dict):
            raise OsmServiceError(f"OSM returned non-object JSON for node {node_id}")

        return _node_from_payload(node_id, payload)
