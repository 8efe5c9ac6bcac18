# pos/views/api.py

"""
POS API VIEWS

Routes (see pos/urls.py), all under /api/pos:
- GET    ""                      list all
- POST   ""                      create (201 + Location)
- GET    "/filter?name=<text>"   case-insensitive name containment (404 if none)
- POST   "/import/osm/<node_id>" create from an OpenStreetMap node (201 + Location)
- GET    "/<id>"                 get one (404 if absent)
- PUT    "/<id>"                 update (path id must equal body id, else 400)

Hard rules:
- Views are thin: decode -> map to domain -> PosService -> map back.
- Domain errors are translated to HTTP here and nowhere else.
"""

from __future__ import annotations

import logging

from django.urls import reverse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from pos.domain.exceptions import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosNotFoundError,
    PosServiceError,
)
from pos.domain.ports import PosService
from pos.serializers import (
    PosDtoSerializer,
    from_domain,
    parse_campus_type,
    to_domain,
)
from pos.services import get_pos_service

logger = logging.getLogger(__name__)

ID_MISMATCH_MESSAGE = "POS ID in path and body do not match."


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


# checked in order with isinstance
DOMAIN_ERRORS = (
    (PosNotFoundError, "POS_NOT_FOUND", status.HTTP_404_NOT_FOUND),
    (DuplicatePosNameError, "DUPLICATE_POS_NAME", status.HTTP_409_CONFLICT),
    (OsmNodeNotFoundError, "OSM_NODE_NOT_FOUND", status.HTTP_404_NOT_FOUND),
    (
        OsmNodeMissingFieldsError,
        "OSM_NODE_MISSING_FIELDS",
        status.HTTP_400_BAD_REQUEST,
    ),
)


def domain_error_response(exc: PosServiceError):
    """
    Map a domain error to the error envelope.
    Unmapped PosServiceErrors (e.g. OsmServiceError) are re-raised for
    Django's default 500 handling.
    """
    for error_cls, code, http_status in DOMAIN_ERRORS:
        if isinstance(exc, error_cls):
            return error_response(code=code, message=str(exc), http_status=http_status)
    raise exc


# =====================================================
# BASE VIEW
# =====================================================

class PosServiceView(APIView):
    """
    Shared plumbing: service lookup, shared upsert path, Location header.
    """

    serializer_class = PosDtoSerializer

    def get_pos_service(self) -> PosService:
        return get_pos_service()

    def upsert(self, validated_data: dict) -> dict:
        """
        Common upsert logic for create and update:
        wire form -> domain -> service.upsert -> wire form.
        """
        service = self.get_pos_service()
        return from_domain(service.upsert(to_domain(validated_data)))

    def get_location(self, request, pos_id: int) -> str:
        return request.build_absolute_uri(
            reverse("pos:detail", kwargs={"pos_id": pos_id})
        )

    def created_response(self, request, dto: dict):
        return Response(
            dto,
            status=status.HTTP_201_CREATED,
            headers={"Location": self.get_location(request, dto["id"])},
        )


# =====================================================
# POS API VIEWS
# =====================================================

class PosListCreateView(PosServiceView):
    @extend_schema(
        tags=["POS"],
        responses={200: PosDtoSerializer(many=True)},
        description="All points of sale, in insertion order.",
    )
    def get(self, request):
        service = self.get_pos_service()
        data = [from_domain(pos) for pos in service.get_all()]
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["POS"],
        request=PosDtoSerializer,
        responses={
            201: PosDtoSerializer,
            400: OpenApiResponse(description="Invalid body"),
            409: OpenApiResponse(description="Name already taken"),
        },
        description="Create a point of sale. Location points at the new resource.",
    )
    def post(self, request):
        serializer = PosDtoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            created = self.upsert(serializer.validated_data)
        except PosServiceError as exc:
            return domain_error_response(exc)

        return self.created_response(request, created)


class PosDetailView(PosServiceView):
    @extend_schema(
        tags=["POS"],
        responses={
            200: PosDtoSerializer,
            404: OpenApiResponse(description="No POS with this id"),
        },
    )
    def get(self, request, pos_id):
        try:
            pos = self.get_pos_service().get_by_id(int(pos_id))
        except PosServiceError as exc:
            return domain_error_response(exc)

        return Response(from_domain(pos), status=status.HTTP_200_OK)

    @extend_schema(
        tags=["POS"],
        request=PosDtoSerializer,
        responses={
            200: PosDtoSerializer,
            400: OpenApiResponse(description="Invalid body or path/body id mismatch"),
            404: OpenApiResponse(description="No POS with this id"),
            409: OpenApiResponse(description="Name already taken"),
        },
        description="Replace a point of sale. The body id must equal the path id.",
    )
    def put(self, request, pos_id):
        pos_id = int(pos_id)
        serializer = PosDtoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if serializer.validated_data.get("id") != pos_id:
            return error_response(
                code="INVALID_ARGUMENT",
                message=ID_MISMATCH_MESSAGE,
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            updated = self.upsert(serializer.validated_data)
        except PosServiceError as exc:
            return domain_error_response(exc)

        return Response(updated, status=status.HTTP_200_OK)


class PosFilterView(PosServiceView):
    """
    Name filter (case-insensitive containment).

    Filtering happens in memory over get_all(); fine for a campus-sized
    list, revisit if the table grows.
    """

    @extend_schema(
        tags=["POS"],
        parameters=[
            OpenApiParameter(
                name="name",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Name fragment, matched case-insensitively.",
            ),
        ],
        responses={
            200: PosDtoSerializer(many=True),
            400: OpenApiResponse(description="Missing name parameter"),
            404: OpenApiResponse(description="No POS matches"),
        },
    )
    def get(self, request):
        name = request.query_params.get("name")
        # present but empty is a valid fragment (matches everything)
        if name is None:
            return error_response(
                code="INVALID_ARGUMENT",
                message="Query parameter 'name' is required.",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        logger.info("Filtering POS by name", extra={"search": name})

        needle = name.lower()
        matches = [
            from_domain(pos)
            for pos in self.get_pos_service().get_all()
            if needle in pos.name.lower()
        ]

        if not matches:
            return domain_error_response(
                PosNotFoundError(f"No POS found with name containing '{name}'.")
            )

        logger.info("Found POS by name", extra={"search": name, "count": len(matches)})
        return Response(matches, status=status.HTTP_200_OK)


class PosOsmImportView(PosServiceView):
    @extend_schema(
        tags=["POS"],
        request={"application/json": OpenApiTypes.STR},
        responses={
            201: PosDtoSerializer,
            400: OpenApiResponse(description="Unknown campus or incomplete OSM node"),
            404: OpenApiResponse(description="OSM node does not exist"),
            409: OpenApiResponse(description="Name already taken"),
        },
        description="Create a point of sale from an OpenStreetMap node.",
    )
    def post(self, request, node_id):
        node_id = int(node_id)
        try:
            campus_type = parse_campus_type(request.data)
        except serializers.ValidationError as exc:
            return error_response(
                code="INVALID_ARGUMENT",
                message="; ".join(str(m) for m in exc.detail),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            pos = self.get_pos_service().import_from_osm_node(node_id, campus_type)
        except PosServiceError as exc:
            return domain_error_response(exc)

        return self.created_response(request, from_domain(pos))
