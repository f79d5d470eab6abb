"""API views for spots and spot images."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.views import StoreAPIView, parse_id, requester_id

from . import services
from .filters import ListingQuery
from .serializers import (
    SpotDetailSerializer,
    SpotImagePayloadSerializer,
    SpotImageSerializer,
    SpotPayloadSerializer,
    SpotSerializer,
    SpotSummarySerializer,
)

SPOT_ID = "spotId"

LISTING_PARAMETERS = [
    OpenApiParameter("page", int, description="Page number, starting at 1"),
    OpenApiParameter("size", int, description="Spots per page, 1 to 20"),
    OpenApiParameter("minLat", float),
    OpenApiParameter("maxLat", float),
    OpenApiParameter("minLng", float),
    OpenApiParameter("maxLng", float),
    OpenApiParameter("minPrice", float),
    OpenApiParameter("maxPrice", float),
]


class SpotListView(StoreAPIView):
    """Public spot listing and spot creation."""

    @extend_schema(parameters=LISTING_PARAMETERS, responses=SpotSummarySerializer(many=True))
    def get(self, request):  # type: ignore
        query = ListingQuery.from_params(request.query_params)
        spots = services.list_spots(self.get_store(), query)
        return Response({
            "Spots": SpotSummarySerializer(spots, many=True).data,
            "page": query.page,
            "size": query.size,
        })

    @extend_schema(request=SpotPayloadSerializer, responses={201: SpotSerializer})
    def post(self, request):  # type: ignore
        spot = services.create_spot(self.get_store(), request.user.id, request.data)
        return Response(SpotSerializer(spot).data, status=status.HTTP_201_CREATED)


class CurrentUserSpotsView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=SpotSummarySerializer(many=True))
    def get(self, request):  # type: ignore
        spots = services.list_owned_spots(self.get_store(), request.user.id)
        return Response({"Spots": SpotSummarySerializer(spots, many=True).data})


class SpotDetailView(StoreAPIView):

    @extend_schema(responses=SpotDetailSerializer)
    def get(self, request, spot_id):  # type: ignore
        spot = services.get_spot_detail(self.get_store(), parse_id(spot_id, SPOT_ID))
        return Response(SpotDetailSerializer(spot).data)

    @extend_schema(request=SpotPayloadSerializer, responses=SpotSerializer)
    def put(self, request, spot_id):  # type: ignore
        spot = services.update_spot(
            self.get_store(), parse_id(spot_id, SPOT_ID), requester_id(request), request.data
        )
        return Response(SpotSerializer(spot).data)

    def delete(self, request, spot_id):  # type: ignore
        services.delete_spot(self.get_store(), parse_id(spot_id, SPOT_ID), requester_id(request))
        return Response({"message": "Successfully deleted"})


class SpotImageView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(request=SpotImagePayloadSerializer, responses={201: SpotImageSerializer})
    def post(self, request, spot_id):  # type: ignore
        image = services.add_spot_image(
            self.get_store(), parse_id(spot_id, SPOT_ID), requester_id(request), request.data
        )
        return Response(SpotImageSerializer(image).data, status=status.HTTP_201_CREATED)
