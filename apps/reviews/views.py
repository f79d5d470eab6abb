"""API views for managing reviews."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.api.views import StoreAPIView, parse_id, requester_id

from . import services
from .serializers import (
    ReviewPayloadSerializer,
    ReviewSerializer,
    SpotReviewSerializer,
    UserReviewSerializer,
)

SPOT_ID = 'spotId'
REVIEW_ID = 'reviewId'


class SpotReviewsView(StoreAPIView):
    """Reviews of a spot are public; leaving one requires signing in."""

    @extend_schema(responses=SpotReviewSerializer(many=True))
    def get(self, request, spot_id):  # type: ignore
        reviews = services.list_spot_reviews(self.get_store(), parse_id(spot_id, SPOT_ID))
        return Response({'Reviews': SpotReviewSerializer(reviews, many=True).data})

    @extend_schema(request=ReviewPayloadSerializer, responses={201: ReviewSerializer})
    def post(self, request, spot_id):  # type: ignore
        review = services.create_review(
            self.get_store(), parse_id(spot_id, SPOT_ID), request.user.id, request.data
        )
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class SpotReviewDetailView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(request=ReviewPayloadSerializer, responses=ReviewSerializer)
    def put(self, request, spot_id, review_id):  # type: ignore
        review = services.update_review(
            self.get_store(),
            parse_id(spot_id, SPOT_ID),
            parse_id(review_id, REVIEW_ID),
            requester_id(request),
            request.data,
        )
        return Response(ReviewSerializer(review).data)

    def delete(self, request, spot_id, review_id):  # type: ignore
        services.delete_review(
            self.get_store(),
            parse_id(spot_id, SPOT_ID),
            parse_id(review_id, REVIEW_ID),
            requester_id(request),
        )
        return Response({'message': 'Successfully deleted'})


class CurrentUserReviewsView(StoreAPIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=UserReviewSerializer(many=True))
    def get(self, request):  # type: ignore
        reviews = services.list_user_reviews(self.get_store(), request.user.id)
        return Response({'Reviews': UserReviewSerializer(reviews, many=True).data})
