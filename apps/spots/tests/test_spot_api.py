"""Integration tests for spot API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.reviews.models import Review
from apps.spots.models import Spot, SpotImage
from apps.users.models import User


def make_spot(owner: User, **overrides) -> Spot:
    fields = {
        "address": "123 Disney Lane",
        "city": "San Francisco",
        "state": "California",
        "country": "United States of America",
        "lat": Decimal("37.764536"),
        "lng": Decimal("-122.473088"),
        "name": "App Academy",
        "description": "Place where web developers are created",
        "price": Decimal("123.00"),
    }
    fields.update(overrides)
    return Spot.objects.create(owner=owner, **fields)


class SpotAPITestCase(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            first_name="Demo",
            last_name="Owner",
        )
        self.guest = User.objects.create_user(
            email="guest@example.com",
            password="GuestPass123",
            first_name="Guest",
            last_name="User",
        )
        self.list_url = reverse("spot-list")

    def payload(self, **overrides) -> dict:
        data = {
            "address": "123 Disney Lane",
            "city": "San Francisco",
            "state": "California",
            "country": "United States of America",
            "lat": 37.7645358,
            "lng": -122.4730327,
            "name": "App Academy",
            "description": "Place where web developers are created",
            "price": 123,
        }
        data.update(overrides)
        return data


class SpotListTests(SpotAPITestCase):
    def test_empty_listing_uses_default_page_window(self) -> None:
        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"Spots": [], "page": 1, "size": 20})

    def test_listing_includes_rating_and_preview(self) -> None:
        spot = make_spot(self.owner)
        SpotImage.objects.create(spot=spot, url="https://img.example/a.png", preview=False)
        SpotImage.objects.create(spot=spot, url="https://img.example/b.png", preview=True)
        SpotImage.objects.create(spot=spot, url="https://img.example/c.png", preview=True)
        Review.objects.create(spot=spot, user=self.guest, review="Great", stars=5)
        Review.objects.create(spot=spot, user=self.owner, review="Fine", stars=4)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        [entry] = response.data["Spots"]
        self.assertEqual(entry["id"], spot.id)
        self.assertEqual(entry["ownerId"], self.owner.id)
        self.assertEqual(entry["avgRating"], 4.5)
        self.assertEqual(entry["previewImage"], "https://img.example/b.png")
        self.assertEqual(entry["price"], 123.0)

    def test_spot_without_reviews_or_preview_has_nulls(self) -> None:
        make_spot(self.owner)

        response = self.client.get(self.list_url)

        [entry] = response.data["Spots"]
        self.assertIsNone(entry["avgRating"])
        self.assertIsNone(entry["previewImage"])

    def test_pagination_orders_by_id(self) -> None:
        spots = [make_spot(self.owner, name=f"Spot {index}") for index in range(5)]

        response = self.client.get(self.list_url, {"page": 2, "size": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([entry["id"] for entry in response.data["Spots"]], [spots[2].id, spots[3].id])
        self.assertEqual(response.data["page"], 2)
        self.assertEqual(response.data["size"], 2)

    def test_range_filters_form_closed_intervals(self) -> None:
        cheap = make_spot(self.owner, price=Decimal("50.00"), lat=Decimal("10"))
        make_spot(self.owner, price=Decimal("500.00"), lat=Decimal("10"))
        make_spot(self.owner, price=Decimal("60.00"), lat=Decimal("-10"))

        response = self.client.get(
            self.list_url,
            {"minPrice": "50", "maxPrice": "100", "minLat": "10", "maxLat": "10"},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([entry["id"] for entry in response.data["Spots"]], [cheap.id])

    def test_invalid_query_reports_every_parameter(self) -> None:
        response = self.client.get(
            self.list_url,
            {"page": 0, "size": 25, "minLat": 100, "maxLng": "east", "minPrice": -1},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Bad Request")
        self.assertEqual(
            response.data["errors"],
            {
                "page": "Page must be greater than or equal to 1",
                "size": "Size must be between 1 and 20",
                "minLat": "Minimum latitude is invalid",
                "maxLng": "Maximum longitude is invalid",
                "minPrice": "Minimum price must be greater than or equal to 0",
            },
        )

    def test_size_over_limit_is_rejected(self) -> None:
        response = self.client.get(self.list_url, {"size": 25})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"], {"size": "Size must be between 1 and 20"})

    def test_current_user_spots(self) -> None:
        mine = make_spot(self.owner)
        make_spot(self.guest)
        Review.objects.create(spot=mine, user=self.guest, review="Nice", stars=3)
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("spot-current"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        [entry] = response.data["Spots"]
        self.assertEqual(entry["id"], mine.id)
        self.assertEqual(entry["avgRating"], 3.0)

    def test_current_user_spots_requires_authentication(self) -> None:
        response = self.client.get(reverse("spot-current"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Authentication required"})


class SpotDetailTests(SpotAPITestCase):
    def test_detail_includes_images_owner_and_rounded_rating(self) -> None:
        spot = make_spot(self.owner)
        image = SpotImage.objects.create(spot=spot, url="https://img.example/a.png", preview=True)
        Review.objects.create(spot=spot, user=self.guest, review="Great", stars=4)

        response = self.client.get(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["numReviews"], 1)
        self.assertEqual(response.data["avgStarRating"], "4.0")
        self.assertEqual(
            response.data["SpotImages"],
            [{"id": image.id, "url": "https://img.example/a.png", "preview": True}],
        )
        self.assertEqual(
            response.data["Owner"],
            {"id": self.owner.id, "firstName": "Demo", "lastName": "Owner"},
        )

    def test_detail_rating_rounds_half_up(self) -> None:
        spot = make_spot(self.owner)
        for index, stars in enumerate([4, 4, 4, 5]):
            reviewer = User.objects.create_user(
                email=f"reviewer{index}@example.com",
                password="ReviewerPass123",
                first_name="Reviewer",
                last_name=str(index),
            )
            Review.objects.create(spot=spot, user=reviewer, review="Nice", stars=stars)

        response = self.client.get(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["numReviews"], 4)
        self.assertEqual(response.data["avgStarRating"], "4.3")

    def test_unexpected_failure_is_reported_as_server_error(self) -> None:
        spot = make_spot(self.owner)

        with mock.patch(
            "apps.spots.views.services.get_spot_detail",
            side_effect=RuntimeError("store offline"),
        ):
            response = self.client.get(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"message": "Server Error", "error": "store offline"})

    def test_detail_without_reviews(self) -> None:
        spot = make_spot(self.owner)

        response = self.client.get(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.data["numReviews"], 0)
        self.assertIsNone(response.data["avgStarRating"])
        self.assertEqual(response.data["SpotImages"], [])

    def test_unknown_spot(self) -> None:
        response = self.client.get(reverse("spot-detail", args=[999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found"})

    def test_non_integer_spot_id(self) -> None:
        response = self.client.get(reverse("spot-detail", args=["abc"]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Invalid spotId. It must be a valid integer."})


class SpotWriteTests(SpotAPITestCase):
    def test_create_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        spot = Spot.objects.get()
        self.assertEqual(spot.owner, self.owner)
        self.assertEqual(spot.lat, Decimal("37.764536"))
        self.assertEqual(response.data["ownerId"], self.owner.id)
        self.assertEqual(response.data["price"], 123.0)
        self.assertIn("createdAt", response.data)

    def test_create_spot_requires_authentication(self) -> None:
        response = self.client.post(self.list_url, self.payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Spot.objects.exists())

    def test_create_spot_reports_all_validation_errors(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = {
            "address": "",
            "lat": 91,
            "lng": -181,
            "name": "x" * 51,
            "price": 0,
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Validation Error")
        self.assertEqual(
            response.data["errors"],
            {
                "address": "Street address is required",
                "city": "City is required",
                "state": "State is required",
                "country": "Country is required",
                "lat": "Latitude must be within -90 and 90",
                "lng": "Longitude must be within -180 and 180",
                "name": "Name must be less than 50 characters",
                "description": "Description is required",
                "price": "Price per day must be a positive number",
            },
        )
        self.assertFalse(Spot.objects.exists())

    def test_owner_can_update_spot(self) -> None:
        spot = make_spot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.put(
            reverse("spot-detail", args=[spot.id]),
            self.payload(name="Renamed", price=99.5),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        spot.refresh_from_db()
        self.assertEqual(spot.name, "Renamed")
        self.assertEqual(spot.price, Decimal("99.50"))
        self.assertEqual(response.data["name"], "Renamed")

    def test_non_owner_update_is_forbidden(self) -> None:
        spot = make_spot(self.owner)
        updated_at = spot.updated_at
        self.client.force_authenticate(self.guest)

        response = self.client.put(
            reverse("spot-detail", args=[spot.id]),
            self.payload(name="Hijacked", price=1),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {"message": "Forbidden"})
        spot.refresh_from_db()
        self.assertEqual(spot.name, "App Academy")
        self.assertEqual(spot.price, Decimal("123.00"))
        self.assertEqual(spot.lat, Decimal("37.764536"))
        self.assertEqual(spot.updated_at, updated_at)

    def test_update_checks_existence_before_ownership(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.put(reverse("spot-detail", args=[999]), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_validates_payload(self) -> None:
        spot = make_spot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.put(
            reverse("spot-detail", args=[spot.id]),
            self.payload(lat=-90.5),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"], {"lat": "Latitude must be within -90 and 90"})

    def test_owner_delete_removes_children(self) -> None:
        spot = make_spot(self.owner)
        SpotImage.objects.create(spot=spot, url="https://img.example/a.png", preview=True)
        Review.objects.create(spot=spot, user=self.guest, review="Great", stars=5)
        Booking.objects.create(spot=spot, user=self.guest, start_date=date(2030, 1, 1), end_date=date(2030, 1, 5))
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"message": "Successfully deleted"})
        self.assertFalse(Spot.objects.exists())
        self.assertFalse(SpotImage.objects.exists())
        self.assertFalse(Review.objects.exists())
        self.assertFalse(Booking.objects.exists())

    def test_non_owner_delete_looks_like_missing_spot(self) -> None:
        spot = make_spot(self.owner)
        self.client.force_authenticate(self.guest)

        response = self.client.delete(reverse("spot-detail", args=[spot.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found"})
        self.assertTrue(Spot.objects.filter(pk=spot.id).exists())


class SpotImageTests(SpotAPITestCase):
    def test_owner_adds_image(self) -> None:
        spot = make_spot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse("spot-images", args=[spot.id]),
            {"url": "https://img.example/new.png", "preview": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        image = SpotImage.objects.get()
        self.assertEqual(response.data, {"id": image.id, "url": "https://img.example/new.png", "preview": True})

    def test_non_owner_cannot_add_image(self) -> None:
        spot = make_spot(self.owner)
        updated_at = spot.updated_at
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("spot-images", args=[spot.id]),
            {"url": "https://img.example/new.png", "preview": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(SpotImage.objects.exists())
        spot.refresh_from_db()
        self.assertEqual(spot.updated_at, updated_at)
        self.assertEqual(spot.name, "App Academy")

    def test_image_for_unknown_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse("spot-images", args=[999]),
            {"url": "https://img.example/new.png"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"message": "Spot couldn't be found"})
