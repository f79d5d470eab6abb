"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "email": "guest@example.com",
            "firstName": "Guest",
            "lastName": "User",
            "password": "StrongPass123",
            "password_confirm": "StrongPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("access", response.data["tokens"])
        self.assertEqual(response.data["user"]["email"], payload["email"])
        self.assertEqual(response.data["user"]["firstName"], "Guest")
        self.assertTrue(User.objects.filter(email=payload["email"]).exists())

    def test_register_rejects_mismatched_passwords(self) -> None:
        payload = {
            "email": "guest@example.com",
            "firstName": "Guest",
            "lastName": "User",
            "password": "StrongPass123",
            "password_confirm": "OtherPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Validation Error")
        self.assertIn("password_confirm", response.data["errors"])
        self.assertFalse(User.objects.exists())

    def test_login_and_use_access_token(self) -> None:
        User.objects.create_user(
            email="host@example.com",
            password="CorrectPassword1",
            first_name="Host",
            last_name="User",
        )

        response = self.client.post(
            reverse("auth:login"),
            {"credential": "host@example.com", "password": "CorrectPassword1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['tokens']['access']}")
        session = self.client.get(reverse("auth:session"))
        self.assertEqual(session.status_code, status.HTTP_200_OK, session.data)
        self.assertEqual(session.data["user"]["email"], "host@example.com")

    def test_login_with_wrong_password(self) -> None:
        User.objects.create_user(email="host@example.com", password="CorrectPassword1")

        response = self.client.post(
            reverse("auth:login"),
            {"credential": "host@example.com", "password": "wrong"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["errors"], {"credential": "Invalid credentials"})

    def test_session_requires_authentication(self) -> None:
        response = self.client.get(reverse("auth:session"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "Authentication required"})

    def test_refresh_token(self) -> None:
        user = User.objects.create_user(email="host@example.com", password="CorrectPassword1")
        login = self.client.post(
            reverse("auth:login"),
            {"credential": user.email, "password": "CorrectPassword1"},
            format="json",
        )

        response = self.client.post(
            reverse("auth:token_refresh"),
            {"refresh": login.data["tokens"]["refresh"]},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIn("access", response.data)
