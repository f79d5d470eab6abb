"""Admin registration for reviews."""

from __future__ import annotations

from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "spot", "user", "stars", "created_at")
    list_filter = ("stars",)
    search_fields = ("spot__name", "user__email", "review")
    raw_id_fields = ("spot", "user")
