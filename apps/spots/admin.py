"""Admin registration for spots and their images."""

from __future__ import annotations

from django.contrib import admin

from .models import Spot, SpotImage


class SpotImageInline(admin.TabularInline):
    model = SpotImage
    extra = 0


@admin.register(Spot)
class SpotAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "city", "country", "price", "created_at")
    list_filter = ("country", "state")
    search_fields = ("name", "city", "owner__email")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at", "updated_at")
    inlines = [SpotImageInline]
