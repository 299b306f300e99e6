"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Property, PropertyFeature, PropertyImage


class PropertyImageInline(admin.TabularInline):
    model = PropertyImage
    extra = 0
    fields = ("image_url", "display_order", "is_primary")
    ordering = ("display_order",)


class PropertyFeatureInline(admin.TabularInline):
    model = PropertyFeature
    extra = 0
    fields = ("feature_name", "description", "position")
    ordering = ("position",)


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "status",
        "price",
        "agent_id",
        "city_id",
        "is_featured",
        "created_at",
    )
    list_filter = ("status", "is_featured")
    search_fields = ("title", "address")
    inlines = (PropertyImageInline, PropertyFeatureInline)
    readonly_fields = ("id", "created_at", "updated_at")
