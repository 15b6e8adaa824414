"""Django admin configuration for core models."""

from django.contrib import admin

from .models import Brand, FeatureFlag, Organization, Rule


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "locale", "created_at"]
    search_fields = ["name", "slug"]


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "organization", "created_at"]
    list_filter = ["organization"]
    search_fields = ["name", "slug"]


@admin.register(Rule)
class RuleAdmin(admin.ModelAdmin):
    """Rules are listed in resolution order within each brand."""

    list_display = ["name", "brand", "category", "status", "priority", "severity"]
    list_filter = ["status", "category", "type", "severity"]
    search_fields = ["name", "key"]
    ordering = ["brand", "priority", "created_at"]


@admin.register(FeatureFlag)
class FeatureFlagAdmin(admin.ModelAdmin):
    list_display = ["key", "organization", "brand", "enabled"]
    list_filter = ["key", "enabled"]
