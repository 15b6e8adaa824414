"""Django admin configuration for user models."""

from django.contrib import admin

from .models import Membership, User


class MembershipInline(admin.TabularInline):
    model = Membership
    extra = 0


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["email", "display_name", "is_active", "created_at"]
    search_fields = ["email", "auth_uid"]
    inlines = [MembershipInline]
