"""
Users app configuration.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "brandvoice.users"
    label = "users"
    verbose_name = "Users"
