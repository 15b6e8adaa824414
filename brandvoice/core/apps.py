"""
Django app configuration for brandvoice core.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "brandvoice.core"
    label = "core"
    verbose_name = "Brandvoice Core"
