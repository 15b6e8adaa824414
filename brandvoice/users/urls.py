"""
User authentication URL routes.
"""

from django.urls import path

from .views import AuthMeView

# Auth routes (mounted at /api/auth/)
auth_urlpatterns = [
    path("me/", AuthMeView.as_view(), name="auth-me"),
]
