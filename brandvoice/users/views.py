"""
User API views.

- /api/auth/me/ - current user and organization memberships
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings
from django.http import JsonResponse
from django.views import View

from brandvoice.middleware.auth import get_current_user
from brandvoice.users.models import User

if TYPE_CHECKING:
    from django.http import HttpRequest

logger = logging.getLogger(__name__)


class AuthMeView(View):
    """
    Get current authenticated user info.

    GET /api/auth/me/

    Memberships are listed oldest first, the same order brand slugs are
    resolved in.
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        user = get_current_user(request)

        if user is None:
            if getattr(settings, "AUTH_DISABLED", False):
                return JsonResponse({
                    "authenticated": False,
                    "user": None,
                    "auth_disabled": True,
                })
            return JsonResponse(
                {"error": {"code": "unauthorized", "message": "Authentication required"}},
                status=401,
            )

        return JsonResponse({
            "authenticated": True,
            "user": _user_to_dict(user),
            "auth_disabled": False,
        })


def _user_to_dict(user: User) -> dict:
    memberships = user.memberships.select_related("organization").order_by("created_at")
    return {
        "id": str(user.id),
        "email": user.email,
        "display_name": user.display_name,
        "memberships": [
            {
                "organization_id": str(m.organization_id),
                "organization_slug": m.organization.slug,
                "role": m.role,
            }
            for m in memberships
        ],
    }
