"""
JWT authentication middleware.

Authentication is delegated to an external provider that issues HS256 JWTs.
This middleware only turns a valid token into request context:

1. Extract JWT from Authorization header (Bearer token)
2. Decode and validate it with AUTH_JWT_SECRET / AUTH_JWT_AUDIENCE
3. Look up or create the corresponding User
4. Attach request.brandvoice_user and request.org_ids (membership org ids,
   oldest membership first) for brand resolution

Excluded paths (no auth required):
- /health/ and /api/health
- /admin/ when DEBUG is on (Django session auth applies instead)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jwt
from django.conf import settings
from django.http import JsonResponse

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


# Paths that don't require authentication
AUTH_EXEMPT_PATHS = [
    "/health/",
    "/api/health",
]

# Paths that are exempt in development only
DEV_EXEMPT_PATHS = [
    "/admin/",
]


class AuthenticationError(Exception):
    """Raised when a bearer token cannot be turned into a user."""


class JWTAuthMiddleware:
    """
    Authenticate requests using provider-issued JWTs.

    Returns 401 for unauthenticated requests to protected endpoints.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.brandvoice_user = None
        request.org_ids = []

        if self._is_exempt_path(request.path):
            return self.get_response(request)

        # Dev mode: no user, brand resolution falls back to unscoped lookups
        if getattr(settings, "AUTH_DISABLED", False):
            return self.get_response(request)

        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return self._unauthorized_response("Missing or invalid Authorization header")

        token = auth_header[len("Bearer "):]

        try:
            user = self._authenticate_token(token)
        except AuthenticationError as e:
            logger.warning("Authentication failed: %s", str(e))
            return self._unauthorized_response(str(e))

        request.brandvoice_user = user
        request.org_ids = user.organization_ids()
        return self.get_response(request)

    def _is_exempt_path(self, path: str) -> bool:
        if any(path.startswith(exempt) for exempt in AUTH_EXEMPT_PATHS):
            return True
        return settings.DEBUG and any(path.startswith(exempt) for exempt in DEV_EXEMPT_PATHS)

    def _authenticate_token(self, token: str):
        """
        Validate the JWT and return the corresponding User.

        Raises AuthenticationError if validation fails.
        """
        jwt_secret = getattr(settings, "AUTH_JWT_SECRET", "")
        if not jwt_secret:
            raise AuthenticationError("AUTH_JWT_SECRET not configured")

        try:
            payload = jwt.decode(
                token,
                jwt_secret,
                algorithms=["HS256"],
                audience=getattr(settings, "AUTH_JWT_AUDIENCE", "authenticated"),
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"Invalid token: {e}")

        auth_uid = payload.get("sub")
        email = payload.get("email")

        if not auth_uid:
            raise AuthenticationError("Token missing 'sub' claim")

        from brandvoice.users.models import User

        user, created = User.objects.get_or_create(
            auth_uid=auth_uid,
            defaults={"email": email or f"{auth_uid}@unknown.local"},
        )

        if created:
            logger.info("Created new user from auth provider: %s", user.email)
        elif email and user.email != email:
            user.email = email
            user.save(update_fields=["email", "updated_at"])

        if not user.is_active:
            raise AuthenticationError("User is inactive")

        return user

    def _unauthorized_response(self, message: str) -> JsonResponse:
        return JsonResponse(
            {"error": {"code": "unauthorized", "message": message}},
            status=401,
        )


def get_current_user(request: HttpRequest):
    """
    Get the authenticated user from the request.

    Returns None if not authenticated or auth is disabled.
    """
    return getattr(request, "brandvoice_user", None)


def get_org_ids(request: HttpRequest) -> list[str]:
    """Candidate organization ids for brand lookups on this request."""
    return list(getattr(request, "org_ids", []))

