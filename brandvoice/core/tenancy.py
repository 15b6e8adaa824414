"""
Tenancy service.

Creates organizations and brands during onboarding and lists what a user
can see. Organization slugs are globally unique; brand slugs are unique per
organization. A conflicting slug raises SlugConflictError, whether it is
caught by the pre-check or by the database constraint.
"""

from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import Count, Prefetch

from brandvoice.core.enums import MembershipRole
from brandvoice.core.models import Brand, Organization
from brandvoice.users.models import Membership, User

logger = logging.getLogger(__name__)


class TenancyError(Exception):
    """Base exception for tenancy service errors."""

    pass


class SlugConflictError(TenancyError):
    """Raised when the requested slug is already taken in its scope."""

    pass


# =============================================================================
# ORGANIZATIONS
# =============================================================================


def create_organization(
    user: User,
    name: str,
    slug: str,
    locale: str = "en-GB",
) -> Organization:
    """
    Create an organization with `user` as its owner.

    The organization and the owner membership are written together or not
    at all.

    Raises:
        SlugConflictError: If another organization already uses slug
    """
    if Organization.objects.filter(slug=slug).exists():
        raise SlugConflictError(f"Organisation slug already exists: {slug}")

    try:
        with transaction.atomic():
            org = Organization.objects.create(name=name, slug=slug, locale=locale)
            Membership.objects.create(
                user=user,
                organization=org,
                role=MembershipRole.OWNER,
            )
    except IntegrityError:
        raise SlugConflictError(f"Organisation slug already exists: {slug}")

    logger.info("Created organization %s (slug=%s) owner=%s", org.id, slug, user.id)
    return org


def list_memberships(user: User) -> list[Membership]:
    """
    The user's memberships, oldest first, each with its organization,
    the organization's brands and `member_count` loaded.
    """
    brands = Brand.objects.order_by("created_at")
    return list(
        Membership.objects.filter(user=user)
        .select_related("organization")
        .prefetch_related(Prefetch("organization__brands", queryset=brands))
        .annotate(member_count=Count("organization__memberships"))
        .order_by("created_at")
    )


# =============================================================================
# BRANDS
# =============================================================================


def create_brand(
    organization_id: UUID,
    name: str,
    slug: str,
    description: str = "",
) -> Brand:
    """
    Create a brand in an organization.

    Access to the organization is the caller's concern.

    Raises:
        SlugConflictError: If the organization already has a brand with slug
    """
    if Brand.objects.filter(organization_id=organization_id, slug=slug).exists():
        raise SlugConflictError(f"Brand slug already exists in this organisation: {slug}")

    try:
        with transaction.atomic():
            brand = Brand.objects.create(
                organization_id=organization_id,
                name=name,
                slug=slug,
                description=description,
            )
    except IntegrityError:
        raise SlugConflictError(f"Brand slug already exists in this organisation: {slug}")

    logger.info("Created brand %s (slug=%s) in org=%s", brand.id, slug, organization_id)
    return brand


def list_brands(org_ids: Iterable, organization_id: UUID | None = None) -> list[Brand]:
    """
    Brands in the given organizations, oldest first.

    organization_id narrows the result to one of org_ids; an organization
    outside org_ids yields nothing.
    """
    allowed = [str(org_id) for org_id in org_ids]
    if organization_id is not None:
        if str(organization_id) not in allowed:
            return []
        allowed = [str(organization_id)]

    return list(
        Brand.objects.filter(organization_id__in=allowed).order_by("created_at")
    )
