"""
Rule Repository.

Read-only brand and rule resolution over the ORM.

Absence is always a value (None, NotFound, or an empty list), never an
exception: a user following a link to a deleted brand is a normal outcome.
Identifiers are not validated beyond parsing; a malformed id simply matches
nothing. Database errors (django.db.DatabaseError) propagate to the caller
unmodified and are never retried here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Union
from uuid import UUID

from django.db.models import Prefetch

from brandvoice.core.enums import RuleStatus
from brandvoice.core.models import Brand, Rule

logger = logging.getLogger(__name__)

# Equal priorities keep insertion order.
RULE_ORDERING = ("priority", "created_at")


# =============================================================================
# LOOKUP RESULT
# =============================================================================


@dataclass(frozen=True)
class Found:
    """
    A brand matched.

    organization_id is the candidate org that matched, or None when the
    match came from the unscoped fallback.
    """

    brand_id: UUID
    organization_id: UUID | None = None


@dataclass(frozen=True)
class NotFound:
    """No brand matched the slug in any scope."""


NOT_FOUND = NotFound()

BrandLookup = Union[Found, NotFound]


# =============================================================================
# HELPERS
# =============================================================================


def _parse_uuid(value) -> UUID | None:
    """Parse a string (or UUID) to UUID, returning None on failure."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        return None


# =============================================================================
# BRANDS
# =============================================================================


def find_brand_by_slug(slug: str, org_id=None) -> Brand | None:
    """
    Return the first brand with this slug, optionally scoped to one org.

    A falsy org_id means "any organization". A non-UUID org_id matches
    nothing.
    """
    queryset = Brand.objects.filter(slug=slug)

    if org_id:
        parsed_org_id = _parse_uuid(org_id)
        if parsed_org_id is None:
            return None
        queryset = queryset.filter(organization_id=parsed_org_id)

    return queryset.order_by("created_at").first()


def resolve_brand(slug: str, candidate_org_ids: Iterable) -> BrandLookup:
    """
    Resolve a brand slug against the caller's organizations.

    Each candidate org is tried in order and the first scoped match wins.
    Only when no candidate org owns the slug is an unscoped lookup made, so
    a same-slug brand in a foreign org can never shadow one of the caller's.

    Args:
        slug: Brand slug from the route
        candidate_org_ids: The caller's organization ids, most preferred first

    Returns:
        Found(brand_id, organization_id) or NOT_FOUND
    """
    for org_id in candidate_org_ids:
        brand = find_brand_by_slug(slug, org_id)
        if brand is not None:
            logger.debug("Resolved brand slug=%s in org=%s", slug, org_id)
            return Found(brand_id=brand.id, organization_id=brand.organization_id)

    brand = find_brand_by_slug(slug)
    if brand is not None:
        logger.debug("Resolved brand slug=%s via unscoped fallback", slug)
        return Found(brand_id=brand.id)

    logger.debug("Brand slug=%s not found", slug)
    return NOT_FOUND


def resolve_brand_id_from_slug(slug: str, candidate_org_ids: Iterable) -> UUID | None:
    """Brand id for slug (see resolve_brand), or None."""
    result = resolve_brand(slug, candidate_org_ids)
    if isinstance(result, Found):
        return result.brand_id
    return None


# =============================================================================
# RULES
# =============================================================================


def get_brand_with_rules(brand_id) -> Brand | None:
    """
    Return the brand with its ACTIVE rules attached as `active_rules`.

    active_rules is a list ordered by ascending priority. Draft and
    deprecated rules are excluded. Returns None for an unknown or
    malformed brand id.
    """
    parsed_id = _parse_uuid(brand_id)
    if parsed_id is None:
        return None

    active_rules = Rule.objects.filter(status=RuleStatus.ACTIVE).order_by(*RULE_ORDERING)
    return (
        Brand.objects.filter(id=parsed_id)
        .prefetch_related(Prefetch("rules", queryset=active_rules, to_attr="active_rules"))
        .first()
    )


def list_rule_instances(brand_id, category: str | None = None) -> list[Rule]:
    """
    Return every rule of a brand, optionally limited to one category.

    Unlike get_brand_with_rules no status filter is applied: the rule
    editors need drafts and deprecated rules too.
    """
    parsed_id = _parse_uuid(brand_id)
    if parsed_id is None:
        return []

    queryset = Rule.objects.filter(brand_id=parsed_id)
    if category:
        queryset = queryset.filter(category=category)

    return list(queryset.order_by(*RULE_ORDERING))
