"""
Feature flag resolution.

A flag can be set for a brand (within its organization) or for a whole
organization. Lookup order is brand, then organization; a flag that is set
nowhere is disabled.
"""

from __future__ import annotations

import logging

from brandvoice.core.models import FeatureFlag

logger = logging.getLogger(__name__)


class FeatureFlags:
    """Known flag keys."""

    UNLIMITED_REWRITES = "unlimited_rewrites"
    CUSTOM_RULES = "custom_rules"
    RULE_EXPORT = "rule_export"
    MULTIPLE_BRANDS = "multiple_brands"
    TEAM_MEMBERS = "team_members"
    RULE_VERSIONING = "rule_versioning"


def check_feature_flag(org_id, brand_id, key: str) -> bool:
    """
    Return whether `key` is enabled for the brand / organization.

    Args:
        org_id: Organization id, or None
        brand_id: Brand id, or None
        key: Flag key, e.g. FeatureFlags.CUSTOM_RULES
    """
    if brand_id:
        brand_flag = FeatureFlag.objects.filter(
            organization_id=org_id,
            brand_id=brand_id,
            key=key,
        ).first()
        if brand_flag is not None:
            return brand_flag.enabled

    if org_id:
        org_flag = FeatureFlag.objects.filter(
            organization_id=org_id,
            brand__isnull=True,
            key=key,
        ).first()
        if org_flag is not None:
            return org_flag.enabled

    return False


def set_feature_flag(org_id, brand_id, key: str, enabled: bool) -> FeatureFlag:
    """Create or update the flag for exactly this (org, brand, key)."""
    flag, created = FeatureFlag.objects.update_or_create(
        organization_id=org_id,
        brand_id=brand_id,
        key=key,
        defaults={"enabled": enabled},
    )
    logger.info(
        "Feature flag %s %s: key=%s enabled=%s org=%s brand=%s",
        "created" if created else "updated",
        flag.id,
        key,
        enabled,
        org_id,
        brand_id,
    )
    return flag
