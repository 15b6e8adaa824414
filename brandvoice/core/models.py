"""
brandvoice canonical domain models.

Scoping hierarchy:
- Organization → has many Brands (and many Memberships, see brandvoice.users)
- Brand → has many Rules
- FeatureFlag is scoped to an Organization, a Brand, or both

Rules are never mutated by the resolution code in brandvoice.core.repository;
writes happen through the admin surface or seeding.
"""

import uuid

from django.db import models

from .enums import (
    EnforcementLevel,
    RuleScope,
    RuleSeverity,
    RuleSource,
    RuleStatus,
    RuleType,
)


# =============================================================================
# ABSTRACT BASE CLASSES
# =============================================================================


class TimestampedModel(models.Model):
    """
    Abstract base class with created_at and updated_at timestamps.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# =============================================================================
# ORGANIZATION
# =============================================================================


class Organization(TimestampedModel):
    """
    Top-level tenant boundary.

    A user may belong to several organizations through Membership.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    locale = models.CharField(max_length=20, default="en-GB")

    class Meta:
        db_table = "organization"
        verbose_name = "Organization"
        verbose_name_plural = "Organizations"

    def __str__(self):
        return self.name


# =============================================================================
# BRAND
# =============================================================================


class Brand(TimestampedModel):
    """
    Brand entity, the owner of a rule set.

    Looked up by (slug, organization) on every brand-scoped request.
    The same slug may exist in several organizations.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.PROTECT,
        related_name="brands",
    )
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "brand"
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "slug"],
                name="uniq_org_brand_slug",
            ),
        ]
        indexes = [
            models.Index(fields=["slug", "created_at"], name="brand_slug_2c0c2b_idx"),
        ]

    def __str__(self):
        return self.name


# =============================================================================
# RULE
# =============================================================================


class Rule(TimestampedModel):
    """
    A single content rule belonging to one Brand.

    priority orders application and display: ascending, so 0 wins over 1.
    Equal priorities keep insertion order (created_at).

    detectors is a list of {"kind", "pattern", "case_sensitive",
    "word_boundary"} dicts, evaluated by brandvoice.rules.evaluator.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey(
        Brand,
        on_delete=models.CASCADE,
        related_name="rules",
    )
    name = models.CharField(max_length=255)
    key = models.CharField(max_length=255, blank=True)
    category = models.CharField(max_length=100, blank=True)
    type = models.CharField(
        max_length=50,
        choices=RuleType.choices,
        default=RuleType.CUSTOM,
    )
    status = models.CharField(
        max_length=20,
        choices=RuleStatus.choices,
        default=RuleStatus.ACTIVE,
    )
    scope = models.CharField(
        max_length=20,
        choices=RuleScope.choices,
        default=RuleScope.GLOBAL,
    )
    severity = models.CharField(
        max_length=20,
        choices=RuleSeverity.choices,
        default=RuleSeverity.MINOR,
    )
    enforcement = models.CharField(
        max_length=20,
        choices=EnforcementLevel.choices,
        default=EnforcementLevel.SUGGEST,
    )
    description = models.TextField(blank=True)
    surfaces = models.JSONField(default=list, blank=True)
    channels = models.JSONField(default=list, blank=True)
    suggestions = models.JSONField(default=list, blank=True)
    detectors = models.JSONField(default=list, blank=True)
    finding_template = models.TextField(blank=True)
    rewrite_template = models.TextField(blank=True)
    value = models.JSONField(null=True, blank=True)
    priority = models.IntegerField(default=0)
    source = models.CharField(
        max_length=20,
        choices=RuleSource.choices,
        default=RuleSource.MANUAL,
    )

    class Meta:
        db_table = "rule"
        indexes = [
            models.Index(
                fields=["brand", "status", "priority"],
                name="rule_brand_i_5d1a7e_idx",
            ),
            models.Index(
                fields=["brand", "category", "priority"],
                name="rule_brand_i_9f3b21_idx",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.status})"


# =============================================================================
# FEATURE FLAGS
# =============================================================================


class FeatureFlag(TimestampedModel):
    """
    Per-organization or per-brand feature toggle.

    Resolution order lives in brandvoice.core.feature_flags:
    brand flag, then organization flag, then disabled.

    At most one row exists per (organization, brand, key). Organization-level
    flags have no brand, and NULL never collides in a plain unique index,
    so each shape gets its own partial constraint.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="feature_flags",
        null=True,
        blank=True,
    )
    brand = models.ForeignKey(
        Brand,
        on_delete=models.CASCADE,
        related_name="feature_flags",
        null=True,
        blank=True,
    )
    key = models.CharField(max_length=100)
    enabled = models.BooleanField(default=False)

    class Meta:
        db_table = "feature_flag"
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "brand", "key"],
                condition=models.Q(brand__isnull=False),
                name="uniq_brand_feature_flag",
            ),
            models.UniqueConstraint(
                fields=["organization", "key"],
                condition=models.Q(brand__isnull=True),
                name="uniq_org_feature_flag",
            ),
        ]
        indexes = [
            models.Index(
                fields=["key", "organization", "brand"],
                name="feature_fla_key_7a4e10_idx",
            ),
        ]

    def __str__(self):
        return f"{self.key}={'on' if self.enabled else 'off'}"
