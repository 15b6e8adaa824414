"""
brandvoice API DTOs.

These Pydantic v2 BaseModels define the request/response shapes for the
JSON API. They are contracts with the web frontend: fields cannot be renamed
or removed without coordinating the UI.
"""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

# Django TextChoices inherit from str and Enum, so Pydantic validates them
# directly and enum values never drift between DB and API.
from brandvoice.core.enums import (
    EnforcementLevel,
    MembershipRole,
    RuleScope,
    RuleSeverity,
    RuleStatus,
    RuleType,
)


SLUG_PATTERN = r"^[a-z0-9-]+$"


# =============================================================================
# BRAND & RULE DTOs
# =============================================================================


class BrandDTO(BaseModel):
    id: UUID
    organization_id: UUID
    name: str
    slug: str
    description: str = ""
    created_at: datetime


class CreateBrandRequestDTO(BaseModel):
    organization_id: UUID
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=50, pattern=SLUG_PATTERN)
    description: str = ""


class RuleDTO(BaseModel):
    """A brand rule as shown in the rule editors."""
    id: UUID
    brand_id: UUID
    name: str
    key: str = ""
    category: str = ""
    type: RuleType
    status: RuleStatus
    scope: RuleScope
    severity: RuleSeverity
    enforcement: EnforcementLevel
    description: str = ""
    surfaces: list[str] = Field(default_factory=list)
    channels: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    value: Any = None
    priority: int = 0


class BrandWithRulesDTO(BaseModel):
    """A brand with its ACTIVE rules, highest priority first."""
    brand: BrandDTO
    rules: list[RuleDTO] = Field(default_factory=list)


class RuleListDTO(BaseModel):
    brand_id: UUID
    category: str | None = None
    rules: list[RuleDTO] = Field(default_factory=list)


# =============================================================================
# NAVIGATION
# =============================================================================


class RuleNavItemDTO(BaseModel):
    key: str
    label: str
    slug: str


class RuleNavDTO(BaseModel):
    """
    Secondary navigation for one rule category.

    default_slug is the redirect target for the bare category route, or
    None when the category has no rule pages.
    """
    category: str
    items: list[RuleNavItemDTO] = Field(default_factory=list)
    default_slug: str | None = None


# =============================================================================
# ONBOARDING
# =============================================================================


class OnboardingStepDTO(BaseModel):
    id: str
    title: str
    description: str
    rule_key: str = ""


class OnboardingSequenceDTO(BaseModel):
    flow: str
    steps: list[OnboardingStepDTO] = Field(default_factory=list)


class OnboardingPositionDTO(BaseModel):
    """Where a step sits in its wizard."""
    flow: str
    step: OnboardingStepDTO
    index: int
    total: int
    next: OnboardingStepDTO | None = None
    prev: OnboardingStepDTO | None = None


# =============================================================================
# CHANNELS
# =============================================================================


class ChannelDTO(BaseModel):
    id: str
    name: str
    char_limit: int | None = None
    strict_limit: bool = False
    description: str = ""


class ChannelCheckRequestDTO(BaseModel):
    text: str
    channel_id: str | None = None
    max_length: int | None = Field(default=None, ge=0)


class ChannelCheckResponseDTO(BaseModel):
    channel_id: str | None = None
    max_length: int | None = None
    length: int
    strict: bool = False
    status: Literal["ok", "warning", "invalid"]
    within_limit: bool
    trimmed: str | None = None


# =============================================================================
# LINT
# =============================================================================


class LintRequestDTO(BaseModel):
    text: str
    context: str | None = None


class FindingDTO(BaseModel):
    """One rule violation located in the linted text."""
    rule_id: str
    rule_name: str
    location_start: int
    location_end: int
    severity: RuleSeverity
    message: str
    suggested_fix: str | None = None
    confidence: float = Field(ge=0.0, le=1.0)


class LintResponseDTO(BaseModel):
    brand_id: UUID
    context: str | None = None
    findings: list[FindingDTO] = Field(default_factory=list)


# =============================================================================
# FEATURE FLAGS
# =============================================================================


class FeatureFlagDTO(BaseModel):
    key: str
    enabled: bool


# =============================================================================
# ORGANIZATIONS
# =============================================================================


class CreateOrganizationRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=50, pattern=SLUG_PATTERN)
    locale: str = Field(default="en-GB", min_length=2, max_length=20)


class BrandSummaryDTO(BaseModel):
    id: UUID
    name: str
    slug: str


class OrganizationDTO(BaseModel):
    """An organization as seen by one of its members."""
    id: UUID
    name: str
    slug: str
    locale: str
    role: MembershipRole
    member_count: int = 1
    brands: list[BrandSummaryDTO] = Field(default_factory=list)
