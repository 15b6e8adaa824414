"""
Core API views.

Implements:
- GET  /health/ - process healthcheck
- GET  /api/health - contract version check
- GET  /api/orgs - the caller's organizations
- POST /api/orgs - create an organization owned by the caller
- GET  /api/brands - brands in the caller's organizations, optional ?organization_id=
- POST /api/brands - create a brand in one of the caller's organizations
- GET  /api/brands/:slug - brand detail
- GET  /api/brands/:slug/rules - brand with ACTIVE rules, by priority
- GET  /api/brands/:slug/rules/instances - all rules, optional ?category=
- GET  /api/brands/:slug/rules/nav/:category - rule editor navigation
- POST /api/brands/:slug/lint - lint copy against the brand's rules
- GET  /api/brands/:slug/features/:key - feature flag state
- GET  /api/onboarding/:flow/steps - wizard steps
- GET  /api/onboarding/:flow/steps/:step_id - step position in its wizard
- GET  /api/channels - channel catalogue
- POST /api/channels/check - check copy against a channel limit

Brand slugs are resolved against the caller's organizations (request.org_ids,
set by JWTAuthMiddleware). All responses are validated DTOs.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from uuid import UUID

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods
from pydantic import BaseModel, ValidationError

from brandvoice.channels import all_channels, check_channel_copy
from brandvoice.core import repository, tenancy
from brandvoice.core.enums import MembershipRole
from brandvoice.core.feature_flags import check_feature_flag
from brandvoice.core.models import Brand, Rule
from brandvoice.dto import (
    BrandDTO,
    BrandSummaryDTO,
    BrandWithRulesDTO,
    ChannelCheckRequestDTO,
    ChannelCheckResponseDTO,
    ChannelDTO,
    CreateBrandRequestDTO,
    CreateOrganizationRequestDTO,
    FeatureFlagDTO,
    LintRequestDTO,
    LintResponseDTO,
    OnboardingPositionDTO,
    OnboardingSequenceDTO,
    OnboardingStepDTO,
    OrganizationDTO,
    RuleDTO,
    RuleListDTO,
    RuleNavDTO,
    RuleNavItemDTO,
)
from brandvoice.middleware.auth import get_current_user, get_org_ids
from brandvoice.onboarding import OnboardingStep, get_sequence
from brandvoice.rules import default_rule_slug, get_rule_nav_for_category
from brandvoice.rules.evaluator import lint_text

logger = logging.getLogger(__name__)

# Bump CONTRACT_VERSION on breaking changes to DTOs
CONTRACT_VERSION = "1.0.0"


# =============================================================================
# HELPERS
# =============================================================================


def error_response(
    code: str,
    message: str,
    status: int = 400,
    details: dict[str, Any] | None = None,
) -> JsonResponse:
    """
    Standard error envelope:
    {"error": {"code": "...", "message": "...", "details": {...}}}
    """
    envelope: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        envelope["error"]["details"] = details

    return JsonResponse(envelope, status=status)


def _parse_body(request: HttpRequest, dto_class: type[BaseModel]):
    """
    Parse and validate a JSON body.

    Returns (dto, None) on success or (None, JsonResponse) on failure.
    """
    try:
        body = json.loads(request.body) if request.body else {}
    except json.JSONDecodeError:
        return None, error_response("invalid_json", "Request body is not valid JSON")

    try:
        return dto_class.model_validate(body), None
    except ValidationError as e:
        return None, error_response(
            "validation_error",
            "Request body validation failed",
            details={"errors": json.loads(e.json())},
        )


def _resolve_brand(request: HttpRequest, brand_slug: str):
    """
    Resolve the route's brand slug for the current caller.

    Returns (brand_id, None) or (None, error JsonResponse). An authenticated
    caller that only matches through the unscoped fallback is looking at
    another organization's brand and gets 403.
    """
    result = repository.resolve_brand(brand_slug, get_org_ids(request))

    if isinstance(result, repository.NotFound):
        return None, error_response(
            "not_found",
            "Brand not found",
            status=404,
            details={"brand_slug": brand_slug},
        )

    if result.organization_id is None and get_current_user(request) is not None:
        logger.warning("Cross-organization brand access denied: slug=%s", brand_slug)
        return None, error_response("forbidden", "Forbidden", status=403)

    return result.brand_id, None


def _brand_to_dto(brand: Brand) -> BrandDTO:
    return BrandDTO(
        id=brand.id,
        organization_id=brand.organization_id,
        name=brand.name,
        slug=brand.slug,
        description=brand.description,
        created_at=brand.created_at,
    )


def _rule_to_dto(rule: Rule) -> RuleDTO:
    return RuleDTO(
        id=rule.id,
        brand_id=rule.brand_id,
        name=rule.name,
        key=rule.key,
        category=rule.category,
        type=rule.type,
        status=rule.status,
        scope=rule.scope,
        severity=rule.severity,
        enforcement=rule.enforcement,
        description=rule.description,
        surfaces=rule.surfaces,
        channels=rule.channels,
        suggestions=rule.suggestions,
        value=rule.value,
        priority=rule.priority,
    )


def _membership_to_dto(membership) -> OrganizationDTO:
    org = membership.organization
    return OrganizationDTO(
        id=org.id,
        name=org.name,
        slug=org.slug,
        locale=org.locale,
        role=membership.role,
        member_count=membership.member_count,
        brands=[
            BrandSummaryDTO(id=brand.id, name=brand.name, slug=brand.slug)
            for brand in org.brands.all()
        ],
    )


def _require_user(request: HttpRequest):
    """Returns (user, None) or (None, 401 JsonResponse)."""
    user = get_current_user(request)
    if user is None:
        return None, error_response("unauthorized", "Authentication required", status=401)
    return user, None


def _step_to_dto(step: OnboardingStep | None) -> OnboardingStepDTO | None:
    if step is None:
        return None
    return OnboardingStepDTO(
        id=step.id,
        title=step.title,
        description=step.description,
        rule_key=step.rule_key,
    )


# =============================================================================
# HEALTH
# =============================================================================


def healthcheck(request) -> JsonResponse:
    """Simple liveness check."""
    return JsonResponse({
        "status": "ok",
        "service": "brandvoice-backend",
    })


@require_GET
def health_check(request) -> JsonResponse:
    """
    GET /api/health

    Frontend calls this at startup to verify contract compatibility.
    """
    return JsonResponse({
        "status": "healthy",
        "contract_version": CONTRACT_VERSION,
    })


# =============================================================================
# ORGANIZATIONS & BRANDS
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def organizations_list_create(request: HttpRequest) -> JsonResponse:
    """
    GET /api/orgs - Organizations the caller belongs to.
    POST /api/orgs - Create an organization owned by the caller.
    """
    if request.method == "GET":
        return _list_organizations(request)
    else:
        return _create_organization(request)


def _list_organizations(request: HttpRequest) -> JsonResponse:
    user, error = _require_user(request)
    if error:
        return error

    organizations = [
        _membership_to_dto(membership).model_dump(mode="json")
        for membership in tenancy.list_memberships(user)
    ]
    return JsonResponse(organizations, safe=False)


def _create_organization(request: HttpRequest) -> JsonResponse:
    """
    POST /api/orgs

    Request JSON: {"name": "...", "slug": "acme-ltd", "locale"?: "en-GB"}
    Response 201: the organization with the caller as owner.
    """
    user, error = _require_user(request)
    if error:
        return error

    create_request, error = _parse_body(request, CreateOrganizationRequestDTO)
    if error:
        return error

    try:
        org = tenancy.create_organization(
            user,
            name=create_request.name,
            slug=create_request.slug,
            locale=create_request.locale,
        )
    except tenancy.SlugConflictError:
        return error_response(
            "conflict",
            "Organisation slug already exists",
            status=409,
            details={"slug": create_request.slug},
        )

    dto = OrganizationDTO(
        id=org.id,
        name=org.name,
        slug=org.slug,
        locale=org.locale,
        role=MembershipRole.OWNER,
    )
    return JsonResponse(dto.model_dump(mode="json"), status=201)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def brands_list_create(request: HttpRequest) -> JsonResponse:
    """
    GET /api/brands - Brands in the caller's organizations.
    POST /api/brands - Create a brand.
    """
    if request.method == "GET":
        return _list_brands(request)
    else:
        return _create_brand(request)


def _list_brands(request: HttpRequest) -> JsonResponse:
    """GET /api/brands?organization_id=<uuid>"""
    _, error = _require_user(request)
    if error:
        return error

    organization_id = None
    raw_org_id = request.GET.get("organization_id")
    if raw_org_id:
        try:
            organization_id = UUID(raw_org_id)
        except ValueError:
            return error_response(
                "validation_error",
                "organization_id must be a UUID",
                details={"organization_id": raw_org_id},
            )

    brands = tenancy.list_brands(get_org_ids(request), organization_id)
    return JsonResponse(
        [_brand_to_dto(brand).model_dump(mode="json") for brand in brands],
        safe=False,
    )


def _create_brand(request: HttpRequest) -> JsonResponse:
    """
    POST /api/brands

    Request JSON:
    {"organization_id": "uuid", "name": "...", "slug": "acme", "description"?: "..."}

    Response 201: the brand. 403 when the caller is not a member of the
    organization, 409 when the slug is taken there.
    """
    _, error = _require_user(request)
    if error:
        return error

    create_request, error = _parse_body(request, CreateBrandRequestDTO)
    if error:
        return error

    if str(create_request.organization_id) not in get_org_ids(request):
        logger.warning(
            "Brand creation outside caller's organizations: org=%s",
            create_request.organization_id,
        )
        return error_response("forbidden", "Forbidden", status=403)

    try:
        brand = tenancy.create_brand(
            create_request.organization_id,
            name=create_request.name,
            slug=create_request.slug,
            description=create_request.description,
        )
    except tenancy.SlugConflictError:
        return error_response(
            "conflict",
            "Brand slug already exists in this organisation",
            status=409,
            details={"slug": create_request.slug},
        )

    return JsonResponse(_brand_to_dto(brand).model_dump(mode="json"), status=201)


# =============================================================================
# BRANDS & RULES
# =============================================================================


@require_GET
def brand_detail(request: HttpRequest, brand_slug: str) -> JsonResponse:
    """GET /api/brands/:slug"""
    brand_id, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    brand = Brand.objects.get(id=brand_id)
    return JsonResponse(_brand_to_dto(brand).model_dump(mode="json"))


@require_GET
def brand_rules(request: HttpRequest, brand_slug: str) -> JsonResponse:
    """
    GET /api/brands/:slug/rules

    The brand with its ACTIVE rules, ordered by ascending priority.
    """
    brand_id, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    brand = repository.get_brand_with_rules(brand_id)
    if brand is None:
        return error_response("not_found", "Brand not found", status=404)

    dto = BrandWithRulesDTO(
        brand=_brand_to_dto(brand),
        rules=[_rule_to_dto(rule) for rule in brand.active_rules],
    )
    return JsonResponse(dto.model_dump(mode="json"))


@require_GET
def brand_rule_instances(request: HttpRequest, brand_slug: str) -> JsonResponse:
    """
    GET /api/brands/:slug/rules/instances?category=tone

    Every rule of the brand regardless of status.
    """
    brand_id, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    category = request.GET.get("category") or None
    rules = repository.list_rule_instances(brand_id, category)

    dto = RuleListDTO(
        brand_id=brand_id,
        category=category,
        rules=[_rule_to_dto(rule) for rule in rules],
    )
    return JsonResponse(dto.model_dump(mode="json"))


@require_GET
def rule_nav(request: HttpRequest, brand_slug: str, category: str) -> JsonResponse:
    """
    GET /api/brands/:slug/rules/nav/:category

    The frontend redirects a bare category route to default_slug; when it
    is null there is nothing to redirect to.
    """
    _, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    dto = RuleNavDTO(
        category=category,
        items=[
            RuleNavItemDTO(key=item.key, label=item.label, slug=item.slug)
            for item in get_rule_nav_for_category(category)
        ],
        default_slug=default_rule_slug(category),
    )
    return JsonResponse(dto.model_dump(mode="json"))


@csrf_exempt
@require_http_methods(["POST"])
def lint_copy(request: HttpRequest, brand_slug: str) -> JsonResponse:
    """
    POST /api/brands/:slug/lint

    Request JSON: {"text": "...", "context"?: "ui"}
    """
    brand_id, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    lint_request, error = _parse_body(request, LintRequestDTO)
    if error:
        return error

    brand = repository.get_brand_with_rules(brand_id)
    if brand is None:
        return error_response("not_found", "Brand not found", status=404)

    findings = lint_text(brand.active_rules, lint_request.text, lint_request.context)
    logger.info(
        "Linted copy for brand=%s rules=%d findings=%d",
        brand.id,
        len(brand.active_rules),
        len(findings),
    )

    dto = LintResponseDTO(
        brand_id=brand.id,
        context=lint_request.context,
        findings=findings,
    )
    return JsonResponse(dto.model_dump(mode="json"))


@require_GET
def brand_feature_flag(request: HttpRequest, brand_slug: str, key: str) -> JsonResponse:
    """GET /api/brands/:slug/features/:key"""
    brand_id, error = _resolve_brand(request, brand_slug)
    if error:
        return error

    brand = Brand.objects.get(id=brand_id)
    enabled = check_feature_flag(brand.organization_id, brand.id, key)
    return JsonResponse(FeatureFlagDTO(key=key, enabled=enabled).model_dump(mode="json"))


# =============================================================================
# ONBOARDING
# =============================================================================


@require_GET
def onboarding_steps(request: HttpRequest, flow: str) -> JsonResponse:
    """GET /api/onboarding/:flow/steps"""
    sequence = get_sequence(flow)
    if sequence is None:
        return error_response(
            "not_found",
            "Unknown onboarding flow",
            status=404,
            details={"flow": flow},
        )

    dto = OnboardingSequenceDTO(
        flow=sequence.name,
        steps=[_step_to_dto(step) for step in sequence],
    )
    return JsonResponse(dto.model_dump(mode="json"))


@require_GET
def onboarding_step_detail(request: HttpRequest, flow: str, step_id: str) -> JsonResponse:
    """
    GET /api/onboarding/:flow/steps/:step_id

    next / prev are null at the ends of the wizard.
    """
    sequence = get_sequence(flow)
    if sequence is None:
        return error_response(
            "not_found",
            "Unknown onboarding flow",
            status=404,
            details={"flow": flow},
        )

    index = sequence.step_index(step_id)
    if index == -1:
        return error_response(
            "not_found",
            "Unknown onboarding step",
            status=404,
            details={"flow": flow, "step_id": step_id},
        )

    dto = OnboardingPositionDTO(
        flow=sequence.name,
        step=_step_to_dto(sequence[index]),
        index=index,
        total=len(sequence),
        next=_step_to_dto(sequence.next_step(step_id)),
        prev=_step_to_dto(sequence.prev_step(step_id)),
    )
    return JsonResponse(dto.model_dump(mode="json"))


# =============================================================================
# CHANNELS
# =============================================================================


@require_GET
def channels_list(request: HttpRequest) -> JsonResponse:
    """GET /api/channels"""
    channels = [
        ChannelDTO(
            id=channel.id,
            name=channel.name,
            char_limit=channel.char_limit,
            strict_limit=channel.strict_limit,
            description=channel.description,
        ).model_dump(mode="json")
        for channel in all_channels()
    ]
    return JsonResponse(channels, safe=False)


@csrf_exempt
@require_http_methods(["POST"])
def channel_check(request: HttpRequest) -> JsonResponse:
    """
    POST /api/channels/check

    Request JSON: {"text": "...", "channel_id"?: "x_post", "max_length"?: 100}
    """
    check_request, error = _parse_body(request, ChannelCheckRequestDTO)
    if error:
        return error

    result = check_channel_copy(
        check_request.text,
        channel_id=check_request.channel_id,
        max_length=check_request.max_length,
    )

    dto = ChannelCheckResponseDTO(
        channel_id=result.channel_id,
        max_length=result.max_length,
        length=result.length,
        strict=result.strict,
        status=result.status,
        within_limit=result.within_limit,
        trimmed=result.trimmed,
    )
    return JsonResponse(dto.model_dump(mode="json"))
