"""
Core API URL routing.

URL patterns:
- GET  /api/health
- GET  /api/orgs, POST /api/orgs
- GET  /api/brands, POST /api/brands
- GET  /api/brands/:slug
- GET  /api/brands/:slug/rules
- GET  /api/brands/:slug/rules/instances
- GET  /api/brands/:slug/rules/nav/:category
- POST /api/brands/:slug/lint
- GET  /api/brands/:slug/features/:key
- GET  /api/onboarding/:flow/steps
- GET  /api/onboarding/:flow/steps/:step_id
- GET  /api/channels
- POST /api/channels/check
"""

from django.urls import path

from brandvoice.core.api import views

app_name = "core_api"

urlpatterns = [
    path("health", views.health_check, name="health-check"),
    # Tenancy
    path("orgs", views.organizations_list_create, name="orgs-list-create"),
    path("brands", views.brands_list_create, name="brands-list-create"),
    # Brands & rules
    path("brands/<slug:brand_slug>", views.brand_detail, name="brand-detail"),
    path("brands/<slug:brand_slug>/rules", views.brand_rules, name="brand-rules"),
    path(
        "brands/<slug:brand_slug>/rules/instances",
        views.brand_rule_instances,
        name="brand-rule-instances",
    ),
    path(
        "brands/<slug:brand_slug>/rules/nav/<str:category>",
        views.rule_nav,
        name="rule-nav",
    ),
    path("brands/<slug:brand_slug>/lint", views.lint_copy, name="brand-lint"),
    path(
        "brands/<slug:brand_slug>/features/<str:key>",
        views.brand_feature_flag,
        name="brand-feature-flag",
    ),
    # Onboarding
    path("onboarding/<str:flow>/steps", views.onboarding_steps, name="onboarding-steps"),
    path(
        "onboarding/<str:flow>/steps/<str:step_id>",
        views.onboarding_step_detail,
        name="onboarding-step-detail",
    ),
    # Channels
    path("channels", views.channels_list, name="channels-list"),
    path("channels/check", views.channel_check, name="channel-check"),
]
