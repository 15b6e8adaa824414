"""
Template rule seeding.

New brands start with one template rule per rule page of the editor
navigation, so every page has a rule row to edit. Priority follows the
navigation order. Seeding is idempotent: keys the brand already has are
left untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable

from django.db import transaction

from brandvoice.core.enums import RuleSource, RuleStatus, RuleType
from brandvoice.core.models import Brand, Rule
from brandvoice.rules.navigation import get_rule_nav_for_category

logger = logging.getLogger(__name__)

CATEGORY_RULE_TYPES = {
    "tone": RuleType.TONE_VOICE,
    "grammar": RuleType.GRAMMAR_STYLE,
    "numbers": RuleType.FORMATTING,
    "terminology": RuleType.TERMINOLOGY,
}

DEFAULT_CATEGORIES = ("tone", "grammar", "numbers")


@transaction.atomic
def seed_template_rules(brand: Brand, categories: Iterable[str] = DEFAULT_CATEGORIES) -> list[Rule]:
    """
    Create missing template rules for brand.

    Returns:
        The rules created by this call (empty when everything existed)
    """
    existing_keys = set(brand.rules.values_list("key", flat=True))
    created: list[Rule] = []

    for category in categories:
        rule_type = CATEGORY_RULE_TYPES.get(category, RuleType.CUSTOM)
        for priority, item in enumerate(get_rule_nav_for_category(category)):
            if item.key in existing_keys:
                continue
            created.append(
                Rule.objects.create(
                    brand=brand,
                    name=item.label,
                    key=item.key,
                    category=category,
                    type=rule_type,
                    status=RuleStatus.DRAFT,
                    source=RuleSource.TEMPLATE,
                    priority=priority,
                )
            )
            existing_keys.add(item.key)

    logger.info("Seeded %d template rules for brand=%s", len(created), brand.id)
    return created
