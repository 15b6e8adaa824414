"""
Brand rule helpers that do not touch the database.

This package provides:
- Category navigation for the rule editor (navigation.py)
- In-process detector evaluation for linting copy (evaluator.py)
"""

from brandvoice.rules.navigation import (
    RuleNavItem,
    default_rule_slug,
    get_rule_by_key,
    get_rule_by_slug,
    get_rule_nav_for_category,
)

__all__ = [
    "RuleNavItem",
    "default_rule_slug",
    "get_rule_by_key",
    "get_rule_by_slug",
    "get_rule_nav_for_category",
]
