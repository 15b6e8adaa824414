"""
Management command to seed template rules for a brand.

Usage:
    python manage.py seed_brand_rules --brand-id <uuid> [--category tone ...]

Creates one DRAFT template rule per rule page of each category's editor
navigation. Existing rule keys are skipped, so the command is safe to re-run.
"""

from uuid import UUID

from django.core.management.base import BaseCommand, CommandError

from brandvoice.core.models import Brand
from brandvoice.core.seeding import CATEGORY_RULE_TYPES, DEFAULT_CATEGORIES, seed_template_rules


class Command(BaseCommand):
    """Seed template rules for a brand."""

    help = "Seed template rules for a brand from the rule editor navigation"

    def add_arguments(self, parser):
        parser.add_argument(
            "--brand-id",
            type=str,
            required=True,
            help="UUID of the brand to seed",
        )
        parser.add_argument(
            "--category",
            action="append",
            dest="categories",
            help="Rule category to seed (repeatable, default: tone, grammar, numbers)",
        )

    def handle(self, *args, **options):
        brand_id_str = options["brand_id"]
        categories = options["categories"] or list(DEFAULT_CATEGORIES)

        try:
            brand_id = UUID(brand_id_str)
        except ValueError:
            raise CommandError(f"Invalid UUID format: {brand_id_str}")

        unknown = [c for c in categories if c not in CATEGORY_RULE_TYPES]
        if unknown:
            raise CommandError(f"Unknown categories: {', '.join(unknown)}")

        brand = Brand.objects.filter(id=brand_id).first()
        if brand is None:
            raise CommandError(f"Brand not found: {brand_id}")

        created = seed_template_rules(brand, categories)

        if not created:
            self.stdout.write(
                self.style.WARNING(f"Brand {brand.slug} already has all template rules")
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(f"Created {len(created)} template rules for brand {brand.slug}")
            )

        if created and options.get("verbosity", 1) >= 2:
            for rule in created:
                self.stdout.write(f"  - [{rule.priority}] {rule.key}")
