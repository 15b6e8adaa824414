"""
Initial schema: Organization, Brand, Rule, FeatureFlag.
"""

from django.db import migrations, models
import django.db.models.deletion
import uuid


RULE_TYPE_CHOICES = [
    ("LANGUAGE_LOCALE", "Language & Locale"),
    ("GRAMMAR_STYLE", "Grammar & Style"),
    ("TONE_VOICE", "Tone & Voice"),
    ("TERMINOLOGY", "Terminology"),
    ("FORBIDDEN_WORDS", "Forbidden Words"),
    ("FORMATTING", "Formatting"),
    ("INCLUSIVE_LANGUAGE", "Inclusive Language"),
    ("LEGAL_COMPLIANCE", "Legal Compliance"),
    ("CONTENT_PATTERNS", "Content Patterns"),
    ("CUSTOM", "Custom"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Organization",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("locale", models.CharField(default="en-GB", max_length=20)),
            ],
            options={
                "db_table": "organization",
                "verbose_name": "Organization",
                "verbose_name_plural": "Organizations",
            },
        ),
        migrations.CreateModel(
            name="Brand",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(max_length=100)),
                ("description", models.TextField(blank=True)),
                (
                    "organization",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="brands",
                        to="core.organization",
                    ),
                ),
            ],
            options={
                "db_table": "brand",
                "indexes": [
                    models.Index(
                        fields=["slug", "created_at"],
                        name="brand_slug_2c0c2b_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("organization", "slug"),
                        name="uniq_org_brand_slug",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Rule",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("key", models.CharField(blank=True, max_length=255)),
                ("category", models.CharField(blank=True, max_length=100)),
                (
                    "type",
                    models.CharField(
                        choices=RULE_TYPE_CHOICES,
                        default="CUSTOM",
                        max_length=50,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("DRAFT", "Draft"),
                            ("ACTIVE", "Active"),
                            ("DEPRECATED", "Deprecated"),
                        ],
                        default="ACTIVE",
                        max_length=20,
                    ),
                ),
                (
                    "scope",
                    models.CharField(
                        choices=[
                            ("GLOBAL", "Global"),
                            ("SURFACE", "Surface"),
                            ("CHANNEL", "Channel"),
                            ("ASSET", "Asset"),
                            ("INTEGRATION", "Integration"),
                        ],
                        default="GLOBAL",
                        max_length=20,
                    ),
                ),
                (
                    "severity",
                    models.CharField(
                        choices=[
                            ("INFO", "Info"),
                            ("MINOR", "Minor"),
                            ("MAJOR", "Major"),
                            ("CRITICAL", "Critical"),
                        ],
                        default="MINOR",
                        max_length=20,
                    ),
                ),
                (
                    "enforcement",
                    models.CharField(
                        choices=[
                            ("SUGGEST", "Suggest"),
                            ("WARN", "Warn"),
                            ("BLOCK", "Block"),
                        ],
                        default="SUGGEST",
                        max_length=20,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                ("surfaces", models.JSONField(blank=True, default=list)),
                ("channels", models.JSONField(blank=True, default=list)),
                ("suggestions", models.JSONField(blank=True, default=list)),
                ("detectors", models.JSONField(blank=True, default=list)),
                ("finding_template", models.TextField(blank=True)),
                ("rewrite_template", models.TextField(blank=True)),
                ("value", models.JSONField(blank=True, null=True)),
                ("priority", models.IntegerField(default=0)),
                (
                    "source",
                    models.CharField(
                        choices=[
                            ("template", "Template"),
                            ("manual", "Manual"),
                            ("import", "Import"),
                        ],
                        default="manual",
                        max_length=20,
                    ),
                ),
                (
                    "brand",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rules",
                        to="core.brand",
                    ),
                ),
            ],
            options={
                "db_table": "rule",
                "indexes": [
                    models.Index(
                        fields=["brand", "status", "priority"],
                        name="rule_brand_i_5d1a7e_idx",
                    ),
                    models.Index(
                        fields=["brand", "category", "priority"],
                        name="rule_brand_i_9f3b21_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="FeatureFlag",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("key", models.CharField(max_length=100)),
                ("enabled", models.BooleanField(default=False)),
                (
                    "brand",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="feature_flags",
                        to="core.brand",
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="feature_flags",
                        to="core.organization",
                    ),
                ),
            ],
            options={
                "db_table": "feature_flag",
                "indexes": [
                    models.Index(
                        fields=["key", "organization", "brand"],
                        name="feature_fla_key_7a4e10_idx",
                    ),
                ],
            },
        ),
    ]
