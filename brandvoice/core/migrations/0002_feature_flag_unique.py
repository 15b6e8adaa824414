"""
One feature flag row per (organization, brand, key).
"""

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="featureflag",
            constraint=models.UniqueConstraint(
                condition=models.Q(("brand__isnull", False)),
                fields=("organization", "brand", "key"),
                name="uniq_brand_feature_flag",
            ),
        ),
        migrations.AddConstraint(
            model_name="featureflag",
            constraint=models.UniqueConstraint(
                condition=models.Q(("brand__isnull", True)),
                fields=("organization", "key"),
                name="uniq_org_feature_flag",
            ),
        ),
    ]
