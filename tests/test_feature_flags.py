"""
Feature flag resolution tests.

Tests verify:
- Brand flags override organization flags
- Organization flags apply to all brands without their own flag
- Unset flags are disabled
- set_feature_flag upserts exactly one row
- The store rejects a second row for the same (organization, brand, key)
"""

import pytest
from django.db import IntegrityError, transaction

from brandvoice.core.feature_flags import FeatureFlags, check_feature_flag, set_feature_flag
from brandvoice.core.models import Brand, FeatureFlag

KEY = FeatureFlags.CUSTOM_RULES


@pytest.mark.django_db
class TestCheckFeatureFlag:

    def test_unset_flag_is_disabled(self, brand, org1):
        assert check_feature_flag(org1.id, brand.id, KEY) is False

    def test_no_ids_is_disabled(self, db):
        assert check_feature_flag(None, None, KEY) is False

    def test_org_flag_applies_to_brand(self, brand, org1):
        FeatureFlag.objects.create(organization=org1, key=KEY, enabled=True)
        assert check_feature_flag(org1.id, brand.id, KEY) is True

    def test_brand_flag_overrides_org_flag(self, brand, org1):
        FeatureFlag.objects.create(organization=org1, key=KEY, enabled=True)
        FeatureFlag.objects.create(organization=org1, brand=brand, key=KEY, enabled=False)

        assert check_feature_flag(org1.id, brand.id, KEY) is False

    def test_brand_flag_does_not_leak_to_sibling(self, brand, org1):
        sibling = Brand.objects.create(organization=org1, name="Sibling", slug="sibling")
        FeatureFlag.objects.create(organization=org1, brand=brand, key=KEY, enabled=True)

        assert check_feature_flag(org1.id, sibling.id, KEY) is False

    def test_other_org_flag_ignored(self, brand, org1, org2):
        FeatureFlag.objects.create(organization=org2, key=KEY, enabled=True)
        assert check_feature_flag(org1.id, brand.id, KEY) is False

    def test_keys_are_independent(self, brand, org1):
        FeatureFlag.objects.create(organization=org1, key=FeatureFlags.RULE_EXPORT, enabled=True)
        assert check_feature_flag(org1.id, brand.id, KEY) is False


@pytest.mark.django_db
class TestSetFeatureFlag:

    def test_creates_then_updates(self, brand, org1):
        first = set_feature_flag(org1.id, brand.id, KEY, True)
        second = set_feature_flag(org1.id, brand.id, KEY, False)

        assert first.id == second.id
        assert FeatureFlag.objects.filter(key=KEY).count() == 1
        assert check_feature_flag(org1.id, brand.id, KEY) is False

    def test_org_level_flag(self, brand, org1):
        set_feature_flag(org1.id, None, KEY, True)
        assert check_feature_flag(org1.id, brand.id, KEY) is True


@pytest.mark.django_db
class TestFeatureFlagUniqueness:

    def test_duplicate_brand_flag_rejected(self, brand, org1):
        FeatureFlag.objects.create(organization=org1, brand=brand, key=KEY, enabled=True)

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                FeatureFlag.objects.create(organization=org1, brand=brand, key=KEY, enabled=False)

    def test_duplicate_org_flag_rejected(self, org1):
        FeatureFlag.objects.create(organization=org1, key=KEY, enabled=True)

        with pytest.raises(IntegrityError):
            with transaction.atomic():
                FeatureFlag.objects.create(organization=org1, key=KEY, enabled=False)

    def test_org_and_brand_flags_coexist(self, brand, org1):
        FeatureFlag.objects.create(organization=org1, key=KEY, enabled=True)
        FeatureFlag.objects.create(organization=org1, brand=brand, key=KEY, enabled=False)

        assert FeatureFlag.objects.filter(key=KEY).count() == 2

    def test_same_key_in_two_orgs(self, org1, org2):
        FeatureFlag.objects.create(organization=org1, key=KEY, enabled=True)
        FeatureFlag.objects.create(organization=org2, key=KEY, enabled=False)

        assert check_feature_flag(org1.id, None, KEY) is True
        assert check_feature_flag(org2.id, None, KEY) is False

    def test_set_after_set_keeps_single_org_row(self, org1):
        set_feature_flag(org1.id, None, KEY, True)
        set_feature_flag(org1.id, None, KEY, False)

        assert FeatureFlag.objects.filter(organization=org1, brand__isnull=True, key=KEY).count() == 1
        assert check_feature_flag(org1.id, None, KEY) is False
