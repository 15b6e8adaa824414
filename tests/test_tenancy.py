"""
Tenancy service tests.

Tests verify:
- Organizations are created together with an owner membership, atomically
- Slug conflicts surface as SlugConflictError, including constraint races
- Brands are created per organization with per-organization slugs
- Listings only include the caller's organizations
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from brandvoice.core import tenancy
from brandvoice.core.enums import MembershipRole
from brandvoice.core.models import Brand, Organization
from brandvoice.users.models import Membership, User


# =============================================================================
# ORGANIZATIONS
# =============================================================================


@pytest.mark.django_db
class TestCreateOrganization:

    def test_creates_org_with_owner(self, user):
        org = tenancy.create_organization(user, name="New Co", slug="new-co")

        membership = Membership.objects.get(user=user, organization=org)
        assert membership.role == MembershipRole.OWNER
        assert org.locale == "en-GB"

    def test_custom_locale(self, user):
        org = tenancy.create_organization(user, name="US Co", slug="us-co", locale="en-US")
        assert org.locale == "en-US"

    def test_duplicate_slug(self, user, org1):
        with pytest.raises(tenancy.SlugConflictError):
            tenancy.create_organization(user, name="Again", slug=org1.slug)

        assert Organization.objects.filter(slug=org1.slug).count() == 1

    def test_constraint_race_is_a_conflict(self, user, org1):
        """A slug taken between the check and the insert is still a conflict."""
        with patch.object(tenancy.Organization.objects, "filter") as mock_filter:
            mock_filter.return_value.exists.return_value = False
            with pytest.raises(tenancy.SlugConflictError):
                tenancy.create_organization(user, name="Racer", slug=org1.slug)

    def test_membership_failure_rolls_back_org(self, user):
        with patch.object(
            tenancy.Membership.objects, "create", side_effect=DatabaseError("down")
        ):
            with pytest.raises(DatabaseError):
                tenancy.create_organization(user, name="Half", slug="half")

        assert not Organization.objects.filter(slug="half").exists()


@pytest.mark.django_db
class TestListMemberships:

    def test_oldest_membership_first(self, user, org1, org2):
        memberships = tenancy.list_memberships(user)
        assert [m.organization_id for m in memberships] == [org1.id, org2.id]

    def test_member_count_and_brands(self, user, org1, brand):
        colleague = User.objects.create(email="colleague@example.com", auth_uid="auth-colleague")
        Membership.objects.create(user=colleague, organization=org1)

        first = tenancy.list_memberships(user)[0]

        assert first.member_count == 2
        assert [b.slug for b in first.organization.brands.all()] == ["acme"]

    def test_user_without_memberships(self, db):
        loner = User.objects.create(email="loner@example.com", auth_uid="auth-loner")
        assert tenancy.list_memberships(loner) == []


# =============================================================================
# BRANDS
# =============================================================================


@pytest.mark.django_db
class TestCreateBrand:

    def test_creates_brand(self, org1):
        brand = tenancy.create_brand(org1.id, name="Widgets", slug="widgets", description="W")

        assert brand.organization_id == org1.id
        assert brand.description == "W"

    def test_duplicate_slug_in_same_org(self, brand, org1):
        with pytest.raises(tenancy.SlugConflictError):
            tenancy.create_brand(org1.id, name="Acme again", slug="acme")

    def test_same_slug_in_other_org(self, brand, org2):
        other = tenancy.create_brand(org2.id, name="Acme", slug="acme")
        assert Brand.objects.filter(slug="acme").count() == 2
        assert other.organization_id == org2.id


@pytest.mark.django_db
class TestListBrands:

    def test_only_given_orgs(self, brand, org1, org2, foreign_org):
        Brand.objects.create(organization=foreign_org, name="Theirs", slug="theirs")
        mine = Brand.objects.create(organization=org2, name="Mine", slug="mine")

        result = tenancy.list_brands([str(org1.id), str(org2.id)])

        assert [b.id for b in result] == [brand.id, mine.id]

    def test_narrowed_to_one_org(self, brand, org1, org2):
        mine = Brand.objects.create(organization=org2, name="Mine", slug="mine")
        assert tenancy.list_brands([org1.id, org2.id], org2.id) == [mine]

    def test_org_outside_candidates(self, brand, org1, foreign_org):
        Brand.objects.create(organization=foreign_org, name="Theirs", slug="theirs")
        assert tenancy.list_brands([org1.id], foreign_org.id) == []

    def test_no_orgs(self, brand):
        assert tenancy.list_brands([]) == []
