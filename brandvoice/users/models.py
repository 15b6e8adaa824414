"""
User models for brandvoice authentication.

- User links to the external auth provider via auth_uid (the JWT "sub" claim)
- Membership attaches users to Organizations; a user may belong to several
"""

import uuid

from django.db import models

from brandvoice.core.enums import MembershipRole
from brandvoice.core.models import Organization, TimestampedModel


class User(TimestampedModel):
    """
    brandvoice user account.

    Authentication itself is delegated to the external provider; this row
    only exists so memberships have something to point at.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    auth_uid = models.CharField(
        max_length=255,
        unique=True,
        help_text="Subject identifier from the auth provider",
    )
    display_name = models.CharField(max_length=255, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "brandvoice_user"
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self) -> str:
        return self.email

    def organization_ids(self) -> list[str]:
        """Membership org ids as strings, oldest membership first."""
        return [
            str(org_id)
            for org_id in self.memberships.order_by("created_at").values_list(
                "organization_id", flat=True
            )
        ]


class Membership(TimestampedModel):
    """A user's role within one organization."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="memberships",
    )
    role = models.CharField(
        max_length=20,
        choices=MembershipRole.choices,
        default=MembershipRole.MEMBER,
    )

    class Meta:
        db_table = "membership"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "organization"],
                name="uniq_user_org_membership",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} in {self.organization_id} ({self.role})"
