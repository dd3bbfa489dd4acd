"""
Account services for the users app.

Views call these functions instead of touching the models directly so
that the rules around emails (uniqueness across members, a single
primary address) live in one place.
"""

from __future__ import annotations

import logging

from django.db import transaction

from .models import MemberEmail, User

logger = logging.getLogger(__name__)


class MemberEmailError(Exception):
    """Raised when a member's email cannot be changed."""


@transaction.atomic
def update_member_email(member_id: int, email: str) -> User:
    """Make ``email`` the primary email of the member ``member_id``.

    The address is recorded in the member's email history and marked
    primary, the previous primary address is demoted, and ``User.email``
    is updated.  Raises ``User.DoesNotExist`` for an unknown member and
    ``MemberEmailError`` if the address belongs to someone else.
    """
    email = email.strip().lower()
    member = User.objects.select_for_update().get(id=member_id)

    taken = (
        User.objects.filter(email__iexact=email).exclude(id=member.id).exists()
        or MemberEmail.objects.filter(email__iexact=email).exclude(member=member).exists()
    )
    if taken:
        logger.warning("Refused to give member %s an email owned by another member", member.id)
        raise MemberEmailError("This email already belongs to another member.")

    if member.email and member.email != email:
        MemberEmail.objects.get_or_create(member=member, email=member.email)
    MemberEmail.objects.filter(member=member, primary=True).exclude(email=email).update(primary=False)
    MemberEmail.objects.update_or_create(member=member, email=email, defaults={"primary": True})

    member.email = email
    member.save(update_fields=["email"])
    logger.info("Updated primary email of member %s", member.id)
    return member
