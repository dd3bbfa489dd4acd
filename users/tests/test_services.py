"""Tests for member email updates."""

import pytest

from users.models import MemberEmail, User
from users.services import MemberEmailError, update_member_email


@pytest.mark.django_db
class TestUpdateMemberEmail:

    def test_updates_primary_email(self, member):
        update_member_email(member.id, "  Ada@Lovelace.dev ")

        member.refresh_from_db()
        assert member.email == "ada@lovelace.dev"
        primary = MemberEmail.objects.get(member=member, primary=True)
        assert primary.email == "ada@lovelace.dev"

    def test_keeps_previous_email_in_history(self, member):
        update_member_email(member.id, "ada@lovelace.dev")

        emails = dict(MemberEmail.objects.filter(member=member).values_list("email", "primary"))
        assert emails == {"ada@example.com": False, "ada@lovelace.dev": True}

    def test_switching_back_to_old_email(self, member):
        update_member_email(member.id, "ada@lovelace.dev")
        update_member_email(member.id, "ada@example.com")

        assert MemberEmail.objects.filter(member=member, primary=True).count() == 1
        assert MemberEmail.objects.get(member=member, primary=True).email == "ada@example.com"

    def test_same_email_is_a_no_op(self, member):
        update_member_email(member.id, "ada@example.com")
        assert MemberEmail.objects.filter(member=member).count() == 1

    def test_rejects_email_of_another_member(self, member, admin_user):
        with pytest.raises(MemberEmailError):
            update_member_email(member.id, "GRACE@example.com")
        member.refresh_from_db()
        assert member.email == "ada@example.com"

    def test_rejects_old_email_of_another_member(self, member, admin_user):
        MemberEmail.objects.create(member=admin_user, email="old@example.com")
        with pytest.raises(MemberEmailError):
            update_member_email(member.id, "old@example.com")

    def test_unknown_member(self, db):
        with pytest.raises(User.DoesNotExist):
            update_member_email(12345, "nobody@example.com")
