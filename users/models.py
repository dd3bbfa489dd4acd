from django.db import models


class User(models.Model):
    """An account on the membership platform.

    Members and admins share this model and are told apart by the ``role``
    field.  Authentication is handled via session state (see
    ``users.session``), not via Django's built-in auth system.  The profile
    fields are what members confirm when they submit to a resume book.
    """

    ROLE_CHOICES = (
        ("member", "Member"),
        ("admin", "Admin"),
    )

    RACE_CHOICES = (
        ("BLACK", "Black or African American"),
        ("HISPANIC", "Hispanic or Latinx"),
        ("NATIVE_AMERICAN", "Native American or Alaska Native"),
        ("MIDDLE_EASTERN", "Middle Eastern or North African"),
        ("WHITE", "White"),
        ("ASIAN", "Asian"),
        ("OTHER", "Other"),
    )

    WORK_AUTHORIZATION_CHOICES = (
        ("authorized", "Yes"),
        ("needs_sponsorship", "Yes, with visa sponsorship"),
        ("unauthorized", "No"),
        ("unsure", "I'm not sure"),
    )

    username = models.CharField(max_length=100, unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="member")
    hometown = models.CharField(max_length=255, blank=True, null=True)
    hometown_latitude = models.FloatField(blank=True, null=True)
    hometown_longitude = models.FloatField(blank=True, null=True)
    linkedin_url = models.URLField(blank=True, null=True)
    race = models.JSONField(default=list, blank=True)
    work_authorization_status = models.CharField(
        max_length=32, choices=WORK_AUTHORIZATION_CHOICES, blank=True, null=True
    )
    created_at = models.DateTimeField(auto_now_add=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def __str__(self) -> str:
        return self.username


class MemberEmail(models.Model):
    """An email address a member has used.

    Exactly one address per member is primary, and it mirrors
    ``User.email``.  Older addresses are kept so they cannot be claimed by
    another member.
    """

    member = models.ForeignKey(User, on_delete=models.CASCADE, related_name="emails")
    email = models.EmailField(unique=True)
    primary = models.BooleanField(default=False)
    added_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.email


class School(models.Model):
    name = models.CharField(max_length=255)

    def __str__(self) -> str:
        return self.name


class Education(models.Model):
    """A degree (finished or in progress) in a member's education history."""

    DEGREE_TYPE_CHOICES = (
        ("associate", "Associate"),
        ("bachelors", "Bachelor's"),
        ("certificate", "Certificate"),
        ("doctoral", "Doctoral"),
        ("masters", "Master's"),
        ("professional", "Professional"),
    )

    member = models.ForeignKey(User, on_delete=models.CASCADE, related_name="educations")
    school = models.ForeignKey(School, on_delete=models.SET_NULL, blank=True, null=True)
    degree_type = models.CharField(max_length=20, choices=DEGREE_TYPE_CHOICES)
    start_date = models.DateField()
    end_date = models.DateField()

    def __str__(self) -> str:
        school = self.school.name if self.school else "Unknown school"
        return f"{school} ({self.get_degree_type_display()})"
