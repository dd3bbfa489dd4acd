from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from users.models import Education, User
from .constants import RESUME_BOOK_JOB_SEARCH_STATUSES, as_choices
from .selection import RankedSelection
from .status import TimeWindow, WindowStatus, resolve_status


class Company(models.Model):
    """A sponsor company that members can rank in a resume book."""

    name = models.CharField(max_length=255)

    class Meta:
        verbose_name_plural = "companies"

    def __str__(self) -> str:
        return self.name


class ResumeBook(models.Model):
    """A time-windowed collection of member resumes shared with sponsors."""

    name = models.CharField(max_length=255)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    sponsors = models.ManyToManyField(Company, related_name="resume_books", blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_date__lte=models.F("end_date")),
                name="resume_book_starts_before_end",
            ),
        ]

    def __str__(self) -> str:
        return self.name

    def clean(self) -> None:
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError("A resume book cannot end before it starts.")

    @property
    def window(self) -> TimeWindow:
        return TimeWindow(start=self.start_date, end=self.end_date)

    def status(self, now=None) -> WindowStatus:
        """Where ``now`` (default: the current time) falls in the submission window."""
        return resolve_status(now or timezone.now(), self.window)


def _resume_upload_to(instance: "ResumeBookSubmission", filename: str) -> str:
    return f"resumes/{instance.resume_book_id}/{instance.member_id}.pdf"


class ResumeBookSubmission(models.Model):
    """A member's application to a resume book.

    A member submits at most once per book; editing a submission updates
    this row in place.
    """

    member = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="resume_book_submissions"
    )
    resume_book = models.ForeignKey(
        ResumeBook, on_delete=models.CASCADE, related_name="submissions"
    )
    education = models.ForeignKey(Education, on_delete=models.SET_NULL, blank=True, null=True)
    coding_languages = models.JSONField(default=list)
    employment_search_status = models.CharField(
        max_length=100, choices=as_choices(RESUME_BOOK_JOB_SEARCH_STATUSES)
    )
    preferred_company_1 = models.ForeignKey(
        Company, on_delete=models.SET_NULL, blank=True, null=True, related_name="+"
    )
    preferred_company_2 = models.ForeignKey(
        Company, on_delete=models.SET_NULL, blank=True, null=True, related_name="+"
    )
    preferred_company_3 = models.ForeignKey(
        Company, on_delete=models.SET_NULL, blank=True, null=True, related_name="+"
    )
    preferred_roles = models.JSONField(default=list)
    resume = models.FileField(upload_to=_resume_upload_to)
    submitted_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["member", "resume_book"], name="unique_resume_book_submission"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.member.username} - {self.resume_book.name}"

    @property
    def selection(self) -> RankedSelection:
        return RankedSelection.from_submission(self)
