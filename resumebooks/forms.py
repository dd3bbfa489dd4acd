from django import forms
from django.conf import settings

from users.models import User
from .constants import (
    RESUME_BOOK_CODING_LANGUAGES,
    RESUME_BOOK_JOB_SEARCH_STATUSES,
    RESUME_BOOK_ROLES,
    as_choices,
)
from .selection import RANKS, RankedSelection
from .services import is_pdf_file, list_member_educations, list_resume_book_sponsors

RESUME_TOO_BIG = "Attachment is too big. Must be less than 1 MB in size."


class EducationChoiceField(forms.ModelChoiceField):
    """Labels educations as "School, Degree, Month YYYY - Month YYYY"."""

    def label_from_instance(self, obj) -> str:
        school = obj.school.name if obj.school else "Unknown school"
        dates = f"{obj.start_date:%B %Y} - {obj.end_date:%B %Y}"
        return f"{school}, {obj.get_degree_type_display()}, {dates}"


class SubmitResumeForm(forms.Form):
    """Submission (or edit) of a member's application to a resume book.

    The form is bound to the resume book and the member: companies must be
    sponsors of the book and the education must be one of the member's.
    The resume file is only required when the member has no submission on
    record yet.
    """

    first_name = forms.CharField(max_length=100)
    last_name = forms.CharField(max_length=100)
    race = forms.MultipleChoiceField(
        choices=User.RACE_CHOICES, widget=forms.CheckboxSelectMultiple
    )
    linkedin_url = forms.URLField(label="LinkedIn Profile/URL")
    work_authorization_status = forms.ChoiceField(choices=User.WORK_AUTHORIZATION_CHOICES)
    hometown = forms.CharField(max_length=255)
    hometown_latitude = forms.FloatField(required=False, widget=forms.HiddenInput)
    hometown_longitude = forms.FloatField(required=False, widget=forms.HiddenInput)
    education = EducationChoiceField(queryset=None)
    coding_languages = forms.MultipleChoiceField(
        choices=as_choices(RESUME_BOOK_CODING_LANGUAGES), widget=forms.CheckboxSelectMultiple
    )
    preferred_roles = forms.MultipleChoiceField(
        choices=as_choices(RESUME_BOOK_ROLES), widget=forms.CheckboxSelectMultiple
    )
    employment_search_status = forms.ChoiceField(
        choices=as_choices(RESUME_BOOK_JOB_SEARCH_STATUSES), widget=forms.RadioSelect
    )
    preferred_company_1 = forms.ModelChoiceField(queryset=None)
    preferred_company_2 = forms.ModelChoiceField(queryset=None)
    preferred_company_3 = forms.ModelChoiceField(queryset=None)
    resume = forms.FileField(required=False)

    def __init__(self, *args, resume_book, member, submission=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.resume_book = resume_book
        self.member = member
        self.submission = submission
        self.fields["education"].queryset = list_member_educations(member)
        for rank in RANKS:
            self.fields[f"preferred_company_{rank}"].queryset = list_resume_book_sponsors(resume_book)
        self.fields["resume"].required = submission is None

    @classmethod
    def initial_for(cls, member: User, submission=None) -> dict:
        """Initial values from the member profile and any prior submission."""
        initial = {
            "first_name": member.first_name,
            "last_name": member.last_name,
            "race": member.race,
            "linkedin_url": member.linkedin_url,
            "work_authorization_status": member.work_authorization_status,
            "hometown": member.hometown,
            "hometown_latitude": member.hometown_latitude,
            "hometown_longitude": member.hometown_longitude,
        }
        if submission is not None:
            initial.update(
                {
                    "education": submission.education_id,
                    "coding_languages": submission.coding_languages,
                    "preferred_roles": submission.preferred_roles,
                    "employment_search_status": submission.employment_search_status,
                }
            )
            for rank, value in submission.selection.items():
                initial[f"preferred_company_{rank}"] = value
        return initial

    def clean_linkedin_url(self) -> str:
        url = self.cleaned_data["linkedin_url"]
        if "linkedin.com/in/" not in url.lower():
            raise forms.ValidationError("Please enter a LinkedIn profile URL (linkedin.com/in/...).")
        return url

    def clean_resume(self):
        resume = self.cleaned_data.get("resume")
        if not resume:
            return None
        if resume.size >= settings.RESUME_MAX_UPLOAD_SIZE:
            raise forms.ValidationError(RESUME_TOO_BIG)
        if not resume.name.lower().endswith(".pdf") or not is_pdf_file(resume):
            raise forms.ValidationError("Resume must be a PDF.")
        return resume

    def clean(self):
        cleaned_data = super().clean()
        selection = RankedSelection(
            {
                rank: getattr(cleaned_data.get(f"preferred_company_{rank}"), "pk", None)
                for rank in RANKS
            }
        )
        for rank in selection.duplicate_ranks():
            self.add_error(
                f"preferred_company_{rank}", "Please choose a different company for each rank."
            )
        return cleaned_data
