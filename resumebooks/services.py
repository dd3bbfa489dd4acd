"""
Service functions for the resumebooks app.

Queries the resume book page needs, PDF checking for uploaded resumes,
and ``submit_resume``, which writes a submission together with the
member's profile answers.  Views stay thin and only translate between
HTTP and these functions.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from django.db import transaction
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from users.models import Education, User
from .models import Company, ResumeBook, ResumeBookSubmission
from .status import WindowStatus

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"


class ResumeBookError(Exception):
    """Raised when a resume book submission cannot be processed."""


class SubmissionClosedError(ResumeBookError):
    """Raised when submitting outside of a resume book's window."""


def is_pdf_file(file) -> bool:
    """Return whether ``file`` is a readable PDF document.

    Any failure while parsing counts as "not a PDF": PyPDF2 raises a wide
    range of exceptions on malformed input, not only ``PdfReadError``.
    The file position is restored to the start afterwards so the upload
    can still be saved.
    """
    try:
        file.seek(0)
        if file.read(len(PDF_MAGIC)) != PDF_MAGIC:
            return False
        file.seek(0)
        try:
            reader = PdfReader(file)
            return len(reader.pages) > 0
        except PdfReadError as exc:
            logger.debug("Rejected unreadable PDF %r: %s", getattr(file, "name", None), exc)
            return False
        except Exception as exc:
            logger.debug(
                "Rejected malformed PDF %r: %s: %s",
                getattr(file, "name", None),
                type(exc).__name__,
                exc,
            )
            return False
    finally:
        file.seek(0)


def get_resume_book_submission(
    member: User, resume_book: ResumeBook
) -> Optional[ResumeBookSubmission]:
    return ResumeBookSubmission.objects.filter(member=member, resume_book=resume_book).first()


def list_resume_book_sponsors(resume_book: ResumeBook):
    return resume_book.sponsors.order_by("name")


def list_member_educations(member: User):
    """Educations of ``member``, most recent first."""
    return (
        Education.objects.filter(member=member)
        .select_related("school")
        .order_by("-end_date", "-start_date")
    )


def closed_message(status: WindowStatus) -> str:
    if status is WindowStatus.UPCOMING:
        return "This resume book is not accepting submissions yet."
    if status is WindowStatus.PAST:
        return "This resume book is no longer accepting submissions."
    return ""


def submit_resume(
    *,
    member: User,
    resume_book: ResumeBook,
    first_name: str,
    last_name: str,
    race: List[str],
    linkedin_url: str,
    work_authorization_status: str,
    hometown: str,
    hometown_latitude: Optional[float],
    hometown_longitude: Optional[float],
    education: Education,
    coding_languages: List[str],
    preferred_roles: List[str],
    employment_search_status: str,
    preferred_company_1: Company,
    preferred_company_2: Company,
    preferred_company_3: Company,
    resume=None,
    now=None,
) -> ResumeBookSubmission:
    """Create or update ``member``'s submission to ``resume_book``.

    The member's profile is updated with the answers that live on the
    member (name, race, LinkedIn, hometown, work authorization).  A resume
    file is required on the first submission; when editing, passing
    ``resume=None`` keeps the file on record.
    """
    status = resume_book.status(now)
    if status is not WindowStatus.ACTIVE:
        logger.warning(
            "Member %s tried to submit to %s resume book %s", member.id, status.value, resume_book.id
        )
        raise SubmissionClosedError(closed_message(status))

    with transaction.atomic():
        member.first_name = first_name
        member.last_name = last_name
        member.race = list(race)
        member.linkedin_url = linkedin_url
        member.work_authorization_status = work_authorization_status
        member.hometown = hometown
        member.hometown_latitude = hometown_latitude
        member.hometown_longitude = hometown_longitude
        member.save()

        submission = (
            ResumeBookSubmission.objects.select_for_update()
            .filter(member=member, resume_book=resume_book)
            .first()
        )
        created = submission is None
        if created:
            if resume is None:
                raise ResumeBookError("Please upload your resume.")
            submission = ResumeBookSubmission(member=member, resume_book=resume_book)

        submission.education = education
        submission.coding_languages = list(coding_languages)
        submission.preferred_roles = list(preferred_roles)
        submission.employment_search_status = employment_search_status
        submission.preferred_company_1 = preferred_company_1
        submission.preferred_company_2 = preferred_company_2
        submission.preferred_company_3 = preferred_company_3

        # The replaced file is only deleted once the new row is committed;
        # a failed save removes the freshly written file instead.
        old_name = submission.resume.name or None
        new_name = None
        try:
            if resume is not None:
                submission.resume.save(resume.name, resume, save=False)
                new_name = submission.resume.name
            submission.save()
        except Exception:
            if new_name:
                submission.resume.storage.delete(new_name)
            raise

        if new_name and old_name and old_name != new_name:
            storage = submission.resume.storage
            transaction.on_commit(lambda: storage.delete(old_name))

    logger.info(
        "%s submission of member %s to resume book %s",
        "Created" if created else "Updated",
        member.id,
        resume_book.id,
    )
    return submission
