"""
Views for the member-facing resume book pages.

``resume_book_view`` renders a resume book according to its submission
window (see ``resumebooks.status``) and processes submissions through
``resumebooks.services.submit_resume``.  ``choose_company`` backs the
"pick three different companies" widget on the form: the page sends the
current selection and the member's latest pick, and gets back the
selection with any duplicate cleared (see ``resumebooks.selection``).
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.utils import dateformat, timezone

from MemberHub.forms import validate_form
from users.models import User
from users.session import get_timezone, member_required
from .forms import SubmitResumeForm
from .models import ResumeBook
from .selection import RANKS, RankedSelection, choose
from .services import (
    ResumeBookError,
    SubmissionClosedError,
    get_resume_book_submission,
    list_resume_book_sponsors,
    submit_resume,
)
from .status import WindowStatus

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "l, F d, Y @ g:i A"


def _format_datetime(value, tz) -> str:
    return dateformat.format(value.astimezone(tz), DATETIME_FORMAT)


@member_required
def resume_book_list(request, member: User):
    """List resume books with their current status."""
    now = timezone.now()
    tz = get_timezone(request)
    resume_books = [
        {
            "id": book.id,
            "name": book.name,
            "status": book.status(now).value,
            "start_date": _format_datetime(book.start_date, tz),
            "end_date": _format_datetime(book.end_date, tz),
        }
        for book in ResumeBook.objects.order_by("-start_date")
    ]
    return render(
        request,
        "resumebooks/resume_book_list.html",
        {"resume_books": resume_books, "user": member},
    )


@member_required
def resume_book_view(request, member: User, resume_book_id: int):
    """Show a resume book and accept submissions while it is open."""
    resume_book = get_object_or_404(ResumeBook, id=resume_book_id)
    submission = get_resume_book_submission(member, resume_book)

    if request.method == "POST":
        return _submit_resume(request, member, resume_book, submission)

    form = SubmitResumeForm(
        resume_book=resume_book,
        member=member,
        submission=submission,
        initial=SubmitResumeForm.initial_for(member, submission),
    )
    return _render_resume_book(request, member, resume_book, submission, form)


def _submit_resume(request, member, resume_book, submission):
    status = resume_book.status()
    if status is not WindowStatus.ACTIVE:
        messages.error(request, "This resume book is not accepting submissions.")
        return _render_resume_book(request, member, resume_book, submission, None, status=403)

    result = validate_form(
        SubmitResumeForm,
        request.POST,
        request.FILES,
        resume_book=resume_book,
        member=member,
        submission=submission,
    )
    if not result.ok:
        return _render_resume_book(
            request, member, resume_book, submission, result.form, status=400
        )

    data = result.data
    try:
        submit_resume(
            member=member,
            resume_book=resume_book,
            first_name=data["first_name"],
            last_name=data["last_name"],
            race=data["race"],
            linkedin_url=data["linkedin_url"],
            work_authorization_status=data["work_authorization_status"],
            hometown=data["hometown"],
            hometown_latitude=data["hometown_latitude"],
            hometown_longitude=data["hometown_longitude"],
            education=data["education"],
            coding_languages=data["coding_languages"],
            preferred_roles=data["preferred_roles"],
            employment_search_status=data["employment_search_status"],
            preferred_company_1=data["preferred_company_1"],
            preferred_company_2=data["preferred_company_2"],
            preferred_company_3=data["preferred_company_3"],
            resume=data["resume"],
        )
    except SubmissionClosedError as exc:
        messages.error(request, str(exc))
        return _render_resume_book(request, member, resume_book, submission, None, status=403)
    except ResumeBookError as exc:
        result.form.add_error(None, str(exc))
        return _render_resume_book(
            request, member, resume_book, submission, result.form, status=400
        )

    messages.success(request, "Resume submitted!")
    return redirect("resume_book", resume_book_id=resume_book.id)


def _render_resume_book(request, member, resume_book, submission, form, status=200):
    tz = get_timezone(request)
    book_status = resume_book.status()
    start_date = _format_datetime(resume_book.start_date, tz)
    end_date = _format_datetime(resume_book.end_date, tz)
    editing = request.method == "POST" or request.GET.get("state") == "editing"
    show_edit_button = submission is not None and not editing

    if book_status is WindowStatus.UPCOMING:
        notice = f"This resume book opens on {start_date}."
    elif book_status is WindowStatus.PAST:
        notice = f"This resume book closed on {end_date}."
    else:
        notice = None

    selection = RankedSelection.from_submission(submission)
    if form is not None and form.is_bound:
        selection = RankedSelection(
            {rank: form.data.get(f"preferred_company_{rank}") for rank in RANKS}
        )

    context = {
        "user": member,
        "resume_book": resume_book,
        "status": book_status.value,
        "start_date": start_date,
        "end_date": end_date,
        "notice": notice,
        "submission": submission,
        "show_edit_button": show_edit_button,
        "show_form": book_status is WindowStatus.ACTIVE and not show_edit_button and form is not None,
        "form": form,
        "sponsors": list_resume_book_sponsors(resume_book),
        "selection": selection.as_dict(),
        "ranks": RANKS,
        "choose_company_url": reverse("choose_company", args=[resume_book.id]),
    }
    return render(request, "resumebooks/resume_book.html", context, status=status)


@member_required
def choose_company(request, member: User, resume_book_id: int):
    """Apply one company pick to the current selection and return it as JSON.

    Expects ``rank`` and ``value`` plus the current selection as
    ``preferred_company_1`` .. ``preferred_company_3`` query parameters.
    Values that are not sponsors of the book are dropped.
    """
    resume_book = get_object_or_404(ResumeBook, id=resume_book_id)
    sponsor_ids = {str(pk) for pk in resume_book.sponsors.values_list("id", flat=True)}

    try:
        rank = int(request.GET.get("rank", ""))
    except ValueError:
        return JsonResponse({"error": "Invalid rank."}, status=400)
    if rank not in RANKS:
        return JsonResponse({"error": "Invalid rank."}, status=400)

    value = request.GET.get("value", "").strip()
    if value and value not in sponsor_ids:
        return JsonResponse({"error": "Unknown company."}, status=400)

    current = {}
    for current_rank in RANKS:
        current_value = request.GET.get(f"preferred_company_{current_rank}", "").strip()
        current[current_rank] = current_value if current_value in sponsor_ids else ""

    selection = choose(RankedSelection(current), rank, value)
    return JsonResponse(selection.as_dict())
