"""
Shared pytest fixtures for the MemberHub test suite.

Django is configured by pytest-django from ``[tool.pytest.ini_options]``
in ``pyproject.toml``.  Uploaded files go to a per-test temporary media
root so tests never write into the repository.
"""

from datetime import date, timedelta
from io import BytesIO

import pytest
from django.contrib.auth.hashers import make_password
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resumebooks.models import Company, ResumeBook
from users.models import Education, School, User

PASSWORD = "correct-horse-battery"


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return settings.MEDIA_ROOT


def _login(client, user):
    session = client.session
    session["user_id"] = user.id
    session["role"] = user.role
    session.save()
    return client


@pytest.fixture
def member(db):
    return User.objects.create(
        username="ada",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        password=make_password(PASSWORD),
        role="member",
        hometown="London, UK",
        linkedin_url="https://www.linkedin.com/in/ada",
        race=["BLACK"],
        work_authorization_status="authorized",
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create(
        username="grace",
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.com",
        password=make_password(PASSWORD),
        role="admin",
    )


@pytest.fixture
def member_client(client, member):
    return _login(client, member)


@pytest.fixture
def admin_client(client, admin_user):
    return _login(client, admin_user)


@pytest.fixture
def education(member):
    school = School.objects.create(name="Howard University")
    return Education.objects.create(
        member=member,
        school=school,
        degree_type="bachelors",
        start_date=date(2021, 8, 1),
        end_date=date(2025, 5, 1),
    )


@pytest.fixture
def sponsors(db):
    return [Company.objects.create(name=name) for name in ("Google", "Meta", "Stripe", "Figma")]


def make_resume_book(sponsors, start, end, name="Fall 2026"):
    book = ResumeBook.objects.create(name=name, start_date=start, end_date=end)
    book.sponsors.set(sponsors)
    return book


@pytest.fixture
def resume_book_factory(sponsors):
    def factory(start, end, name="Fall 2026"):
        return make_resume_book(sponsors, start, end, name)

    return factory


@pytest.fixture
def resume_book(sponsors):
    now = timezone.now()
    return make_resume_book(sponsors, now - timedelta(days=1), now + timedelta(days=7))


@pytest.fixture
def upcoming_resume_book(sponsors):
    now = timezone.now()
    return make_resume_book(sponsors, now + timedelta(days=3), now + timedelta(days=10), "Spring")


@pytest.fixture
def past_resume_book(sponsors):
    now = timezone.now()
    return make_resume_book(sponsors, now - timedelta(days=10), now - timedelta(days=3), "Summer")


def make_pdf_bytes(text="Ada Lovelace - Resume"):
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    pdf.drawString(72, 720, text)
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def pdf_bytes():
    return make_pdf_bytes()


@pytest.fixture
def malformed_pdf_bytes():
    """Starts like a PDF but its trailer points at an object that does not exist."""
    return (
        b"%PDF-1.4\nxref\n0 1\n0000000000 65535 f \ntrailer\n"
        b"<< /Root 1 0 R /Size 1 >>\nstartxref\n9\n%%EOF"
    )


@pytest.fixture
def pdf_resume(pdf_bytes):
    return SimpleUploadedFile("resume.pdf", pdf_bytes, content_type="application/pdf")


@pytest.fixture
def submission_data(member, education, sponsors):
    """Valid POST data for the resume book form (without the file)."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "race": ["BLACK", "OTHER"],
        "linkedin_url": "https://www.linkedin.com/in/ada-lovelace",
        "work_authorization_status": "authorized",
        "hometown": "London, UK",
        "hometown_latitude": "51.5072",
        "hometown_longitude": "-0.1276",
        "education": str(education.id),
        "coding_languages": ["Python", "SQL"],
        "preferred_roles": ["Software Engineer"],
        "employment_search_status": "I am actively searching for a position.",
        "preferred_company_1": str(sponsors[0].id),
        "preferred_company_2": str(sponsors[1].id),
        "preferred_company_3": str(sponsors[2].id),
    }
