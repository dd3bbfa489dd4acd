"""
Views for logging in and for the admin dashboard.

Login and logout keep to the session-based scheme described in
``users.session``.  The admin dashboard pages receive the logged-in admin
as an explicit argument through ``admin_required`` and delegate the
actual changes to ``users.services``.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.auth.hashers import check_password
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.generic import FormView, View

from MemberHub.forms import FORM_ERROR_KEY, validate_form
from .forms import LoginForm, UpdateMemberEmailForm
from .models import User
from .services import MemberEmailError, update_member_email
from .session import admin_required, login_user

logger = logging.getLogger(__name__)


class LoginView(FormView):
    """Handle user login via a form.

    If the submitted credentials are valid, the user's ID and role are
    stored in the session.  Otherwise, an error message is displayed and
    the form is re-rendered.
    """

    template_name = "users/login.html"
    form_class = LoginForm

    def get_success_url(self) -> str:
        next_url = self.request.GET.get("next")
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        if self.request.session.get("role") == "admin":
            return str(reverse_lazy("students"))
        return str(reverse_lazy("resume_books"))

    def form_valid(self, form: LoginForm):
        username = form.cleaned_data["username"]
        password = form.cleaned_data["password"]
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            messages.error(self.request, "User not found.")
            return self.form_invalid(form)
        if not check_password(password, user.password):
            messages.error(self.request, "Incorrect password.")
            return self.form_invalid(form)
        login_user(self.request, user)
        logger.info("User %s logged in", user.id)
        return super().form_valid(form)


class LogoutView(View):
    """Log the user out and redirect to the login page."""

    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return self.post(request, *args, **kwargs)

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        if "user_id" in request.session:
            request.session.flush()
        else:
            messages.warning(request, "Nobody is logged in.")
        return redirect("login")


@admin_required
def student_list(request, admin: User):
    """List members so an admin can pick one to edit."""
    students = User.objects.filter(role="member").order_by("last_name", "first_name")
    return render(request, "users/students.html", {"students": students, "user": admin})


@admin_required
def update_student_email(request, admin: User, student_id: int):
    """Change the primary email of a member.

    GET shows the confirmation modal with the email form.  POST validates
    the address and hands it to ``update_member_email``; on success the
    admin is sent back to the students list with a confirmation message.
    """
    student = get_object_or_404(User, id=student_id, role="member")
    context = {"student": student, "user": admin, "error": None}

    if request.method != "POST":
        context["form"] = UpdateMemberEmailForm()
        return render(request, "users/update_email.html", context)

    result = validate_form(UpdateMemberEmailForm, request.POST)
    context["form"] = result.form
    if not result.ok:
        context["error"] = "Please fix the errors above."
        return render(request, "users/update_email.html", context)

    try:
        update_member_email(student.id, result.data["email"])
    except MemberEmailError as exc:
        result.form.add_error(None, str(exc))
        context["error"] = result.form.errors[FORM_ERROR_KEY][0]
        return render(request, "users/update_email.html", context)

    messages.success(request, "Updated member email.")
    return redirect("students")
