"""
Session helpers for MemberHub views.

The rest of the project never reads ``request.session`` directly.  Views
are wrapped with ``member_required`` or ``admin_required``, which resolve
the logged-in ``User`` from the session and pass it to the view as an
explicit argument::

    @member_required
    def resume_book_view(request, member, resume_book_id):
        ...

Requests without a valid session are redirected to the login page.  A
logged-in user reaching a page meant for the other role gets a 403.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect

from .models import User

logger = logging.getLogger(__name__)

TIMEZONE_COOKIE = "timezone"


def login_user(request, user: User) -> None:
    """Store ``user`` in the session, rotating the session key."""
    request.session.cycle_key()
    request.session["user_id"] = user.id
    request.session["role"] = user.role


def get_session_user(request) -> Optional[User]:
    """Return the user stored in the session, or ``None``.

    A session pointing at a deleted user is flushed.
    """
    user_id = request.session.get("user_id")
    if user_id is None:
        return None
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        logger.warning("Session references missing user %s, flushing", user_id)
        request.session.flush()
        return None


def member_required(view):
    """Pass the logged-in member to ``view`` or redirect to the login page.

    Admins get a 403: member pages act on the viewer's own profile.
    """

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        user = get_session_user(request)
        if user is None:
            return redirect(settings.LOGIN_URL)
        if user.is_admin:
            raise PermissionDenied("Only members can access this page.")
        return view(request, user, *args, **kwargs)

    return wrapper


def admin_required(view):
    """Pass the logged-in admin to ``view``; members get a 403."""

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        user = get_session_user(request)
        if user is None:
            return redirect(settings.LOGIN_URL)
        if not user.is_admin:
            raise PermissionDenied("Only admins can access this page.")
        return view(request, user, *args, **kwargs)

    return wrapper


def get_timezone(request) -> ZoneInfo:
    """Time zone of the viewer, from the ``timezone`` cookie.

    Falls back to ``settings.TIME_ZONE`` when the cookie is missing or
    names an unknown zone.
    """
    name = request.COOKIES.get(TIMEZONE_COOKIE)
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug("Ignoring unknown timezone cookie %r", name)
    return ZoneInfo(settings.TIME_ZONE)
