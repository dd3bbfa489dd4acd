"""
URL configuration for the MemberHub project.

This module maps URL paths to application URL configurations.  It delegates
to the individual apps (``users`` for login and the admin dashboard,
``resumebooks`` for the member-facing resume book pages) and serves
uploaded media in development.
"""

from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path("", include("users.urls")),
    path("resume-books/", include("resumebooks.urls")),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
