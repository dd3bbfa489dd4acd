"""
URL patterns for the users app.

Covers the session login and the admin dashboard pages for managing
members.  Included at the root of the project URL configuration.
"""

from django.urls import path

from . import views


urlpatterns = [
    path("login/", views.LoginView.as_view(), name="login"),
    path("logout/", views.LogoutView.as_view(), name="logout"),
    path("admin-dashboard/students/", views.student_list, name="students"),
    path(
        "admin-dashboard/students/<int:student_id>/email/",
        views.update_student_email,
        name="update_student_email",
    ),
]
