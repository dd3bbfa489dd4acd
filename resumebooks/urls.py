"""
URL patterns for the resumebooks app.

Included in the project's root URL configuration under the
``resume-books/`` prefix.
"""

from django.urls import path

from . import views


urlpatterns = [
    path("", views.resume_book_list, name="resume_books"),
    path("<int:resume_book_id>/", views.resume_book_view, name="resume_book"),
    path(
        "<int:resume_book_id>/companies/choose/",
        views.choose_company,
        name="choose_company",
    ),
]
