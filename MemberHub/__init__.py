"""Project package for MemberHub.

Holds the Django settings, the root URL configuration, the WSGI entry
point and the small form helpers shared by the ``users`` and
``resumebooks`` apps.
"""
