"""Users application package for MemberHub.

This package contains the member and admin accounts, their emails and
education history, the session login, and the admin dashboard pages used
to manage members (for example changing a member's email).
"""
