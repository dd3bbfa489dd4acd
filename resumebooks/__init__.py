"""Resume books application package for MemberHub.

Members submit their resume, profile answers and three ranked sponsor
companies to a resume book while its submission window is open.  The
window logic lives in ``status`` and the ranked company picks in
``selection``; both are plain Python with no Django dependency.
"""
