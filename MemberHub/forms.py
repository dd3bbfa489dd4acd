"""
Form validation helpers shared by the MemberHub apps.

Views never poke at a bound form to decide what to do next.  They call
``validate_form`` and branch on the returned ``FormResult``: either the
form was valid and ``data`` holds the cleaned values, or it was not and
``errors`` maps each failing field to its first error message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from django import forms

# Key under which errors that do not belong to a single field are reported.
FORM_ERROR_KEY = "__all__"


@dataclass
class FormResult:
    """Outcome of validating submitted data against a form class."""

    ok: bool
    form: forms.BaseForm
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def error(self) -> Optional[str]:
        """The form-wide error message, if any."""
        return self.errors.get(FORM_ERROR_KEY)


def validate_form(
    form_class: Type[forms.BaseForm],
    data,
    files=None,
    **kwargs: Any,
) -> FormResult:
    """Bind ``data`` (and ``files``) to ``form_class`` and validate it.

    Extra keyword arguments are passed to the form constructor, which lets
    forms receive the objects they validate against (the current member,
    the resume book being submitted to, ...).
    """
    form = form_class(data, files, **kwargs)
    if form.is_valid():
        return FormResult(ok=True, form=form, data=dict(form.cleaned_data))
    errors = {name: str(messages[0]) for name, messages in form.errors.items() if messages}
    return FormResult(ok=False, form=form, errors=errors)
