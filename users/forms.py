from django import forms


class LoginForm(forms.Form):
    """Simple login form capturing username and password."""

    username = forms.CharField()
    password = forms.CharField(widget=forms.PasswordInput)


class UpdateMemberEmailForm(forms.Form):
    """Admin form for replacing a member's primary email."""

    email = forms.EmailField(label="Email", max_length=254)

    def clean_email(self) -> str:
        return self.cleaned_data["email"].strip().lower()
