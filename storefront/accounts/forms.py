# accounts/forms.py

from django import forms

MIN_PASSWORD_LENGTH = 8


class LoginForm(forms.Form):
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={"placeholder": "Email", "autofocus": True})
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={"placeholder": "Password"})
    )


class RegisterForm(forms.Form):
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={"placeholder": "Email", "autofocus": True})
    )
    password = forms.CharField(
        widget=forms.PasswordInput(
            attrs={
                "placeholder": f"Password (min. {MIN_PASSWORD_LENGTH} characters)",
                "minlength": MIN_PASSWORD_LENGTH,
            }
        )
    )
    password_confirm = forms.CharField(
        widget=forms.PasswordInput(attrs={"placeholder": "Confirm Password"})
    )

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get("password")
        confirm = cleaned.get("password_confirm")

        if password is None or confirm is None:
            return cleaned

        # mismatch is reported before length
        if password != confirm:
            raise forms.ValidationError("Passwords do not match.")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise forms.ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )

        return cleaned
