"""
Forms for student registration.
"""

from django import forms

from student_registration.flow import COURSES, GRADES


class StudentRegistrationForm(forms.Form):
    """
    Binds the registration page's inputs.

    Every field is optional at form level and the selects accept any string:
    validation happens on submit in RegistrationFlow, so the page and the
    flow can never disagree about what is valid.
    """

    student_name = forms.CharField(
        label="Student Name",
        required=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "placeholder": "e.g., Alex Rivera"}
        ),
    )
    parent_name = forms.CharField(
        label="Parent Name",
        required=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "placeholder": "e.g., Jane Rivera"}
        ),
    )
    email = forms.CharField(
        label="Email",
        required=False,
        widget=forms.EmailInput(
            attrs={"class": "form-control", "placeholder": "you@example.com"}
        ),
    )
    phone = forms.CharField(
        label="Phone",
        required=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "type": "tel", "placeholder": "(555) 123-4567"}
        ),
    )
    course = forms.CharField(
        label="Course",
        required=False,
        widget=forms.Select(
            attrs={"class": "form-select"},
            choices=[("", "Select instrument")] + [(c, c) for c in COURSES],
        ),
    )
    grade = forms.CharField(
        label="Grade",
        required=False,
        widget=forms.Select(
            attrs={"class": "form-select"},
            choices=[("", "Select grade")] + [(g, g) for g in GRADES],
        ),
    )
    experience_years = forms.CharField(
        label="Years of experience",
        required=False,
        widget=forms.TextInput(
            attrs={"class": "form-control", "inputmode": "decimal", "placeholder": "Optional"}
        ),
    )

    # Marked with an asterisk in the template
    required_fields = ("student_name", "email", "course")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in self.required_fields:
            self.fields[name].widget.attrs["required"] = "required"

    def registration_data(self):
        """Submitted values keyed by flow field name (empty strings when absent)."""
        if not self.is_bound:
            return {}
        self.is_valid()
        return {name: self.cleaned_data.get(name, "") for name in self.fields}
