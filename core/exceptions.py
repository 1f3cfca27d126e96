"""
Exceptions shared by the registration flow and the students API client.

Validation errors never leave the browser-facing flow; submission and fetch
errors come from the HTTP layer. Every one of them carries a message that is
safe to show to the person filling in the form.
"""


class RegistrationError(Exception):
    """Base exception for all registration errors."""

    default_message = "An error occurred"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RegistrationError):
    """The form failed client-side validation; nothing was sent."""

    default_message = "Validation failed"


class MissingRequiredField(ValidationError):
    default_message = "Please fill in all required fields."

    def __init__(self, fields=(), message=None):
        self.fields = tuple(fields)
        super().__init__(message)


class InvalidEmailFormat(ValidationError):
    default_message = "Please provide a valid email address."


class InvalidNumericField(ValidationError):
    default_message = "Experience must be a number of years."

    def __init__(self, field=None, message=None):
        self.field = field
        super().__init__(message)


class InvalidChoiceField(ValidationError):
    default_message = "Please choose one of the listed options."

    def __init__(self, field=None, message=None):
        self.field = field
        super().__init__(message)


class SubmissionError(RegistrationError):
    """The backend rejected the registration, or could not be reached."""

    default_message = "Registration failed"

    def __init__(self, message=None, status=None):
        self.status = status
        super().__init__(message)


class FetchError(RegistrationError):
    """The registered students list could not be retrieved."""

    default_message = "Failed to fetch students"

    def __init__(self, message=None, status=None):
        self.status = status
        super().__init__(message)
