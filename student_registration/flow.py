"""
Registration submission flow.

Holds the form snapshot, validates it synchronously, maps it onto the
backend's request schema and turns the backend's answer into an outcome for
the feedback banner:

    Idle -> Validating -> Submitting -> Success
                |              |
                +-> Error <----+

Nothing touches the network until validation has passed.
"""
import logging
import re
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum

from core.exceptions import (
    InvalidChoiceField,
    InvalidEmailFormat,
    InvalidNumericField,
    MissingRequiredField,
    SubmissionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

COURSES = ("Children Piano", "Adult Piano", "Others")
GRADES = tuple(str(n) for n in range(1, 13))

REQUIRED_FIELDS = ("student_name", "email", "course")
NUMERIC_FIELDS = ("experience_years",)
CHOICE_FIELDS = {"course": COURSES, "grade": GRADES}

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Decimal with optional exponent, 0x/0o/0b integers, or Infinity; no digit separators
NUMBER_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+"
    r"|[+-]?Infinity",
    re.ASCII,
)

SUCCESS_MESSAGE = "Registration successful! We will contact you soon."


@dataclass(frozen=True)
class RegistrationForm:
    student_name: str = ""
    parent_name: str = ""
    email: str = ""
    phone: str = ""
    course: str = ""
    grade: str = ""
    # Validated locally; the backend schema has no slot for it
    experience_years: str = ""


FIELD_NAMES = tuple(f.name for f in fields(RegistrationForm))


class OutcomeKind(str, Enum):
    NONE = "none"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmissionOutcome:
    kind: OutcomeKind = OutcomeKind.NONE
    message: str = ""

    @classmethod
    def none(cls):
        return cls()

    @classmethod
    def success(cls, message=SUCCESS_MESSAGE):
        return cls(OutcomeKind.SUCCESS, message)

    @classmethod
    def error(cls, message):
        return cls(OutcomeKind.ERROR, message)

    @property
    def is_success(self):
        return self.kind is OutcomeKind.SUCCESS

    @property
    def is_error(self):
        return self.kind is OutcomeKind.ERROR


class FlowState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


def _is_number(value):
    return NUMBER_RE.fullmatch(value.strip()) is not None


def validate(form):
    """
    Check a form snapshot. Returns None or raises a ValidationError subclass.

    Pure: no I/O, no mutation. The first failing rule wins, in this order:
    required fields, email shape, numeric fields, fixed option sets.
    """
    missing = [name for name in REQUIRED_FIELDS if not getattr(form, name)]
    if missing:
        raise MissingRequiredField(missing)

    if not EMAIL_RE.fullmatch(form.email):
        raise InvalidEmailFormat()

    for name in NUMERIC_FIELDS:
        value = getattr(form, name)
        if value and value.strip() and not _is_number(value):
            raise InvalidNumericField(name)

    for name, options in CHOICE_FIELDS.items():
        value = getattr(form, name)
        if value and value not in options:
            raise InvalidChoiceField(name)


def experience_level(form):
    return f"Grade {form.grade}" if form.grade else "Beginner"


def build_payload(form):
    """Map the form onto the backend's request body."""
    return {
        "full_name": form.student_name,
        "email": form.email,
        "phone": form.phone,
        "instrument": form.course,
        "experience_level": experience_level(form),
    }


class RegistrationFlow:
    """
    One form instance and its submission state.

    Callers must not call submit() again while ``submitting`` is True; the
    page disables its submit button as soon as the form is posted.
    """

    def __init__(self, client, form=None):
        self.client = client
        self.form = form or RegistrationForm()
        self.outcome = SubmissionOutcome.none()
        self.state = FlowState.IDLE
        self.submitting = False

    def _settle(self):
        if self.state in (FlowState.SUCCESS, FlowState.ERROR):
            self.state = FlowState.IDLE

    def update_field(self, name, value):
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown registration field: {name}")
        self._settle()
        self.form = replace(self.form, **{name: value})

    def update_fields(self, data):
        for name in FIELD_NAMES:
            if name in data:
                self.update_field(name, data[name])

    def as_dict(self):
        return asdict(self.form)

    def dismiss(self):
        """Clear the feedback banner and return to Idle."""
        self.outcome = SubmissionOutcome.none()
        self._settle()

    @contextmanager
    def _in_flight(self):
        self.submitting = True
        self.state = FlowState.SUBMITTING
        try:
            yield
        finally:
            self.submitting = False

    def _finish(self, outcome):
        self.outcome = outcome
        self.state = FlowState.SUCCESS if outcome.is_success else FlowState.ERROR
        return outcome

    def submit(self):
        self._settle()
        self.outcome = SubmissionOutcome.none()

        self.state = FlowState.VALIDATING
        form = self.form
        try:
            validate(form)
        except ValidationError as exc:
            logger.info("Registration rejected by validation: %s", exc.message)
            return self._finish(SubmissionOutcome.error(exc.message))

        with self._in_flight():
            try:
                self.client.create_student(build_payload(form))
            except SubmissionError as exc:
                return self._finish(SubmissionOutcome.error(exc.message))

        self.form = RegistrationForm()
        return self._finish(SubmissionOutcome.success())
