import pytest
from django.contrib.messages import constants
from django.contrib.messages.storage.base import Message
from django.http import HttpResponse

from core.context_processors import admin_mode
from core.decorators import with_admin_mode
from core.exceptions import MissingRequiredField, RegistrationError, SubmissionError
from core.templatetags.form_extras import alert_kind


@pytest.mark.parametrize(
    "query, expected",
    [("", False), ("?admin=1", True), ("?admin=0", False), ("?admin=true", False)],
)
def test_with_admin_mode_reads_query_param(rf, query, expected):
    seen = {}

    @with_admin_mode
    def view(request):
        seen["admin_mode"] = request.admin_mode
        return HttpResponse("ok")

    view(rf.get(f"/{query}"))

    assert seen["admin_mode"] is expected


def test_context_processor_prefers_decorated_flag(rf):
    request = rf.get("/")
    request.admin_mode = True

    assert admin_mode(request) == {"admin_mode": True}


def test_context_processor_falls_back_to_query(rf):
    assert admin_mode(rf.get("/?admin=1")) == {"admin_mode": True}
    assert admin_mode(rf.get("/")) == {"admin_mode": False}


@pytest.mark.parametrize(
    "level, expected",
    [
        (constants.ERROR, "error"),
        (constants.SUCCESS, "success"),
        (constants.INFO, "success"),
    ],
)
def test_alert_kind(level, expected):
    assert alert_kind(Message(level, "hello")) == expected


def test_exceptions_carry_default_messages():
    assert MissingRequiredField(["email"]).message == "Please fill in all required fields."
    assert str(SubmissionError()) == "Registration failed"
    assert SubmissionError("nope", status=400).status == 400
    assert isinstance(MissingRequiredField(), RegistrationError)
