import json

import requests

from integrations.config import ApiConfig
from integrations.students_client import StudentsApiClient

BACKEND = "http://backend.test"


def make_response(status, body=None, content_type=None):
    """A real requests.Response carrying ``body`` (dict/list -> JSON, str -> text)."""
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if 200 <= status < 300 else "Error"
    response.encoding = "utf-8"

    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
        content_type = content_type or "application/json; charset=utf-8"
    else:
        response._content = (body or "").encode("utf-8")
        content_type = content_type or "text/plain"

    response.headers["Content-Type"] = content_type
    return response


class DummySession:
    """Stands in for requests.Session: records calls, replays queued responses."""

    def __init__(self, responses=None, error=None, on_request=None):
        self.responses = list(responses or [])
        self.error = error
        self.on_request = on_request
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.on_request:
            self.on_request(method, url, kwargs)
        if self.error:
            raise self.error
        return self.responses.pop(0)


def make_client(session, api_base=BACKEND, origin=""):
    config = ApiConfig(api_base=api_base, timeout_seconds=5, verify_ssl=True)
    return StudentsApiClient(config=config, session=session, origin=origin)
