import json
import logging

import requests

from core.exceptions import FetchError, SubmissionError
from integrations.config import ApiConfig, normalize_api_base

logger = logging.getLogger(__name__)

STUDENTS_PATH = "/api/students"
NETWORK_ERROR_MESSAGE = "Could not reach the registration server."


def is_success(response):
    return 200 <= response.status_code < 300


def extract_error_message(response):
    """
    Pull a human-readable message out of a failed response.

    JSON bodies yield their ``message`` or ``error`` field (or the whole body
    re-serialized); anything else yields the raw text. May return "".
    """
    content_type = response.headers.get("Content-Type") or ""
    if "application/json" in content_type:
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
            if message:
                return str(message)
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return response.text


def normalize_student_list(payload):
    """
    Accept a bare list or ``{"students": [...]}``; any other shape becomes [].
    """
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict) and isinstance(payload.get("students"), list):
        items = payload["students"]
    else:
        logger.warning(
            "Unrecognized students payload of type %s; treating as empty",
            type(payload).__name__,
        )
        return []

    records = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object student entry: %r", item)
            continue
        records.append(item)
    return records


class StudentsApiClient:
    """Tiny helper for the students REST API (POST and list)."""

    def __init__(self, config=None, session=None, origin=""):
        self.cfg = config or ApiConfig.from_settings()
        # Module-level requests calls unless a session is injected
        self.session = session or requests
        # Used only when api_base is empty (backend served from the site's origin)
        self.origin = normalize_api_base(origin)

    @classmethod
    def for_request(cls, request, **kwargs):
        """Client whose same-origin fallback is the origin of ``request``."""
        kwargs.setdefault("origin", request.build_absolute_uri("/"))
        return cls(**kwargs)

    @property
    def students_url(self):
        base = self.cfg.api_base or self.origin
        return f"{base}{STUDENTS_PATH}"

    def _request(self, method, **kwargs):
        return self.session.request(
            method,
            self.students_url,
            timeout=self.cfg.timeout_seconds,
            verify=self.cfg.verify_ssl,
            **kwargs,
        )

    def create_student(self, payload):
        """
        POST one registration. Raises SubmissionError on any failure.
        """
        logger.info("Submitting registration to %s", self.students_url)
        try:
            r = self._request(
                "POST",
                json=payload,
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as exc:
            logger.error(
                "Registration request to %s failed", self.students_url, exc_info=True
            )
            raise SubmissionError(NETWORK_ERROR_MESSAGE) from exc

        if not is_success(r):
            message = extract_error_message(r)
            logger.error(
                "Students API error: status=%s reason=%s error=%s",
                r.status_code,
                r.reason,
                message,
            )
            raise SubmissionError(
                message or f"Server error: {r.status_code}", status=r.status_code
            )
        return r

    def list_students(self):
        """
        GET the registered students as a list of dicts. Raises FetchError.
        """
        try:
            r = self._request("GET", headers={"Accept": "application/json"})
        except requests.RequestException as exc:
            logger.error(
                "Student list request to %s failed", self.students_url, exc_info=True
            )
            raise FetchError(NETWORK_ERROR_MESSAGE) from exc

        if not is_success(r):
            logger.error(
                "Students API error: status=%s reason=%s", r.status_code, r.reason
            )
            raise FetchError(r.text or None, status=r.status_code)

        try:
            payload = r.json()
        except ValueError as exc:
            logger.error("Student list from %s is not valid JSON", self.students_url)
            raise FetchError("The server returned an unreadable student list.") from exc
        return normalize_student_list(payload)
